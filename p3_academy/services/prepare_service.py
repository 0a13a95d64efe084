import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from p3_academy.models.prepare import AiPrepareQuestion, AiPrepareResponse, AiPrepareSession
from p3_academy.schemas.prepare import PrepareResponseCreate, PrepareSessionCreate
from p3_academy.services.evaluation_service import EvaluationRequest, evaluation_service, round_half_up
from p3_academy.services.question_generator import QuestionRequest, question_generator

logger = logging.getLogger(__name__)

TARGET_QUESTIONS = 20


class PrepareAIService:
    """AI-generated question practice with per-answer STAR feedback."""

    def create_session(self, db: Session, user_id: int, session_in: PrepareSessionCreate) -> AiPrepareSession:
        session = AiPrepareSession(user_id=user_id, **session_in.model_dump())
        db.add(session)
        db.commit()
        db.refresh(session)
        logger.info(f"Prepare session created: {session.id}")
        return session

    def get_session(self, db: Session, session_id: int, user_id: int) -> AiPrepareSession:
        session = db.query(AiPrepareSession).filter(AiPrepareSession.id == session_id).first()
        if not session:
            raise HTTPException(status_code=404, detail="Session not found")
        if session.user_id != user_id:
            raise HTTPException(status_code=403, detail="Not authorized to access this session")
        return session

    def get_user_sessions(self, db: Session, user_id: int, limit: int = 10, offset: int = 0) -> List[AiPrepareSession]:
        return (
            db.query(AiPrepareSession)
            .filter(AiPrepareSession.user_id == user_id)
            .order_by(AiPrepareSession.created_at.desc(), AiPrepareSession.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    async def generate_next_question(
        self,
        db: Session,
        session_id: int,
        user_id: int,
        adaptive_difficulty: bool = True,
    ) -> AiPrepareQuestion:
        session = self.get_session(db, session_id, user_id)
        question_number = len(session.questions) + 1

        generated = await question_generator.generate_question(QuestionRequest(
            job_position=session.job_position,
            question_number=question_number,
            company_name=session.company_name,
            interview_stage=session.interview_stage,
            experience_level=session.experience_level,
            preferred_language=session.preferred_language,
            difficulty_level=session.difficulty_level,
            focus_areas=list(session.focus_areas or []),
            question_categories=list(session.question_categories or []),
            previous_responses=[{"star_scores": r.star_scores} for r in session.responses],
            adaptive_difficulty=adaptive_difficulty,
        ))

        question = AiPrepareQuestion(session_id=session.id, question_number=question_number, **generated)
        db.add(question)
        db.commit()
        db.refresh(question)
        logger.info(f"Question {question_number} generated for prepare session {session.id} by {question.generated_by}")
        return question

    async def process_response(
        self,
        db: Session,
        session_id: int,
        user_id: int,
        response_in: PrepareResponseCreate,
    ) -> AiPrepareResponse:
        session = self.get_session(db, session_id, user_id)
        question = next((q for q in session.questions if q.id == response_in.question_id), None)
        if not question:
            raise HTTPException(status_code=404, detail="Question not found")

        language = response_in.response_language or session.preferred_language
        started = time.monotonic()
        evaluation = await evaluation_service.evaluate_response(EvaluationRequest(
            question_text=question.question_text,
            response_text=response_in.response_text,
            job_position=session.job_position,
            question_category=question.question_category,
            question_type=question.question_type,
            response_language=language,
            experience_level=session.experience_level,
            star_method_relevant=question.star_method_relevant,
        ))
        elapsed = int(time.monotonic() - started)

        response = AiPrepareResponse(
            session_id=session.id,
            question_id=question.id,
            response_text=response_in.response_text,
            response_language=language,
            input_method=response_in.input_method,
            audio_duration=response_in.audio_duration,
            transcription_confidence=response_in.transcription_confidence,
            star_scores=evaluation["star_scores"],
            detailed_feedback=evaluation["detailed_feedback"],
            model_answer=evaluation["model_answer"],
            relevance_score=evaluation["rubric_scores"]["relevance"],
            communication_score=evaluation["rubric_scores"]["communication"],
            completeness_score=evaluation["completeness_score"],
            time_taken=response_in.time_taken if response_in.time_taken is not None else elapsed,
            word_count=len(response_in.response_text.split()),
            evaluated_by=evaluation["evaluated_by"],
        )
        db.add(response)
        db.flush()
        db.refresh(session)
        self._update_progress(session)
        db.commit()
        db.refresh(response)
        return response

    def _update_progress(self, session: AiPrepareSession) -> None:
        responses = session.responses
        if not responses:
            return

        overall_scores = [(r.star_scores or {}).get("overall") or 0 for r in responses]
        percentage = min(len(responses) / TARGET_QUESTIONS * 100, 100)
        session.questions_answered = len(responses)
        session.total_time_spent = sum(r.time_taken or 0 for r in responses)
        session.average_star_score = round_half_up(sum(overall_scores) / len(overall_scores))
        session.session_progress = {"percentage": round_half_up(percentage)}

    def get_session_progress(self, db: Session, session_id: int, user_id: int) -> Dict[str, Any]:
        session = self.get_session(db, session_id, user_id)
        responses = session.responses
        overall_scores = [(r.star_scores or {}).get("overall") or 0 for r in responses]
        average = sum(overall_scores) / len(overall_scores) if overall_scores else 0

        return {
            "session_id": session.id,
            "total_questions": len(session.questions),
            "questions_answered": len(responses),
            "average_star_score": round_half_up(average),
            "completion_percentage": round_half_up(min(len(responses) / TARGET_QUESTIONS * 100, 100)),
            "current_question_number": min(len(session.questions) + 1, TARGET_QUESTIONS),
            "time_spent": sum(r.time_taken or 0 for r in responses),
        }

    def update_session_status(self, db: Session, session_id: int, user_id: int, status: str) -> AiPrepareSession:
        session = self.get_session(db, session_id, user_id)
        session.status = status
        if status == "completed":
            session.completed_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(session)
        logger.info(f"Prepare session {session.id} status -> {status}")
        return session

    def delete_session(self, db: Session, session_id: int, user_id: int) -> None:
        session = self.get_session(db, session_id, user_id)
        db.delete(session)
        db.commit()
        logger.info(f"Prepare session deleted: {session_id}")


prepare_service = PrepareAIService()
