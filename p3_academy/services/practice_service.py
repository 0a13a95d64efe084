import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException
from sqlalchemy.orm import Session

from p3_academy.models.evaluation import PracticeReport
from p3_academy.models.interview_session import InterviewMessage, InterviewSession
from p3_academy.models.scenario import InterviewScenario
from p3_academy.models.user import User
from p3_academy.schemas.scenario import ScenarioCreate, ScenarioUpdate
from p3_academy.schemas.session import InterviewSessionCreate, InterviewSessionUpdate
from p3_academy.services import sealion_service
from p3_academy.services.evaluation_service import evaluation_service, round_half_up
from p3_academy.services.perform_service import question_answer_pairs
from p3_academy.services.sealion_service import InterviewContext
from p3_academy.services.session_management import as_utc, utcnow

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    "setup": {"in_progress", "paused", "completed"},
    "in_progress": {"paused", "completed"},
    "paused": {"in_progress", "completed"},
    "completed": set(),
}

QUICK_FEEDBACK = "Thank you for your response. Please continue with the next question."

FALLBACK_QUESTIONS = [
    "Tell me about yourself and what interests you about this role.",
    "Tell me about a time when you demonstrated leadership skills in your professional experience.",
    "Describe a challenging problem you solved and how you approached it.",
    "Tell me about a time when you had to work collaboratively with a team to achieve a goal.",
    "Describe a situation where you had to adapt to significant changes or learn something new quickly.",
    "Tell me about a time when you had to innovate or think creatively to overcome an obstacle.",
    "Describe a situation where you had to manage competing priorities or tight deadlines.",
    "Tell me about a time when you received constructive feedback and how you handled it.",
    "Describe a project you're particularly proud of and your role in its success.",
    "Tell me about a time when you had to communicate complex information to different stakeholders.",
    "Describe a situation where you had to make a difficult decision with limited information.",
    "Tell me about a time when you went above and beyond what was expected of you.",
    "Describe how you stay current with industry trends and continue learning in your field.",
    "Tell me about a time when you had to resolve a conflict or disagreement with a colleague.",
    "Where do you see yourself in the next few years and how does this role fit your career goals?",
]
EXTRA_QUESTION_SKILLS = ["leadership", "problem-solving", "teamwork", "innovation", "adaptability"]

RECOMMENDED_ACTIONS = [
    "Review feedback and focus on improvement areas",
    "Practice more sessions to build confidence",
    "Work on structured STAR method responses",
]


class ScenarioService:
    def list_scenarios(
        self,
        db: Session,
        interview_stage: Optional[str] = None,
        industry: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[InterviewScenario]:
        query = db.query(InterviewScenario)
        if interview_stage:
            query = query.filter(InterviewScenario.interview_stage == interview_stage)
        if industry:
            query = query.filter(InterviewScenario.industry == industry)
        if status:
            query = query.filter(InterviewScenario.status == status)
        return query.order_by(InterviewScenario.id).all()

    def get_scenario(self, db: Session, scenario_id: int) -> InterviewScenario:
        scenario = db.query(InterviewScenario).filter(InterviewScenario.id == scenario_id).first()
        if not scenario:
            raise HTTPException(status_code=404, detail="Scenario not found")
        return scenario

    def create_scenario(self, db: Session, scenario_in: ScenarioCreate, created_by: int) -> InterviewScenario:
        scenario = InterviewScenario(**scenario_in.model_dump(), created_by=created_by)
        db.add(scenario)
        db.commit()
        db.refresh(scenario)
        return scenario

    def update_scenario(self, db: Session, scenario_id: int, scenario_in: ScenarioUpdate) -> InterviewScenario:
        scenario = self.get_scenario(db, scenario_id)
        for field, value in scenario_in.model_dump(exclude_unset=True).items():
            setattr(scenario, field, value)
        db.commit()
        db.refresh(scenario)
        return scenario

    def delete_scenario(self, db: Session, scenario_id: int) -> None:
        scenario = self.get_scenario(db, scenario_id)
        if scenario.sessions:
            raise HTTPException(status_code=400, detail="Scenario has interview sessions and cannot be deleted")
        db.delete(scenario)
        db.commit()


class PracticeService:
    """Scenario-driven mock interviews with an AI interviewer."""

    def create_session(self, db: Session, user: User, session_in: InterviewSessionCreate) -> InterviewSession:
        scenario_service.get_scenario(db, session_in.scenario_id)
        session = InterviewSession(
            user_id=user.id,
            module="practice",
            status="setup",
            **session_in.model_dump(),
        )
        db.add(session)
        db.commit()
        db.refresh(session)
        logger.info(f"Practice session {session.id} created for user {user.id}")
        return session

    def get_session(self, db: Session, session_id: int, user: User, module: str = "practice") -> InterviewSession:
        session = (
            db.query(InterviewSession)
            .filter(InterviewSession.id == session_id, InterviewSession.module == module)
            .first()
        )
        if not session:
            raise HTTPException(status_code=404, detail="Session not found")
        if session.user_id != user.id:
            raise HTTPException(status_code=403, detail="Access denied")
        return session

    def list_sessions(self, db: Session, user: User, status: Optional[str] = None) -> List[InterviewSession]:
        query = db.query(InterviewSession).filter(
            InterviewSession.user_id == user.id,
            InterviewSession.module == "practice",
        )
        if status:
            query = query.filter(InterviewSession.status == status)
        return query.order_by(InterviewSession.id.desc()).all()

    def update_session(
        self,
        db: Session,
        session_id: int,
        user: User,
        session_in: InterviewSessionUpdate,
        auto_save: bool = False,
    ) -> InterviewSession:
        session = self.get_session(db, session_id, user)
        updates = session_in.model_dump(exclude_unset=True)
        if "current_question" in updates and updates["current_question"] > session.total_questions:
            raise HTTPException(status_code=400, detail="current_question exceeds total_questions")

        for field, value in updates.items():
            setattr(session, field, value)
        if auto_save:
            session.auto_saved_at = utcnow()
        db.commit()
        db.refresh(session)
        return session

    def update_status(self, db: Session, session_id: int, user: User, status: str) -> InterviewSession:
        session = self.get_session(db, session_id, user)
        self._transition(session, status)
        db.commit()
        db.refresh(session)
        return session

    def _transition(self, session: InterviewSession, status: str) -> None:
        if status == session.status:
            return
        if status not in ALLOWED_TRANSITIONS.get(session.status, set()):
            raise HTTPException(
                status_code=400,
                detail=f"Cannot change session status from {session.status} to {status}",
            )
        session.status = status
        if status == "completed":
            session.completed_at = utcnow()
            session.duration = self._elapsed_seconds(session)
        logger.info(f"Session {session.id} status -> {status}")

    def _elapsed_seconds(self, session: InterviewSession) -> int:
        started = as_utc(session.started_at)
        if started is None:
            return 0
        return max(int((utcnow() - started).total_seconds()), 0)

    def _interview_context(self, session: InterviewSession) -> Tuple[InterviewContext, Optional[Dict[str, str]]]:
        scenario = session.scenario
        context = InterviewContext(
            job_role=session.user_job_position or scenario.job_role,
            company=session.user_company_name or scenario.company_background,
            stage=scenario.interview_stage,
            candidate_background=scenario.candidate_background,
            key_objectives=scenario.key_objectives,
        )
        persona = {
            "name": scenario.interviewer_name,
            "title": scenario.interviewer_title,
            "style": scenario.interviewer_style,
            "personality": scenario.personality_traits,
        }
        return context, persona if all(persona.values()) else None

    async def generate_ai_question(self, db: Session, session_id: int, user: User) -> InterviewMessage:
        session = self.get_session(db, session_id, user)
        if session.status == "completed":
            raise HTTPException(status_code=400, detail="Session is already completed")

        question_number = session.current_question or 1
        answered = sum(1 for m in session.messages if m.message_type == "user")
        if question_number > session.total_questions or answered >= session.total_questions:
            raise HTTPException(status_code=400, detail="Maximum questions reached. Complete the session to get evaluation")

        if session.status in ("setup", "paused"):
            self._transition(session, "in_progress")

        context, persona = self._interview_context(session)
        language = session.interview_language or "en"
        if persona is None:
            persona = await sealion_service.generate_interviewer_persona(context, language)

        if question_number == 1 and not session.messages:
            generated = await sealion_service.generate_first_question(context, persona, language)
        else:
            history = [
                {"role": "assistant" if m.message_type == "ai" else "user", "content": m.content}
                for m in session.messages
            ]
            generated = await sealion_service.generate_follow_up_question(
                context, persona, history, question_number - 1, language
            )

        message = InterviewMessage(
            session_id=session.id,
            message_type="ai",
            content=generated["content"],
            question_number=generated["question_number"],
        )
        db.add(message)
        session.auto_saved_at = utcnow()
        db.commit()
        db.refresh(message)
        return message

    def record_user_response(
        self,
        db: Session,
        session_id: int,
        user: User,
        content: str,
        input_method: str = "text",
        question_number: Optional[int] = None,
    ) -> InterviewMessage:
        session = self.get_session(db, session_id, user)
        if session.status == "completed":
            raise HTTPException(status_code=400, detail="Session is already completed")

        message = InterviewMessage(
            session_id=session.id,
            message_type="user",
            content=content,
            question_number=question_number or session.current_question,
            input_method=input_method,
            feedback=QUICK_FEEDBACK,
        )
        db.add(message)

        next_question = (session.current_question or 1) + 1
        if next_question <= session.total_questions:
            session.current_question = next_question
        session.auto_saved_at = utcnow()
        db.commit()
        db.refresh(message)
        return message

    async def complete_session(
        self, db: Session, session_id: int, user: User
    ) -> Tuple[InterviewSession, PracticeReport]:
        """
        Score every answer, store the report and mark the session completed.

        Completing an already evaluated session returns the stored report.
        """
        session = self.get_session(db, session_id, user)
        if session.status == "completed" and session.report is not None:
            return session, session.report

        pairs = question_answer_pairs(session)
        if not pairs:
            raise HTTPException(status_code=400, detail="Session must have at least one user response to complete")

        job_position = session.user_job_position or session.scenario.job_role
        result = await evaluation_service.evaluate_session_responses(
            pairs,
            job_position=job_position,
            response_language=session.interview_language or "en",
        )
        overall = result["overall_scores"]
        summary = result["session_summary"]
        averages = summary["average_scores"]
        star = self._average_star_scores(result["response_evaluations"])
        feedback = overall["detailed_feedback"]

        if session.status != "completed":
            self._transition(session, "completed")
        duration = session.duration or 0

        session.overall_score = overall["weighted_overall_score"]
        session.situation_score = star["situation"]
        session.task_score = star["task"]
        session.action_score = star["action"]
        session.result_score = star["result"]
        session.flow_score = averages["communication"]
        session.qualitative_feedback = (
            f"Overall rating: {overall['overall_rating']} ({overall['weighted_overall_score']}/5.0)"
        )
        session.strengths = summary["key_strengths"] or feedback["strengths"]
        session.improvements = summary["critical_improvements"] or feedback["weaknesses"]
        session.recommendations = ". ".join(summary["next_steps"]) or None

        report = PracticeReport(
            session_id=session.id,
            user_id=user.id,
            overall_score=overall["weighted_overall_score"],
            situation_score=star["situation"],
            task_score=star["task"],
            action_score=star["action"],
            result_score=star["result"],
            communication_score=averages["communication"],
            relevance_score=averages["relevance"],
            overall_rating=overall["overall_rating"],
            strengths=feedback["strengths"][:5],
            weaknesses=feedback["weaknesses"][:5],
            improvements=(summary["next_steps"] or feedback["suggestions"])[:5],
            detailed_feedback=" ".join(
                f"Response {index}: {evaluation['overall_rating']} ({evaluation['weighted_overall_score']}/5)."
                for index, evaluation in enumerate(result["response_evaluations"], start=1)
            ),
            key_insights=[
                f"Completed {len(pairs)} questions",
                f"Session duration: {duration // 60} minutes",
                f"Average response quality: {overall['weighted_overall_score']:.1f}/5.0",
            ],
            recommended_actions=list(RECOMMENDED_ACTIONS),
            rubric_scores=averages,
            evaluated_by=overall["evaluated_by"],
        )
        db.add(report)
        db.commit()
        db.refresh(session)
        db.refresh(report)
        logger.info(f"Practice session {session.id} completed with score {report.overall_score}")
        return session, report

    def _average_star_scores(self, evaluations: List[Dict[str, Any]]) -> Dict[str, float]:
        return {
            part: round_half_up(sum(e["star_scores"].get(part, 0) for e in evaluations) / len(evaluations))
            for part in ("situation", "task", "action", "result")
        }

    def get_report(self, db: Session, session_id: int, user: User) -> PracticeReport:
        session = self.get_session(db, session_id, user)
        if session.report is None:
            raise HTTPException(status_code=404, detail="Report not found. Complete the session first to generate a report")
        return session.report

    def get_questions(self, db: Session, session_id: int, user: User) -> List[Dict[str, Any]]:
        session = self.get_session(db, session_id, user)
        questions = []
        for number in range(1, session.total_questions + 1):
            if number <= len(FALLBACK_QUESTIONS):
                text = FALLBACK_QUESTIONS[number - 1]
                category = "behavioral"
            else:
                category = EXTRA_QUESTION_SKILLS[number % len(EXTRA_QUESTION_SKILLS)]
                text = f"Tell me about a time when you demonstrated {category} skills in your professional experience."
            questions.append({
                "id": f"question-{number}",
                "question_number": number,
                "question_text": text,
                "category": category,
            })
        return questions

    def get_responses(self, db: Session, session_id: int, user: User) -> List[Dict[str, Any]]:
        session = self.get_session(db, session_id, user)
        return [
            {
                "id": m.id,
                "session_id": session.id,
                "question_id": f"question-{m.question_number or 1}",
                "response_text": m.content,
                "response_type": m.input_method or "text",
                "created_at": m.timestamp,
            }
            for m in session.messages
            if m.message_type == "user"
        ]

    def get_transcript(self, db: Session, session_id: int, user: User) -> str:
        session = self.get_session(db, session_id, user)
        lines = []
        for message in session.messages:
            stamp = as_utc(message.timestamp) or utcnow()
            speaker = "Interviewer" if message.message_type == "ai" else "Candidate"
            lines.append(f"[{stamp.strftime('%d/%m/%Y, %H:%M:%S')}] {speaker}: {message.content}")
        return "\n\n".join(lines)

    def get_overview(self, db: Session, user: User) -> Dict[str, Any]:
        sessions = self.list_sessions(db, user)
        scored = [s.overall_score for s in sessions if s.status == "completed" and s.overall_score is not None]
        return {
            "total_sessions": len(sessions),
            "completed_sessions": sum(1 for s in sessions if s.status == "completed"),
            "in_progress_sessions": sum(1 for s in sessions if s.status == "in_progress"),
            "average_score": round_half_up(sum(scored) / len(scored)) if scored else None,
            "best_score": max(scored) if scored else None,
            "total_practice_time": sum(s.duration or 0 for s in sessions),
            "recent_sessions": sessions[:5],
        }


scenario_service = ScenarioService()
practice_service = PracticeService()
