import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from p3_academy.core.languages import normalize_language
from p3_academy.models.assessment import Assessment, LearningDrill
from p3_academy.models.evaluation import AiEvaluationResult
from p3_academy.models.interview_session import InterviewMessage, InterviewSession
from p3_academy.models.user import User
from p3_academy.schemas.perform import PerformMessageCreate, PerformSessionCreate
from p3_academy.services.ai_service import ai_service
from p3_academy.services.evaluation_service import evaluation_service
from p3_academy.services.session_management import as_utc

logger = logging.getLogger(__name__)

PERFORMANCE_INDICATORS = [
    {"key": "communication", "name": "Communication Clarity", "description": "Clear, articulate communication with appropriate tone"},
    {"key": "empathy", "name": "Empathy", "description": "Understanding and relating to others' perspectives"},
    {"key": "problem_solving", "name": "Problem Solving", "description": "Analytical thinking and solution-oriented approach"},
    {"key": "cultural_alignment", "name": "Cultural Alignment", "description": "Alignment with company values and culture"},
]

# Lower bound of each band, highest first
PERFORMANCE_RATINGS = [
    (4.5, "Outstanding"),
    (4.0, "Competent"),
    (3.0, "Developing"),
    (2.0, "Needs Practice"),
    (1.0, "Emerging"),
]

TREND_BAND = 0.3

STAR_METHOD_RECOMMENDATIONS = [
    "Set up the Situation in about 30 seconds",
    "Define the Task in about 20 seconds",
    "Walk through detailed Action steps in about 60 seconds",
    "Close with specific Results and metrics in about 30 seconds",
]

SELF_REFLECTION_PROMPTS = [
    "What specific examples best demonstrate your problem-solving abilities?",
    "How do your values align with the company's mission and culture?",
    "What metrics or outcomes can you use to quantify your past achievements?",
]

INDICATOR_DRILLS = {
    "communication": {
        "drill_type": "communication",
        "title": "Clear Communication Practice",
        "description": "Improve clarity and conciseness in interview responses",
        "scenario": "Practice explaining complex concepts in simple, clear language that any interviewer can understand.",
        "target_skill": "Communication Clarity",
        "estimated_duration": 10,
    },
    "empathy": {
        "drill_type": "empathy",
        "title": "Perspective-Taking Drill",
        "description": "Practice describing situations from the viewpoint of colleagues and customers",
        "scenario": "Recall a disagreement with a teammate and retell it focusing on their goals and constraints.",
        "target_skill": "Empathy",
        "estimated_duration": 10,
    },
    "problem_solving": {
        "drill_type": "problem_solving",
        "title": "Structured Problem Breakdown",
        "description": "Walk through a problem from diagnosis to measurable outcome",
        "scenario": "Pick a recent challenge and explain how you identified the root cause, options considered and the result.",
        "target_skill": "Problem Solving",
        "estimated_duration": 15,
    },
    "cultural_alignment": {
        "drill_type": "cultural_fit",
        "title": "Company Values Alignment",
        "description": "Connect your experience to the company's stated values",
        "scenario": "Research three company values and prepare one story that demonstrates each.",
        "target_skill": "Cultural Alignment",
        "estimated_duration": 10,
    },
}


def calculate_performance_rating(score: float) -> str:
    for lower_bound, rating in PERFORMANCE_RATINGS:
        if score >= lower_bound:
            return rating
    return "Emerging"


def calculate_trend(scores: List[float]) -> str:
    """
    Compare the mean of the last three scores (oldest first) with the three before.
    """
    previous = scores[-6:-3]
    if len(scores) < 2 or not previous:
        return "stable"

    recent = scores[-3:]
    recent_avg = sum(recent) / len(recent)
    previous_avg = sum(previous) / len(previous)
    if recent_avg > previous_avg + TREND_BAND:
        return "improving"
    if recent_avg < previous_avg - TREND_BAND:
        return "declining"
    return "stable"


def badge_for_score(score: float) -> str:
    if score >= 4.5:
        return "Interview Excellence"
    if score >= 4.0:
        return "Strong Performer"
    if score >= 3.5:
        return "Competent Candidate"
    return "Developing Skills"


def map_indicators(rubric: Dict[str, float]) -> Dict[str, float]:
    """Project the nine rubric averages onto the four Perform indicators."""
    return {
        "communication": round(rubric["communication"], 2),
        "empathy": round(rubric["cultural_fit"], 2),
        "problem_solving": round(rubric["problem_solving"], 2),
        "cultural_alignment": round((rubric["cultural_fit"] + rubric["learning_agility"]) / 2, 2),
    }


def question_answer_pairs(session: InterviewSession) -> List[Dict[str, str]]:
    pairs = []
    last_question = ""
    for message in session.messages:
        if message.message_type == "ai":
            last_question = message.content
        elif message.message_type == "user":
            pairs.append({"question_text": last_question, "response_text": message.content})
    return pairs


class PerformService:
    async def create_session(self, db: Session, user: User, session_in: PerformSessionCreate) -> InterviewSession:
        session = InterviewSession(
            user_id=user.id,
            module="perform",
            status="in_progress",
            user_job_position=session_in.job_position,
            user_company_name=session_in.company_name,
            interview_language=normalize_language(session_in.interview_language),
        )
        db.add(session)
        db.flush()

        greeting = await ai_service.generate_interview_question(session, [], 1)
        db.add(InterviewMessage(session_id=session.id, message_type="ai", content=greeting, question_number=1))
        db.commit()
        db.refresh(session)
        logger.info(f"Perform session {session.id} created for {session.user_job_position} at {session.user_company_name}")
        return session

    def get_session(self, db: Session, session_id: int, user: User, module: Optional[str] = "perform") -> InterviewSession:
        query = db.query(InterviewSession).filter(InterviewSession.id == session_id)
        if module:
            query = query.filter(InterviewSession.module == module)
        session = query.first()
        if not session:
            raise HTTPException(status_code=404, detail="Session not found")
        if session.user_id != user.id:
            raise HTTPException(status_code=403, detail="Access denied")
        return session

    def add_user_message(
        self, db: Session, session_id: int, user: User, message_in: PerformMessageCreate
    ) -> InterviewMessage:
        session = self.get_session(db, session_id, user)
        if session.status == "completed":
            raise HTTPException(status_code=400, detail="Interview is already completed")

        message = InterviewMessage(
            session_id=session.id,
            message_type="user",
            content=message_in.content,
            question_number=len(session.messages) // 2 + 1,
            input_method=message_in.input_method,
        )
        db.add(message)
        db.commit()
        db.refresh(message)
        return message

    async def generate_ai_response(self, db: Session, session_id: int, user: User) -> Dict[str, Any]:
        """
        Ask the next question, or close the interview once enough turns have been exchanged.
        """
        session = self.get_session(db, session_id, user)
        if session.status == "completed":
            raise HTTPException(status_code=400, detail="Interview is already completed")

        messages = list(session.messages)
        if ai_service.should_complete_interview(len(messages)):
            final_message = ai_service.final_message(
                session.interview_language or "en", session.user_job_position, session.user_company_name
            )
            message = InterviewMessage(session_id=session.id, message_type="ai", content=final_message)
            db.add(message)
            await self._finish(db, session, messages)
            db.refresh(message)
            return {"message": final_message, "message_id": message.id, "question_number": None, "is_completed": True}

        question_number = len(messages) // 2 + 1
        content = await ai_service.generate_interview_question(session, messages, question_number)
        message = InterviewMessage(
            session_id=session.id,
            message_type="ai",
            content=content,
            question_number=question_number,
        )
        db.add(message)
        db.commit()
        db.refresh(message)
        return {"message": content, "message_id": message.id, "question_number": question_number, "is_completed": False}

    async def complete_session(self, db: Session, session_id: int, user: User) -> AiEvaluationResult:
        session = self.get_session(db, session_id, user)
        if session.evaluation is not None:
            return session.evaluation
        return await self._finish(db, session, list(session.messages))

    async def _finish(self, db: Session, session: InterviewSession, messages: List[InterviewMessage]) -> AiEvaluationResult:
        now = datetime.now(timezone.utc)
        session.status = "completed"
        session.completed_at = now
        started = as_utc(session.started_at)
        session.duration = max(int((now - started).total_seconds()), 0) if started else 0

        evaluation_data = await ai_service.generate_comprehensive_evaluation(session, messages)
        evaluation = AiEvaluationResult(
            session_id=session.id,
            evaluation_language=session.interview_language or "en",
            cultural_context="SEA",
            **evaluation_data,
        )
        session.overall_score = evaluation.overall_score
        db.add(evaluation)
        db.commit()
        db.refresh(evaluation)
        logger.info(f"Perform session {session.id} completed: {evaluation.badge_earned} ({evaluation.points_earned} points)")
        return evaluation

    def get_evaluation(self, db: Session, session_id: int, user: User) -> AiEvaluationResult:
        session = self.get_session(db, session_id, user)
        if session.evaluation is None:
            raise HTTPException(status_code=404, detail="Evaluation not found")
        return session.evaluation

    def share_progress(self, db: Session, session_id: int, user: User) -> AiEvaluationResult:
        evaluation = self.get_evaluation(db, session_id, user)
        evaluation.shared_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(evaluation)
        return evaluation

    async def create_performance_assessment(self, db: Session, session: InterviewSession, user: User) -> Assessment:
        """Assess a session once; asking again returns the stored assessment."""
        existing = (
            db.query(Assessment)
            .filter(Assessment.session_id == session.id, Assessment.user_id == user.id)
            .first()
        )
        if existing is not None:
            return existing

        pairs = question_answer_pairs(session)
        if not pairs:
            raise HTTPException(status_code=400, detail="Session has no responses to assess")

        result = await evaluation_service.evaluate_session_responses(
            pairs,
            job_position=session.user_job_position or "Software Engineer",
            response_language=session.interview_language or "en",
        )
        indicators = map_indicators(result["session_summary"]["average_scores"])
        overall = round(sum(indicators.values()) / len(indicators), 2)
        feedback = result["overall_scores"]["detailed_feedback"]
        summary = result["session_summary"]

        assessment = Assessment(
            session_id=session.id,
            user_id=user.id,
            communication_score=indicators["communication"],
            empathy_score=indicators["empathy"],
            problem_solving_score=indicators["problem_solving"],
            cultural_alignment_score=indicators["cultural_alignment"],
            overall_score=overall,
            overall_rating=calculate_performance_rating(overall),
            strengths=feedback["strengths"],
            improvement_areas=feedback["weaknesses"],
            qualitative_observations=(
                f"Assessed {summary['total_responses']} responses for "
                f"{session.user_job_position or 'the role'}. "
                + (
                    f"Strongest areas: {', '.join(summary['key_strengths'])}."
                    if summary["key_strengths"]
                    else "No criterion averaged 4.0 or higher yet."
                )
            ),
            actionable_insights=summary["next_steps"] or feedback["suggestions"],
            star_method_recommendations=list(STAR_METHOD_RECOMMENDATIONS),
            self_reflection_prompts=list(SELF_REFLECTION_PROMPTS),
            progress_level=max(1, math.floor(overall)),
            performance_badge=badge_for_score(overall),
        )
        db.add(assessment)
        db.flush()

        for drill in self._drills_for(indicators, session):
            db.add(LearningDrill(assessment_id=assessment.id, user_id=user.id, **drill))

        db.commit()
        db.refresh(assessment)
        logger.info(f"Created assessment {assessment.id} for session {session.id} ({assessment.overall_rating})")
        return assessment

    def _drills_for(self, indicators: Dict[str, float], session: InterviewSession) -> List[Dict[str, Any]]:
        drills = [{
            "drill_type": "star_method",
            "title": "STAR Method Mastery",
            "description": "Practice structuring behavioral interview responses using the STAR method",
            "scenario": (
                f"You're interviewing for a {session.user_job_position or 'leadership'} position at "
                f"{session.user_company_name or 'a top company'}. Practice answering behavioral questions "
                "with clear STAR structure."
            ),
            "target_skill": "Structured Response Technique",
            "estimated_duration": 15,
        }]
        weakest = sorted(indicators.items(), key=lambda item: item[1])[:2]
        drills.extend(dict(INDICATOR_DRILLS[key]) for key, _ in weakest)
        return drills

    def get_user_assessments(self, db: Session, user_id: int, limit: int = 10) -> List[Assessment]:
        return (
            db.query(Assessment)
            .filter(Assessment.user_id == user_id)
            .order_by(Assessment.created_at.desc(), Assessment.id.desc())
            .limit(limit)
            .all()
        )

    def get_user_performance_overview(self, db: Session, user_id: int) -> Dict[str, Any]:
        assessments = self.get_user_assessments(db, user_id, limit=20)
        if not assessments:
            raise HTTPException(status_code=404, detail="No assessments found for user")

        total = len(assessments)
        average = sum(a.overall_score for a in assessments) / total

        indicator_averages = []
        for indicator in PERFORMANCE_INDICATORS:
            scores = [getattr(a, f"{indicator['key']}_score") for a in assessments]
            indicator_averages.append((indicator["name"], sum(scores) / len(scores)))
        indicator_averages.sort(key=lambda item: item[1], reverse=True)

        drills = [drill for a in assessments for drill in a.drills]
        badges = list(dict.fromkeys(a.performance_badge for a in assessments if a.performance_badge))
        recent_scores = [a.overall_score for a in assessments[:5]][::-1]

        return {
            "total_assessments": total,
            "average_score": round(average, 2),
            "current_rating": calculate_performance_rating(average),
            "strongest_indicator": indicator_averages[0][0],
            "weakest_indicator": indicator_averages[-1][0],
            "recent_trend": calculate_trend(recent_scores),
            "progress_level": max(a.progress_level or 1 for a in assessments),
            "completed_drills": sum(1 for d in drills if d.completed),
            "available_drills": len(drills),
            "badges": badges,
        }

    def get_user_learning_drills(self, db: Session, user_id: int) -> List[LearningDrill]:
        return (
            db.query(LearningDrill)
            .filter(LearningDrill.user_id == user_id)
            .order_by(LearningDrill.created_at.desc(), LearningDrill.id.desc())
            .all()
        )

    def complete_learning_drill(self, db: Session, drill_id: int, user_id: int) -> LearningDrill:
        drill = (
            db.query(LearningDrill)
            .filter(LearningDrill.id == drill_id, LearningDrill.user_id == user_id)
            .first()
        )
        if not drill:
            raise HTTPException(status_code=404, detail="Learning drill not found")

        drill.completed = True
        drill.completed_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(drill)
        return drill


perform_service = PerformService()
