"""
Industry-aware interview coaching.

A coaching session is a conversation: the coach opens with an introduction and
a first question, every answer gets a STAR analysis with tips and a model
answer, and the coach keeps asking until ``total_questions`` answers are in.
Every AI call has a template fallback, so a session can always run to the end.
"""
import logging
import random
from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException
from sqlalchemy.orm import Session

from p3_academy.models.coaching import CoachingFeedback, CoachingMessage, CoachingSession
from p3_academy.prompts.question_bank import QUESTION_BANK
from p3_academy.schemas.coaching import CoachingSessionCreate
from p3_academy.services.ai_router import AIServiceUnavailable, ai_router
from p3_academy.services.evaluation_service import round_half_up
from p3_academy.services.openai_service import parse_json_content
from p3_academy.services.redis_service import RedisService
from p3_academy.services.session_management import utcnow

logger = logging.getLogger(__name__)

STAR_PARTS = ["situation", "task", "action", "result", "overallFlow"]
INDUSTRY_CACHE_SECONDS = 30 * 60
EXPERIENCE_DIFFICULTY = {"intermediate": "intermediate", "senior": "advanced", "expert": "advanced"}

FALLBACK_QUESTIONS = {
    "phone-screening": "Tell me about yourself and what interests you about this role.",
    "functional-team": "Describe a challenging project you worked on and how you handled it.",
    "hiring-manager": "What motivates you in your work, and how does this role align with your career goals?",
    "subject-matter-expertise": "Describe a complex {industry} challenge you've solved and your approach.",
    "executive-final": "Where do you see yourself in 5 years, and how would this role help you get there?",
}

DEFAULT_STAR_ANALYSIS = {
    "situation": {"score": 3, "feedback": "Good context provided", "improvementAreas": ["Add more specific details"]},
    "task": {"score": 3, "feedback": "Task clearly defined", "improvementAreas": ["Clarify your specific role"]},
    "action": {"score": 3, "feedback": "Actions described well", "improvementAreas": ["Include more tactical details"]},
    "result": {"score": 3, "feedback": "Results mentioned", "improvementAreas": ["Add quantifiable metrics"]},
    "overallFlow": {
        "score": 3,
        "feedback": "Good structure",
        "improvementAreas": ["Improve transitions between STAR components"],
    },
}

DEFAULT_MODEL_ANSWER = {
    "situation": "In my role as [position] at [company], we faced [specific challenge]...",
    "task": "My responsibility was to [specific objective]...",
    "action": "I took the following approach: [specific steps]...",
    "result": "This resulted in [quantified outcome] and [business impact]...",
    "industryInsights": "This approach works well because it demonstrates systematic problem-solving.",
    "alternativeApproaches": [],
}

DEFAULT_TIPS = [
    "Focus on providing specific examples from your experience",
    "Include quantifiable results and business impact",
    "Structure your response using the STAR method",
]
DEFAULT_LEARNING_POINTS = [
    "Practice articulating your impact with specific metrics",
    "Prepare industry-specific examples that demonstrate expertise",
    "Focus on leadership and problem-solving scenarios",
]
DEFAULT_NEXT_STEPS = [
    "Practice 2-3 more STAR examples for this type of question",
    "Research industry-specific challenges and solutions",
    "Quantify your achievements with concrete numbers",
]

ANALYSIS_PROMPT = """Analyze this interview response using the STAR methodology for a {industry} {stage} interview.

User Response: "{response}"

Context:
- Job Position: {job_position}
- Experience Level: {experience_level}
- Question: {question}

Return JSON only:
{{
  "situation": {{"score": 1-5, "feedback": "string", "improvementAreas": ["string"]}},
  "task": {{"score": 1-5, "feedback": "string", "improvementAreas": ["string"]}},
  "action": {{"score": 1-5, "feedback": "string", "improvementAreas": ["string"]}},
  "result": {{"score": 1-5, "feedback": "string", "improvementAreas": ["string"]}},
  "overallFlow": {{"score": 1-5, "feedback": "string", "improvementAreas": ["string"]}}
}}

Score 1-5 where 5 = clear, specific and measurable and 1 = major gaps or unclear."""

FEEDBACK_PROMPT = """Give coaching feedback on this answer for a {industry} {stage} interview.

User Response: "{response}"
STAR scores: {scores}
Job Position: {job_position}
Experience Level: {experience_level}

Return JSON only:
{{
  "tips": ["2-3 specific coaching tips"],
  "learningPoints": ["3-4 actionable learning points"],
  "nextSteps": ["next steps for skill development"],
  "modelAnswer": {{
    "situation": "string",
    "task": "string",
    "action": "string",
    "result": "string",
    "industryInsights": "string",
    "alternativeApproaches": ["string"]
  }}
}}

Use British English. Be constructive and specific."""

INDUSTRY_KNOWLEDGE_PROMPT = """Generate interview preparation knowledge for the {industry} industry.

Return JSON only:
{{
  "overview": "string",
  "keyInsights": ["string"],
  "currentTrends": ["string"],
  "challenges": ["string"],
  "interviewFocus": ["what interviewers prioritise"],
  "commonScenarios": ["typical interview scenarios"],
  "keyTerminology": {{"term": "definition"}},
  "culturalNorms": "string"
}}"""


def _strings(value: Any, default: List[str]) -> List[str]:
    if isinstance(value, list):
        items = [str(item) for item in value if item]
        if items:
            return items
    return list(default)


def normalize_star_analysis(raw: Any) -> Dict[str, Dict[str, Any]]:
    """Coerce an AI STAR analysis into five parts scored 1-5; missing parts fall back to the defaults."""
    analysis = {}
    raw = raw if isinstance(raw, dict) else {}
    for part in STAR_PARTS:
        default = DEFAULT_STAR_ANALYSIS[part]
        entry = raw.get(part)
        if not isinstance(entry, dict):
            analysis[part] = dict(default)
            continue
        try:
            score = min(max(int(round(float(entry.get("score")))), 1), 5)
        except (TypeError, ValueError):
            score = default["score"]
        analysis[part] = {
            "score": score,
            "feedback": str(entry.get("feedback") or default["feedback"]),
            "improvementAreas": _strings(entry.get("improvementAreas"), default["improvementAreas"]),
        }
    return analysis


def star_average(analysis: Dict[str, Dict[str, Any]]) -> float:
    return sum(analysis[part]["score"] for part in STAR_PARTS) / len(STAR_PARTS)


def default_industry_knowledge(industry: str) -> Dict[str, Any]:
    return {
        "industry": industry,
        "overview": f"Interviews in {industry} focus on role fit, evidence of impact and industry awareness.",
        "key_insights": [
            f"Show you understand how {industry} organisations create value",
            "Back every claim with a concrete example",
        ],
        "current_trends": [],
        "challenges": [],
        "interview_focus": ["Relevant experience", "Problem-solving", "Communication"],
        "common_scenarios": ["Handling a difficult stakeholder", "Delivering under a tight deadline"],
        "key_terminology": {},
        "cultural_norms": "Professional, evidence-based answers are expected.",
        "ai_generated": False,
    }


class CoachingService:
    def __init__(self):
        self.cache = RedisService.get_instance()

    # Sessions

    def create_session(self, db: Session, user_id: int, session_in: CoachingSessionCreate) -> CoachingSession:
        session = CoachingSession(
            user_id=user_id,
            job_position=session_in.job_position,
            company_name=session_in.company_name,
            interview_stage=session_in.interview_stage,
            primary_industry=session_in.primary_industry,
            specializations=session_in.specializations,
            experience_level=session_in.experience_level,
            company_context=session_in.company_context.model_dump(),
            total_questions=session_in.total_questions,
        )
        db.add(session)
        db.commit()
        db.refresh(session)
        logger.info(f"Coaching session {session.id} created for user {user_id} ({session.interview_stage})")
        return session

    def get_session(self, db: Session, session_id: int, user_id: int) -> CoachingSession:
        session = db.query(CoachingSession).filter(CoachingSession.id == session_id).first()
        if not session:
            raise HTTPException(status_code=404, detail="Coaching session not found")
        if session.user_id != user_id:
            raise HTTPException(status_code=403, detail="Not authorized to access this coaching session")
        return session

    def get_user_sessions(self, db: Session, user_id: int) -> List[CoachingSession]:
        return (
            db.query(CoachingSession)
            .filter(CoachingSession.user_id == user_id)
            .order_by(CoachingSession.created_at.desc(), CoachingSession.id.desc())
            .all()
        )

    def _add_message(
        self,
        db: Session,
        session: CoachingSession,
        message_type: str,
        content: str,
        coaching_type: str,
        question_number: int,
        ai_metadata: Optional[Dict[str, Any]] = None,
    ) -> CoachingMessage:
        message = CoachingMessage(
            session_id=session.id,
            message_type=message_type,
            content=content,
            coaching_type=coaching_type,
            question_number=question_number,
            ai_metadata=ai_metadata,
        )
        session.messages.append(message)
        return message

    # AI helpers

    async def _ask(self, prompt: str, max_tokens: int, temperature: float = 0.7) -> str:
        response = await ai_router.generate_response(
            [{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            temperature=temperature,
            domain="coaching",
        )
        return response.content.strip()

    async def _introduction(self, session: CoachingSession) -> Tuple[str, bool]:
        prompt = (
            "Create a warm, professional coaching introduction for an interview preparation session.\n\n"
            f"Job Position: {session.job_position}\n"
            f"Company: {session.company_name or 'Not specified'}\n"
            f"Interview Stage: {session.interview_stage}\n"
            f"Industry: {session.primary_industry or 'General'}\n"
            f"Experience Level: {session.experience_level}\n\n"
            "Welcome the candidate, explain the coaching process and encourage confidence. "
            "Use British English, 2-3 sentences."
        )
        try:
            return await self._ask(prompt, max_tokens=400), True
        except AIServiceUnavailable as e:
            logger.warning(f"Coaching introduction for session {session.id} uses the template: {str(e)}")
            focus = f"{session.primary_industry} industry-specific " if session.primary_industry else ""
            stage = session.interview_stage.replace("-", " ")
            return (
                f"Welcome to your {stage} coaching session! I'll be guiding you through {focus}interview questions "
                "to help you prepare. Let's begin with confidence and focus on building your skills!",
                False,
            )

    async def _question(self, session: CoachingSession, question_number: int) -> Tuple[str, bool]:
        history = "\n".join(
            f"{m.message_type}: {m.content}" for m in session.messages[-4:]
        )
        prompt = (
            f"Generate question {question_number} of {session.total_questions} for a "
            f"{session.interview_stage} coaching session.\n\n"
            f"Job Position: {session.job_position}\n"
            f"Company: {session.company_name or 'Not specified'}\n"
            f"Industry: {session.primary_industry or 'General'}\n"
            f"Experience Level: {session.experience_level}\n"
            f"Specializations: {', '.join(session.specializations or []) or 'None'}\n"
            + (f"\nRecent Conversation:\n{history}\n" if history else "")
            + "\nAsk one realistic question suited to the STAR method that differs from earlier questions, "
            "followed by a line starting with 'Context:' explaining why it is asked. Use British English."
        )
        try:
            return await self._ask(prompt, max_tokens=600), True
        except AIServiceUnavailable as e:
            logger.warning(f"Coaching question {question_number} for session {session.id} uses the bank: {str(e)}")
            return self.fallback_question(session, question_number), False

    def fallback_question(self, session: CoachingSession, question_number: int) -> str:
        asked = {m.content.split("\n\nContext:")[0] for m in session.messages if m.coaching_type == "question"}
        candidates = [q["question"] for q in QUESTION_BANK.get(session.interview_stage, []) if q["question"] not in asked]
        if candidates:
            question = candidates[0]
            return f"{question}\n\nContext: This question evaluates your experience and problem-solving approach."
        template = FALLBACK_QUESTIONS.get(
            session.interview_stage, "Tell me about a time when you had to overcome a significant challenge."
        )
        return template.format(industry=session.primary_industry or "professional")

    async def _analyze(self, session: CoachingSession, question: str, answer: str) -> Dict[str, Dict[str, Any]]:
        prompt = ANALYSIS_PROMPT.format(
            industry=session.primary_industry or "general",
            stage=session.interview_stage,
            response=answer,
            job_position=session.job_position,
            experience_level=session.experience_level,
            question=question,
        )
        try:
            return normalize_star_analysis(parse_json_content(await self._ask(prompt, max_tokens=1000, temperature=0.3)))
        except (AIServiceUnavailable, ValueError) as e:
            logger.warning(f"STAR analysis for session {session.id} uses defaults: {str(e)}")
            return normalize_star_analysis(None)

    async def _feedback(self, session: CoachingSession, answer: str, analysis: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
        prompt = FEEDBACK_PROMPT.format(
            industry=session.primary_industry or "general",
            stage=session.interview_stage,
            response=answer,
            scores=", ".join(f"{part} {analysis[part]['score']}/5" for part in STAR_PARTS),
            job_position=session.job_position,
            experience_level=session.experience_level,
        )
        try:
            parsed = parse_json_content(await self._ask(prompt, max_tokens=1200))
            if not isinstance(parsed, dict):
                raise ValueError("Coaching feedback is not an object")
        except (AIServiceUnavailable, ValueError) as e:
            logger.warning(f"Coaching feedback for session {session.id} uses defaults: {str(e)}")
            parsed = {}
        model_answer = parsed.get("modelAnswer")
        return {
            "tips": _strings(parsed.get("tips"), DEFAULT_TIPS)[:3],
            "learning_points": _strings(parsed.get("learningPoints"), DEFAULT_LEARNING_POINTS),
            "next_steps": _strings(parsed.get("nextSteps"), DEFAULT_NEXT_STEPS),
            "model_answer": model_answer if isinstance(model_answer, dict) else dict(DEFAULT_MODEL_ANSWER),
        }

    # Conversation

    async def start_conversation(self, db: Session, session: CoachingSession) -> str:
        if session.status != "active":
            raise HTTPException(status_code=400, detail="Coaching session is not active")
        if session.current_question:
            raise HTTPException(status_code=400, detail="Coaching conversation already started")

        introduction, intro_ai = await self._introduction(session)
        question, question_ai = await self._question(session, 1)
        self._add_message(db, session, "coach", introduction, "introduction", 0, {"ai_generated": intro_ai})
        self._add_message(db, session, "coach", question, "question", 1, {"ai_generated": question_ai})
        session.current_question = 1
        db.commit()
        db.refresh(session)
        return f"{introduction}\n\n**Question 1:**\n{question}"

    async def respond(self, db: Session, session: CoachingSession, answer: str) -> Dict[str, Any]:
        """
        Record an answer to the current question and coach on it.

        Returns the stored feedback and either the next question or, after the
        last question, ``conversation_complete`` with the session closed.
        """
        if session.status != "active":
            raise HTTPException(status_code=400, detail="Coaching session is not active")
        if not session.current_question:
            raise HTTPException(status_code=400, detail="Start the coaching conversation first")

        number = session.current_question
        question = next(
            (m.content for m in reversed(session.messages) if m.coaching_type == "question"),
            "",
        )
        self._add_message(db, session, "user", answer, "response", number)

        analysis = await self._analyze(session, question, answer)
        coaching = await self._feedback(session, answer, analysis)
        feedback = CoachingFeedback(question_number=number, star_analysis=analysis, **coaching)
        session.feedback.append(feedback)

        session.overall_progress = round_half_up(number / session.total_questions * 100)
        next_question = None
        if number < session.total_questions:
            next_question, question_ai = await self._question(session, number + 1)
            self._add_message(db, session, "coach", next_question, "question", number + 1, {"ai_generated": question_ai})
            session.current_question = number + 1
            db.commit()
        else:
            db.commit()
            await self.complete_session(db, session)
        db.refresh(feedback)
        return {"question": next_question, "feedback": feedback, "conversation_complete": next_question is None}

    async def complete_session(self, db: Session, session: CoachingSession) -> Dict[str, Any]:
        if session.status == "completed":
            raise HTTPException(status_code=400, detail="Coaching session already completed")

        answered = sum(1 for m in session.messages if m.message_type == "user")
        averages = [star_average(f.star_analysis) for f in session.feedback]
        average = round_half_up(sum(averages) / len(averages)) if averages else None

        summary = await self._summary(session, answered)
        self._add_message(db, session, "coach", summary, "summary", 0, {"type": "session_completion"})
        session.status = "completed"
        session.overall_progress = 100.0
        session.completed_at = utcnow()
        db.commit()
        logger.info(f"Coaching session {session.id} completed after {answered} answers")
        return {
            "session_id": session.id,
            "summary": summary,
            "questions_answered": answered,
            "average_star_score": average,
        }

    async def _summary(self, session: CoachingSession, answered: int) -> str:
        industry = session.primary_industry or "general"
        prompt = (
            f"Create an encouraging coaching session summary for {industry} interview preparation.\n\n"
            f"Questions Completed: {answered}\n"
            f"Interview Stage: {session.interview_stage}\n"
            f"Experience Level: {session.experience_level}\n\n"
            "Cover key achievements, main strengths, priority improvements and next steps. Use British English."
        )
        try:
            return await self._ask(prompt, max_tokens=600)
        except AIServiceUnavailable as e:
            logger.warning(f"Coaching summary for session {session.id} uses the template: {str(e)}")
            stage = session.interview_stage.replace("-", " ")
            return (
                f"Session complete! You worked through {answered} questions in your {stage} coaching session. "
                "Keep practising the STAR method and focus on quantifying your results. Well done!"
            )

    # Industry intelligence

    async def get_industry_knowledge(self, industry: str) -> Dict[str, Any]:
        cache_key = self.cache.generate_cache_key("industry", industry.lower())
        cached = self.cache.get_cache(cache_key)
        if cached:
            return cached

        try:
            parsed = parse_json_content(await self._ask(INDUSTRY_KNOWLEDGE_PROMPT.format(industry=industry), 1200, 0.5))
            if not isinstance(parsed, dict):
                raise ValueError("Industry knowledge is not an object")
        except (AIServiceUnavailable, ValueError) as e:
            logger.warning(f"Industry knowledge for {industry} uses defaults: {str(e)}")
            return default_industry_knowledge(industry)

        default = default_industry_knowledge(industry)
        terminology = parsed.get("keyTerminology")
        knowledge = {
            "industry": industry,
            "overview": str(parsed.get("overview") or default["overview"]),
            "key_insights": _strings(parsed.get("keyInsights"), default["key_insights"]),
            "current_trends": _strings(parsed.get("currentTrends"), []),
            "challenges": _strings(parsed.get("challenges"), []),
            "interview_focus": _strings(parsed.get("interviewFocus"), default["interview_focus"]),
            "common_scenarios": _strings(parsed.get("commonScenarios"), default["common_scenarios"]),
            "key_terminology": (
                {str(k): str(v) for k, v in terminology.items()} if isinstance(terminology, dict) else {}
            ),
            "cultural_norms": str(parsed.get("culturalNorms") or default["cultural_norms"]),
            "ai_generated": True,
        }
        self.cache.set_cache(cache_key, knowledge, expiry=INDUSTRY_CACHE_SECONDS)
        return knowledge

    def get_industry_questions(
        self,
        industry: str,
        stage: Optional[str] = None,
        experience_level: Optional[str] = None,
        limit: int = 10,
    ) -> List[Dict[str, Any]]:
        stages = [stage] if stage else list(QUESTION_BANK)
        difficulty = EXPERIENCE_DIFFICULTY.get(experience_level or "")
        questions = [
            {**q, "tags": list(q["tags"]) + [industry.lower()]}
            for s in stages
            for q in QUESTION_BANK.get(s, [])
            if not difficulty or q["difficulty"] == difficulty
        ]
        return random.sample(questions, min(limit, len(questions)))


coaching_service = CoachingService()
