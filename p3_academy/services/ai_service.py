"""
Interviewer for the Perform module: persona-driven questions and the
end-of-interview evaluation.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from p3_academy.models.interview_session import InterviewMessage, InterviewSession
from p3_academy.prompts.interviewer_fallbacks import PERFORM_FALLBACKS
from p3_academy.services import sealion_service
from p3_academy.services.sealion_service import InterviewContext

logger = logging.getLogger(__name__)

DEFAULT_JOB_ROLE = "Software Engineer"
DEFAULT_COMPANY = "Technology Company"
COMPLETION_MESSAGE_COUNT = 16  # 8 question/answer pairs


def _fallbacks(language: str) -> Dict[str, str]:
    return PERFORM_FALLBACKS.get(language, PERFORM_FALLBACKS["en"])


def _conversation_history(messages: List[InterviewMessage]) -> List[Dict[str, str]]:
    return [
        {"role": "assistant" if msg.message_type == "ai" else "user", "content": msg.content}
        for msg in messages
    ]


def _context(session: InterviewSession, objective: str) -> InterviewContext:
    job_role = session.user_job_position or DEFAULT_JOB_ROLE
    company = session.user_company_name or DEFAULT_COMPANY
    return InterviewContext(
        job_role=job_role,
        company=company,
        stage="perform-simulation",
        key_objectives=f"{objective} for {job_role} at {company}",
    )


def badge_for_score(score: float) -> str:
    if score >= 8:
        return "Interview Excellence"
    if score >= 7:
        return "Strong Candidate"
    return "Interview Participant"


def normalize_overall_score(score: Any) -> float:
    """Bring an overall score onto the 0-10 scale; assessments may report 0-100."""
    try:
        value = float(score)
    except (TypeError, ValueError):
        return 7.5
    if value > 10:
        value = value / 10
    return value


def _rubric_value(rubric: Dict[str, Any], key: str) -> Optional[float]:
    try:
        value = float(rubric.get(key))
    except (TypeError, ValueError):
        return None
    return min(5.0, max(1.0, value))


def rubric_indicator(rubric: Any, *keys: str) -> float:
    """Mean of the given 1-5 rubric entries, doubled onto the 0-10 scale."""
    if not isinstance(rubric, dict):
        return 7.5
    values = [v for v in (_rubric_value(rubric, key) for key in keys) if v is not None]
    if not values:
        return 7.5
    return round(sum(values) / len(values) * 2, 1)


def assessment_overall_score(assessment: Dict[str, Any]) -> float:
    """
    Overall 0-10 score of a STAR assessment.

    Rubric replies carry ``weightedOverallScore`` on the 1-5 scale; the fallback
    tables carry ``overallScore`` on 0-100.
    """
    weighted = assessment.get("weightedOverallScore")
    if weighted is not None:
        try:
            return round(min(5.0, max(1.0, float(weighted))) * 2, 1)
        except (TypeError, ValueError):
            logger.warning(f"Unusable weightedOverallScore {weighted!r}")
    return normalize_overall_score(assessment.get("overallScore") or 7.5)


class AIService:
    async def _ask(
        self,
        context: InterviewContext,
        persona,
        history: List[Dict[str, str]],
        question_number: int,
        language: str,
    ) -> str:
        if question_number == 1 and not history:
            response = await sealion_service.generate_first_question(context, persona, language)
        else:
            response = await sealion_service.generate_follow_up_question(
                context, persona, history, question_number, language
            )
        return response["content"]

    async def generate_interview_question(
        self,
        session: InterviewSession,
        messages: List[InterviewMessage],
        question_number: int,
    ) -> str:
        language = session.interview_language or "en"
        context = _context(session, "Assess candidate suitability")
        history = _conversation_history(messages)
        logger.info(f"Generating perform question {question_number} in {language} for session {session.id}")

        try:
            persona = await sealion_service.generate_interviewer_persona(context, language)
            return await self._ask(context, persona, history, question_number, language)
        except Exception as e:
            logger.error(f"Error generating question with persona: {str(e)}")

        try:
            return await self._ask(context, None, history, question_number, language)
        except Exception as e:
            logger.error(f"Error generating question without persona, using {language} fallback: {str(e)}")

        fallback = _fallbacks(language)
        if question_number == 1 and not history:
            return fallback["first_question"].format(job_role=context.job_role, company=context.company)
        return fallback["follow_up"]

    async def generate_comprehensive_evaluation(
        self,
        session: InterviewSession,
        messages: List[InterviewMessage],
    ) -> Dict[str, Any]:
        """
        Build the ten-part evaluation stored in ``ai_evaluation_results``.

        Scores are on a 0-10 scale. Points are ``floor(overall * 10)``.
        """
        language = session.interview_language or "en"
        context = _context(session, "Comprehensive evaluation")

        try:
            assessment = await sealion_service.generate_star_assessment(
                _conversation_history(messages), context, language
            )
            overall = assessment_overall_score(assessment)
            rubric = assessment.get("rubricScores")
            return {
                "overall_score": overall,
                "overall_rating": assessment.get("overallRating") or "Good Performance",
                "communication_score": rubric_indicator(rubric, "communicationScore"),
                "empathy_score": rubric_indicator(rubric, "culturalFitScore"),
                "problem_solving_score": rubric_indicator(rubric, "problemSolvingScore"),
                "cultural_alignment_score": rubric_indicator(rubric, "culturalFitScore", "learningAgilityScore"),
                "qualitative_observations": assessment.get("summary")
                or "Candidate demonstrated solid understanding of the role requirements.",
                "actionable_insights": self._as_list(assessment.get("actionableInsights"))
                or self._as_list(assessment.get("recommendations"))
                or [
                    f"Focus on demonstrating specific examples relevant to {context.job_role}",
                    f"Research {context.company}'s recent initiatives and values",
                    "Practice articulating your problem-solving approach using the STAR method",
                ],
                "personalized_drills": [
                    "Practice behavioral questions with specific metrics and outcomes",
                    f"Research {context.company}'s technical challenges and propose solutions",
                    "Conduct mock technical discussions with peers",
                    "Practice explaining complex concepts in simple terms",
                ],
                "reflection_prompts": [
                    f"How would you adapt your experience to {context.company}'s unique culture?",
                    "What specific value would you bring to this role that others might not?",
                    "How do you plan to grow in this position over the next 2 years?",
                ],
                "badge_earned": badge_for_score(overall),
                "points_earned": math.floor(overall * 10),
                "strengths": self._as_list(assessment.get("keyStrengths")) or [
                    "Clear communication style",
                    "Relevant experience",
                    "Professional demeanor",
                ],
                "improvement_areas": self._as_list(assessment.get("areasForImprovement")) or [
                    "Provide more specific examples",
                    "Ask more insightful questions",
                    "Connect experience to company needs",
                ],
            }
        except Exception as e:
            logger.error(f"Error generating comprehensive evaluation: {str(e)}")
            return self.fallback_evaluation()

    def _as_list(self, value: Any) -> List[str]:
        if not value:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)

    def fallback_evaluation(self) -> Dict[str, Any]:
        return {
            "overall_score": 7.0,
            "overall_rating": "Good",
            "communication_score": 7.0,
            "empathy_score": 7.0,
            "problem_solving_score": 7.0,
            "cultural_alignment_score": 7.0,
            "qualitative_observations": "Interview completed successfully. Detailed evaluation processing encountered an issue.",
            "actionable_insights": ["Continue practicing interview skills", "Research company-specific information"],
            "personalized_drills": ["Practice behavioral questions", "Prepare technical examples"],
            "reflection_prompts": ["How did you feel about this interview?", "What would you do differently?"],
            "badge_earned": "Interview Participant",
            "points_earned": 70,
            "strengths": ["Engaged in the conversation", "Completed the interview"],
            "improvement_areas": ["Continue practicing", "Prepare more examples"],
        }

    def should_complete_interview(self, message_count: int) -> bool:
        return message_count >= COMPLETION_MESSAGE_COUNT

    def final_message(self, language: str, job_role: str, company: str) -> str:
        return _fallbacks(language)["final_message"].format(
            job_role=job_role or DEFAULT_JOB_ROLE,
            company=company or DEFAULT_COMPANY,
        )


ai_service = AIService()
