"""
Nine-criteria rubric scoring for interview answers.

Each criterion is scored 1-5 and combined with fixed weights into a weighted
overall score. Answers in Southeast Asian languages are scored by the LLM
first; everything else (and any LLM failure) goes through the keyword rules.
"""
import logging
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

from p3_academy.core.languages import ASEAN_EVALUATION_LANGUAGES
from p3_academy.prompts.prompt_factory import get_prompt_by_provider
from p3_academy.services.ai_router import ai_router
from p3_academy.services.openai_service import parse_json_content

logger = logging.getLogger(__name__)

CRITERIA_WEIGHTS: Dict[str, float] = {
    "relevance": 0.15,
    "star_structure": 0.15,
    "specific_evidence": 0.15,
    "role_alignment": 0.15,
    "outcome_oriented": 0.15,
    "communication": 0.10,
    "problem_solving": 0.10,
    "cultural_fit": 0.05,
    "learning_agility": 0.05,
}

CRITERION_DISPLAY_NAMES: Dict[str, str] = {
    "relevance": "Response Relevance",
    "star_structure": "STAR Structure",
    "specific_evidence": "Specific Evidence",
    "role_alignment": "Role Alignment",
    "outcome_oriented": "Outcome Focus",
    "communication": "Communication",
    "problem_solving": "Problem-Solving",
    "cultural_fit": "Cultural Fit",
    "learning_agility": "Learning Agility",
}

IMPROVEMENT_STEPS: Dict[str, str] = {
    "relevance": "Practice staying on-topic and directly answering the question asked",
    "star_structure": "Master the STAR method: Situation, Task, Action, Result structure",
    "specific_evidence": "Include specific metrics and quantifiable results in your examples",
    "role_alignment": "Research the role deeply and connect your experience to job requirements",
    "outcome_oriented": "Always conclude with measurable business impact or results achieved",
    "communication": "Practice clear, concise communication without filler words",
    "problem_solving": "Demonstrate analytical thinking and creative problem-solving approaches",
    "cultural_fit": "Show collaboration skills and alignment with company values",
    "learning_agility": "Highlight examples of quickly learning new skills or adapting to change",
}

# Keys used by the LLM JSON reply
LLM_SCORE_KEYS: Dict[str, str] = {
    "relevance": "relevanceScore",
    "star_structure": "starStructureScore",
    "specific_evidence": "specificEvidenceScore",
    "role_alignment": "roleAlignmentScore",
    "outcome_oriented": "outcomeOrientedScore",
    "communication": "communicationScore",
    "problem_solving": "problemSolvingScore",
    "cultural_fit": "culturalFitScore",
    "learning_agility": "learningAgilityScore",
}

CULTURAL_GUIDANCE: Dict[str, str] = {
    "id": (
        "INDONESIAN CULTURAL CONTEXT:\n"
        "- Values gotong royong (mutual assistance) and consensus building\n"
        "- Respects hierarchy while showing initiative\n"
        "- Emphasizes relationship building and collaboration"
    ),
    "ms": (
        "MALAYSIAN CULTURAL CONTEXT:\n"
        "- Values harmony and face-saving (muka)\n"
        "- Emphasizes relationship building before business\n"
        "- Respects diversity and inclusive approaches"
    ),
    "th": (
        "THAI CULTURAL CONTEXT:\n"
        "- Values kreng jai (consideration for others)\n"
        "- Respects hierarchy and seniority\n"
        "- Emphasizes maintaining harmonious relationships"
    ),
    "en": (
        "ASEAN BUSINESS CONTEXT:\n"
        "- Values relationship building and trust\n"
        "- Respects cultural diversity and inclusion\n"
        "- Emphasizes collaborative problem-solving"
    ),
}

DEFAULT_SUGGESTIONS = [
    "Use the STAR method to structure responses",
    "Include specific metrics and outcomes",
    "Connect experience to role requirements",
]

METRICS_PATTERN = re.compile(r"\$|increase|decrease|improve|reduce")
RESULT_VERBS_PATTERN = re.compile(r"improved|increased|decreased|saved")


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like a calculator (2.25 -> 2.3), not banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def weighted_score(scores: Dict[str, float]) -> float:
    return sum(scores[criterion] * weight for criterion, weight in CRITERIA_WEIGHTS.items())


def rating_for_score(score: float) -> str:
    if score >= 3.5:
        return "Pass"
    if score >= 3.0:
        return "Borderline"
    return "Needs Improvement"


@dataclass
class EvaluationRequest:
    question_text: str
    response_text: str
    job_position: str
    question_category: str = "behavioral"
    question_type: str = "behavioral"
    response_language: str = "en"
    experience_level: str = "intermediate"
    star_method_relevant: bool = True


class ResponseEvaluationService:
    async def evaluate_response(self, request: EvaluationRequest) -> Dict[str, Any]:
        """
        Score a single answer.

        Returns a dict with ``rubric_scores``, ``weighted_overall_score``,
        ``overall_rating``, ``star_scores``, ``detailed_feedback``,
        ``model_answer``, ``completeness_score`` and ``evaluated_by``.
        """
        if self.should_use_llm(request.response_language):
            evaluation = await self._evaluate_with_llm(request)
            if evaluation is not None:
                return evaluation
        return self.evaluate_with_rules(request)

    def should_use_llm(self, language: str) -> bool:
        return (language or "").lower() in ASEAN_EVALUATION_LANGUAGES

    async def _evaluate_with_llm(self, request: EvaluationRequest) -> Optional[Dict[str, Any]]:
        prompt = get_prompt_by_provider("sealion").get_prompt_for_answer_evaluation().format(
            question_text=request.question_text,
            question_category=request.question_category,
            job_position=request.job_position,
            experience_level=request.experience_level,
            response_language=request.response_language,
            response_text=request.response_text,
            cultural_guidance=CULTURAL_GUIDANCE.get(request.response_language, CULTURAL_GUIDANCE["en"]),
        )
        try:
            response = await ai_router.generate_response(
                [{"role": "user", "content": prompt}],
                max_tokens=2000,
                temperature=0.2,
            )
            parsed = parse_json_content(response.content)
        except Exception as e:
            logger.warning(f"LLM evaluation failed, using rule-based scoring: {str(e)}")
            return None

        if not isinstance(parsed, dict):
            return None
        return self._build_llm_result(parsed, response.provider)

    def _build_llm_result(self, parsed: Dict[str, Any], provider: str) -> Dict[str, Any]:
        scores = {}
        for criterion, key in LLM_SCORE_KEYS.items():
            try:
                value = float(parsed.get(key) or 3)
            except (TypeError, ValueError):
                value = 3.0
            scores[criterion] = min(max(value, 1.0), 5.0)

        overall = weighted_score(scores)
        star_scores = self._star_scores(parsed.get("starScores"), scores, overall)
        try:
            completeness = float(parsed.get("completenessScore") or overall)
        except (TypeError, ValueError):
            completeness = overall
        feedback = parsed.get("detailedFeedback")
        if not isinstance(feedback, dict):
            feedback = {}
        detailed_feedback = {
            "strengths": feedback.get("strengths") or ["Engaged with the question"],
            "weaknesses": feedback.get("weaknesses") or ["Could be more specific"],
            "suggestions": feedback.get("suggestions") or ["Use STAR method", "Add specific metrics", "Connect to role requirements"],
            "cultural_relevance": feedback.get("culturalRelevance") or "Response shows professional communication style",
        }
        return {
            "rubric_scores": {criterion: round_half_up(score) for criterion, score in scores.items()},
            "weighted_overall_score": round_half_up(overall),
            "overall_rating": rating_for_score(overall),
            "star_scores": star_scores,
            "detailed_feedback": detailed_feedback,
            "model_answer": parsed.get("modelAnswer") or "Provide specific examples using STAR method with measurable results",
            "completeness_score": round_half_up(min(max(completeness, 1.0), 5.0)),
            "evaluated_by": provider,
        }

    def _star_scores(self, reported: Any, scores: Dict[str, float], overall: float) -> Dict[str, float]:
        """STAR part scores clamped to 1-5; parts the model left out come from the rubric."""
        derived = {
            "situation": int(round_half_up(scores["star_structure"], 0)),
            "task": int(round_half_up(scores["star_structure"], 0)),
            "action": int(round_half_up(scores["star_structure"], 0)),
            "result": int(round_half_up(scores["outcome_oriented"], 0)),
            "overall": int(round_half_up(overall, 0)),
        }
        if not isinstance(reported, dict):
            return derived

        star_scores = {}
        for part, fallback in derived.items():
            try:
                value = float(reported.get(part))
            except (TypeError, ValueError):
                star_scores[part] = fallback
                continue
            star_scores[part] = round_half_up(min(max(value, 1.0), 5.0))
        return star_scores

    def evaluate_with_rules(self, request: EvaluationRequest) -> Dict[str, Any]:
        response = request.response_text.lower()
        word_count = len(request.response_text.split())
        scores = {criterion: 3 for criterion in CRITERIA_WEIGHTS}

        if self._contains_question_keywords(request.question_text, response):
            scores["relevance"] = 4
        if word_count < 30:
            scores["relevance"] = max(scores["relevance"] - 1, 1)

        star_components = sum([
            any(word in response for word in ("situation", "when", "context")),
            any(word in response for word in ("task", "responsible", "goal")),
            any(word in response for word in ("action", "did", "implemented")),
            any(word in response for word in ("result", "outcome", "achieved")),
        ])
        scores["star_structure"] = min(star_components + 1, 5)

        has_numbers = bool(re.search(r"\d+", response))
        has_percentages = "%" in response
        has_metrics = bool(METRICS_PATTERN.search(response))
        if has_numbers and has_percentages:
            scores["specific_evidence"] = 5
        elif has_numbers or has_metrics:
            scores["specific_evidence"] = 4
        elif "example" in response or "specifically" in response:
            scores["specific_evidence"] = 3
        else:
            scores["specific_evidence"] = 2

        job_keywords = request.job_position.lower().split()
        if any(keyword in response for keyword in job_keywords):
            scores["role_alignment"] = 4

        if has_metrics or "impact" in response or "delivered" in response:
            scores["outcome_oriented"] = 4
        if has_percentages or RESULT_VERBS_PATTERN.search(response):
            scores["outcome_oriented"] = 5

        if 50 <= word_count <= 150:
            scores["communication"] = 4
        elif word_count > 200:
            scores["communication"] = 3
        elif word_count < 30:
            scores["communication"] = 2

        if any(word in response for word in ("problem", "challenge", "solution")):
            scores["problem_solving"] = 4
        if any(word in response for word in ("analyzed", "identified", "strategy")):
            scores["problem_solving"] = 5

        if any(word in response for word in ("team", "collaboration", "together")):
            scores["cultural_fit"] = 4

        if any(word in response for word in ("learn", "adapt", "new")):
            scores["learning_agility"] = 4

        overall = weighted_score(scores)

        strengths: List[str] = []
        weaknesses: List[str] = []
        suggestions: List[str] = []
        if scores["star_structure"] >= 4:
            strengths.append("Good use of structured storytelling")
        if scores["specific_evidence"] >= 4:
            strengths.append("Included specific examples")
        if scores["communication"] >= 4:
            strengths.append("Clear and concise communication")
        if scores["star_structure"] < 3:
            weaknesses.append("Response lacks clear structure")
            suggestions.append("Use STAR method: Situation, Task, Action, Result")
        if scores["specific_evidence"] < 3:
            weaknesses.append("Limited specific evidence provided")
            suggestions.append("Include specific metrics, numbers, and measurable outcomes")
        if scores["outcome_oriented"] < 3:
            suggestions.append("Focus more on the business impact and results achieved")

        return {
            "rubric_scores": {criterion: float(score) for criterion, score in scores.items()},
            "weighted_overall_score": round_half_up(overall),
            "overall_rating": rating_for_score(overall),
            "star_scores": {
                "situation": 4 if star_components >= 1 else 2,
                "task": 4 if star_components >= 2 else 2,
                "action": 4 if star_components >= 3 else 2,
                "result": 4 if star_components >= 4 else 2,
                "overall": int(round_half_up(overall, 0)),
            },
            "detailed_feedback": {
                "strengths": strengths or ["Engaged with the question"],
                "weaknesses": weaknesses or ["Could be more detailed"],
                "suggestions": suggestions or list(DEFAULT_SUGGESTIONS),
            },
            "model_answer": (
                f"For this {request.question_category} question about {request.job_position}, structure your "
                "response using STAR method: describe the specific Situation, your Task/responsibility, the Actions "
                "you took, and the measurable Results achieved. Include specific metrics and connect to role requirements."
            ),
            "completeness_score": round_half_up(overall),
            "evaluated_by": "rule-based",
        }

    def _contains_question_keywords(self, question: str, response: str) -> bool:
        words = re.sub(r"[^\w\s]", "", question.lower()).split()
        return any(word in response for word in words if len(word) > 3)

    async def evaluate_session_responses(
        self,
        responses: List[Dict[str, str]],
        job_position: str,
        experience_level: str = "intermediate",
        response_language: str = "en",
    ) -> Dict[str, Any]:
        """
        Score every answer of a session and aggregate the results.

        Args:
            responses: dicts with ``question_text``, ``response_text`` and optionally
                ``question_category``/``question_type``.
        """
        if not responses:
            raise ValueError("No responses to evaluate")

        evaluations = []
        for item in responses:
            evaluations.append(await self.evaluate_response(EvaluationRequest(
                question_text=item.get("question_text", ""),
                response_text=item["response_text"],
                job_position=job_position,
                question_category=item.get("question_category", "behavioral"),
                question_type=item.get("question_type", "behavioral"),
                response_language=response_language,
                experience_level=experience_level,
            )))

        average_scores = self._average_scores(evaluations)
        return {
            "overall_scores": self._overall_session_scores(evaluations, average_scores),
            "response_evaluations": evaluations,
            "session_summary": self._session_summary(evaluations, average_scores, job_position, experience_level),
        }

    def _average_scores(self, evaluations: List[Dict[str, Any]]) -> Dict[str, float]:
        count = len(evaluations)
        return {
            criterion: sum(e["rubric_scores"][criterion] for e in evaluations) / count
            for criterion in CRITERIA_WEIGHTS
        }

    def _overall_session_scores(self, evaluations: List[Dict[str, Any]], averages: Dict[str, float]) -> Dict[str, Any]:
        overall = weighted_score(averages)
        all_strengths = [s for e in evaluations for s in e["detailed_feedback"]["strengths"]]
        all_weaknesses = [w for e in evaluations for w in e["detailed_feedback"]["weaknesses"]]
        all_suggestions = [s for e in evaluations for s in e["detailed_feedback"]["suggestions"]]
        cultural_relevance = next(
            (e["detailed_feedback"].get("cultural_relevance") for e in evaluations if e["detailed_feedback"].get("cultural_relevance")),
            None,
        )

        return {
            "rubric_scores": {criterion: round_half_up(score) for criterion, score in averages.items()},
            "weighted_overall_score": round_half_up(overall),
            "overall_rating": rating_for_score(overall),
            "star_scores": {
                "situation": int(round_half_up(averages["star_structure"], 0)),
                "task": int(round_half_up(averages["star_structure"], 0)),
                "action": int(round_half_up(averages["star_structure"], 0)),
                "result": int(round_half_up(averages["outcome_oriented"], 0)),
                "overall": int(round_half_up(overall, 0)),
            },
            "detailed_feedback": {
                "strengths": list(dict.fromkeys(all_strengths))[:5],
                "weaknesses": list(dict.fromkeys(all_weaknesses))[:3],
                "suggestions": list(dict.fromkeys(all_suggestions))[:5],
                "cultural_relevance": cultural_relevance,
            },
            "model_answer": f"Based on your {len(evaluations)} responses, focus on: {', '.join(all_suggestions[:3])}.",
            "completeness_score": round_half_up(overall),
            "evaluated_by": evaluations[0]["evaluated_by"],
        }

    def _session_summary(
        self,
        evaluations: List[Dict[str, Any]],
        averages: Dict[str, float],
        job_position: str,
        experience_level: str,
    ) -> Dict[str, Any]:
        def label(criterion: str, score: float) -> str:
            return f"{CRITERION_DISPLAY_NAMES[criterion]} ({round_half_up(score):.1f}/5)"

        key_strengths = [label(c, s) for c, s in averages.items() if s >= 4.0][:3]
        critical = sorted(((c, s) for c, s in averages.items() if s < 3.0), key=lambda item: item[1])
        critical_improvements = [label(c, s) for c, s in critical][:3]

        return {
            "total_responses": len(evaluations),
            "average_scores": {criterion: round_half_up(score) for criterion, score in averages.items()},
            "key_strengths": key_strengths,
            "critical_improvements": critical_improvements,
            "next_steps": self.generate_next_steps(averages, job_position, experience_level),
        }

    def generate_next_steps(self, averages: Dict[str, float], job_position: str, experience_level: str) -> List[str]:
        steps = []
        lowest = sorted(averages.items(), key=lambda item: item[1])[:3]
        for criterion, score in lowest:
            if score < 3.5:
                steps.append(IMPROVEMENT_STEPS.get(criterion, f"Improve your {criterion} skills through targeted practice"))

        if "senior" in job_position.lower() or experience_level == "advanced":
            steps.append("Focus on leadership and strategic thinking examples in your responses")
        return steps[:5]


evaluation_service = ResponseEvaluationService()
