import logging
import random
import uuid
from typing import Any, Dict, List, Optional

from p3_academy.core.languages import get_language_instructions
from p3_academy.prompts.question_bank import DIFFICULTY_LEVELS, QUESTION_BANK, STAGE_CONTEXTS
from p3_academy.services.ai_router import AIServiceUnavailable, ai_router
from p3_academy.services.openai_service import parse_json_content

logger = logging.getLogger(__name__)

GENERATION_PROMPT = """Generate {count} professional interview questions for the {stage} interview stage.

Stage Context: {stage_context}
{difficulty_line}

Requirements:
- Questions should be culturally appropriate for Southeast Asian business environments
- Mix of behavioral, situational, and role-specific questions
- Include STAR method relevant questions
- Professional language suitable for diverse candidates

Return a JSON array with this structure:
[
  {{
    "question": "string",
    "category": "behavioral|situational|technical|company-specific|general",
    "difficulty": "beginner|intermediate|advanced",
    "tags": ["tag1", "tag2", "tag3"],
    "expectedAnswerTime": number (minutes),
    "starMethodRelevant": boolean,
    "culturalContext": "brief cultural guidance for answering"
  }}
]

Focus on questions that assess competency while being respectful of diverse backgrounds and experiences."""


def _all_questions() -> List[Dict[str, Any]]:
    return [question for questions in QUESTION_BANK.values() for question in questions]


def _sample(questions: List[Dict[str, Any]], limit: int) -> List[Dict[str, Any]]:
    return random.sample(questions, min(limit, len(questions)))


def average_difficulty(questions: List[Dict[str, Any]]) -> float:
    if not questions:
        return 0.0
    return sum(DIFFICULTY_LEVELS[q["difficulty"]] for q in questions) / len(questions)


class QuestionBankService:
    """Curated questions per interview stage, topped up by the AI router when a stage runs short."""

    async def get_questions_for_stage(
        self,
        stage: str,
        count: int = 15,
        difficulty: Optional[str] = None,
        language: str = "en",
    ) -> List[Dict[str, Any]]:
        questions = [q for q in QUESTION_BANK.get(stage, []) if not difficulty or q["difficulty"] == difficulty]
        if len(questions) < count:
            logger.info(f"Only {len(questions)} questions available for {stage}, generating additional questions")
            questions = questions + await self.generate_additional_questions(
                stage, count - len(questions), difficulty, language
            )
        return _sample(questions, count)

    def get_all_stage_questions(self) -> Dict[str, Dict[str, Any]]:
        return {
            stage: {
                "interview_stage": stage,
                "questions": questions,
                "total_questions": len(questions),
                "average_difficulty": average_difficulty(questions),
            }
            for stage, questions in QUESTION_BANK.items()
        }

    async def generate_additional_questions(
        self,
        stage: str,
        count: int,
        difficulty: Optional[str] = None,
        language: str = "en",
    ) -> List[Dict[str, Any]]:
        prompt = GENERATION_PROMPT.format(
            count=count,
            stage=stage,
            stage_context=STAGE_CONTEXTS.get(stage, "General interview assessment"),
            difficulty_line=(
                f"Difficulty Level: {difficulty}"
                if difficulty
                else "Mixed difficulty levels (beginner, intermediate, advanced)"
            ),
        )
        if language != "en":
            prompt += f"\n\n{get_language_instructions(language)}"

        try:
            response = await ai_router.generate_response(
                [
                    {
                        "role": "system",
                        "content": "You are an expert interview coach specializing in Southeast Asian business culture. "
                        "Generate professional interview questions that are culturally appropriate and effective for assessment.",
                    },
                    {"role": "user", "content": prompt},
                ],
                max_tokens=2000,
                temperature=0.7,
                domain="general",
                language=language,
            )
            logger.info(
                f"Generated additional questions using {response.provider} in {response.response_time:.2f}s"
                + (" (fallback)" if response.fallback_used else "")
            )
            parsed = parse_json_content(response.content)
            if not isinstance(parsed, list):
                raise ValueError("Generated questions are not a list")
            return [self._normalize_generated(item, stage, difficulty) for item in parsed[:count] if isinstance(item, dict)]
        except (AIServiceUnavailable, ValueError) as e:
            logger.warning(f"Question generation for {stage} failed, using templates: {str(e)}")
            return self.fallback_questions(stage, count, difficulty)

    def _normalize_generated(self, item: Dict[str, Any], stage: str, difficulty: Optional[str]) -> Dict[str, Any]:
        item_difficulty = item.get("difficulty")
        if item_difficulty not in DIFFICULTY_LEVELS:
            item_difficulty = difficulty or "intermediate"
        try:
            answer_time = int(item.get("expectedAnswerTime") or 3)
        except (TypeError, ValueError):
            answer_time = 3
        tags = item.get("tags")
        return {
            "id": f"{stage}-gen-{uuid.uuid4().hex[:8]}",
            "question": str(item.get("question") or "Generated question"),
            "category": str(item.get("category") or "general"),
            "difficulty": item_difficulty,
            "interview_stage": stage,
            "tags": [str(tag) for tag in tags] if isinstance(tags, list) else ["generated"],
            "expected_answer_time": answer_time,
            "star_method_relevant": bool(item.get("starMethodRelevant")),
            "cultural_context": item.get("culturalContext") or "Professional response expected",
        }

    def fallback_questions(self, stage: str, count: int, difficulty: Optional[str] = None) -> List[Dict[str, Any]]:
        return [
            {
                "id": f"{stage}-fallback-{index + 1}",
                "question": f"Tell me about a relevant experience that demonstrates your fit for this {stage} interview stage.",
                "category": "behavioral",
                "difficulty": difficulty or "intermediate",
                "interview_stage": stage,
                "tags": ["experience", "fit", "competency"],
                "expected_answer_time": 3,
                "star_method_relevant": True,
                "cultural_context": "Share specific examples that show your qualifications",
            }
            for index in range(count)
        ]

    def get_questions_by_category(self, category: str, limit: int = 10) -> List[Dict[str, Any]]:
        return _sample([q for q in _all_questions() if q["category"] == category], limit)

    def get_star_method_questions(self, limit: int = 15) -> List[Dict[str, Any]]:
        return _sample([q for q in _all_questions() if q["star_method_relevant"]], limit)

    def get_question_statistics(self) -> Dict[str, Any]:
        by_stage: Dict[str, int] = {}
        by_category: Dict[str, int] = {}
        by_difficulty: Dict[str, int] = {}
        questions = _all_questions()
        for q in questions:
            by_stage[q["interview_stage"]] = by_stage.get(q["interview_stage"], 0) + 1
            by_category[q["category"]] = by_category.get(q["category"], 0) + 1
            by_difficulty[q["difficulty"]] = by_difficulty.get(q["difficulty"], 0) + 1
        return {
            "total_questions": len(questions),
            "questions_by_stage": by_stage,
            "questions_by_category": by_category,
            "questions_by_difficulty": by_difficulty,
        }


question_bank_service = QuestionBankService()
