import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from p3_academy.core.languages import SEA_QUESTION_LANGUAGES, get_language_name
from p3_academy.prompts.prompt_factory import get_prompt_by_provider
from p3_academy.services import openai_service, sealion_service
from p3_academy.services.openai_service import parse_json_content

logger = logging.getLogger(__name__)

CULTURAL_CONTEXTS = {
    "id": "Indonesian business culture values consensus building (gotong royong), respect for hierarchy, and collaborative decision-making.",
    "ms": "Malaysian workplace culture emphasizes harmony, face-saving (muka), and building relationships before business.",
    "th": "Thai business culture prioritizes respect (kreng jai), hierarchy awareness, and maintaining harmonious relationships.",
    "vi": "Vietnamese business culture values respect for seniority, collective decision-making, and building trust over time.",
    "tl": "Filipino business culture emphasizes personal relationships (pakikipagkapwa), respect for authority, and collaborative teamwork.",
    "my": "Myanmar business culture values patience, respect for elders, and consensus-building in decision-making.",
    "en": "ASEAN business culture generally values relationship-building, respect for hierarchy, and collaborative approaches to problem-solving.",
}

QUESTION_TEMPLATES = {
    "leadership": [
        "Tell me about a time when you had to lead a team through a difficult project for {job_position}.",
        "Describe a situation where you had to motivate team members who were struggling.",
        "Give me an example of how you handled a conflict between team members.",
    ],
    "problem-solving": [
        "Describe a complex problem you solved in your role as {job_position}.",
        "Tell me about a time when you had to find a creative solution under pressure.",
        "Walk me through your approach to troubleshooting technical issues.",
    ],
    "teamwork": [
        "Tell me about your most successful collaboration experience.",
        "Describe a time when you had to work with a difficult team member.",
        "Give me an example of how you contributed to team success.",
    ],
}

DEFAULT_CATEGORIES = ["leadership", "problem-solving", "teamwork", "communication"]
STAR_CATEGORIES = {"leadership", "problem-solving", "teamwork", "conflict-resolution"}
QUESTION_TYPES = {
    "leadership": "behavioral",
    "problem-solving": "behavioral",
    "teamwork": "behavioral",
    "technical": "technical",
    "cultural": "cultural",
}
DIFFICULTY_MULTIPLIERS = {"beginner": 0.8, "intermediate": 1.0, "advanced": 1.3}
BASE_ANSWER_TIME = 180

QUESTION_STARTERS = [
    "Bagaimana", "Ceritakan", "Berikan", "Jelaskan", "Apa", "Mengapa",
    "How", "Tell", "Describe", "What", "Why", "Can you",
    "Selamat", "Welcome", "Good morning", "Hello",
]
TRAILING_COMMENTARY = re.compile(r"(.*?[?.!])\s*(?:This |The |It |For |Consider |Remember |Note )")

BASIC_TRANSLATIONS = {
    "id": {
        "Tell me about a time when you had to lead": "Ceritakan tentang saat Anda harus memimpin",
        "Describe a situation where you had to motivate": "Jelaskan situasi di mana Anda harus memotivasi",
        "Tell me about a time when you had to find": "Ceritakan tentang saat Anda harus mencari",
        "Give me an example of how you handled": "Berikan contoh bagaimana Anda menangani",
        "Describe a complex problem you solved": "Jelaskan masalah kompleks yang Anda selesaikan",
        "Tell me about your most successful collaboration": "Ceritakan tentang kolaborasi paling sukses Anda",
    },
    "ms": {
        "Tell me about a time when you had to lead": "Beritahu saya tentang masa anda perlu memimpin",
        "Describe a situation where you had to motivate": "Terangkan situasi di mana anda perlu memotivasikan",
        "Tell me about a time when you had to find": "Beritahu saya tentang masa anda perlu mencari",
        "Give me an example of how you handled": "Berikan contoh bagaimana anda mengendalikan",
        "Describe a complex problem you solved": "Terangkan masalah kompleks yang anda selesaikan",
        "Tell me about your most successful collaboration": "Beritahu saya tentang kerjasama paling berjaya anda",
    },
    "th": {
        "Tell me about a time when you had to lead": "บอกฉันเกี่ยวกับช่วงที่คุณต้องนำ",
        "Describe a situation where you had to motivate": "อธิบายสถานการณ์ที่คุณต้องจูงใจ",
        "Tell me about a time when you had to find": "บอกฉันเกี่ยวกับช่วงที่คุณต้องหา",
        "Give me an example of how you handled": "ยกตัวอย่างว่าคุณจัดการอย่างไร",
        "Describe a complex problem you solved": "อธิบายปัญหาที่ซับซ้อนที่คุณแก้ไข",
        "Tell me about your most successful collaboration": "บอกฉันเกี่ยวกับการร่วมมือที่ประสบความสำเร็จที่สุด",
    },
    "vi": {
        "Tell me about a time when you had to lead": "Hãy kể cho tôi về lúc bạn phải lãnh đạo",
        "Describe a situation where you had to motivate": "Mô tả tình huống mà bạn phải động viên",
        "Tell me about a time when you had to find": "Hãy kể cho tôi về lúc bạn phải tìm",
        "Give me an example of how you handled": "Cho tôi ví dụ về cách bạn xử lý",
        "Describe a complex problem you solved": "Mô tả vấn đề phức tạp mà bạn đã giải quyết",
        "Tell me about your most successful collaboration": "Hãy kể về sự hợp tác thành công nhất của bạn",
    },
    "tl": {
        "Tell me about a time when you had to lead": "Ikwento mo sa akin ang panahon na kailangan mong manguna",
        "Describe a situation where you had to motivate": "Ilarawan ang sitwasyon na kailangan mong mag-motivate",
        "Tell me about a time when you had to find": "Ikwento mo sa akin ang panahon na kailangan mong maghanap",
        "Give me an example of how you handled": "Magbigay ng halimbawa kung paano mo pinangasiwaan",
        "Describe a complex problem you solved": "Ilarawan ang komplikadong problema na nalutas mo",
        "Tell me about your most successful collaboration": "Ikwento ang inyong pinaka-matagumpay na pakikipagtulungan",
    },
}


@dataclass
class QuestionRequest:
    job_position: str
    question_number: int
    company_name: Optional[str] = None
    interview_stage: str = "phone-screening"
    experience_level: str = "intermediate"
    preferred_language: str = "en"
    difficulty_level: str = "adaptive"
    focus_areas: List[str] = field(default_factory=list)
    question_categories: List[str] = field(default_factory=list)
    previous_responses: List[Dict[str, Any]] = field(default_factory=list)
    adaptive_difficulty: bool = True


def get_cultural_context(language: str) -> str:
    return CULTURAL_CONTEXTS.get(language, CULTURAL_CONTEXTS["en"])


def get_adaptive_context(request: QuestionRequest) -> str:
    if not request.adaptive_difficulty or not request.previous_responses:
        return ""

    scores = [(r.get("star_scores") or {}).get("overall") or 3 for r in request.previous_responses]
    average = sum(scores) / len(scores)
    if average >= 4.5:
        return "\nAdaptive Context: Previous responses show strong performance. Generate a more challenging question."
    if average <= 2.5:
        return "\nAdaptive Context: Previous responses need improvement. Generate a more supportive, foundational question."
    return "\nAdaptive Context: Previous responses show moderate performance. Maintain current difficulty level."


def translate_question(question_text: str, language: str) -> str:
    """Phrase-level translation of template questions."""
    if language == "en":
        return question_text

    for english, translated in BASIC_TRANSLATIONS.get(language, {}).items():
        if " ".join(english.split(" ")[:5]) in question_text:
            return translated + question_text[len(english):]
    return f"{question_text} [Terjemahan ke {language} tersedia]"


def get_expected_time(difficulty: str) -> int:
    return int(BASE_ANSWER_TIME * DIFFICULTY_MULTIPLIERS.get(difficulty, 1.0) + 0.5)


def extract_category(text: str) -> Optional[str]:
    lowered = text.lower()
    for category in ("leadership", "problem-solving", "teamwork", "communication", "technical"):
        if category in lowered:
            return category
    return None


def _has_question_starter(text: str, prefix_only: bool = False) -> bool:
    lowered = text.lower()
    if prefix_only:
        return any(lowered.startswith(starter.lower()) for starter in QUESTION_STARTERS)
    return any(starter.lower() in lowered for starter in QUESTION_STARTERS)


def extract_clean_question(response: str) -> str:
    """
    Pull the interview question out of a reply that may contain reasoning.

    Reasoning models wrap their thoughts in <think> tags; some replies quote
    the question, others bury it between commentary lines.
    """
    cleaned = re.sub(r"<think>.*?</think>", "", response, flags=re.DOTALL).strip()

    quoted = [q.strip() for q in re.findall(r'"([^"]*\?[^"]*)"', cleaned)]
    if quoted:
        longest = max(quoted, key=len)
        if len(longest) > 10:
            return longest

    lines = [line.strip() for line in re.split(r"\n+", cleaned) if line.strip()]
    question = ""
    for index, line in enumerate(lines):
        if _has_question_starter(line, prefix_only=True) or "?" in line:
            remainder = " ".join(lines[index:])
            match = TRAILING_COMMENTARY.match(remainder)
            question = match.group(1) if match else remainder
            break

    if not question:
        question = next(
            (line for line in reversed(lines) if "?" in line or len(line) > 30 or _has_question_starter(line)),
            lines[0] if lines else "",
        )

    question = re.sub(r"\s+", " ", question).strip()
    if question and not re.search(r"[.!?]$", question) and _has_question_starter(question):
        question += "?"
    return question or "Generated question not available"


class AIQuestionGenerator:
    """
    Generates Prepare-module questions: OpenAI first, SeaLion for regional
    languages and English, and local templates when both fail.
    """

    async def generate_question(self, request: QuestionRequest) -> Dict[str, Any]:
        logger.info(f"Generating question {request.question_number} for {request.job_position}")

        try:
            return await self._generate_with_provider("openai", request)
        except Exception as e:
            logger.warning(f"OpenAI question generation failed, trying SeaLion: {str(e)}")

        if self.should_use_sealion(request.preferred_language):
            try:
                return await self._generate_with_provider("sealion", request)
            except Exception as e:
                logger.warning(f"SeaLion question generation failed, falling back to templates: {str(e)}")

        return self.generate_from_template(request)

    def should_use_sealion(self, language: str) -> bool:
        return language in SEA_QUESTION_LANGUAGES or language == "en"

    def _build_prompt(self, provider: str, request: QuestionRequest) -> str:
        return get_prompt_by_provider(provider).get_prompt_for_question_generation().format(
            job_position=request.job_position,
            company_name=request.company_name or "Tech company",
            interview_stage=request.interview_stage,
            experience_level=request.experience_level,
            language=request.preferred_language,
            question_number=request.question_number,
            focus_areas=", ".join(request.focus_areas),
            categories=", ".join(request.question_categories),
            difficulty=request.difficulty_level,
            cultural_context=get_cultural_context(request.preferred_language),
            adaptive_context=get_adaptive_context(request),
            language_name=get_language_name(request.preferred_language),
        )

    async def _generate_with_provider(self, provider: str, request: QuestionRequest) -> Dict[str, Any]:
        messages = [{"role": "user", "content": self._build_prompt(provider, request)}]
        if provider == "openai":
            content = await openai_service.generate_response(messages, max_tokens=1000, temperature=0.7)
        else:
            content = await sealion_service.generate_response(messages, max_tokens=1000, temperature=0.7)
        return self.parse_response(content, request, provider)

    def parse_response(self, content: str, request: QuestionRequest, provider: str) -> Dict[str, Any]:
        try:
            parsed = parse_json_content(content)
        except ValueError:
            parsed = None

        if not isinstance(parsed, dict):
            question_text = extract_clean_question(content)
            return {
                "question_text": question_text,
                "question_text_translated": translate_question(question_text, request.preferred_language),
                "question_category": extract_category(content) or "behavioral",
                "question_type": "behavioral",
                "difficulty_level": request.difficulty_level,
                "expected_answer_time": BASE_ANSWER_TIME,
                "cultural_context": get_cultural_context(request.preferred_language),
                "star_method_relevant": True,
                "generated_by": provider,
            }

        question_text = parsed.get("questionText") or "Generated question not available"
        star_relevant = parsed.get("starMethodRelevant")
        return {
            "question_text": question_text,
            "question_text_translated": parsed.get("questionTextTranslated") or question_text,
            "question_category": parsed.get("questionCategory") or "general",
            "question_type": parsed.get("questionType") or "behavioral",
            "difficulty_level": parsed.get("difficultyLevel") or request.difficulty_level,
            "expected_answer_time": parsed.get("expectedAnswerTime") or BASE_ANSWER_TIME,
            "cultural_context": parsed.get("culturalContext") or get_cultural_context(request.preferred_language),
            "star_method_relevant": True if star_relevant is None else bool(star_relevant),
            "generated_by": provider,
        }

    def generate_from_template(self, request: QuestionRequest) -> Dict[str, Any]:
        if request.focus_areas:
            category = request.focus_areas[request.question_number % len(request.focus_areas)]
        else:
            category = DEFAULT_CATEGORIES[request.question_number % len(DEFAULT_CATEGORIES)]

        templates = QUESTION_TEMPLATES.get(category, QUESTION_TEMPLATES["leadership"])
        question_text = templates[request.question_number % len(templates)].replace(
            "{job_position}", request.job_position
        )

        return {
            "question_text": question_text,
            "question_text_translated": translate_question(question_text, request.preferred_language),
            "question_category": category,
            "question_type": QUESTION_TYPES.get(category, "behavioral"),
            "difficulty_level": request.difficulty_level,
            "expected_answer_time": get_expected_time(request.difficulty_level),
            "cultural_context": get_cultural_context(request.preferred_language),
            "star_method_relevant": category in STAR_CATEGORIES,
            "generated_by": "fallback",
        }


question_generator = AIQuestionGenerator()
