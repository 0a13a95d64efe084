import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI
from tenacity import retry, stop_after_attempt, wait_random_exponential

from p3_academy.core.config import settings
from p3_academy.core.languages import CHINESE_ONLY_INSTRUCTION, get_language_instructions
from p3_academy.prompts.interviewer_fallbacks import (
    CONTEXTUAL_FOLLOW_UPS,
    FALLBACK_STAR_ASSESSMENTS,
    FIRST_QUESTION_FALLBACKS,
    GENERIC_SEA_FOLLOW_UPS,
)
from p3_academy.services.openai_service import parse_json_content, with_timeout
from p3_academy.services.redis_service import RedisService

logger = logging.getLogger(__name__)

# SeaLion exposes an OpenAI-compatible API
client = AsyncOpenAI(
    base_url=settings.SEALION_BASE_URL,
    api_key=settings.SEALION_API_KEY or "not-configured",
)

TOTAL_INTERVIEW_QUESTIONS = 15


@dataclass
class InterviewContext:
    job_role: str
    company: str
    stage: str = "practice"
    candidate_background: str = "Experienced professional"
    key_objectives: str = ""


def is_configured() -> bool:
    return bool(settings.SEALION_API_KEY)


def _chinese_suffix(language: str) -> str:
    return f"\n\n{CHINESE_ONLY_INSTRUCTION}" if language == "zh-sg" else ""


@retry(wait=wait_random_exponential(min=1, max=10), stop=stop_after_attempt(3), reraise=True)
@with_timeout(timeout_seconds=60)
async def chat_completion(
    messages: List[Dict[str, str]],
    model: Optional[str] = None,
    max_tokens: int = 1000,
    temperature: float = 0.7,
) -> str:
    response = await client.chat.completions.create(
        model=model or settings.SEALION_MODEL,
        messages=messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    return (response.choices[0].message.content or "").strip()


async def generate_response(
    messages: List[Dict[str, str]],
    max_tokens: int = 1000,
    temperature: float = 0.7,
    model: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """
    Generic SeaLion completion. A language instruction is prepended for non-English output.
    """
    if not is_configured():
        raise Exception("SeaLion API key is not configured")

    if language and language != "en":
        messages = [{"role": "system", "content": get_language_instructions(language)}] + list(messages)

    try:
        content = await chat_completion(
            messages,
            model=model or settings.SEALION_REASONING_MODEL,
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except Exception as e:
        raise Exception(f"SeaLion API generation failed: {str(e)}")
    if not content:
        raise Exception("SeaLion API generation failed: empty response")
    return content


def fallback_persona(job_role: str) -> Dict[str, str]:
    role = (job_role or "").lower()
    if "ai" in role or "ml" in role:
        return {
            "name": "Sarah Lim",
            "title": "AI Engineering Director",
            "style": "technical and innovative",
            "personality": "analytical, forward-thinking, collaborative",
        }
    if "engineer" in role:
        return {
            "name": "Marcus Tan",
            "title": "Senior Engineering Manager",
            "style": "systematic and thorough",
            "personality": "detail-oriented, problem-solving, supportive",
        }
    return {
        "name": "Diana Wong",
        "title": "Senior Hiring Manager",
        "style": "conversational and insightful",
        "personality": "empathetic, experienced, goal-oriented",
    }


async def generate_interviewer_persona(context: InterviewContext, language: str = "en") -> Dict[str, str]:
    """
    Create a regional interviewer persona (name, title, style, personality).

    Personas are cached per role, company and language.
    """
    cache = RedisService.get_instance()
    cache_key = cache.generate_cache_key("persona", context.job_role, context.company, language)
    cached = cache.get_cache(cache_key)
    if cached:
        return cached

    system_prompt = (
        "You are an AI assistant creating realistic interviewer personas for job interviews.\n\n"
        f"{get_language_instructions(language)}\n\n"
        f"Create a unique interviewer persona for a {context.job_role} position at {context.company}.\n\n"
        "Return ONLY a JSON object with these exact fields:\n"
        "- name: A realistic first and last name appropriate for the region\n"
        "- title: Their job title/position\n"
        "- style: Their interviewing style (2-3 words)\n"
        "- personality: Key personality traits (3-4 descriptive words)\n\n"
        "Make this persona culturally appropriate for Southeast Asian business contexts."
    )
    try:
        content = await generate_response(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": f"Create an interviewer persona for {context.job_role} at {context.company}"},
            ],
            max_tokens=500,
            temperature=0.7,
            model=settings.SEALION_MODEL,
        )
        persona = parse_json_content(content)
        if not all(persona.get(field) for field in ("name", "title", "style", "personality")):
            raise ValueError("Persona is missing fields")
        cache.set_cache(cache_key, persona, expiry=settings.CACHE_EXPIRY_SECONDS)
        return persona
    except Exception as e:
        logger.warning(f"SeaLion persona generation failed, using fallback persona: {str(e)}")
        return fallback_persona(context.job_role)


def fallback_first_question(context: InterviewContext, language: str) -> str:
    template = FIRST_QUESTION_FALLBACKS.get(language, FIRST_QUESTION_FALLBACKS["en"])
    return template.format(job_role=context.job_role, company=context.company)


def contextual_follow_up(question_number: int, language: str) -> str:
    """Pick a follow-up by language and question number, else the generic regional one."""
    templates = CONTEXTUAL_FOLLOW_UPS.get(language, {}).get(question_number)
    if templates:
        return templates[(question_number - 2) % len(templates)]
    return GENERIC_SEA_FOLLOW_UPS.get(language, GENERIC_SEA_FOLLOW_UPS["en"])


async def generate_first_question(
    context: InterviewContext,
    persona: Optional[Dict[str, str]],
    language: str = "en",
) -> Dict[str, Any]:
    instructions = get_language_instructions(language) + _chinese_suffix(language)
    if persona:
        system_prompt = (
            f"You are {persona['name']}, a {persona['title']}. Your interviewing style is {persona['style']} "
            f"and you are {persona['personality']}.\n\n{instructions}\n\n"
            f"You are conducting an interview for a {context.job_role} position at {context.company}.\n\n"
            "Start the interview with a warm, professional greeting and ask the candidate to introduce themselves "
            "and explain their interest in this specific role at this company.\n\n"
            "Make your response culturally appropriate for Southeast Asian business contexts. Keep it concise but engaging."
        )
    else:
        system_prompt = (
            f"You are a professional AI interviewer conducting a job interview.\n\n{instructions}\n\n"
            f"Start the interview for a {context.job_role} position at {context.company} "
            "with a professional greeting and introduction request."
        )

    try:
        content = await generate_response(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": "Begin the interview with an appropriate opening question."},
            ],
            max_tokens=300,
            temperature=0.8,
            model=settings.SEALION_MODEL,
        )
        return {"content": content, "question_number": 1}
    except Exception as e:
        logger.warning(f"SeaLion first question failed, using fallback: {str(e)}")
        return {"content": fallback_first_question(context, language), "question_number": 1}


async def generate_follow_up_question(
    context: InterviewContext,
    persona: Optional[Dict[str, str]],
    conversation_history: List[Dict[str, str]],
    current_question_number: int,
    language: str = "en",
) -> Dict[str, Any]:
    next_number = current_question_number + 1
    if not persona:
        return {"content": contextual_follow_up(next_number, language), "question_number": next_number}

    system_prompt = (
        f"You are {persona['name']}, a {persona['title']}. Your interviewing style is {persona['style']} "
        f"and you are {persona['personality']}.\n\n"
        f"{get_language_instructions(language)}{_chinese_suffix(language)}\n\n"
        f"You are conducting an interview for a {context.job_role} position at {context.company}.\n\n"
        f"This is question #{next_number} of {TOTAL_INTERVIEW_QUESTIONS}. Based on the conversation so far, "
        "ask a relevant follow-up question that:\n"
        "- Builds naturally on the candidate's previous responses\n"
        f"- Explores their experience with {context.job_role} specific challenges\n"
        "- Is appropriate for the Southeast Asian business context\n"
        "- Progresses from basic to more complex topics\n"
        f"- Considers real-world scenarios they would face at {context.company}\n\n"
        "Make each question unique and purposeful. Avoid repetition."
    )
    messages = [{"role": "system", "content": system_prompt}]
    messages.extend(
        {"role": "user" if msg["role"] == "user" else "assistant", "content": msg["content"]}
        for msg in conversation_history
    )
    messages.append({"role": "user", "content": "Generate the next appropriate interview question."})

    try:
        content = await generate_response(
            messages,
            max_tokens=400,
            temperature=0.8,
            model=settings.SEALION_REASONING_MODEL,
        )
        return {"content": content, "question_number": next_number}
    except Exception as e:
        logger.warning(f"SeaLion follow-up question {next_number} failed, using contextual fallback: {str(e)}")
        return {"content": contextual_follow_up(next_number, language), "question_number": next_number}


async def generate_star_assessment(
    conversation_history: List[Dict[str, str]],
    context: InterviewContext,
    language: str = "en",
) -> Dict[str, Any]:
    """
    Score a whole interview transcript against the 9-criteria rubric.

    Falls back to a fixed evaluation when SeaLion fails or returns no JSON.
    """
    system_prompt = (
        "You are an expert interview evaluator specializing in Southeast Asian job markets.\n\n"
        f"{get_language_instructions(language)}\n\n"
        f"Analyze this interview for a {context.job_role} position at {context.company} using the 9-criteria rubric "
        "(1=Poor, 3=Average, 5=Great). Weights: relevance, STAR structure, specific evidence, role alignment and "
        "outcome orientation 15% each; communication and problem-solving 10% each; cultural fit and learning agility 5% each.\n\n"
        "Return ONLY JSON with: rubricScores (relevanceScore, starStructureScore, specificEvidenceScore, "
        "roleAlignmentScore, outcomeOrientedScore, communicationScore, problemSolvingScore, culturalFitScore, "
        "learningAgilityScore), weightedOverallScore, overallRating (Pass/Borderline/Fail), keyStrengths, "
        "areasForImprovement, actionableInsights, summary.\n\n"
        "Pass is >= 3.5, Borderline is 3.0-3.4, Fail is < 3.0."
    )
    messages = [{"role": "system", "content": system_prompt}]
    messages.extend(
        {"role": "user" if msg["role"] == "user" else "assistant", "content": msg["content"]}
        for msg in conversation_history
    )
    messages.append({"role": "user", "content": "Provide a comprehensive STAR-based evaluation of this interview."})

    try:
        content = await generate_response(
            messages,
            max_tokens=1500,
            temperature=0.3,
            model=settings.SEALION_REASONING_MODEL,
        )
        assessment = parse_json_content(content)
        if isinstance(assessment, dict):
            return assessment
        raise ValueError("Assessment is not a JSON object")
    except Exception as e:
        logger.warning(f"SeaLion STAR assessment failed, using fallback evaluation: {str(e)}")
        return dict(FALLBACK_STAR_ASSESSMENTS.get(language, FALLBACK_STAR_ASSESSMENTS["en"]))


async def check_content_safety(content: str) -> Dict[str, Any]:
    """Run text through SeaLion Guard. Errors count as safe."""
    try:
        result = await generate_response(
            [{"role": "user", "content": content}],
            max_tokens=10,
            temperature=0,
            model=settings.SEALION_GUARD_MODEL,
        )
        verdict = result.strip().lower()
        return {
            "safe": verdict == "safe",
            "reason": "Content flagged as potentially harmful" if verdict == "unsafe" else None,
        }
    except Exception as e:
        logger.error(f"Error checking content safety with SeaLion Guard: {str(e)}")
        return {"safe": True, "reason": None}
