import asyncio
import json
import logging
import re
import time
from functools import wraps
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI
from tenacity import retry, stop_after_attempt, wait_random_exponential

from p3_academy.core.config import settings

logger = logging.getLogger(__name__)

client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY or "not-configured")

# Whisper expects ISO-639-1 codes
TRANSCRIPTION_LANGUAGE_CODES = {
    "fil": "tl",
    "zh-sg": "zh",
    "zh-cn": "zh",
    "zh-tw": "zh",
    "zh-hk": "zh",
}


def with_timeout(timeout_seconds: int = 60):
    """
    Decorator to bound an async call with a timeout.
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await asyncio.wait_for(func(*args, **kwargs), timeout=timeout_seconds)
            except asyncio.TimeoutError:
                raise Exception(f"Operation timed out after {timeout_seconds} seconds")
        return wrapper
    return decorator


def parse_json_content(content: str) -> Any:
    """
    Parse a JSON payload out of a model reply.

    Handles replies wrapped in markdown code fences and replies with prose around
    a single JSON object. Raises ValueError when nothing parses.
    """
    cleaned = content.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    cleaned = cleaned.strip()

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        match = re.search(r"\{[\s\S]*\}", cleaned)
        if match:
            try:
                return json.loads(match.group(0))
            except json.JSONDecodeError as e:
                logger.error(f"JSON decode error: {str(e)}")
        raise ValueError("Could not parse JSON from AI response")


def is_configured() -> bool:
    return bool(settings.OPENAI_API_KEY)


@retry(wait=wait_random_exponential(min=1, max=10), stop=stop_after_attempt(3), reraise=True)
@with_timeout(timeout_seconds=60)
async def chat_completion(
    messages: List[Dict[str, str]],
    model: str,
    max_tokens: int = 1000,
    temperature: float = 0.7,
) -> str:
    response = await client.chat.completions.create(
        model=model,
        messages=messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    content = response.choices[0].message.content
    if not content:
        raise Exception("Empty response from OpenAI")
    return content.strip()


async def generate_response(
    messages: List[Dict[str, str]],
    max_tokens: int = 1000,
    temperature: float = 0.7,
    model: Optional[str] = None,
) -> str:
    """
    Generate a chat completion, retrying once on the fallback model.
    """
    if not is_configured():
        raise Exception("OpenAI API key is not configured")

    model = model or settings.OPENAI_MODEL
    try:
        return await chat_completion(messages, model, max_tokens, temperature)
    except Exception as e:
        if model == settings.OPENAI_FALLBACK_MODEL:
            raise
        logger.warning(f"OpenAI model {model} failed ({str(e)}), retrying with {settings.OPENAI_FALLBACK_MODEL}")
        return await chat_completion(messages, settings.OPENAI_FALLBACK_MODEL, max_tokens, temperature)


async def health_check() -> Dict[str, Any]:
    if not is_configured():
        return {"healthy": False, "model": settings.OPENAI_MODEL, "error": "not configured"}

    start = time.monotonic()
    try:
        await chat_completion(
            [{"role": "user", "content": "Hello"}],
            settings.OPENAI_FALLBACK_MODEL,
            max_tokens=5,
            temperature=0,
        )
        return {
            "healthy": True,
            "model": settings.OPENAI_MODEL,
            "latency_ms": int((time.monotonic() - start) * 1000),
        }
    except Exception as e:
        logger.error(f"OpenAI health check failed: {str(e)}")
        return {"healthy": False, "model": settings.OPENAI_MODEL, "error": str(e)}


@retry(wait=wait_random_exponential(min=1, max=10), stop=stop_after_attempt(3), reraise=True)
@with_timeout(timeout_seconds=120)
async def _transcribe(filename: str, audio: bytes, language: Optional[str]) -> Any:
    kwargs: Dict[str, Any] = {
        "model": settings.OPENAI_TRANSCRIPTION_MODEL,
        "file": (filename, audio),
        "response_format": "verbose_json",
    }
    if language:
        kwargs["language"] = language
    return await client.audio.transcriptions.create(**kwargs)


async def transcribe_audio(audio: bytes, filename: str, language: str = "en") -> Dict[str, Any]:
    """
    Transcribe an uploaded recording with Whisper.

    Returns:
        Dict with the text, the detected language and the duration in seconds.
    """
    if not is_configured():
        raise Exception("OpenAI API key is not configured")

    whisper_language = TRANSCRIPTION_LANGUAGE_CODES.get(language, language.split("-")[0])
    result = await _transcribe(filename, audio, whisper_language)
    text = (getattr(result, "text", "") or "").strip()
    if not text:
        raise Exception("Transcription returned no text")

    return {
        "text": text,
        "language": getattr(result, "language", None) or language,
        "duration": getattr(result, "duration", None),
        "method": settings.OPENAI_TRANSCRIPTION_MODEL,
    }
