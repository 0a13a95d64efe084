import asyncio

import pytest

from p3_academy.services import language_service as language_module
from p3_academy.services import openai_service
from p3_academy.services.ai_router import AIResponse, AIServiceUnavailable, ai_router
from p3_academy.services.language_service import (
    MAX_AUDIO_SIZE,
    estimate_duration,
    get_browser_voices,
    language_service,
    quality_recommendations,
)


def test_browser_voices_default_for_unknown_language():
    assert "Samantha" in get_browser_voices("en")
    assert get_browser_voices("xx") == ["Default Voice"]


def test_estimate_duration_rounds_up():
    assert estimate_duration("one two three") == 2
    assert estimate_duration(" ".join(["word"] * 150)) == 60


def test_quality_recommendations_flag_each_problem():
    recommendations = quality_recommendations({"volume": 0.05, "duration": 1, "noise_level": 0.5}, "en")

    assert recommendations[:3] == [
        "Audio volume is too low. Please speak closer to the microphone.",
        "Audio is too short. Please speak for at least 2-3 seconds.",
        "Background noise detected. Please find a quieter environment.",
    ]
    assert len(recommendations) == 6


def test_quality_recommendations_fall_back_to_english_tips():
    recommendations = quality_recommendations({"volume": 0.5, "duration": 5, "noise_level": 0.1}, "xx")
    assert recommendations == quality_recommendations(None, "en")
    assert recommendations[0] == "Speak clearly and at a moderate pace"


def test_translate_to_english_is_passthrough(monkeypatch):
    async def fail(*args, **kwargs):
        raise AssertionError("router should not be called")

    monkeypatch.setattr(ai_router, "generate_response", fail)
    result = asyncio.run(language_service.translate("Hello there", "en", "ms"))

    assert result == {"translated_text": "Hello there", "method": "passthrough", "cached": False}


def test_translate_uses_ai_router(monkeypatch):
    calls = []

    async def fake_generate(messages, **kwargs):
        calls.append(kwargs)
        return AIResponse('"Halo semua"', "sealion", 0.1, False)

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)
    result = asyncio.run(language_service.translate("Hello everyone", "id"))

    assert result["translated_text"] == "Halo semua"
    assert result["method"] == "sealion"
    assert calls[0]["language"] == "id"
    assert calls[0]["temperature"] == 0.3


def test_translate_propagates_unavailable_router():
    with pytest.raises(AIServiceUnavailable):
        asyncio.run(language_service.translate("Hello", "th"))


def test_prepare_tts_keeps_text_when_optimisation_fails():
    result = asyncio.run(language_service.prepare_tts("Welcome to your interview", "ms"))

    assert result["text"] == "Welcome to your interview"
    assert result["voice"] == "Google Bahasa Malaysia"
    assert result["method"] == "browser-speech-api"
    assert result["duration"] == 2


def test_transcribe_rejects_large_files():
    with pytest.raises(ValueError):
        asyncio.run(language_service.transcribe(b"0" * (MAX_AUDIO_SIZE + 1), "big.wav"))


def test_transcribe_wraps_whisper_result(monkeypatch):
    async def fake_transcribe(audio, filename, language):
        return {"text": "I led the migration", "language": "en", "duration": 3.2, "method": "whisper-1"}

    monkeypatch.setattr(openai_service, "transcribe_audio", fake_transcribe)
    result = asyncio.run(language_service.transcribe(b"RIFF", "answer.wav"))

    assert result["transcription"] == "I led the migration"
    assert result["confidence"] == 0.9
    assert result["method"] == "openai-whisper"


def test_browser_stt_config():
    config = language_module.language_service.browser_stt_config("id-ID", continuous=True)
    assert config["continuous"] is True
    assert config["method"] == "browser-speech-api"
    assert "id-ID" in config["supported_languages"]
