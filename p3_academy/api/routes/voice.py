import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from p3_academy.api.deps import get_current_user
from p3_academy.models.user import User
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.schemas.voice import AudioQualityMetrics, TranslateRequest, TTSRequest
from p3_academy.services import openai_service
from p3_academy.services.language_service import (
    SUPPORTED_AUDIO_FORMATS,
    VOICE_LANGUAGES,
    get_browser_voices,
    language_service,
    quality_recommendations,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=BaseResponseModel[Dict[str, Any]])
async def voice_health() -> Any:
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Voice services healthy",
        data={
            "status": "healthy",
            "services": {
                "browser_tts": True,
                "browser_stt": True,
                "whisper_stt": openai_service.is_configured(),
                "translation": True,
            },
            "languages": len(VOICE_LANGUAGES),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


@router.get("/config", response_model=BaseResponseModel[Dict[str, Any]])
async def voice_config() -> Any:
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Voice configuration",
        data=language_service.get_voice_config(),
    )


@router.get("/browser-voices", response_model=BaseResponseModel[List[str]])
async def browser_voices(language: str = "en") -> Any:
    voices = get_browser_voices(language)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Browser voices",
        data=voices,
        meta={"language": language, "total_voices": len(voices)},
    )


@router.post("/tts", response_model=BaseResponseModel[Dict[str, Any]])
async def text_to_speech(
    *,
    request: TTSRequest,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Prepare text and voice settings for browser speech synthesis."""
    result = await language_service.prepare_tts(
        request.text,
        language=request.language,
        voice=request.voice,
        rate=request.rate,
        pitch=request.pitch,
    )
    return BaseResponseModel(code=status.HTTP_200_OK, message="Speech prepared", data=result)


@router.post("/stt", response_model=BaseResponseModel[Dict[str, Any]])
async def speech_to_text(
    *,
    audio: Optional[UploadFile] = File(None),
    language: str = Form("en"),
    continuous: bool = Form(False),
    interim_results: bool = Form(True),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Transcribe an uploaded recording with Whisper.

    Without an upload the browser speech-recognition settings are returned instead.
    """
    if audio is None:
        return BaseResponseModel(
            code=status.HTTP_200_OK,
            message="Use browser speech recognition",
            data=language_service.browser_stt_config(language, continuous, interim_results),
        )

    extension = (audio.filename or "").rsplit(".", 1)[-1].lower()
    if extension not in SUPPORTED_AUDIO_FORMATS and not (audio.content_type or "").startswith("audio/"):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid audio file type")

    content = await audio.read()
    try:
        result = await language_service.transcribe(content, audio.filename or "recording.wav", language)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except Exception as e:
        logger.error(f"Transcription failed: {str(e)}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=f"STT processing failed: {str(e)}")

    return BaseResponseModel(code=status.HTTP_200_OK, message="Audio transcribed", data=result)


@router.post("/translate", response_model=BaseResponseModel[Dict[str, Any]])
async def translate(
    *,
    request: TranslateRequest,
    current_user: User = Depends(get_current_user),
) -> Any:
    result = await language_service.translate(request.text, request.target_language, request.source_language)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Text translated",
        data={
            "original_text": request.text,
            "source_language": request.source_language,
            "target_language": request.target_language,
            **result,
        },
    )


@router.post("/quality-recommendations", response_model=BaseResponseModel[List[str]])
async def audio_quality_recommendations(
    *,
    metrics: AudioQualityMetrics,
    current_user: User = Depends(get_current_user),
) -> Any:
    recommendations = quality_recommendations(metrics.model_dump(exclude={"language"}), metrics.language)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Recommendations generated",
        data=recommendations,
        meta={"language": metrics.language},
    )
