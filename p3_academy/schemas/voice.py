from typing import Optional
from pydantic import BaseModel, Field


class TTSRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)
    language: str = "en"
    rate: float = Field(1.0, ge=0.5, le=2.0)
    pitch: float = Field(1.0, ge=0.5, le=2.0)
    voice: Optional[str] = None


class TranslateRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)
    target_language: str
    source_language: str = "en"


class AudioQualityMetrics(BaseModel):
    volume: Optional[float] = Field(None, ge=0, le=1)
    duration: Optional[float] = Field(None, ge=0)
    noise_level: Optional[float] = Field(None, ge=0, le=1)
    language: str = "en"
