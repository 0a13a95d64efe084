import os
import secrets
from typing import Any, Dict, List, Optional, Union
from pydantic import PostgresDsn, validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API and Application Config
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "P3 Interview Academy"
    VERSION: str = "1.0.0"

    # CORS configuration
    CORS_ORIGINS: List[str] = ["*"]

    @validator("CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Database configuration
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "postgres")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "p3_academy")
    SQLALCHEMY_DATABASE_URI: Optional[str] = None

    @validator("SQLALCHEMY_DATABASE_URI", pre=True)
    def assemble_db_connection(cls, v: Optional[str], values: Dict[str, Any]) -> Any:
        if isinstance(v, str):
            return v
        postgres_dsn = PostgresDsn.build(
            scheme="postgresql",
            username=values.get("POSTGRES_USER"),
            password=values.get("POSTGRES_PASSWORD"),
            host=values.get("POSTGRES_SERVER"),
            path=f"{values.get('POSTGRES_DB') or ''}",
        )
        return str(postgres_dsn)

    # Redis configuration
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", 6379))
    REDIS_DB: int = int(os.getenv("REDIS_DB", 0))
    CACHE_EXPIRY_SECONDS: int = int(os.getenv("CACHE_EXPIRY_SECONDS", 3600))

    # JWT configuration
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", secrets.token_urlsafe(32))
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

    # SeaLion configuration
    SEALION_API_KEY: str = os.getenv("SEALION_API_KEY", "")
    SEALION_BASE_URL: str = os.getenv("SEALION_BASE_URL", "https://api.sea-lion.ai/v1")
    SEALION_MODEL: str = os.getenv("SEALION_MODEL", "aisingapore/Gemma-SEA-LION-v3-9B-IT")
    SEALION_REASONING_MODEL: str = os.getenv("SEALION_REASONING_MODEL", "aisingapore/Llama-SEA-LION-v3.5-8B-R")
    SEALION_GUARD_MODEL: str = os.getenv("SEALION_GUARD_MODEL", "aisingapore/Llama-SEA-Guard-Prompt-v1")

    # OpenAI configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    OPENAI_FALLBACK_MODEL: str = os.getenv("OPENAI_FALLBACK_MODEL", "gpt-4o-mini")
    OPENAI_TRANSCRIPTION_MODEL: str = os.getenv("OPENAI_TRANSCRIPTION_MODEL", "whisper-1")

    # AI routing
    AI_REQUEST_TIMEOUT: int = int(os.getenv("AI_REQUEST_TIMEOUT", 30))
    AI_FAILURE_THRESHOLD: int = int(os.getenv("AI_FAILURE_THRESHOLD", 3))
    AI_RECOVERY_SECONDS: int = int(os.getenv("AI_RECOVERY_SECONDS", 5 * 60))

    # Session management
    SESSION_TIMEOUT_MINUTES: int = int(os.getenv("SESSION_TIMEOUT_MINUTES", 30))
    SESSION_ABANDONED_HOURS: int = int(os.getenv("SESSION_ABANDONED_HOURS", 24))
    SESSION_CLEANUP_INTERVAL_MINUTES: int = int(os.getenv("SESSION_CLEANUP_INTERVAL_MINUTES", 15))
    SESSION_ARCHIVE_DAYS: int = int(os.getenv("SESSION_ARCHIVE_DAYS", 90))
    SESSION_CLEANUP_ENABLED: bool = os.getenv("SESSION_CLEANUP_ENABLED", "true").lower() == "true"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
