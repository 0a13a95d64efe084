"""
Provider routing for text generation.

SeaLion is the primary provider and OpenAI the fallback. Each provider has a
circuit breaker: after ``failure_threshold`` consecutive failures it is skipped
until ``recovery_seconds`` have passed since the last failure.
"""
import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from prometheus_client import Counter, Histogram

from p3_academy.core.config import settings
from p3_academy.prompts.prompt_factory import get_prompt_by_provider
from p3_academy.services import openai_service, sealion_service

logger = logging.getLogger(__name__)

AI_REQUEST_COUNT = Counter(
    "ai_requests_total",
    "Total AI provider requests",
    ["provider", "status"],
)
AI_REQUEST_LATENCY = Histogram(
    "ai_request_latency_seconds",
    "AI provider request latency",
    ["provider"],
)

PROVIDERS = ("sealion", "openai")
DOMAINS = ("study-plan", "company-research", "resource-generation", "coaching", "general")


class AIServiceUnavailable(Exception):
    """Raised when no provider produced a response."""


@dataclass
class AIResponse:
    content: str
    provider: str
    response_time: float
    fallback_used: bool


@dataclass
class CircuitState:
    failures: int = 0
    last_failure: Optional[float] = None


class AIRouter:
    _instance = None

    @classmethod
    def get_instance(cls) -> "AIRouter":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(
        self,
        failure_threshold: int = settings.AI_FAILURE_THRESHOLD,
        recovery_seconds: int = settings.AI_RECOVERY_SECONDS,
        default_timeout: int = settings.AI_REQUEST_TIMEOUT,
    ):
        self.failure_threshold = failure_threshold
        self.recovery_seconds = recovery_seconds
        self.default_timeout = default_timeout
        self.circuits: Dict[str, CircuitState] = {name: CircuitState() for name in PROVIDERS}

    def _is_configured(self, provider: str) -> bool:
        if provider == "sealion":
            return sealion_service.is_configured()
        return openai_service.is_configured()

    def is_service_available(self, provider: str) -> bool:
        if not self._is_configured(provider):
            return False

        state = self.circuits[provider]
        if state.failures < self.failure_threshold:
            return True
        if state.last_failure is not None and time.time() - state.last_failure >= self.recovery_seconds:
            logger.info(f"Circuit breaker for {provider} recovered after {self.recovery_seconds}s")
            state.failures = 0
            state.last_failure = None
            return True
        return False

    def record_success(self, provider: str) -> None:
        state = self.circuits[provider]
        state.failures = 0
        state.last_failure = None

    def record_failure(self, provider: str) -> None:
        state = self.circuits[provider]
        state.failures += 1
        state.last_failure = time.time()
        if state.failures == self.failure_threshold:
            logger.warning(f"Circuit breaker opened for {provider} after {state.failures} failures")

    def _optimize_messages_for_openai(self, messages: List[Dict[str, str]], domain: str) -> List[Dict[str, str]]:
        if domain not in DOMAINS:
            logger.warning(f"Unknown AI domain {domain}, using general")
            domain = "general"
        system_prompt = get_prompt_by_provider("openai").get_system_prompt(domain)
        return [{"role": "system", "content": system_prompt}] + [m for m in messages if m["role"] != "system"]

    async def _call(self, provider: str, coro, timeout: int) -> str:
        start = time.monotonic()
        try:
            content = await asyncio.wait_for(coro, timeout=timeout)
        except Exception:
            AI_REQUEST_COUNT.labels(provider=provider, status="error").inc()
            self.record_failure(provider)
            raise
        AI_REQUEST_COUNT.labels(provider=provider, status="success").inc()
        AI_REQUEST_LATENCY.labels(provider=provider).observe(time.monotonic() - start)
        self.record_success(provider)
        return content

    async def generate_response(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int = 1000,
        temperature: float = 0.7,
        model: Optional[str] = None,
        timeout: Optional[int] = None,
        domain: Optional[str] = None,
        language: Optional[str] = None,
    ) -> AIResponse:
        """
        Generate a completion, trying SeaLion then OpenAI.

        Raises:
            AIServiceUnavailable: when both providers fail or neither is available.
        """
        timeout = timeout or self.default_timeout
        start = time.monotonic()
        sealion_error: Optional[Exception] = None

        if self.is_service_available("sealion"):
            try:
                content = await self._call(
                    "sealion",
                    sealion_service.generate_response(
                        messages,
                        max_tokens=max_tokens,
                        temperature=temperature,
                        model=model,
                        language=language,
                    ),
                    timeout,
                )
                return AIResponse(content, "sealion", time.monotonic() - start, False)
            except Exception as e:
                sealion_error = e
                logger.warning(f"SeaLion request failed, falling back to OpenAI: {str(e)}")

        if self.is_service_available("openai"):
            openai_messages = self._optimize_messages_for_openai(messages, domain) if domain else messages
            try:
                content = await self._call(
                    "openai",
                    openai_service.generate_response(openai_messages, max_tokens=max_tokens, temperature=temperature),
                    timeout,
                )
                return AIResponse(content, "openai", time.monotonic() - start, True)
            except Exception as e:
                logger.error(f"OpenAI fallback failed: {str(e)}")
                raise AIServiceUnavailable(
                    f"Both AI services failed. SeaLion: {sealion_error}. OpenAI: {str(e)}"
                )

        if sealion_error is not None:
            raise AIServiceUnavailable(f"Both AI services failed. SeaLion: {sealion_error}. OpenAI: unavailable")
        raise AIServiceUnavailable("No AI services available")

    async def get_health_status(self) -> Dict[str, Any]:
        status: Dict[str, Any] = {}
        for provider in PROVIDERS:
            state = self.circuits[provider]
            status[provider] = {
                "configured": self._is_configured(provider),
                "available": self.is_service_available(provider),
                "failures": state.failures,
                "last_failure": (
                    datetime.fromtimestamp(state.last_failure, tz=timezone.utc).isoformat()
                    if state.last_failure
                    else None
                ),
            }
        status["openai"]["health"] = await openai_service.health_check()
        return status

    def reset_circuit_breakers(self) -> None:
        for provider in PROVIDERS:
            self.circuits[provider] = CircuitState()
        logger.info("AI circuit breakers reset")


ai_router = AIRouter.get_instance()
