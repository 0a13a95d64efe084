import asyncio

import pytest

from p3_academy.services import openai_service, sealion_service
from p3_academy.services.ai_router import DOMAINS, AIRouter, AIServiceUnavailable


@pytest.fixture()
def router(monkeypatch):
    monkeypatch.setattr(sealion_service, "is_configured", lambda: True)
    monkeypatch.setattr(openai_service, "is_configured", lambda: True)
    return AIRouter(failure_threshold=3, recovery_seconds=300, default_timeout=5)


def test_sealion_is_primary(router, monkeypatch):
    async def sealion_ok(messages, **kwargs):
        return "from sealion"

    monkeypatch.setattr(sealion_service, "generate_response", sealion_ok)

    response = asyncio.run(router.generate_response([{"role": "user", "content": "hi"}]))
    assert response.content == "from sealion"
    assert response.provider == "sealion"
    assert response.fallback_used is False


def test_falls_back_to_openai(router, monkeypatch):
    async def sealion_fail(messages, **kwargs):
        raise Exception("boom")

    async def openai_ok(messages, **kwargs):
        return "from openai"

    monkeypatch.setattr(sealion_service, "generate_response", sealion_fail)
    monkeypatch.setattr(openai_service, "generate_response", openai_ok)

    response = asyncio.run(router.generate_response([{"role": "user", "content": "hi"}]))
    assert response.provider == "openai"
    assert response.fallback_used is True
    assert router.circuits["sealion"].failures == 1


def test_both_failing_raises(router, monkeypatch):
    async def fail(messages, **kwargs):
        raise Exception("down")

    monkeypatch.setattr(sealion_service, "generate_response", fail)
    monkeypatch.setattr(openai_service, "generate_response", fail)

    with pytest.raises(AIServiceUnavailable):
        asyncio.run(router.generate_response([{"role": "user", "content": "hi"}]))


def test_no_provider_configured_raises(monkeypatch):
    monkeypatch.setattr(sealion_service, "is_configured", lambda: False)
    monkeypatch.setattr(openai_service, "is_configured", lambda: False)
    router = AIRouter()

    with pytest.raises(AIServiceUnavailable, match="No AI services available"):
        asyncio.run(router.generate_response([{"role": "user", "content": "hi"}]))


def test_circuit_opens_after_threshold(router):
    for _ in range(3):
        router.record_failure("sealion")
    assert router.is_service_available("sealion") is False
    assert router.is_service_available("openai") is True


def test_circuit_recovers_after_window(router):
    for _ in range(3):
        router.record_failure("sealion")
    router.circuits["sealion"].last_failure -= 301
    assert router.is_service_available("sealion") is True
    assert router.circuits["sealion"].failures == 0


def test_success_resets_failures(router):
    router.record_failure("openai")
    router.record_failure("openai")
    router.record_success("openai")
    assert router.circuits["openai"].failures == 0
    assert router.circuits["openai"].last_failure is None


def test_reset_circuit_breakers(router):
    for _ in range(3):
        router.record_failure("openai")
    router.reset_circuit_breakers()
    assert router.is_service_available("openai") is True


def test_domain_replaces_system_prompt_for_openai(router, monkeypatch):
    from p3_academy.prompts.openai_prompt import DOMAIN_SYSTEM_PROMPTS

    received = []

    async def sealion_fail(messages, **kwargs):
        raise Exception("boom")

    async def openai_ok(messages, **kwargs):
        received.extend(messages)
        return "plan"

    monkeypatch.setattr(sealion_service, "generate_response", sealion_fail)
    monkeypatch.setattr(openai_service, "generate_response", openai_ok)

    messages = [
        {"role": "system", "content": "original system prompt"},
        {"role": "user", "content": "Research Grab"},
    ]
    asyncio.run(router.generate_response(messages, domain="company-research"))

    assert received[0] == {"role": "system", "content": DOMAIN_SYSTEM_PROMPTS["company-research"]}
    assert received[1:] == [{"role": "user", "content": "Research Grab"}]


def test_every_domain_has_an_openai_system_prompt(router):
    from p3_academy.prompts.openai_prompt import DOMAIN_SYSTEM_PROMPTS

    assert set(DOMAINS) == set(DOMAIN_SYSTEM_PROMPTS)
    messages = router._optimize_messages_for_openai([{"role": "user", "content": "hi"}], "astrology")
    assert messages[0]["content"] == DOMAIN_SYSTEM_PROMPTS["general"]
