import asyncio

from p3_academy.core.languages import is_supported_language, normalize_language
from p3_academy.services import sealion_service
from p3_academy.services.redis_service import RedisService
from p3_academy.services.user_service import UserService


def test_language_normalisation():
    assert is_supported_language("th")
    assert not is_supported_language("fr")
    assert normalize_language(" ms ") == "ms"
    assert normalize_language("fr") == "en"
    assert normalize_language("") == "en"


def test_content_safety_defaults_to_safe_on_errors():
    result = asyncio.run(sealion_service.check_content_safety("Hello"))
    assert result == {"safe": True, "reason": None}


def test_content_safety_verdicts(monkeypatch):
    async def guard(messages, **kwargs):
        return " Safe\n"

    monkeypatch.setattr(sealion_service, "generate_response", guard)
    assert asyncio.run(sealion_service.check_content_safety("Hello"))["safe"] is True


def test_cache_degrades_without_redis():
    cache = RedisService.get_instance()
    key = cache.generate_cache_key("persona", "Data Analyst", "Grab", "en")

    assert key == "persona:Data Analyst:Grab:en"
    assert cache.set_cache(key, {"name": "Aisha"}) is False
    assert cache.get_cache(key) is None
    assert cache.delete_cache(key) is False


def test_long_cache_keys_are_hashed():
    key = RedisService.get_instance().generate_cache_key("translation", "x" * 200)
    assert key.startswith("translation:")
    assert len(key) == len("translation:") + 32


def test_user_lookup(db, user):
    assert asyncio.run(UserService.get_user(db, user.id)).username == "candidate"
    assert asyncio.run(UserService.get_user(db, 999)) is None
    assert asyncio.run(UserService.authenticate(db, "candidate@example.com", "password123")).id == user.id
    assert asyncio.run(UserService.authenticate(db, "candidate", "nope")) is None
