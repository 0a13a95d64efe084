import hashlib
import json
import logging
from typing import Any, Optional

import redis

from p3_academy.core.config import settings

logger = logging.getLogger(__name__)


class RedisService:
    """
    Process-wide cache for AI artefacts (personas, translations).

    When Redis is unreachable every call degrades to a cache miss.
    """
    _instance = None

    @classmethod
    def get_instance(cls) -> "RedisService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self):
        self.redis_client = None
        self.is_connected = False
        try:
            self.redis_client = redis.Redis(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=settings.REDIS_DB,
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2,
            )
            self.redis_client.ping()
            self.is_connected = True
            logger.info(f"Connected to Redis at {settings.REDIS_HOST}:{settings.REDIS_PORT}")
        except redis.exceptions.ConnectionError as e:
            logger.warning(f"Redis unavailable ({str(e)}); continuing without cache")
        except redis.exceptions.RedisError as e:
            logger.error(f"Redis connection error: {str(e)}")

    def generate_cache_key(self, prefix: str, *args: Any) -> str:
        key = f"{prefix}:{':'.join(str(arg) for arg in args)}"
        if len(key) > 100:
            key = f"{prefix}:{hashlib.md5(key.encode()).hexdigest()}"
        return key

    def set_cache(self, key: str, data: Any, expiry: int = 3600) -> bool:
        if not self.is_connected or self.redis_client is None:
            return False

        try:
            self.redis_client.set(key, json.dumps(data, ensure_ascii=False), ex=expiry)
            return True
        except (redis.exceptions.RedisError, TypeError) as e:
            logger.error(f"Error writing cache key {key}: {str(e)}")
            return False

    def get_cache(self, key: str) -> Optional[Any]:
        if not self.is_connected or self.redis_client is None:
            return None

        try:
            data = self.redis_client.get(key)
            return json.loads(data) if data else None
        except (redis.exceptions.RedisError, json.JSONDecodeError) as e:
            logger.error(f"Error reading cache key {key}: {str(e)}")
            return None

    def delete_cache(self, key: str) -> bool:
        if not self.is_connected or self.redis_client is None:
            return False

        try:
            self.redis_client.delete(key)
            return True
        except redis.exceptions.RedisError as e:
            logger.error(f"Error deleting cache key {key}: {str(e)}")
            return False
