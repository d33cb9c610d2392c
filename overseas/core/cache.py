import json
import asyncio
import fnmatch
from abc import ABC, abstractmethod
from typing import Any, Optional, Dict
import time
import logging

from overseas.core.config import settings

logger = logging.getLogger(__name__)

COURSE_CATALOG_PREFIX = "catalog"
EVENTS_PREFIX = "events"
CONTENT_PREFIX = "content"
MY_COURSES_PREFIX = "my-courses"

class CacheBackend(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def delete_pattern(self, pattern: str) -> int:
        pass

class MemoryCacheBackend(CacheBackend):
    def __init__(self):
        self._cache: Dict[str, Dict] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[Any]:
        async with self._lock:
            item = self._cache.get(key)
            if item is None:
                return None
            if item["expiry"] and time.time() >= item["expiry"]:
                del self._cache[key]
                return None
            return item["value"]

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        async with self._lock:
            if ttl is None:
                ttl = settings.CACHE_TTL
            self._cache[key] = {
                "value": value,
                "expiry": time.time() + ttl if ttl else 0,
            }
            return True

    async def delete_pattern(self, pattern: str) -> int:
        async with self._lock:
            keys_to_delete = [key for key in self._cache if fnmatch.fnmatch(key, pattern)]
            for key in keys_to_delete:
                del self._cache[key]
            return len(keys_to_delete)

class RedisCacheBackend(CacheBackend):
    def __init__(self, redis_url: str):
        import redis.asyncio as redis
        self.redis = redis.from_url(redis_url, decode_responses=True)

    async def get(self, key: str) -> Optional[Any]:
        try:
            value = await self.redis.get(key)
            return json.loads(value) if value else None
        except Exception as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        try:
            serialized = json.dumps(value, default=str)
            if ttl is None:
                ttl = settings.CACHE_TTL
            if ttl == 0:
                await self.redis.set(key, serialized)
            else:
                await self.redis.setex(key, ttl, serialized)
            return True
        except Exception as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def delete_pattern(self, pattern: str) -> int:
        try:
            keys = [key async for key in self.redis.scan_iter(match=pattern)]
            if keys:
                return await self.redis.delete(*keys)
            return 0
        except Exception as e:
            logger.error(f"Redis pattern delete error: {e}")
            return 0

def create_cache_backend() -> CacheBackend:
    if settings.REDIS_URL:
        logger.info("Initializing Redis cache backend")
        return RedisCacheBackend(settings.REDIS_URL)

    logger.info("Using in-memory cache backend")
    return MemoryCacheBackend()

class CacheManager:
    def __init__(self, backend: CacheBackend):
        self.backend = backend

    async def get(self, key: str) -> Optional[Any]:
        return await self.backend.get(key)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        return await self.backend.set(key, value, ttl)

    async def delete_pattern(self, pattern: str) -> int:
        return await self.backend.delete_pattern(pattern)

    async def invalidate_course_catalog(self) -> int:
        count = await self.delete_pattern(f"{COURSE_CATALOG_PREFIX}*")
        logger.debug(f"Invalidated {count} course catalog cache entries")
        return count

    async def invalidate_user_cache(self, user_id: int) -> int:
        return await self.delete_pattern(f"user:{user_id}:*")

    async def invalidate_prefix(self, prefix: str) -> int:
        return await self.delete_pattern(f"{prefix}*")

cache = CacheManager(create_cache_backend())
