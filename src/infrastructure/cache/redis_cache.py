import json
import logging
from typing import Any, Optional

import redis.asyncio as redis

from src.application.interfaces.i_cache_service import ICacheService

logger = logging.getLogger(__name__)


class RedisCacheService(ICacheService):
    """JSON cache on Redis with per-key expiry.

    Values are stored JSON-encoded so dashboard summaries come back as the
    dicts they were written as. Keys are namespaced with ``key_prefix``.
    """

    def __init__(
        self,
        redis_url: str,
        default_ttl: int = 900,
        key_prefix: str = "looking-cache",
    ):
        self._redis_url = redis_url
        self._default_ttl = default_ttl
        self._key_prefix = key_prefix
        self._client: redis.Redis | None = None

    async def _get_client(self) -> redis.Redis:
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}:{key}"

    async def get(self, key: str) -> Optional[Any]:
        client = await self._get_client()
        raw = await client.get(self._key(key))
        if raw is None:
            logger.debug("Cache miss: %s", key)
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Dropping undecodable cache entry %s", key)
            await client.delete(self._key(key))
            return None

    async def set(
        self,
        key: str,
        value: Any,
        ttl_seconds: int | None = None,
    ) -> None:
        client = await self._get_client()
        await client.set(
            self._key(key),
            json.dumps(value),
            ex=ttl_seconds or self._default_ttl,
        )

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None
