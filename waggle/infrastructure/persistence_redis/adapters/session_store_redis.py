"""Redis Session Store.

SessionStore 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from waggle.application.auth.exceptions import SessionStoreUnavailableError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


class RedisSessionStore:
    """Redis 기반 세션 저장소.

    - put: SET key value PX ttl (기존 값 원자적 교체)
    - pop: GETDEL (원자적 조회 후 삭제)
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def put(self, key: str, value: str, ttl: timedelta) -> None:
        ttl_ms = int(ttl.total_seconds() * 1000)
        if ttl_ms <= 0:
            raise ValueError("Session TTL must be positive")
        try:
            await self._redis.set(key, value, px=ttl_ms)
        except RedisError as e:
            logger.error("Session store write failed", extra={"op": "put", "error": str(e)})
            raise SessionStoreUnavailableError() from e

    async def get(self, key: str) -> str | None:
        try:
            return await self._redis.get(key)
        except RedisError as e:
            logger.error("Session store read failed", extra={"op": "get", "error": str(e)})
            raise SessionStoreUnavailableError() from e

    async def delete(self, key: str) -> None:
        try:
            await self._redis.delete(key)
        except RedisError as e:
            logger.error("Session store delete failed", extra={"op": "delete", "error": str(e)})
            raise SessionStoreUnavailableError() from e

    async def pop(self, key: str) -> str | None:
        try:
            return await self._redis.getdel(key)
        except RedisError as e:
            logger.error("Session store pop failed", extra={"op": "pop", "error": str(e)})
            raise SessionStoreUnavailableError() from e
