"""Redis State Store.

OAuthStateStore 포트의 구현체입니다.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from waggle.application.auth.exceptions import SessionStoreUnavailableError
from waggle.application.oauth.ports import OAuthState
from waggle.infrastructure.persistence_redis.constants import STATE_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


class RedisStateStore:
    """Redis 기반 OAuth 상태 저장소.

    해석할 수 없는 값은 없는 state로 취급합니다.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def save(self, state: str, data: OAuthState, ttl_seconds: int = 600) -> None:
        """상태 저장."""
        key = f"{STATE_KEY_PREFIX}{state}"
        value = json.dumps(
            {
                "provider": data.provider,
                "redirect_uri": data.redirect_uri,
                "code_verifier": data.code_verifier,
            }
        )
        try:
            await self._redis.setex(key, ttl_seconds, value)
        except RedisError as e:
            logger.error("State store write failed", extra={"op": "save", "error": str(e)})
            raise SessionStoreUnavailableError() from e

    async def consume(self, state: str) -> OAuthState | None:
        """상태 조회 및 삭제 (GETDEL)."""
        key = f"{STATE_KEY_PREFIX}{state}"
        try:
            value = await self._redis.getdel(key)
        except RedisError as e:
            logger.error("State store read failed", extra={"op": "consume", "error": str(e)})
            raise SessionStoreUnavailableError() from e
        if not value:
            return None

        try:
            data = json.loads(value)
            return OAuthState(
                provider=data["provider"],
                redirect_uri=data.get("redirect_uri"),
                code_verifier=data.get("code_verifier"),
            )
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Discarding undecodable OAuth state", extra={"error": str(e)})
            return None
