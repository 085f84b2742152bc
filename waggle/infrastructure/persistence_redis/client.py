"""Redis Client Provider.

세션 저장소(refresh/임시 토큰)와 OAuth state가 함께 사용하는 클라이언트입니다.

재시도 정책:
    - 자동 재시도 없음. 장애는 즉시 SessionStoreUnavailableError로 전파됩니다.
    - socket_timeout / socket_connect_timeout으로 호출 시간을 제한합니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from waggle.setup.config import Settings

HEALTH_CHECK_INTERVAL = 30  # seconds


def _build_async_client(settings: "Settings") -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성."""
    import redis.asyncio as aioredis

    return aioredis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        # Health & Keepalive
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        # Timeouts
        socket_connect_timeout=settings.redis_socket_connect_timeout_seconds,
        socket_timeout=settings.redis_socket_timeout_seconds,
        # Connection Pool
        max_connections=settings.redis_max_connections,
        # No retry
        retry=Retry(NoBackoff(), retries=0),
        retry_on_timeout=False,
    )


@lru_cache
def get_session_redis() -> "aioredis.Redis":
    """세션 저장소용 Redis 클라이언트.

    환경변수:
        - WAGGLE_REDIS_URL (default: redis://localhost:6379/0)
    """
    from waggle.setup.config import get_settings

    return _build_async_client(get_settings())
