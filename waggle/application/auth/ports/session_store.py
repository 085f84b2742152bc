"""SessionStore Port.

refresh 토큰과 임시 교환 토큰을 TTL과 함께 보관하는 키-값 저장소 인터페이스입니다.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol
from uuid import UUID

REFRESH_TOKEN_KEY_PREFIX = "refresh:"
TEMPORARY_TOKEN_KEY_PREFIX = "temp:"


def refresh_token_key(user_id: UUID | str) -> str:
    """사용자별 refresh 토큰 키."""
    return f"{REFRESH_TOKEN_KEY_PREFIX}{user_id}"


def temporary_token_key(handle: str) -> str:
    """임시 토큰 핸들 키."""
    return f"{TEMPORARY_TOKEN_KEY_PREFIX}{handle}"


class SessionStore(Protocol):
    """세션 저장소 인터페이스.

    구현체:
        - RedisSessionStore (infrastructure/persistence_redis/)

    모든 메서드는 저장소 장애 시 SessionStoreUnavailableError를 발생시킵니다.
    """

    async def put(self, key: str, value: str, ttl: timedelta) -> None:
        """값 저장 (기존 값은 원자적으로 덮어씀)."""
        ...

    async def get(self, key: str) -> str | None:
        """값 조회. 없거나 만료된 경우 None."""
        ...

    async def delete(self, key: str) -> None:
        """값 삭제. 없는 키도 오류가 아닙니다."""
        ...

    async def pop(self, key: str) -> str | None:
        """원자적 조회 후 삭제 (일회용 값)."""
        ...
