"""User gateway ports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from waggle.domain.enums import OAuthProvider
    from waggle.domain.entities import User


class UserQueryGateway(Protocol):
    """사용자 조회 포트."""

    async def get_by_id(self, user_id: UUID) -> "User | None":
        ...

    async def get_by_provider_identity(
        self,
        provider: "OAuthProvider",
        provider_id: str,
    ) -> "User | None":
        """(provider, provider_id) 쌍으로 사용자를 조회합니다."""
        ...


class UserCommandGateway(Protocol):
    """사용자 생성/삭제 포트."""

    async def add(self, user: "User") -> None:
        """사용자를 세션에 추가하고 flush합니다."""
        ...

    async def delete(self, user: "User") -> None:
        ...
