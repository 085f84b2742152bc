"""Authentication Dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Header

from waggle.setup.dependencies import get_identity_resolver

if TYPE_CHECKING:
    from waggle.application.users.services import UserIdentityResolver
    from waggle.domain.entities import User


async def get_current_user(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    resolver: "UserIdentityResolver" = Depends(get_identity_resolver),
) -> "User":
    """Bearer access 토큰으로 현재 사용자를 조회합니다."""
    return await resolver.resolve_current_user(authorization)
