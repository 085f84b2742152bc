"""UserIdentityResolver.

Bearer 토큰 → 사용자 매핑, 그리고 최초 로그인 시 사용자 생성을 담당합니다.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from waggle.application.auth.exceptions import InvalidAccessTokenError
from waggle.domain.entities import User

if TYPE_CHECKING:
    from waggle.application.auth.ports import TokenCodec
    from waggle.application.users.ports import UserCommandGateway, UserQueryGateway
    from waggle.domain.value_objects import Identity

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Authorization 헤더에서 Bearer 토큰을 추출합니다.

    Raises:
        InvalidAccessTokenError: 헤더 누락 또는 형식 오류
    """
    if not authorization:
        raise InvalidAccessTokenError("Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != BEARER_SCHEME or not token.strip():
        raise InvalidAccessTokenError("Malformed Authorization header")
    return token.strip()


class UserIdentityResolver:
    """사용자 식별 서비스.

    Responsibilities:
        - Authorization 헤더 검증 후 현재 사용자 조회
        - OAuth Identity로 사용자 조회 또는 생성

    Collaborators:
        - TokenCodec: access 토큰 검증
        - UserQueryGateway / UserCommandGateway: 사용자 영속성
    """

    def __init__(
        self,
        token_codec: "TokenCodec",
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
    ) -> None:
        self._token_codec = token_codec
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway

    async def resolve_current_user(self, authorization: str | None) -> User:
        """Bearer 헤더로 현재 사용자를 조회합니다.

        Raises:
            InvalidAccessTokenError: 헤더 오류, 만료, 사용자 없음
            InvalidTokenError: 서명 불일치 또는 해석 불가 토큰
        """
        token = extract_bearer_token(authorization)

        subject = self._token_codec.verify_subject(token)
        if self._token_codec.is_expired(token):
            raise InvalidAccessTokenError("Access token expired")

        try:
            user_id = uuid.UUID(subject)
        except ValueError as e:
            raise InvalidAccessTokenError("Malformed token subject") from e

        user = await self._user_query.get_by_id(user_id)
        if user is None:
            logger.info("Access token subject has no user", extra={"user_id": str(user_id)})
            raise InvalidAccessTokenError("User not found")
        return user

    async def resolve_or_create(self, identity: "Identity") -> tuple[User, bool]:
        """(provider, provider_id)로 사용자를 조회하고, 없으면 생성합니다.

        기존 사용자의 프로필 필드는 덮어쓰지 않습니다.

        Returns:
            (사용자, 신규 생성 여부)
        """
        user = await self._user_query.get_by_provider_identity(
            identity.provider, identity.provider_id
        )
        if user is not None:
            return user, False

        user = User(
            id=uuid.uuid4(),
            provider=identity.provider,
            provider_id=identity.provider_id,
            name=identity.display_name,
            email=identity.email,
            profile_image_url=identity.avatar_url,
        )
        await self._user_command.add(user)
        logger.info(
            "User created from OAuth identity",
            extra={"user_id": str(user.id), "provider": identity.provider.value},
        )
        return user, True
