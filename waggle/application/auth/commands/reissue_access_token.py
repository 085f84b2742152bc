"""ReissueAccessToken Command.

Refresh 토큰으로 access 토큰을 재발급하는 Use Case입니다.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

from waggle.application.auth.dto import AccessTokenResponse, ReissueAccessTokenRequest
from waggle.application.auth.exceptions import InvalidRefreshTokenError
from waggle.application.auth.ports import refresh_token_key

if TYPE_CHECKING:
    from waggle.application.auth.ports import SessionStore, TokenCodec
    from waggle.setup.config import AuthConfig

logger = logging.getLogger(__name__)


class ReissueAccessTokenInteractor:
    """Access 토큰 재발급 Interactor.

    Workflow:
        1. Refresh 토큰 서명 검증 및 subject 추출
        2. refresh:{subject} 조회
        3. 저장값과 문자열 일치 및 만료 여부 확인
        4. 새 access 토큰 발급 (refresh 토큰은 교체하지 않음)
    """

    def __init__(
        self,
        token_codec: "TokenCodec",
        session_store: "SessionStore",
        auth_config: "AuthConfig",
    ) -> None:
        self._token_codec = token_codec
        self._session_store = session_store
        self._config = auth_config

    async def execute(self, request: ReissueAccessTokenRequest) -> AccessTokenResponse:
        """
        Raises:
            InvalidRefreshTokenError: 저장된 토큰 없음, 불일치, 만료
            InvalidTokenError: 서명 불일치 또는 해석 불가 토큰
            SessionStoreUnavailableError: 세션 저장소 장애
        """
        if not request.refresh_token:
            raise InvalidRefreshTokenError("Missing refresh token")

        presented = request.refresh_token
        subject = self._token_codec.verify_subject(presented)

        stored = await self._session_store.get(refresh_token_key(subject))
        if stored is None:
            logger.info("Refresh token not stored", extra={"user_id": subject})
            raise InvalidRefreshTokenError()
        if not secrets.compare_digest(stored, presented):
            logger.warning("Refresh token does not match stored value", extra={"user_id": subject})
            raise InvalidRefreshTokenError()
        if self._token_codec.is_expired(presented):
            raise InvalidRefreshTokenError("Refresh token expired")

        access_token = self._token_codec.issue(subject, self._config.access_token_ttl)
        return AccessTokenResponse(access_token=access_token)
