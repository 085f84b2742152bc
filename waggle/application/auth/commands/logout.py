"""Logout Command.

Refresh 토큰을 삭제하여 로그아웃하는 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waggle.application.auth.dto import LogoutRequest
from waggle.application.auth.exceptions import RefreshTokenNotFoundError
from waggle.application.auth.ports import refresh_token_key

if TYPE_CHECKING:
    from waggle.application.auth.ports import SessionStore, TokenCodec

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """로그아웃 Interactor.

    이미 발급된 access 토큰은 만료될 때까지 유효합니다.
    """

    def __init__(self, token_codec: "TokenCodec", session_store: "SessionStore") -> None:
        self._token_codec = token_codec
        self._session_store = session_store

    async def execute(self, request: LogoutRequest) -> None:
        """
        Raises:
            RefreshTokenNotFoundError: 요청에 refresh 토큰이 없음 (저장소 접근 없음)
            InvalidTokenError: 서명 불일치 또는 해석 불가 토큰
            SessionStoreUnavailableError: 세션 저장소 장애
        """
        if not request.refresh_token:
            raise RefreshTokenNotFoundError()

        subject = self._token_codec.verify_subject(request.refresh_token)
        await self._session_store.delete(refresh_token_key(subject))

        logger.info("User logged out", extra={"user_id": subject})
