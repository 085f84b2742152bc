"""ExchangeTemporaryToken Command.

임시 토큰 핸들을 access 토큰으로 교환하는 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waggle.application.auth.dto import AccessTokenResponse, ExchangeTemporaryTokenRequest
from waggle.application.auth.exceptions import InvalidTemporaryTokenError
from waggle.application.auth.ports import temporary_token_key

if TYPE_CHECKING:
    from waggle.application.auth.ports import SessionStore

logger = logging.getLogger(__name__)


class ExchangeTemporaryTokenInteractor:
    """임시 토큰 교환 Interactor.

    핸들은 일회용입니다. 조회와 삭제가 원자적으로 수행되므로
    동시에 두 요청이 들어와도 하나만 성공합니다.
    """

    def __init__(self, session_store: "SessionStore") -> None:
        self._session_store = session_store

    async def execute(self, request: ExchangeTemporaryTokenRequest) -> AccessTokenResponse:
        """
        Raises:
            InvalidTemporaryTokenError: 핸들이 없거나 이미 교환됨
            SessionStoreUnavailableError: 세션 저장소 장애
        """
        if not request.temporary_token:
            raise InvalidTemporaryTokenError("Missing temporary token")

        access_token = await self._session_store.pop(temporary_token_key(request.temporary_token))
        if access_token is None:
            logger.warning("Temporary token exchange rejected")
            raise InvalidTemporaryTokenError()

        return AccessTokenResponse(access_token=access_token)
