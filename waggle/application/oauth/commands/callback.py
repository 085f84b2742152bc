"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthCallbackInteractor
    - 하위 UseCase: CompleteLoginInteractor
    - Ports(인프라): OAuthStateStore, OAuthProviderGateway
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waggle.application.auth.dto import CompleteLoginRequest, LoginResult
from waggle.application.oauth.dto import OAuthCallbackRequest
from waggle.application.oauth.exceptions import InvalidStateError

if TYPE_CHECKING:
    from waggle.application.auth.commands import CompleteLoginInteractor
    from waggle.application.oauth.ports import OAuthProviderGateway, OAuthStateStore

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor (지휘자).

    Workflow:
        1. 프로바이더 지원 여부 확인
        2. state 검증 및 소비 (일회용)
        3. 인증 코드 교환 및 원본 사용자 정보 조회
        4. 로그인 완료 처리 (CompleteLoginInteractor)
    """

    def __init__(
        self,
        state_store: "OAuthStateStore",
        provider_gateway: "OAuthProviderGateway",
        complete_login: "CompleteLoginInteractor",
    ) -> None:
        self._state_store = state_store
        self._provider_gateway = provider_gateway
        self._complete_login = complete_login

    async def execute(self, request: OAuthCallbackRequest) -> LoginResult:
        """
        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
            InvalidStateError: state 없음, 만료 또는 프로바이더 불일치
            OAuthProviderError: 프로바이더 통신 오류
        """
        # 1. 프로바이더 확인
        self._provider_gateway.ensure_supported(request.provider)

        # 2. state 검증
        state_data = await self._state_store.consume(request.state)
        if state_data is None:
            logger.warning("Invalid or expired OAuth state", extra={"state": request.state[:8]})
            raise InvalidStateError("Invalid or expired state")

        if state_data.provider.lower() != request.provider.lower():
            logger.warning(
                "State provider mismatch",
                extra={"expected": state_data.provider, "actual": request.provider},
            )
            raise InvalidStateError("State provider mismatch")

        # 3. 사용자 정보 조회
        redirect_uri = (
            request.redirect_uri
            or state_data.redirect_uri
            or self._provider_gateway.default_redirect_uri(request.provider)
        )
        raw_payload = await self._provider_gateway.fetch_user_info(
            request.provider,
            code=request.code,
            redirect_uri=redirect_uri,
            state=request.state,
            code_verifier=state_data.code_verifier,
        )

        # 4. 로그인 완료
        return await self._complete_login.execute(
            CompleteLoginRequest(provider=request.provider, raw_payload=raw_payload)
        )
