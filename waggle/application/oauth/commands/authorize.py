"""OAuthAuthorize Command.

OAuth 인증 URL 생성 Use Case입니다.
"""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

from waggle.application.oauth.dto import OAuthAuthorizeRequest, OAuthAuthorizeResponse
from waggle.application.oauth.ports import OAuthState

if TYPE_CHECKING:
    from waggle.application.oauth.ports import OAuthProviderGateway, OAuthStateStore


class OAuthAuthorizeInteractor:
    """OAuth 인증 URL 생성 Interactor.

    Workflow:
        1. 프로바이더 지원 여부 확인
        2. 랜덤 state 생성 (CSRF 방지)
        3. PKCE code_verifier 생성
        4. state 데이터 저장
        5. 인증 URL 반환
    """

    def __init__(
        self,
        state_store: "OAuthStateStore",
        provider_gateway: "OAuthProviderGateway",
        state_ttl_seconds: int = 600,
    ) -> None:
        self._state_store = state_store
        self._provider_gateway = provider_gateway
        self._state_ttl_seconds = state_ttl_seconds

    async def execute(self, request: OAuthAuthorizeRequest) -> OAuthAuthorizeResponse:
        """
        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
        """
        # 1. 프로바이더 확인
        self._provider_gateway.ensure_supported(request.provider)

        # 2. state 생성
        state = secrets.token_urlsafe(32)

        # 3. PKCE code_verifier 생성
        code_verifier = secrets.token_urlsafe(64)

        # 4. state 저장
        redirect_uri = request.redirect_uri or self._provider_gateway.default_redirect_uri(
            request.provider
        )
        await self._state_store.save(
            state,
            OAuthState(
                provider=request.provider,
                redirect_uri=redirect_uri,
                code_verifier=code_verifier,
            ),
            self._state_ttl_seconds,
        )

        # 5. 인증 URL
        authorization_url = self._provider_gateway.get_authorization_url(
            request.provider,
            redirect_uri=redirect_uri,
            state=state,
            code_verifier=code_verifier,
        )
        return OAuthAuthorizeResponse(authorization_url=authorization_url, state=state)
