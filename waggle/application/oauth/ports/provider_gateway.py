"""OAuthProviderGateway Port.

OAuth 프로바이더(Google, Kakao, Naver)와의 통신 및 응답 정규화를 담당하는 인터페이스입니다.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from waggle.domain.value_objects.identity import Identity


class IdentityExtractor(Protocol):
    """프로바이더 응답 → Identity 변환 포트."""

    def extract_identity(self, provider: str, raw_payload: Mapping[str, Any]) -> Identity:
        """프로바이더 태그로 어댑터를 선택하여 Identity를 추출합니다.

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
            OAuthProviderError: 응답에 프로바이더 사용자 ID가 없는 경우
        """
        ...


class OAuthProviderGateway(Protocol):
    """OAuth 프로바이더 Gateway 인터페이스.

    구현체:
        - OAuthClientImpl (infrastructure/oauth/)
    """

    def ensure_supported(self, provider: str) -> None:
        """Raises UnsupportedProviderError."""
        ...

    def get_authorization_url(
        self,
        provider: str,
        *,
        redirect_uri: str,
        state: str,
        code_verifier: str | None = None,
    ) -> str:
        """인증 URL 생성."""
        ...

    def default_redirect_uri(self, provider: str) -> str:
        """프로바이더 콜백 URL."""
        ...

    async def fetch_user_info(
        self,
        provider: str,
        *,
        code: str,
        redirect_uri: str,
        state: str,
        code_verifier: str | None = None,
    ) -> dict[str, Any]:
        """인증 코드로 토큰 교환 후 원본 사용자 정보 응답을 반환합니다.

        Raises:
            OAuthProviderError: 프로바이더 오류
        """
        ...
