"""OAuth Provider Base Class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping

from waggle.application.oauth.exceptions import OAuthProviderError
from waggle.domain.enums import OAuthProvider as ProviderTag
from waggle.domain.value_objects import Identity

if TYPE_CHECKING:
    import httpx


def _text(value: Any) -> str:
    """부가 필드 정규화 (없으면 빈 문자열)."""
    if value is None:
        return ""
    return str(value)


class OAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    인증 URL 생성, 코드 교환, 사용자 정보 조회(HTTP)와
    사용자 정보 응답 → Identity 정규화(순수 함수)를 함께 담당합니다.
    """

    tag: ProviderTag
    supports_pkce: bool = True

    def __init__(
        self,
        *,
        client_id: str = "",
        client_secret: str | None = None,
        redirect_uri: str | None = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    @property
    def name(self) -> str:
        return self.tag.value

    @property
    def default_scopes(self) -> tuple[str, ...]:
        """기본 스코프."""
        return ()

    @abstractmethod
    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        redirect_uri: str | None,
    ) -> str:
        """인증 URL 생성."""
        raise NotImplementedError

    @abstractmethod
    async def exchange_code(
        self,
        *,
        client: "httpx.AsyncClient",
        code: str,
        code_verifier: str | None,
        redirect_uri: str,
        state: str | None,
    ) -> dict:
        """인증 코드로 토큰 교환."""
        raise NotImplementedError

    @property
    @abstractmethod
    def user_info_url(self) -> str:
        raise NotImplementedError

    async def fetch_user_info(
        self,
        *,
        client: "httpx.AsyncClient",
        tokens: dict,
    ) -> dict[str, Any]:
        """원본 사용자 정보 응답 조회."""
        access_token = tokens.get("access_token")
        if not access_token:
            raise OAuthProviderError(self.name, "Missing access token")
        headers = {"Authorization": f"Bearer {access_token}"}
        response = await client.get(self.user_info_url, headers=headers)
        response.raise_for_status()
        return response.json()

    @abstractmethod
    def _identity_fields(self, raw_payload: Mapping[str, Any]) -> tuple[Any, Any, Any, Any]:
        """(provider_id, display_name, email, avatar_url) 원본 값."""
        raise NotImplementedError

    def extract_identity(self, raw_payload: Mapping[str, Any]) -> Identity:
        """사용자 정보 응답 → Identity.

        Raises:
            OAuthProviderError: 프로바이더 사용자 ID가 없는 경우
        """
        provider_id, display_name, email, avatar_url = self._identity_fields(raw_payload or {})
        if provider_id is None or str(provider_id) == "":
            raise OAuthProviderError(self.name, "Missing provider user id")
        return Identity(
            provider=self.tag,
            provider_id=str(provider_id),
            display_name=_text(display_name),
            email=_text(email),
            avatar_url=_text(avatar_url),
        )
