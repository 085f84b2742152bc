"""Naver OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import urlencode

from waggle.domain.enums import OAuthProvider as ProviderTag
from waggle.infrastructure.oauth.providers.base import OAuthProvider

if TYPE_CHECKING:
    import httpx

NAVER_AUTH_URL = "https://nid.naver.com/oauth2.0/authorize"
NAVER_TOKEN_URL = "https://nid.naver.com/oauth2.0/token"
NAVER_PROFILE_URL = "https://openapi.naver.com/v1/nid/me"


class NaverOAuthProvider(OAuthProvider):
    """Naver OAuth 프로바이더.

    사용자 정보는 응답의 ``response`` 객체 안에 있습니다.
    """

    tag = ProviderTag.NAVER
    supports_pkce = False

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("profile", "email")

    @property
    def user_info_url(self) -> str:
        return NAVER_PROFILE_URL

    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        redirect_uri: str | None,
    ) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": redirect_uri or self.redirect_uri,
            "response_type": "code",
            "state": state,
            "scope": " ".join(self.default_scopes),
        }
        return f"{NAVER_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(
        self,
        *,
        client: "httpx.AsyncClient",
        code: str,
        code_verifier: str | None,
        redirect_uri: str,
        state: str | None,
    ) -> dict:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": redirect_uri,
            "code": code,
            "state": state,
        }
        response = await client.post(NAVER_TOKEN_URL, data=data)
        response.raise_for_status()
        return response.json()

    def _identity_fields(self, raw_payload: Mapping[str, Any]) -> tuple[Any, Any, Any, Any]:
        response = raw_payload.get("response") or {}
        return (
            response.get("id"),
            response.get("name") or response.get("nickname"),
            response.get("email"),
            response.get("profile_image"),
        )
