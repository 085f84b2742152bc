"""Google OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import urlencode

from waggle.domain.enums import OAuthProvider as ProviderTag
from waggle.infrastructure.oauth.providers.base import OAuthProvider

if TYPE_CHECKING:
    import httpx

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


class GoogleOAuthProvider(OAuthProvider):
    """Google OAuth 프로바이더."""

    tag = ProviderTag.GOOGLE

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid", "email", "profile")

    @property
    def user_info_url(self) -> str:
        return GOOGLE_PROFILE_URL

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
            "include_granted_scopes": "true",
        }
        if code_challenge:
            params["code_challenge"] = code_challenge
            params["code_challenge_method"] = "S256"
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

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
        }
        if code_verifier:
            data["code_verifier"] = code_verifier
        response = await client.post(GOOGLE_TOKEN_URL, data=data)
        response.raise_for_status()
        return response.json()

    def _identity_fields(self, raw_payload: Mapping[str, Any]) -> tuple[Any, Any, Any, Any]:
        return (
            raw_payload.get("sub"),
            raw_payload.get("name") or raw_payload.get("given_name"),
            raw_payload.get("email"),
            raw_payload.get("picture"),
        )
