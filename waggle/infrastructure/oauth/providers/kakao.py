"""Kakao OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import urlencode

from waggle.domain.enums import OAuthProvider as ProviderTag
from waggle.infrastructure.oauth.providers.base import OAuthProvider

if TYPE_CHECKING:
    import httpx

KAKAO_AUTH_URL = "https://kauth.kakao.com/oauth/authorize"
KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoOAuthProvider(OAuthProvider):
    """Kakao OAuth 프로바이더."""

    tag = ProviderTag.KAKAO

    @property
    def user_info_url(self) -> str:
        return KAKAO_PROFILE_URL

    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        redirect_uri: str | None,
    ) -> str:
        # 카카오는 scope 대신 개발자 콘솔의 동의항목을 사용
        params = {
            "client_id": self.client_id,
            "redirect_uri": redirect_uri or self.redirect_uri,
            "response_type": "code",
            "state": state,
        }
        if code_challenge:
            params["code_challenge"] = code_challenge
            params["code_challenge_method"] = "S256"
        return f"{KAKAO_AUTH_URL}?{urlencode(params)}"

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
            "redirect_uri": redirect_uri,
            "code": code,
        }
        if self.client_secret:
            data["client_secret"] = self.client_secret
        if code_verifier:
            data["code_verifier"] = code_verifier
        response = await client.post(KAKAO_TOKEN_URL, data=data)
        response.raise_for_status()
        return response.json()

    def _identity_fields(self, raw_payload: Mapping[str, Any]) -> tuple[Any, Any, Any, Any]:
        kakao_account = raw_payload.get("kakao_account") or {}
        profile = kakao_account.get("profile") or {}
        properties = raw_payload.get("properties") or {}
        return (
            raw_payload.get("id"),
            profile.get("nickname") or properties.get("nickname"),
            kakao_account.get("email"),
            profile.get("profile_image_url") or properties.get("profile_image"),
        )
