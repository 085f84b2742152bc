"""OAuth Provider 어댑터 단위 테스트.

프로바이더 응답 → Identity 정규화와 레지스트리 디스패치를 테스트합니다.
"""

from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from waggle.application.oauth.exceptions import OAuthProviderError, UnsupportedProviderError
from waggle.domain.enums import OAuthProvider as ProviderTag
from waggle.infrastructure.oauth.client import OAuthClientImpl
from waggle.infrastructure.oauth.registry import ProviderRegistry


@pytest.fixture
def registry() -> ProviderRegistry:
    return ProviderRegistry()


class TestGoogleIdentity:
    def test_full_payload(self, registry: ProviderRegistry) -> None:
        identity = registry.extract_identity(
            "google",
            {"sub": "g-1", "name": "Ana", "email": "ana@x.com", "picture": "https://img/a.png"},
        )

        assert identity.provider == ProviderTag.GOOGLE
        assert identity.provider_id == "g-1"
        assert identity.display_name == "Ana"
        assert identity.email == "ana@x.com"
        assert identity.avatar_url == "https://img/a.png"

    def test_missing_optional_fields_become_empty(self, registry: ProviderRegistry) -> None:
        identity = registry.extract_identity("google", {"sub": "g-2"})

        assert identity.display_name == ""
        assert identity.email == ""
        assert identity.avatar_url == ""

    def test_missing_sub_raises(self, registry: ProviderRegistry) -> None:
        with pytest.raises(OAuthProviderError):
            registry.extract_identity("google", {"email": "ana@x.com"})


class TestKakaoIdentity:
    def test_nested_account_payload(self, registry: ProviderRegistry) -> None:
        payload = {
            "id": 123456,
            "kakao_account": {
                "email": "k@x.com",
                "profile": {"nickname": "Kim", "profile_image_url": "https://img/k.png"},
            },
        }

        identity = registry.extract_identity("kakao", payload)

        assert identity.provider == ProviderTag.KAKAO
        assert identity.provider_id == "123456"
        assert identity.display_name == "Kim"
        assert identity.email == "k@x.com"
        assert identity.avatar_url == "https://img/k.png"

    def test_properties_fallback(self, registry: ProviderRegistry) -> None:
        payload = {"id": 1, "properties": {"nickname": "Lee", "profile_image": "https://img/l"}}

        identity = registry.extract_identity("kakao", payload)

        assert identity.display_name == "Lee"
        assert identity.avatar_url == "https://img/l"
        assert identity.email == ""

    def test_null_account_tolerated(self, registry: ProviderRegistry) -> None:
        identity = registry.extract_identity("kakao", {"id": 7, "kakao_account": None})

        assert identity.provider_id == "7"
        assert identity.email == ""


class TestNaverIdentity:
    def test_response_envelope(self, registry: ProviderRegistry) -> None:
        payload = {
            "resultcode": "00",
            "response": {
                "id": "n-1",
                "name": "Park",
                "email": "p@x.com",
                "profile_image": "https://img/p.png",
            },
        }

        identity = registry.extract_identity("naver", payload)

        assert identity.provider == ProviderTag.NAVER
        assert identity.provider_id == "n-1"
        assert identity.display_name == "Park"
        assert identity.email == "p@x.com"

    def test_missing_envelope_raises(self, registry: ProviderRegistry) -> None:
        with pytest.raises(OAuthProviderError):
            registry.extract_identity("naver", {"id": "n-1"})


class TestProviderRegistry:
    @pytest.mark.parametrize("provider", ["facebook", "", "github"])
    def test_unsupported_provider(self, registry: ProviderRegistry, provider: str) -> None:
        with pytest.raises(UnsupportedProviderError):
            registry.extract_identity(provider, {"sub": "x"})

    def test_tag_is_case_insensitive(self, registry: ProviderRegistry) -> None:
        assert registry.get("Google").tag == ProviderTag.GOOGLE

    def test_redirect_uri_from_template(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from waggle.setup.config import Settings

        monkeypatch.setenv(
            "WAGGLE_OAUTH_REDIRECT_TEMPLATE", "https://api.example.com/auth/{provider}/cb"
        )
        monkeypatch.setenv("WAGGLE_KAKAO_REDIRECT_URI", "https://kakao.example.com/cb")

        registry = ProviderRegistry(Settings())

        assert registry.get("google").redirect_uri == "https://api.example.com/auth/google/cb"
        assert registry.get("kakao").redirect_uri == "https://kakao.example.com/cb"


class TestOAuthClientImpl:
    @pytest.fixture
    def client(self, registry: ProviderRegistry) -> OAuthClientImpl:
        return OAuthClientImpl(registry, timeout_seconds=1.0)

    def test_google_url_includes_pkce(self, client: OAuthClientImpl) -> None:
        url = client.get_authorization_url(
            "google",
            redirect_uri="http://localhost/cb",
            state="state-1",
            code_verifier="verifier",
        )

        params = parse_qs(urlparse(url).query)
        assert params["state"] == ["state-1"]
        assert params["code_challenge_method"] == ["S256"]
        assert params["redirect_uri"] == ["http://localhost/cb"]

    def test_naver_url_has_no_pkce(self, client: OAuthClientImpl) -> None:
        url = client.get_authorization_url(
            "naver",
            redirect_uri="http://localhost/cb",
            state="state-1",
            code_verifier="verifier",
        )

        assert "code_challenge" not in parse_qs(urlparse(url).query)

    def test_unsupported_provider(self, client: OAuthClientImpl) -> None:
        with pytest.raises(UnsupportedProviderError):
            client.ensure_supported("facebook")

    @pytest.mark.asyncio
    async def test_http_error_mapped(self, client: OAuthClientImpl) -> None:
        request = httpx.Request("POST", "https://oauth2.googleapis.com/token")
        response = httpx.Response(401, request=request)
        error = httpx.HTTPStatusError("unauthorized", request=request, response=response)

        with patch.object(
            client._registry.get("google"), "exchange_code", AsyncMock(side_effect=error)
        ):
            with pytest.raises(OAuthProviderError):
                await client.fetch_user_info(
                    "google", code="c", redirect_uri="http://localhost/cb", state="s"
                )

    @pytest.mark.asyncio
    async def test_returns_raw_payload(self, client: OAuthClientImpl) -> None:
        provider = client._registry.get("google")
        payload = {"sub": "g-1"}

        with patch.object(
            provider, "exchange_code", AsyncMock(return_value={"access_token": "at"})
        ), patch.object(provider, "fetch_user_info", AsyncMock(return_value=payload)) as fetch:
            result = await client.fetch_user_info(
                "google", code="c", redirect_uri="http://localhost/cb", state="s"
            )

        assert result == payload
        assert fetch.await_args.kwargs["tokens"] == {"access_token": "at"}

    @pytest.mark.asyncio
    async def test_missing_access_token(self, registry: ProviderRegistry) -> None:
        with pytest.raises(OAuthProviderError):
            await registry.get("kakao").fetch_user_info(client=MagicMock(), tokens={})
