"""OAuth Authorize/Callback Interactor 단위 테스트."""

from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest

from waggle.application.auth.commands import CompleteLoginInteractor
from waggle.application.auth.dto import CompleteLoginRequest
from waggle.application.oauth.commands import OAuthAuthorizeInteractor, OAuthCallbackInteractor
from waggle.application.oauth.dto import OAuthAuthorizeRequest, OAuthCallbackRequest
from waggle.application.oauth.exceptions import InvalidStateError, UnsupportedProviderError
from waggle.application.oauth.ports import OAuthState


@pytest.fixture
def mock_state_store() -> MagicMock:
    store = MagicMock()
    store.save = AsyncMock()
    store.consume = AsyncMock()
    return store


@pytest.fixture
def mock_provider_gateway() -> MagicMock:
    gateway = MagicMock()
    gateway.get_authorization_url.return_value = "https://accounts.google.com/o/oauth2/v2/auth?x=1"
    gateway.default_redirect_uri.return_value = "http://localhost:8080/api/v1/auth/google/callback"
    gateway.fetch_user_info = AsyncMock(return_value={"sub": "g-1"})
    return gateway


class TestOAuthAuthorizeInteractor:
    @pytest.fixture
    def interactor(self, mock_state_store, mock_provider_gateway) -> OAuthAuthorizeInteractor:
        return OAuthAuthorizeInteractor(
            state_store=mock_state_store,
            provider_gateway=mock_provider_gateway,
            state_ttl_seconds=300,
        )

    @pytest.mark.asyncio
    async def test_execute_creates_state_and_returns_url(
        self, interactor, mock_state_store, mock_provider_gateway
    ) -> None:
        """인증 URL 생성 및 state 저장 테스트."""
        result = await interactor.execute(OAuthAuthorizeRequest(provider="google"))

        assert result.authorization_url == "https://accounts.google.com/o/oauth2/v2/auth?x=1"
        assert len(result.state) > 20

        state, data, ttl = mock_state_store.save.call_args[0]
        assert state == result.state
        assert data.provider == "google"
        assert data.redirect_uri == "http://localhost:8080/api/v1/auth/google/callback"
        assert data.code_verifier
        assert ttl == 300

    @pytest.mark.asyncio
    async def test_explicit_redirect_uri(self, interactor, mock_state_store) -> None:
        await interactor.execute(
            OAuthAuthorizeRequest(provider="kakao", redirect_uri="http://localhost/cb")
        )

        assert mock_state_store.save.call_args[0][1].redirect_uri == "http://localhost/cb"

    @pytest.mark.asyncio
    async def test_unsupported_provider(
        self, interactor, mock_state_store, mock_provider_gateway
    ) -> None:
        mock_provider_gateway.ensure_supported.side_effect = UnsupportedProviderError("facebook")

        with pytest.raises(UnsupportedProviderError):
            await interactor.execute(OAuthAuthorizeRequest(provider="facebook"))

        mock_state_store.save.assert_not_called()


class TestOAuthCallbackInteractor:
    @pytest.fixture
    def mock_complete_login(self) -> MagicMock:
        return create_autospec(CompleteLoginInteractor, instance=True)

    @pytest.fixture
    def interactor(
        self, mock_state_store, mock_provider_gateway, mock_complete_login
    ) -> OAuthCallbackInteractor:
        return OAuthCallbackInteractor(
            state_store=mock_state_store,
            provider_gateway=mock_provider_gateway,
            complete_login=mock_complete_login,
        )

    @pytest.mark.asyncio
    async def test_callback_completes_login(
        self, interactor, mock_state_store, mock_provider_gateway, mock_complete_login
    ) -> None:
        mock_state_store.consume.return_value = OAuthState(
            provider="google", redirect_uri="http://localhost/cb", code_verifier="v"
        )

        result = await interactor.execute(
            OAuthCallbackRequest(provider="google", code="code-1", state="state-1")
        )

        assert result is mock_complete_login.execute.return_value
        fetch_kwargs = mock_provider_gateway.fetch_user_info.call_args.kwargs
        assert fetch_kwargs["code"] == "code-1"
        assert fetch_kwargs["redirect_uri"] == "http://localhost/cb"
        assert fetch_kwargs["code_verifier"] == "v"
        mock_complete_login.execute.assert_awaited_once_with(
            CompleteLoginRequest(provider="google", raw_payload={"sub": "g-1"})
        )

    @pytest.mark.asyncio
    async def test_missing_state(
        self, interactor, mock_state_store, mock_provider_gateway, mock_complete_login
    ) -> None:
        mock_state_store.consume.return_value = None

        with pytest.raises(InvalidStateError):
            await interactor.execute(
                OAuthCallbackRequest(provider="google", code="code-1", state="state-1")
            )

        mock_provider_gateway.fetch_user_info.assert_not_called()
        mock_complete_login.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_state_provider_mismatch(
        self, interactor, mock_state_store, mock_complete_login
    ) -> None:
        mock_state_store.consume.return_value = OAuthState(provider="kakao")

        with pytest.raises(InvalidStateError):
            await interactor.execute(
                OAuthCallbackRequest(provider="google", code="code-1", state="state-1")
            )

        mock_complete_login.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_state_provider_compared_case_insensitively(
        self, interactor, mock_state_store, mock_complete_login
    ) -> None:
        """authorize는 /Google, callback은 /google로 들어와도 같은 프로바이더."""
        mock_state_store.consume.return_value = OAuthState(provider="Google")

        await interactor.execute(
            OAuthCallbackRequest(provider="google", code="code-1", state="state-1")
        )

        mock_complete_login.execute.assert_awaited_once()
