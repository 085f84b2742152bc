"""CompleteLoginInteractor 단위 테스트."""

from unittest.mock import AsyncMock
from urllib.parse import parse_qs, urlparse

import pytest

from waggle.application.auth.commands import (
    CompleteLoginInteractor,
    ExchangeTemporaryTokenInteractor,
)
from waggle.application.auth.dto import CompleteLoginRequest, ExchangeTemporaryTokenRequest
from waggle.application.auth.exceptions import SessionStoreUnavailableError
from waggle.application.common.exceptions import PersistenceConflictError
from waggle.application.oauth.exceptions import OAuthProviderError, UnsupportedProviderError
from waggle.application.users.services import UserIdentityResolver
from waggle.domain.entities import User
from waggle.domain.enums import OAuthProvider
from waggle.infrastructure.oauth.registry import ProviderRegistry

GOOGLE_PAYLOAD = {"sub": "g-1", "name": "Ana", "email": "ana@x.com"}


def _query(url: str) -> dict[str, str]:
    return {key: values[0] for key, values in parse_qs(urlparse(url).query).items()}


class TestCompleteLoginInteractor:
    """CompleteLoginInteractor 테스트."""

    @pytest.fixture
    def identity_resolver(self, token_codec, user_gateway) -> UserIdentityResolver:
        return UserIdentityResolver(
            token_codec=token_codec,
            user_query_gateway=user_gateway,
            user_command_gateway=user_gateway,
        )

    @pytest.fixture
    def interactor(
        self,
        identity_resolver,
        token_codec,
        session_store,
        mock_transaction_manager,
        auth_config,
    ) -> CompleteLoginInteractor:
        return CompleteLoginInteractor(
            identity_extractor=ProviderRegistry(),
            identity_resolver=identity_resolver,
            token_codec=token_codec,
            session_store=session_store,
            transaction_manager=mock_transaction_manager,
            auth_config=auth_config,
        )

    @pytest.mark.asyncio
    async def test_first_login_creates_user(
        self, interactor, session_store, user_gateway, token_codec, mock_transaction_manager
    ) -> None:
        """최초 로그인: 사용자 생성, 토큰 저장, is_exist_user=false."""
        # Act
        result = await interactor.execute(
            CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
        )

        # Assert
        assert result.is_new_user is True
        created = user_gateway.users[result.user_id]
        assert created.provider_id == "g-1"
        assert created.name == "Ana"
        assert created.email == "ana@x.com"
        assert created.profile_image_url == ""

        assert session_store.data[f"refresh:{result.user_id}"] == result.refresh_token
        assert token_codec.verify_subject(result.refresh_token) == str(result.user_id)

        query = _query(result.redirect_url)
        assert result.redirect_url.startswith("http://localhost:5173/login/process?")
        assert query["is_exist_user"] == "false"
        assert query["temporary_token"] == result.temporary_token

        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_second_login_reuses_user_and_overwrites_refresh(
        self, interactor, session_store, user_gateway
    ) -> None:
        first = await interactor.execute(
            CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
        )
        second = await interactor.execute(
            CompleteLoginRequest(
                provider="google",
                raw_payload={"sub": "g-1", "name": "Renamed", "email": "other@x.com"},
            )
        )

        assert second.user_id == first.user_id
        assert second.is_new_user is False
        assert _query(second.redirect_url)["is_exist_user"] == "true"
        assert len(user_gateway.users) == 1
        # 기존 프로필은 덮어쓰지 않음
        assert user_gateway.users[first.user_id].name == "Ana"
        assert session_store.data[f"refresh:{first.user_id}"] == second.refresh_token
        assert second.refresh_token != first.refresh_token

    @pytest.mark.asyncio
    async def test_same_provider_id_on_other_provider_is_new_user(
        self, interactor, user_gateway
    ) -> None:
        await interactor.execute(CompleteLoginRequest(provider="google", raw_payload={"sub": "1"}))
        result = await interactor.execute(CompleteLoginRequest(provider="kakao", raw_payload={"id": 1}))

        assert result.is_new_user is True
        assert len(user_gateway.users) == 2

    @pytest.mark.asyncio
    async def test_temporary_token_holds_access_token(
        self, interactor, session_store, token_codec, auth_config
    ) -> None:
        result = await interactor.execute(
            CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
        )

        key = f"temp:{result.temporary_token}"
        access_token = session_store.data[key]
        assert session_store.ttls[key] == auth_config.temporary_token_ttl
        assert token_codec.verify_subject(access_token) == str(result.user_id)
        assert access_token != result.refresh_token

    @pytest.mark.asyncio
    async def test_refresh_max_age_in_seconds(self, interactor, auth_config) -> None:
        result = await interactor.execute(
            CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
        )

        assert result.refresh_max_age == 14 * 24 * 60 * 60
        assert result.refresh_max_age == int(auth_config.refresh_token_ttl.total_seconds())

    @pytest.mark.asyncio
    async def test_login_then_exchange(self, interactor, session_store) -> None:
        """로그인 후 임시 토큰 교환은 한 번만 성공."""
        from waggle.application.auth.exceptions import InvalidTemporaryTokenError

        result = await interactor.execute(
            CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
        )
        exchange = ExchangeTemporaryTokenInteractor(session_store=session_store)

        first = await exchange.execute(ExchangeTemporaryTokenRequest(result.temporary_token))
        assert first.access_token

        with pytest.raises(InvalidTemporaryTokenError):
            await exchange.execute(ExchangeTemporaryTokenRequest(result.temporary_token))

    @pytest.mark.asyncio
    async def test_unsupported_provider_has_no_side_effects(
        self, interactor, session_store, user_gateway, mock_transaction_manager
    ) -> None:
        with pytest.raises(UnsupportedProviderError):
            await interactor.execute(
                CompleteLoginRequest(provider="facebook", raw_payload={"id": "f-1"})
            )

        assert session_store.calls == []
        assert user_gateway.users == {}
        mock_transaction_manager.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_payload_without_id_rejected(self, interactor, session_store) -> None:
        with pytest.raises(OAuthProviderError):
            await interactor.execute(CompleteLoginRequest(provider="google", raw_payload={}))

        assert session_store.calls == []

    @pytest.mark.asyncio
    async def test_session_store_failure_skips_commit(
        self, interactor, session_store, mock_transaction_manager
    ) -> None:
        session_store.put = AsyncMock(side_effect=SessionStoreUnavailableError())

        with pytest.raises(SessionStoreUnavailableError):
            await interactor.execute(
                CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
            )

        mock_transaction_manager.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_commit_failure_discards_session_keys(
        self, interactor, session_store, mock_transaction_manager
    ) -> None:
        """커밋 실패 시 저장했던 refresh/temp 키가 남지 않음."""
        mock_transaction_manager.commit.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError):
            await interactor.execute(
                CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
            )

        assert session_store.data == {}
        assert [op for op, _ in session_store.calls].count("delete") == 2

    @pytest.mark.asyncio
    async def test_conflicting_first_login_resolves_to_existing_user(
        self, interactor, session_store, user_gateway, mock_transaction_manager
    ) -> None:
        """동시 최초 로그인에서 진 쪽은 이긴 쪽 사용자로 로그인."""
        winner = User(provider=OAuthProvider.GOOGLE, provider_id="g-1", name="Winner")

        async def conflict_once() -> None:
            if mock_transaction_manager.commit.await_count == 1:
                # 롤백되어 패배한 사용자는 사라지고 승자만 남음
                user_gateway.users.clear()
                user_gateway.users[winner.id] = winner
                raise PersistenceConflictError()

        mock_transaction_manager.commit.side_effect = conflict_once

        result = await interactor.execute(
            CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
        )

        assert result.user_id == winner.id
        assert result.is_new_user is False
        assert _query(result.redirect_url)["is_exist_user"] == "true"
        assert mock_transaction_manager.commit.await_count == 2
        assert set(session_store.data) == {
            f"refresh:{winner.id}",
            f"temp:{result.temporary_token}",
        }

    @pytest.mark.asyncio
    async def test_repeated_conflict_propagates(
        self, interactor, session_store, mock_transaction_manager
    ) -> None:
        mock_transaction_manager.commit.side_effect = PersistenceConflictError()

        with pytest.raises(PersistenceConflictError):
            await interactor.execute(
                CompleteLoginRequest(provider="google", raw_payload=GOOGLE_PAYLOAD)
            )

        assert mock_transaction_manager.commit.await_count == 2
        assert session_store.data == {}
