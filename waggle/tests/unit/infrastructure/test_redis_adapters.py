"""Redis Adapters 단위 테스트.

Redis 클라이언트를 Mock하여 어댑터 로직을 테스트합니다.
"""

import json
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from waggle.application.auth.exceptions import SessionStoreUnavailableError
from waggle.application.oauth.ports import OAuthState
from waggle.infrastructure.persistence_redis.adapters.session_store_redis import (
    RedisSessionStore,
)
from waggle.infrastructure.persistence_redis.adapters.state_store_redis import RedisStateStore
from waggle.infrastructure.persistence_redis.constants import STATE_KEY_PREFIX


@pytest.fixture
def mock_redis() -> AsyncMock:
    return AsyncMock()


class TestRedisSessionStore:
    """RedisSessionStore 테스트."""

    @pytest.fixture
    def store(self, mock_redis: AsyncMock) -> RedisSessionStore:
        return RedisSessionStore(redis=mock_redis)

    @pytest.mark.asyncio
    async def test_put_uses_set_with_millisecond_ttl(
        self, store: RedisSessionStore, mock_redis: AsyncMock
    ) -> None:
        await store.put("refresh:u-1", "token", timedelta(days=14))

        mock_redis.set.assert_awaited_once_with("refresh:u-1", "token", px=14 * 24 * 3600 * 1000)

    @pytest.mark.asyncio
    async def test_put_rejects_non_positive_ttl(
        self, store: RedisSessionStore, mock_redis: AsyncMock
    ) -> None:
        with pytest.raises(ValueError):
            await store.put("temp:h", "token", timedelta(0))

        mock_redis.set.assert_not_called()

    @pytest.mark.asyncio
    async def test_get(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        mock_redis.get.return_value = "token"

        assert await store.get("refresh:u-1") == "token"
        mock_redis.get.assert_awaited_once_with("refresh:u-1")

    @pytest.mark.asyncio
    async def test_get_missing(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        mock_redis.get.return_value = None

        assert await store.get("refresh:u-1") is None

    @pytest.mark.asyncio
    async def test_delete(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        await store.delete("refresh:u-1")

        mock_redis.delete.assert_awaited_once_with("refresh:u-1")

    @pytest.mark.asyncio
    async def test_pop_uses_getdel(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        mock_redis.getdel.return_value = "access"

        assert await store.pop("temp:h") == "access"
        mock_redis.getdel.assert_awaited_once_with("temp:h")
        mock_redis.get.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [RedisConnectionError("down"), RedisTimeoutError("slow")])
    @pytest.mark.parametrize("method", ["get", "delete", "pop"])
    async def test_redis_errors_mapped(
        self,
        store: RedisSessionStore,
        mock_redis: AsyncMock,
        error: Exception,
        method: str,
    ) -> None:
        mock_redis.get.side_effect = error
        mock_redis.delete.side_effect = error
        mock_redis.getdel.side_effect = error

        with pytest.raises(SessionStoreUnavailableError):
            await getattr(store, method)("refresh:u-1")

    @pytest.mark.asyncio
    async def test_put_error_mapped(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        mock_redis.set.side_effect = RedisConnectionError("down")

        with pytest.raises(SessionStoreUnavailableError):
            await store.put("refresh:u-1", "token", timedelta(minutes=1))


class TestRedisStateStore:
    """RedisStateStore 테스트."""

    @pytest.fixture
    def store(self, mock_redis: AsyncMock) -> RedisStateStore:
        return RedisStateStore(redis=mock_redis)

    @pytest.mark.asyncio
    async def test_save_state(self, store: RedisStateStore, mock_redis: AsyncMock) -> None:
        """상태 저장 테스트."""
        oauth_state = OAuthState(
            provider="google",
            redirect_uri="http://localhost/callback",
            code_verifier="code-verifier-123",
        )

        await store.save("state-1", oauth_state, ttl_seconds=600)

        key, ttl, value = mock_redis.setex.call_args[0]
        assert key == f"{STATE_KEY_PREFIX}state-1"
        assert ttl == 600
        assert json.loads(value) == {
            "provider": "google",
            "redirect_uri": "http://localhost/callback",
            "code_verifier": "code-verifier-123",
        }

    @pytest.mark.asyncio
    async def test_consume_state(self, store: RedisStateStore, mock_redis: AsyncMock) -> None:
        mock_redis.getdel.return_value = json.dumps(
            {"provider": "kakao", "redirect_uri": None, "code_verifier": "v"}
        )

        result = await store.consume("state-1")

        assert result == OAuthState(provider="kakao", redirect_uri=None, code_verifier="v")
        mock_redis.getdel.assert_awaited_once_with(f"{STATE_KEY_PREFIX}state-1")

    @pytest.mark.asyncio
    async def test_consume_missing(self, store: RedisStateStore, mock_redis: AsyncMock) -> None:
        mock_redis.getdel.return_value = None

        assert await store.consume("state-1") is None

    @pytest.mark.asyncio
    async def test_consume_error_mapped(
        self, store: RedisStateStore, mock_redis: AsyncMock
    ) -> None:
        mock_redis.getdel.side_effect = RedisConnectionError("down")

        with pytest.raises(SessionStoreUnavailableError):
            await store.consume("state-1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["{not json", json.dumps(["google"]), json.dumps({})])
    async def test_consume_undecodable_value_is_missing(
        self, store: RedisStateStore, mock_redis: AsyncMock, value: str
    ) -> None:
        mock_redis.getdel.return_value = value

        assert await store.consume("state-1") is None

    @pytest.mark.asyncio
    async def test_save_error_mapped(self, store: RedisStateStore, mock_redis: AsyncMock) -> None:
        mock_redis.setex.side_effect = RedisConnectionError("down")

        with pytest.raises(SessionStoreUnavailableError):
            await store.save("state-1", OAuthState(provider="google"))
