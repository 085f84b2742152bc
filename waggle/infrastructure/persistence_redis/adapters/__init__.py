"""Redis adapters."""

from waggle.infrastructure.persistence_redis.adapters.session_store_redis import RedisSessionStore
from waggle.infrastructure.persistence_redis.adapters.state_store_redis import RedisStateStore

__all__ = ["RedisSessionStore", "RedisStateStore"]
