"""Redis Persistence Layer."""

from waggle.infrastructure.persistence_redis.adapters import RedisSessionStore, RedisStateStore
from waggle.infrastructure.persistence_redis.client import get_session_redis

__all__ = ["RedisSessionStore", "RedisStateStore", "get_session_redis"]
