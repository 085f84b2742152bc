"""Auth ports."""

from waggle.application.auth.ports.session_store import (
    SessionStore,
    refresh_token_key,
    temporary_token_key,
)
from waggle.application.auth.ports.token_codec import TokenCodec

__all__ = [
    "SessionStore",
    "TokenCodec",
    "refresh_token_key",
    "temporary_token_key",
]
