"""Auth exceptions."""

from waggle.application.auth.exceptions.auth import (
    AuthenticationError,
    InvalidAccessTokenError,
    InvalidRefreshTokenError,
    InvalidTemporaryTokenError,
    RefreshTokenNotFoundError,
)
from waggle.application.auth.exceptions.session_store import SessionStoreUnavailableError

__all__ = [
    "AuthenticationError",
    "InvalidAccessTokenError",
    "InvalidRefreshTokenError",
    "InvalidTemporaryTokenError",
    "RefreshTokenNotFoundError",
    "SessionStoreUnavailableError",
]
