"""Auth DTOs."""

from waggle.application.auth.dto.auth import (
    AccessTokenResponse,
    CompleteLoginRequest,
    ExchangeTemporaryTokenRequest,
    LoginResult,
    LogoutRequest,
    ReissueAccessTokenRequest,
)

__all__ = [
    "AccessTokenResponse",
    "CompleteLoginRequest",
    "ExchangeTemporaryTokenRequest",
    "LoginResult",
    "LogoutRequest",
    "ReissueAccessTokenRequest",
]
