"""OAuth DTOs."""

from waggle.application.oauth.dto.oauth import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
    OAuthCallbackRequest,
)

__all__ = [
    "OAuthAuthorizeRequest",
    "OAuthAuthorizeResponse",
    "OAuthCallbackRequest",
]
