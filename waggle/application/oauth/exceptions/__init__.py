"""OAuth exceptions."""

from waggle.application.oauth.exceptions.oauth import (
    InvalidStateError,
    OAuthProviderError,
    UnsupportedProviderError,
)

__all__ = [
    "InvalidStateError",
    "OAuthProviderError",
    "UnsupportedProviderError",
]
