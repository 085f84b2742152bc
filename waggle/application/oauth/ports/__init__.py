"""OAuth ports."""

from waggle.application.oauth.ports.oauth_state_store import OAuthState, OAuthStateStore
from waggle.application.oauth.ports.provider_gateway import (
    IdentityExtractor,
    OAuthProviderGateway,
)

__all__ = [
    "IdentityExtractor",
    "OAuthProviderGateway",
    "OAuthState",
    "OAuthStateStore",
]
