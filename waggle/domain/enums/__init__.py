"""Domain Enums."""

from waggle.domain.enums.oauth_provider import OAuthProvider
from waggle.domain.enums.reference_kind import ReferenceKind

__all__ = ["OAuthProvider", "ReferenceKind"]
