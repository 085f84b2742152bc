"""User services."""

from waggle.application.users.services.identity_resolver import (
    UserIdentityResolver,
    extract_bearer_token,
)

__all__ = ["UserIdentityResolver", "extract_bearer_token"]
