"""User DTOs."""

from waggle.application.users.dto.profile import (
    JobSelection,
    PortfolioUrlEntry,
    UpdateProfileRequest,
)

__all__ = ["JobSelection", "PortfolioUrlEntry", "UpdateProfileRequest"]
