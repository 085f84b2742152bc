"""User exceptions."""

from waggle.application.users.exceptions.user import ReferenceNotFoundError, UserNotFoundError

__all__ = ["ReferenceNotFoundError", "UserNotFoundError"]
