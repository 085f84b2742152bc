"""Domain Exceptions."""

from waggle.domain.exceptions.auth import InvalidTokenError
from waggle.domain.exceptions.base import DomainError

__all__ = ["DomainError", "InvalidTokenError"]
