"""Domain Value Objects."""

from waggle.domain.value_objects.identity import Identity

__all__ = ["Identity"]
