"""Reference Queries."""

from waggle.application.reference.queries.list_references import (
    ListReferencesQuery,
    ReferenceItem,
)

__all__ = ["ListReferencesQuery", "ReferenceItem"]
