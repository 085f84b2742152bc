"""ListReferences Query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from waggle.domain.enums import ReferenceKind

if TYPE_CHECKING:
    from waggle.application.reference.ports import ReferenceQueryGateway


@dataclass(frozen=True, slots=True)
class ReferenceItem:
    id: int
    name: str
    short_name: str | None = None
    full_name: str | None = None


class ListReferencesQuery:
    """참조 데이터 목록 조회."""

    def __init__(self, reference_gateway: "ReferenceQueryGateway") -> None:
        self._reference_gateway = reference_gateway

    async def execute(self, kind: ReferenceKind) -> list[ReferenceItem]:
        rows = await self._reference_gateway.list_all(kind)
        return [
            ReferenceItem(
                id=row.id,
                name=row.name,
                short_name=getattr(row, "short_name", None),
                full_name=getattr(row, "full_name", None),
            )
            for row in rows
        ]
