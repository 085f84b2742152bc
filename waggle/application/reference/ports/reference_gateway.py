"""Reference gateway port."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from waggle.domain.enums import ReferenceKind


class ReferenceQueryGateway(Protocol):
    """참조 데이터 조회 포트."""

    async def list_all(self, kind: ReferenceKind) -> Sequence[Any]:
        """종류별 전체 항목 (id 오름차순)."""
        ...

    async def get(self, kind: ReferenceKind, reference_id: int) -> Any | None:
        ...
