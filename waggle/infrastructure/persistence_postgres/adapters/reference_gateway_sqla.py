"""SQLAlchemy implementation of reference gateway."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from waggle.domain.entities import (
    Industry,
    Job,
    PortfolioUrl,
    Sido,
    Skill,
    TimeOfWorking,
    WaysOfWorking,
    WeekDays,
)
from waggle.domain.enums import ReferenceKind
from waggle.infrastructure.persistence_postgres.mappings.reference import REFERENCE_TABLES

REFERENCE_MODELS: dict[ReferenceKind, type] = {
    ReferenceKind.SKILL: Skill,
    ReferenceKind.INDUSTRY: Industry,
    ReferenceKind.JOB: Job,
    ReferenceKind.SIDO: Sido,
    ReferenceKind.PORTFOLIO_URL: PortfolioUrl,
    ReferenceKind.TIME_OF_WORKING: TimeOfWorking,
    ReferenceKind.WAYS_OF_WORKING: WaysOfWorking,
    ReferenceKind.WEEK_DAYS: WeekDays,
}


class SqlaReferenceQueryGateway:
    """참조 데이터 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self, kind: ReferenceKind) -> Sequence[Any]:
        model = REFERENCE_MODELS[kind]
        table = REFERENCE_TABLES[model]
        result = await self._session.execute(select(model).order_by(table.c.id))
        return result.scalars().all()

    async def get(self, kind: ReferenceKind, reference_id: int) -> Any | None:
        return await self._session.get(REFERENCE_MODELS[kind], reference_id)
