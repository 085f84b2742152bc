"""Reference Tables Mapping."""

from sqlalchemy import Column, DateTime, Integer, String, Table, func

from waggle.domain.entities.reference import (
    Industry,
    Job,
    PortfolioUrl,
    Sido,
    Skill,
    TimeOfWorking,
    WaysOfWorking,
    WeekDays,
)
from waggle.infrastructure.persistence_postgres.registry import mapper_registry


def _reference_table(name: str) -> Table:
    return Table(
        name,
        mapper_registry.metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String(100), nullable=False),
        Column(
            "created_at",
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
        ),
    )


skill_table = _reference_table("skill")
industry_table = _reference_table("industry")
job_table = _reference_table("job")
sido_table = _reference_table("sido")
portfolio_url_table = _reference_table("portfolio_url")
tow_type_table = _reference_table("tow_type")
wow_type_table = _reference_table("wow_type")

week_days_type_table = Table(
    "week_days_type",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("short_name", String(10), nullable=False),
    Column("full_name", String(20), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

REFERENCE_TABLES = {
    Skill: skill_table,
    Industry: industry_table,
    Job: job_table,
    Sido: sido_table,
    PortfolioUrl: portfolio_url_table,
    TimeOfWorking: tow_type_table,
    WaysOfWorking: wow_type_table,
    WeekDays: week_days_type_table,
}


def start_reference_mappers() -> None:
    """참조 엔티티 매퍼 시작."""
    for entity, table in REFERENCE_TABLES.items():
        if hasattr(entity, "__mapper__"):
            continue
        mapper_registry.map_imperatively(entity, table)
