"""Profile DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, slots=True)
class JobSelection:
    job_id: int
    year_cnt: int = 0


@dataclass(frozen=True, slots=True)
class PortfolioUrlEntry:
    portfolio_url_id: int
    url: str


@dataclass(frozen=True, slots=True)
class UpdateProfileRequest:
    """프로필 수정 요청.

    목록 항목은 기존 선택을 모두 대체합니다.
    name이 None이면 기존 이름을 유지합니다.
    """

    user_id: UUID
    name: str | None = None
    jobs: tuple[JobSelection, ...] = field(default_factory=tuple)
    industry_ids: tuple[int, ...] = field(default_factory=tuple)
    skill_ids: tuple[int, ...] = field(default_factory=tuple)
    prefer_week_day_ids: tuple[int, ...] = field(default_factory=tuple)
    prefer_tow_id: int | None = None
    prefer_wow_id: int | None = None
    prefer_sido_id: int | None = None
    detail: str | None = None
    portfolio_urls: tuple[PortfolioUrlEntry, ...] = field(default_factory=tuple)
