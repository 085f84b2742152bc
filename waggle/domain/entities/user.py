"""User Entity.

ORM과 분리된 순수 도메인 엔티티입니다.
SQLAlchemy 매핑은 infrastructure/persistence_postgres/mappings/users.py에서 정의합니다.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

if TYPE_CHECKING:
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
    from waggle.domain.enums import OAuthProvider


class User:
    """사용자 엔티티.

    (provider, provider_id) 쌍으로 식별되는 OAuth 계정입니다.

    Attributes:
        id: 사용자 고유 식별자 (토큰 subject)
        provider / provider_id: OAuth 프로바이더와 프로바이더 사용자 ID
        name / email / profile_image_url: 최초 로그인 시 프로바이더 값 (이후 덮어쓰지 않음)
        detail: 자기소개
        prefer_tow / prefer_wow / prefer_sido: 선호 작업 시간대, 방식, 지역
        user_jobs ... user_portfolio_urls: 프로필 선택 항목
    """

    def __init__(
        self,
        *,
        provider: "OAuthProvider",
        provider_id: str,
        id: uuid.UUID | None = None,
        name: str = "",
        email: str = "",
        profile_image_url: str = "",
        detail: str | None = None,
    ) -> None:
        self.id = id or uuid.uuid4()
        self.provider = provider
        self.provider_id = provider_id
        self.name = name
        self.email = email
        self.profile_image_url = profile_image_url
        self.detail = detail
        self.prefer_tow: "TimeOfWorking | None" = None
        self.prefer_wow: "WaysOfWorking | None" = None
        self.prefer_sido: "Sido | None" = None
        self.user_jobs: list[UserJob] = []
        self.user_industries: list[UserIndustry] = []
        self.user_skills: list[UserSkill] = []
        self.user_week_days: list[UserWeekDays] = []
        self.user_portfolio_urls: list[UserPortfolioUrl] = []

    def clear_info(self) -> None:
        """프로필 수정 전 기존 선택 항목 초기화."""
        self.user_jobs.clear()
        self.user_industries.clear()
        self.user_skills.clear()
        self.user_week_days.clear()
        self.user_portfolio_urls.clear()
        self.prefer_tow = None
        self.prefer_wow = None
        self.prefer_sido = None
        self.detail = None


class UserJob:
    def __init__(self, *, job: "Job", year_cnt: int = 0) -> None:
        self.job = job
        self.year_cnt = year_cnt


class UserIndustry:
    def __init__(self, *, industry: "Industry") -> None:
        self.industry = industry


class UserSkill:
    def __init__(self, *, skill: "Skill") -> None:
        self.skill = skill


class UserWeekDays:
    def __init__(self, *, week_days: "WeekDays") -> None:
        self.week_days = week_days


class UserPortfolioUrl:
    def __init__(self, *, portfolio_url: "PortfolioUrl", url: str) -> None:
        self.portfolio_url = portfolio_url
        self.url = url
