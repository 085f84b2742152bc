"""User HTTP Schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from waggle.domain.entities import User


class ReferenceRef(BaseModel):
    id: int
    name: str


class JobEntry(BaseModel):
    job_id: int
    name: str | None = None
    year_cnt: int = 0


class PortfolioUrlItem(BaseModel):
    portfolio_url_id: int
    name: str | None = None
    url: str


class UserProfileResponse(BaseModel):
    """사용자 프로필 응답."""

    id: UUID = Field(..., description="사용자 ID")
    provider: str = Field(..., description="OAuth 프로바이더")
    name: str = Field("", description="이름")
    email: str = Field("", description="이메일")
    profile_image_url: str = Field("", description="프로필 이미지 URL")
    detail: str | None = Field(None, description="자기소개")
    jobs: list[JobEntry] = Field(default_factory=list)
    industries: list[ReferenceRef] = Field(default_factory=list)
    skills: list[ReferenceRef] = Field(default_factory=list)
    prefer_week_days: list[ReferenceRef] = Field(default_factory=list)
    prefer_tow: ReferenceRef | None = None
    prefer_wow: ReferenceRef | None = None
    prefer_sido: ReferenceRef | None = None
    portfolio_urls: list[PortfolioUrlItem] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: "User") -> "UserProfileResponse":
        def ref(item) -> ReferenceRef | None:
            return ReferenceRef(id=item.id, name=item.name) if item is not None else None

        return cls(
            id=user.id,
            provider=user.provider.value,
            name=user.name or "",
            email=user.email or "",
            profile_image_url=user.profile_image_url or "",
            detail=user.detail,
            jobs=[
                JobEntry(job_id=entry.job.id, name=entry.job.name, year_cnt=entry.year_cnt)
                for entry in user.user_jobs
            ],
            industries=[ref(entry.industry) for entry in user.user_industries],
            skills=[ref(entry.skill) for entry in user.user_skills],
            prefer_week_days=[ref(entry.week_days) for entry in user.user_week_days],
            prefer_tow=ref(user.prefer_tow),
            prefer_wow=ref(user.prefer_wow),
            prefer_sido=ref(user.prefer_sido),
            portfolio_urls=[
                PortfolioUrlItem(
                    portfolio_url_id=entry.portfolio_url.id,
                    name=entry.portfolio_url.name,
                    url=entry.url,
                )
                for entry in user.user_portfolio_urls
            ],
        )


class JobSelectionBody(BaseModel):
    job_id: int
    year_cnt: int = Field(0, ge=0)


class PortfolioUrlBody(BaseModel):
    portfolio_url_id: int
    url: str


class UpdateProfileBody(BaseModel):
    """프로필 수정 요청. 목록 항목은 기존 값을 대체합니다."""

    name: str | None = None
    jobs: list[JobSelectionBody] = Field(default_factory=list)
    industry_ids: list[int] = Field(default_factory=list)
    skill_ids: list[int] = Field(default_factory=list)
    prefer_week_day_ids: list[int] = Field(default_factory=list)
    prefer_tow_id: int | None = None
    prefer_wow_id: int | None = None
    prefer_sido_id: int | None = None
    detail: str | None = None
    portfolio_urls: list[PortfolioUrlBody] = Field(default_factory=list)
