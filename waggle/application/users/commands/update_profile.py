"""UpdateProfile Command.

현재 사용자 프로필 수정 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from waggle.application.users.dto import UpdateProfileRequest
from waggle.application.users.exceptions import ReferenceNotFoundError, UserNotFoundError
from waggle.domain.entities import (
    User,
    UserIndustry,
    UserJob,
    UserPortfolioUrl,
    UserSkill,
    UserWeekDays,
)
from waggle.domain.enums import ReferenceKind

if TYPE_CHECKING:
    from waggle.application.common.ports import TransactionManager
    from waggle.application.reference.ports import ReferenceQueryGateway
    from waggle.application.users.ports import UserQueryGateway

logger = logging.getLogger(__name__)


class UpdateProfileInteractor:
    """프로필 수정 Interactor.

    Workflow:
        1. 사용자 조회
        2. 참조 항목 조회 (하나라도 없으면 변경 없이 실패)
        3. 기존 선택 초기화 후 새 값 반영
        4. 커밋
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        reference_gateway: "ReferenceQueryGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._reference_gateway = reference_gateway
        self._transaction_manager = transaction_manager

    async def _require(self, kind: ReferenceKind, reference_id: int) -> Any:
        reference = await self._reference_gateway.get(kind, reference_id)
        if reference is None:
            raise ReferenceNotFoundError(kind.value, reference_id)
        return reference

    async def _optional(self, kind: ReferenceKind, reference_id: int | None) -> Any | None:
        if reference_id is None:
            return None
        return await self._require(kind, reference_id)

    async def execute(self, request: UpdateProfileRequest) -> User:
        """
        Raises:
            UserNotFoundError: 사용자 없음
            ReferenceNotFoundError: 존재하지 않는 참조 항목
        """
        # 1. 사용자 조회
        user = await self._user_query.get_by_id(request.user_id)
        if user is None:
            raise UserNotFoundError()

        # 2. 참조 항목 조회
        jobs = [
            (await self._require(ReferenceKind.JOB, selection.job_id), selection.year_cnt)
            for selection in request.jobs
        ]
        industries = [
            await self._require(ReferenceKind.INDUSTRY, industry_id)
            for industry_id in request.industry_ids
        ]
        skills = [await self._require(ReferenceKind.SKILL, skill_id) for skill_id in request.skill_ids]
        week_days = [
            await self._require(ReferenceKind.WEEK_DAYS, week_day_id)
            for week_day_id in request.prefer_week_day_ids
        ]
        portfolio_urls = [
            (await self._require(ReferenceKind.PORTFOLIO_URL, entry.portfolio_url_id), entry.url)
            for entry in request.portfolio_urls
        ]
        prefer_tow = await self._optional(ReferenceKind.TIME_OF_WORKING, request.prefer_tow_id)
        prefer_wow = await self._optional(ReferenceKind.WAYS_OF_WORKING, request.prefer_wow_id)
        prefer_sido = await self._optional(ReferenceKind.SIDO, request.prefer_sido_id)

        # 3. 반영
        user.clear_info()
        if request.name is not None:
            user.name = request.name
        user.detail = request.detail
        user.prefer_tow = prefer_tow
        user.prefer_wow = prefer_wow
        user.prefer_sido = prefer_sido
        user.user_jobs.extend(UserJob(job=job, year_cnt=year_cnt) for job, year_cnt in jobs)
        user.user_industries.extend(UserIndustry(industry=industry) for industry in industries)
        user.user_skills.extend(UserSkill(skill=skill) for skill in skills)
        user.user_week_days.extend(UserWeekDays(week_days=week_day) for week_day in week_days)
        user.user_portfolio_urls.extend(
            UserPortfolioUrl(portfolio_url=portfolio_url, url=url)
            for portfolio_url, url in portfolio_urls
        )

        # 4. 커밋
        await self._transaction_manager.commit()

        logger.info("Profile updated", extra={"user_id": str(user.id)})
        return user
