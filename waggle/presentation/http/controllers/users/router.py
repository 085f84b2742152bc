"""Users Router.

현재 사용자 프로필 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Response, status

from waggle.application.users.commands import DeleteUserInteractor, UpdateProfileInteractor
from waggle.application.users.dto import JobSelection, PortfolioUrlEntry, UpdateProfileRequest
from waggle.domain.entities import User
from waggle.presentation.http.auth.cookie_params import clear_refresh_cookie
from waggle.presentation.http.auth.dependencies import get_current_user
from waggle.presentation.http.schemas.user import UpdateProfileBody, UserProfileResponse
from waggle.setup.dependencies import get_delete_user_interactor, get_update_profile_interactor

router = APIRouter(prefix="/me")


@router.get("", response_model=UserProfileResponse, summary="내 프로필 조회")
async def get_me(current_user: User = Depends(get_current_user)) -> UserProfileResponse:
    return UserProfileResponse.from_user(current_user)


@router.put("", response_model=UserProfileResponse, summary="내 프로필 수정")
async def update_me(
    body: UpdateProfileBody,
    current_user: User = Depends(get_current_user),
    interactor: UpdateProfileInteractor = Depends(get_update_profile_interactor),
) -> UserProfileResponse:
    request = UpdateProfileRequest(
        user_id=current_user.id,
        name=body.name,
        jobs=tuple(JobSelection(job_id=job.job_id, year_cnt=job.year_cnt) for job in body.jobs),
        industry_ids=tuple(body.industry_ids),
        skill_ids=tuple(body.skill_ids),
        prefer_week_day_ids=tuple(body.prefer_week_day_ids),
        prefer_tow_id=body.prefer_tow_id,
        prefer_wow_id=body.prefer_wow_id,
        prefer_sido_id=body.prefer_sido_id,
        detail=body.detail,
        portfolio_urls=tuple(
            PortfolioUrlEntry(portfolio_url_id=item.portfolio_url_id, url=item.url)
            for item in body.portfolio_urls
        ),
    )
    user = await interactor.execute(request)
    return UserProfileResponse.from_user(user)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, summary="회원 탈퇴")
async def delete_me(
    current_user: User = Depends(get_current_user),
    interactor: DeleteUserInteractor = Depends(get_delete_user_interactor),
) -> Response:
    await interactor.execute(current_user.id)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_refresh_cookie(response)
    return response
