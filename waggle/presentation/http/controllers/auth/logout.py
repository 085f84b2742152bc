"""Logout Controller."""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Response

from waggle.application.auth.commands import LogoutInteractor
from waggle.application.auth.dto import LogoutRequest
from waggle.presentation.http.auth.cookie_params import REFRESH_COOKIE_NAME, clear_refresh_cookie
from waggle.presentation.http.schemas.auth import LogoutResponse
from waggle.setup.dependencies import get_logout_interactor

router = APIRouter()


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="로그아웃",
)
async def logout(
    response: Response,
    refresh_token: Optional[str] = Cookie(None, alias=REFRESH_COOKIE_NAME),
    interactor: LogoutInteractor = Depends(get_logout_interactor),
) -> LogoutResponse:
    """저장된 refresh 토큰을 삭제하고 쿠키를 제거합니다."""
    await interactor.execute(LogoutRequest(refresh_token=refresh_token))
    clear_refresh_cookie(response)
    return LogoutResponse()
