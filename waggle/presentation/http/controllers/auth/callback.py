"""Callback Controller.

OAuth 콜백 처리 엔드포인트입니다.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from waggle.application.oauth.commands import OAuthCallbackInteractor
from waggle.application.oauth.dto import OAuthCallbackRequest
from waggle.presentation.http.auth.cookie_params import set_refresh_cookie
from waggle.setup.dependencies import get_oauth_callback_interactor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{provider}/callback",
    summary="OAuth 콜백 처리",
    status_code=302,
    response_class=RedirectResponse,
)
async def callback(
    provider: str,
    code: str = Query(..., description="OAuth 인증 코드"),
    state: str = Query(..., description="상태 값"),
    redirect_uri: str | None = Query(None, description="리다이렉트 URI"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> RedirectResponse:
    """OAuth 콜백을 처리합니다.

    1. state 검증 및 인증 코드 교환
    2. 사용자 조회/생성
    3. refresh 토큰 쿠키 설정
    4. 프론트엔드 로그인 처리 페이지로 리다이렉트 (is_exist_user, temporary_token)
    """
    result = await interactor.execute(
        OAuthCallbackRequest(
            provider=provider,
            code=code,
            state=state,
            redirect_uri=redirect_uri,
        )
    )

    redirect_response = RedirectResponse(url=result.redirect_url, status_code=302)
    set_refresh_cookie(
        redirect_response,
        refresh_token=result.refresh_token,
        max_age=result.refresh_max_age,
    )

    logger.info(
        "OAuth callback success",
        extra={"provider": provider, "user_id": str(result.user_id)},
    )
    return redirect_response
