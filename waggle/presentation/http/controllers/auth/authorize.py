"""Authorize Controller.

OAuth 인증 페이지로 리다이렉트하는 엔드포인트입니다.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from waggle.application.oauth.commands import OAuthAuthorizeInteractor
from waggle.application.oauth.dto import OAuthAuthorizeRequest
from waggle.setup.dependencies import get_oauth_authorize_interactor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{provider}/authorize",
    summary="OAuth 로그인 시작",
    status_code=302,
    response_class=RedirectResponse,
)
async def authorize(
    provider: str,
    redirect_uri: str | None = Query(None, description="콜백 리다이렉트 URI"),
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> RedirectResponse:
    """프로바이더 인증 페이지로 리다이렉트합니다."""
    result = await interactor.execute(
        OAuthAuthorizeRequest(provider=provider, redirect_uri=redirect_uri)
    )
    return RedirectResponse(url=result.authorization_url, status_code=302)
