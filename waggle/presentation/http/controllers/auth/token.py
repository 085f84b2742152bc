"""Token Controller.

임시 토큰 교환 및 access 토큰 재발급 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends

from waggle.application.auth.commands import (
    ExchangeTemporaryTokenInteractor,
    ReissueAccessTokenInteractor,
)
from waggle.application.auth.dto import ExchangeTemporaryTokenRequest, ReissueAccessTokenRequest
from waggle.presentation.http.auth.cookie_params import REFRESH_COOKIE_NAME
from waggle.presentation.http.schemas.auth import AccessTokenBody, ExchangeTokenRequest
from waggle.setup.dependencies import (
    get_exchange_temporary_token_interactor,
    get_reissue_access_token_interactor,
)

router = APIRouter(prefix="/token")


@router.post(
    "/exchange",
    response_model=AccessTokenBody,
    summary="임시 토큰 → access 토큰 교환",
)
async def exchange(
    body: ExchangeTokenRequest,
    interactor: ExchangeTemporaryTokenInteractor = Depends(
        get_exchange_temporary_token_interactor
    ),
) -> AccessTokenBody:
    """임시 토큰은 한 번만 교환할 수 있습니다."""
    result = await interactor.execute(
        ExchangeTemporaryTokenRequest(temporary_token=body.temporary_token)
    )
    return AccessTokenBody(access_token=result.access_token)


@router.post(
    "/reissue",
    response_model=AccessTokenBody,
    summary="access 토큰 재발급",
)
async def reissue(
    refresh_token: Optional[str] = Cookie(None, alias=REFRESH_COOKIE_NAME),
    interactor: ReissueAccessTokenInteractor = Depends(get_reissue_access_token_interactor),
) -> AccessTokenBody:
    """refresh 토큰 쿠키로 새 access 토큰을 발급합니다. refresh 토큰은 유지됩니다."""
    result = await interactor.execute(ReissueAccessTokenRequest(refresh_token=refresh_token))
    return AccessTokenBody(access_token=result.access_token)
