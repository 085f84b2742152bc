"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from waggle.presentation.http.controllers.auth.authorize import router as authorize_router
from waggle.presentation.http.controllers.auth.callback import router as callback_router
from waggle.presentation.http.controllers.auth.logout import router as logout_router
from waggle.presentation.http.controllers.auth.token import router as token_router

router = APIRouter()

# /token/*, /logout 은 /{provider}/* 패턴보다 먼저 등록
router.include_router(token_router)
router.include_router(logout_router)
router.include_router(authorize_router)
router.include_router(callback_router)
