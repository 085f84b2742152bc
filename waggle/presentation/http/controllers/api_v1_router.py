"""API v1 Router."""

from fastapi import APIRouter

from waggle.presentation.http.controllers.auth.router import router as auth_router
from waggle.presentation.http.controllers.general.router import router as general_router
from waggle.presentation.http.controllers.reference.router import router as reference_router
from waggle.presentation.http.controllers.users.router import router as users_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth", tags=["auth"])
router.include_router(users_router, prefix="/users", tags=["users"])
router.include_router(reference_router, prefix="/references", tags=["references"])
router.include_router(general_router, tags=["general"])
