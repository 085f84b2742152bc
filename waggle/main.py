"""Waggle API Application Entry Point.

OAuth 로그인, JWT 세션, 사용자 프로필 API입니다.

분산 트레이싱 통합 (WAGGLE_OTEL_ENABLED=true):
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (OAuth provider 호출)
- Redis 자동 계측 (세션 저장소)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from waggle.presentation.http.controllers import root_router
from waggle.presentation.http.errors import register_exception_handlers
from waggle.setup.config import get_auth_config, get_settings
from waggle.setup.logging import setup_logging
from waggle.setup.tracing import configure_tracing, instrument_fastapi, shutdown_tracing

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    logger.info("Starting Waggle API")

    from waggle.infrastructure.persistence_postgres.mappings import start_all_mappers

    start_all_mappers()
    logger.info("SQLAlchemy mappers initialized")

    yield

    logger.info("Shutting down Waggle API")
    from waggle.infrastructure.persistence_postgres.session import dispose_engine

    await dispose_engine()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리.

    서명 키나 TTL 설정이 잘못되면 요청을 받기 전에 기동이 실패합니다.
    """
    settings = get_settings()

    setup_logging()
    configure_tracing()

    # 인증 설정 검증 (fail fast)
    get_auth_config()

    app = FastAPI(
        title=settings.app_name,
        description="OAuth 로그인 및 세션 관리 API",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS 설정
    cors_origins = (
        settings.cors_origins.split(",")
        if settings.cors_origins
        else [settings.local_full_url, settings.prod_https_full_url]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app)

    # 라우터 등록
    app.include_router(root_router)

    # Health check (루트)
    @app.get("/health")
    async def root_health():
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
        }

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "waggle.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8080,
    )
