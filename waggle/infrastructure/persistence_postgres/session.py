"""PostgreSQL Session Management."""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from waggle.setup.config import get_settings


def get_async_engine() -> AsyncEngine:
    """AsyncEngine 생성.

    환경변수:
        - WAGGLE_DATABASE_URL: PostgreSQL 연결 URL
        - WAGGLE_DATABASE_POOL_SIZE: 풀 크기 (기본: 10)
        - WAGGLE_DATABASE_POOL_TIMEOUT_SECONDS: 커넥션 대기 제한
        - WAGGLE_DATABASE_COMMAND_TIMEOUT_SECONDS: 쿼리 실행 제한
    """
    settings = get_settings()

    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        pool_timeout=settings.database_pool_timeout_seconds,
        pool_recycle=1800,
        pool_pre_ping=True,
        echo=settings.database_echo,
        connect_args={
            "command_timeout": settings.database_command_timeout_seconds,
            "timeout": settings.database_command_timeout_seconds,
            "server_settings": {"timezone": "Asia/Seoul"},
        },
    )


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤."""
    global _engine, _session_factory
    if _session_factory is None:
        _engine = get_async_engine()
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends용 세션 제공자.

    커밋되지 않은 변경사항은 세션 종료 시 롤백됩니다.
    """
    session_factory = _get_session_factory()
    async with session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """엔진 커넥션 풀 정리 (shutdown)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
