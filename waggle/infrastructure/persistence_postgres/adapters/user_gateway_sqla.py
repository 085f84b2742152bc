"""SQLAlchemy implementation of user gateways."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from waggle.domain.entities import User
from waggle.domain.enums import OAuthProvider
from waggle.infrastructure.persistence_postgres.mappings.users import users_table


class SqlaUserQueryGateway:
    """사용자 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_provider_identity(
        self,
        provider: OAuthProvider,
        provider_id: str,
    ) -> User | None:
        result = await self._session.execute(
            select(User).where(
                users_table.c.provider == provider,
                users_table.c.provider_id == provider_id,
            )
        )
        return result.scalar_one_or_none()


class SqlaUserCommandGateway:
    """사용자 생성/삭제 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, user: User) -> None:
        self._session.add(user)
        await self._session.flush()

    async def delete(self, user: User) -> None:
        await self._session.delete(user)
        await self._session.flush()
