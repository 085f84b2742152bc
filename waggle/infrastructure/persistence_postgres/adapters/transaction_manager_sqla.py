"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from waggle.application.common.exceptions import PersistenceConflictError

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다.

        Raises:
            PersistenceConflictError: 제약 조건 위반 (세션은 롤백된 상태)
        """
        try:
            await self._session.commit()
        except IntegrityError as e:
            logger.warning("Commit conflict, rolling back", extra={"error": str(e.orig)})
            await self._session.rollback()
            raise PersistenceConflictError() from e

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        await self._session.rollback()
