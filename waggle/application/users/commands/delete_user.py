"""DeleteUser Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from waggle.application.auth.ports import refresh_token_key
from waggle.application.users.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from waggle.application.auth.ports import SessionStore
    from waggle.application.common.ports import TransactionManager
    from waggle.application.users.ports import UserCommandGateway, UserQueryGateway

logger = logging.getLogger(__name__)


class DeleteUserInteractor:
    """회원 탈퇴 Interactor.

    사용자를 삭제하고 저장된 refresh 토큰을 제거합니다.
    발급된 access 토큰은 사용자 조회 실패로 더 이상 인증되지 않습니다.
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        session_store: "SessionStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._session_store = session_store
        self._transaction_manager = transaction_manager

    async def execute(self, user_id: UUID) -> None:
        user = await self._user_query.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()

        await self._user_command.delete(user)
        await self._session_store.delete(refresh_token_key(user_id))
        await self._transaction_manager.commit()

        logger.info("User deleted", extra={"user_id": str(user_id)})
