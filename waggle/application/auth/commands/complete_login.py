"""CompleteLogin Command.

OAuth 인증 완료 후 로그인 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): CompleteLoginInteractor
    - Services(연주자): UserIdentityResolver
    - Ports(인프라): IdentityExtractor, TokenCodec, SessionStore, TransactionManager
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

from waggle.application.auth.dto import CompleteLoginRequest, LoginResult
from waggle.application.auth.exceptions import SessionStoreUnavailableError
from waggle.application.auth.ports import refresh_token_key, temporary_token_key
from waggle.application.auth.services import build_login_redirect_url
from waggle.application.common.exceptions import PersistenceConflictError

if TYPE_CHECKING:
    from uuid import UUID

    from waggle.application.auth.ports import SessionStore, TokenCodec
    from waggle.application.common.ports import TransactionManager
    from waggle.application.oauth.ports import IdentityExtractor
    from waggle.application.users.services import UserIdentityResolver
    from waggle.domain.entities import User
    from waggle.domain.value_objects import Identity
    from waggle.setup.config import AuthConfig

logger = logging.getLogger(__name__)

TEMPORARY_TOKEN_BYTES = 32


class CompleteLoginInteractor:
    """로그인 완료 Interactor (지휘자).

    Workflow:
        1. 프로바이더 응답 정규화 (IdentityExtractor)
        2. 사용자 조회/생성 (UserIdentityResolver)
        3. Refresh 토큰 발급 후 refresh:{user_id}에 덮어쓰기
        4. Access 토큰 발급 후 임시 핸들(temp:{handle})에 저장
        5. 트랜잭션 커밋 (실패 시 3, 4의 세션 키 삭제, 충돌이면 1회 재시도)
        6. 프론트엔드 redirect URL 생성

    동일 사용자의 동시 로그인은 마지막 저장이 유효합니다 (last-write-wins).
    """

    def __init__(
        self,
        identity_extractor: "IdentityExtractor",
        identity_resolver: "UserIdentityResolver",
        token_codec: "TokenCodec",
        session_store: "SessionStore",
        transaction_manager: "TransactionManager",
        auth_config: "AuthConfig",
    ) -> None:
        self._identity_extractor = identity_extractor
        self._identity_resolver = identity_resolver
        self._token_codec = token_codec
        self._session_store = session_store
        self._transaction_manager = transaction_manager
        self._config = auth_config

    async def execute(self, request: CompleteLoginRequest) -> LoginResult:
        """로그인을 완료합니다.

        Args:
            request: 프로바이더 태그와 원본 사용자 정보

        Returns:
            redirect URL, refresh 토큰(쿠키용), 임시 토큰 핸들

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더 (저장소 변경 없음)
            SessionStoreUnavailableError: 세션 저장소 장애 (사용자 생성 커밋 안 됨)
            PersistenceConflictError: 재시도 후에도 커밋 충돌이 계속되는 경우
        """
        # 1. Identity 추출
        identity = self._identity_extractor.extract_identity(request.provider, request.raw_payload)

        # 2~5. 동시 최초 로그인으로 커밋이 충돌하면 한 번 재시도 (승자 사용자로 재조회)
        try:
            user, is_new_user, refresh_token, temporary_token = await self._login(identity)
        except PersistenceConflictError:
            logger.warning(
                "Login commit conflicted, retrying",
                extra={"provider": identity.provider.value},
            )
            user, is_new_user, refresh_token, temporary_token = await self._login(identity)
        subject = str(user.id)

        # 6. Redirect URL
        redirect_url = build_login_redirect_url(
            self._config.login_redirect_url,
            is_exist_user=not is_new_user,
            temporary_token=temporary_token,
        )

        logger.info(
            "Login completed",
            extra={
                "user_id": subject,
                "provider": identity.provider.value,
                "is_new_user": is_new_user,
            },
        )

        return LoginResult(
            user_id=user.id,
            is_new_user=is_new_user,
            redirect_url=redirect_url,
            refresh_token=refresh_token,
            refresh_max_age=self._config.refresh_cookie_max_age,
            temporary_token=temporary_token,
        )

    async def _login(self, identity: "Identity") -> tuple["User", bool, str, str]:
        # 2. 사용자 조회/생성
        user, is_new_user = await self._identity_resolver.resolve_or_create(identity)
        subject = str(user.id)

        # 3. Refresh 토큰 발급 및 저장 (기존 값은 SET으로 원자적 교체)
        refresh_token = self._token_codec.issue(subject, self._config.refresh_token_ttl)
        await self._session_store.put(
            refresh_token_key(user.id),
            refresh_token,
            self._config.refresh_token_ttl,
        )

        # 4. Access 토큰 발급 및 임시 핸들 저장
        access_token = self._token_codec.issue(subject, self._config.access_token_ttl)
        temporary_token = secrets.token_urlsafe(TEMPORARY_TOKEN_BYTES)
        await self._session_store.put(
            temporary_token_key(temporary_token),
            access_token,
            self._config.temporary_token_ttl,
        )

        # 5. 커밋 실패 시 저장한 세션 키 제거
        try:
            await self._transaction_manager.commit()
        except Exception:
            await self._discard_session(user.id, temporary_token)
            raise

        return user, is_new_user, refresh_token, temporary_token

    async def _discard_session(self, user_id: "UUID", temporary_token: str) -> None:
        for key in (refresh_token_key(user_id), temporary_token_key(temporary_token)):
            try:
                await self._session_store.delete(key)
            except SessionStoreUnavailableError:
                logger.error("Failed to discard session key after commit failure")
