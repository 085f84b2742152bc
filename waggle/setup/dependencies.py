"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from waggle.setup.config import AuthConfig, Settings, get_auth_config, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis
    from sqlalchemy.ext.asyncio import AsyncSession


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from waggle.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


def get_session_redis() -> "aioredis.Redis":
    """세션 저장소용 Redis 클라이언트 제공자."""
    from waggle.infrastructure.persistence_redis.client import get_session_redis

    return get_session_redis()


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_user_query_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    """UserQueryGateway 제공자."""
    from waggle.infrastructure.persistence_postgres.adapters import SqlaUserQueryGateway

    return SqlaUserQueryGateway(session)


async def get_user_command_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    """UserCommandGateway 제공자."""
    from waggle.infrastructure.persistence_postgres.adapters import SqlaUserCommandGateway

    return SqlaUserCommandGateway(session)


async def get_reference_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    """ReferenceQueryGateway 제공자."""
    from waggle.infrastructure.persistence_postgres.adapters import SqlaReferenceQueryGateway

    return SqlaReferenceQueryGateway(session)


async def get_transaction_manager(
    session: "AsyncSession" = Depends(get_db_session),
):
    """TransactionManager 제공자."""
    from waggle.infrastructure.persistence_postgres.adapters import SqlaTransactionManager

    return SqlaTransactionManager(session)


# ============================================================
# Redis Gateway Dependencies
# ============================================================


def get_session_store(
    redis: "aioredis.Redis" = Depends(get_session_redis),
):
    """SessionStore 제공자."""
    from waggle.infrastructure.persistence_redis import RedisSessionStore

    return RedisSessionStore(redis)


def get_state_store(
    redis: "aioredis.Redis" = Depends(get_session_redis),
):
    """OAuthStateStore 제공자."""
    from waggle.infrastructure.persistence_redis import RedisStateStore

    return RedisStateStore(redis)


# ============================================================
# Service Dependencies
# ============================================================


def get_token_codec(auth_config: AuthConfig = Depends(get_auth_config)):
    """TokenCodec 제공자."""
    from waggle.infrastructure.security import JwtTokenCodec

    return JwtTokenCodec(signing_key=auth_config.signing_key)


def get_provider_registry(settings: Settings = Depends(get_settings)):
    """ProviderRegistry 제공자 (IdentityExtractor)."""
    from waggle.infrastructure.oauth.registry import ProviderRegistry

    return ProviderRegistry(settings)


def get_oauth_client(
    settings: Settings = Depends(get_settings),
    registry=Depends(get_provider_registry),
):
    """OAuthProviderGateway 제공자."""
    from waggle.infrastructure.oauth.client import OAuthClientImpl

    return OAuthClientImpl(registry, settings.oauth_http_timeout_seconds)


def get_identity_resolver(
    token_codec=Depends(get_token_codec),
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
):
    """UserIdentityResolver 제공자."""
    from waggle.application.users.services import UserIdentityResolver

    return UserIdentityResolver(
        token_codec=token_codec,
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
    )


# ============================================================
# Interactor Dependencies
# ============================================================


def get_complete_login_interactor(
    registry=Depends(get_provider_registry),
    identity_resolver=Depends(get_identity_resolver),
    token_codec=Depends(get_token_codec),
    session_store=Depends(get_session_store),
    transaction_manager=Depends(get_transaction_manager),
    auth_config: AuthConfig = Depends(get_auth_config),
):
    """CompleteLoginInteractor 제공자."""
    from waggle.application.auth.commands import CompleteLoginInteractor

    return CompleteLoginInteractor(
        identity_extractor=registry,
        identity_resolver=identity_resolver,
        token_codec=token_codec,
        session_store=session_store,
        transaction_manager=transaction_manager,
        auth_config=auth_config,
    )


def get_exchange_temporary_token_interactor(
    session_store=Depends(get_session_store),
):
    """ExchangeTemporaryTokenInteractor 제공자."""
    from waggle.application.auth.commands import ExchangeTemporaryTokenInteractor

    return ExchangeTemporaryTokenInteractor(session_store=session_store)


def get_reissue_access_token_interactor(
    token_codec=Depends(get_token_codec),
    session_store=Depends(get_session_store),
    auth_config: AuthConfig = Depends(get_auth_config),
):
    """ReissueAccessTokenInteractor 제공자."""
    from waggle.application.auth.commands import ReissueAccessTokenInteractor

    return ReissueAccessTokenInteractor(
        token_codec=token_codec,
        session_store=session_store,
        auth_config=auth_config,
    )


def get_logout_interactor(
    token_codec=Depends(get_token_codec),
    session_store=Depends(get_session_store),
):
    """LogoutInteractor 제공자."""
    from waggle.application.auth.commands import LogoutInteractor

    return LogoutInteractor(token_codec=token_codec, session_store=session_store)


def get_oauth_authorize_interactor(
    state_store=Depends(get_state_store),
    oauth_client=Depends(get_oauth_client),
    settings: Settings = Depends(get_settings),
):
    """OAuthAuthorizeInteractor 제공자."""
    from waggle.application.oauth.commands import OAuthAuthorizeInteractor

    return OAuthAuthorizeInteractor(
        state_store=state_store,
        provider_gateway=oauth_client,
        state_ttl_seconds=settings.oauth_state_ttl_seconds,
    )


def get_oauth_callback_interactor(
    state_store=Depends(get_state_store),
    oauth_client=Depends(get_oauth_client),
    complete_login=Depends(get_complete_login_interactor),
):
    """OAuthCallbackInteractor 제공자."""
    from waggle.application.oauth.commands import OAuthCallbackInteractor

    return OAuthCallbackInteractor(
        state_store=state_store,
        provider_gateway=oauth_client,
        complete_login=complete_login,
    )


def get_update_profile_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    reference_gateway=Depends(get_reference_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    """UpdateProfileInteractor 제공자."""
    from waggle.application.users.commands import UpdateProfileInteractor

    return UpdateProfileInteractor(
        user_query_gateway=user_query_gateway,
        reference_gateway=reference_gateway,
        transaction_manager=transaction_manager,
    )


def get_delete_user_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    session_store=Depends(get_session_store),
    transaction_manager=Depends(get_transaction_manager),
):
    """DeleteUserInteractor 제공자."""
    from waggle.application.users.commands import DeleteUserInteractor

    return DeleteUserInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        session_store=session_store,
        transaction_manager=transaction_manager,
    )


def get_list_references_query(
    reference_gateway=Depends(get_reference_gateway),
):
    """ListReferencesQuery 제공자."""
    from waggle.application.reference.queries import ListReferencesQuery

    return ListReferencesQuery(reference_gateway=reference_gateway)
