"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from waggle.application.auth.exceptions import (
    AuthenticationError,
    InvalidAccessTokenError,
    InvalidRefreshTokenError,
    InvalidTemporaryTokenError,
    RefreshTokenNotFoundError,
    SessionStoreUnavailableError,
)
from waggle.application.common.exceptions import ApplicationError, PersistenceConflictError
from waggle.application.oauth.exceptions import (
    InvalidStateError,
    OAuthProviderError,
    UnsupportedProviderError,
)
from waggle.application.users.exceptions import ReferenceNotFoundError, UserNotFoundError
from waggle.domain.exceptions import DomainError, InvalidTokenError

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Request failed",
        extra={"path": request.url.path, "status_code": status_code, "error_code": code},
    )
    return JSONResponse(status_code=status_code, content={"detail": message, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InvalidAccessTokenError)
    async def invalid_access_token_handler(request: Request, exc: InvalidAccessTokenError):
        return _error_response(request, 401, "INVALID_ACCESS_TOKEN", exc.message)

    @app.exception_handler(InvalidRefreshTokenError)
    async def invalid_refresh_token_handler(request: Request, exc: InvalidRefreshTokenError):
        return _error_response(request, 401, "INVALID_REFRESH_TOKEN", exc.message)

    @app.exception_handler(InvalidTemporaryTokenError)
    async def invalid_temporary_token_handler(request: Request, exc: InvalidTemporaryTokenError):
        return _error_response(request, 401, "INVALID_TEMPORARY_TOKEN", exc.message)

    @app.exception_handler(RefreshTokenNotFoundError)
    async def refresh_token_not_found_handler(request: Request, exc: RefreshTokenNotFoundError):
        return _error_response(request, 401, "REFRESH_TOKEN_NOT_FOUND", exc.message)

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(request: Request, exc: InvalidTokenError):
        return _error_response(request, 401, "INVALID_TOKEN", exc.message)

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return _error_response(request, 401, "AUTHENTICATION_FAILED", exc.message)

    @app.exception_handler(UnsupportedProviderError)
    async def unsupported_provider_handler(request: Request, exc: UnsupportedProviderError):
        return _error_response(request, 400, "UNSUPPORTED_PROVIDER", exc.message)

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        return _error_response(request, 400, "INVALID_STATE", exc.message)

    @app.exception_handler(OAuthProviderError)
    async def oauth_provider_handler(request: Request, exc: OAuthProviderError):
        return _error_response(request, 502, "OAUTH_PROVIDER_ERROR", exc.message)

    @app.exception_handler(SessionStoreUnavailableError)
    async def session_store_unavailable_handler(
        request: Request, exc: SessionStoreUnavailableError
    ):
        return _error_response(request, 503, "SESSION_STORE_UNAVAILABLE", exc.message)

    @app.exception_handler(PersistenceConflictError)
    async def persistence_conflict_handler(request: Request, exc: PersistenceConflictError):
        return _error_response(request, 409, "CONFLICT", exc.message)

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return _error_response(request, 404, "USER_NOT_FOUND", exc.message)

    @app.exception_handler(ReferenceNotFoundError)
    async def reference_not_found_handler(request: Request, exc: ReferenceNotFoundError):
        return _error_response(request, 404, "REFERENCE_NOT_FOUND", exc.message)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error_response(request, 400, "DOMAIN_ERROR", exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(request, 400, "APPLICATION_ERROR", exc.message)
