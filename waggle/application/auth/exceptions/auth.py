"""Authentication Exceptions."""

from waggle.application.common.exceptions.base import ApplicationError


class AuthenticationError(ApplicationError):
    """인증 실패."""

    def __init__(self, reason: str = "Authentication failed") -> None:
        super().__init__(reason)


class InvalidAccessTokenError(AuthenticationError):
    """Authorization 헤더 누락/형식 오류, 만료된 access 토큰 또는 존재하지 않는 사용자."""

    def __init__(self, reason: str = "Invalid access token") -> None:
        super().__init__(reason)


class InvalidRefreshTokenError(AuthenticationError):
    """저장된 refresh 토큰이 없거나, 일치하지 않거나, 만료된 경우."""

    def __init__(self, reason: str = "Invalid refresh token") -> None:
        super().__init__(reason)


class InvalidTemporaryTokenError(AuthenticationError):
    """임시 토큰이 없거나 이미 교환된 경우."""

    def __init__(self, reason: str = "Invalid or already used temporary token") -> None:
        super().__init__(reason)


class RefreshTokenNotFoundError(AuthenticationError):
    """요청에 refresh 토큰이 없는 경우."""

    def __init__(self, reason: str = "Refresh token not found") -> None:
        super().__init__(reason)
