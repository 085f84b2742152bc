"""OAuth Exceptions."""

from waggle.application.common.exceptions.base import ApplicationError


class UnsupportedProviderError(ApplicationError):
    """지원하지 않는 OAuth 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported OAuth provider: {provider}")


class InvalidStateError(ApplicationError):
    """OAuth 상태 검증 실패."""

    def __init__(self, reason: str = "Invalid or expired state") -> None:
        super().__init__(reason)


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 오류."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        super().__init__(f"OAuth provider error ({provider}): {reason}")
