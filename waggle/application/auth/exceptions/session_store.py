"""Session Store Exceptions."""

from waggle.application.common.exceptions.base import ApplicationError


class SessionStoreUnavailableError(ApplicationError):
    """세션 저장소(Redis) 연결 실패 또는 타임아웃."""

    def __init__(self, reason: str = "Session store unavailable") -> None:
        super().__init__(reason)
