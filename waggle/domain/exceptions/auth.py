"""Token 관련 도메인 예외."""

from waggle.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    """서명 불일치, 형식 오류, subject 누락 등 토큰을 해석할 수 없는 경우."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)
