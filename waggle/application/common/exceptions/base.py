"""Base application exceptions."""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class PersistenceConflictError(ApplicationError):
    """커밋 시 유니크 제약 등 동시 쓰기 충돌이 발생한 경우."""

    def __init__(self, message: str = "Conflicting write detected") -> None:
        super().__init__(message)
