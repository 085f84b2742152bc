"""User exceptions."""

from __future__ import annotations

from waggle.application.common.exceptions.base import ApplicationError


class UserNotFoundError(ApplicationError):
    """사용자를 찾을 수 없을 때 발생하는 예외."""

    def __init__(self) -> None:
        super().__init__("User not found")


class ReferenceNotFoundError(ApplicationError):
    """프로필이 참조하는 항목(스킬, 직무 등)이 존재하지 않는 경우."""

    def __init__(self, kind: str, reference_id: int) -> None:
        self.kind = kind
        self.reference_id = reference_id
        super().__init__(f"Reference not found: {kind}#{reference_id}")
