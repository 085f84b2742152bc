"""Auth DTOs."""

from dataclasses import dataclass, field
from typing import Any, Mapping
from uuid import UUID


@dataclass(frozen=True, slots=True)
class CompleteLoginRequest:
    """OAuth 인증 완료 후 로그인 처리 요청."""

    provider: str
    raw_payload: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LoginResult:
    """로그인 처리 결과.

    refresh_token은 쿠키로, temporary_token은 redirect URL로 전달됩니다.
    """

    user_id: UUID
    is_new_user: bool
    redirect_url: str
    refresh_token: str
    refresh_max_age: int
    temporary_token: str


@dataclass(frozen=True, slots=True)
class ExchangeTemporaryTokenRequest:
    temporary_token: str | None


@dataclass(frozen=True, slots=True)
class ReissueAccessTokenRequest:
    refresh_token: str | None


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    refresh_token: str | None


@dataclass(frozen=True, slots=True)
class AccessTokenResponse:
    access_token: str
