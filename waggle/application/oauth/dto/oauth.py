"""OAuth DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeRequest:
    """OAuth 인증 요청."""

    provider: str
    redirect_uri: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeResponse:
    """OAuth 인증 응답."""

    authorization_url: str
    state: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청."""

    provider: str
    code: str
    state: str
    redirect_uri: str | None = None
