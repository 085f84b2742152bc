"""Auth Configuration.

기동 시 한 번 생성되는 불변 인증 설정입니다.
TokenCodec과 Auth Interactor들이 이 값을 주입받습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from waggle.setup.config.settings import MIN_SIGNING_KEY_BYTES

if TYPE_CHECKING:
    from waggle.setup.config.settings import Settings


class ConfigurationError(RuntimeError):
    """설정 오류 (기동 실패)."""


@dataclass(frozen=True, slots=True)
class AuthConfig:
    """불변 인증 설정.

    Attributes:
        signing_key: Base64 디코딩된 HMAC 서명 키
        access_token_ttl: Access 토큰 수명
        refresh_token_ttl: Refresh 토큰 수명
        temporary_token_ttl: 임시 교환 토큰 수명
        login_redirect_url: 로그인 처리 페이지 URL (프로필별 base URL + endpoint)
    """

    signing_key: bytes
    access_token_ttl: timedelta
    refresh_token_ttl: timedelta
    temporary_token_ttl: timedelta
    login_redirect_url: str

    @property
    def refresh_cookie_max_age(self) -> int:
        """Refresh 쿠키 Max-Age (초)."""
        return int(self.refresh_token_ttl.total_seconds())


def build_auth_config(settings: "Settings") -> AuthConfig:
    """Settings로부터 AuthConfig 생성.

    Raises:
        ConfigurationError: 서명 키 또는 TTL이 유효하지 않은 경우
    """
    signing_key = settings.signing_key
    if len(signing_key) < MIN_SIGNING_KEY_BYTES:
        raise ConfigurationError("JWT signing key is too short")

    if settings.profile == "prod":
        login_redirect_url = settings.prod_https_full_url + settings.prod_login_process_endpoint
    else:
        login_redirect_url = settings.local_full_url + settings.local_login_process_endpoint

    config = AuthConfig(
        signing_key=signing_key,
        access_token_ttl=timedelta(milliseconds=settings.jwt_access_token_expire_time),
        refresh_token_ttl=timedelta(milliseconds=settings.jwt_refresh_token_expire_time),
        temporary_token_ttl=timedelta(seconds=settings.temporary_token_ttl_seconds),
        login_redirect_url=login_redirect_url,
    )
    if config.access_token_ttl < timedelta(seconds=1):
        raise ConfigurationError("Access token TTL must be at least one second")
    if config.refresh_cookie_max_age <= 0:
        raise ConfigurationError("Refresh token TTL must be at least one second")
    return config


@lru_cache
def get_auth_config() -> AuthConfig:
    """캐시된 AuthConfig 반환."""
    from waggle.setup.config.settings import get_settings

    return build_auth_config(get_settings())
