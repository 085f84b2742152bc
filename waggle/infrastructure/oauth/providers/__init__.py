"""OAuth Providers."""

from waggle.infrastructure.oauth.providers.base import OAuthProvider
from waggle.infrastructure.oauth.providers.google import GoogleOAuthProvider
from waggle.infrastructure.oauth.providers.kakao import KakaoOAuthProvider
from waggle.infrastructure.oauth.providers.naver import NaverOAuthProvider

__all__ = [
    "GoogleOAuthProvider",
    "KakaoOAuthProvider",
    "NaverOAuthProvider",
    "OAuthProvider",
]
