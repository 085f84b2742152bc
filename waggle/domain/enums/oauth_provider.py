"""OAuth Provider Enum."""

from enum import Enum


class OAuthProvider(str, Enum):
    """지원하는 OAuth 프로바이더."""

    GOOGLE = "google"
    KAKAO = "kakao"
    NAVER = "naver"
