"""Identity Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from waggle.domain.enums.oauth_provider import OAuthProvider


@dataclass(frozen=True, slots=True)
class Identity:
    """프로바이더 응답을 정규화한 사용자 식별 정보.

    프로바이더가 제공하지 않은 부가 필드(이름, 이메일, 프로필 이미지)는 빈 문자열입니다.
    """

    provider: OAuthProvider
    provider_id: str
    display_name: str = ""
    email: str = ""
    avatar_url: str = ""
