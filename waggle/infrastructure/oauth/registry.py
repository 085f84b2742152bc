"""OAuth Provider Registry.

프로바이더 태그 → 어댑터 명시적 디스패치.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from waggle.application.oauth.exceptions import UnsupportedProviderError
from waggle.domain.enums import OAuthProvider as ProviderTag
from waggle.domain.value_objects import Identity
from waggle.infrastructure.oauth.providers import (
    GoogleOAuthProvider,
    KakaoOAuthProvider,
    NaverOAuthProvider,
    OAuthProvider,
)

if TYPE_CHECKING:
    from waggle.setup.config import Settings


class ProviderRegistry:
    """프로바이더 레지스트리.

    IdentityExtractor 구현체. settings 없이 생성하면 자격 증명이 없는
    어댑터로 구성되며 응답 정규화에만 사용할 수 있습니다.
    """

    def __init__(self, settings: Optional["Settings"] = None) -> None:
        self.settings = settings
        self.providers: Mapping[str, OAuthProvider] = self._build()

    def _build(self) -> Mapping[str, OAuthProvider]:
        settings = self.settings
        if settings is None:
            return {
                ProviderTag.GOOGLE.value: GoogleOAuthProvider(),
                ProviderTag.KAKAO.value: KakaoOAuthProvider(),
                ProviderTag.NAVER.value: NaverOAuthProvider(),
            }
        return {
            ProviderTag.GOOGLE.value: GoogleOAuthProvider(
                client_id=settings.google_client_id,
                client_secret=settings.google_client_secret,
                redirect_uri=self._resolve_redirect_uri(settings.google_redirect_uri, "google"),
            ),
            ProviderTag.KAKAO.value: KakaoOAuthProvider(
                client_id=settings.kakao_client_id,
                client_secret=settings.kakao_client_secret,
                redirect_uri=self._resolve_redirect_uri(settings.kakao_redirect_uri, "kakao"),
            ),
            ProviderTag.NAVER.value: NaverOAuthProvider(
                client_id=settings.naver_client_id,
                client_secret=settings.naver_client_secret,
                redirect_uri=self._resolve_redirect_uri(settings.naver_redirect_uri, "naver"),
            ),
        }

    def get(self, provider: str) -> OAuthProvider:
        """
        Raises:
            UnsupportedProviderError: 등록되지 않은 프로바이더
        """
        key = (provider or "").lower()
        if key not in self.providers:
            raise UnsupportedProviderError(provider)
        return self.providers[key]

    def extract_identity(self, provider: str, raw_payload: Mapping[str, Any]) -> Identity:
        return self.get(provider).extract_identity(raw_payload)

    def _resolve_redirect_uri(self, override: Optional[Any], provider: str) -> Optional[str]:
        if override:
            return str(override)
        template = self.settings.oauth_redirect_template if self.settings else None
        if not template:
            return None
        return template.format(provider=provider)
