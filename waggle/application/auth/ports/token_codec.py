"""TokenCodec Port."""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol


class TokenCodec(Protocol):
    """서명된 토큰 발급/검증 포트.

    구현체:
        - JwtTokenCodec (infrastructure/security/)
    """

    def issue(self, subject: str, ttl: timedelta) -> str:
        """subject와 만료 시각(now + ttl)을 담은 토큰을 발급합니다."""
        ...

    def verify_subject(self, token: str) -> str:
        """서명을 검증하고 subject를 반환합니다.

        만료 여부는 검사하지 않습니다. ``is_expired``를 함께 사용하세요.

        Raises:
            InvalidTokenError: 서명 불일치, 형식 오류, subject 누락
        """
        ...

    def is_expired(self, token: str) -> bool:
        """만료 여부 (exp <= now).

        Raises:
            InvalidTokenError: 토큰을 해석할 수 없는 경우
        """
        ...
