"""JWT Token Codec.

TokenCodec 포트의 구현체입니다.
"""

from __future__ import annotations

import math
import time
import uuid
from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from waggle.domain.exceptions.auth import InvalidTokenError

# HMAC-SHA 알고리즘은 키 길이로 결정 (256/384/512 bits)
_HMAC_ALGORITHMS_BY_KEY_BYTES = ((64, "HS512"), (48, "HS384"), (32, "HS256"))


def select_hmac_algorithm(signing_key: bytes) -> str:
    """키 길이에 맞는 가장 강한 HMAC 알고리즘."""
    for min_bytes, algorithm in _HMAC_ALGORITHMS_BY_KEY_BYTES:
        if len(signing_key) >= min_bytes:
            return algorithm
    raise ValueError("HMAC signing key must be at least 256 bits")


class JwtTokenCodec:
    """JWT 토큰 코덱.

    TokenCodec 구현체. 모든 토큰은 {sub, jti, iat, exp} 클레임을 가집니다.
    """

    def __init__(self, *, signing_key: bytes) -> None:
        self._signing_key = signing_key
        self._algorithm = select_hmac_algorithm(signing_key)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue(self, subject: str, ttl: timedelta) -> str:
        """토큰 발급.

        exp는 초 단위로 올림하여 1초 미만의 TTL도 만료 전 토큰이 됩니다.
        """
        now = self._now_timestamp()
        payload: dict[str, Any] = {
            "sub": subject,
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": now + math.ceil(ttl.total_seconds()),
        }
        return jwt.encode(payload, self._signing_key, algorithm=self._algorithm)

    def _decode(self, token: str) -> dict[str, Any]:
        if not isinstance(token, str) or not token:
            raise InvalidTokenError("Empty token")
        try:
            return jwt.decode(
                token,
                self._signing_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "verify_aud": False},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

    def verify_subject(self, token: str) -> str:
        """서명 검증 후 subject 반환."""
        claims = self._decode(token)
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError("Missing subject")
        return subject

    def is_expired(self, token: str) -> bool:
        """만료 여부 (exp <= now)."""
        claims = self._decode(token)
        exp = claims.get("exp")
        if not isinstance(exp, (int, float)):
            raise InvalidTokenError("Missing expiration")
        return exp <= self._now_timestamp()
