"""Security adapters."""

from waggle.infrastructure.security.jwt_token_codec import JwtTokenCodec, select_hmac_algorithm

__all__ = ["JwtTokenCodec", "select_hmac_algorithm"]
