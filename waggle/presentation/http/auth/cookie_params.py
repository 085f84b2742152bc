"""Cookie Parameters.

refresh 토큰 쿠키 설정을 관리합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import Response

# 프론트엔드와 일치해야 함
REFRESH_COOKIE_NAME = "refresh_token"

COOKIE_PATH = "/"
# 프론트엔드가 다른 사이트에서 호출하므로 SameSite=None (Secure 필수)
COOKIE_SAMESITE = "none"


def get_cookie_params() -> dict:
    """쿠키 공통 파라미터."""
    return {
        "path": COOKIE_PATH,
        "httponly": True,
        "secure": True,
        "samesite": COOKIE_SAMESITE,
    }


def set_refresh_cookie(response: "Response", *, refresh_token: str, max_age: int) -> None:
    """refresh 토큰 쿠키 설정."""
    response.set_cookie(
        key=REFRESH_COOKIE_NAME,
        value=refresh_token,
        max_age=max_age,
        **get_cookie_params(),
    )


def clear_refresh_cookie(response: "Response") -> None:
    """refresh 토큰 쿠키 삭제."""
    response.delete_cookie(REFRESH_COOKIE_NAME, **get_cookie_params())
