"""Login redirect URL."""

from urllib.parse import urlencode


def build_login_redirect_url(base_url: str, *, is_exist_user: bool, temporary_token: str) -> str:
    """프론트엔드 로그인 처리 페이지 URL.

    예: http://localhost:5173/login/process?is_exist_user=false&temporary_token=...
    """
    query = urlencode(
        {
            "is_exist_user": "true" if is_exist_user else "false",
            "temporary_token": temporary_token,
        }
    )
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query}"
