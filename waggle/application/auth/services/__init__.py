"""Auth services."""

from waggle.application.auth.services.login_redirect import build_login_redirect_url

__all__ = ["build_login_redirect_url"]
