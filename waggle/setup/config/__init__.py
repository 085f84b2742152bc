"""Configuration."""

from waggle.setup.config.auth_config import (
    AuthConfig,
    ConfigurationError,
    build_auth_config,
    get_auth_config,
)
from waggle.setup.config.settings import Settings, get_settings

__all__ = [
    "AuthConfig",
    "ConfigurationError",
    "Settings",
    "build_auth_config",
    "get_auth_config",
    "get_settings",
]
