"""Logging constants."""

# PII / credential masking
SENSITIVE_FIELD_PATTERNS = frozenset(
    {
        "password",
        "secret",  # jwt_secret_key, client_secret
        "token",  # access_token, refresh_token, temporary_token
        "api_key",
        "authorization",  # HTTP Authorization header
    }
)

MASK_PLACEHOLDER = "***REDACTED***"

# Partial masking settings
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# Standard LogRecord attributes (not user extras)
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
        "service",
    }
)

NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "uvicorn.access")
