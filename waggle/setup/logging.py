"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from waggle.setup.config import get_settings
from waggle.setup.constants import (
    EXCLUDED_LOG_RECORD_ATTRS,
    MASK_MIN_LENGTH,
    MASK_PLACEHOLDER,
    MASK_PRESERVE_PREFIX,
    MASK_PRESERVE_SUFFIX,
    NOISY_LOGGERS,
    SENSITIVE_FIELD_PATTERNS,
)

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# setup_logging 재호출 시 factory가 중첩되지 않도록 최초 factory를 기준으로 감쌈
_BASE_RECORD_FACTORY = logging.getLogRecordFactory()


def _is_sensitive_key(key: str) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in SENSITIVE_FIELD_PATTERNS)


def mask_value(value: Any) -> str:
    if value is None:
        return MASK_PLACEHOLDER
    str_value = str(value)
    if len(str_value) <= MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{str_value[:MASK_PRESERVE_PREFIX]}...{str_value[-MASK_PRESERVE_SUFFIX:]}"


class SensitiveDataFilter(logging.Filter):
    """extra 필드 중 토큰/시크릿 값을 마스킹."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key in list(record.__dict__):
            if key in EXCLUDED_LOG_RECORD_ATTRS:
                continue
            if _is_sensitive_key(key):
                setattr(record, key, mask_value(record.__dict__[key]))
        return True


def setup_logging() -> None:
    """로깅 설정."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        # ECS JSON 포맷터
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler.addFilter(SensitiveDataFilter())

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _BASE_RECORD_FACTORY(*args, **kwargs)
        record.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.profile,
        }
        return record

    logging.setLogRecordFactory(record_factory)

    # 외부 라이브러리 로그 레벨 조정
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
