"""Application Exceptions.

공통 예외만 포함합니다. 기능별 예외는 각 패키지에서 import하세요:
  - waggle.application.auth.exceptions.*
  - waggle.application.oauth.exceptions.*
  - waggle.application.users.exceptions.*
"""

from waggle.application.common.exceptions.base import (
    ApplicationError,
    PersistenceConflictError,
)

__all__ = ["ApplicationError", "PersistenceConflictError"]
