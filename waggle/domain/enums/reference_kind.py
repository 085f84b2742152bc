"""Reference Kind Enum."""

from enum import Enum


class ReferenceKind(str, Enum):
    """조회 전용 참조 데이터 종류 (URL 경로 값)."""

    SKILL = "skills"
    INDUSTRY = "industries"
    JOB = "jobs"
    SIDO = "sidoes"
    PORTFOLIO_URL = "portfolio-urls"
    TIME_OF_WORKING = "time-of-working"
    WAYS_OF_WORKING = "ways-of-working"
    WEEK_DAYS = "week-days"
