"""Domain Entities.

ORM과 분리된 순수 도메인 엔티티입니다.
SQLAlchemy 매핑은 infrastructure/persistence_postgres/mappings/에서 정의합니다.
"""

from waggle.domain.entities.reference import (
    Industry,
    Job,
    PortfolioUrl,
    Sido,
    Skill,
    TimeOfWorking,
    WaysOfWorking,
    WeekDays,
)
from waggle.domain.entities.user import (
    User,
    UserIndustry,
    UserJob,
    UserPortfolioUrl,
    UserSkill,
    UserWeekDays,
)

__all__ = [
    "Industry",
    "Job",
    "PortfolioUrl",
    "Sido",
    "Skill",
    "TimeOfWorking",
    "User",
    "UserIndustry",
    "UserJob",
    "UserPortfolioUrl",
    "UserSkill",
    "UserWeekDays",
    "WaysOfWorking",
    "WeekDays",
]
