"""Reference Entities.

프로필에서 참조하는 조회 전용 데이터입니다.
"""

from __future__ import annotations


class ReferenceEntity:
    """id와 표시 이름을 가진 참조 항목."""

    def __init__(self, *, id: int | None = None, name: str = "") -> None:
        self.id = id
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"


class Skill(ReferenceEntity):
    pass


class Industry(ReferenceEntity):
    pass


class Job(ReferenceEntity):
    pass


class Sido(ReferenceEntity):
    pass


class PortfolioUrl(ReferenceEntity):
    """포트폴리오 링크 종류 (GitHub, Notion 등)."""


class TimeOfWorking(ReferenceEntity):
    """선호 작업 시간대."""


class WaysOfWorking(ReferenceEntity):
    """선호 작업 방식 (온라인/오프라인 등)."""


class WeekDays:
    """요일. 약칭(MON)과 전체 이름(Monday)을 함께 가집니다."""

    def __init__(
        self,
        *,
        id: int | None = None,
        short_name: str = "",
        full_name: str = "",
    ) -> None:
        self.id = id
        self.short_name = short_name
        self.full_name = full_name

    @property
    def name(self) -> str:
        return self.full_name
