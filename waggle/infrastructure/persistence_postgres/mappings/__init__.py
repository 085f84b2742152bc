"""SQLAlchemy Imperative Mappings."""

from waggle.infrastructure.persistence_postgres.mappings.reference import (
    start_reference_mappers,
)
from waggle.infrastructure.persistence_postgres.mappings.users import start_users_mapper


def start_all_mappers() -> None:
    """모든 매퍼 시작.

    참조 테이블을 먼저 매핑해야 users 관계 설정이 가능합니다.
    여러 번 호출해도 안전합니다.
    """
    start_reference_mappers()
    start_users_mapper()


__all__ = ["start_all_mappers"]
