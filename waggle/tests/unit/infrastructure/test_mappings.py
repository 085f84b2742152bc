"""Imperative mapping 단위 테스트."""

import inspect

from sqlalchemy import inspect as sa_inspect

import waggle.domain.entities.reference as reference_module
import waggle.domain.entities.user as user_module
from waggle.domain.entities import Skill, User, UserSkill, WeekDays
from waggle.domain.enums import OAuthProvider
from waggle.infrastructure.persistence_postgres.mappings import start_all_mappers
from waggle.infrastructure.persistence_postgres.mappings.reference import (
    skill_table,
    week_days_type_table,
)
from waggle.infrastructure.persistence_postgres.mappings.users import users_table
from waggle.infrastructure.persistence_postgres.registry import mapper_registry


class TestStartAllMappers:
    def test_idempotent(self) -> None:
        start_all_mappers()
        start_all_mappers()

        assert sa_inspect(User).local_table is users_table
        assert sa_inspect(Skill).local_table is skill_table
        assert sa_inspect(WeekDays).local_table is week_days_type_table

    def test_user_relationships(self) -> None:
        start_all_mappers()

        relationships = sa_inspect(User).relationships
        assert relationships["user_skills"].mapper.class_ is UserSkill
        assert relationships["user_skills"].cascade.delete
        assert relationships["user_skills"].cascade.delete_orphan
        assert relationships["prefer_sido"].lazy == "selectin"

    def test_mapped_user_keeps_entity_defaults(self) -> None:
        start_all_mappers()

        user = User(provider=OAuthProvider.NAVER, provider_id="n-1")

        assert user.id is not None
        assert user.name == ""
        assert list(user.user_skills) == []

    def test_provider_identity_unique(self) -> None:
        constraint_names = {c.name for c in users_table.constraints}

        assert "uq_users_provider_identity" in constraint_names

    def test_tables_registered_on_shared_metadata(self) -> None:
        assert {"users", "user_skill", "skill", "week_days_type"} <= set(
            mapper_registry.metadata.tables
        )


class TestEntitiesArePure:
    def test_entity_modules_do_not_import_sqlalchemy(self) -> None:
        for module in (user_module, reference_module):
            source = inspect.getsource(module)
            assert "from sqlalchemy" not in source
            assert "import sqlalchemy" not in source
