"""Users Table Mapping."""

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

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
from waggle.domain.enums import OAuthProvider
from waggle.infrastructure.persistence_postgres.registry import mapper_registry

users_table = Table(
    "users",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "provider",
        Enum(
            OAuthProvider,
            name="oauth_provider",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    ),
    Column("provider_id", String(255), nullable=False),
    Column("name", String(120), nullable=False, default=""),
    Column("email", String(320), nullable=False, default=""),
    Column("profile_image_url", String(512), nullable=False, default=""),
    Column("detail", Text, nullable=True),
    Column("prefer_tow_id", Integer, ForeignKey("tow_type.id"), nullable=True),
    Column("prefer_wow_id", Integer, ForeignKey("wow_type.id"), nullable=True),
    Column("prefer_sido_id", Integer, ForeignKey("sido.id"), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    ),
    UniqueConstraint("provider", "provider_id", name="uq_users_provider_identity"),
)


def _link_table(name: str, *columns: Column) -> Table:
    return Table(
        name,
        mapper_registry.metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            "user_id",
            UUID(as_uuid=True),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        *columns,
    )


user_job_table = _link_table(
    "user_job",
    Column("job_id", Integer, ForeignKey("job.id"), nullable=False),
    Column("year_cnt", Integer, nullable=False, default=0),
)
user_industry_table = _link_table(
    "user_industry",
    Column("industry_id", Integer, ForeignKey("industry.id"), nullable=False),
)
user_skill_table = _link_table(
    "user_skill",
    Column("skill_id", Integer, ForeignKey("skill.id"), nullable=False),
)
user_week_days_table = _link_table(
    "user_week_days",
    Column("week_days_id", Integer, ForeignKey("week_days_type.id"), nullable=False),
)
user_portfolio_url_table = _link_table(
    "user_portfolio_url",
    Column("portfolio_url_id", Integer, ForeignKey("portfolio_url.id"), nullable=False),
    Column("url", String(512), nullable=False),
)

# (엔티티, 테이블, User 측 컬렉션 이름, 참조 속성 이름, 참조 엔티티)
_USER_LINKS = (
    (UserJob, user_job_table, "user_jobs", "job", Job),
    (UserIndustry, user_industry_table, "user_industries", "industry", Industry),
    (UserSkill, user_skill_table, "user_skills", "skill", Skill),
    (UserWeekDays, user_week_days_table, "user_week_days", "week_days", WeekDays),
    (
        UserPortfolioUrl,
        user_portfolio_url_table,
        "user_portfolio_urls",
        "portfolio_url",
        PortfolioUrl,
    ),
)


def start_users_mapper() -> None:
    """User 엔티티와 프로필 연결 엔티티 매퍼 시작."""
    if hasattr(User, "__mapper__"):
        return

    properties = {
        "prefer_tow": relationship(TimeOfWorking, lazy="selectin"),
        "prefer_wow": relationship(WaysOfWorking, lazy="selectin"),
        "prefer_sido": relationship(Sido, lazy="selectin"),
    }
    for entity, _, collection, _, _ in _USER_LINKS:
        properties[collection] = relationship(
            entity,
            back_populates="user",
            lazy="selectin",
            cascade="all, delete-orphan",
        )

    mapper_registry.map_imperatively(User, users_table, properties=properties)

    for entity, table, collection, attribute, target in _USER_LINKS:
        mapper_registry.map_imperatively(
            entity,
            table,
            properties={
                "user": relationship(User, back_populates=collection),
                attribute: relationship(target, lazy="selectin"),
            },
        )
