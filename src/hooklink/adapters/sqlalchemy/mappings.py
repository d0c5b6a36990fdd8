"""SQLAlchemy mapping metadata for the hooklink domain model."""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    TypeDecorator,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from hooklink.domain.model import (
    Comment,
    GithubRepo,
    SignUpContext,
    Task,
    User,
    UserType,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# User directory ---------------------------------------------------------------

user_table = Table(
    "user_account",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    # unique: at most one user per GitHub account, NULLs allowed for non-GitHub users
    Column("github_id", Integer, nullable=True, unique=True),
    Column("github_username", String, nullable=True),
    Column("github_avatar_url", String, nullable=True),
    Column("email", String, nullable=True),
    Column("type", Enum(UserType, native_enum=False), nullable=False, default=UserType.USER),
    Column(
        "sign_up_context",
        Enum(SignUpContext, native_enum=False),
        nullable=False,
        default=SignUpContext.DEFAULT,
    ),
    Column("created_at", UTCDateTime(), nullable=True, default=_utcnow),
)

# Association index --------------------------------------------------------------

github_repo_table = Table(
    "github_repo",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("github_id", Integer, nullable=False, unique=True),
    Column("name", String, nullable=False),
)

task_table = Table(
    "task",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("title", String, nullable=False),
    Column("body", Text, nullable=True),
    Column(
        "user_id", UUIDColumnType, ForeignKey("user_account.id", ondelete="CASCADE"), nullable=False
    ),
    Column("github_issue_number", Integer, nullable=True),
    Column(
        "github_repo_id",
        UUIDColumnType,
        ForeignKey("github_repo.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Index("ix_task_github_issue", "github_repo_id", "github_issue_number"),
)

comment_table = Table(
    "comment",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("body", Text, nullable=True),
    Column(
        "user_id", UUIDColumnType, ForeignKey("user_account.id", ondelete="CASCADE"), nullable=False
    ),
    Column("task_id", UUIDColumnType, ForeignKey("task.id", ondelete="CASCADE"), nullable=True),
    Column("github_id", Integer, nullable=True, index=True),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(User, user_table)

    mapper_registry.map_imperatively(GithubRepo, github_repo_table)

    mapper_registry.map_imperatively(
        Task,
        task_table,
        properties={
            "user": relationship(User),
            "github_repo": relationship(GithubRepo),
        },
    )

    mapper_registry.map_imperatively(
        Comment,
        comment_table,
        properties={
            "user": relationship(User),
            "task": relationship(Task),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
