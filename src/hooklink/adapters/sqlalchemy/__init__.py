"""SQLAlchemy adapter package for hooklink."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyCommentRepository,
    SqlAlchemyGithubRepoRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyUserRepository,
)
from .unit_of_work import (
    SqlAlchemyLinkingUnitOfWork,
    StartupError,
    create_database_engine,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyCommentRepository",
    "SqlAlchemyGithubRepoRepository",
    "SqlAlchemyLinkingUnitOfWork",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyUserRepository",
    "StartupError",
    "create_all_tables",
    "create_database_engine",
    "mapper_registry",
    "shutdown",
    "startup",
]
