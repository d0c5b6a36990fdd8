"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    CommentRepository,
    GithubRepoRepository,
    Repository,
    TaskRepository,
    UserRepository,
)
from .provisioning import UserProvisioner
from .unit_of_work import (
    LinkingRepositories,
    LinkingUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CommentRepository",
    "GithubRepoRepository",
    "LinkingRepositories",
    "LinkingUnitOfWork",
    "Repository",
    "RepositoryCollection",
    "TaskRepository",
    "UnitOfWork",
    "UserProvisioner",
    "UserRepository",
]
