"""Ports for reading and writing the user directory and its association index."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from hooklink.domain.model import Comment, GithubRepo, Task, User

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class UserRepository(Repository[User], Protocol):
    """Persistence contract for users.

    ``add`` raises ``DuplicateUserError`` when another user already holds the same
    ``github_id``.
    """

    def get_by_github_id(self, github_id: int) -> User | None: ...


@runtime_checkable
class GithubRepoRepository(Repository[GithubRepo], Protocol):
    """Persistence contract for GitHub repositories."""

    def get_by_github_id(self, github_id: int) -> GithubRepo | None: ...


@runtime_checkable
class TaskRepository(Repository[Task], Protocol):
    """Persistence contract for tasks."""

    def find_users_by_issue(self, issue_number: int, repo_github_id: int) -> Sequence[User]:
        """Return the distinct owners of tasks linked to the issue in the given repository."""
        ...


@runtime_checkable
class CommentRepository(Repository[Comment], Protocol):
    """Persistence contract for comments."""

    def find_users_by_github_id(self, github_id: int) -> Sequence[User]:
        """Return the distinct owners of comments linked to the GitHub comment."""
        ...
