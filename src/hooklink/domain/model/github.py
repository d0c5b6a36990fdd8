"""Records that link internal entities to GitHub issues and comments.

Tasks and comments are owned by the surrounding system; the user linker only
reads them as an index from GitHub identifiers to the users that own them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hooklink.domain.model.entity import Entity
from hooklink.domain.model.user import User


@dataclass(eq=False, kw_only=True)
class GithubRepo(Entity):
    github_id: int
    name: str


@dataclass(eq=False, kw_only=True)
class Task(Entity):
    """Internal counterpart of a GitHub issue."""

    title: str
    user: User = field(repr=False)
    body: str | None = None

    github_issue_number: int | None = None
    github_repo: GithubRepo | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if (self.github_issue_number is None) != (self.github_repo is None):
            raise ValueError("Task requires both github_issue_number and github_repo, or neither")


@dataclass(eq=False, kw_only=True)
class Comment(Entity):
    """Internal counterpart of a GitHub issue comment."""

    user: User = field(repr=False)
    body: str | None = None
    task: Task | None = field(default=None, repr=False)

    github_id: int | None = None
