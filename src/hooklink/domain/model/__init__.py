"""Public domain model surface."""

from __future__ import annotations

from hooklink.domain.model.actor import CommentEvent, GithubActor, IssueEvent
from hooklink.domain.model.entity import Entity
from hooklink.domain.model.enums import ActorType, SignUpContext, UserType
from hooklink.domain.model.github import Comment, GithubRepo, Task
from hooklink.domain.model.user import User

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    # webhook values
    "GithubActor",
    "CommentEvent",
    "IssueEvent",
    # directory
    "User",
    # associations
    "GithubRepo",
    "Task",
    "Comment",
    # enums
    "ActorType",
    "SignUpContext",
    "UserType",
]
