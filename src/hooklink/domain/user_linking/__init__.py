"""Resolution of the user acting in GitHub webhook events."""

from __future__ import annotations

from .linker import (
    MatchQuery,
    UserLinker,
    comment_user_linker,
    find_or_create_comment_user,
    find_or_create_issue_user,
    issue_user_linker,
)
from .policy import distinct_users, find_or_create_disassociated_user, resolve_user
from .result import UserLinkResult

__all__ = [
    "MatchQuery",
    "UserLinkResult",
    "UserLinker",
    "comment_user_linker",
    "distinct_users",
    "find_or_create_comment_user",
    "find_or_create_disassociated_user",
    "find_or_create_issue_user",
    "issue_user_linker",
    "resolve_user",
]
