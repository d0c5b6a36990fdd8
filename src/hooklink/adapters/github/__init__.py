"""Public interface for the GitHub webhook adapter."""

from __future__ import annotations

from .schema import (
    ActorPayload,
    IssueCommentEvent,
    IssueCommentEventInput,
    IssuesEvent,
    IssuesEventInput,
)
from .translator import InvalidPayloadError, parse_actor, parse_comment_event, parse_issue_event

__all__ = [
    "ActorPayload",
    "InvalidPayloadError",
    "IssueCommentEvent",
    "IssueCommentEventInput",
    "IssuesEvent",
    "IssuesEventInput",
    "parse_actor",
    "parse_comment_event",
    "parse_issue_event",
]
