"""Translate GitHub webhook payloads into domain events."""

from __future__ import annotations

from logging import getLogger

from pydantic import ValidationError

from hooklink.domain.model import CommentEvent, GithubActor, IssueEvent

from .schema import (
    ActorPayload,
    IssueCommentEvent,
    IssueCommentEventInput,
    IssuesEvent,
    IssuesEventInput,
)

log = getLogger(__name__)


class InvalidPayloadError(ValueError):
    """Raised when a webhook payload lacks the fields needed to link its user."""


def _ensure_issue_comment_event(payload: IssueCommentEventInput) -> IssueCommentEvent:
    if isinstance(payload, IssueCommentEvent):
        return payload
    try:
        return IssueCommentEvent.model_validate(payload)
    except ValidationError as exc:
        raise InvalidPayloadError(f"Invalid issue_comment payload: {exc}") from exc


def _ensure_issues_event(payload: IssuesEventInput) -> IssuesEvent:
    if isinstance(payload, IssuesEvent):
        return payload
    try:
        return IssuesEvent.model_validate(payload)
    except ValidationError as exc:
        raise InvalidPayloadError(f"Invalid issues payload: {exc}") from exc


def parse_actor(payload: ActorPayload) -> GithubActor:
    return GithubActor(
        id=payload.id,
        login=payload.login,
        type=payload.type,
        avatar_url=payload.avatar_url,
        email=payload.email,
    )


def parse_comment_event(payload: IssueCommentEventInput) -> CommentEvent:
    event = _ensure_issue_comment_event(payload)
    log.debug("Parsed issue_comment event for comment %s", event.comment.id)
    return CommentEvent(
        comment_github_id=event.comment.id,
        actor=parse_actor(event.comment.user),
    )


def parse_issue_event(payload: IssuesEventInput) -> IssueEvent:
    event = _ensure_issues_event(payload)
    log.debug(
        "Parsed issues event for issue #%s in repository %s",
        event.issue.number,
        event.repository.id,
    )
    return IssueEvent(
        issue_number=event.issue.number,
        repo_github_id=event.repository.id,
        actor=parse_actor(event.issue.user),
    )
