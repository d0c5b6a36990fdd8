"""Pydantic models describing the parts of GitHub webhook payloads we consume."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class GithubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ActorPayload(GithubBaseModel):
    id: int
    login: str | None = None
    type: str
    avatar_url: str | None = None
    email: str | None = None

    _normalize_optional = field_validator("avatar_url", "email", mode="before")(_blank_to_none)


class RepositoryPayload(GithubBaseModel):
    id: int


class IssuePayload(GithubBaseModel):
    number: int
    user: ActorPayload


class CommentPayload(GithubBaseModel):
    id: int
    user: ActorPayload


class IssuesEvent(GithubBaseModel):
    """Payload of the ``issues`` webhook event."""

    issue: IssuePayload
    repository: RepositoryPayload
    action: str | None = None


class IssueCommentEvent(GithubBaseModel):
    """Payload of the ``issue_comment`` webhook event."""

    comment: CommentPayload
    action: str | None = None


IssuesEventInput = IssuesEvent | Mapping[str, object]
IssueCommentEventInput = IssueCommentEvent | Mapping[str, object]
