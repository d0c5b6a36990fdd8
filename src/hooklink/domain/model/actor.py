"""Webhook-side value objects."""

from __future__ import annotations

from dataclasses import dataclass

from hooklink.domain.model.enums import ActorType


@dataclass(frozen=True, slots=True, kw_only=True)
class GithubActor:
    """The GitHub account that performed the action described by a webhook.

    ``type`` is kept as sent by GitHub; unknown values are valid and simply
    count as non-human.
    """

    id: int
    login: str | None = None
    type: str
    avatar_url: str | None = None
    email: str | None = None

    @property
    def is_human(self) -> bool:
        return self.type == ActorType.USER


@dataclass(frozen=True, slots=True, kw_only=True)
class CommentEvent:
    """The part of an ``issue_comment`` webhook relevant to user linking."""

    comment_github_id: int
    actor: GithubActor


@dataclass(frozen=True, slots=True, kw_only=True)
class IssueEvent:
    """The part of an ``issues`` webhook relevant to user linking."""

    issue_number: int
    repo_github_id: int
    actor: GithubActor
