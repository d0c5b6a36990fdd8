from __future__ import annotations

import pytest

from hooklink.adapters.github import (
    InvalidPayloadError,
    IssueCommentEvent,
    parse_comment_event,
    parse_issue_event,
)
from hooklink.domain.model import ActorType
from tests.helpers.github import comment_payload, issue_payload, load_event_fixture


def test_parse_comment_event_from_fixture() -> None:
    event = parse_comment_event(load_event_fixture("issue_comment_created"))

    assert event.comment_github_id == 99262140
    assert event.actor.id == 6752317
    assert event.actor.login == "baxterthehacker"
    assert event.actor.type == ActorType.USER
    assert event.actor.is_human
    assert event.actor.avatar_url == "https://avatars.githubusercontent.com/u/6752317?v=3"
    assert event.actor.email is None


def test_parse_comment_event_takes_comment_author_not_issue_author() -> None:
    event = parse_comment_event(load_event_fixture("issue_comment_created_by_bot"))

    assert event.actor.id == 30924089
    assert event.actor.type == ActorType.BOT
    assert not event.actor.is_human


def test_parse_issue_event_from_fixture() -> None:
    event = parse_issue_event(load_event_fixture("issues_opened"))

    assert event.issue_number == 7
    assert event.repo_github_id == 99
    assert event.actor.id == 501
    assert event.actor.login == "octocat"


def test_parse_comment_event_accepts_validated_model() -> None:
    model = IssueCommentEvent.model_validate(comment_payload(42, github_id=3))

    event = parse_comment_event(model)

    assert event.comment_github_id == 42
    assert event.actor.id == 3


def test_blank_optional_actor_fields_become_none() -> None:
    payload = comment_payload()
    payload["comment"]["user"].update({"avatar_url": "  ", "email": ""})

    event = parse_comment_event(payload)

    assert event.actor.avatar_url is None
    assert event.actor.email is None


def test_unknown_actor_type_is_kept_verbatim() -> None:
    event = parse_issue_event(issue_payload(actor_type="Mannequin"))

    assert event.actor.type == "Mannequin"
    assert not event.actor.is_human


def test_comment_payload_without_comment_is_invalid() -> None:
    payload = load_event_fixture("issue_comment_created")
    del payload["comment"]

    with pytest.raises(InvalidPayloadError, match="issue_comment"):
        parse_comment_event(payload)


def test_issue_payload_without_repository_is_invalid() -> None:
    payload = issue_payload()
    del payload["repository"]

    with pytest.raises(InvalidPayloadError, match="issues"):
        parse_issue_event(payload)


def test_actor_without_id_is_invalid() -> None:
    payload = issue_payload()
    del payload["issue"]["user"]["id"]

    with pytest.raises(InvalidPayloadError):
        parse_issue_event(payload)


def test_invalid_payload_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid issues payload"):
        parse_issue_event({})


def test_actor_login_is_optional() -> None:
    event = parse_issue_event(
        {"issue": {"number": 7, "user": {"id": 501, "type": "User"}}, "repository": {"id": 99}}
    )

    assert event.actor.id == 501
    assert event.actor.login is None
    assert event.actor.is_human


def test_comment_payload_ignores_incomplete_issue_and_repository() -> None:
    event = parse_comment_event(
        {
            "comment": {"id": 42, "user": {"id": 9, "type": "Bot"}},
            "issue": {"number": 2},
            "repository": {},
        }
    )

    assert event.comment_github_id == 42
    assert event.actor.type == ActorType.BOT
