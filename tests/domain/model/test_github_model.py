from __future__ import annotations

import pytest

from hooklink.domain.model import ActorType, GithubRepo, Task, User
from tests.helpers.github import make_actor


def test_task_requires_issue_number_and_repo_together() -> None:
    user = User(github_id=1)
    repo = GithubRepo(github_id=99, name="public-repo")

    with pytest.raises(ValueError, match="both github_issue_number and github_repo"):
        Task(title="Orphan", user=user, github_issue_number=7)

    with pytest.raises(ValueError, match="both github_issue_number and github_repo"):
        Task(title="Orphan", user=user, github_repo=repo)

    linked = Task(title="Linked", user=user, github_issue_number=7, github_repo=repo)
    unlinked = Task(title="Local", user=user)

    assert linked.github_repo is repo
    assert unlinked.github_issue_number is None


def test_entities_have_distinct_identity() -> None:
    first = User(github_id=1)
    second = User(github_id=1)

    assert first.id != second.id
    assert first != second


@pytest.mark.parametrize(
    ("actor_type", "is_human"),
    [
        (ActorType.USER, True),
        ("User", True),
        (ActorType.BOT, False),
        (ActorType.ORGANIZATION, False),
        ("user", False),
    ],
)
def test_actor_is_human_only_for_user_type(actor_type: str, is_human: bool) -> None:
    assert make_actor(actor_type=actor_type).is_human is is_human
