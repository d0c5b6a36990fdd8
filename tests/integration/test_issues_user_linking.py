from __future__ import annotations

from typing import TYPE_CHECKING

from hooklink.app import find_or_create_issue_user
from hooklink.domain.errors import MultipleUsersError, UserNotFoundError
from tests.helpers.github import issue_payload, load_event_fixture
from tests.helpers.seeding import (
    count_users,
    find_user,
    insert_repo,
    insert_tasks,
    insert_user,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from hooklink.adapters.sqlalchemy.unit_of_work import SqlAlchemyLinkingUnitOfWork

    UnitOfWorkFactory = Callable[[], SqlAlchemyLinkingUnitOfWork]


PAYLOAD = load_event_fixture("issues_opened")
BOT_PAYLOAD = load_event_fixture("issues_opened_by_bot")


def test_finds_user_by_task_association(sqlite_unit_of_work: UnitOfWorkFactory) -> None:
    user = insert_user(sqlite_unit_of_work, 1)
    repo = insert_repo(sqlite_unit_of_work, 99)
    insert_tasks(sqlite_unit_of_work, repo, 7, user, user)

    result = find_or_create_issue_user(PAYLOAD, unit_of_work_factory=sqlite_unit_of_work)

    assert result.user is not None
    assert result.user.id == user.id


def test_returns_error_if_multiple_users_by_task_association_found(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    repo = insert_repo(sqlite_unit_of_work, 99)
    first = insert_user(sqlite_unit_of_work, 1)
    second = insert_user(sqlite_unit_of_work, 2)
    insert_tasks(sqlite_unit_of_work, repo, 7, first, second)

    result = find_or_create_issue_user(PAYLOAD, unit_of_work_factory=sqlite_unit_of_work)

    assert isinstance(result.error, MultipleUsersError)


def test_ignores_tasks_for_the_same_issue_number_in_other_repositories(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    other_repo = insert_repo(sqlite_unit_of_work, 100)
    owner = insert_user(sqlite_unit_of_work, 1)
    insert_tasks(sqlite_unit_of_work, other_repo, 7, owner)

    result = find_or_create_issue_user(PAYLOAD, unit_of_work_factory=sqlite_unit_of_work)

    assert result.user is not None
    assert result.user.id != owner.id
    assert result.user.github_id == 501


def test_creates_user_for_disassociated_human(sqlite_unit_of_work: UnitOfWorkFactory) -> None:
    result = find_or_create_issue_user(PAYLOAD, unit_of_work_factory=sqlite_unit_of_work)

    assert result.user is not None
    assert result.user.github_id == 501
    created = find_user(sqlite_unit_of_work, 501)
    assert created is not None
    assert created.id == result.user.id


def test_finds_user_by_github_id_if_none_is_found_by_task_association(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    preinserted = insert_user(sqlite_unit_of_work, 501)

    result = find_or_create_issue_user(PAYLOAD, unit_of_work_factory=sqlite_unit_of_work)

    assert result.user is not None
    assert result.user.id == preinserted.id
    assert count_users(sqlite_unit_of_work) == 1


def test_issue_opened_by_bot_without_association_returns_error(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    result = find_or_create_issue_user(BOT_PAYLOAD, unit_of_work_factory=sqlite_unit_of_work)

    assert isinstance(result.error, UserNotFoundError)
    assert find_user(sqlite_unit_of_work, 9) is None
    assert count_users(sqlite_unit_of_work) == 0


def test_issue_opened_by_bot_finds_user_by_task_association(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    owner = insert_user(sqlite_unit_of_work, 1)
    repo = insert_repo(sqlite_unit_of_work, 99)
    insert_tasks(sqlite_unit_of_work, repo, 7, owner)

    result = find_or_create_issue_user(BOT_PAYLOAD, unit_of_work_factory=sqlite_unit_of_work)

    assert result.user is not None
    assert result.user.id == owner.id


def test_payload_values_select_the_issue(sqlite_unit_of_work: UnitOfWorkFactory) -> None:
    owner = insert_user(sqlite_unit_of_work, 1)
    repo = insert_repo(sqlite_unit_of_work, 12)
    insert_tasks(sqlite_unit_of_work, repo, 3, owner)

    result = find_or_create_issue_user(
        issue_payload(3, 12, github_id=77, actor_type="Bot"),
        unit_of_work_factory=sqlite_unit_of_work,
    )

    assert result.user is not None
    assert result.user.id == owner.id


def test_minimal_bot_actor_without_association_returns_error(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    payload = {"issue": {"number": 7, "user": {"id": 9, "type": "Bot"}}, "repository": {"id": 99}}

    result = find_or_create_issue_user(payload, unit_of_work_factory=sqlite_unit_of_work)

    assert isinstance(result.error, UserNotFoundError)
    assert count_users(sqlite_unit_of_work) == 0


def test_minimal_human_actor_creates_user_without_username(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    payload = {
        "issue": {"number": 7, "user": {"id": 501, "type": "User"}},
        "repository": {"id": 99},
    }

    result = find_or_create_issue_user(payload, unit_of_work_factory=sqlite_unit_of_work)

    assert result.user is not None
    assert result.user.github_id == 501
    created = find_user(sqlite_unit_of_work, 501)
    assert created is not None
    assert created.github_username is None
