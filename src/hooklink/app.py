"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from hooklink.adapters.github import parse_comment_event, parse_issue_event
from hooklink.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLinkingUnitOfWork,
    is_started,
    startup,
)
from hooklink.domain.ports.unit_of_work import LinkingUnitOfWork
from hooklink.domain.user_linking import comment_user_linker, issue_user_linker

if TYPE_CHECKING:
    from hooklink.adapters.github import IssueCommentEventInput, IssuesEventInput
    from hooklink.domain.ports.unit_of_work import LinkingRepositories
    from hooklink.domain.user_linking import UserLinker, UserLinkResult
    from hooklink.domain.user_linking.linker import LinkableEvent

UnitOfWorkFactory = Callable[[], LinkingUnitOfWork]


log = getLogger(__name__)


def find_or_create_comment_user(
    payload: IssueCommentEventInput,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> UserLinkResult:
    """Resolve the user acting in an ``issue_comment`` webhook payload."""

    event = parse_comment_event(payload)
    return _link(event, comment_user_linker, unit_of_work_factory, kind="issue_comment")


def find_or_create_issue_user(
    payload: IssuesEventInput,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> UserLinkResult:
    """Resolve the user acting in an ``issues`` webhook payload."""

    event = parse_issue_event(payload)
    return _link(event, issue_user_linker, unit_of_work_factory, kind="issues")


def _link[TEvent: LinkableEvent](
    event: TEvent,
    build_linker: Callable[[LinkingRepositories], UserLinker[TEvent]],
    unit_of_work_factory: UnitOfWorkFactory | None,
    *,
    kind: str,
) -> UserLinkResult:
    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyLinkingUnitOfWork

    with unit_of_work_factory() as uow:
        result = build_linker(uow.repositories).find_or_create_user(event)
        if result.ok:
            uow.commit()
        else:
            uow.rollback()

    if result.user is not None:
        log.info("Linked %s event to user %s", kind, result.user.id)
    else:
        log.warning("Could not link %s event: %s", kind, result.error)
    return result
