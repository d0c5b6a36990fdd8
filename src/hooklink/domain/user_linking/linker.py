"""Entry points linking webhook events to users."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from hooklink.domain.accounts import GithubUserProvisioner
from hooklink.domain.user_linking.policy import resolve_user

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from hooklink.domain.model import CommentEvent, GithubActor, IssueEvent, User
    from hooklink.domain.ports.persistence import UserRepository
    from hooklink.domain.ports.provisioning import UserProvisioner
    from hooklink.domain.ports.unit_of_work import LinkingRepositories
    from hooklink.domain.user_linking.result import UserLinkResult


class LinkableEvent(Protocol):
    @property
    def actor(self) -> GithubActor: ...


type MatchQuery[TEvent] = Callable[[TEvent], Sequence[User]]


class UserLinker[TEvent: LinkableEvent]:
    """Find or create the user acting in an event.

    ``match_users`` returns the users already associated with the GitHub entity the
    event refers to; everything after that is shared between event types.
    """

    def __init__(
        self,
        match_users: MatchQuery[TEvent],
        *,
        users: UserRepository,
        provisioner: UserProvisioner | None = None,
    ) -> None:
        self.match_users = match_users
        self.users = users
        self.provisioner = provisioner or GithubUserProvisioner(users)

    def find_or_create_user(self, event: TEvent) -> UserLinkResult:
        candidates = self.match_users(event)
        return resolve_user(
            candidates,
            event.actor,
            users=self.users,
            provision=self.provisioner,
        )


def comment_user_linker(
    repositories: LinkingRepositories,
    *,
    provisioner: UserProvisioner | None = None,
) -> UserLinker[CommentEvent]:
    """Linker matching users through comments with the event's GitHub comment id."""

    def match_users(event: CommentEvent) -> Sequence[User]:
        return repositories.comments.find_users_by_github_id(event.comment_github_id)

    return UserLinker(match_users, users=repositories.users, provisioner=provisioner)


def issue_user_linker(
    repositories: LinkingRepositories,
    *,
    provisioner: UserProvisioner | None = None,
) -> UserLinker[IssueEvent]:
    """Linker matching users through tasks for the event's issue number and repository."""

    def match_users(event: IssueEvent) -> Sequence[User]:
        return repositories.tasks.find_users_by_issue(event.issue_number, event.repo_github_id)

    return UserLinker(match_users, users=repositories.users, provisioner=provisioner)


def find_or_create_comment_user(
    event: CommentEvent,
    repositories: LinkingRepositories,
) -> UserLinkResult:
    return comment_user_linker(repositories).find_or_create_user(event)


def find_or_create_issue_user(
    event: IssueEvent,
    repositories: LinkingRepositories,
) -> UserLinkResult:
    return issue_user_linker(repositories).find_or_create_user(event)
