"""Creation of users from GitHub account data."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from hooklink.domain.errors import ProvisioningError
from hooklink.domain.model import ActorType, SignUpContext, User, UserType

if TYPE_CHECKING:
    from hooklink.domain.model import GithubActor
    from hooklink.domain.ports.persistence import UserRepository


log = getLogger(__name__)

USER_TYPE_BY_ACTOR_TYPE: Final[dict[str, UserType]] = {
    ActorType.USER: UserType.USER,
    ActorType.BOT: UserType.BOT,
    ActorType.ORGANIZATION: UserType.ORGANIZATION,
}


def user_from_github(actor: GithubActor) -> User:
    """Build an unsaved user carrying the actor's GitHub attributes."""

    user_type = USER_TYPE_BY_ACTOR_TYPE.get(actor.type)
    if user_type is None:
        raise ProvisioningError(f"Unsupported GitHub account type: {actor.type!r}")
    return User(
        github_id=actor.id,
        github_username=actor.login,
        github_avatar_url=actor.avatar_url,
        email=actor.email,
        type=user_type,
        sign_up_context=SignUpContext.GITHUB,
    )


def create_from_github(actor: GithubActor, users: UserRepository) -> User:
    """Create and persist a user for the given GitHub actor.

    Raises ``ProvisioningError`` (``DuplicateUserError`` for an already registered
    GitHub id) when the user cannot be created.
    """

    user = user_from_github(actor)
    users.add(user)
    log.info("Created user %s for GitHub account %s (%s)", user.id, actor.id, actor.login)
    return user


class GithubUserProvisioner:
    """``UserProvisioner`` bound to a user repository."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    def __call__(self, actor: GithubActor) -> User:
        return create_from_github(actor, self.users)
