"""Turning association matches into a single linked user.

Expected outcomes for an event, given the distinct users already associated with
the GitHub entity it refers to:

- exactly one user: that user is the actor.
- no user, human actor: the event originated on GitHub with no internal record
  yet. The user is looked up by GitHub id and created when absent.
- no user, bot (or any non-human) actor: bot-authored events are always created
  from our side, and the association is committed before GitHub delivers the
  webhook. A missing association means that ordering was violated, so this is
  reported as ``UserNotFoundError`` instead of creating a user for the bot.
- several users: the index disagrees about the owner, reported as
  ``MultipleUsersError``. One is never picked arbitrarily.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from hooklink.domain.errors import MultipleUsersError, ProvisioningError, UserNotFoundError
from hooklink.domain.user_linking.result import UserLinkResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from hooklink.domain.model import GithubActor, User
    from hooklink.domain.ports.persistence import UserRepository
    from hooklink.domain.ports.provisioning import UserProvisioner


log = getLogger(__name__)


def distinct_users(users: Iterable[User]) -> list[User]:
    """Deduplicate users by internal id, keeping the first occurrence."""

    seen: set[UUID] = set()
    unique: list[User] = []
    for user in users:
        if user.id in seen:
            continue
        seen.add(user.id)
        unique.append(user)
    return unique


def resolve_user(
    candidates: Iterable[User],
    actor: GithubActor,
    *,
    users: UserRepository,
    provision: UserProvisioner,
) -> UserLinkResult:
    """Pick the user for ``actor`` out of the users matched through associations."""

    matched = distinct_users(candidates)

    if len(matched) == 1:
        (user,) = matched
        log.debug("Linked GitHub account %s to user %s by association", actor.id, user.id)
        return UserLinkResult.linked(user)

    if len(matched) > 1:
        log.warning(
            "Association index returned %s distinct users for GitHub account %s",
            len(matched),
            actor.id,
        )
        return UserLinkResult.failed(
            MultipleUsersError(
                f"Found {len(matched)} distinct users for GitHub account {actor.id}"
            )
        )

    if actor.is_human:
        return find_or_create_disassociated_user(actor, users=users, provision=provision)

    log.warning(
        "No association found for non-human GitHub account %s (%s, type=%s)",
        actor.id,
        actor.login,
        actor.type,
    )
    return UserLinkResult.failed(
        UserNotFoundError(
            f"No user associated with {actor.type} account {actor.id}; the webhook may have "
            "arrived before the record that created it was committed"
        )
    )


def find_or_create_disassociated_user(
    actor: GithubActor,
    *,
    users: UserRepository,
    provision: UserProvisioner,
) -> UserLinkResult:
    """Return the user registered with the actor's GitHub id, creating one if absent.

    Provisioning failures are returned as they are, without retrying.
    """

    existing = users.get_by_github_id(actor.id)
    if existing is not None:
        log.debug("Linked GitHub account %s to user %s by GitHub id", actor.id, existing.id)
        return UserLinkResult.linked(existing)

    try:
        created = provision(actor)
    except ProvisioningError as exc:
        log.warning("Could not create user for GitHub account %s: %s", actor.id, exc)
        return UserLinkResult.failed(exc)
    return UserLinkResult.linked(created)
