"""Port for creating users out of GitHub account data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hooklink.domain.model import GithubActor, User


@runtime_checkable
class UserProvisioner(Protocol):
    """Create and persist a new user for a GitHub actor.

    Implementations raise ``ProvisioningError`` when the user cannot be created.
    """

    def __call__(self, actor: GithubActor) -> User: ...
