"""Outcome of a user linking attempt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hooklink.domain.errors import UserLinkingError
    from hooklink.domain.model import User


@dataclass(frozen=True, slots=True)
class UserLinkResult:
    """Either the linked user or the error that prevented linking.

    Errors are carried as values so callers decide whether to abort, log or alert.
    ``unwrap`` re-raises the error for callers that prefer exceptions.
    """

    user: User | None = None
    error: UserLinkingError | None = None

    def __post_init__(self) -> None:
        if (self.user is None) == (self.error is None):
            raise ValueError("UserLinkResult requires exactly one of user or error")

    @classmethod
    def linked(cls, user: User) -> UserLinkResult:
        return cls(user=user)

    @classmethod
    def failed(cls, error: UserLinkingError) -> UserLinkResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> User:
        if self.error is not None:
            raise self.error
        if self.user is None:  # pragma: no cover
            raise ValueError("UserLinkResult has no user")
        return self.user
