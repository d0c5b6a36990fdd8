"""Internal user directory entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hooklink.domain.model.entity import Entity
from hooklink.domain.model.enums import SignUpContext, UserType

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(eq=False, kw_only=True)
class User(Entity):
    """An internal account.

    ``github_id`` is unique per real GitHub account when set. Users that signed up
    outside of GitHub carry no GitHub identity at all.
    """

    github_id: int | None = None
    github_username: str | None = None
    github_avatar_url: str | None = None
    email: str | None = None

    type: UserType = UserType.USER
    sign_up_context: SignUpContext = SignUpContext.DEFAULT

    created_at: datetime | None = None
