"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ActorType(StrEnum):
    """Values of the ``type`` field GitHub sends for accounts in webhook payloads."""

    USER = "User"
    BOT = "Bot"
    ORGANIZATION = "Organization"


class UserType(StrEnum):
    USER = "user"
    BOT = "bot"
    ORGANIZATION = "organization"


class SignUpContext(StrEnum):
    DEFAULT = "default"
    GITHUB = "github"
