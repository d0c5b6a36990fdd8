"""Errors produced while linking webhook actors to users."""

from __future__ import annotations


class UserLinkingError(Exception):
    """Base class for outcomes that prevent a webhook actor from being linked."""


class MultipleUsersError(UserLinkingError):
    """Raised when the association index points at more than one distinct user."""


class UserNotFoundError(UserLinkingError):
    """Raised when a non-human actor has no association to an existing user."""


class ProvisioningError(UserLinkingError):
    """Raised when a user cannot be created from GitHub account data."""


class DuplicateUserError(ProvisioningError):
    """Raised when a user with the same GitHub id already exists."""
