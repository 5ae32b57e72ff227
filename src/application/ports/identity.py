"""Port for the identity/session provider."""

from typing import Protocol


class IdentityPort(Protocol):
    """Supplies the identity of the current user."""

    def current_user_id(self) -> str:
        """Return the current user identifier."""


__all__ = ["IdentityPort"]
