"""Abstract authentication provider.

Only the identity of the signed-in user is consumed here; sign-up,
sign-in and password flows belong to the auth service itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuthProvider(ABC):

    @abstractmethod
    async def current_user_id(self) -> str | None:
        """Return the signed-in user's ID, or None when signed out."""
