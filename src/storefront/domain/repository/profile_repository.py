"""Abstract user profile store."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.profile import UserProfile


class ProfileRepository(ABC):

    @abstractmethod
    async def get(self, user_id: str) -> UserProfile | None:
        """Return the user's profile, or None if none was ever saved."""

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        """Merge *profile* into the user's document, creating it if needed."""
