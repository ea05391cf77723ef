"""Application service: Profile screen use cases."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProfileDTO
from storefront.domain.model.profile import UserProfile
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT, call_remote

logger = structlog.get_logger(__name__)


class ProfileHandler:
    """Reads and edits the signed-in user's profile.

    A user without a stored profile document sees an empty profile; the
    first update creates the document.
    """

    def __init__(
        self,
        profile_repo: ProfileRepository,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._profile_repo = profile_repo
        self._timeout = timeout

    async def show(self, user_id: str) -> ProfileDTO:
        return self._to_dto(await self._load(user_id))

    async def update(
        self,
        user_id: str,
        full_name: str | None = None,
        phone: str | None = None,
    ) -> ProfileDTO:
        current = await self._load(user_id)
        updated = current.with_changes(full_name=full_name, phone=phone)
        await call_remote(
            self._profile_repo.save(updated),
            action="update profile",
            timeout=self._timeout,
        )
        logger.info(
            "profile_updated",
            user_id=user_id,
            fields=[
                name
                for name, value in (("fullName", full_name), ("phone", phone))
                if value is not None
            ],
        )
        return self._to_dto(updated)

    # --- Internal helpers -----------------------------------------------------

    async def _load(self, user_id: str) -> UserProfile:
        profile = await call_remote(
            self._profile_repo.get(user_id),
            action="fetch profile",
            timeout=self._timeout,
        )
        return profile if profile is not None else UserProfile(uid=user_id)

    @staticmethod
    def _to_dto(profile: UserProfile) -> ProfileDTO:
        return ProfileDTO(
            uid=profile.uid,
            name=profile.display_name,
            email=profile.email,
            phone=profile.phone,
        )
