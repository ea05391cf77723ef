"""JSON-file-backed implementation of ProfileRepository."""

from __future__ import annotations

from storefront.domain.model.profile import UserProfile
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.infrastructure.documents import profile_from_doc, profile_to_doc, utc_now_iso
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonProfileRepository(ProfileRepository):
    """User documents keyed by uid."""

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    async def get(self, user_id: str) -> UserProfile | None:
        doc = self._collection.find(user_id)
        return profile_from_doc(doc) if doc is not None else None

    async def save(self, profile: UserProfile) -> None:
        now = utc_now_iso()
        existing = self._collection.find(profile.uid) or {"createdAt": now}
        self._collection.upsert(
            {**existing, **profile_to_doc(profile), "id": profile.uid, "updatedAt": now}
        )
