"""Domain service: Wishlist Reconciler.

Keeps the per-product ``favorited`` flags the screens render consistent
with the remote wishlist store.

A toggle is a two-phase optimistic update:
  Phase 1 — flip the local flag so the heart icon changes immediately.
  Phase 2 — issue the remote add/remove; if it fails, flip the flag back
            and re-raise, so local state is never left ahead of the store.

Toggles on the same product are serialized with a per-product lock.  A
second toggle issued while the first is in flight waits for it, then
reads the settled flag, so two rapid taps always produce exactly one add
and one remove.

A cancelled toggle is rolled back like a failed one.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import structlog

from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT, call_remote

logger = structlog.get_logger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class WishlistReconciler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._timeout = timeout
        self._favorited: set[str] = set()
        self._entry_ids: dict[str, str] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._revision = 0
        self._changed_at: dict[str, int] = {}
        self._added_at: dict[str, datetime] = {}

    # --- Queries --------------------------------------------------------------

    def is_favorited(self, product_id: str) -> bool:
        return product_id in self._favorited

    @property
    def product_ids(self) -> frozenset[str]:
        return frozenset(self._favorited)

    def entry_id_for(self, product_id: str) -> str | None:
        return self._entry_ids.get(product_id)

    def product_ids_by_age(self) -> list[str]:
        """Favorited product ids, oldest wishlist entry first."""
        return sorted(
            self._favorited,
            key=lambda p: (self._added_at.get(p, _EPOCH), p),
        )

    # --- Operations -----------------------------------------------------------

    async def load(self, user_id: str) -> None:
        """Replace the cache with the user's full remote wishlist.

        Products toggled while the listing was in flight keep their local
        state; the listing may predate that toggle's remote write.
        """
        requested_at = self._revision
        entries = await call_remote(
            self._wishlist_repo.list_for_user(user_id),
            action="load wishlist",
            timeout=self._timeout,
        )
        entry_ids: dict[str, str] = {}
        added_at: dict[str, datetime] = {}
        for entry in entries:
            if entry.product_id in entry_ids:
                logger.warning(
                    "wishlist_duplicate_entry",
                    user_id=user_id,
                    product_id=entry.product_id,
                    entry_id=entry.id,
                )
                continue
            entry_ids[entry.product_id] = entry.id
            added_at[entry.product_id] = entry.created_at

        favorited = set(entry_ids)
        for product_id in self._changed_since(requested_at):
            favorited.discard(product_id)
            entry_ids.pop(product_id, None)
            added_at.pop(product_id, None)
            if product_id in self._favorited:
                favorited.add(product_id)
            if product_id in self._entry_ids:
                entry_ids[product_id] = self._entry_ids[product_id]
            if product_id in self._added_at:
                added_at[product_id] = self._added_at[product_id]

        self._entry_ids = entry_ids
        self._added_at = added_at
        self._favorited = favorited
        logger.info("wishlist_loaded", user_id=user_id, count=len(favorited))

    async def toggle(self, user_id: str, product_id: str) -> bool:
        """Flip the favorite state of a product; return the new state."""
        async with self._lock_for(product_id):
            if product_id in self._favorited:
                await self._remove_locked(product_id)
                return False
            await self._add_locked(user_id, product_id)
            return True

    async def remove(self, product_id: str) -> None:
        """Unfavorite a product; no-op when it is not favorited."""
        async with self._lock_for(product_id):
            if product_id in self._favorited:
                await self._remove_locked(product_id)

    # --- Internal helpers -----------------------------------------------------

    def _lock_for(self, product_id: str) -> asyncio.Lock:
        lock = self._locks.get(product_id)
        if lock is None:
            lock = self._locks[product_id] = asyncio.Lock()
        return lock

    def _touch(self, product_id: str) -> None:
        self._revision += 1
        self._changed_at[product_id] = self._revision

    def _changed_since(self, revision: int) -> list[str]:
        """Products changed after *revision* or with a toggle still running."""
        return [
            product_id
            for product_id, changed_at in self._changed_at.items()
            if changed_at > revision or self._lock_for(product_id).locked()
        ]

    async def _add_locked(self, user_id: str, product_id: str) -> None:
        self._favorited.add(product_id)
        self._touch(product_id)
        try:
            entry_id = await call_remote(
                self._wishlist_repo.add(user_id, product_id),
                action="add to wishlist",
                timeout=self._timeout,
            )
        except BaseException:
            # Includes cancellation.
            self._favorited.discard(product_id)
            self._entry_ids.pop(product_id, None)
            self._touch(product_id)
            logger.warning("wishlist_add_failed", product_id=product_id, exc_info=True)
            raise
        self._favorited.add(product_id)
        self._entry_ids[product_id] = entry_id
        self._added_at[product_id] = datetime.now(timezone.utc)
        self._touch(product_id)
        logger.info("wishlist_added", product_id=product_id, entry_id=entry_id)

    async def _remove_locked(self, product_id: str) -> None:
        entry_id = self._entry_ids.get(product_id)
        self._favorited.discard(product_id)
        self._touch(product_id)
        if entry_id is None:
            logger.warning("wishlist_entry_unknown", product_id=product_id)
            return
        try:
            await call_remote(
                self._wishlist_repo.remove(entry_id),
                action="remove from wishlist",
                timeout=self._timeout,
            )
        except NotFoundError:
            # Already gone remotely; local state now matches the store.
            logger.info("wishlist_entry_already_removed", entry_id=entry_id)
        except BaseException:
            self._favorited.add(product_id)
            self._entry_ids[product_id] = entry_id
            self._touch(product_id)
            logger.warning("wishlist_remove_failed", product_id=product_id, exc_info=True)
            raise
        self._favorited.discard(product_id)
        self._entry_ids.pop(product_id, None)
        self._added_at.pop(product_id, None)
        self._touch(product_id)
        logger.info("wishlist_removed", product_id=product_id, entry_id=entry_id)
