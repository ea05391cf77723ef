"""WishlistEntry — a persisted (user, product) favorite."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class WishlistEntry:
    id: str
    user_id: str
    product_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
