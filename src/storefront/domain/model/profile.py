"""User profile record kept in the ``users`` collection."""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.exceptions import ValidationError

FALLBACK_NAME = "User"


@dataclass(frozen=True)
class UserProfile:
    uid: str
    email: str = ""
    full_name: str = ""
    phone: str = ""

    @property
    def display_name(self) -> str:
        return self.full_name.strip() or FALLBACK_NAME

    def with_changes(
        self, full_name: str | None = None, phone: str | None = None
    ) -> UserProfile:
        """Return a copy with the given fields replaced; untouched fields are kept."""
        if full_name is None and phone is None:
            raise ValidationError("Nothing to update — give a name or a phone number")
        if full_name is not None and not full_name.strip():
            raise ValidationError("Full name cannot be blank")
        return replace(
            self,
            full_name=full_name.strip() if full_name is not None else self.full_name,
            phone=phone.strip() if phone is not None else self.phone,
        )
