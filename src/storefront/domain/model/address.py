"""Shipping address record."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from storefront.domain.exceptions import ValidationError

REQUIRED_FIELDS = ("name", "street", "city", "region", "postal_code", "country", "phone")


@dataclass(frozen=True)
class ShippingAddress:
    name: str = ""
    street: str = ""
    city: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""
    is_default: bool = False
    id: str | None = None

    def missing_fields(self) -> list[str]:
        return [
            f.name
            for f in fields(self)
            if f.name in REQUIRED_FIELDS and not str(getattr(self, f.name)).strip()
        ]

    def validate(self) -> None:
        """Raise ValidationError listing every blank required field."""
        missing = self.missing_fields()
        if missing:
            raise ValidationError(
                f"Shipping address is incomplete — missing {', '.join(missing)}"
            )

    def as_default(self, is_default: bool = True) -> ShippingAddress:
        return replace(self, is_default=is_default)

    def one_line(self) -> str:
        return f"{self.street}, {self.city}, {self.region} {self.postal_code}, {self.country}"
