"""Runtime settings, read from ``STOREFRONT_*`` environment variables.

Unset variables fall back to the defaults below.  With no backend URL
configured the app runs against the JSON file store in ``data/``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.pricing import PricingPolicy
from storefront.domain.model.value_objects import Money

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_ID = "local-user"


@dataclass(frozen=True)
class StorefrontSettings:
    backend_url: str | None = None
    api_token: str | None = None
    data_dir: Path = DEFAULT_DATA_DIR
    timeout: float = DEFAULT_TIMEOUT
    tax_rate: Decimal = Decimal("0")
    free_shipping_threshold: Decimal = Decimal("100.00")
    shipping_fee: Decimal = Decimal("9.99")
    user_id: str | None = DEFAULT_USER_ID

    @property
    def uses_backend(self) -> bool:
        return bool(self.backend_url)

    def pricing_policy(self) -> PricingPolicy:
        return PricingPolicy(
            free_shipping_threshold=Money(self.free_shipping_threshold),
            shipping_fee=Money(self.shipping_fee),
            tax_rate=self.tax_rate,
        )

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> StorefrontSettings:
        env = os.environ if environ is None else environ
        timeout = _decimal(env, "STOREFRONT_TIMEOUT", str(DEFAULT_TIMEOUT))
        if timeout <= 0:
            raise ValidationError("STOREFRONT_TIMEOUT must be positive")
        return StorefrontSettings(
            backend_url=env.get("STOREFRONT_BACKEND_URL") or None,
            api_token=env.get("STOREFRONT_API_TOKEN") or None,
            data_dir=Path(env.get("STOREFRONT_DATA_DIR") or DEFAULT_DATA_DIR),
            timeout=float(timeout),
            tax_rate=_decimal(env, "STOREFRONT_TAX_RATE", "0"),
            free_shipping_threshold=_decimal(env, "STOREFRONT_FREE_SHIPPING_THRESHOLD", "100.00"),
            shipping_fee=_decimal(env, "STOREFRONT_SHIPPING_FEE", "9.99"),
            user_id=env.get("STOREFRONT_USER_ID", DEFAULT_USER_ID) or None,
        )


def _decimal(env: Mapping[str, str], name: str, default: str) -> Decimal:
    raw = env.get(name) or default
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from None
    if not value.is_finite() or value < 0:
        raise ValidationError(f"{name} must be a non-negative number, got {raw!r}")
    return value
