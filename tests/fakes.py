"""In-memory fake stores for testing.

These implement the same abstract interfaces as the HTTP and JSON
stores but keep everything in a dict.  No file I/O, no network.

Each fake can be told to fail its next call (``fail_next``) or to block
until a test releases it (``gate`` for every call, ``gates`` for one named
operation), which is how the tests reproduce store outages and racing
requests.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from decimal import Decimal

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.order import Order, OrderDraft
from storefront.domain.model.product import Product
from storefront.domain.model.profile import UserProfile
from storefront.domain.model.value_objects import Money
from storefront.domain.model.wishlist import WishlistEntry
from storefront.domain.repository.address_repository import AddressRepository
from storefront.domain.repository.auth_provider import AuthProvider
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.domain.repository.wishlist_repository import WishlistRepository


def make_product(
    id: str = "1",
    name: str = "Widget",
    price: str = "10.00",
    category: str = "Electronics",
    in_stock: bool = True,
    original_price: str | None = None,
) -> Product:
    return Product(
        id=id,
        name=name,
        price=Money.of(price),
        original_price=Money.of(original_price) if original_price else None,
        category=category,
        rating=Decimal("4.5"),
        review_count=10,
        in_stock=in_stock,
    )


def make_address(**overrides: object) -> ShippingAddress:
    fields = dict(
        name="John Doe",
        street="123 Main Street",
        city="New York",
        region="NY",
        postal_code="10001",
        country="USA",
        phone="+1 555 123 4567",
    )
    fields.update(overrides)
    return ShippingAddress(**fields)  # type: ignore[arg-type]


class _Controllable:
    """Failure injection and blocking shared by the fakes."""

    def __init__(self) -> None:
        self.fail_next: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.gates: dict[str, asyncio.Event] = {}
        self.delay: float = 0.0

    async def _checkpoint(self, operation: str = "") -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.gate is not None:
            await self.gate.wait()
        if operation in self.gates:
            await self.gates[operation].wait()
        if self.fail_next is not None:
            exc, self.fail_next = self.fail_next, None
            raise exc


class FakeCatalogRepository(_Controllable, CatalogRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__()
        self._store: dict[str, Product] = {}
        self.get_calls: list[str] = []
        for p in products or []:
            self._store[p.id] = p

    async def get_product(self, product_id: str) -> Product | None:
        self.get_calls.append(product_id)
        await self._checkpoint()
        return self._store.get(product_id)

    async def list_products(self, limit: int, after: str | None = None) -> list[Product]:
        await self._checkpoint()
        products = list(self._store.values())
        if after is not None:
            if after not in self._store:
                raise NotFoundError(f"Product '{after}' not found")
            products = products[products.index(self._store[after]) + 1 :]
        return products[:limit]

    async def list_by_category(self, category: str, limit: int) -> list[Product]:
        await self._checkpoint()
        return [p for p in self._store.values() if p.category == category][:limit]

    async def search_by_name_prefix(self, text: str, limit: int) -> list[Product]:
        await self._checkpoint()
        return [p for p in self._store.values() if p.name.startswith(text)][:limit]

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class FakeWishlistRepository(_Controllable, WishlistRepository):

    def __init__(self, entries: list[WishlistEntry] | None = None) -> None:
        super().__init__()
        self._store: dict[str, WishlistEntry] = {}
        self._next_id = 1
        self.add_calls: list[tuple[str, str]] = []
        self.remove_calls: list[str] = []
        for e in entries or []:
            self._store[e.id] = e

    async def list_for_user(self, user_id: str) -> list[WishlistEntry]:
        # Snapshot taken when the request arrives, like a real store query.
        entries = [e for e in self._store.values() if e.user_id == user_id]
        await self._checkpoint("list_for_user")
        return entries

    async def add(self, user_id: str, product_id: str) -> str:
        self.add_calls.append((user_id, product_id))
        await self._checkpoint("add")
        entry_id = f"w{self._next_id}"
        self._next_id += 1
        self._store[entry_id] = WishlistEntry(id=entry_id, user_id=user_id, product_id=product_id)
        return entry_id

    async def remove(self, entry_id: str) -> None:
        self.remove_calls.append(entry_id)
        await self._checkpoint("remove")
        if self._store.pop(entry_id, None) is None:
            raise NotFoundError(f"Wishlist entry '{entry_id}' not found")

    def product_ids_for(self, user_id: str) -> list[str]:
        return sorted(e.product_id for e in self._store.values() if e.user_id == user_id)


class FakeOrderRepository(_Controllable, OrderRepository):

    def __init__(self) -> None:
        super().__init__()
        self._store: dict[str, Order] = {}
        self._next_id = 1

    async def create(self, draft: OrderDraft) -> str:
        await self._checkpoint()
        order_id = f"o{self._next_id}"
        self._next_id += 1
        self._store[order_id] = Order(id=order_id, draft=draft, status=draft.status)
        return order_id

    async def get_by_id(self, order_id: str) -> Order | None:
        await self._checkpoint()
        return self._store.get(order_id)

    async def list_by_user(self, user_id: str) -> list[Order]:
        await self._checkpoint()
        return [o for o in self._store.values() if o.user_id == user_id]

    @property
    def count(self) -> int:
        return len(self._store)


class FakeAddressRepository(_Controllable, AddressRepository):

    def __init__(self) -> None:
        super().__init__()
        self._store: dict[str, tuple[str, ShippingAddress]] = {}
        self._next_id = 1

    async def list_for_user(self, user_id: str) -> list[ShippingAddress]:
        await self._checkpoint()
        return [a for uid, a in self._store.values() if uid == user_id]

    async def add(self, user_id: str, address: ShippingAddress) -> str:
        await self._checkpoint()
        address_id = f"a{self._next_id}"
        self._next_id += 1
        self._store[address_id] = (user_id, replace(address, id=address_id))
        return address_id

    async def update(self, address: ShippingAddress) -> None:
        await self._checkpoint()
        if address.id not in self._store:
            raise NotFoundError(f"Address '{address.id}' not found")
        user_id, _ = self._store[address.id]
        self._store[address.id] = (user_id, address)

    async def delete(self, address_id: str) -> None:
        await self._checkpoint()
        if self._store.pop(address_id, None) is None:
            raise NotFoundError(f"Address '{address_id}' not found")


class FakeProfileRepository(_Controllable, ProfileRepository):

    def __init__(self, profiles: list[UserProfile] | None = None) -> None:
        super().__init__()
        self._store: dict[str, UserProfile] = {p.uid: p for p in profiles or []}
        self.saved: list[UserProfile] = []

    async def get(self, user_id: str) -> UserProfile | None:
        await self._checkpoint()
        return self._store.get(user_id)

    async def save(self, profile: UserProfile) -> None:
        await self._checkpoint()
        self._store[profile.uid] = profile
        self.saved.append(profile)

class FakeAuthProvider(_Controllable, AuthProvider):

    def __init__(self, user_id: str | None = "u1") -> None:
        super().__init__()
        self.user_id = user_id

    async def current_user_id(self) -> str | None:
        await self._checkpoint()
        return self.user_id
