"""Tests for the catalog query handler."""

import asyncio

import pytest

from storefront.application.browse_catalog import CatalogHandler
from storefront.domain.exceptions import NotFoundError, RemoteError, ValidationError
from storefront.domain.model.wishlist import WishlistEntry
from storefront.domain.service.wishlist_reconciler import WishlistReconciler
from tests.fakes import FakeCatalogRepository, FakeWishlistRepository, make_product


def _catalog():
    return FakeCatalogRepository([
        make_product("1", "Wireless Headphones", price="79.99", original_price="99.99"),
        make_product("2", "Smart Watch", price="199.99"),
        make_product("3", "Running Shoes", price="89.99", category="Sports"),
        make_product("4", "Wireless Mouse", price="24.99"),
    ])


class TestShow:

    def test_show_formats_product(self):
        handler = CatalogHandler(_catalog())
        dto = asyncio.run(handler.show("1"))
        assert dto.name == "Wireless Headphones"
        assert dto.price == "$79.99"
        assert dto.original_price == "$99.99"
        assert dto.discount_percent == 20
        assert dto.rating == "4.5"
        assert dto.is_favorited is False

    def test_missing_product(self):
        handler = CatalogHandler(_catalog())
        with pytest.raises(NotFoundError, match="'99' not found"):
            asyncio.run(handler.show("99"))

    def test_favorite_flag_comes_from_wishlist_cache(self):
        wishlist = WishlistReconciler(
            FakeWishlistRepository([WishlistEntry(id="w1", user_id="u1", product_id="2")])
        )
        asyncio.run(wishlist.load("u1"))
        handler = CatalogHandler(_catalog(), wishlist)
        assert asyncio.run(handler.show("2")).is_favorited is True
        assert asyncio.run(handler.show("1")).is_favorited is False


class TestListing:

    def test_list_respects_limit(self):
        handler = CatalogHandler(_catalog())
        assert len(asyncio.run(handler.list_products(limit=2))) == 2

    def test_non_positive_limit_rejected(self):
        handler = CatalogHandler(_catalog())
        with pytest.raises(ValidationError, match="Limit"):
            asyncio.run(handler.list_products(limit=0))

    def test_list_by_category(self):
        handler = CatalogHandler(_catalog())
        result = asyncio.run(handler.list_by_category("Sports"))
        assert [p.id for p in result] == ["3"]

    def test_blank_category_rejected(self):
        handler = CatalogHandler(_catalog())
        with pytest.raises(ValidationError):
            asyncio.run(handler.list_by_category("   "))

    def test_next_page_starts_after_cursor(self):
        handler = CatalogHandler(_catalog())
        first = asyncio.run(handler.list_products(limit=2))
        second = asyncio.run(handler.list_products(limit=2, after=first[-1].id))
        assert [p.id for p in first] == ["1", "2"]
        assert [p.id for p in second] == ["3", "4"]
        assert asyncio.run(handler.list_products(limit=2, after="4")) == []

    def test_unknown_cursor_is_not_found(self):
        handler = CatalogHandler(_catalog())
        with pytest.raises(NotFoundError, match="'99' not found"):
            asyncio.run(handler.list_products(limit=2, after="99"))

    def test_store_failure_propagates(self):
        catalog = _catalog()
        catalog.fail_next = RemoteError("store down")
        with pytest.raises(RemoteError):
            asyncio.run(CatalogHandler(catalog).list_products())


class TestSearch:

    def test_prefix_search(self):
        handler = CatalogHandler(_catalog())
        result = asyncio.run(handler.search("Wireless"))
        assert sorted(p.id for p in result) == ["1", "4"]

    def test_blank_search_returns_nothing_without_store_call(self):
        catalog = _catalog()
        catalog.fail_next = RemoteError("should not be called")
        assert asyncio.run(CatalogHandler(catalog).search("  ")) == []
