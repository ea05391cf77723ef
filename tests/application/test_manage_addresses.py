"""Tests for the address book handler."""

import asyncio

import pytest

from storefront.application.manage_addresses import AddressBookHandler
from storefront.domain.exceptions import NotFoundError, ValidationError
from tests.fakes import FakeAddressRepository, make_address


def _handler():
    repo = FakeAddressRepository()
    return AddressBookHandler(repo, timeout=1.0), repo


def _defaults(handler, user_id="u1"):
    saved = asyncio.run(handler.addresses(user_id))
    return [a.id for a in saved if a.is_default]


def test_first_address_becomes_default():
    handler, _ = _handler()
    address_id = asyncio.run(handler.add("u1", make_address()))
    assert _defaults(handler) == [address_id]


def test_later_address_is_not_default_unless_asked():
    handler, _ = _handler()
    first = asyncio.run(handler.add("u1", make_address()))
    asyncio.run(handler.add("u1", make_address(name="Jane Doe")))
    assert _defaults(handler) == [first]


def test_new_default_clears_previous_one():
    handler, _ = _handler()
    asyncio.run(handler.add("u1", make_address()))
    second = asyncio.run(handler.add("u1", make_address(name="Jane Doe", is_default=True)))
    assert _defaults(handler) == [second]
    assert asyncio.run(handler.default_address("u1")).id == second


def test_incomplete_address_rejected():
    handler, repo = _handler()
    with pytest.raises(ValidationError, match="missing city"):
        asyncio.run(handler.add("u1", make_address(city="")))
    assert asyncio.run(repo.list_for_user("u1")) == []


def test_set_default():
    handler, _ = _handler()
    asyncio.run(handler.add("u1", make_address()))
    second = asyncio.run(handler.add("u1", make_address(name="Jane Doe")))
    asyncio.run(handler.set_default("u1", second))
    assert _defaults(handler) == [second]


def test_deleting_default_promotes_next():
    handler, _ = _handler()
    first = asyncio.run(handler.add("u1", make_address()))
    second = asyncio.run(handler.add("u1", make_address(name="Jane Doe")))
    asyncio.run(handler.delete("u1", first))
    assert _defaults(handler) == [second]


def test_unknown_address():
    handler, _ = _handler()
    with pytest.raises(NotFoundError):
        asyncio.run(handler.set_default("u1", "a99"))


def test_list_puts_default_first():
    handler, _ = _handler()
    asyncio.run(handler.add("u1", make_address()))
    asyncio.run(handler.add("u1", make_address(name="Jane Doe", is_default=True)))
    listed = asyncio.run(handler.list_addresses("u1"))
    assert [a.name for a in listed] == ["Jane Doe", "John Doe"]
    assert listed[0].is_default


def test_no_default_when_book_is_empty():
    handler, _ = _handler()
    assert asyncio.run(handler.default_address("u1")) is None
