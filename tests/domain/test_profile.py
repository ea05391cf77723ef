"""Unit tests for UserProfile."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.profile import UserProfile


def test_display_name_falls_back():
    assert UserProfile(uid="u1").display_name == "User"
    assert UserProfile(uid="u1", full_name="  ").display_name == "User"
    assert UserProfile(uid="u1", full_name="Jane Roe").display_name == "Jane Roe"


def test_with_changes_keeps_untouched_fields():
    profile = UserProfile(uid="u1", email="jane@example.com", full_name="Jane", phone="555")
    updated = profile.with_changes(phone=" 777 ")
    assert updated == UserProfile(uid="u1", email="jane@example.com", full_name="Jane", phone="777")


def test_phone_can_be_cleared():
    assert UserProfile(uid="u1", phone="555").with_changes(phone="").phone == ""


def test_nothing_to_update():
    with pytest.raises(ValidationError, match="Nothing to update"):
        UserProfile(uid="u1").with_changes()


def test_blank_name_rejected():
    with pytest.raises(ValidationError, match="cannot be blank"):
        UserProfile(uid="u1", full_name="Jane").with_changes(full_name="   ")
