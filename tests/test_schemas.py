"""Tests for the User record model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from user_intake.parsers import U32_MAX
from user_intake.schemas.user import User


class TestUser:
    def test_valid_user(self):
        user = User(name="Alice", email="alice@example.com", age=30)
        assert user.name == "Alice"
        assert user.age == 30

    def test_is_frozen(self):
        user = User(name="Alice", email="alice@example.com", age=30)
        with pytest.raises(ValidationError, match="frozen"):
            user.age = 31

    def test_does_not_rerun_field_predicates(self):
        # values are validated by the prompting loop, not the record
        user = User(name="R2D2", email="not-an-email", age=0)
        assert user.email == "not-an-email"

    def test_negative_age_rejected(self):
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            User(name="Bob", email="bob@test.com", age=-1)

    def test_age_above_u32_rejected(self):
        with pytest.raises(ValidationError, match="less than or equal to"):
            User(name="Bob", email="bob@test.com", age=U32_MAX + 1)

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            User(name="Bob", email="bob@test.com")  # type: ignore[call-arg]
