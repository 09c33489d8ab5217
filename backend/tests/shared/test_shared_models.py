"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError

from shared.models import ANONYMOUS, CallerIdentity, CamelModel


class Sample(CamelModel):
    user_id: int
    pickup_location: str


class TestCamelModel:
    def test_accepts_camel_case(self):
        sample = Sample.model_validate({"userId": 1, "pickupLocation": "Home"})
        assert sample.user_id == 1
        assert sample.pickup_location == "Home"

    def test_accepts_snake_case(self):
        """Database rows come back snake_case."""
        sample = Sample.model_validate({"user_id": 1, "pickup_location": "Home"})
        assert sample.user_id == 1

    def test_dumps_camel_case_by_alias(self):
        sample = Sample(user_id=1, pickup_location="Home")
        assert sample.model_dump(by_alias=True) == {"userId": 1, "pickupLocation": "Home"}
        assert sample.model_dump() == {"user_id": 1, "pickup_location": "Home"}


class TestCallerIdentity:
    def test_anonymous(self):
        assert ANONYMOUS.user_id is None
        assert ANONYMOUS.is_authenticated is False

    def test_authenticated(self):
        caller = CallerIdentity(user_id=7, session_id="abc")
        assert caller.is_authenticated is True

    def test_is_frozen(self):
        caller = CallerIdentity(user_id=7)
        with pytest.raises(ValidationError):
            caller.user_id = 8
