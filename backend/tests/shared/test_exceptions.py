"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    RideCompareError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
)


class TestRideCompareError:
    def test_message(self):
        """RideCompareError should store message."""
        error = RideCompareError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """RideCompareError should default code to class name."""
        error = RideCompareError("Test error")
        assert error.code == "RideCompareError"

    def test_custom_code_and_details(self):
        """RideCompareError should accept a custom code and details."""
        error = RideCompareError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        """RideCompareError should convert to dict."""
        error = RideCompareError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }

    def test_to_dict_minimal(self):
        """to_dict should work with minimal args."""
        result = RideCompareError("Test error").to_dict()
        assert result["error"] == "RideCompareError"
        assert result["details"] == {}


class TestHierarchy:
    def test_all_inherit_from_base(self):
        for error_type in (
            NotFoundError,
            ValidationError,
            AuthenticationError,
            AuthorizationError,
            ConflictError,
        ):
            assert issubclass(error_type, RideCompareError)

    def test_subclass_code_defaults_to_class_name(self):
        assert NotFoundError("missing").code == "NotFoundError"

    def test_internal_error_is_generic(self):
        """InternalError never carries internal detail."""
        error = InternalError()
        assert error.code == "INTERNAL_ERROR"
        assert error.message == "Internal server error"
        assert error.details == {}
