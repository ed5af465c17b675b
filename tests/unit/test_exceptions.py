"""Tests for the exception hierarchy."""

from app.api.utils.exceptions import (
    CrustaceanNotFoundException,
    CrustaceanServiceException,
    DuplicateNameException,
    InvalidIDException,
    ValidationException,
)


class TestCrustaceanServiceException:

    def test_defaults_to_500(self):
        error = CrustaceanServiceException("boom")
        assert error.status_code == 500
        assert error.error_code == "INTERNAL_ERROR"
        assert error.details == {}
        assert str(error) == "boom"


class TestSubclasses:

    def test_validation_exception_carries_errors(self):
        error = ValidationException("Invalid pagination parameters", errors=["Page must be greater than 0"])
        assert error.status_code == 400
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors == ["Page must be greater than 0"]

    def test_duplicate_name_is_conflict(self):
        error = DuplicateNameException()
        assert error.status_code == 409
        assert error.error_code == "DUPLICATE_NAME"
        assert error.message == "A crustacean with this name already exists"

    def test_not_found(self):
        error = CrustaceanNotFoundException()
        assert error.status_code == 404
        assert isinstance(error, CrustaceanServiceException)

    def test_invalid_id(self):
        error = InvalidIDException()
        assert error.status_code == 400
        assert error.message == "Invalid ID parameter"
