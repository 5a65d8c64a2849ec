"""Tests for domain errors."""

from app.exceptions import (
    ConflictError,
    FatalInconsistencyError,
    NotFoundError,
    RegistryError,
    ValidationError,
)


class TestValidationError:
    def test_str_lists_every_error(self):
        error = ValidationError("Validation of horse for create failed", ["a", "b"])

        assert error.message == "Validation of horse for create failed"
        assert error.errors == ["a", "b"]
        assert str(error) == "Validation of horse for create failed. Failed validations: a, b."

    def test_str_without_errors(self):
        assert str(ValidationError("Invalid")) == "Invalid"


class TestConflictError:
    def test_str_lists_conflicts(self):
        error = ConflictError("Conflict", ["taken"])

        assert str(error) == "Conflict. Conflicts: taken."


def test_hierarchy():
    for cls in (ValidationError, ConflictError, NotFoundError, FatalInconsistencyError):
        assert issubclass(cls, RegistryError)
    assert NotFoundError("gone").message == "gone"
