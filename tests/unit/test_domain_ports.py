"""
Unit tests for domain ports and exceptions.

Tests verify:
- Status and experience enums
- Exception hierarchy and payloads
- Adapters satisfy the ports structurally
"""

from enum import Enum

from src.adapters.repository import InMemoryRegistrationRepository, PostgresRegistrationRepository
from src.domain.exceptions import (
    DuplicateRegistrationError,
    FieldViolation,
    NotificationError,
    PersistenceError,
    RegistrationError,
    RegistrationNotFound,
    ValidationError,
)
from src.domain.ports import ExperienceLevel, RegistrationRepository, RegistrationStatus


class TestRegistrationStatusEnum:
    """Tests for RegistrationStatus enum."""

    def test_is_str_enum(self) -> None:
        """RegistrationStatus uses str mixin for JSON serialization."""
        assert issubclass(RegistrationStatus, Enum)
        assert issubclass(RegistrationStatus, str)

    def test_values(self) -> None:
        assert {s.value for s in RegistrationStatus} == {"pending", "approved", "rejected"}


class TestExperienceLevelEnum:
    """Tests for ExperienceLevel enum."""

    def test_values(self) -> None:
        assert [level.value for level in ExperienceLevel] == ["beginner", "intermediate", "advanced"]


class TestExceptions:
    """Tests for the domain exception hierarchy."""

    def test_all_inherit_registration_error(self) -> None:
        for exc_type in (
            ValidationError,
            DuplicateRegistrationError,
            PersistenceError,
            RegistrationNotFound,
            NotificationError,
        ):
            assert issubclass(exc_type, RegistrationError)

    def test_not_found_is_persistence_error(self) -> None:
        assert issubclass(RegistrationNotFound, PersistenceError)

    def test_validation_error_carries_violations(self) -> None:
        exc = ValidationError("Validation failed", [FieldViolation("email", "Invalid email address")])
        assert exc.message == "Validation failed"
        assert exc.violations == [FieldViolation("email", "Invalid email address")]
        assert str(exc) == "Validation failed"

    def test_validation_error_without_violations(self) -> None:
        assert ValidationError("Invalid status value").violations == []

    def test_duplicate_error_payload(self) -> None:
        exc = DuplicateRegistrationError("ada@example.com", "plateau-jan25")
        assert exc.email == "ada@example.com"
        assert exc.event == "plateau-jan25"


class TestStructuralSubtyping:
    """Repositories implement the port without inheriting from it."""

    def test_repositories_have_port_methods(self) -> None:
        methods = ["create", "find_by_email_and_event", "update_status", "list_all", "ping"]
        for adapter in (InMemoryRegistrationRepository, PostgresRegistrationRepository):
            assert adapter.__bases__ == (object,)
            for name in methods:
                assert callable(getattr(adapter, name))

    def test_memory_repository_accepted_as_port(self) -> None:
        def accepts_repository(r: RegistrationRepository) -> None:
            pass

        accepts_repository(InMemoryRegistrationRepository())
