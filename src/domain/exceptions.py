"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    """A single invalid input field and the reason it was rejected."""

    field: str
    message: str


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationError(RegistrationError):
    """Caller input is malformed.

    Carries one violation per offending field when the failure is
    field-level; status updates only carry a message.
    """

    def __init__(self, message: str, violations: list[FieldViolation] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.violations = list(violations or [])


class DuplicateRegistrationError(RegistrationError):
    """A registration already exists for this (email, event) pair."""

    def __init__(self, email: str, event: str) -> None:
        super().__init__(f"{email} is already registered for {event}")
        self.email = email
        self.event = event


class PersistenceError(RegistrationError):
    """Registry unavailable, or a create/update/query failed."""

    pass


class RegistrationNotFound(PersistenceError):
    """No registration exists with the given identifier."""

    def __init__(self, registration_id: str) -> None:
        super().__init__(f"Registration not found: {registration_id}")
        self.registration_id = registration_id


class NotificationError(RegistrationError):
    """The email provider rejected or failed to deliver a message."""

    pass
