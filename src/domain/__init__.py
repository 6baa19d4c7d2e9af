"""
Domain layer - Event registration business logic.

This package contains the registration and admin workflows. It defines its
own port interfaces for the Registry and the Notifier so that adapters can
be swapped without touching the workflows.
"""

from .admin import AdminService
from .exceptions import (
    DuplicateRegistrationError,
    FieldViolation,
    NotificationError,
    PersistenceError,
    RegistrationError,
    RegistrationNotFound,
    ValidationError,
)
from .models import (
    Provenance,
    Registration,
    RegistrationCandidate,
    RegistrationDraft,
    RegistrationResult,
    StatusUpdateResult,
)
from .ports import EmailSender, ExperienceLevel, RegistrationRepository, RegistrationStatus
from .registration import RegistrationService

__all__ = [
    "AdminService",
    "DuplicateRegistrationError",
    "EmailSender",
    "ExperienceLevel",
    "FieldViolation",
    "NotificationError",
    "PersistenceError",
    "Provenance",
    "Registration",
    "RegistrationCandidate",
    "RegistrationDraft",
    "RegistrationError",
    "RegistrationNotFound",
    "RegistrationRepository",
    "RegistrationResult",
    "RegistrationService",
    "RegistrationStatus",
    "StatusUpdateResult",
    "ValidationError",
]
