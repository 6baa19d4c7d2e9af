"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from datetime import datetime
from enum import Enum
from typing import Protocol

from .models import Registration, RegistrationDraft


class RegistrationStatus(str, Enum):
    """
    Review states for a registration.

    PENDING is the only initial state. APPROVED and REJECTED are final in
    intent, but no transition is guarded: an admin may move a registration
    between any two states, including back to PENDING.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ExperienceLevel(str, Enum):
    """Self-reported experience level collected by the registration form."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class RegistrationRepository(Protocol):
    """Port interface for registration persistence (the Registry)."""

    def create(self, draft: RegistrationDraft) -> str:
        """
        Store a new registration document.

        Args:
            draft: Fully populated registration without an identifier

        Returns:
            Identifier assigned by the Registry

        Raises:
            PersistenceError: If the write fails
        """
        ...

    def find_by_email_and_event(self, email: str, event: str) -> Registration | None:
        """
        Look up the registration for an (email, event) pair.

        Returns:
            The first matching registration, or None if there is none

        Raises:
            PersistenceError: If the query fails
        """
        ...

    def update_status(
        self, registration_id: str, status: str, last_updated: datetime
    ) -> Registration:
        """
        Set status and last_updated on an existing registration.

        Fails loudly for unknown identifiers instead of creating a document
        or silently doing nothing.

        Returns:
            The registration as stored after the update

        Raises:
            RegistrationNotFound: If no registration has this identifier
            PersistenceError: If the update fails
        """
        ...

    def list_all(self) -> list[Registration]:
        """
        Return every registration, most recently created first.

        Raises:
            PersistenceError: If the query fails
        """
        ...

    def ping(self) -> None:
        """Raise PersistenceError if the Registry cannot be reached."""
        ...


class EmailSender(Protocol):
    """Port interface for transactional email delivery (the Notifier)."""

    def send(self, to: str, subject: str, html: str, reply_to: str | None = None) -> str:
        """
        Deliver one HTML email.

        Args:
            to: Recipient email address
            subject: Subject line
            html: HTML body
            reply_to: Optional Reply-To address

        Returns:
            Provider message id

        Raises:
            NotificationError: If the provider rejects or fails the request
        """
        ...
