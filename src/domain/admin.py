"""
Admin domain service - status changes and the registration listing.

Status changes trust the caller-supplied identifier and apply no
transition guards; any of the three statuses may follow any other.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime

from .models import Registration, StatusUpdateResult, utc_now
from .notifications import deliver_best_effort, status_update_message
from .ports import EmailSender, RegistrationRepository
from .validation import validate_status_change

logger = logging.getLogger(__name__)


@dataclass
class AdminService:
    """Domain service backing the admin registrations table."""

    repository: RegistrationRepository
    email_sender: EmailSender
    offered_events: Mapping[str, str] | None = None
    clock: Callable[[], datetime] = field(default=utc_now)

    def update_status(self, registration_id: str | None, status: str | None) -> StatusUpdateResult:
        """
        Move a registration to a new status and tell the registrant.

        Args:
            registration_id: Registry identifier
            status: "approved", "rejected" or "pending"

        Returns:
            StatusUpdateResult holding the updated registration

        Raises:
            ValidationError: Missing fields or unknown status value
            RegistrationNotFound: If the identifier does not exist
            PersistenceError: If the update fails
        """
        new_status = validate_status_change(registration_id, status)

        updated = self.repository.update_status(registration_id, new_status.value, self.clock())
        logger.info("Registration %s moved to %s", registration_id, new_status.value)

        message = status_update_message(
            updated.email, updated.full_name, updated.event, new_status, self.offered_events
        )
        if message is not None:
            deliver_best_effort(self.email_sender, message)

        return StatusUpdateResult(registration=updated)

    def list_registrations(self) -> list[Registration]:
        """
        Return every registration, most recently created first.

        Raises:
            PersistenceError: If the Registry cannot be read
        """
        registrations = self.repository.list_all()
        logger.info("Loaded %d registration(s)", len(registrations))
        return registrations
