"""
Registration domain service - the sign-up write path.

Workflow
========

    validate -> duplicate check -> persist -> notify (best effort) -> result

- Validation collects every field violation and fails before any I/O.
- The duplicate check looks up the (email, event) pair in the Registry.
  Check and create are separate Registry calls, so two concurrent
  submissions for the same pair can both be stored; the Registry is not
  expected to enforce uniqueness itself.
- Persistence decides the outcome. A failed write aborts the workflow
  before any email is sent.
- The confirmation email goes through deliver_best_effort(). It is awaited
  in line but its result never changes the returned RegistrationResult.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime

from .exceptions import DuplicateRegistrationError
from .models import (
    Provenance,
    RegistrationCandidate,
    RegistrationDraft,
    RegistrationResult,
    utc_now,
)
from .notifications import confirmation_message, deliver_best_effort
from .ports import EmailSender, RegistrationRepository, RegistrationStatus
from .validation import validate_registration

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for event sign-ups.

    Orchestrates validation, the duplicate check, the Registry write and
    the confirmation email.
    """

    repository: RegistrationRepository
    email_sender: EmailSender
    offered_events: Mapping[str, str] | None = None
    clock: Callable[[], datetime] = field(default=utc_now)

    def register(
        self, candidate: RegistrationCandidate, provenance: Provenance | None = None
    ) -> RegistrationResult:
        """
        Register a person for an event.

        Args:
            candidate: Submitted form fields
            provenance: Source address and user agent of the request

        Returns:
            RegistrationResult with the Registry-assigned identifier

        Raises:
            ValidationError: If any field is invalid
            DuplicateRegistrationError: If the pair is already registered
            PersistenceError: If the Registry query or write fails
        """
        provenance = provenance or Provenance()
        logger.info("Starting registration for event %r", candidate.event)

        valid = validate_registration(candidate, self.offered_events)

        existing = self.repository.find_by_email_and_event(valid.email, valid.event)
        if existing is not None:
            logger.info("Found existing registration %s for event %r", existing.id, valid.event)
            raise DuplicateRegistrationError(valid.email, valid.event)

        now = self.clock()
        draft = RegistrationDraft(
            full_name=valid.full_name,
            email=valid.email,
            event=valid.event,
            experience_level=valid.experience_level,
            status=RegistrationStatus.PENDING.value,
            created_at=now,
            last_updated=now,
            registration_ip=provenance.registration_ip,
            user_agent=provenance.user_agent,
        )
        registration_id = self.repository.create(draft)
        logger.info("Registration added successfully with ID: %s", registration_id)

        report = deliver_best_effort(
            self.email_sender,
            confirmation_message(
                valid.email, valid.full_name, valid.event, self.offered_events
            ),
        )
        if not report.delivered:
            logger.error(
                "Failed to send confirmation email for registration %s: %s",
                registration_id,
                report.error,
            )

        return RegistrationResult(registration_id=registration_id)
