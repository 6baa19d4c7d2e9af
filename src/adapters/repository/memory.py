"""
In-memory repository adapter - Implements RegistrationRepository protocol.

Keeps registrations in a process-local dict. Used for local development
(REGISTRY_BACKEND=memory) and as the Registry fake in tests.
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime

from src.domain.exceptions import RegistrationNotFound
from src.domain.models import Registration, RegistrationDraft

from .documents import generate_document_id

logger = logging.getLogger(__name__)


class InMemoryRegistrationRepository:
    """
    Implements RegistrationRepository protocol with a locked dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Each call is atomic on its own; like the real Registry, a find followed
    by a create is not.

    get() and len() are inspection helpers for tests and local runs; they
    are not part of the RegistrationRepository protocol.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, Registration] = {}

    def create(self, draft: RegistrationDraft) -> str:
        with self._lock:
            registration_id = generate_document_id()
            while registration_id in self._records:
                registration_id = generate_document_id()
            self._records[registration_id] = Registration.from_draft(registration_id, draft)
        return registration_id

    def find_by_email_and_event(self, email: str, event: str) -> Registration | None:
        with self._lock:
            for record in self._records.values():
                if record.email == email and record.event == event:
                    return record
        return None

    def get(self, registration_id: str) -> Registration | None:
        """Test helper: look up a record by id."""
        with self._lock:
            return self._records.get(registration_id)

    def update_status(
        self, registration_id: str, status: str, last_updated: datetime
    ) -> Registration:
        with self._lock:
            record = self._records.get(registration_id)
            if record is None:
                logger.warning("Status update for unknown registration %s", registration_id)
                raise RegistrationNotFound(registration_id)
            updated = replace(record, status=status, last_updated=last_updated)
            self._records[registration_id] = updated
        return updated

    def list_all(self) -> list[Registration]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def ping(self) -> None:
        return None

    def __len__(self) -> int:
        """Test helper: number of stored records."""
        with self._lock:
            return len(self._records)
