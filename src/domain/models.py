"""
Domain entities - the Registration record and its creation inputs.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

UNKNOWN = "unknown"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RegistrationCandidate:
    """Raw sign-up fields as submitted by the client, before validation."""

    full_name: str = ""
    email: str = ""
    event: str = ""
    experience_level: str = ""


@dataclass(frozen=True)
class Provenance:
    """Request transport details kept for audit only, never used for logic."""

    registration_ip: str = UNKNOWN
    user_agent: str = UNKNOWN


@dataclass(frozen=True)
class RegistrationDraft:
    """A validated registration ready to be written, not yet identified."""

    full_name: str
    email: str
    event: str
    experience_level: str
    status: str
    created_at: datetime
    last_updated: datetime
    registration_ip: str = UNKNOWN
    user_agent: str = UNKNOWN


@dataclass(frozen=True)
class Registration(RegistrationDraft):
    """A stored registration with its Registry-assigned identifier."""

    id: str = ""

    @classmethod
    def from_draft(cls, registration_id: str, draft: RegistrationDraft) -> "Registration":
        return cls(
            id=registration_id,
            full_name=draft.full_name,
            email=draft.email,
            event=draft.event,
            experience_level=draft.experience_level,
            status=draft.status,
            created_at=draft.created_at,
            last_updated=draft.last_updated,
            registration_ip=draft.registration_ip,
            user_agent=draft.user_agent,
        )


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a successful registration."""

    registration_id: str
    message: str = "Registration successful"


@dataclass(frozen=True)
class StatusUpdateResult:
    """Outcome of a successful status change."""

    registration: Registration
    message: str = "Status updated successfully"
