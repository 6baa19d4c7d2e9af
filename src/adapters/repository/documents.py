"""
Document mapping for the registrations collection.

Documents use the collection's camelCase field names and ISO-8601
timestamp strings; entities use snake_case and aware datetimes.
"""

import secrets
import string
from datetime import datetime, timezone
from typing import Any

from src.domain.models import UNKNOWN, Registration, RegistrationDraft

COLLECTION = "registrations"

_ID_ALPHABET = string.ascii_letters + string.digits
_ID_LENGTH = 20


def generate_document_id() -> str:
    """
    Generate a random 20-character alphanumeric document id.

    Uses secrets module for cryptographic randomness so ids cannot be guessed.
    """
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def to_document(draft: RegistrationDraft) -> dict[str, Any]:
    return {
        "fullName": draft.full_name,
        "email": draft.email,
        "event": draft.event,
        "experienceLevel": draft.experience_level,
        "status": draft.status,
        "createdAt": format_timestamp(draft.created_at),
        "lastUpdated": format_timestamp(draft.last_updated),
        "registrationIP": draft.registration_ip,
        "userAgent": draft.user_agent,
    }


def from_document(registration_id: str, document: dict[str, Any]) -> Registration:
    return Registration(
        id=registration_id,
        full_name=document["fullName"],
        email=document["email"],
        event=document["event"],
        experience_level=document["experienceLevel"],
        status=document["status"],
        created_at=parse_timestamp(document["createdAt"]),
        last_updated=parse_timestamp(document["lastUpdated"]),
        registration_ip=document.get("registrationIP", UNKNOWN),
        user_agent=document.get("userAgent", UNKNOWN),
    )
