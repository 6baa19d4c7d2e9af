"""
Input validation shared by the registration and status workflows.

Registration validation collects every violation before failing so the
form can show all field messages at once.
"""

from collections.abc import Iterable

from email_validator import EmailNotValidError, validate_email

from .exceptions import FieldViolation, ValidationError
from .models import RegistrationCandidate
from .ports import ExperienceLevel, RegistrationStatus

MIN_FULL_NAME_LENGTH = 2


def normalize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase the domain. The local part keeps
    its submitted casing.
    """
    local, at, domain = email.strip().rpartition("@")
    if not at:
        return email.strip()
    return f"{local}@{domain.lower()}"


def is_valid_email(email: str) -> bool:
    """Syntax-only check; no DNS or deliverability lookups."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_registration(
    candidate: RegistrationCandidate, offered_events: Iterable[str] | None = None
) -> RegistrationCandidate:
    """
    Validate a sign-up and return it with whitespace and email normalized.

    Args:
        candidate: Raw submitted fields
        offered_events: Allowed event ids; any non-empty event is accepted when None

    Returns:
        Normalized candidate

    Raises:
        ValidationError: With one violation per invalid field
    """
    full_name = candidate.full_name.strip()
    email = normalize_email(candidate.email)
    event = candidate.event.strip()
    experience_level = candidate.experience_level.strip()
    allowed_events = set(offered_events) if offered_events is not None else None

    violations: list[FieldViolation] = []

    if len(full_name) < MIN_FULL_NAME_LENGTH:
        violations.append(
            FieldViolation("fullName", "Full name must be at least 2 characters")
        )

    if not is_valid_email(email):
        violations.append(FieldViolation("email", "Invalid email address"))

    if not event:
        violations.append(FieldViolation("event", "Event selection is required"))
    elif allowed_events is not None and event not in allowed_events:
        violations.append(FieldViolation("event", "Selected event is not available"))

    if not experience_level:
        violations.append(FieldViolation("experienceLevel", "Experience level is required"))
    elif experience_level not in {level.value for level in ExperienceLevel}:
        violations.append(FieldViolation("experienceLevel", "Invalid experience level"))

    if violations:
        raise ValidationError("Validation failed", violations)

    return RegistrationCandidate(
        full_name=full_name,
        email=email,
        event=event,
        experience_level=experience_level,
    )


def validate_status_change(registration_id: str | None, status: str | None) -> RegistrationStatus:
    """
    Check a status-change request.

    Raises:
        ValidationError: "Missing required fields" or "Invalid status value"
    """
    if not registration_id or not status:
        raise ValidationError("Missing required fields")
    try:
        return RegistrationStatus(status)
    except ValueError:
        raise ValidationError("Invalid status value") from None
