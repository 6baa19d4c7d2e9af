"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
JSON field names are camelCase; Python attributes stay snake_case.

Request fields are deliberately loose (optional strings): field-level rules
live in the domain so that every violation is reported in one response.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.adapters.repository.documents import format_timestamp
from src.domain.models import Registration, RegistrationCandidate


class CamelModel(BaseModel):
    """Base model serializing to camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    """Request model for event registration."""

    full_name: str | None = Field(None, description="Registrant's full name (min 2 characters)")
    email: str | None = Field(None, description="Registrant's email address")
    event: str | None = Field(None, description="Identifier of the offered event")
    experience_level: str | None = Field(
        None, description="One of beginner, intermediate, advanced"
    )

    def to_candidate(self) -> RegistrationCandidate:
        return RegistrationCandidate(
            full_name=self.full_name or "",
            email=self.email or "",
            event=self.event or "",
            experience_level=self.experience_level or "",
        )


class RegisterResponse(CamelModel):
    """Response model for successful registration."""

    message: str
    registration_id: str


class UpdateStatusRequest(CamelModel):
    """Request model for an admin status change."""

    registration_id: str | None = None
    status: str | None = Field(None, description="One of approved, rejected, pending")


class MessageResponse(BaseModel):
    """Response model carrying a confirmation message."""

    message: str


class FieldErrorModel(BaseModel):
    """One invalid request field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    errors: list[FieldErrorModel] | None = None


class RegistrationOut(CamelModel):
    """A registration document as shown in the admin table."""

    id: str
    full_name: str
    email: str
    event: str
    experience_level: str
    status: str
    created_at: str
    last_updated: str
    registration_ip: str = Field(alias="registrationIP")
    user_agent: str

    @classmethod
    def from_registration(cls, registration: Registration) -> "RegistrationOut":
        return cls(
            id=registration.id,
            full_name=registration.full_name,
            email=registration.email,
            event=registration.event,
            experience_level=registration.experience_level,
            status=registration.status,
            created_at=format_timestamp(registration.created_at),
            last_updated=format_timestamp(registration.last_updated),
            registration_ip=registration.registration_ip,
            user_agent=registration.user_agent,
        )


class ProviderCheckResponse(BaseModel):
    """Response model for an email provider configuration check."""

    message: str
    data: dict[str, str]
