"""
Public registration routes.

- POST /api/register - Sign up for an event
- GET /api/test-email - Send a test message to the administrative address
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.container import ServiceContainer
from src.api.dependencies import get_container, get_provenance, get_registration_service
from src.api.models import ErrorResponse, ProviderCheckResponse, RegisterRequest, RegisterResponse
from src.domain.exceptions import NotificationError, PersistenceError
from src.domain.models import Provenance
from src.domain.notifications import provider_check_message
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registrations"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed or already registered"},
        500: {"model": ErrorResponse, "description": "Registration could not be stored"},
    },
    summary="Register for an event",
    description="Submit name, email, event and experience level. "
    "A confirmation email is sent when the registration is stored.",
)
def register(
    request_data: RegisterRequest,
    provenance: Provenance = Depends(get_provenance),
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse:
    """
    Register for an event.

    - **fullName**: At least 2 characters
    - **email**: Valid email address
    - **event**: One of the offered event identifiers
    - **experienceLevel**: beginner, intermediate or advanced
    """
    try:
        result = service.register(request_data.to_candidate(), provenance)
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process registration",
        ) from None
    return RegisterResponse(message=result.message, registration_id=result.registration_id)


@router.get(
    "/test-email",
    response_model=ProviderCheckResponse,
    responses={500: {"model": ErrorResponse, "description": "Email provider rejected the message"}},
    summary="Send a test email",
    description="Sends a fixed message to the administrative address to verify provider setup.",
)
def send_test_email(container: ServiceContainer = Depends(get_container)) -> ProviderCheckResponse:
    message = provider_check_message(container.settings.admin_email)
    try:
        message_id = container.email_sender.send(message.to, message.subject, message.html)
    except NotificationError as e:
        logger.error("Test email error: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from None
    return ProviderCheckResponse(message="Test email sent successfully", data={"id": message_id})
