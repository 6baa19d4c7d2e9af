"""
Admin routes - status management and the registrations table.

There is no authentication on these endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_admin_service
from src.api.models import ErrorResponse, MessageResponse, RegistrationOut, UpdateStatusRequest
from src.domain.admin import AdminService
from src.domain.exceptions import PersistenceError

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/update-status",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields or invalid status"},
        500: {"model": ErrorResponse, "description": "Status could not be updated"},
    },
    summary="Change a registration's status",
)
def update_status(
    request_data: UpdateStatusRequest,
    service: AdminService = Depends(get_admin_service),
) -> MessageResponse:
    """
    Set a registration to approved, rejected or pending.

    Unknown registration ids fail with the same 500 error as any other
    Registry failure.
    """
    try:
        result = service.update_status(request_data.registration_id, request_data.status)
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update status",
        ) from None
    return MessageResponse(message=result.message)


@router.get(
    "/registrations",
    response_model=list[RegistrationOut],
    responses={500: {"model": ErrorResponse, "description": "Registrations could not be loaded"}},
    summary="List all registrations, newest first",
)
def list_registrations(service: AdminService = Depends(get_admin_service)) -> list[RegistrationOut]:
    try:
        registrations = service.list_registrations()
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load registrations",
        ) from None
    return [RegistrationOut.from_registration(r) for r in registrations]
