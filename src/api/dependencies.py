"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.api.container import ServiceContainer
from src.domain.admin import AdminService
from src.domain.models import UNKNOWN, Provenance
from src.domain.ports import EmailSender, RegistrationRepository
from src.domain.registration import RegistrationService


def get_container(request: Request) -> ServiceContainer:
    """
    Get service container from app state.

    The container is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.container


def get_repository(request: Request) -> RegistrationRepository:
    return get_container(request).repository


def get_email_sender(request: Request) -> EmailSender:
    return get_container(request).email_sender


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, email sender and the offered events.
    """
    container = get_container(request)
    return RegistrationService(
        repository=container.repository,
        email_sender=container.email_sender,
        offered_events=container.settings.offered_events,
    )


def get_admin_service(request: Request) -> AdminService:
    """Create admin service with injected dependencies."""
    container = get_container(request)
    return AdminService(
        repository=container.repository,
        email_sender=container.email_sender,
        offered_events=container.settings.offered_events,
    )


def get_provenance(request: Request) -> Provenance:
    """
    Capture audit details of the calling client.

    The first X-Forwarded-For hop wins over the socket peer, since the
    service normally sits behind a proxy.
    """
    forwarded = request.headers.get("x-forwarded-for", "")
    ip = forwarded.split(",")[0].strip()
    if not ip and request.client is not None:
        ip = request.client.host
    user_agent = request.headers.get("user-agent", "").strip()
    return Provenance(registration_ip=ip or UNKNOWN, user_agent=user_agent or UNKNOWN)
