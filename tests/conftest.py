"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory Registry and a recording Notifier
- A deterministic clock
- A test client wired to the in-memory service container
"""

import pytest
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryRegistrationRepository
from src.api.container import ServiceContainer
from src.api.main import create_app
from src.config.settings import Settings
from src.domain.exceptions import NotificationError
from tests.fakes import RecordingEmailSender, TickingClock


@pytest.fixture
def repository() -> InMemoryRegistrationRepository:
    return InMemoryRegistrationRepository()


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture
def failing_email_sender() -> RecordingEmailSender:
    sender = RecordingEmailSender()
    sender.fail_with = NotificationError("provider unavailable")
    return sender


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, registry_backend="memory", email_backend="console")


@pytest.fixture
def container(
    settings: Settings,
    repository: InMemoryRegistrationRepository,
    email_sender: RecordingEmailSender,
) -> ServiceContainer:
    return ServiceContainer(settings=settings, repository=repository, email_sender=email_sender)


@pytest.fixture
def client(container: ServiceContainer) -> TestClient:
    """Create test client for an application using the in-memory container."""
    return TestClient(create_app(container))
