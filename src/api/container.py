"""
Service container - process-wide capabilities built once at startup.

The container owns the Registry and Notifier adapters selected by
Settings. It is stored on app.state and handed to the workflows through
the Depends() factories in src.api.dependencies, so tests can build one
from in-memory fakes instead.
"""

import logging
from dataclasses import dataclass

from psycopg_pool import ConnectionPool

from src.adapters.email import ConsoleEmailSender, ResendEmailSender
from src.adapters.repository import (
    InMemoryRegistrationRepository,
    PostgresRegistrationRepository,
    run_migrations,
)
from src.config.settings import Settings
from src.domain.ports import EmailSender, RegistrationRepository

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Registry and Notifier capabilities shared by every request."""

    settings: Settings
    repository: RegistrationRepository
    email_sender: EmailSender
    pool: ConnectionPool | None = None

    def close(self) -> None:
        if self.pool is not None:
            self.pool.close()
            logger.info("Database connection pool closed")


def build_email_sender(settings: Settings) -> EmailSender:
    if settings.email_backend == "resend":
        logger.info(
            "Using Resend email sender (API key: %s, production: %s)",
            "Present" if settings.resend_api_key else "Missing",
            settings.is_production,
        )
        return ResendEmailSender(
            api_key=settings.resend_api_key,
            sender=settings.email_from,
            admin_email=settings.admin_email,
            production=settings.is_production,
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout_seconds,
        )
    logger.info("Using console email sender")
    return ConsoleEmailSender()


def build_container(settings: Settings) -> ServiceContainer:
    """
    Create the adapters configured by settings.

    For the postgres backend this opens the connection pool and runs
    migrations before returning.
    """
    email_sender = build_email_sender(settings)

    if settings.registry_backend == "memory":
        logger.info("Using in-memory registry")
        return ServiceContainer(
            settings=settings,
            repository=InMemoryRegistrationRepository(),
            email_sender=email_sender,
        )

    logger.info("Connecting to database...")
    # Create connection pool with explicit sizing
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=True,
    )

    logger.info("Running database migrations...")
    run_migrations(pool)

    return ServiceContainer(
        settings=settings,
        repository=PostgresRegistrationRepository(pool),
        email_sender=email_sender,
        pool=pool,
    )
