"""Repository adapters - Registry implementations."""

from .memory import InMemoryRegistrationRepository
from .postgres import PostgresRegistrationRepository, run_migrations

__all__ = ["InMemoryRegistrationRepository", "PostgresRegistrationRepository", "run_migrations"]
