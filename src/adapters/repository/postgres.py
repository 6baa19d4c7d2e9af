"""
PostgreSQL repository adapter - Implements RegistrationRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Storage Layout
--------------
The registrations collection is a single table holding one JSONB document
per registration, keyed by a generated 20-character id. Documents use the
collection's camelCase field names. created_at is also kept as a
TIMESTAMPTZ column so the admin listing can be ordered without parsing
JSON.

There is no uniqueness constraint on (email, event). The duplicate check is
an application-level query made before create(), and concurrent sign-ups
for the same pair can both be written.

Every psycopg failure is re-raised as PersistenceError so that no driver
detail reaches the API layer.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

import psycopg
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from src.domain.exceptions import PersistenceError, RegistrationNotFound
from src.domain.models import Registration, RegistrationDraft

from .documents import format_timestamp, from_document, generate_document_id, to_document

logger = logging.getLogger(__name__)


@contextmanager
def _registry_errors(action: str) -> Iterator[None]:
    """Translate driver and pool errors into PersistenceError."""
    try:
        yield
    except psycopg.Error as e:
        logger.exception("Registry %s failed", action)
        raise PersistenceError(f"Registry {action} failed") from e


class PostgresRegistrationRepository:
    """
    Implements RegistrationRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create(self, draft: RegistrationDraft) -> str:
        """
        Insert a new registration document.

        Args:
            draft: Validated registration without an identifier

        Returns:
            Generated document id
        """
        sql = """
            INSERT INTO registrations (id, document, created_at)
            VALUES (%s, %s, %s)
        """
        registration_id = generate_document_id()

        with _registry_errors("create"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (registration_id, Jsonb(to_document(draft)), draft.created_at))
                conn.commit()
        return registration_id

    def find_by_email_and_event(self, email: str, event: str) -> Registration | None:
        """
        Return the oldest registration for an (email, event) pair, if any.
        """
        sql = """
            SELECT id, document
            FROM registrations
            WHERE document->>'email' = %s
              AND document->>'event' = %s
            ORDER BY created_at
            LIMIT 1
        """

        with _registry_errors("query"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email, event))
                row = cursor.fetchone()

        if row is None:
            return None
        return from_document(row[0], row[1])

    def update_status(
        self, registration_id: str, status: str, last_updated: datetime
    ) -> Registration:
        """
        Merge a new status and lastUpdated into an existing document.

        Unknown identifiers raise RegistrationNotFound; the update never
        creates a document.
        """
        sql = """
            UPDATE registrations
            SET document = document || %s
            WHERE id = %s
            RETURNING id, document
        """
        patch = {"status": status, "lastUpdated": format_timestamp(last_updated)}

        with _registry_errors("update"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (Jsonb(patch), registration_id))
                row = cursor.fetchone()
                conn.commit()

        if row is None:
            logger.warning("Status update for unknown registration %s", registration_id)
            raise RegistrationNotFound(registration_id)
        return from_document(row[0], row[1])

    def list_all(self) -> list[Registration]:
        """Return every registration ordered by created_at, newest first."""
        sql = """
            SELECT id, document
            FROM registrations
            ORDER BY created_at DESC
        """

        with _registry_errors("listing"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql)
                rows = cursor.fetchall()

        return [from_document(row[0], row[1]) for row in rows]

    def ping(self) -> None:
        with _registry_errors("ping"):
            with self._pool.connection() as conn:
                conn.execute("SELECT 1")


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
