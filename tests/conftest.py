"""
Pytest configuration for the Quote Service.

Provides fixtures for:
- Settings override for tests
- Database connection management and recipients table reset
- Canned upstream quote payloads
"""

from __future__ import annotations

import os
from typing import Generator, List, Tuple

import psycopg
import pytest

from quote_service.config import Settings, build_dsn

SEED_RECIPIENTS: List[Tuple[int, str, str]] = [
    (1, "user1", "user1@testmail.com"),
    (2, "user2", "user2@testmail.com"),
    (3, "user3", "user3@testmail.com"),
]

UPSTREAM_QUOTE = {"quoteText": "Bla Bla Bla", "quoteAuthor": "Bob"}


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "postgres"),
        db_name=os.getenv("DB_NAME", "quotes_test"),
        quote_api_url="http://quotes.test/api/1.0/",
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def test_dsn(test_settings: Settings) -> str:
    """
    Database connection string for tests.
    """
    return build_dsn(test_settings)


@pytest.fixture(scope="session")
def db_connection_available(test_dsn: str) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    try:
        with psycopg.connect(test_dsn, connect_timeout=5) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
        return True
    except psycopg.Error:
        return False


@pytest.fixture(scope="session")
def db_connection(
    test_dsn: str, db_connection_available: bool
) -> Generator[psycopg.Connection, None, None]:
    """
    Provide a session-scoped database connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = psycopg.connect(test_dsn)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="session")
def recipients_schema(db_connection: psycopg.Connection) -> bool:
    """
    Ensure the recipients table exists in the test database.
    """
    with db_connection.cursor() as cur:
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS recipients (
                id INTEGER PRIMARY KEY,
                name TEXT,
                email TEXT
            );
            """
        )
    db_connection.commit()
    return True


@pytest.fixture(scope="function")
def clean_recipients_table(db_connection: psycopg.Connection, recipients_schema: bool):
    """
    Empty the recipients table before and after each test function.
    """
    with db_connection.cursor() as cur:
        cur.execute("TRUNCATE TABLE recipients;")
    db_connection.commit()
    yield
    with db_connection.cursor() as cur:
        cur.execute("TRUNCATE TABLE recipients;")
    db_connection.commit()


@pytest.fixture(scope="function")
def seeded_recipients(
    db_connection: psycopg.Connection,
    clean_recipients_table,
) -> List[Tuple[int, str, str]]:
    """
    Seed the three reference recipients and return them.
    """
    with db_connection.cursor() as cur:
        cur.executemany(
            "INSERT INTO recipients (id, name, email) VALUES (%s, %s, %s);",
            SEED_RECIPIENTS,
        )
    db_connection.commit()
    return list(SEED_RECIPIENTS)
