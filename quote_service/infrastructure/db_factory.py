"""
Database connection factory utilities for the Quote Service.

Builds the async PostgreSQL connection pool backing the recipient store and a
connectivity check for operators. The pool is created unopened; the
application opens it without waiting so the service starts even while the
database is unreachable (requests then fail with a QueryError).

Includes retry logic for transient connection failures using tenacity.
"""

from __future__ import annotations

import psycopg
from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from quote_service.config import Settings, build_dsn
from quote_service.utils.logging import get_logger

log = get_logger(__name__)

CONNECT_TIMEOUT_SECONDS = 5


def create_recipient_pool(settings: Settings) -> AsyncConnectionPool:
    """
    Create (but do not open) the async pool used by the recipient store.

    Parameters
    ----------
    settings : Settings
        Source of the DSN and the pool size bounds.

    Returns
    -------
    AsyncConnectionPool
        A pool the caller must open and eventually close.
    """
    return AsyncConnectionPool(
        conninfo=build_dsn(settings),
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        open=False,
        name="recipients",
    )


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(psycopg.OperationalError),
    reraise=True,
)
async def check_database(settings: Settings) -> None:
    """
    Open a dedicated connection and run `SELECT 1` with automatic retry.

    Retries up to 3 times with exponential backoff for transient connection errors.

    Raises
    ------
    psycopg.OperationalError
        If the database is still unreachable after all retry attempts.
    """
    log.info(
        "Checking database connectivity",
        extra={"db_host": settings.db_host, "db_name": settings.db_name},
    )
    async with await AsyncConnection.connect(
        build_dsn(settings), connect_timeout=CONNECT_TIMEOUT_SECONDS
    ) as conn:
        async with conn.cursor() as cur:
            await cur.execute("SELECT 1;")
            await cur.fetchone()


__all__ = [
    "check_database",
    "create_recipient_pool",
]
