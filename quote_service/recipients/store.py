"""
PostgreSQL-backed recipient store.

Reads the whole `recipients` table with a single unparameterized SELECT and
scans each row into a `Recipient`. Rows that fail to scan are skipped and
logged; with `strict_scan` they fail the whole call instead.
"""

from __future__ import annotations

from typing import Any, List, Sequence

import psycopg
from pydantic import ValidationError

from quote_service.domain.models import Recipient
from quote_service.recipients.abstract import ConnectionSource
from quote_service.recipients.exceptions import QueryError, RowScanError
from quote_service.utils.logging import get_logger

log = get_logger(__name__)

ALL_RECIPIENTS_SQL = "SELECT * FROM recipients;"


def _scan_reason(exc: ValidationError) -> str:
    """
    Describe a validation failure by field and error type, never by value.
    """
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['type']}"
        for error in exc.errors(include_url=False)
    )


def _scan_row(row: Sequence[Any], row_index: int) -> Recipient:
    """
    Scan an `(id, name, email)` row into a Recipient.
    """
    try:
        recipient_id, name, email = row
    except (TypeError, ValueError) as exc:
        raise RowScanError(
            f"Row {row_index} cannot be scanned: expected 3 columns",
            row_index=row_index,
            reason="column_count",
        ) from exc
    try:
        return Recipient(id=recipient_id, name=name, email=email)
    except ValidationError as exc:
        reason = _scan_reason(exc)
        raise RowScanError(
            f"Row {row_index} cannot be scanned: {reason}", row_index=row_index, reason=reason
        ) from exc


class PostgresRecipientStore:
    """
    Recipient fetcher over a psycopg async connection pool.
    """

    name: str = "postgres"

    def __init__(self, pool: ConnectionSource, strict_scan: bool = False) -> None:
        self._pool = pool
        self.strict_scan = strict_scan

    async def all_recipients(self) -> List[Recipient]:
        """
        Fetch all recipients.

        Returns
        -------
        List[Recipient]
            One entry per scannable row; empty when the table is empty.

        Raises
        ------
        QueryError
            If a connection cannot be acquired, the query fails, the cursor
            cannot be read, or (in strict mode) a row cannot be scanned.
        """
        recipients: List[Recipient] = []
        skipped = 0

        try:
            async with self._pool.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(ALL_RECIPIENTS_SQL)
                    row_index = 0
                    async for row in cur:
                        try:
                            recipients.append(_scan_row(row, row_index))
                        except RowScanError as exc:
                            if self.strict_scan:
                                raise QueryError(str(exc)) from exc
                            skipped += 1
                            log.warning(
                                "[RECIPIENTS SKIP] Dropping unscannable row",
                                extra={"row_index": row_index, "reason": exc.reason},
                            )
                        row_index += 1
        except psycopg.Error as exc:
            raise QueryError(f"Recipients query failed: {exc}") from exc

        log.info(
            "Recipients fetched",
            extra={"recipients": len(recipients), "skipped_rows": skipped},
        )
        return recipients


__all__ = ["ALL_RECIPIENTS_SQL", "PostgresRecipientStore"]
