"""
Interfaces for recipient retrieval.

`ConnectionSource` is the one capability the store needs from its backing
database: lend out an async connection for the duration of a block.
`psycopg_pool.AsyncConnectionPool` satisfies it.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Any, List, Protocol, runtime_checkable

from quote_service.domain.models import Recipient


@runtime_checkable
class ConnectionSource(Protocol):
    def connection(self) -> AbstractAsyncContextManager[Any]:
        ...


@runtime_checkable
class RecipientFetcher(Protocol):
    """
    Common interface of recipient sources.
    """

    async def all_recipients(self) -> List[Recipient]:
        """
        Return every recipient known to the store, in no guaranteed order.

        Raises
        ------
        RecipientStoreError
            If the store cannot be queried.
        """
        ...


__all__ = ["ConnectionSource", "RecipientFetcher"]
