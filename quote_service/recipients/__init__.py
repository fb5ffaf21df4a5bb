"""
Recipient retrieval package.

Re-exports the fetcher interfaces, the PostgreSQL store and its errors.
"""

from quote_service.recipients.abstract import ConnectionSource, RecipientFetcher
from quote_service.recipients.exceptions import QueryError, RecipientStoreError, RowScanError
from quote_service.recipients.store import ALL_RECIPIENTS_SQL, PostgresRecipientStore

__all__ = [
    # Interfaces
    "ConnectionSource",
    "RecipientFetcher",
    # Stores
    "ALL_RECIPIENTS_SQL",
    "PostgresRecipientStore",
    # Errors
    "RecipientStoreError",
    "QueryError",
    "RowScanError",
]
