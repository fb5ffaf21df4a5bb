"""Custom exceptions for the recipient store."""


class RecipientStoreError(Exception):
    """Base exception for recipient retrieval failures."""

    pass


class QueryError(RecipientStoreError):
    """The recipients query could not be executed or its cursor read."""

    pass


class RowScanError(RecipientStoreError):
    """A single row could not be scanned into a Recipient."""

    def __init__(self, message: str, row_index: int | None = None, reason: str = ""):
        super().__init__(message)
        self.row_index = row_index
        self.reason = reason
