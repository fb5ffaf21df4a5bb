"""Custom exceptions for the quote client."""


class QuoteClientError(Exception):
    """Base exception for quote generation failures."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(QuoteClientError):
    """The upstream service could not be reached (DNS, refused, timeout)."""

    pass


class UpstreamStatusError(QuoteClientError):
    """The upstream service answered with a status other than 200."""

    pass


class DecodeError(QuoteClientError):
    """The upstream body is not JSON or lacks the quote fields."""

    pass
