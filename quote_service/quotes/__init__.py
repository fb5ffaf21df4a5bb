"""
Quote generation package.

Re-exports the generator interfaces, the Forismatic client and its errors so
downstream code can import from `quote_service.quotes` directly.
"""

from quote_service.quotes.abstract import HTTPTransport, QuoteGenerator
from quote_service.quotes.exceptions import (
    DecodeError,
    QuoteClientError,
    TransportError,
    UpstreamStatusError,
)
from quote_service.quotes.forismatic import ForismaticClient

__all__ = [
    # Interfaces
    "HTTPTransport",
    "QuoteGenerator",
    # Clients
    "ForismaticClient",
    # Errors
    "QuoteClientError",
    "TransportError",
    "UpstreamStatusError",
    "DecodeError",
]
