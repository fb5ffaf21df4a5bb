"""
Domain package for the Quote Service.

Exports the records exchanged between the quote client, the recipient store
and the HTTP handler. Keep this package focused on data definitions.
"""

from quote_service.domain.models import Quote, QuoteResponse, Recipient

__all__ = [
    "Quote",
    "QuoteResponse",
    "Recipient",
]
