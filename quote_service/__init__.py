"""
Quote Service - serves an inspirational quote together with its recipients.

On `GET /quote?lang=<code>` the service:

- fetches a quote from the upstream Forismatic API through an injected HTTP transport
- reads every recipient from the PostgreSQL `recipients` table
- returns both as one JSON document, or a bare 500 when either collaborator fails
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from quote_service.api.app import create_app
from quote_service.config import Settings, build_dsn, get_settings
from quote_service.domain.models import Quote, QuoteResponse, Recipient
from quote_service.orchestrator import build_quote_response
from quote_service.quotes import ForismaticClient, QuoteClientError, QuoteGenerator
from quote_service.recipients import PostgresRecipientStore, RecipientFetcher, RecipientStoreError
from quote_service.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "build_dsn",
    "get_settings",
    # Domain
    "Quote",
    "QuoteResponse",
    "Recipient",
    # Collaborators
    "ForismaticClient",
    "QuoteClientError",
    "QuoteGenerator",
    "PostgresRecipientStore",
    "RecipientFetcher",
    "RecipientStoreError",
    # Composition
    "build_quote_response",
    "create_app",
    # Logging
    "configure_logging",
    "get_logger",
]
