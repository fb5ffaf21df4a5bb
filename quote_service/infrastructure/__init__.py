"""
Infrastructure package for the Quote Service.

Centralizes I/O resource construction (database pool, upstream HTTP client).
Keep this layer focused on resource management, decoupled from the handler
and domain logic.
"""

from quote_service.infrastructure.db_factory import check_database, create_recipient_pool
from quote_service.infrastructure.http_factory import create_http_client

__all__ = [
    "check_database",
    "create_http_client",
    "create_recipient_pool",
]
