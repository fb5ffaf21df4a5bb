"""
HTTP client factory for the upstream quote API.

The returned client is the process-wide transport handed to the quote client;
it is safe for concurrent use and owns the only timeout applied to upstream
calls.
"""

from __future__ import annotations

import httpx

from quote_service.config import Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Build the shared `httpx.AsyncClient`. The caller owns its lifetime.
    """
    limits = httpx.Limits(
        max_connections=settings.quote_api_max_connections,
        max_keepalive_connections=settings.quote_api_max_connections,
    )
    return httpx.AsyncClient(
        timeout=settings.quote_api_timeout_seconds,
        limits=limits,
        headers={"Accept": "application/json"},
    )


__all__ = ["create_http_client"]
