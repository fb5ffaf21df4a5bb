"""
Interfaces for quote generation.

The HTTP transport is reduced to the single call the client needs so that an
`httpx.AsyncClient` can be swapped for one backed by `httpx.MockTransport`
(or any other double) without touching the client.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

import httpx

from quote_service.domain.models import Quote


@runtime_checkable
class HTTPTransport(Protocol):
    """
    Anything able to execute a GET request and return a response.

    `httpx.AsyncClient` satisfies this protocol.
    """

    async def get(self, url: str, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        ...


@runtime_checkable
class QuoteGenerator(Protocol):
    """
    Common interface of quote sources.
    """

    async def generate(self, lang: str) -> Quote:
        """
        Produce a quote in the requested language.

        Raises
        ------
        QuoteClientError
            On any transport, status or decoding failure.
        """
        ...


__all__ = ["HTTPTransport", "QuoteGenerator"]
