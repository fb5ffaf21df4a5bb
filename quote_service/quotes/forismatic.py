"""
Forismatic quote client.

Issues `GET <url>?method=getQuote&format=json&lang=<code>` through an
injected transport and decodes the JSON object into a `Quote`. No retries and
no caching; the only timeout is the one the transport is configured with.
"""

from __future__ import annotations

from typing import Any, Dict

import httpx
from pydantic import ValidationError

from quote_service.domain.models import Quote
from quote_service.quotes.abstract import HTTPTransport
from quote_service.quotes.exceptions import DecodeError, TransportError, UpstreamStatusError
from quote_service.utils.logging import get_logger

log = get_logger(__name__)


class ForismaticClient:
    """
    Quote generator backed by the Forismatic API.
    """

    name: str = "forismatic"

    def __init__(self, url: str, transport: HTTPTransport) -> None:
        self.url = url
        self.transport = transport

    @staticmethod
    def _query(lang: str) -> Dict[str, str]:
        return {"method": "getQuote", "format": "json", "lang": lang}

    async def generate(self, lang: str) -> Quote:
        """
        Fetch one quote and stamp it with the requested language code.

        Parameters
        ----------
        lang : str
            Language code forwarded as-is in the `lang` query parameter.

        Returns
        -------
        Quote
            Decoded quote whose `lang` equals `lang`.

        Raises
        ------
        TransportError
            If the request could not be sent or no response arrived.
        UpstreamStatusError
            If the upstream answered with anything but 200.
        DecodeError
            If the body is not a JSON object carrying `quoteText` and `quoteAuthor`.
        """
        try:
            response = await self.transport.get(self.url, params=self._query(lang))
        except httpx.RequestError as exc:
            raise TransportError(f"Quote request to {self.url} failed: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise UpstreamStatusError(
                f"Quote service answered {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise DecodeError(f"Quote response is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise DecodeError(f"Quote response is a JSON {type(payload).__name__}, not an object")

        # Upstream "lang" is not trusted.
        try:
            quote = Quote.model_validate({**payload, "lang": lang})
        except ValidationError as exc:
            raise DecodeError(f"Quote response is missing quote fields: {exc}") from exc

        log.debug("Quote decoded", extra={"lang": lang, "author": quote.author})
        return quote


__all__ = ["ForismaticClient"]
