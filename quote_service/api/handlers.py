"""
HTTP handler for `GET /quote`.

Every collaborator failure is flattened to a 500 with an empty body; the
failure kind only survives in the service logs.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from quote_service.orchestrator import build_quote_response
from quote_service.quotes.abstract import QuoteGenerator
from quote_service.quotes.exceptions import QuoteClientError
from quote_service.recipients.abstract import RecipientFetcher
from quote_service.recipients.exceptions import RecipientStoreError
from quote_service.utils.logging import get_logger

log = get_logger(__name__)

router = APIRouter()


def get_quote_generator(request: Request) -> QuoteGenerator:
    return request.app.state.quote_generator


def get_recipient_fetcher(request: Request) -> RecipientFetcher:
    return request.app.state.recipient_fetcher


def _server_error() -> Response:
    return Response(status_code=500)


def get_lang(request: Request) -> str:
    """First `lang` query value, or "" when absent."""
    values = request.query_params.getlist("lang")
    return values[0] if values else ""


@router.get("/quote", tags=["Quotes"])
async def handle_quote(
    lang: str = Depends(get_lang),
    quote_generator: QuoteGenerator = Depends(get_quote_generator),
    recipient_fetcher: RecipientFetcher = Depends(get_recipient_fetcher),
) -> Response:
    """Return a quote and every recipient as one JSON document."""
    try:
        envelope = await build_quote_response(lang, quote_generator, recipient_fetcher)
    except QuoteClientError as exc:
        log.error(
            "[QUOTE FAILED] Quote generation failed",
            extra={"lang": lang, "error_type": type(exc).__name__, "error": str(exc)},
        )
        return _server_error()
    except RecipientStoreError as exc:
        log.error(
            "[RECIPIENTS FAILED] Recipient fetch failed",
            extra={"lang": lang, "error_type": type(exc).__name__, "error": str(exc)},
        )
        return _server_error()

    try:
        body = envelope.model_dump_json(by_alias=True)
    except (TypeError, ValueError):
        log.exception("[SERIALIZATION FAILED] Could not encode quote response")
        return _server_error()

    return Response(content=body, status_code=200, media_type="application/json")


__all__ = ["get_lang", "get_quote_generator", "get_recipient_fetcher", "handle_quote", "router"]
