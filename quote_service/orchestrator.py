"""
Orchestrator composing a quote and the recipient list into one response.

Usage:
    from quote_service.orchestrator import build_quote_response

    envelope = await build_quote_response("en", quote_generator, recipient_fetcher)

Calls are strictly sequential: the recipient fetch only starts once the quote
has been generated, so a quote failure never touches the database.
"""

from __future__ import annotations

from quote_service.domain.models import QuoteResponse
from quote_service.quotes.abstract import QuoteGenerator
from quote_service.recipients.abstract import RecipientFetcher
from quote_service.utils.logging import get_logger

log = get_logger(__name__)


async def build_quote_response(
    lang: str,
    quote_generator: QuoteGenerator,
    recipient_fetcher: RecipientFetcher,
) -> QuoteResponse:
    """
    Generate a quote, then fetch recipients, and wrap both in a QuoteResponse.

    Parameters
    ----------
    lang : str
        Language code passed unvalidated to the quote generator.
    quote_generator : QuoteGenerator
        Source of the quote.
    recipient_fetcher : RecipientFetcher
        Source of the recipients.

    Returns
    -------
    QuoteResponse
        Envelope with the quote and the (possibly empty) recipient list.

    Raises
    ------
    QuoteClientError
        Propagated from the generator; the fetcher is not called.
    RecipientStoreError
        Propagated from the fetcher.
    """
    log.debug("[QUOTE START]", extra={"lang": lang})
    quote = await quote_generator.generate(lang)

    recipients = await recipient_fetcher.all_recipients()

    log.info(
        "[QUOTE SUCCESS]",
        extra={"lang": lang, "recipients": len(recipients)},
    )
    return QuoteResponse(quote=quote, recipients=recipients)


__all__ = ["build_quote_response"]
