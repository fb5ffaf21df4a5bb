"""
FastAPI application factory for the Quote Service.

The lifespan builds the process-wide resources (upstream HTTP client, recipient
connection pool) for every collaborator that was not injected, and releases
them on shutdown.
"""

from __future__ import annotations

from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from quote_service import __version__
from quote_service.api.handlers import router
from quote_service.config import Settings, get_settings
from quote_service.infrastructure.db_factory import create_recipient_pool
from quote_service.infrastructure.http_factory import create_http_client
from quote_service.quotes.abstract import QuoteGenerator
from quote_service.quotes.forismatic import ForismaticClient
from quote_service.recipients.abstract import RecipientFetcher
from quote_service.recipients.store import PostgresRecipientStore
from quote_service.utils.logging import get_logger

log = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    quote_generator: Optional[QuoteGenerator] = None,
    recipient_fetcher: Optional[RecipientFetcher] = None,
) -> FastAPI:
    """
    Build the application.

    Parameters
    ----------
    settings : Settings | None
        Effective configuration. Defaults to `get_settings()`.
    quote_generator : QuoteGenerator | None
        Injected quote source. When None, a ForismaticClient over a shared
        httpx client is created at startup.
    recipient_fetcher : RecipientFetcher | None
        Injected recipient source. When None, a PostgresRecipientStore over
        an async connection pool is created at startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            if quote_generator is None:
                http_client = await stack.enter_async_context(create_http_client(settings))
                app.state.quote_generator = ForismaticClient(settings.quote_api_url, http_client)
                stack.callback(setattr, app.state, "quote_generator", None)

            if recipient_fetcher is None:
                pool = create_recipient_pool(settings)
                await pool.open(wait=False)
                stack.push_async_callback(pool.close)
                app.state.recipient_fetcher = PostgresRecipientStore(
                    pool, strict_scan=settings.recipients_strict_scan
                )
                stack.callback(setattr, app.state, "recipient_fetcher", None)

            log.info(
                "Quote Service started",
                extra={"app_env": settings.app_env, "quote_api_url": settings.quote_api_url},
            )
            yield
            log.info("Shutting down Quote Service")

    app = FastAPI(
        title="Quote Service",
        description="Serves an inspirational quote together with its recipients.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.quote_generator = quote_generator
    app.state.recipient_fetcher = recipient_fetcher
    app.include_router(router)
    return app


__all__ = ["create_app"]
