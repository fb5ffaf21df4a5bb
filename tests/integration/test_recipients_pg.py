"""
Integration tests for the recipient store and the `/quote` endpoint.

These tests run against a real PostgreSQL instance and verify that:
1. The store returns every seeded recipient, or an empty list for an empty table
2. The full request path composes the upstream quote with the stored recipients

Run with: RUN_INTEGRATION_TESTS=1 pytest tests/integration/
"""

from __future__ import annotations

import os
from typing import List, Tuple

import httpx
import pytest
from psycopg_pool import AsyncConnectionPool

from quote_service.api.app import create_app
from quote_service.config import Settings
from quote_service.domain.models import Recipient
from quote_service.quotes.forismatic import ForismaticClient
from quote_service.recipients.store import PostgresRecipientStore

UPSTREAM_QUOTE = {"quoteText": "Bla Bla Bla", "quoteAuthor": "Bob"}

pytestmark = pytest.mark.skipif(
    os.getenv("RUN_INTEGRATION_TESTS", "0") != "1",
    reason="Integration tests require RUN_INTEGRATION_TESTS=1 and reachable Postgres",
)


@pytest.mark.asyncio
async def test_all_recipients_returns_seeded_rows(
    test_dsn: str, seeded_recipients: List[Tuple[int, str, str]]
) -> None:
    async with AsyncConnectionPool(test_dsn, min_size=1, max_size=2, open=False) as pool:
        recipients = await PostgresRecipientStore(pool).all_recipients()

    expected = [Recipient(id=i, name=n, email=e) for i, n, e in seeded_recipients]
    assert sorted(recipients, key=lambda r: r.id) == expected


@pytest.mark.asyncio
async def test_all_recipients_returns_empty_list_for_empty_table(
    test_dsn: str, clean_recipients_table
) -> None:
    async with AsyncConnectionPool(test_dsn, min_size=1, max_size=2, open=False) as pool:
        recipients = await PostgresRecipientStore(pool).all_recipients()

    assert recipients == []


@pytest.mark.asyncio
async def test_all_recipients_skips_rows_with_null_columns(
    test_dsn: str, db_connection, seeded_recipients: List[Tuple[int, str, str]]
) -> None:
    with db_connection.cursor() as cur:
        cur.execute("INSERT INTO recipients (id, name, email) VALUES (4, NULL, NULL);")
    db_connection.commit()

    async with AsyncConnectionPool(test_dsn, min_size=1, max_size=2, open=False) as pool:
        recipients = await PostgresRecipientStore(pool).all_recipients()

    assert sorted(r.id for r in recipients) == [1, 2, 3]


@pytest.mark.asyncio
async def test_quote_endpoint_end_to_end(
    test_settings: Settings,
    test_dsn: str,
    seeded_recipients: List[Tuple[int, str, str]],
) -> None:
    def upstream(request: httpx.Request) -> httpx.Response:
        assert request.url.params["method"] == "getQuote"
        assert request.url.params["format"] == "json"
        assert request.url.params["lang"] == "en"
        return httpx.Response(200, json=UPSTREAM_QUOTE)

    async with AsyncConnectionPool(test_dsn, min_size=1, max_size=2, open=False) as pool:
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as upstream_client:
            app = create_app(
                test_settings,
                quote_generator=ForismaticClient(test_settings.quote_api_url, upstream_client),
                recipient_fetcher=PostgresRecipientStore(pool),
            )
            async with httpx.AsyncClient(
                transport=httpx.ASGITransport(app=app), base_url="http://service.test"
            ) as client:
                response = await client.get("/quote", params={"lang": "en"})

    assert response.status_code == 200
    body = response.json()
    assert body["quote"] == {"quoteText": "Bla Bla Bla", "quoteAuthor": "Bob", "lang": "en"}
    assert sorted(body["recipients"], key=lambda r: r["id"]) == [
        {"id": i, "name": n, "email": e} for i, n, e in seeded_recipients
    ]
