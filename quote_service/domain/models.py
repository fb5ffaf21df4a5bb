"""
Domain models for the Quote Service.

Field aliases define the JSON wire format shared by the upstream quote API
(`quoteText`, `quoteAuthor`) and the `/quote` response payload.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Quote(BaseModel):
    """
    A quote as returned to callers.

    Fields are populated through their wire aliases only, so an upstream body
    without `quoteText` and `quoteAuthor` never validates.

    `lang` always holds the language code the caller asked for; whatever the
    upstream service echoes back is discarded.
    """

    text: str = Field(..., alias="quoteText", description="Quote body.")
    author: str = Field(..., alias="quoteAuthor", description="Quote author.")
    lang: str = Field("", alias="lang", description="Requested language code.")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Recipient(BaseModel):
    """
    Representation of a single row in the `recipients` table.
    """

    id: int = Field(..., description="Primary key assigned by the store.")
    name: str = Field(..., description="Display name.")
    email: str = Field(..., description="Email address.")

    model_config = {
        "frozen": True,
    }


class QuoteResponse(BaseModel):
    """
    Payload of a successful `/quote` request.
    """

    quote: Quote
    recipients: List[Recipient] = Field(default_factory=list)

    model_config = {
        "frozen": True,
    }


__all__ = ["Quote", "QuoteResponse", "Recipient"]
