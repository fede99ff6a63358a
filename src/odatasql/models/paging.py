"""Paging options shared with the document client."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FeedOptions(BaseModel):
    """Client-side feed options. Only the page size is managed here."""

    model_config = {"validate_assignment": True}

    max_item_count: int | None = Field(default=None, gt=0)
