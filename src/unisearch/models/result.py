"""Normalized search result model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A single web search result, normalized across providers.

    ``published_date`` is kept in whatever format the provider returned;
    providers disagree on date formats and no conversion is attempted.
    """

    url: str = Field(description="URL of the result")
    title: str = Field(description="Title of the page")
    snippet: str | None = Field(default=None, description="Snippet or description")
    domain: str | None = Field(default=None, description="Source website domain")
    published_date: str | None = Field(default=None, description="Provider-native publish/update date")
    provider: str = Field(description="Name of the provider that returned this result")
    raw: Any = Field(default=None, description="Raw provider payload, never interpreted")
