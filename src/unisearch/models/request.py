"""Search request model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from unisearch.observability.debug import DebugOptions

SafeSearch = Literal["off", "moderate", "strict"]
SearchType = Literal["text", "images", "news"]


class SearchRequest(BaseModel):
    """Provider-agnostic query description.

    Every field is forwarded to every provider; providers ignore the ones
    they do not support.
    """

    model_config = ConfigDict(frozen=True)

    query: str | None = Field(default=None, description="Search query text")
    id_list: str | None = Field(
        default=None,
        description="Comma-separated identifier list, used instead of a query by providers that support it (arXiv)",
    )
    max_results: int = Field(default=10, ge=1, description="Maximum number of results per provider")
    page: int = Field(default=1, ge=1, description="Result page number")
    start: int = Field(default=0, ge=0, description="Result offset, for providers paging by offset")
    language: str | None = Field(default=None, description="Language/locale for results")
    region: str | None = Field(default=None, description="Country/region for results")
    safe_search: SafeSearch | None = Field(default=None, description="Content-safety level")
    timeout: float | None = Field(default=None, gt=0, description="Per-call timeout in seconds")
    sort_by: str | None = Field(default=None, description="Sort field hint")
    sort_order: Literal["ascending", "descending"] | None = Field(default=None, description="Sort direction hint")
    search_type: SearchType | None = Field(default=None, description="Search kind hint")
    debug: DebugOptions = Field(default_factory=DebugOptions, description="Diagnostics configuration")
