"""Per-provider outcome models, scoped to a single aggregation call."""

from __future__ import annotations

from pydantic import BaseModel, Field

from unisearch.models.result import SearchResult


class ProviderFailure(BaseModel):
    """A provider failure annotated with a troubleshooting hint."""

    provider: str = Field(description="Name of the failed provider")
    message: str = Field(description="Underlying error message")
    status_code: int | None = Field(default=None, description="HTTP status code, if known")
    troubleshooting: str | None = Field(default=None, description="Troubleshooting guidance")

    def describe(self) -> str:
        """Render the failure as a human-readable paragraph."""
        text = f"Search with provider '{self.provider}' failed: {self.message}"
        if self.troubleshooting:
            text += f"\n\nTroubleshooting: {self.troubleshooting}"
        return text


class ProviderOutcome(BaseModel):
    """Either the results or the failure of one provider invocation."""

    provider: str
    results: list[SearchResult] = Field(default_factory=list)
    failure: ProviderFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
