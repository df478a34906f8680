"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file, when loaded through ``Settings.from_yaml``
  2. Environment variables (UNISEARCH_ prefix)
  3. ``.env`` file
  4. Default values

Keys set in the YAML file win over the same keys in the environment; keys the
file leaves out are still read from the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from unisearch.observability.debug import DebugOptions


class ProviderConfig(BaseModel):
    """Configuration for a single search provider."""

    enabled: bool = Field(default=True, description="Whether this provider is active")
    api_key: str | None = Field(default=None, description="API key or token")
    base_url: str | None = Field(default=None, description="Override the provider endpoint")
    extra: dict[str, Any] = Field(default_factory=dict, description="Provider-specific options (e.g. cx, engine)")


class SearchSettings(BaseModel):
    """Search behavior configuration."""

    default_providers: list[str] = Field(
        default_factory=list,
        description="Providers used when a search names none (empty = all configured)",
    )
    max_results: int = Field(default=10, ge=1, description="Default results per provider")
    timeout: float = Field(default=15.0, gt=0, description="Default per-provider timeout in seconds")

    @field_validator("default_providers", mode="before")
    @classmethod
    def _parse_providers(cls, v: Any) -> list[str]:
        """Accept a comma-separated string (env var) or a list."""
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return list(v)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="console", description="Log format: json, console")
    debug_enabled: bool = Field(default=False, description="Enable per-search debug diagnostics")
    log_requests: bool = Field(default=False, description="Log provider requests")
    log_responses: bool = Field(default=False, description="Log provider response summaries")

    def debug_options(self) -> DebugOptions:
        """Build the ``DebugOptions`` attached to searches by default."""
        return DebugOptions(
            enabled=self.debug_enabled,
            log_requests=self.log_requests,
            log_responses=self.log_responses,
        )


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the UNISEARCH_ prefix.
    Nested settings use double underscores.

    Example:
        UNISEARCH_PROVIDERS__BRAVE__API_KEY=...
        UNISEARCH_SEARCH__DEFAULT_PROVIDERS='["brave", "arxiv"]'
        UNISEARCH_OBSERVABILITY__LOG_LEVEL=debug
    """

    model_config = {
        "env_prefix": "UNISEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="unisearch", description="Application name")

    providers: dict[str, ProviderConfig] = Field(default_factory=dict, description="Provider configurations")
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
