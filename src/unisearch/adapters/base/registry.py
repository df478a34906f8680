"""Adapter Registry — Manages registration and construction of search adapters.

The registry maps provider names to adapter classes and builds configured
adapter instances, either one at a time or from application settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.exceptions import AdapterError

if TYPE_CHECKING:
    from unisearch.config.settings import Settings

logger = logging.getLogger(__name__)


class AdapterNotFoundError(AdapterError):
    """Raised when a requested adapter is not registered."""


class AdapterRegistry:
    """Registry for managing search adapter classes and instances.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register("brave", BraveAdapter)
        >>> registry.create("brave", api_key="...")
        >>> adapter = registry.get("brave")
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[SearchAdapter]] = {}
        self._instances: dict[str, SearchAdapter] = {}

    def register(self, name: str, adapter_class: type[SearchAdapter]) -> None:
        """Register an adapter class.

        Args:
            name: Unique name for this adapter type.
            adapter_class: The adapter class to register.
        """
        if name in self._classes:
            logger.warning("Overwriting existing adapter registration: %s", name)
        self._classes[name] = adapter_class
        logger.debug("Registered adapter: %s", name)

    def create(self, name: str, **kwargs: Any) -> SearchAdapter:
        """Create a configured adapter instance.

        Args:
            name: The registered adapter name.
            **kwargs: Configuration passed to the adapter constructor.

        Returns:
            The configured adapter instance.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
            ConfigurationError: If required credentials are missing.
        """
        if name not in self._classes:
            raise AdapterNotFoundError(
                f"No adapter registered with name '{name}'. "
                f"Available adapters: {list(self._classes.keys())}"
            )

        adapter = self._classes[name](**kwargs)
        self._instances[name] = adapter
        logger.info("Configured adapter: %s", name)
        return adapter

    def get(self, name: str) -> SearchAdapter:
        """Get a configured adapter instance by name.

        Raises:
            AdapterNotFoundError: If the adapter has not been configured.
        """
        if name not in self._instances:
            raise AdapterNotFoundError(
                f"Adapter '{name}' is not configured. "
                f"Call create() first."
            )
        return self._instances[name]

    def get_many(self, names: list[str] | None = None) -> list[SearchAdapter]:
        """Get configured adapters by name, or all of them when *names* is None."""
        if names is None:
            return list(self._instances.values())
        return [self.get(name) for name in names]

    def build_from_settings(self, settings: Settings) -> list[SearchAdapter]:
        """Configure every enabled provider declared in ``settings.providers``.

        Providers that are unknown or fail configuration are logged and skipped.
        """
        adapters: list[SearchAdapter] = []
        for name, cfg in settings.providers.items():
            if not cfg.enabled:
                logger.info("Provider '%s' is disabled, skipping", name)
                continue

            kwargs: dict[str, Any] = {}
            if cfg.api_key:
                kwargs["api_key"] = cfg.api_key
            if cfg.base_url:
                kwargs["base_url"] = cfg.base_url
            kwargs.update(cfg.extra)

            try:
                adapters.append(self.create(name, **kwargs))
            except AdapterError as e:
                logger.warning("Failed to configure provider '%s': %s", name, e)
        return adapters

    @property
    def registered_adapters(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._classes.keys())

    @property
    def active_adapters(self) -> list[str]:
        """List all configured adapter names."""
        return list(self._instances.keys())
