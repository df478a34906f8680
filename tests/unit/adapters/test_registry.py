"""Tests for the adapter registry."""

from __future__ import annotations

import logging

import pytest

from unisearch.adapters import BUILTIN_ADAPTERS, default_registry
from unisearch.adapters.arxiv.adapter import ArxivAdapter
from unisearch.adapters.base.registry import AdapterNotFoundError, AdapterRegistry
from unisearch.adapters.brave.adapter import BraveAdapter
from unisearch.adapters.google.adapter import GoogleAdapter
from unisearch.config.settings import Settings
from unisearch.exceptions import ConfigurationError


class TestAdapterRegistry:
    def test_register_and_create(self) -> None:
        registry = AdapterRegistry()
        registry.register("brave", BraveAdapter)

        adapter = registry.create("brave", api_key="k")

        assert isinstance(adapter, BraveAdapter)
        assert registry.get("brave") is adapter
        assert registry.registered_adapters == ["brave"]
        assert registry.active_adapters == ["brave"]

    def test_create_unknown(self) -> None:
        with pytest.raises(AdapterNotFoundError, match="Available adapters"):
            AdapterRegistry().create("bing")

    def test_get_unconfigured(self) -> None:
        registry = AdapterRegistry()
        registry.register("arxiv", ArxivAdapter)
        with pytest.raises(AdapterNotFoundError, match="not configured"):
            registry.get("arxiv")

    def test_create_propagates_configuration_error(self) -> None:
        registry = AdapterRegistry()
        registry.register("google", GoogleAdapter)
        with pytest.raises(ConfigurationError):
            registry.create("google", api_key="k")

    def test_get_many(self) -> None:
        registry = AdapterRegistry()
        registry.register("arxiv", ArxivAdapter)
        registry.register("brave", BraveAdapter)
        arxiv = registry.create("arxiv")
        brave = registry.create("brave", api_key="k")

        assert registry.get_many() == [arxiv, brave]
        assert registry.get_many(["brave", "arxiv"]) == [brave, arxiv]


class TestDefaultRegistry:
    def test_registers_every_builtin(self) -> None:
        assert sorted(default_registry().registered_adapters) == sorted(BUILTIN_ADAPTERS)
        assert len(BUILTIN_ADAPTERS) == 8

    def test_build_from_settings(self, settings: Settings) -> None:
        registry = default_registry()

        adapters = registry.build_from_settings(settings)

        assert sorted(a.name for a in adapters) == ["arxiv", "brave"]

    def test_build_from_settings_passes_extra(self) -> None:
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
            providers={"google": {"api_key": "g", "extra": {"cx": "engine-1"}}},
        )

        (adapter,) = default_registry().build_from_settings(settings)

        assert isinstance(adapter, GoogleAdapter)

    def test_build_from_settings_skips_misconfigured(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
            providers={"exa": {}, "nosuch": {}, "arxiv": {}},
        )

        with caplog.at_level(logging.WARNING, logger="unisearch"):
            adapters = default_registry().build_from_settings(settings)

        assert [a.name for a in adapters] == ["arxiv"]
        assert "exa" in caplog.text
        assert "nosuch" in caplog.text
