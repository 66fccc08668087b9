from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, TypeAlias

from shcomplete.catalog.catalog import CommandCatalog
from shcomplete.catalog.value_sources import ValueSourceRegistry, default_value_sources
from shcomplete.logging import get_logger
from shcomplete.shell.engine import CompletionEngine

EngineBuilder: TypeAlias = Callable[[], CompletionEngine]
EngineProvider: TypeAlias = Callable[[], CompletionEngine]

__all__ = [
    "EngineBuilder",
    "EngineProvider",
    "build_engine",
    "make_cached_engine_provider",
]


def build_engine(
    *,
    catalog_path: Path | None = None,
    click_app: str | None = None,
) -> CompletionEngine:
    """Build an engine from a JSON catalog and/or a click application.

    Commands from both sources end up in one catalog; a name defined twice
    is an error. The built-in value sources are always registered.
    """
    from shcomplete.catalog.click_gateway import catalog_from_click, load_click_app
    from shcomplete.catalog.json_catalog import load_catalog

    catalog = CommandCatalog()
    if catalog_path is not None:
        for command in load_catalog(catalog_path).snapshot().values():
            catalog.add_command(command)
    if click_app is not None:
        app_catalog = catalog_from_click(load_click_app(click_app))
        for command in app_catalog.snapshot().values():
            catalog.add_command(command)

    return CompletionEngine(catalog, ValueSourceRegistry(default_value_sources()))


def make_cached_engine_provider(builder: EngineBuilder) -> EngineProvider:
    """Create a cached provider that calls builder once and caches result.

    Logs cache misses (first call) and cache hits (subsequent calls).
    Thread-safe: ensures builder is called exactly once even under concurrent access.
    """

    cache: CompletionEngine | None = None
    _lock = threading.Lock()
    _logger = get_logger("catalog.engine_provider")

    def provider() -> CompletionEngine:
        nonlocal cache
        # Double-checked locking: check cache without lock first
        if cache is None:
            with _lock:
                if cache is None:
                    _logger.debug("Engine cache miss - building catalog")
                    cache = builder()
                else:
                    _logger.debug("Engine cache hit - using cached engine")
        else:
            _logger.debug("Engine cache hit - using cached engine")
        return cache

    return provider
