"""Wiring for the search engine.

Building the location store reads and validates both CSV files, so it
happens once, on the first ``resolve`` of the store or the search
service. Everything resolved afterwards shares that read-only store.
Tests swap the store or the cache by re-registering the port.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, get_config

Factory = Callable[[], Any]


@dataclass
class Container:
    """Maps ports to factories and keeps the shared instances.

    Usage:
        service = Container.create_default().resolve(LocationSearchService)

        # With a hand-built store
        container = Container.create_default()
        container.register(LocationStorePort, lambda: LocationRecordStore.merge([records]))
        service = container.resolve(LocationSearchService)
    """

    config: AppConfig = field(default_factory=get_config)

    # port -> (factory, shared)
    _bindings: Dict[type[Any], Tuple[Factory, bool]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Factory, singleton: bool = True) -> None:
        """Bind a port to a factory, replacing any earlier binding.

        A shared (``singleton``) binding builds its instance on first
        resolve. Rebinding forgets the instance built by the old factory.
        """
        with self._lock:
            self._bindings[port_type] = (factory, singleton)
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to a port.

        Raises:
            KeyError: If nothing is bound to the port.
            DataSourceError: If the location store cannot be built.
        """
        with self._lock:
            try:
                factory, shared = self._bindings[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None
            if not shared:
                return factory()
            if port_type not in self._instances:
                self._instances[port_type] = factory()
            return self._instances[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._bindings

    def clear_singletons(self) -> None:
        """Forget shared instances; the next resolve reloads the store."""
        with self._lock:
            self._instances.clear()

    def clear_all(self) -> None:
        with self._lock:
            self._bindings.clear()
            self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV-backed store, the result cache and the service.

        The world list is loaded before the regional gazetteer, so the
        world record wins when both define the same id.
        """
        from .adapters.cache import LRUResultCache, NullResultCache
        from .adapters.sources import GazetteerCSVSource, WorldLocationsCSVSource
        from .adapters.store import LocationRecordStore
        from .ports.cache import SearchResultCachePort
        from .ports.store import LocationStorePort
        from .services import LocationSearchService

        config = config or get_config()
        container = cls(config=config)

        def create_store() -> LocationStorePort:
            return LocationRecordStore.from_sources(
                [
                    WorldLocationsCSVSource(config.data),
                    GazetteerCSVSource(config.data),
                ]
            )

        container.register(LocationStorePort, create_store)

        def create_cache() -> SearchResultCachePort:
            if not config.search.result_cache_enabled:
                return NullResultCache()
            return LRUResultCache(max_size=config.search.result_cache_size)

        container.register(SearchResultCachePort, create_cache)

        def create_search_service() -> LocationSearchService:
            return LocationSearchService(
                store=container.resolve(LocationStorePort),
                cache=container.resolve(SearchResultCachePort),
                config=config.search,
            )

        container.register(LocationSearchService, create_search_service)

        return container


# Process-wide container, built on first use
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, creating it on first call."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Drop the process-wide container and everything it built."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
