"""Adapters that give heterogeneous key/value stores one get/set contract."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from assetstash.cache.stores import NullStore

logger = logging.getLogger(__name__)


class CacheBackend(ABC):
    """Uniform two-method contract used by the cache facade.

    ``get`` returns ``None`` on a miss. ``set`` returns the value it stored.
    """

    def __init__(self, store: Any) -> None:
        self.store = store

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.store!r})"

    @abstractmethod
    def get(self, key: str) -> object:
        """Return the stored value for ``key`` or ``None``."""

    @abstractmethod
    def set(self, key: str, value: object) -> object:
        """Store ``value`` under ``key`` and return it."""


class GetSetAdapter(CacheBackend):
    """Passes through to stores exposing ``get(key)`` and ``set(key, value)``, memcache style."""

    def get(self, key: str) -> object:
        return self.store.get(key)

    def set(self, key: str, value: object) -> object:
        self.store.set(key, value)
        return value


class MappingAdapter(CacheBackend):
    """Adapts index access so a plain ``dict`` can act as a store."""

    def get(self, key: str) -> object:
        try:
            return self.store[key]
        except KeyError:
            return None

    def set(self, key: str, value: object) -> object:
        self.store[key] = value
        return value


class ReadWriteAdapter(CacheBackend):
    """Adapts stores exposing ``read(key)`` and ``write(key, value)``."""

    def get(self, key: str) -> object:
        return self.store.read(key)

    def set(self, key: str, value: object) -> object:
        self.store.write(key, value)
        return value


def _has_methods(obj: object, *names: str) -> bool:
    return all(callable(getattr(obj, name, None)) for name in names)


def wrap_backend(store: object) -> CacheBackend:
    """Choose an adapter for ``store`` by probing its capabilities once.

    Cache-shaped interfaces win over generic ones: an object offering native
    ``get``/``set`` is never routed through index access even if it also
    supports it. Anything unrecognized, ``None`` included, becomes a null store
    so cache operations degrade to misses instead of failing.
    """
    adapter: CacheBackend
    if isinstance(store, CacheBackend):
        return store
    if _has_methods(store, "get", "set"):
        adapter = GetSetAdapter(store)
    elif _has_methods(store, "__getitem__", "__setitem__"):
        adapter = MappingAdapter(store)
    elif _has_methods(store, "read", "write"):
        adapter = ReadWriteAdapter(store)
    else:
        if store is not None:
            logger.warning("Unsupported cache store %s; caching disabled", type(store).__name__)
        adapter = GetSetAdapter(NullStore())

    logger.debug("Wrapped cache store with %s", type(adapter).__name__)
    return adapter
