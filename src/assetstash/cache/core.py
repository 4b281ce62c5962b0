"""Namespaced fetch-or-compute facade over a wrapped backend store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from assetstash.cache.adapters import CacheBackend, wrap_backend
from assetstash.constants.cache import CACHE_NAMESPACE, CACHE_VERSION, MAX_KEY_LENGTH
from assetstash.io import hexdigest

logger = logging.getLogger(__name__)

T = TypeVar("T")


def expand_key(key: object) -> str:
    """Expand a JSON-serializable key into a short, versioned backend key.

    The result stays under ``MAX_KEY_LENGTH`` characters so memcache-sized
    stores accept it.
    """
    expanded = f"{CACHE_NAMESPACE}/v{CACHE_VERSION}/{hexdigest(key)}"
    assert len(expanded) <= MAX_KEY_LENGTH
    return expanded


class Cache:
    """Uniform cache interface over any supported backend store.

    Values must be JSON-serializable and stable for a given key: writing a
    different value under an existing key is undefined and is not detected.
    ``None`` is the miss signal and is never cached.

        cache = Cache(MemoryStore())
        cache.fetch(["compile", "app.js"], lambda: compile_source("app.js"))

    No locking is done around the computation. Concurrent misses on the same
    key may both compute; the last write wins.
    """

    def __init__(self, backend: object = None) -> None:
        if isinstance(backend, Cache):
            backend = backend.backend
        self.backend: CacheBackend = wrap_backend(backend)

    def __repr__(self) -> str:
        return f"Cache({self.backend!r})"

    def fetch(self, key: object, compute: Callable[[], T]) -> T:
        """Return the cached value for ``key``, computing and storing it on a miss."""
        expanded_key = expand_key(key)
        value = self.backend.get(expanded_key)
        if value is not None:
            logger.debug("Cache hit: %s", expanded_key)
            return value  # type: ignore[return-value]

        logger.debug("Cache miss: %s", expanded_key)
        value = compute()
        self.backend.set(expanded_key, value)
        return value

    def get_raw(self, key: object) -> object:
        """Read directly from the backend, bypassing computation.

        Miss and staleness semantics are whatever the backend provides. Prefer
        :meth:`fetch`.
        """
        return self.backend.get(expand_key(key))

    def set_raw(self, key: object, value: T) -> T:
        """Write directly to the backend and return ``value``."""
        self.backend.set(expand_key(key), value)
        return value
