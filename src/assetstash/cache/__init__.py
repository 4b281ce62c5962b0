"""Backend-agnostic cache facade with versioned key namespacing."""

from __future__ import annotations

from assetstash.cache.adapters import (
    CacheBackend,
    GetSetAdapter,
    MappingAdapter,
    ReadWriteAdapter,
    wrap_backend,
)
from assetstash.cache.core import Cache, expand_key
from assetstash.cache.stores import MemoryStore, NullStore

__all__ = [
    "Cache",
    "CacheBackend",
    "GetSetAdapter",
    "MappingAdapter",
    "MemoryStore",
    "NullStore",
    "ReadWriteAdapter",
    "expand_key",
    "wrap_backend",
]
