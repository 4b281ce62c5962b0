"""Configuration defaults and filenames."""

from __future__ import annotations

from typing import Literal, TypeAlias

from assetstash.constants.cache import DEFAULT_MEMORY_CACHE_SIZE

CacheStoreName: TypeAlias = Literal["memory", "null"]

CONFIG_FILENAME: str = "assetstash.yaml"

DEFAULT_CACHE_STORE: CacheStoreName = "memory"
VALID_CACHE_STORES: frozenset[str] = frozenset({"memory", "null"})
DEFAULT_OUTPUT_DIR: str = "public/assets"
DEFAULT_CACHE_SIZE: int = DEFAULT_MEMORY_CACHE_SIZE

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"cache_store", "memory_cache_size", "compress", "output_dir"})
