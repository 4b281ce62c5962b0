"""Config data model for assetstash."""

from __future__ import annotations

from dataclasses import dataclass

from assetstash.constants.config import (
    DEFAULT_CACHE_SIZE,
    DEFAULT_CACHE_STORE,
    DEFAULT_OUTPUT_DIR,
    CacheStoreName,
)


@dataclass(frozen=True)
class StashConfig:
    """Resolved project config."""

    cache_store: CacheStoreName = DEFAULT_CACHE_STORE
    memory_cache_size: int = DEFAULT_CACHE_SIZE
    compress: bool = False
    output_dir: str = DEFAULT_OUTPUT_DIR
