"""Config loading and normalization for assetstash."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from assetstash.cache import Cache, MemoryStore, NullStore
from assetstash.config.model import StashConfig
from assetstash.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CACHE_SIZE,
    DEFAULT_CACHE_STORE,
    DEFAULT_OUTPUT_DIR,
    VALID_CACHE_STORES,
)
from assetstash.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> StashConfig:
    """Load and validate config from ``assetstash.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return StashConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key {unknown[0]!r}{_suggest_key(unknown[0])}")

    cache_store = raw.get("cache_store", DEFAULT_CACHE_STORE)
    if not isinstance(cache_store, str) or cache_store not in VALID_CACHE_STORES:
        raise ConfigError(f"cache_store must be one of {sorted(VALID_CACHE_STORES)}, got {cache_store!r}")

    memory_cache_size = raw.get("memory_cache_size", DEFAULT_CACHE_SIZE)
    if isinstance(memory_cache_size, bool) or not isinstance(memory_cache_size, int) or memory_cache_size <= 0:
        raise ConfigError("memory_cache_size must be a positive integer")

    compress = raw.get("compress", False)
    if not isinstance(compress, bool):
        raise ConfigError("compress must be a boolean")

    output_dir = raw.get("output_dir", DEFAULT_OUTPUT_DIR)
    if not isinstance(output_dir, str) or not output_dir.strip():
        raise ConfigError("output_dir must be a non-empty string")

    return StashConfig(
        cache_store=cache_store,  # type: ignore[arg-type]
        memory_cache_size=memory_cache_size,
        compress=compress,
        output_dir=output_dir.strip(),
    )


def build_cache(config: StashConfig) -> Cache:
    """Return a cache facade over the configured in-process store."""
    if config.cache_store == "null":
        return Cache(NullStore())
    return Cache(MemoryStore(max_size=config.memory_cache_size))


def _suggest_key(key: str) -> str:
    """Return a ``did you mean`` hint for a misspelled config key."""
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1)
    if not matches:
        return ""
    return f" (did you mean {matches[0]!r}?)"
