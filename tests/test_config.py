"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetstash.cache import GetSetAdapter, MemoryStore, NullStore
from assetstash.config import StashConfig, build_cache, load_config
from assetstash.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == StashConfig()
    assert loaded.cache_store == "memory"
    assert loaded.memory_cache_size > 0


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    (tmp_path / "assetstash.yaml").write_text(
        "cache_store: 'null'\nmemory_cache_size: 10\ncompress: true\noutput_dir: dist\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.cache_store == "null"
    assert loaded.memory_cache_size == 10
    assert loaded.compress is True
    assert loaded.output_dir == "dist"


def test_load_config_empty_file_is_defaults(tmp_path: Path) -> None:
    (tmp_path / "assetstash.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == StashConfig()


def test_load_config_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("cache_store: redis\n", "cache_store"),
        ("memory_cache_size: true\n", "memory_cache_size"),
        ("memory_cache_size: 0\n", "memory_cache_size"),
        ("compress: maybe\n", "compress"),
        ("output_dir: ''\n", "output_dir"),
        ("- a\n- b\n", "YAML mapping"),
        ("cache_store: [\n", "Invalid YAML"),
        ("compres: true\n", "did you mean 'compress'"),
    ],
    ids=[
        "unknown_store",
        "bool_size",
        "zero_size",
        "non_bool_compress",
        "empty_output_dir",
        "not_mapping",
        "broken_yaml",
        "typo_key",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "assetstash.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)


def test_build_cache_memory_store() -> None:
    cache = build_cache(StashConfig(memory_cache_size=5))

    assert isinstance(cache.backend, GetSetAdapter)
    assert isinstance(cache.backend.store, MemoryStore)
    assert cache.backend.store.max_size == 5


def test_build_cache_null_store() -> None:
    cache = build_cache(StashConfig(cache_store="null"))

    assert isinstance(cache.backend.store, NullStore)
    assert cache.fetch("k", lambda: "v") == "v"
    assert cache.get_raw("k") is None
