"""Shared pytest fixtures for asset and cache tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

SOURCE_MTIME: int = 1_700_000_000


@pytest.fixture()
def source_mtime() -> int:
    """Return the whole-second mtime given to fixture sources."""
    return SOURCE_MTIME


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """Return a project root holding ``app/app.js`` with a sub-second mtime."""
    root = tmp_path / "project"
    source = root / "app" / "app.js"
    source.parent.mkdir(parents=True)
    source.write_text("alert(1);\n", encoding="utf-8")
    os.utime(source, (SOURCE_MTIME + 0.75, SOURCE_MTIME + 0.75))
    return root


@pytest.fixture()
def schemas_root() -> Path:
    """Return the directory holding shipped JSON Schemas."""
    return Path(__file__).resolve().parent.parent / "schemas"
