"""Root placeholder handling and digest path splicing."""

from __future__ import annotations

import re
from pathlib import Path

from assetstash.constants.assets import ROOT_PLACEHOLDER

_EXTENSION_PATTERN: re.Pattern[str] = re.compile(r"\.(\w+)$")
_LOGICAL_EXTENSION_PATTERN: re.Pattern[str] = re.compile(r"[^/.]\.\w+$")


def has_extension(logical_path: str) -> bool:
    """Return True when the final path segment carries a non-empty extension."""
    return bool(_LOGICAL_EXTENSION_PATTERN.search(logical_path))


def splice_digest(logical_path: str, digest: str) -> str:
    """Insert ``-<digest>`` before the last extension.

    ``splice_digest("foo/bar.js", "abcd")`` returns ``"foo/bar-abcd.js"``.
    """
    return _EXTENSION_PATTERN.sub(lambda match: f"-{digest}{match.group(0)}", logical_path, count=1)


def relativize_root_path(root: Path, path: Path) -> str:
    """Replace a leading ``root`` with the ``$root`` placeholder."""
    if not path.is_relative_to(root):
        return str(path)
    relative = path.relative_to(root).as_posix()
    if relative == ".":
        return ROOT_PLACEHOLDER
    return f"{ROOT_PLACEHOLDER}/{relative}"


def expand_root_path(root: Path, path: str) -> Path:
    """Replace a leading ``$root`` placeholder with ``root``."""
    if path == ROOT_PLACEHOLDER:
        return root
    if path.startswith(f"{ROOT_PLACEHOLDER}/"):
        return root / path[len(ROOT_PLACEHOLDER) + 1 :]
    return Path(path)
