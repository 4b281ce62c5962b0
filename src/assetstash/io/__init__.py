"""Shared file I/O helpers."""

from .atomic import atomic_open
from .digest import canonical_json, file_hexdigest, hexdigest

__all__ = ["atomic_open", "canonical_json", "file_hexdigest", "hexdigest"]
