"""Root exception type for assetstash."""

from __future__ import annotations


class AssetStashError(Exception):
    """Base class for all errors raised by assetstash."""
