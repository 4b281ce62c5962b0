"""Asset construction and record exceptions."""

from __future__ import annotations

from assetstash.exceptions.base import AssetStashError


class InvalidAssetError(AssetStashError, ValueError):
    """Raised when an asset is constructed from malformed input."""


class UnserializeError(AssetStashError, ValueError):
    """Raised when a serialized asset record is malformed or incompatible.

    Callers reading records back from a cache should treat this as a miss.
    """
