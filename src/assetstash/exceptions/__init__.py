"""Shared exception hierarchy for assetstash."""

from __future__ import annotations

from .assets import InvalidAssetError, UnserializeError
from .base import AssetStashError
from .config import ConfigError

__all__ = ["AssetStashError", "ConfigError", "InvalidAssetError", "UnserializeError"]
