"""Configuration-related exceptions."""

from __future__ import annotations

from assetstash.exceptions.base import AssetStashError


class ConfigError(AssetStashError, ValueError):
    """Raised when assetstash configuration is invalid."""
