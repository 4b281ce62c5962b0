"""Shared type aliases for assetstash."""

from .assets import AssetRecord

__all__ = ["AssetRecord"]
