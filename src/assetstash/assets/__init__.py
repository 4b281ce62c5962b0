"""Digest-addressed build artifacts."""

from __future__ import annotations

from assetstash.assets.base import Asset, asset_from_record, guess_content_type
from assetstash.assets.variants import BundledAsset, ProcessedAsset, StaticAsset

__all__ = [
    "Asset",
    "BundledAsset",
    "ProcessedAsset",
    "StaticAsset",
    "asset_from_record",
    "guess_content_type",
]
