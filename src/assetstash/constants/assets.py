"""Constants for asset records and persisted writes."""

from __future__ import annotations

ROOT_PLACEHOLDER: str = "$root"

ASSET_TEMP_PREFIX: str = ".asset-"
ASSET_TEMP_SUFFIX: str = ".tmp"

GZIP_EXTENSION: str = ".gz"
GZIP_COMPRESS_LEVEL: int = 9
