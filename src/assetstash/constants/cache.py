"""Constants used by the cache facade and hashing."""

from __future__ import annotations

# Expanded keys look like ``assetstash/v3.0/<sha256>``. Bump the version only when
# the stored value format changes; old entries then become unreachable.
CACHE_NAMESPACE: str = "assetstash"
CACHE_VERSION: str = "3.0"
MAX_KEY_LENGTH: int = 250

DIGEST_VERSION: str = "1"
FILE_HASH_CHUNK_SIZE: int = 65536

DEFAULT_MEMORY_CACHE_SIZE: int = 1000
