"""Deterministic hashing for cache keys and file contents."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

from assetstash.constants.cache import DIGEST_VERSION, FILE_HASH_CHUNK_SIZE


def canonical_json(obj: object) -> bytes:
    """Serialize ``obj`` so equal content always yields equal bytes."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")


def hexdigest(obj: object) -> str:
    """Return a stable SHA-256 hex digest for any JSON-serializable value."""
    digest = hashlib.sha256()
    digest.update(f"v{DIGEST_VERSION}:".encode("ascii"))
    digest.update(canonical_json(obj))
    return digest.hexdigest()


def file_hexdigest(path: Path | str) -> str:
    """Return SHA-256 hex digest for a file."""
    digest = hashlib.sha256()
    with Path(path).open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()
