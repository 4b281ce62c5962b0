"""Typed asset record structures."""

from __future__ import annotations

from typing import NotRequired, TypedDict

# Functional syntax because the variant tag is stored under the keyword "class".
AssetRecord = TypedDict(
    "AssetRecord",
    {
        "class": str,
        "logical_path": str,
        "pathname": str | None,
        "content_type": str | None,
        "mtime": int | None,
        "length": int | None,
        "digest": str,
        "dependency_paths": NotRequired[list[str]],
        "required_paths": NotRequired[list[str]],
    },
)
