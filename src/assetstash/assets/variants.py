"""Concrete asset variants that may appear in serialized records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from assetstash.assets.base import Asset
from assetstash.assets.paths import expand_root_path, relativize_root_path
from assetstash.assets.records import str_tuple


@dataclass(frozen=True, eq=False, repr=False, kw_only=True)
class StaticAsset(Asset):
    """Asset served exactly as it exists on disk."""


@dataclass(frozen=True, eq=False, repr=False, kw_only=True)
class ProcessedAsset(Asset):
    """Asset produced by running processors over a single source file.

    ``dependency_paths`` lists the source files the processors read, fixed when
    the asset is built.
    """

    dependency_paths: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "dependency_paths", tuple(Path(path) for path in self.dependency_paths))

    @classmethod
    def decode_extras(cls, root: Path, record: Mapping[str, object]) -> dict[str, Any]:
        return {
            "dependency_paths": tuple(expand_root_path(root, path) for path in str_tuple(record, "dependency_paths")),
        }

    def encode_extras(self) -> dict[str, Any]:
        return {
            "dependency_paths": [relativize_root_path(self.root, path) for path in self.dependency_paths],
        }


@dataclass(frozen=True, eq=False, repr=False, kw_only=True)
class BundledAsset(Asset):
    """Asset whose body concatenates the assets it requires."""

    required_paths: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "required_paths", tuple(self.required_paths))

    @classmethod
    def decode_extras(cls, root: Path, record: Mapping[str, object]) -> dict[str, Any]:
        return {"required_paths": str_tuple(record, "required_paths")}

    def encode_extras(self) -> dict[str, Any]:
        return {"required_paths": list(self.required_paths)}
