"""Digest-addressed asset model with record round-trips and atomic writes."""

from __future__ import annotations

import gzip
import logging
import mimetypes
import os
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Self, TypeAlias

from assetstash.assets.paths import expand_root_path, has_extension, relativize_root_path, splice_digest
from assetstash.assets.records import optional_int, optional_str, require_str
from assetstash.constants.assets import (
    ASSET_TEMP_PREFIX,
    ASSET_TEMP_SUFFIX,
    GZIP_COMPRESS_LEVEL,
    GZIP_EXTENSION,
)
from assetstash.exceptions import InvalidAssetError, UnserializeError
from assetstash.io import atomic_open, file_hexdigest
from assetstash.types import AssetRecord

logger = logging.getLogger(__name__)

ContentTypeClassifier: TypeAlias = Callable[[Path], str | None]
DigestFunction: TypeAlias = Callable[[Path], str]


def guess_content_type(path: Path) -> str | None:
    """Classify a source file by its extension."""
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type


@dataclass(frozen=True, eq=False, repr=False, kw_only=True)
class Asset:
    """One compiled artifact, identified by logical path, mtime and content digest.

    Build from a live source file with :meth:`from_source`, or from a cached
    record with :meth:`from_record`. Instances never change after construction.
    """

    registry: ClassVar[dict[str, type[Asset]]] = {}

    root: Path
    logical_path: str
    digest: str
    pathname: Path | None = None
    content_type: str | None = None
    mtime: int | None = None
    length: int | None = None

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Register the subclass under its record tag; tags are unique."""
        super().__init_subclass__(**kwargs)
        existing = Asset.registry.get(cls.__name__)
        if existing is not None:
            raise TypeError(
                f"Asset record tag {cls.__name__!r} is already taken by {existing.__module__}.{existing.__qualname__}"
            )
        Asset.registry[cls.__name__] = cls

    def __post_init__(self) -> None:
        if not has_extension(self.logical_path):
            raise InvalidAssetError(f"Asset logical path has no extension: {self.logical_path}")
        object.__setattr__(self, "root", Path(self.root))
        if self.pathname is not None:
            object.__setattr__(self, "pathname", Path(self.pathname))

    @classmethod
    def from_source(
        cls,
        root: Path | str,
        logical_path: str,
        pathname: Path | str,
        *,
        content_type_of: ContentTypeClassifier = guess_content_type,
        **extras: Any,
    ) -> Self:
        """Stat and hash ``pathname`` and build an asset for it.

        Modification time is truncated to whole seconds so records, which store
        integer seconds, round-trip without loss.
        """
        if not has_extension(logical_path):
            raise InvalidAssetError(f"Asset logical path has no extension: {logical_path}")

        source = Path(pathname)
        stat = source.stat()
        return cls(
            root=Path(root),
            logical_path=logical_path,
            pathname=source,
            content_type=content_type_of(source),
            mtime=int(stat.st_mtime),
            length=stat.st_size,
            digest=file_hexdigest(source),
            **extras,
        )

    @classmethod
    def from_record(cls, root: Path | str, record: object) -> Asset:
        """Rebuild an asset from :meth:`to_record` output.

        The record's ``class`` tag picks the concrete variant. Called on a
        variant, the tag must name that variant or one of its subclasses.

        Raises:
            UnserializeError: When the record is malformed or names an unknown variant.
        """
        if not isinstance(record, Mapping):
            raise UnserializeError(f"Asset record must be a mapping, got {type(record).__name__}")

        tag = record.get("class")
        klass = Asset.registry.get(tag) if isinstance(tag, str) else None
        if klass is None:
            raise UnserializeError(f"Unknown asset class in record: {tag!r}")
        if not issubclass(klass, cls):
            raise UnserializeError(f"Record for {tag} cannot be loaded as {cls.__name__}")
        return klass.init_with(Path(root), record)

    @classmethod
    def init_with(cls, root: Path, record: Mapping[str, object]) -> Self:
        """Build this exact class from an already tag-checked record."""
        pathname = optional_str(record, "pathname")
        try:
            return cls(
                root=root,
                logical_path=require_str(record, "logical_path"),
                digest=require_str(record, "digest"),
                pathname=expand_root_path(root, pathname) if pathname is not None else None,
                content_type=optional_str(record, "content_type"),
                mtime=optional_int(record, "mtime"),
                length=optional_int(record, "length"),
                **cls.decode_extras(root, record),
            )
        except InvalidAssetError as exc:
            raise UnserializeError(str(exc)) from exc

    @classmethod
    def decode_extras(cls, root: Path, record: Mapping[str, object]) -> dict[str, Any]:
        """Return constructor arguments for variant-specific record fields."""
        return {}

    def encode_extras(self) -> dict[str, Any]:
        """Return variant-specific record fields."""
        return {}

    def to_record(self) -> AssetRecord:
        """Serialize into a JSON-compatible record with a portable pathname."""
        record: AssetRecord = {
            "class": type(self).__name__,
            "logical_path": self.logical_path,
            "pathname": relativize_root_path(self.root, self.pathname) if self.pathname is not None else None,
            "content_type": self.content_type,
            "mtime": self.mtime,
            "length": self.length,
            "digest": self.digest,
        }
        record.update(self.encode_extras())  # type: ignore[typeddict-item]
        return record

    @property
    def bytesize(self) -> int | None:
        return self.length

    def digest_path(self) -> str:
        """Return the logical path with the digest spliced in.

        ``"foo/bar-37b51d194a7513e45b56f6524f2d51f2.js"``
        """
        return splice_digest(self.logical_path, self.digest)

    def dependencies(self) -> tuple[Asset, ...]:
        """Assets declared as dependencies."""
        return ()

    def to_parts(self) -> tuple[Asset, ...]:
        """Expand into parts whose bodies concatenate to this asset's contents."""
        return (self,)

    def source(self) -> bytes:
        if self.pathname is None:
            raise InvalidAssetError(f"Asset {self.logical_path} has no source pathname")
        return self.pathname.read_bytes()

    def body(self) -> bytes:
        return self.source()

    def to_bytes(self) -> bytes:
        return self.source()

    def __iter__(self) -> Iterator[bytes]:
        yield self.to_bytes()

    def is_fresh(self, digest_of: DigestFunction = file_hexdigest) -> bool:
        """Return True when the source on disk still hashes to this asset's digest.

        Lets callers trust a cached record without recompiling it.
        """
        if self.pathname is None:
            return False
        return self.digest == digest_of(self.pathname)

    def write_to(self, filename: Path | str, *, compress: bool | None = None) -> None:
        """Write the asset body to ``filename`` atomically.

        Output is gzipped when ``compress`` is set or ``filename`` ends in
        ``.gz``. The gzip header and the file's atime/mtime both carry the
        asset's mtime, so identical assets produce identical files.
        """
        destination = Path(filename)
        compress = bool(compress) or destination.suffix == GZIP_EXTENSION

        with atomic_open(destination, temp_prefix=ASSET_TEMP_PREFIX, temp_suffix=ASSET_TEMP_SUFFIX) as handle:
            if compress:
                with gzip.GzipFile(
                    filename="",
                    mode="wb",
                    fileobj=handle,
                    compresslevel=GZIP_COMPRESS_LEVEL,
                    mtime=self.mtime or 0,
                ) as gz:
                    gz.write(self.to_bytes())
            else:
                handle.write(self.to_bytes())

        if self.mtime is not None:
            os.utime(destination, (self.mtime, self.mtime))
        logger.debug("Wrote %s to %s (compress=%s)", self.logical_path, destination, compress)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return (
            type(other) is type(self)
            and other.logical_path == self.logical_path
            and other.mtime == self.mtime
            and other.digest == self.digest
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.logical_path, self.mtime, self.digest))

    def __repr__(self) -> str:
        pathname = str(self.pathname) if self.pathname is not None else None
        return f"<{type(self).__name__} pathname={pathname!r}, mtime={self.mtime!r}, digest={self.digest!r}>"


Asset.registry[Asset.__name__] = Asset


def asset_from_record(root: Path | str, record: object) -> Asset | None:
    """Rebuild an asset from a cached record, or return None when it is unusable.

    Use this when reading from a cache: a malformed or stale record is a miss.
    """
    try:
        return Asset.from_record(root, record)
    except UnserializeError as exc:
        logger.debug("Discarding unusable asset record: %s", exc)
        return None
