"""Tests for asset construction, identity and freshness."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest

from assetstash.assets import Asset, BundledAsset, ProcessedAsset, StaticAsset
from assetstash.exceptions import InvalidAssetError


def test_from_source_reads_stat_and_digest(project_root: Path, source_mtime: int) -> None:
    source = project_root / "app" / "app.js"

    asset = StaticAsset.from_source(project_root, "app/app.js", source)

    assert asset.logical_path == "app/app.js"
    assert asset.pathname == source
    assert asset.length == len(b"alert(1);\n")
    assert asset.bytesize == asset.length
    assert asset.digest == hashlib.sha256(b"alert(1);\n").hexdigest()
    assert asset.mtime == source_mtime


def test_from_source_uses_content_type_classifier(project_root: Path) -> None:
    source = project_root / "app" / "app.js"

    asset = StaticAsset.from_source(
        project_root,
        "app/app.js",
        source,
        content_type_of=lambda path: f"application/x-{path.suffix.lstrip('.')}",
    )

    assert asset.content_type == "application/x-js"


def test_from_source_default_content_type(tmp_path: Path) -> None:
    source = tmp_path / "site.css"
    source.write_text("body {}", encoding="utf-8")

    asset = StaticAsset.from_source(tmp_path, "site.css", source)

    assert asset.content_type == "text/css"


@pytest.mark.parametrize(
    "logical_path",
    ["app/app", "app/app.", "app/.hidden", "app.js/"],
    ids=["no_dot", "trailing_dot", "dotfile", "trailing_slash"],
)
def test_from_source_rejects_logical_path_without_extension(project_root: Path, logical_path: str) -> None:
    with pytest.raises(InvalidAssetError, match="no extension"):
        StaticAsset.from_source(project_root, logical_path, project_root / "app" / "app.js")


def test_invalid_asset_error_is_value_error(project_root: Path) -> None:
    with pytest.raises(ValueError):
        StaticAsset(root=project_root, logical_path="Makefile", digest="abc")


def test_from_source_missing_file_raises_os_error(project_root: Path) -> None:
    with pytest.raises(FileNotFoundError):
        StaticAsset.from_source(project_root, "app/missing.js", project_root / "app" / "missing.js")


def test_asset_is_immutable(project_root: Path) -> None:
    asset = StaticAsset.from_source(project_root, "app/app.js", project_root / "app" / "app.js")

    with pytest.raises(AttributeError):
        asset.digest = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("logical_path", "digest", "expected"),
    [
        ("app/app.js", "deadbeef", "app/app-deadbeef.js"),
        ("foo/bar.min.js", "abcd1234", "foo/bar.min-abcd1234.js"),
        ("style.css", "00ff", "style-00ff.css"),
    ],
    ids=["simple", "multi_dot", "top_level"],
)
def test_digest_path(tmp_path: Path, logical_path: str, digest: str, expected: str) -> None:
    asset = StaticAsset(root=tmp_path, logical_path=logical_path, digest=digest)

    assert asset.digest_path() == expected


def test_equality_uses_class_path_mtime_and_digest(tmp_path: Path) -> None:
    first = StaticAsset(root=tmp_path, logical_path="a.js", digest="abc", mtime=10, length=3)
    same = StaticAsset(root=tmp_path / "elsewhere", logical_path="a.js", digest="abc", mtime=10, length=99)
    other_digest = StaticAsset(root=tmp_path, logical_path="a.js", digest="abd", mtime=10)
    other_mtime = StaticAsset(root=tmp_path, logical_path="a.js", digest="abc", mtime=11)
    other_class = ProcessedAsset(root=tmp_path, logical_path="a.js", digest="abc", mtime=10)

    assert first == same
    assert hash(first) == hash(same)
    assert first != other_digest
    assert first != other_mtime
    assert first != other_class
    assert len({first, same, other_class}) == 2


def test_variants_share_base_behaviour(tmp_path: Path) -> None:
    bundled = BundledAsset(root=tmp_path, logical_path="app.js", digest="abc", required_paths=("lib.js",))

    assert isinstance(bundled, Asset)
    assert bundled.to_parts() == (bundled,)
    assert bundled.dependencies() == ()


def test_is_fresh_tracks_source_content(project_root: Path, source_mtime: int) -> None:
    source = project_root / "app" / "app.js"
    asset = StaticAsset.from_source(project_root, "app/app.js", source)

    assert asset.is_fresh()

    # Same size and mtime, different bytes.
    source.write_text("alert(2);\n", encoding="utf-8")
    os.utime(source, (source_mtime, source_mtime))

    assert not asset.is_fresh()


def test_is_fresh_accepts_digest_function(project_root: Path) -> None:
    asset = StaticAsset.from_source(project_root, "app/app.js", project_root / "app" / "app.js")

    assert asset.is_fresh(lambda path: asset.digest)
    assert not asset.is_fresh(lambda path: "0" * 64)


def test_is_fresh_false_without_pathname(tmp_path: Path) -> None:
    asset = StaticAsset(root=tmp_path, logical_path="a.js", digest="abc")

    assert not asset.is_fresh()


def test_body_defaults_to_source(project_root: Path) -> None:
    asset = StaticAsset.from_source(project_root, "app/app.js", project_root / "app" / "app.js")

    assert asset.body() == asset.source() == asset.to_bytes() == b"alert(1);\n"
    assert list(asset) == [b"alert(1);\n"]


def test_source_requires_pathname(tmp_path: Path) -> None:
    asset = StaticAsset(root=tmp_path, logical_path="a.js", digest="abc")

    with pytest.raises(InvalidAssetError, match="no source pathname"):
        asset.source()


def test_repr_includes_identity_fields(tmp_path: Path) -> None:
    asset = StaticAsset(root=tmp_path, logical_path="a.js", digest="abc", mtime=5)

    assert repr(asset) == "<StaticAsset pathname=None, mtime=5, digest='abc'>"


def test_string_paths_are_normalized(project_root: Path) -> None:
    asset = ProcessedAsset(
        root=str(project_root),
        logical_path="app/app.js",
        digest="abc",
        pathname=str(project_root / "app" / "app.js"),
        dependency_paths=[str(project_root / "app" / "app.js")],
    )

    assert asset.root == project_root
    assert asset.pathname == project_root / "app" / "app.js"
    assert asset.dependency_paths == (project_root / "app" / "app.js",)
    assert asset.source() == b"alert(1);\n"
    record = asset.to_record()
    assert record["pathname"] == "$root/app/app.js"
    assert record["dependency_paths"] == ["$root/app/app.js"]


def test_bundled_required_paths_become_tuple(tmp_path: Path) -> None:
    asset = BundledAsset(root=tmp_path, logical_path="app.js", digest="abc", required_paths=["a.js", "b.js"])

    assert asset.required_paths == ("a.js", "b.js")


def test_duplicate_variant_name_is_rejected() -> None:
    with pytest.raises(TypeError, match="StaticAsset"):
        type("StaticAsset", (Asset,), {})

    assert Asset.registry["StaticAsset"] is StaticAsset
