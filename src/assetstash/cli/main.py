"""CLI entrypoint for assetstash."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from assetstash import __version__
from assetstash.assets import StaticAsset
from assetstash.config import StashConfig, load_config
from assetstash.constants.assets import GZIP_EXTENSION
from assetstash.constants.branding import CLI_DESCRIPTION
from assetstash.exceptions import AssetStashError, ConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="assetstash",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect = subparsers.add_parser("inspect", help="Print the serialized record of an asset")
    inspect.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    inspect.add_argument("logical_path", help="Asset path relative to the root, e.g. app/app.js")
    inspect.add_argument("-c", "--config", type=Path, help="Explicit config file")
    inspect.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    write = subparsers.add_parser("write", help="Write a digest-named copy of an asset")
    write.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    write.add_argument("logical_path", help="Asset path relative to the root, e.g. app/app.js")
    write.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory (defaults to output_dir from config, relative to root)",
    )
    write.add_argument("-z", "--gzip", action="store_true", help="Also write a gzipped copy next to the asset")
    write.add_argument("-c", "--config", type=Path, help="Explicit config file")
    write.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    root = args.root.resolve()
    try:
        config = load_config(root, args.config)
        asset = StaticAsset.from_source(root, args.logical_path, root / args.logical_path)
        logger.debug("Built %r", asset)
        if args.command == "inspect":
            print(json.dumps(asset.to_record(), indent=2, sort_keys=True))
            return 0
        if args.command != "write":
            parser.error(f"Unsupported command: {args.command}")
        written = write_asset(asset, config=config, root=root, output_dir=args.output_dir, gzip=args.gzip)
        for path in written:
            print(path)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except (AssetStashError, OSError) as exc:
        print(f"Asset error: {exc}", file=sys.stderr)
        return 1

    return 0


def write_asset(
    asset: StaticAsset,
    *,
    config: StashConfig,
    root: Path,
    output_dir: Path | None,
    gzip: bool,
) -> list[Path]:
    """Write ``asset`` under its digest path and return the files written."""
    target_dir = output_dir if output_dir is not None else root / config.output_dir
    destination = target_dir / asset.digest_path()

    asset.write_to(destination, compress=config.compress)
    written = [destination]
    if gzip and not config.compress:
        compressed = destination.with_name(destination.name + GZIP_EXTENSION)
        asset.write_to(compressed)
        written.append(compressed)
    return written


if __name__ == "__main__":
    raise SystemExit(main())
