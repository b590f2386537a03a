"""Application entry point for the licident command line."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from rich.console import Console

from licident import settings
from licident.adapters.license_files import FileLicenseSource
from licident.adapters.report_formatting import build_duplicates_table, format_digest_line
from licident.core.catalog import build_catalog
from licident.core.config import LoggingConfig
from licident.core.normalization import normalize_license_text

NAME = "LICIDENT"
FONT = "tarty-1"

LOGGER = logging.getLogger(__name__)


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(config: LoggingConfig) -> None:
    if not config.enabled:
        return

    level = getattr(logging, config.level, logging.INFO)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    if config.console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if config.file.enabled:
        directory = os.path.dirname(config.file.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file.path,
            maxBytes=config.file.max_bytes,
            backupCount=config.file.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _digest(args: argparse.Namespace, config: dict) -> int:
    report_config = settings.build_report_config(config)
    source = FileLicenseSource(args.files, url=args.url)
    for labeled in source.load():
        print(format_digest_line(labeled, report_config))
    return 0


def _dedup(args: argparse.Namespace, config: dict) -> int:
    report_config = settings.build_report_config(config)
    catalog, labeled = build_catalog(FileLicenseSource(args.files, manifest=args.manifest))
    groups = catalog.duplicates()
    LOGGER.info("%s duplicate groups", len(groups))

    if not groups:
        print(f"No duplicates among {len(labeled)} licenses.")
        return 0

    Console().print(build_duplicates_table(groups, labeled, report_config))
    return 1


def _normalize(args: argparse.Namespace, config: dict) -> int:
    with open(args.file, "r", encoding="utf-8", newline="") as handle:
        print(normalize_license_text(handle.read()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="licident")
    parser.add_argument("--config", help="Path to config.json (overrides LICIDENT_CONFIG)")
    parser.add_argument("--no-banner", action="store_true", help="Skip the startup banner")
    subparsers = parser.add_subparsers(dest="command", required=True)

    digest_parser = subparsers.add_parser("digest", help="Print the digest of each license file")
    digest_parser.add_argument("files", nargs="+")
    digest_parser.add_argument("--url", help="URL recorded for every license read")
    digest_parser.set_defaults(handler=_digest)

    dedup_parser = subparsers.add_parser("dedup", help="Report license files that share a digest")
    dedup_parser.add_argument("files", nargs="*")
    dedup_parser.add_argument("--manifest", help="JSON manifest listing license bodies")
    dedup_parser.set_defaults(handler=_dedup)

    normalize_parser = subparsers.add_parser("normalize", help="Print the normalized text of a license file")
    normalize_parser.add_argument("file")
    normalize_parser.set_defaults(handler=_normalize)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "dedup" and not args.files and not args.manifest:
        parser.error("dedup needs license files or --manifest")

    config = settings.load_json_config(args.config)
    _configure_logging(settings.build_logging_config(config))
    if not args.no_banner:
        _print_banner()

    try:
        return args.handler(args, config)
    except OSError as exc:
        LOGGER.error("Cannot read license input: %s", exc)
        return 2
    except ValueError as exc:
        # Covers undecodable files, malformed JSON and invalid manifest entries.
        LOGGER.error("Invalid license input: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
