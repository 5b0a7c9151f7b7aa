from __future__ import annotations

import argparse
import logging
from typing import List, Optional
from urllib.parse import urlsplit

import yaml

from guidmanifest.errors import ManifestError
from guidmanifest.pipeline import build_manifest
from guidmanifest.utils.config import LOG_LEVELS, AppConfig, RunSettings


def validate_url(value: str) -> str:
    parts = urlsplit(value)
    if not parts.scheme or not (parts.netloc or parts.path):
        raise argparse.ArgumentTypeError(f"invalid URL: {value!r}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a GUID manifest from an installed asset directory")
    parser.add_argument("--config", action="append", default=[], help="YAML config file; may be repeated")
    parser.add_argument("--display-name", required=False)
    parser.add_argument("--url", type=validate_url, required=False)
    parser.add_argument("--installed-base-directory", required=False)
    parser.add_argument("--output-file", required=False)
    parser.add_argument(
        "--non-sorted",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="keep traversal order and duplicates instead of sorting and deduplicating",
    )
    parser.add_argument("--extension", required=False, help="metadata file extension (default: .meta)")
    parser.add_argument("--log-level", required=False, choices=LOG_LEVELS)
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> RunSettings:
    try:
        cfg = AppConfig.from_files(*args.config)
        settings = RunSettings.resolve(
            cfg.raw,
            {
                "display_name": args.display_name,
                "url": args.url,
                "installed_base_directory": args.installed_base_directory,
                "output_file": args.output_file,
                "non_sorted": args.non_sorted,
                "extension": args.extension,
                "log_level": args.log_level,
            },
        )
        if settings.url is not None:
            validate_url(settings.url)
    except (OSError, ValueError, yaml.YAMLError, argparse.ArgumentTypeError) as exc:
        raise SystemExit(f"error: {exc}") from exc
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = resolve_settings(args)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        count = build_manifest(
            settings.display_name,
            settings.url,
            settings.installed_base_directory,
            settings.output_file,
            non_sorted=settings.non_sorted,
            extension=settings.extension,
        )
    except ManifestError as exc:
        raise SystemExit(f"error: {exc}") from exc

    print(f"Wrote {count} guid(s) to {settings.output_file}")


if __name__ == "__main__":
    main()
