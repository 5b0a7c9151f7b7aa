from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from guidmanifest.ingest.walker import METADATA_EXTENSION

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Load YAML config into a dict. An empty file yields an empty dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file must contain a mapping: {path}")
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass
class AppConfig:
    raw: Dict[str, Any]

    @classmethod
    def from_files(cls, *paths: str | Path) -> "AppConfig":
        merged: Dict[str, Any] = {}
        for path in paths:
            merged = deep_merge(merged, load_yaml(path))
        return cls(raw=merged)


@dataclass
class RunSettings:
    display_name: str
    installed_base_directory: Path
    output_file: Path
    url: Optional[str] = None
    non_sorted: bool = False
    extension: str = METADATA_EXTENSION
    log_level: str = "INFO"

    @classmethod
    def resolve(cls, config: Dict[str, Any], overrides: Dict[str, Any]) -> "RunSettings":
        """Combine config values with explicit overrides (``None`` means unset)."""
        values = dict(config)
        values.update({k: v for k, v in overrides.items() if v is not None})

        missing = [k for k in ("display_name", "installed_base_directory", "output_file") if not values.get(k)]
        if missing:
            raise ValueError("missing required setting(s): " + ", ".join(missing))

        extension = str(values.get("extension", METADATA_EXTENSION))
        if not extension.startswith("."):
            extension = "." + extension

        log_level = str(values.get("log_level", "INFO")).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {log_level}")

        non_sorted = values.get("non_sorted", False)
        if not isinstance(non_sorted, bool):
            raise ValueError(f"non_sorted must be true or false, got {non_sorted!r}")

        url = values.get("url")
        return cls(
            display_name=str(values["display_name"]),
            installed_base_directory=Path(values["installed_base_directory"]),
            output_file=Path(values["output_file"]),
            url=None if url is None else str(url),
            non_sorted=non_sorted,
            extension=extension,
            log_level=log_level,
        )
