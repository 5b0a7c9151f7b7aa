from __future__ import annotations

from pathlib import Path
from typing import Optional

from guidmanifest.errors import FileReadError, FormatError, MissingFieldError
from guidmanifest.model.guid import GUID

GUID_PREFIX = "guid:"


def _guid_field(text: str) -> Optional[str]:
    # Lines end at "\n" or "\r\n"; one further "\r" is stripped from the value below.
    lines = text.split("\n")
    for i, line in enumerate(lines):
        if i < len(lines) - 1 and line.endswith("\r"):
            line = line[:-1]
        if line.startswith(GUID_PREFIX):
            value = line.split(":", 1)[1]
            if value.startswith(" "):
                value = value[1:]
            if value.endswith("\r"):
                value = value[:-1]
            return value
    return None


def extract_guid(text: str, source: Optional[Path] = None) -> GUID:
    """Parse the first ``guid:`` line of a metadata file's content."""
    value = _guid_field(text)
    if value is None:
        raise MissingFieldError("no guid field", source)
    try:
        return GUID.parse(value)
    except FormatError as exc:
        raise FormatError(f"invalid guid {value!r}", source) from exc


def read_guid(path: Path) -> GUID:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError("cannot read metadata file", path) from exc
    return extract_guid(text, source=path)
