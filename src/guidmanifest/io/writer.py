from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from guidmanifest.errors import OutputOpenError, OutputWriteError
from guidmanifest.model.guid import GUID


def render_manifest(display_name: str, url: Optional[str], guids: Iterable[GUID]) -> Tuple[bytes, int]:
    """Manifest content as UTF-8 bytes, plus the number of GUID lines."""
    lines: List[str] = [f"displayName: {display_name}\n"]
    if url is not None:
        lines.append(f"url: {url}\n")
    lines.append("guids:\n")
    count = 0
    for guid in guids:
        lines.append(f"{guid}\n")
        count += 1
    return "".join(lines).encode("utf-8"), count


class ManifestWriter:
    """Write a manifest over an existing output file.

    The file is never created here. Content is encoded in full before the
    file is touched, then the previous content is discarded, so a shorter
    manifest leaves no stale tail behind.
    """

    def __init__(self, output_file: str | Path) -> None:
        self.output_file = Path(output_file)

    def write(self, display_name: str, url: Optional[str], guids: Iterable[GUID]) -> int:
        try:
            payload, count = render_manifest(display_name, url, guids)
        except UnicodeEncodeError as exc:
            raise OutputWriteError("manifest text is not valid UTF-8", self.output_file) from exc

        try:
            f = open(self.output_file, "r+b")
        except OSError as exc:
            raise OutputOpenError("failed to open output file", self.output_file) from exc

        try:
            with f:
                f.truncate(0)
                f.write(payload)
                f.flush()
        except OSError as exc:
            raise OutputWriteError("failed to write output file", self.output_file) from exc
        return count


def write_manifest(
    output_file: str | Path,
    display_name: str,
    url: Optional[str],
    guids: Iterable[GUID],
) -> int:
    return ManifestWriter(output_file).write(display_name, url, guids)
