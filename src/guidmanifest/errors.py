from __future__ import annotations

from pathlib import Path
from typing import Optional


class ManifestError(Exception):
    """Base class for every failure that aborts a manifest run."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class DirectoryReadError(ManifestError):
    pass


class FileReadError(ManifestError):
    pass


class MissingFieldError(ManifestError):
    pass


class FormatError(ManifestError):
    pass


class OutputOpenError(ManifestError):
    pass


class OutputWriteError(ManifestError):
    pass
