from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from guidmanifest.collect.collection import GuidCollection
from guidmanifest.errors import DirectoryReadError
from guidmanifest.ingest.extractor import read_guid

logger = logging.getLogger(__name__)

METADATA_EXTENSION = ".meta"

EntryLister = Callable[[Path], List[os.DirEntry]]


def scan_entries(directory: Path) -> List[os.DirEntry]:
    """Directory entries in whatever order the filesystem returns them."""
    with os.scandir(directory) as it:
        return list(it)


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise DirectoryReadError("cannot determine file type", Path(entry.path)) from exc


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError as exc:
        raise DirectoryReadError("cannot determine file type", Path(entry.path)) from exc


def iter_metadata_files(
    base_dir: Path,
    extension: str = METADATA_EXTENSION,
    list_entries: Optional[EntryLister] = None,
) -> Iterator[Path]:
    """Yield metadata files below ``base_dir`` in depth-first pre-order.

    Subdirectories are descended into as soon as they are listed, before the
    remaining siblings. Symlinked directories are not followed.
    """
    lister = list_entries or scan_entries
    base_dir = Path(base_dir)
    try:
        entries = lister(base_dir)
    except OSError as exc:
        raise DirectoryReadError("cannot list directory", base_dir) from exc

    for entry in entries:
        child = Path(entry.path)
        if _is_dir(entry):
            yield from iter_metadata_files(child, extension, lister)
        elif child.suffix == extension and _is_file(entry):
            yield child


def gather_guids(
    base_dir: Path,
    collection: GuidCollection,
    extension: str = METADATA_EXTENSION,
    list_entries: Optional[EntryLister] = None,
) -> GuidCollection:
    for path in iter_metadata_files(base_dir, extension, list_entries):
        logger.debug("check: %s", path)
        collection.insert(read_guid(path))
    return collection
