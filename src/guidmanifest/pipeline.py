from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from guidmanifest.collect.collection import make_collection
from guidmanifest.ingest.walker import METADATA_EXTENSION, EntryLister, gather_guids
from guidmanifest.io.writer import write_manifest

logger = logging.getLogger(__name__)


def build_manifest(
    display_name: str,
    url: Optional[str],
    installed_base_directory: str | Path,
    output_file: str | Path,
    non_sorted: bool = False,
    extension: str = METADATA_EXTENSION,
    list_entries: Optional[EntryLister] = None,
) -> int:
    """Scan ``installed_base_directory`` and write the manifest to ``output_file``.

    The whole tree is gathered before the output file is touched, so any
    failure during the scan leaves the output unchanged. Returns the number
    of GUID lines written.
    """
    collection = make_collection(non_sorted)
    start = time.perf_counter()
    gather_guids(Path(installed_base_directory), collection, extension, list_entries)
    logger.info("jobs.gather: %.6fs", time.perf_counter() - start)

    count = write_manifest(output_file, display_name, url, collection)
    logger.info("jobs.print: %.6fs", time.perf_counter() - start)
    return count
