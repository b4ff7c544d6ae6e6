"""Extract an archive, walk the result, and report keyword matches."""
from __future__ import annotations

import logging
import os
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from .errors import NotFoundError, TraversalError
from .extractor import ArchiveExtractor, detect_format, extractor_for
from .reader import is_text_file
from .scanner import scan_file
from .walker import walk_tree

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


@dataclass
class ScanSummary:
    archive: Path
    extracted_dir: Path
    scanned_files: int = 0
    skipped_files: int = 0
    total_matches: int = 0


@contextmanager
def extracted_tree(extractor: ArchiveExtractor, archive: Path) -> Iterator[Path]:
    """Extract ``archive`` and remove the extracted tree when the block exits."""

    destination = extractor.extract(archive)
    try:
        yield destination
    finally:
        shutil.rmtree(destination, ignore_errors=True)
        if destination.exists():
            logger.warning("Could not fully remove extracted directory %s", destination)
        else:
            logger.debug("Removed extracted directory %s", destination)


def run(archive_path: os.PathLike | str, sink: Sink = print) -> ScanSummary:
    """Scan every ``.log``/``.txt`` file inside ``archive_path``.

    The informational line and each match are passed to ``sink`` as they are
    produced. Failures raise a :class:`PipelineError` subclass; the temporary
    extraction directory is removed on every exit path.
    """

    archive = Path(archive_path)
    extractor = extractor_for(detect_format(archive))

    with extracted_tree(extractor, archive) as destination:
        sink(f"Extracted directory: {destination}")
        summary = ScanSummary(archive=archive, extracted_dir=destination)

        if not destination.is_dir():
            raise NotFoundError(f"Destination directory does not exist: {destination}")

        def visit(path: Path, is_dir: bool) -> None:
            if is_dir:
                return
            if not path.is_file() or not is_text_file(path):
                summary.skipped_files += 1
                return
            summary.scanned_files += 1
            for match in scan_file(path):
                summary.total_matches += 1
                sink(match.format())

        try:
            walk_tree(destination, visit)
        except Exception as exc:
            raise TraversalError(str(exc)) from exc

    logger.info(
        "Scanned %d files (%d skipped) from %s, %d matches",
        summary.scanned_files,
        summary.skipped_files,
        archive,
        summary.total_matches,
    )
    return summary
