"""Extract log archives and scan them for errors and timeouts."""

from .errors import (
    ExtractionError,
    NotFoundError,
    PipelineError,
    ReadError,
    TraversalError,
    UnsupportedFormatError,
)
from .extractor import ArchiveExtractor, TarExtractor, ZipExtractor, detect_format, extract
from .pipeline import ScanSummary, run
from .scanner import KEYWORDS, ScanMatch, scan_file
from .walker import walk_tree

__all__ = [
    "ArchiveExtractor",
    "ZipExtractor",
    "TarExtractor",
    "detect_format",
    "extract",
    "walk_tree",
    "scan_file",
    "ScanMatch",
    "KEYWORDS",
    "run",
    "ScanSummary",
    "PipelineError",
    "UnsupportedFormatError",
    "ExtractionError",
    "NotFoundError",
    "ReadError",
    "TraversalError",
]
