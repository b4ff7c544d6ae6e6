"""Errors raised while extracting and scanning an archive."""
from __future__ import annotations


class PipelineError(Exception):
    """Base class for every failure surfaced by the scan pipeline."""

    stage = "Pipeline error"


class UnsupportedFormatError(PipelineError):
    """Raised when the archive extension is neither ``.zip`` nor ``.tar``."""

    stage = "Unsupported format"


class ExtractionError(PipelineError):
    """Raised when an archive cannot be opened, decoded, or materialized safely."""

    stage = "Extraction error"


class NotFoundError(PipelineError):
    stage = "Missing directory"


class ReadError(PipelineError):
    stage = "Read error"


class TraversalError(PipelineError):
    """Wraps any failure that aborted the walk over the extracted tree."""

    stage = "Traversal error"
