"""Utilities for streaming lines out of extracted text files."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .errors import ReadError

# Allowed extensions for plain text logs
TEXT_SUFFIXES = {".log", ".txt"}


def is_text_file(path: os.PathLike | str) -> bool:
    return Path(path).suffix.lower() in TEXT_SUFFIXES


def _decode_line(raw: bytes) -> str:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode("utf-8", errors="replace")


def read_lines(path: os.PathLike | str) -> Iterator[str]:
    """Yield the lines of ``path`` one at a time without their line terminators.

    The file is split on ``\\n`` only and never loaded whole, so arbitrarily
    large logs are read in bounded memory. Opening or reading failures surface
    as :class:`ReadError`.
    """

    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise ReadError(f"Cannot open {path}: {exc}") from exc

    with handle:
        try:
            for raw in handle:
                yield _decode_line(raw)
        except OSError as exc:
            raise ReadError(f"Failed reading {path}: {exc}") from exc
