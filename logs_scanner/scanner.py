"""Find diagnostic keywords in text files."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator

from .reader import read_lines

KEYWORDS = frozenset({"error", "timeout"})


@dataclass(frozen=True)
class ScanMatch:
    source: str
    line_no: int
    line: str

    def format(self) -> str:
        # Extracted names may carry surrogate escapes for undecodable bytes.
        source = os.fsencode(self.source).decode("utf-8", errors="replace")
        return f"[{source}:{self.line_no}]: {self.line}"


def line_matches(line: str) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in KEYWORDS)


def scan_file(path: os.PathLike | str) -> Iterator[ScanMatch]:
    """Lazily yield one :class:`ScanMatch` per line mentioning a keyword.

    Line numbers start at 1 and count every physical line. A line holding
    several keywords still yields a single match. The generator is single
    pass; call again to rescan.
    """

    source = os.fspath(path)
    for line_no, line in enumerate(read_lines(path), start=1):
        if line_matches(line):
            yield ScanMatch(source=source, line_no=line_no, line=line)
