"""Materialize ZIP and TAR archives into a private temporary directory."""
from __future__ import annotations

import logging
import os
import shutil
import stat
import tarfile
import tempfile
import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO, Dict, Type

from .errors import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# Extension -> format name; matched case-insensitively
ARCHIVE_FORMATS = {".zip": "zip", ".tar": "tar"}

_COPY_CHUNK_SIZE = 64 * 1024

# zipfile surfaces corrupt or unsupported members through several exception types.
_ZIP_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    RuntimeError,
    ValueError,
    OSError,
)
_TAR_ERRORS = (tarfile.TarError, EOFError, zlib.error, ValueError, OSError)


def detect_format(archive_path: os.PathLike | str) -> str:
    """Return the archive format for ``archive_path`` based on its extension only."""

    suffix = Path(archive_path).suffix.lower()
    try:
        return ARCHIVE_FORMATS[suffix]
    except KeyError:
        raise UnsupportedFormatError(
            f"Unsupported file type {suffix or '(none)'!r}. Only .zip and .tar supported."
        ) from None


def _resolve_target(root: Path, name: str) -> Path:
    target = (root / name).resolve()
    if target != root and root not in target.parents:
        raise ExtractionError(f"Unsafe archive entry path detected: {name!r}")
    return target


def _write_file(target: Path, source: BinaryIO, mode: int | None) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "wb") as handle:
        shutil.copyfileobj(source, handle, _COPY_CHUNK_SIZE)
    if mode is not None:
        os.chmod(target, mode)


class ArchiveExtractor:
    """Common contract for archive readers.

    Subclasses implement :meth:`_extract_into`, which receives the open-ready
    archive path and a freshly created destination root. The base class owns
    the temporary directory: on any failure it removes whatever was written and
    raises :class:`ExtractionError` chained to the underlying cause.
    """

    format_name = ""
    temp_prefix = "logs_extract_"
    errors: tuple = (OSError,)

    def extract(self, archive_path: os.PathLike | str) -> Path:
        archive = Path(archive_path)
        if not archive.is_file():
            raise ExtractionError(f"Archive not found: {archive}")

        destination = Path(tempfile.mkdtemp(prefix=self.temp_prefix)).resolve()
        try:
            count = self._extract_into(archive, destination)
        except self.errors as exc:
            shutil.rmtree(destination, ignore_errors=True)
            raise ExtractionError(f"Failed to extract {archive.name}: {exc}") from exc
        except BaseException:
            shutil.rmtree(destination, ignore_errors=True)
            raise

        logger.info("Extracted %d %s entries from %s into %s", count, self.format_name, archive, destination)
        return destination

    def _extract_into(self, archive: Path, destination: Path) -> int:
        raise NotImplementedError


class ZipExtractor(ArchiveExtractor):
    format_name = "zip"
    temp_prefix = "logs_unzip_"
    errors = _ZIP_ERRORS

    def _extract_into(self, archive: Path, destination: Path) -> int:
        count = 0
        with zipfile.ZipFile(archive) as bundle:
            for info in bundle.infolist():
                target = _resolve_target(destination, info.filename)
                unix_mode = info.external_attr >> 16
                if info.is_dir() or stat.S_ISDIR(unix_mode):
                    target.mkdir(parents=True, exist_ok=True)
                elif stat.S_IFMT(unix_mode) not in (0, stat.S_IFREG):
                    logger.debug("Skipping non-regular zip entry %s", info.filename)
                    continue
                else:
                    mode = stat.S_IMODE(unix_mode) if unix_mode else None
                    with bundle.open(info) as source:
                        _write_file(target, source, mode)
                count += 1
        return count


class TarExtractor(ArchiveExtractor):
    format_name = "tar"
    temp_prefix = "logs_untar_"
    errors = _TAR_ERRORS

    def _extract_into(self, archive: Path, destination: Path) -> int:
        count = 0
        # Stream mode: headers and payloads are consumed strictly in order.
        with tarfile.open(archive, mode="r|") as bundle:
            for member in bundle:
                target = _resolve_target(destination, member.name)
                if member.isdir():
                    target.mkdir(parents=True, exist_ok=True)
                elif member.isfile():
                    source = bundle.extractfile(member)
                    with source:
                        _write_file(target, source, stat.S_IMODE(member.mode))
                else:
                    logger.debug("Skipping non-regular tar member %s", member.name)
                    continue
                count += 1
        return count


EXTRACTORS: Dict[str, Type[ArchiveExtractor]] = {
    "zip": ZipExtractor,
    "tar": TarExtractor,
}


def extractor_for(fmt: str) -> ArchiveExtractor:
    try:
        return EXTRACTORS[fmt]()
    except KeyError:
        raise UnsupportedFormatError(f"No extractor registered for format {fmt!r}") from None


def extract(archive_path: os.PathLike | str, fmt: str | None = None) -> Path:
    """Extract ``archive_path`` into a new temporary directory and return it.

    ``fmt`` defaults to the format implied by the file extension.
    """

    return extractor_for(fmt or detect_format(archive_path)).extract(archive_path)
