"""Command line interface for the archive log scanner."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .errors import PipelineError
from .pipeline import run

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def format_error(exc: PipelineError) -> str:
    return f"{exc.stage}: {exc}"


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract a .zip or .tar archive and report log lines mentioning errors or timeouts."
    )
    parser.add_argument("archive", type=Path, help="Path to a .zip or .tar archive")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging()

    try:
        run(args.archive)
    except PipelineError as exc:
        raise SystemExit(format_error(exc)) from exc


if __name__ == "__main__":
    main()
