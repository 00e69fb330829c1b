"""Command line interface for pixelcompare."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from .config import (
    DEFAULT_DPI,
    DEFAULT_FIRST_DIR,
    DEFAULT_RESULT_DIR,
    DEFAULT_SECOND_DIR,
    RunConfig,
)
from .errors import WorkspaceError
from .report import write_json_report
from .runner import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelcompare",
        description="Render two PDFs to PNG pages and count differing pixels per page.",
    )
    parser.add_argument("first_pdf", help="Path to the first PDF")
    parser.add_argument("second_pdf", help="Path to the second PDF")
    parser.add_argument("--first-dir", default=DEFAULT_FIRST_DIR, help="Pages of the first PDF")
    parser.add_argument("--second-dir", default=DEFAULT_SECOND_DIR, help="Pages of the second PDF")
    parser.add_argument("--result-dir", default=DEFAULT_RESULT_DIR, help="Diff images")
    parser.add_argument("--dpi", type=int, default=DEFAULT_DPI, help="Rendering resolution")
    parser.add_argument("--json", help="Also write the run report to this JSON file")
    parser.add_argument(
        "--discard-pages",
        action="store_true",
        help="Delete the rendered pages once they have been compared",
    )
    parser.add_argument(
        "--fail-on-diff",
        action="store_true",
        help="Exit with status 1 unless every page matched and no pixel differs",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def _version() -> str:
    from . import __version__

    return __version__


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.dpi <= 0:
        parser.error("--dpi must be a positive integer")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = RunConfig(
        first_dir=Path(args.first_dir),
        second_dir=Path(args.second_dir),
        result_dir=Path(args.result_dir),
        dpi=args.dpi,
        keep_pages=not args.discard_pages,
    )

    try:
        report = run(args.first_pdf, args.second_pdf, config)
    except WorkspaceError as exc:
        logger.error("Cannot prepare workspace: %s", exc)
        return 1

    if args.json:
        write_json_report(report, args.json)

    logger.info(
        "%d page pairs compared, %d differ, %d pixels in total",
        len(report.results),
        len(report.differing_pairs),
        report.total_differing_pixels,
    )

    if args.fail_on_diff and not report.is_clean:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
