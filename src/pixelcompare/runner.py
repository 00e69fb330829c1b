"""Comparison run: prepare, render, pair and diff.

Everything runs sequentially.  Failures are contained to the smallest unit
they affect: a document that cannot be rendered only loses its own pages and
a page pair that cannot be diffed is skipped.  Only workspace errors stop the
run because nothing downstream can work without the directories.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .config import RunConfig
from .diff import DiffResult, PixelDiffEngine
from .errors import DiffError, RenderError, WorkspaceError
from .matching import Correspondence, build_correspondence, list_page_images
from .render import FIRST, SECOND, Renderer, render_pdf_pages
from .workspace import clear_directory, prepare_workspace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairFailure:
    page_suffix: str
    first: str
    second: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "suffix": self.page_suffix,
            "first": self.first,
            "second": self.second,
            "error": self.message,
        }


@dataclass
class RunReport:
    """Outcome of one comparison run."""

    first_pdf: Path
    second_pdf: Path
    config: RunConfig
    results: List[DiffResult] = field(default_factory=list)
    unmatched_first: List[str] = field(default_factory=list)
    unmatched_second: List[str] = field(default_factory=list)
    failures: List[PairFailure] = field(default_factory=list)
    render_errors: Dict[str, str] = field(default_factory=dict)
    cleanup_errors: List[str] = field(default_factory=list)

    @property
    def differing_pairs(self) -> List[DiffResult]:
        return [result for result in self.results if not result.identical]

    @property
    def has_differences(self) -> bool:
        return bool(self.differing_pairs)

    @property
    def is_clean(self) -> bool:
        return not (
            self.has_differences
            or self.unmatched_first
            or self.unmatched_second
            or self.failures
            or self.render_errors
            or self.cleanup_errors
        )

    @property
    def total_differing_pixels(self) -> int:
        return sum(result.differing_pixels for result in self.results)


def _render(
    renderer: Renderer,
    pdf_path: Path,
    output_dir: Path,
    source: str,
    dpi: int,
    report: RunReport,
) -> None:
    try:
        renderer(pdf_path, output_dir, source=source, dpi=dpi)
    except RenderError as exc:
        logger.error("%s", exc)
        report.render_errors[source] = str(exc)


def _diff_pairs(
    correspondence: Correspondence,
    config: RunConfig,
    engine: PixelDiffEngine,
    report: RunReport,
) -> None:
    for pair in correspondence.pairs:
        first_path = config.first_dir / pair.first
        second_path = config.second_dir / pair.second
        try:
            result = engine.compare(
                first_path, second_path, config.result_dir, page_suffix=pair.page_suffix
            )
        except DiffError as exc:
            logger.error("Could not compare %s with %s: %s", pair.first, pair.second, exc)
            report.failures.append(
                PairFailure(pair.page_suffix, pair.first, pair.second, str(exc))
            )
            continue
        report.results.append(result)
        logger.info(
            "Compared %s with %s: %d pixels differ",
            pair.first,
            pair.second,
            result.differing_pixels,
        )


def run(
    first_pdf: str | Path,
    second_pdf: str | Path,
    config: Optional[RunConfig] = None,
    *,
    renderer: Renderer = render_pdf_pages,
    engine: Optional[PixelDiffEngine] = None,
) -> RunReport:
    """Compare ``first_pdf`` with ``second_pdf`` page by page.

    Raises :class:`~pixelcompare.errors.WorkspaceError` when the working
    directories collide or cannot be prepared.  Every other failure is logged
    and recorded in the returned :class:`RunReport`.
    """

    config = config or RunConfig()
    engine = engine or PixelDiffEngine(threshold=config.threshold, prefix=config.diff_prefix)
    report = RunReport(first_pdf=Path(first_pdf), second_pdf=Path(second_pdf), config=config)

    prepare_workspace(config)

    _render(renderer, report.first_pdf, config.first_dir, FIRST, config.dpi, report)
    _render(renderer, report.second_pdf, config.second_dir, SECOND, config.dpi, report)

    files_first = list_page_images(config.first_dir)
    files_second = list_page_images(config.second_dir)
    logger.info("Files in first directory: %s", files_first)
    logger.info("Files in second directory: %s", files_second)

    correspondence = build_correspondence(files_first, files_second)
    _diff_pairs(correspondence, config, engine, report)

    report.unmatched_first = list(correspondence.unmatched_first)
    report.unmatched_second = list(correspondence.unmatched_second)
    for name in report.unmatched_first:
        logger.warning("File %s does not have a corresponding file in the second directory", name)
    for name in report.unmatched_second:
        logger.warning("File %s does not have a corresponding file in the first directory", name)

    if not config.keep_pages:
        for directory in (config.first_dir, config.second_dir):
            try:
                removed = clear_directory(directory)
            except WorkspaceError as exc:
                logger.error("Could not discard rendered pages: %s", exc)
                report.cleanup_errors.append(str(exc))
                continue
            logger.info("Discarded %d rendered pages in %s", removed, directory)

    return report
