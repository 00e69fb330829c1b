"""PDF rasterization with PyMuPDF.

Pages are written as ``<stem>-<page>.png`` where ``<page>`` is the 1-based
page number zero-padded to the width of the page count, the same naming
``pdftoppm`` uses.  The page matcher relies on that numeric suffix only.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

import fitz

from .config import DEFAULT_DPI, IMAGE_EXTENSION
from .errors import RenderError

logger = logging.getLogger(__name__)

FIRST = "first"
SECOND = "second"


@dataclass(frozen=True)
class RenderedPage:
    """One rasterized page of a source document."""

    source: str
    page_suffix: str
    path: Path


Renderer = Callable[..., List[RenderedPage]]


def page_image_name(stem: str, page_number: int, page_count: int) -> str:
    width = len(str(max(page_count, 1)))
    return f"{stem}-{page_number:0{width}d}{IMAGE_EXTENSION}"


def render_pdf_pages(
    pdf_path: str | Path,
    output_dir: str | Path,
    *,
    source: str = FIRST,
    dpi: int = DEFAULT_DPI,
) -> List[RenderedPage]:
    """Render every page of ``pdf_path`` into ``output_dir``.

    Any failure while opening the document or writing a page raises
    :class:`RenderError`; pages written before the failure stay on disk.
    """

    pdf_path = Path(pdf_path)
    output_dir = Path(output_dir)
    zoom = dpi / 72.0
    mat = fitz.Matrix(zoom, zoom)
    pages: List[RenderedPage] = []

    try:
        with fitz.open(str(pdf_path)) as doc:
            page_count = len(doc)
            for index, page in enumerate(doc):
                number = index + 1
                target = output_dir / page_image_name(pdf_path.stem, number, page_count)
                pix = page.get_pixmap(matrix=mat, alpha=False)
                pix.save(str(target))
                pages.append(
                    RenderedPage(
                        source=source,
                        page_suffix=target.stem.rsplit("-", 1)[-1],
                        path=target,
                    )
                )
                logger.debug("Rendered page %d of %s to %s", number, pdf_path, target)
    except Exception as exc:
        raise RenderError(pdf_path, str(exc)) from exc

    logger.info("Successfully converted %s to PNG format in %s", pdf_path, output_dir)
    return pages
