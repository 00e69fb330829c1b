"""Page-by-page visual comparison of two PDF documents."""

from __future__ import annotations

from .config import RunConfig
from .diff import DiffResult, PixelDiffEngine, compare_images
from .errors import (
    DiffError,
    DimensionMismatchError,
    PixelCompareError,
    RenderError,
    WorkspaceError,
)
from .matching import Correspondence, PagePair, build_correspondence, match_suffix
from .render import RenderedPage, render_pdf_pages
from .runner import RunReport, run
from .workspace import prepare_directory, prepare_workspace

__all__ = [
    "run",
    "RunConfig",
    "RunReport",
    "DiffResult",
    "PixelDiffEngine",
    "compare_images",
    "Correspondence",
    "PagePair",
    "build_correspondence",
    "match_suffix",
    "RenderedPage",
    "render_pdf_pages",
    "prepare_directory",
    "prepare_workspace",
    "PixelCompareError",
    "WorkspaceError",
    "RenderError",
    "DiffError",
    "DimensionMismatchError",
]

__version__ = "0.1.0"
