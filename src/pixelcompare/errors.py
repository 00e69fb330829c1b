"""Custom exceptions used across pixelcompare."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

__all__ = [
    "PixelCompareError",
    "WorkspaceError",
    "RenderError",
    "DiffError",
    "DimensionMismatchError",
]


class PixelCompareError(Exception):
    """Base class for every error raised by the package."""

    pass


class WorkspaceError(PixelCompareError):
    """Raised when a working directory cannot be created or cleaned."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class RenderError(PixelCompareError):
    """Raised when a PDF document cannot be rasterized."""

    def __init__(self, pdf_path: str | Path, message: str) -> None:
        self.pdf_path = Path(pdf_path)
        super().__init__(f"Error converting {self.pdf_path}: {message}")


class DiffError(PixelCompareError):
    """Raised when two page images cannot be compared."""

    pass


class DimensionMismatchError(DiffError):
    """Raised when matched page images do not share the same pixel size."""

    def __init__(
        self,
        first: str | Path,
        second: str | Path,
        first_size: Tuple[int, int],
        second_size: Tuple[int, int],
    ) -> None:
        self.first = Path(first)
        self.second = Path(second)
        self.first_size = first_size
        self.second_size = second_size
        super().__init__(
            f"{self.first.name} is {first_size[0]}x{first_size[1]} px but "
            f"{self.second.name} is {second_size[0]}x{second_size[1]} px"
        )
