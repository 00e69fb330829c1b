"""Pixel difference between two rendered pages.

The comparison itself is delegated to :func:`pixelmatch.contrib.PIL.pixelmatch`.
This module only guards its contract (both images must have the same pixel
size) and takes care of loading the inputs and writing the diff image.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from PIL import Image
from pixelmatch.contrib.PIL import pixelmatch

from .config import DEFAULT_THRESHOLD, DIFF_PREFIX
from .errors import DiffError, DimensionMismatchError

logger = logging.getLogger(__name__)

DIFF_COLOR: Tuple[int, int, int] = (255, 0, 0)


@dataclass(frozen=True)
class DiffResult:
    page_suffix: str
    first_image: Path
    second_image: Path
    diff_image: Path
    differing_pixels: int
    width: int
    height: int

    @property
    def identical(self) -> bool:
        return self.differing_pixels == 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "suffix": self.page_suffix,
            "first": self.first_image.name,
            "second": self.second_image.name,
            "diff_image": str(self.diff_image),
            "differing_pixels": self.differing_pixels,
            "width": self.width,
            "height": self.height,
        }


def _load_rgba(path: Path) -> Image.Image:
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise DiffError(f"cannot read {path}: {exc}") from exc


class PixelDiffEngine:
    """Compare page images and write ``diff-<first name>`` into a directory."""

    def __init__(self, threshold: float = DEFAULT_THRESHOLD, prefix: str = DIFF_PREFIX) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("threshold must be between 0 and 1")
        self.threshold = threshold
        self.prefix = prefix

    def diff_name(self, first_image: str | Path) -> str:
        return f"{self.prefix}{Path(first_image).name}"

    def compare(
        self,
        first_image: str | Path,
        second_image: str | Path,
        output_dir: str | Path,
        *,
        page_suffix: str = "",
    ) -> DiffResult:
        first_image = Path(first_image)
        second_image = Path(second_image)
        img1 = _load_rgba(first_image)
        img2 = _load_rgba(second_image)
        if img1.size != img2.size:
            raise DimensionMismatchError(first_image, second_image, img1.size, img2.size)

        width, height = img1.size
        output = Image.new("RGBA", (width, height))
        count = pixelmatch(img1, img2, output, threshold=self.threshold, diff_color=DIFF_COLOR)

        target = Path(output_dir) / self.diff_name(first_image)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            output.save(target)
        except OSError as exc:
            raise DiffError(f"cannot write {target}: {exc}") from exc

        logger.debug("Wrote %s (%d differing pixels)", target, count)
        return DiffResult(
            page_suffix=page_suffix,
            first_image=first_image,
            second_image=second_image,
            diff_image=target,
            differing_pixels=int(count),
            width=width,
            height=height,
        )


def compare_images(
    first_image: str | Path,
    second_image: str | Path,
    output_dir: str | Path,
    *,
    threshold: float = DEFAULT_THRESHOLD,
) -> DiffResult:
    """Shortcut for a one-off comparison with a throwaway engine."""

    engine = PixelDiffEngine(threshold=threshold)
    return engine.compare(first_image, second_image, output_dir)
