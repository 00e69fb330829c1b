"""Run configuration."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict

DEFAULT_FIRST_DIR = "1-firstPDF"
DEFAULT_SECOND_DIR = "2-secondPDF"
DEFAULT_RESULT_DIR = "result"
DEFAULT_DPI = 150
DEFAULT_THRESHOLD = 0.1
IMAGE_EXTENSION = ".png"
DIFF_PREFIX = "diff-"


@dataclass(frozen=True)
class RunConfig:
    """Directories and rendering parameters for one comparison run.

    Directory fields default to paths relative to the current working
    directory; use :meth:`in_directory` to anchor them somewhere else.
    """

    first_dir: Path = Path(DEFAULT_FIRST_DIR)
    second_dir: Path = Path(DEFAULT_SECOND_DIR)
    result_dir: Path = Path(DEFAULT_RESULT_DIR)
    dpi: int = DEFAULT_DPI
    threshold: float = DEFAULT_THRESHOLD
    diff_prefix: str = DIFF_PREFIX
    keep_pages: bool = True

    @classmethod
    def in_directory(cls, base: str | Path, **overrides) -> "RunConfig":
        base = Path(base)
        return cls(
            first_dir=base / DEFAULT_FIRST_DIR,
            second_dir=base / DEFAULT_SECOND_DIR,
            result_dir=base / DEFAULT_RESULT_DIR,
            **overrides,
        )

    def copy(self, **overrides) -> "RunConfig":
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, object]:
        return {
            "first_dir": str(self.first_dir),
            "second_dir": str(self.second_dir),
            "result_dir": str(self.result_dir),
            "dpi": self.dpi,
            "threshold": self.threshold,
            "diff_prefix": self.diff_prefix,
            "keep_pages": self.keep_pages,
        }
