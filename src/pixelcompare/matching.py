"""Pairing of rendered pages by their numeric filename suffix."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .config import IMAGE_EXTENSION

_SUFFIX_RE = re.compile(r"-(\d+)\.png\Z")


@dataclass(frozen=True)
class PagePair:
    page_suffix: str
    first: str
    second: str


@dataclass
class Correspondence:
    """Pairs found between two page sets and what was left over on each side."""

    pairs: List[PagePair] = field(default_factory=list)
    unmatched_first: List[str] = field(default_factory=list)
    unmatched_second: List[str] = field(default_factory=list)

    def suffixes(self) -> List[str]:
        return [pair.page_suffix for pair in self.pairs]


def match_suffix(filename: str) -> Optional[str]:
    """Return the digits between the last ``-`` and ``.png``, if any.

    >>> match_suffix("report-07.png")
    '07'
    >>> match_suffix("cover.png") is None
    True
    """

    match = _SUFFIX_RE.search(filename)
    return match.group(1) if match else None


def build_correspondence(
    first_files: Iterable[str], second_files: Iterable[str]
) -> Correspondence:
    """Pair ``first_files`` with ``second_files`` by identical suffix string.

    Pairs follow the order of ``first_files``.  ``"1"`` and ``"01"`` are
    different suffixes.  When the second set holds several files with the
    same suffix the first one listed is used; the others end up unmatched.
    """

    second_list = list(second_files)
    by_suffix: Dict[str, str] = {}
    for name in second_list:
        suffix = match_suffix(name)
        if suffix is not None and suffix not in by_suffix:
            by_suffix[suffix] = name

    result = Correspondence()
    consumed = set()
    for name in first_files:
        suffix = match_suffix(name)
        if suffix is not None and suffix in by_suffix:
            other = by_suffix[suffix]
            result.pairs.append(PagePair(page_suffix=suffix, first=name, second=other))
            consumed.add(other)
        else:
            result.unmatched_first.append(name)

    result.unmatched_second = [name for name in second_list if name not in consumed]
    return result


def list_page_images(directory: str | Path, extension: str = IMAGE_EXTENSION) -> List[str]:
    """Return the sorted image filenames directly inside ``directory``."""

    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and entry.name.endswith(extension)
    )
