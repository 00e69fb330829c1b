from pathlib import Path

import fitz
import pytest
from PIL import Image


def _make_pdf(path: Path, pages) -> Path:
    """Write a PDF with one page per ``(width, height, rectangles)`` entry."""
    doc = fitz.open()
    for width, height, rectangles in pages:
        page = doc.new_page(width=width, height=height)
        for rect in rectangles:
            page.draw_rect(fitz.Rect(*rect), color=(0, 0, 0), fill=(0, 0, 0))
    doc.save(str(path))
    doc.close()
    return path


def _make_png(path: Path, size=(10, 10), black=()) -> Path:
    img = Image.new("RGBA", size, (255, 255, 255, 255))
    for xy in black:
        img.putpixel(xy, (0, 0, 0, 255))
    img.save(path)
    return path


@pytest.fixture
def make_pdf():
    return _make_pdf


@pytest.fixture
def make_png():
    return _make_png
