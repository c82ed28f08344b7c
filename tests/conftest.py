from __future__ import annotations

from typing import List

import pytest

from manuscript.models import LineItem, ParagraphBreak, TextLine
from manuscript.pdf.pdf_settings import PageSettings


def fixed_width(text: str, size: float) -> float:
    """Every character advances half the font size."""
    return len(text) * size * 0.5


def paragraph_lines(count: int, prefix: str = "line") -> List[LineItem]:
    return [
        TextLine(
            text=f"{prefix} number {idx}",
            first_of_paragraph=idx == 0,
            last_of_paragraph=idx == count - 1,
        )
        for idx in range(count)
    ]


def single_line_paragraphs(count: int, prefix: str = "para") -> List[LineItem]:
    lines: List[LineItem] = []
    for idx in range(count):
        lines.extend(paragraph_lines(1, prefix=f"{prefix}{idx}"))
    return lines


@pytest.fixture
def width_of():
    return fixed_width


@pytest.fixture
def small_settings() -> PageSettings:
    # 200pt column width and 200pt text height: ten body lines per page.
    return PageSettings(page_width=300, page_height=300, margin=50, body_font_size=10)


@pytest.fixture
def paragraph_break() -> ParagraphBreak:
    return ParagraphBreak()
