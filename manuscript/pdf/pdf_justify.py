"""Full justification of wrapped lines."""

from __future__ import annotations

from typing import List

from ..models import PlacedLine, TextLine, WordPlacement
from .pdf_document import LayoutPage
from .pdf_settings import PageSettings, WidthFn


def _indent_for(*, line: TextLine, title: bool, settings: PageSettings) -> float:
    if line.first_of_paragraph and not title:
        return settings.paragraph_indent
    return 0.0


def word_positions(
    *,
    line: TextLine,
    title: bool,
    width_of: WidthFn,
    settings: PageSettings,
) -> List[WordPlacement]:
    """Return the x-position of every word on a line.

    Closing lines keep natural spacing. Other lines spread the leftover
    column width evenly across their word gaps; a single word stays at the
    line origin.

    Args:
        line: Line to place.
        title: Whether the line is drawn as a chapter title.
        width_of: Width function ``(text, size) -> points``.
        settings: Page settings.
    Returns:
        WordPlacement entries in reading order.
    """

    indent = _indent_for(line=line, title=title, settings=settings)
    size = settings.title_font_size if title else settings.body_font_size
    words = line.words
    space = width_of(" ", size)
    extra = 0.0
    gaps = len(words) - 1
    if not line.last_of_paragraph and gaps > 0:
        available = settings.text_width - indent
        extra = (available - width_of(line.text, size)) / gaps
    placements: List[WordPlacement] = []
    x = settings.margin + indent
    for word in words:
        placements.append(WordPlacement(word=word, x=x))
        x += width_of(word, size) + space + extra
    return placements


def render_line(
    page: LayoutPage,
    *,
    line: TextLine,
    index: int,
    y: float,
    title: bool,
    width_of: WidthFn,
    settings: PageSettings,
) -> PlacedLine:
    """Draw one line on ``page`` at baseline ``y`` and record its placement.

    Closing lines are drawn as one left-aligned run; all other lines are
    drawn word by word at their justified positions.
    """

    size = settings.title_font_size if title else settings.body_font_size
    placements = word_positions(
        line=line, title=title, width_of=width_of, settings=settings
    )
    if line.last_of_paragraph and placements:
        page.draw_text(
            line.text, x=placements[0].x, y=y, size=size, color=settings.text_color
        )
    else:
        for placement in placements:
            page.draw_text(
                placement.word,
                x=placement.x,
                y=y,
                size=size,
                color=settings.text_color,
            )
    placed = PlacedLine(
        index=index,
        page_number=page.number,
        text=line.text,
        y=y,
        font_size=size,
        words=placements,
    )
    page.placed_lines.append(placed)
    return placed
