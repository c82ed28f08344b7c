"""Greedy word wrapping and orphan correction for manuscript paragraphs."""

from __future__ import annotations

from typing import Iterable, List, Protocol, Sequence

from ..models import (
    BlankLine,
    ChapterHeading,
    LineItem,
    Paragraph,
    ParagraphBreak,
    TextLine,
)
from .pdf_settings import PageSettings, WidthFn


class _ProgressTracker(Protocol):
    """Protocol for paragraph wrapping progress updates."""

    def update(self, n: int | float = 1) -> object:
        """Advance the progress tracker by ``n``."""


def wrap_words(
    words: Sequence[str],
    *,
    width_of: WidthFn,
    font_size: float,
    max_width: float,
    first_line_indent: float = 0.0,
    heading: ChapterHeading | None = None,
) -> List[TextLine]:
    """Wrap one paragraph's words into lines no wider than ``max_width``.

    A word is appended while the tentative line still fits; the first line
    has ``first_line_indent`` less room. A word wider than the column on its
    own still gets a line to itself.

    Args:
        words: Paragraph words in reading order.
        width_of: Width function ``(text, size) -> points``.
        font_size: Size the words are measured at.
        max_width: Column width in points.
        first_line_indent: Indent applied to the opening line.
        heading: Chapter heading the paragraph represents, if any.
    Returns:
        TextLine records flagged with their paragraph position.

    Example:
        >>> lines = wrap_words(["a", "b", "c"], width_of=lambda t, s: len(t), font_size=1, max_width=3)
        >>> [line.text for line in lines]
        ['a b', 'c']
    """

    lines: List[TextLine] = []
    current = ""
    first = True
    for word in words:
        candidate = f"{current} {word}" if current else word
        limit = max_width - first_line_indent if first else max_width
        if not current or width_of(candidate, font_size) <= limit:
            current = candidate
            continue
        lines.append(
            TextLine(
                text=current,
                first_of_paragraph=first,
                last_of_paragraph=False,
                heading=heading,
            )
        )
        first = False
        current = word
    if current:
        lines.append(
            TextLine(
                text=current,
                first_of_paragraph=first,
                last_of_paragraph=True,
                heading=heading,
            )
        )
    return lines


def fix_orphans(lines: List[LineItem]) -> List[LineItem]:
    """Pull a word down onto any single-word closing line.

    Only closing lines of paragraphs with at least two lines are touched, and
    only when the previous line can spare a word. ``lines`` is updated in
    place and returned.

    Example:
        >>> lines = [TextLine("a b c", True, False), TextLine("d", False, True)]
        >>> [line.text for line in fix_orphans(lines)]
        ['a b', 'c d']
    """

    for idx in range(1, len(lines)):
        line = lines[idx]
        previous = lines[idx - 1]
        if not isinstance(line, TextLine) or not isinstance(previous, TextLine):
            continue
        if not line.last_of_paragraph or line.first_of_paragraph:
            continue
        if len(line.words) != 1:
            continue
        previous_words = previous.words
        if len(previous_words) < 2:
            continue
        moved = previous_words.pop()
        previous.text = " ".join(previous_words)
        line.text = f"{moved} {line.text}"
    return lines


def wrap_paragraph(
    paragraph: Paragraph, *, width_of: WidthFn, settings: PageSettings
) -> List[LineItem]:
    """Return the line items for a single normalized paragraph.

    Headings are measured at the chapter-title size without an indent; blank
    separators become a ParagraphBreak marker.
    """

    if isinstance(paragraph, BlankLine):
        return [ParagraphBreak()]
    if isinstance(paragraph, ChapterHeading):
        return list(
            wrap_words(
                paragraph.text.split(),
                width_of=width_of,
                font_size=settings.title_font_size,
                max_width=settings.text_width,
                heading=paragraph,
            )
        )
    return list(
        wrap_words(
            paragraph.text.split(),
            width_of=width_of,
            font_size=settings.body_font_size,
            max_width=settings.text_width,
            first_line_indent=settings.paragraph_indent,
        )
    )


def wrap_paragraphs(
    paragraphs: Iterable[Paragraph],
    *,
    width_of: WidthFn,
    settings: PageSettings,
    progress: _ProgressTracker | None = None,
) -> List[LineItem]:
    """Wrap every paragraph and run orphan correction over the whole stream.

    Args:
        paragraphs: Normalized paragraphs in document order.
        width_of: Width function ``(text, size) -> points``.
        settings: Page settings supplying sizes and the column width.
        progress: Optional progress tracker advanced once per paragraph.
    Returns:
        The finished line stream.
    """

    lines: List[LineItem] = []
    for paragraph in paragraphs:
        lines.extend(wrap_paragraph(paragraph, width_of=width_of, settings=settings))
        if progress is not None:
            progress.update(1)
    return fix_orphans(lines)
