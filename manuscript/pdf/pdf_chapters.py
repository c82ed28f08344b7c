"""Locate chapter openings in a finished line stream."""

from __future__ import annotations

from typing import Sequence, Set

from ..models import LineItem, TextLine


def find_chapter_starts(lines: Sequence[LineItem]) -> Set[int]:
    """Return indices of lines that open a chapter.

    Indices are taken from the line stream rather than the paragraph list
    because blank-line markers shift positions.

    Example:
        >>> from manuscript.models import ChapterHeading
        >>> heading = ChapterHeading(number=1, title="GO")
        >>> find_chapter_starts([TextLine("intro", True, True), TextLine(heading.text, True, True, heading)])
        {1}
    """

    return {
        idx
        for idx, line in enumerate(lines)
        if isinstance(line, TextLine)
        and line.heading is not None
        and line.first_of_paragraph
    }


def is_chapter_title(line: LineItem, index: int, chapter_starts: Set[int]) -> bool:
    """Return True when ``line`` is drawn as a chapter title.

    A heading long enough to wrap is drawn at title size on every line.
    """

    if not isinstance(line, TextLine) or line.heading is None:
        return False
    return index in chapter_starts or not line.first_of_paragraph
