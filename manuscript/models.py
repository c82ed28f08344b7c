"""
Typed containers for manuscript paragraphs, wrapped lines, and placements.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(slots=True, frozen=True)
class ChapterHeading:
    """A recognised ``CHAPTER <n>. <title>.`` paragraph.

    Example:
        >>> ChapterHeading(number=1, title="THE BEGINNING").text
        'CHAPTER 1. THE BEGINNING.'
    """

    number: int
    title: str

    @property
    def text(self) -> str:
        """Return the heading as it appears on the page."""
        return f"CHAPTER {self.number}. {self.title}."


@dataclass(slots=True, frozen=True)
class BodyText:
    """An ordinary paragraph of running text."""

    text: str


@dataclass(slots=True, frozen=True)
class BlankLine:
    """A blank separator between paragraphs."""


Paragraph = Union[ChapterHeading, BodyText, BlankLine]


@dataclass(slots=True)
class TextLine:
    """A wrapped line of words ready for placement.

    Attributes:
        text: Space-joined words of the line.
        first_of_paragraph: True for the opening line of its paragraph.
        last_of_paragraph: True for the closing line of its paragraph.
        heading: The chapter heading this line belongs to, if any.
    """

    text: str
    first_of_paragraph: bool
    last_of_paragraph: bool
    heading: ChapterHeading | None = None

    @property
    def words(self) -> List[str]:
        """Return the line's words in order."""
        return self.text.split()


@dataclass(slots=True, frozen=True)
class ParagraphBreak:
    """Zero-width marker left in the line stream by a blank source line."""


LineItem = Union[TextLine, ParagraphBreak]


@dataclass(slots=True, frozen=True)
class WordPlacement:
    """A single word and the x-position it is drawn at."""

    word: str
    x: float


@dataclass(slots=True)
class PlacedLine:
    """Where one line of the stream ended up.

    Attributes:
        index: Position of the line in the line stream.
        page_number: 1-based page the line was placed on.
        text: Line text.
        y: Baseline position in points from the page bottom.
        font_size: Size the line was drawn at.
        words: Per-word placements, in reading order.
    """

    index: int
    page_number: int
    text: str
    y: float
    font_size: float
    words: List[WordPlacement] = field(default_factory=list)
