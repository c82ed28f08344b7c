"""
Small, focused text cleaning utilities for manuscripts.
"""

import re
from typing import List

from .models import BlankLine, BodyText, ChapterHeading, Paragraph


_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")
_EM_DASH = "\u2014"
_EM_DASH_WITHOUT_SPACE = re.compile(_EM_DASH + r"(?!\s)")
CHAPTER_HEADING_RE = re.compile(r"^CHAPTER (\d+)\. (.+)\.$")


def normalize_whitespace(value: str) -> str:
    """Collapse unusual whitespace into single ASCII spaces.

    Example:
        >>> normalize_whitespace("a\\u00a0b\\u200bb")
        'a bb'
    """

    clean = _NON_BREAKING_SPACES.sub(" ", value)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = re.sub(r"[ \t\r\f\v]+", " ", clean)
    return clean.strip()


def split_into_paragraphs(text: str) -> List[str]:
    """Split text on line breaks; empty entries are blank separators.

    Example:
        >>> split_into_paragraphs("one\\n\\ntwo")
        ['one', '', 'two']
    """

    return text.split("\n")


def insert_space_after_dash(text: str) -> str:
    """Insert a space after every em dash that is not already followed by whitespace.

    Example:
        >>> insert_space_after_dash("war—peace")
        'war— peace'
    """

    return _EM_DASH_WITHOUT_SPACE.sub(f"{_EM_DASH} ", text)


def capitalize_chapter_title(paragraph: str) -> str:
    """Upper-case the title of a ``CHAPTER <n>. <title>.`` paragraph.

    Anything that is not a complete heading is returned unchanged.

    Example:
        >>> capitalize_chapter_title("CHAPTER 1. the beginning.")
        'CHAPTER 1. THE BEGINNING.'
        >>> capitalize_chapter_title("CHAPTER 1. the beginning")
        'CHAPTER 1. the beginning'
    """

    match = CHAPTER_HEADING_RE.match(paragraph)
    if not match:
        return paragraph
    return f"CHAPTER {match.group(1)}. {match.group(2).upper()}."


def parse_paragraph(paragraph: str) -> Paragraph:
    """Classify a normalized paragraph as heading, body text, or blank.

    Example:
        >>> parse_paragraph("CHAPTER 2. ONWARD.")
        ChapterHeading(number=2, title='ONWARD')
        >>> parse_paragraph("   ")
        BlankLine()
    """

    clean = normalize_whitespace(paragraph)
    if not clean:
        return BlankLine()
    match = CHAPTER_HEADING_RE.match(clean)
    if match:
        return ChapterHeading(number=int(match.group(1)), title=match.group(2))
    return BodyText(text=clean)


def normalize_manuscript(text: str) -> List[Paragraph]:
    """Run every normalization step in a stable order."""

    spaced = insert_space_after_dash(text)
    return [
        parse_paragraph(capitalize_chapter_title(normalize_whitespace(paragraph)))
        for paragraph in split_into_paragraphs(spaced)
    ]
