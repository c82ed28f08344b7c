from __future__ import annotations

from typing import List

from manuscript.cleaning import normalize_manuscript
from manuscript.models import BlankLine, BodyText, ChapterHeading, ParagraphBreak, TextLine
from manuscript.pdf.pdf_lines import fix_orphans, wrap_paragraph, wrap_paragraphs, wrap_words
from manuscript.pdf.pdf_settings import PageSettings

from conftest import fixed_width


def char_width(text: str, size: float) -> float:
    return float(len(text))


def _texts(lines) -> List[str]:
    return [line.text for line in lines]


def test_wrap_words_greedy_fill() -> None:
    lines = wrap_words(
        "aa bb cc dd ee".split(), width_of=char_width, font_size=1, max_width=8
    )
    assert _texts(lines) == ["aa bb cc", "dd ee"]
    assert [line.first_of_paragraph for line in lines] == [True, False]
    assert [line.last_of_paragraph for line in lines] == [False, True]


def test_wrap_words_exact_fit_is_accepted() -> None:
    lines = wrap_words(["abc", "def"], width_of=char_width, font_size=1, max_width=7)
    assert _texts(lines) == ["abc def"]


def test_wrap_words_first_line_indent_reduces_room() -> None:
    lines = wrap_words(
        "aa bb cc dd".split(),
        width_of=char_width,
        font_size=1,
        max_width=8,
        first_line_indent=4,
    )
    assert _texts(lines) == ["aa", "bb cc dd"]


def test_wrap_words_overlong_word_gets_own_line() -> None:
    lines = wrap_words(
        ["a", "incomprehensibilities", "b"], width_of=char_width, font_size=1, max_width=5
    )
    assert _texts(lines) == ["a", "incomprehensibilities", "b"]


def test_wrap_words_without_words() -> None:
    assert wrap_words([], width_of=char_width, font_size=1, max_width=10) == []


def test_single_word_paragraph_is_first_and_last() -> None:
    (line,) = wrap_words(["Hello."], width_of=char_width, font_size=1, max_width=10)
    assert line.first_of_paragraph
    assert line.last_of_paragraph


def test_wrap_words_measures_at_font_size() -> None:
    lines = wrap_words(["ab", "cd"], width_of=fixed_width, font_size=10, max_width=20)
    assert _texts(lines) == ["ab", "cd"]


def test_fix_orphans_pulls_previous_word_down() -> None:
    lines = wrap_words("aa bb cc dd".split(), width_of=char_width, font_size=1, max_width=8)
    assert _texts(lines) == ["aa bb cc", "dd"]
    before = len(lines[0].words)

    fix_orphans(lines)

    assert _texts(lines) == ["aa bb", "cc dd"]
    assert len(lines[0].words) == before - 1
    assert len(lines[1].words) >= 2


def test_fix_orphans_skips_single_line_paragraphs() -> None:
    lines = [
        TextLine("one two three", True, True),
        TextLine("alone", True, True),
    ]
    fix_orphans(lines)
    assert _texts(lines) == ["one two three", "alone"]


def test_fix_orphans_needs_a_word_to_spare() -> None:
    lines = [TextLine("incomprehensibilities", True, False), TextLine("end", False, True)]
    fix_orphans(lines)
    assert _texts(lines) == ["incomprehensibilities", "end"]


def test_fix_orphans_ignores_paragraph_breaks() -> None:
    lines = [TextLine("one two", True, True), ParagraphBreak(), TextLine("three", True, True)]
    fix_orphans(lines)
    assert _texts(lines[:1]) == ["one two"]
    assert lines[2].text == "three"


def test_wrap_paragraph_blank_line_becomes_break() -> None:
    assert wrap_paragraph(BlankLine(), width_of=fixed_width, settings=PageSettings()) == [
        ParagraphBreak()
    ]


def test_wrap_paragraph_heading_uses_title_size_without_indent() -> None:
    settings = PageSettings(page_width=300, page_height=300, margin=50, title_font_size=20)
    heading = ChapterHeading(number=1, title="THE LONG AND WINDING ROAD")
    lines = wrap_paragraph(heading, width_of=fixed_width, settings=settings)
    # 10 points per character at title size leaves 20 characters per line.
    assert all(fixed_width(line.text, 20) <= settings.text_width for line in lines)
    assert _texts(lines) == ["CHAPTER 1. THE LONG", "AND WINDING ROAD."]
    assert all(line.heading is heading for line in lines)


def test_wrap_paragraph_body_text_has_no_heading() -> None:
    lines = wrap_paragraph(BodyText("plain words"), width_of=fixed_width, settings=PageSettings())
    assert [line.heading for line in lines] == [None]


class _Counter:
    def __init__(self) -> None:
        self.count = 0

    def update(self, n: int | float = 1) -> None:
        self.count += n


def test_wrap_paragraphs_preserves_order_and_reports_progress() -> None:
    settings = PageSettings(page_width=300, page_height=300, margin=50, body_font_size=10)
    paragraphs = normalize_manuscript(
        "CHAPTER 1. first.\n\nalpha beta gamma delta epsilon zeta eta theta iota kappa\n\nomega"
    )
    progress = _Counter()
    lines = wrap_paragraphs(paragraphs, width_of=fixed_width, settings=settings, progress=progress)

    assert progress.count == len(paragraphs)
    assert isinstance(lines[1], ParagraphBreak)
    words = [word for line in lines if isinstance(line, TextLine) for word in line.words]
    assert words == (
        "CHAPTER 1. FIRST. alpha beta gamma delta epsilon zeta eta theta iota kappa omega"
    ).split()


def test_orphan_invariant_over_many_widths() -> None:
    text = (
        "It was the best of times, it was the worst of times, it was the age of "
        "wisdom, it was the age of foolishness, it was the epoch of belief."
    )
    for page_width in range(160, 420, 7):
        settings = PageSettings(page_width=page_width, page_height=400, margin=20, body_font_size=10)
        lines = wrap_paragraphs([BodyText(text)], width_of=fixed_width, settings=settings)
        if len(lines) < 2:
            continue
        assert len(lines[-1].words) >= 2, page_width
