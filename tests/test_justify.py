from __future__ import annotations

import pytest

from manuscript.models import ChapterHeading, TextLine
from manuscript.pdf.pdf_document import LayoutDocument
from manuscript.pdf.pdf_justify import render_line, word_positions

from conftest import fixed_width


def _line_extent(placements, size: float) -> float:
    last = placements[-1]
    return last.x + fixed_width(last.word, size) - placements[0].x


def test_body_line_fills_column(small_settings) -> None:
    line = TextLine("aa bb cc", False, False)
    placements = word_positions(line=line, title=False, width_of=fixed_width, settings=small_settings)

    assert [p.word for p in placements] == ["aa", "bb", "cc"]
    assert placements[0].x == pytest.approx(50)
    # 40pt of text in a 200pt column leaves 80pt extra for each of two gaps.
    assert placements[1].x == pytest.approx(145)
    assert placements[2].x == pytest.approx(240)
    assert _line_extent(placements, 10) == pytest.approx(small_settings.text_width)


def test_first_line_is_indented_and_still_fills_column(small_settings) -> None:
    line = TextLine("one two three four", True, False)
    placements = word_positions(line=line, title=False, width_of=fixed_width, settings=small_settings)

    assert placements[0].x == pytest.approx(50 + small_settings.paragraph_indent)
    assert placements[0].x + _line_extent(placements, 10) == pytest.approx(
        small_settings.margin + small_settings.text_width
    )


def test_last_line_keeps_natural_spacing(small_settings) -> None:
    document = LayoutDocument(settings=small_settings)
    page = document.add_page()
    line = TextLine("the end", False, True)

    placed = render_line(
        page, line=line, index=3, y=120, title=False, width_of=fixed_width, settings=small_settings
    )

    assert len(page.runs) == 1
    assert page.runs[0].text == "the end"
    assert page.runs[0].x == pytest.approx(50)
    assert placed.words[1].x == pytest.approx(50 + fixed_width("the ", 10))
    assert placed.page_number == 1
    assert page.placed_lines == [placed]


def test_single_word_full_line_is_not_spread(small_settings) -> None:
    line = TextLine("incomprehensibilities", False, False)
    placements = word_positions(line=line, title=False, width_of=fixed_width, settings=small_settings)
    assert [(p.word, p.x) for p in placements] == [("incomprehensibilities", 50)]


def test_one_word_paragraph_is_left_aligned_with_indent(small_settings) -> None:
    document = LayoutDocument(settings=small_settings)
    page = document.add_page()
    line = TextLine("Hello.", True, True)

    render_line(page, line=line, index=0, y=250, title=False, width_of=fixed_width, settings=small_settings)

    assert len(page.runs) == 1
    assert page.runs[0].x == pytest.approx(50 + small_settings.paragraph_indent)
    assert page.runs[0].size == small_settings.body_font_size


def test_title_uses_title_size_without_indent(small_settings) -> None:
    document = LayoutDocument(settings=small_settings)
    page = document.add_page()
    heading = ChapterHeading(number=1, title="THE BEGINNING")
    line = TextLine(heading.text, True, True, heading)

    placed = render_line(page, line=line, index=0, y=250, title=True, width_of=fixed_width, settings=small_settings)

    assert placed.font_size == small_settings.title_font_size
    assert len(page.runs) == 1
    assert page.runs[0].x == pytest.approx(50)
    assert page.runs[0].text == "CHAPTER 1. THE BEGINNING."


def test_justified_words_are_drawn_individually(small_settings) -> None:
    document = LayoutDocument(settings=small_settings)
    page = document.add_page()
    render_line(
        page,
        line=TextLine("aa bb cc", False, False),
        index=0,
        y=200,
        title=False,
        width_of=fixed_width,
        settings=small_settings,
    )
    assert [(run.text, run.x, run.y) for run in page.runs] == [
        ("aa", pytest.approx(50), 200),
        ("bb", pytest.approx(145), 200),
        ("cc", pytest.approx(240), 200),
    ]
