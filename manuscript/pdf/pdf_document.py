"""Recorded page content and its replay onto a ReportLab canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from reportlab.lib import colors
from reportlab.pdfgen import canvas

from ..models import PlacedLine
from .pdf_settings import PageSettings


@dataclass(slots=True)
class TextRun:
    """A string drawn with its left edge at ``x`` on baseline ``y``."""

    text: str
    x: float
    y: float
    size: float
    color: colors.Color = colors.black
    opacity: float = 1.0


@dataclass(slots=True)
class RuleMark:
    """A filled rectangle, used for decorative rules."""

    x: float
    y: float
    width: float
    height: float
    color: colors.Color = colors.black
    opacity: float = 1.0


@dataclass(slots=True)
class LayoutPage:
    """One page of recorded drawing operations.

    Args:
        number: 1-based position of the page in its document.
        runs: Text runs for the page content.
        placed_lines: Lines placed on this page, in placement order.
        overlay: Stamps added after layout (page number and rule); kept apart
            from the content so restamping replaces rather than accumulates.
    """

    number: int
    runs: List[TextRun] = field(default_factory=list)
    placed_lines: List[PlacedLine] = field(default_factory=list)
    overlay: List[TextRun | RuleMark] = field(default_factory=list)

    def draw_text(
        self,
        text: str,
        *,
        x: float,
        y: float,
        size: float,
        color: colors.Color = colors.black,
        opacity: float = 1.0,
    ) -> None:
        """Record a text run on the page content."""

        self.runs.append(
            TextRun(text=text, x=x, y=y, size=size, color=color, opacity=opacity)
        )

    @property
    def is_empty(self) -> bool:
        """Return True when nothing has been placed on the page."""

        return not self.runs and not self.placed_lines


@dataclass(slots=True)
class LayoutDocument:
    """Pages in creation order, which is also page-number order."""

    settings: PageSettings
    pages: List[LayoutPage] = field(default_factory=list)

    def add_page(self) -> LayoutPage:
        """Append and return a new empty page."""

        page = LayoutPage(number=len(self.pages) + 1)
        self.pages.append(page)
        return page

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def placed_lines(self) -> List[PlacedLine]:
        """Return every placed line in page order then placement order."""

        return [line for page in self.pages for line in page.placed_lines]


def _draw_run(c: canvas.Canvas, run: TextRun, font_name: str) -> None:
    c.setFont(font_name, run.size)
    c.setFillColor(run.color)
    c.setFillAlpha(run.opacity)
    c.drawString(run.x, run.y, run.text)


def _draw_rule(c: canvas.Canvas, rule: RuleMark) -> None:
    c.setFillColor(rule.color)
    c.setFillAlpha(rule.opacity)
    c.rect(rule.x, rule.y, rule.width, rule.height, stroke=0, fill=1)


def write_pdf(
    *, document: LayoutDocument, output_path: Path, font_name: str
) -> Path:
    """Replay recorded pages onto a ReportLab canvas and save the file.

    Args:
        document: Laid-out document.
        output_path: Destination for the PDF.
        font_name: Registered font used for every text run.
    Returns:
        The path written.
    """

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    settings = document.settings
    c = canvas.Canvas(
        str(output_path), pagesize=(settings.page_width, settings.page_height)
    )
    for page in document.pages:
        c.saveState()
        for run in page.runs:
            _draw_run(c, run, font_name)
        for mark in page.overlay:
            if isinstance(mark, RuleMark):
                _draw_rule(c, mark)
            else:
                _draw_run(c, mark, font_name)
        c.restoreState()
        c.showPage()
    c.save()
    return output_path
