"""Fonts and layout settings for PDF generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

DEFAULT_FONT_NAME = "Times-Roman"

WidthFn = Callable[[str, float], float]


@dataclass(slots=True)
class PageSettings:
    """Geometry and typography constants used during layout.

    Example:
        >>> settings = PageSettings()
        >>> settings.text_width > 0
        True
    """

    page_width: float = A4[0]
    page_height: float = A4[1]
    margin: float = 100.0
    body_font_size: float = 14.0
    body_leading: float = 20.0
    title_font_size: float = 18.0
    title_leading: float = 24.0
    paragraph_break_height: float = 10.0
    paragraph_indent: float = 18.0
    text_color: colors.Color = colors.black
    page_number_font_size: float = 10.0
    page_number_opacity: float = 0.8
    page_number_rule_pad: float = 10.0
    page_number_rule_height: float = 0.5
    page_number_rule_gap: float = 5.0

    @property
    def text_width(self) -> float:
        """Return the width of the text column.

        Returns:
            Width in points.
        """

        return self.page_width - 2 * self.margin

    @property
    def top_y(self) -> float:
        """Return the baseline of the first line on a page."""

        return self.page_height - self.margin

    @property
    def text_height(self) -> float:
        """Return the vertical space available for text on a fresh page."""

        return self.top_y - self.margin

    @property
    def page_number_y(self) -> float:
        """Return the baseline used for page numbers."""

        return self.margin / 1.25


class FontMetrics:
    """Width measurements for a registered font.

    Example:
        >>> metrics = FontMetrics("Times-Roman")
        >>> metrics.width_of("", 12)
        0.0
    """

    def __init__(self, font_name: str = DEFAULT_FONT_NAME) -> None:
        self.font_name = font_name

    def width_of(self, text: str, size: float) -> float:
        """Return the rendered width of ``text`` at ``size`` points."""

        return float(pdfmetrics.stringWidth(text, self.font_name, size))

    def __call__(self, text: str, size: float) -> float:
        return self.width_of(text, size)


def register_font(font_path: Path | None = None) -> str:
    """Register a TrueType/OpenType font and return its name.

    Args:
        font_path: Font file to embed; the built-in Times-Roman face is used
            when omitted.
    Returns:
        The registered font name.
    Raises:
        FileNotFoundError: When ``font_path`` does not exist.
        reportlab.pdfbase.ttfonts.TTFError: When the file is not a usable font.

    Example:
        >>> register_font()
        'Times-Roman'
    """

    if font_path is None:
        return DEFAULT_FONT_NAME
    path = Path(font_path)
    if not path.exists():
        raise FileNotFoundError(f"Font file not found: {path}")
    name = path.stem
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, str(path)))
    return name
