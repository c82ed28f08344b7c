"""Page-number stamps drawn once every page exists."""

from __future__ import annotations

from .pdf_document import LayoutDocument, RuleMark, TextRun
from .pdf_settings import WidthFn


def add_page_numbers(*, document: LayoutDocument, width_of: WidthFn) -> int:
    """Stamp a centred page number and a short rule above it on every page.

    Stamps live in each page's overlay, so running this again replaces them
    instead of drawing a second set. Page content is never touched.

    Args:
        document: Finished document.
        width_of: Width function ``(text, size) -> points``.
    Returns:
        Number of pages stamped.
    """

    settings = document.settings
    size = settings.page_number_font_size
    y = settings.page_number_y
    for position, page in enumerate(document.pages, start=1):
        label = str(position)
        label_width = width_of(label, size)
        x = settings.page_width / 2 - label_width / 2
        page.overlay = [
            TextRun(
                text=label,
                x=x,
                y=y,
                size=size,
                color=settings.text_color,
                opacity=settings.page_number_opacity,
            ),
            RuleMark(
                x=x - settings.page_number_rule_pad / 2,
                y=y + size + settings.page_number_rule_gap,
                width=label_width + settings.page_number_rule_pad,
                height=settings.page_number_rule_height,
                color=settings.text_color,
                opacity=settings.page_number_opacity,
            ),
        ]
    return len(document.pages)
