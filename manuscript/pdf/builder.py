"""PDF generation for plain-text manuscripts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from tqdm import tqdm

from ..cleaning import normalize_manuscript
from ..models import LineItem, Paragraph
from .pdf_chapters import find_chapter_starts
from .pdf_document import LayoutDocument, write_pdf
from .pdf_lines import wrap_paragraphs
from .pdf_page_numbers import add_page_numbers
from .pdf_pagination import Paginator
from .pdf_settings import FontMetrics, PageSettings, register_font

__all__ = [
    "BuildResult",
    "PageSettings",
    "build_book",
    "layout_manuscript",
]


@dataclass(slots=True)
class _FontSetup:
    """Font artifacts needed for layout and rendering.

    Args:
        settings: Page settings.
        font_name: Registered font name.
        metrics: Width measurements for ``font_name``.
    """

    settings: PageSettings
    font_name: str
    metrics: FontMetrics


@dataclass(slots=True)
class BuildResult:
    """Summary of a finished build."""

    output_path: Path
    page_count: int
    line_count: int


def build_book(
    *,
    source: Path,
    output_path: Path,
    settings: PageSettings | None = None,
    font_path: Path | None = None,
    progress: bool = False,
) -> BuildResult:
    """Typeset the manuscript at ``source`` into a PDF.

    Args:
        source: UTF-8 plain-text manuscript.
        output_path: Destination file for the generated PDF.
        settings: Optional ``PageSettings`` override.
        font_path: Optional TrueType/OpenType font to embed.
        progress: Show a progress bar while wrapping paragraphs.
    Returns:
        BuildResult describing the written file.

    Example:
        >>> build_book(
        ...     source=Path("manuscript.txt"),
        ...     output_path=Path("output/book.pdf"),
        ... )  # doctest: +SKIP
    """

    font_setup = _prepare_fonts(settings=settings, font_path=font_path)
    text = Path(source).read_text(encoding="utf-8")
    document = layout_manuscript(
        text=text,
        settings=font_setup.settings,
        metrics=font_setup.metrics,
        progress=progress,
    )
    written = write_pdf(
        document=document, output_path=output_path, font_name=font_setup.font_name
    )
    return BuildResult(
        output_path=written,
        page_count=document.page_count,
        line_count=len(document.placed_lines()),
    )


def layout_manuscript(
    *,
    text: str,
    settings: PageSettings,
    metrics: FontMetrics,
    progress: bool = False,
) -> LayoutDocument:
    """Normalize, wrap, paginate, and number ``text``.

    Args:
        text: Manuscript text.
        settings: Page settings.
        metrics: Font width measurements.
        progress: Show a progress bar while wrapping paragraphs.
    Returns:
        LayoutDocument with content and page numbers on every page.
    """

    paragraphs = normalize_manuscript(text)
    lines = _wrap_manuscript(
        paragraphs=paragraphs, settings=settings, metrics=metrics, progress=progress
    )
    chapter_starts = find_chapter_starts(lines)
    document = Paginator(settings=settings, width_of=metrics.width_of).paginate(
        lines, chapter_starts=chapter_starts
    )
    add_page_numbers(document=document, width_of=metrics.width_of)
    return document


def _prepare_fonts(
    *, settings: PageSettings | None, font_path: Path | None
) -> _FontSetup:
    """Return configured fonts for PDF output.

    Args:
        settings: Optional PageSettings override.
        font_path: Optional font file.
    Returns:
        _FontSetup containing settings and metrics.
    """

    resolved = settings or PageSettings()
    font_name = register_font(font_path)
    return _FontSetup(
        settings=resolved, font_name=font_name, metrics=FontMetrics(font_name)
    )


def _wrap_manuscript(
    *,
    paragraphs: Sequence[Paragraph],
    settings: PageSettings,
    metrics: FontMetrics,
    progress: bool,
) -> List[LineItem]:
    """Wrap every paragraph, then correct orphans across the stream.

    Args:
        paragraphs: Normalized paragraphs.
        settings: Page settings.
        metrics: Font width measurements.
        progress: Whether to show a progress bar.
    Returns:
        Finished line stream.
    """

    bar = (
        tqdm(total=len(paragraphs), desc="Wrapping paragraphs", unit="paragraph")
        if progress and paragraphs
        else None
    )
    try:
        return wrap_paragraphs(
            paragraphs, width_of=metrics.width_of, settings=settings, progress=bar
        )
    finally:
        if bar is not None:
            bar.close()

