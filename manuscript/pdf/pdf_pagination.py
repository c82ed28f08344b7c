"""Pagination of a wrapped line stream onto pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Set

from ..models import LineItem, PlacedLine, TextLine
from .pdf_chapters import find_chapter_starts, is_chapter_title
from .pdf_constants import (
    DEBUG_PAGINATION,
    EPSILON,
    SHORT_PARAGRAPH_LINES,
    WIDOW_GUARD_LINES,
)
from .pdf_document import LayoutDocument, LayoutPage
from .pdf_justify import render_line
from .pdf_settings import PageSettings, WidthFn


@dataclass(slots=True)
class PaginationState:
    """Mutable cursor and paragraph tracking for one pagination pass.

    Args:
        y: Baseline of the next line on the current page.
        remaining: Vertical space left above the bottom margin.
        page: Page currently being filled, or None before any content.
        colon_pending: Whether a colon-introduced block is still open.
        colon_line_index: Index of the line that opened the block.
        last_paragraph_end: Index of the most recent paragraph-closing line.
        lines_left_in_paragraph: Lines of the current paragraph not yet placed.
    """

    y: float
    remaining: float
    page: LayoutPage | None = None
    colon_pending: bool = False
    colon_line_index: int = -1
    last_paragraph_end: int = -1
    lines_left_in_paragraph: int = 0

    def advance(self, amount: float) -> None:
        """Move the cursor down by ``amount`` points."""

        self.y -= amount
        self.remaining -= amount

    def has_room(self, needed: float) -> bool:
        """Return True when ``needed`` points still fit; equality fits."""

        return self.remaining + EPSILON >= needed

    def open_colon_block(self, index: int) -> None:
        """Mark the line at ``index`` as opening a colon block."""

        self.colon_pending = True
        self.colon_line_index = index

    def colon_block_closed(self, *, at_break: bool = False) -> bool:
        """Return True once the colon line's paragraph has closed.

        After a drawn line the paragraph must close past the colon line. A
        break follows its paragraph's closing line, so there a colon line
        that closed its own paragraph also counts.
        """

        if not self.colon_pending:
            return False
        if at_break:
            return self.last_paragraph_end >= self.colon_line_index
        return self.last_paragraph_end > self.colon_line_index

    def clear_colon_block(self) -> None:
        """Forget any pending colon block."""

        self.colon_pending = False
        self.colon_line_index = -1


def _debug(*, msg: str) -> None:
    """Log pagination debug output when enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_PAGINATION:
        print(msg)


def _lines_in_paragraph(lines: Sequence[LineItem], start: int) -> int:
    """Count lines from ``start`` through the paragraph's closing line."""

    for idx in range(start, len(lines)):
        line = lines[idx]
        if isinstance(line, TextLine) and line.last_of_paragraph:
            return idx - start + 1
    return 0


class Paginator:
    """Walk a line stream, break pages, and draw every line.

    Rules applied before each text line, in order: a chapter opening starts
    a new page; a paragraph of at most ``SHORT_PARAGRAPH_LINES`` lines that
    does not fit moves whole to the next page; a longer paragraph does not
    open with less than ``WIDOW_GUARD_LINES`` lines of room; and no line is
    placed without a full line of room. A fresh page is never broken again.

    Example:
        >>> from manuscript.pdf.pdf_settings import PageSettings
        >>> paginator = Paginator(settings=PageSettings(), width_of=lambda t, s: len(t) * s / 2)
        >>> paginator.paginate([TextLine("Hello there.", True, True)]).page_count
        1
    """

    def __init__(self, *, settings: PageSettings, width_of: WidthFn) -> None:
        if settings.text_width <= 0 or settings.text_height <= 0:
            raise ValueError("Page margins leave no room for text")
        self.settings = settings
        self.width_of = width_of

    def paginate(
        self,
        lines: Sequence[LineItem],
        chapter_starts: Set[int] | None = None,
        document: LayoutDocument | None = None,
    ) -> LayoutDocument:
        """Lay out ``lines`` onto pages of ``document``.

        Args:
            lines: Finished line stream.
            chapter_starts: Chapter-opening indices; computed when omitted.
            document: Document to add pages to; a new one when omitted.
        Returns:
            The document holding every placed line.
        """

        document = document or LayoutDocument(settings=self.settings)
        starts = find_chapter_starts(lines) if chapter_starts is None else chapter_starts
        state = PaginationState(y=self.settings.top_y, remaining=self.settings.text_height)
        for idx, line in enumerate(lines):
            if isinstance(line, TextLine):
                self._place_text_line(
                    document=document,
                    state=state,
                    lines=lines,
                    line=line,
                    index=idx,
                    chapter_starts=starts,
                )
            else:
                self._place_break(state=state, index=idx)
        return document

    def _new_page(
        self, *, document: LayoutDocument, state: PaginationState, reason: str, index: int
    ) -> None:
        """Move the cursor to the top of a fresh page."""

        if state.page is None or not state.page.is_empty:
            state.page = document.add_page()
            _debug(msg=f"page {state.page.number}: opened at line {index} ({reason})")
        state.y = self.settings.top_y
        state.remaining = self.settings.text_height

    def _place_break(self, *, state: PaginationState, index: int) -> None:
        """Consume paragraph-break spacing.

        A break that lands where no further line fits ends the page; the next
        page opens with the next text line, so a break never opens a page.
        The break spacing and the close-out of a pending colon block are both
        absorbed by the page end, and the colon block does not carry over.
        """

        if state.page is None:
            return
        leading = self.settings.body_leading
        if not state.has_room(leading):
            _debug(msg=f"page {state.page.number}: closed at break {index} (minimum space)")
            state.page = None
            state.y = self.settings.top_y
            state.remaining = self.settings.text_height
            state.clear_colon_block()
            return
        state.advance(self.settings.paragraph_break_height)
        if state.colon_block_closed(at_break=True):
            state.advance(leading)
            state.clear_colon_block()

    def _place_text_line(
        self,
        *,
        document: LayoutDocument,
        state: PaginationState,
        lines: Sequence[LineItem],
        line: TextLine,
        index: int,
        chapter_starts: Set[int],
    ) -> PlacedLine:
        leading = self.settings.body_leading
        title = is_chapter_title(line, index, chapter_starts)

        if index in chapter_starts:
            self._new_page(document=document, state=state, reason="chapter", index=index)
        if line.first_of_paragraph:
            state.lines_left_in_paragraph = _lines_in_paragraph(lines, index)
            count = state.lines_left_in_paragraph
            if count <= SHORT_PARAGRAPH_LINES and not state.has_room(count * leading):
                self._new_page(document=document, state=state, reason="keep together", index=index)
            elif count > SHORT_PARAGRAPH_LINES and not state.has_room(
                WIDOW_GUARD_LINES * leading
            ):
                self._new_page(document=document, state=state, reason="widow", index=index)
        if state.page is None or not state.has_room(leading):
            self._new_page(document=document, state=state, reason="minimum space", index=index)
        assert state.page is not None

        placed = render_line(
            state.page,
            line=line,
            index=index,
            y=state.y,
            title=title,
            width_of=self.width_of,
            settings=self.settings,
        )
        state.advance(self.settings.title_leading if title else leading)
        state.lines_left_in_paragraph -= 1

        if line.last_of_paragraph:
            state.last_paragraph_end = index
        if line.text.endswith(":"):
            # A new colon block replaces a pending one; its gap is charged once.
            state.advance(leading)
            state.clear_colon_block()
            state.open_colon_block(index)
        elif state.colon_block_closed():
            state.advance(leading)
            state.clear_colon_block()
        if title:
            state.advance(self.settings.title_leading)
        return placed


def paginate(
    *,
    lines: Sequence[LineItem],
    settings: PageSettings,
    width_of: WidthFn,
    chapter_starts: Set[int] | None = None,
) -> LayoutDocument:
    """Paginate ``lines`` into a new LayoutDocument."""

    return Paginator(settings=settings, width_of=width_of).paginate(
        lines, chapter_starts=chapter_starts
    )

