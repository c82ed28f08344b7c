"""Shared constants for page layout and pagination."""

from __future__ import annotations

import os

EPSILON = 1e-4
# Paragraphs of at most this many lines are never split across pages.
SHORT_PARAGRAPH_LINES = 3
# A longer paragraph only opens when this many lines still fit on the page.
WIDOW_GUARD_LINES = 3
DEBUG_PAGINATION = os.getenv("DEBUG_PAGINATION", "0") not in {
    "",
    "0",
    "false",
    "False",
}
