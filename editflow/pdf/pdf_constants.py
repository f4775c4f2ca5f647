"""Shared constants for PDF layout and export."""

from __future__ import annotations

import os

EPSILON = 1e-4
READING_MINUTES_PER_WORD = 0.008
DEFAULT_TITLE = "EditFlow Document"
TITLE_SCALE = 1.5
STATS_SCALE = 0.75
PAGE_LABEL_SIZE = 9.0
DEBUG_LAYOUT = os.getenv("DEBUG_LAYOUT", "0") not in {
    "",
    "0",
    "false",
    "False",
}
RULE_OFFSET = 4.0
