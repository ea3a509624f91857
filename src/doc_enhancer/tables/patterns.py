"""Compiled regex patterns, thresholds, and border glyphs for table handling.

Used by classifiers.py (row classification), detection.py (cell splitting),
and formatting.py (grid borders and markdown escaping).
"""

import re

# ─── Row Classification ──────────────────────────────────────────────────────

# Two or more consecutive spaces separate columns in text-layer output
WIDE_SPACE_RE = re.compile(r" {2,}")

# ASCII digit anywhere in a fragment
DIGIT_RE = re.compile(r"[0-9]")

# A line with at least this many tabs is always treated as a table row
MIN_TAB_COUNT = 2

# Space-separated rows need at least this many fragments
MIN_WIDE_SPACE_PARTS = 3

# Fragments longer than this on average read as prose, not cells
MAX_AVG_PART_LENGTH = 20

# A candidate needs at least this many consecutive rows to become a table
MIN_TABLE_ROWS = 2


# ─── Grid Borders ────────────────────────────────────────────────────────────

BORDER_HORIZONTAL = "─"
BORDER_VERTICAL = "│"

# (left, junction, right) for each horizontal rule
TOP_RULE = ("┌", "┬", "┐")
HEADER_RULE = ("├", "┼", "┤")
BOTTOM_RULE = ("└", "┴", "┘")


# ─── Markdown ────────────────────────────────────────────────────────────────

# Characters escaped inside markdown cells, applied in this order
MARKDOWN_ESCAPES = (
    ("\\", "\\\\"),
    ("|", "\\|"),
    ("\n", "\\n"),
    ("\r", "\\r"),
)

# Reverse mapping for the character following a backslash
MARKDOWN_UNESCAPES = {"\\": "\\", "|": "|", "n": "\n", "r": "\r"}

# Separator row such as "| --- | :---: |"
MARKDOWN_SEPARATOR_RE = re.compile(r"^\|?(\s*:?-+:?\s*\|)*\s*:?-+:?\s*\|?$")
