"""Row classification helpers for plain-text table detection.

Each rule is a small predicate on a single line.  ``is_table_row`` applies
them in order and the first rule that decides wins.

Known false positives: prose with wide spacing and numbers (addresses,
aligned signature blocks) can be classified as table rows.
"""

from doc_enhancer.tables.patterns import (
    DIGIT_RE,
    MAX_AVG_PART_LENGTH,
    MIN_TAB_COUNT,
    MIN_WIDE_SPACE_PARTS,
    WIDE_SPACE_RE,
)


def is_blank(line: str) -> bool:
    """Return True for empty or whitespace-only lines."""
    return not line.strip()


def has_tab_columns(line: str) -> bool:
    """Return True if the line contains enough tabs to be tab-delimited data."""
    return line.count("\t") >= MIN_TAB_COUNT


def split_wide_spaces(line: str) -> list[str]:
    """Split on runs of two or more spaces, dropping empty fragments."""
    return [part for part in WIDE_SPACE_RE.split(line) if part.strip()]


def looks_like_data_row(parts: list[str]) -> bool:
    """Return True if the fragments are numeric-ish and short enough to be cells."""
    if len(parts) < MIN_WIDE_SPACE_PARTS:
        return False
    has_numbers = any(DIGIT_RE.search(part) for part in parts)
    avg_length = sum(len(part) for part in parts) / len(parts)
    return has_numbers and avg_length < MAX_AVG_PART_LENGTH


def is_table_row(line: str) -> bool:
    """Return True if a single line of text looks like a row of tabular data."""
    stripped = line.strip()
    if is_blank(stripped):
        return False
    if has_tab_columns(stripped):
        return True
    return looks_like_data_row(split_wide_spaces(stripped))
