"""Table segmentation over a plain-text line stream.

Scans the text once, grouping consecutive table-like lines (see
classifiers.py) into candidate tables.  Candidates with enough rows become
``Table`` objects; every other line is kept, in order, as residual text.
"""

import enum
import logging

from doc_enhancer.tables.classifiers import is_table_row
from doc_enhancer.tables.patterns import MIN_TABLE_ROWS, WIDE_SPACE_RE
from doc_enhancer.tables.schema import SegmentationResult, Table

logger = logging.getLogger(__name__)


class ScanState(enum.Enum):
    """Whether the scanner is currently inside a candidate table."""

    OUTSIDE = "outside"
    IN_TABLE = "in_table"


# ─── Cell Parsing ────────────────────────────────────────────────────────────


def parse_cells(line: str) -> list[str]:
    """Split one raw table line into trimmed cell values.

    Tab-delimited lines keep empty cells (an empty field between two tabs is
    meaningful); space-delimited lines drop empty fragments.
    """
    if "\t" in line:
        return [cell.strip() for cell in line.split("\t")]
    return [cell.strip() for cell in WIDE_SPACE_RE.split(line) if cell.strip()]


def _finalize_candidate(lines: list[str], start_line: int, index: int) -> Table | None:
    """Turn accumulated raw lines into a Table, or None if there are too few rows."""
    if len(lines) < MIN_TABLE_ROWS:
        logger.debug("Discarding %d-line candidate at line %d", len(lines), start_line)
        return None
    table = Table(
        index=index,
        rows=[parse_cells(line) for line in lines],
        start_line=start_line,
        end_line=start_line + len(lines) - 1,
    )
    logger.debug(
        "Table %d: lines %d-%d (%d rows x %d columns)",
        table.index,
        table.start_line,
        table.end_line,
        table.row_count,
        table.column_count,
    )
    return table


# ─── Segmentation ────────────────────────────────────────────────────────────


def segment(text: str) -> SegmentationResult:
    """Separate tabular line runs from prose.

    Returns every confirmed table (at least two consecutive table-like lines)
    plus the remaining lines joined by newlines in their original order.
    """
    tables: list[Table] = []
    residual: list[str] = []

    state = ScanState.OUTSIDE
    candidate: list[str] = []
    candidate_start = 0

    lines = text.split("\n")
    for line_no, raw_line in enumerate(lines):
        line = raw_line.rstrip("\r")

        if is_table_row(line):
            if state is ScanState.OUTSIDE:
                # Start a new candidate
                state = ScanState.IN_TABLE
                candidate = []
                candidate_start = line_no
            candidate.append(line)
            continue

        if state is ScanState.IN_TABLE:
            # Non-table line closes the current candidate
            table = _finalize_candidate(candidate, candidate_start, len(tables) + 1)
            if table is not None:
                tables.append(table)
            else:
                residual.extend(candidate)
            candidate = []
            state = ScanState.OUTSIDE

        residual.append(line)

    # Table running up to the last line
    if state is ScanState.IN_TABLE:
        table = _finalize_candidate(candidate, candidate_start, len(tables) + 1)
        if table is not None:
            tables.append(table)
        else:
            residual.extend(candidate)

    logger.info("Segmented %d lines: %d tables, %d residual lines", len(lines), len(tables), len(residual))
    return SegmentationResult(tables=tables, residual_text="\n".join(residual))
