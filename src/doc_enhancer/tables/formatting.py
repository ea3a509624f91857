"""Table rendering as a bordered text grid or a markdown table.

Rendering never raises for data-shape problems: if drawing a table fails
(for example because a cell is not a string), the table is emitted as
plain ``cell | cell`` lines instead.
"""

import logging

from doc_enhancer.tables.patterns import (
    BORDER_HORIZONTAL,
    BORDER_VERTICAL,
    BOTTOM_RULE,
    HEADER_RULE,
    MARKDOWN_ESCAPES,
    MARKDOWN_SEPARATOR_RE,
    MARKDOWN_UNESCAPES,
    TOP_RULE,
)
from doc_enhancer.tables.schema import Table

logger = logging.getLogger(__name__)

TABLE_FORMATS = ("grid", "markdown")


# ─── Normalization ───────────────────────────────────────────────────────────


def normalize_rows(table: Table) -> list[list[str]]:
    """Return the table's rows right-padded with empty cells to ``column_count``."""
    n_cols = table.column_count
    return [list(row) + [""] * (n_cols - len(row)) for row in table.rows]


# ─── Grid Rendering ──────────────────────────────────────────────────────────


def _column_widths(rows: list[list[str]]) -> list[int]:
    """Widest cell per column."""
    widths = [0] * len(rows[0]) if rows else []
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return widths


def _rule(widths: list[int], glyphs: tuple[str, str, str]) -> str:
    """Build a horizontal border line from (left, junction, right) glyphs."""
    left, junction, right = glyphs
    return left + junction.join(BORDER_HORIZONTAL * (width + 2) for width in widths) + right


def _grid_row(row: list[str], widths: list[int]) -> str:
    """Build one bordered content line."""
    cells = (f" {cell.ljust(width)} " for cell, width in zip(row, widths))
    return BORDER_VERTICAL + BORDER_VERTICAL.join(cells) + BORDER_VERTICAL


def render_grid(table: Table) -> str:
    """Render a table as a fixed-width grid drawn with box-drawing characters.

    The first row is the header; a separator rule follows it only when the
    table has more than one row.
    """
    rows = normalize_rows(table)
    widths = _column_widths(rows)

    lines = [_rule(widths, TOP_RULE), _grid_row(rows[0], widths)]
    if len(rows) > 1:
        lines.append(_rule(widths, HEADER_RULE))
        lines.extend(_grid_row(row, widths) for row in rows[1:])
    lines.append(_rule(widths, BOTTOM_RULE))
    return "\n".join(lines)


# ─── Markdown Rendering ──────────────────────────────────────────────────────


def escape_markdown_cell(cell: str) -> str:
    """Escape backslashes, pipes, and line breaks so the cell stays on one table row."""
    for char, escaped in MARKDOWN_ESCAPES:
        cell = cell.replace(char, escaped)
    return cell


def unescape_markdown_cell(cell: str) -> str:
    """Reverse ``escape_markdown_cell``."""
    out: list[str] = []
    i = 0
    while i < len(cell):
        char = cell[i]
        if char == "\\" and i + 1 < len(cell) and cell[i + 1] in MARKDOWN_UNESCAPES:
            out.append(MARKDOWN_UNESCAPES[cell[i + 1]])
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


def _markdown_row(row: list[str]) -> str:
    return "| " + " | ".join(escape_markdown_cell(cell) for cell in row) + " |"


def render_markdown(table: Table) -> str:
    """Render a table as pipe-delimited markdown, using the first row as the header."""
    rows = normalize_rows(table)
    lines = [_markdown_row(rows[0])]
    lines.append("| " + " | ".join(["---"] * table.column_count) + " |")
    lines.extend(_markdown_row(row) for row in rows[1:])
    return "\n".join(lines)


def _split_markdown_row(line: str) -> list[str]:
    """Split a markdown table line on unescaped pipes, keeping escapes intact."""
    line = line.strip()
    if line.startswith("|"):
        line = line[1:]
    cells: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\" and i + 1 < len(line):
            current.append(line[i : i + 2])
            i += 2
            continue
        if char == "|":
            cells.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    # Text after the last pipe is only a cell if the row had no closing pipe
    trailing = "".join(current)
    if trailing.strip():
        cells.append(trailing)
    return [unescape_markdown_cell(cell.strip()) for cell in cells]


def parse_markdown_table(markdown: str) -> list[list[str]]:
    """Parse a markdown table (as produced by ``render_markdown``) back into rows of cells."""
    lines = [line for line in markdown.splitlines() if line.strip()]
    # Only the line under the header can be the separator
    if len(lines) > 1 and MARKDOWN_SEPARATOR_RE.match(lines[1].strip()):
        del lines[1]
    return [_split_markdown_row(line) for line in lines]


# ─── Fallback & Dispatch ─────────────────────────────────────────────────────


def render_plain(table: Table) -> str:
    """Fallback: one ``cell | cell | ...`` line per row.  Never raises."""
    lines: list[str] = []
    for row in getattr(table, "rows", None) or []:
        try:
            lines.append(" | ".join(str(cell) for cell in row))
        except Exception:  # pylint: disable=broad-exception-caught
            lines.append(repr(row))
    return "\n".join(lines)


def render_table(table: Table, fmt: str = "grid") -> str:
    """Render a table in ``grid`` or ``markdown`` format, falling back to plain lines on failure."""
    if fmt not in TABLE_FORMATS:
        raise ValueError(f"Unknown table format {fmt!r}; expected one of {TABLE_FORMATS}")

    try:
        if fmt == "markdown":
            return render_markdown(table)
        return render_grid(table)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Rendering table %s as %s failed (%s); using plain fallback", getattr(table, "index", "?"), fmt, exc)
        return render_plain(table)
