"""Table extraction from HTML markup (e.g. DOCX converted by mammoth).

Tables that are already delimited in markup skip row classification and
segmentation entirely: every top-level ``<table>`` becomes one ``Table``.
"""

import logging

from bs4 import BeautifulSoup, Tag

from doc_enhancer.tables.schema import Table

logger = logging.getLogger(__name__)


def _own_rows(table: Tag) -> list[Tag]:
    """Rows whose nearest enclosing table is *table* (skips rows of nested tables)."""
    return [row for row in table.find_all("tr") if row.find_parent("table") is table]


def _is_nested(element: Tag, root: Tag) -> bool:
    """Return True if *element* sits inside another table below *root*."""
    for parent in element.parents:
        if parent is root:
            return False
        if parent.name == "table":
            return True
    return False


def _row_cells(row: Tag) -> list[str]:
    """Trimmed text of each data and header cell in a row."""
    return [cell.get_text().strip() for cell in row.find_all(["td", "th"], recursive=False)]


def extract_from_markup(markup: BeautifulSoup | Tag | str) -> list[Table]:
    """Return one Table per top-level ``<table>`` element, in document order.

    Accepts an already-parsed tree or raw HTML.  Rows without cells are
    ignored and tables left with no rows are skipped.
    """
    soup = BeautifulSoup(markup, "html.parser") if isinstance(markup, str) else markup

    tables: list[Table] = []
    elements = [soup] if soup.name == "table" else soup.find_all("table")
    for element in elements:
        if element is not soup and _is_nested(element, soup):
            continue  # nested tables are part of their parent's cell text

        rows = [cells for cells in (_row_cells(row) for row in _own_rows(element)) if cells]
        if not rows:
            logger.debug("Skipping markup table with no rows")
            continue
        tables.append(Table(index=len(tables) + 1, rows=rows))

    logger.info("Extracted %d tables from markup", len(tables))
    return tables
