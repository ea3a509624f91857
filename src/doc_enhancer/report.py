"""Document report assembly.

Combines a metadata header, the rendered tables, and the remaining document
text into the final report string.  When no tables are supplied the text is
segmented here; tables supplied by the caller (the markup path) are used as
is and the text is left untouched so the same data is not counted twice.
"""

import logging

from doc_enhancer.tables.detection import segment
from doc_enhancer.tables.formatting import render_table
from doc_enhancer.tables.schema import DocumentMetadata, DocumentReport, Table

logger = logging.getLogger(__name__)


def _header_block(metadata: DocumentMetadata) -> list[str]:
    lines = [
        "## Document Analysis",
        f"**File:** {metadata.filename}",
        f"**Type:** {metadata.mime_type or 'unknown'}",
        f"**Processing Method:** {metadata.processing_method}",
    ]
    if metadata.title:
        lines.append(f"**Title:** {metadata.title}")
    if metadata.page_count is not None:
        lines.append(f"**Pages:** {metadata.page_count}")
    lines.extend(["", "---", ""])
    return lines


def _tables_block(tables: list[Table], table_format: str) -> list[str]:
    lines = [f"## Extracted Tables ({len(tables)})", ""]
    for table in tables:
        lines.append(f"### Table {table.index} ({table.row_count} rows × {table.column_count} columns)")
        lines.append("")
        lines.append(render_table(table, table_format))
        lines.append("")
    return lines


def format_document(
    document_text: str,
    metadata: DocumentMetadata,
    tables: list[Table] | None = None,
    table_format: str = "grid",
) -> DocumentReport:
    """Build the report for one document.

    Layout, in order: metadata header, tables section (only when tables were
    found), then the body.  The body is the residual text when segmentation
    found tables, otherwise the full original text.
    """
    if tables is None:
        result = segment(document_text)
        tables = result.tables
        body = result.residual_text if tables else document_text
    else:
        body = document_text

    lines = _header_block(metadata)
    if tables:
        lines.extend(_tables_block(tables, table_format))
        lines.extend(["## Document Content", ""])
    lines.append(body)

    logger.info("Formatted %s: %d tables, %d body characters", metadata.filename, len(tables), len(body))
    return DocumentReport(metadata=metadata, tables=tables, body=body, text="\n".join(lines))
