"""Per-file processing, batch processing, and result persistence.

Pipeline for one file:
  1. extract       -- format-specific text (and markup) extraction
  2. tables        -- markup tables for DOCX, text segmentation otherwise
  3. report        -- metadata header + rendered tables + remaining text

Results are written as ``<stem>_enhanced.txt`` (the report) and
``<stem>_data.json`` (everything else) by ``save_results``.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field
from tqdm import tqdm

from doc_enhancer.config import DEFAULT_OUTPUT_DIR, ProcessingOptions, mime_type_for
from doc_enhancer.extractors import extract
from doc_enhancer.report import format_document
from doc_enhancer.tables.html import extract_from_markup
from doc_enhancer.tables.schema import DocumentMetadata, Table

logger = logging.getLogger(__name__)


class ProcessedDocument(BaseModel):
    """Outcome of processing one file; ``error`` is set when processing failed."""

    original_path: str
    mime_type: str | None = None
    processing_method: str | None = None
    metadata: DocumentMetadata | None = None
    tables: list[Table] = Field(default_factory=list)
    report: str = ""
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def process_document(path: Path, options: ProcessingOptions | None = None) -> ProcessedDocument:
    """Extract, detect tables, and build the report for a single file."""
    options = options or ProcessingOptions()
    path = Path(path)
    mime_type = mime_type_for(path)
    logger.info("Processing %s (%s)", path, mime_type)

    extracted = extract(path)
    metadata = DocumentMetadata(
        filename=path.name,
        mime_type=mime_type,
        processing_method=extracted.processing_method,
        page_count=extracted.page_count,
        title=extracted.title,
    )

    # None lets the formatter segment the text; a list (even empty) is used as is
    tables: list[Table] | None = None
    if not options.extract_tables:
        tables = []
    elif extracted.html is not None:
        tables = extract_from_markup(extracted.html)

    report = format_document(extracted.text, metadata, tables=tables, table_format=options.table_format)
    return ProcessedDocument(
        original_path=str(path),
        mime_type=mime_type,
        processing_method=extracted.processing_method,
        metadata=metadata,
        tables=report.tables,
        report=report.text,
        warnings=extracted.warnings,
    )


def process_files(paths: list[Path], options: ProcessingOptions | None = None) -> list[ProcessedDocument]:
    """Process files one at a time; a failure is recorded on its result and the batch continues."""
    results: list[ProcessedDocument] = []
    for path in tqdm(paths, desc="Processing documents", unit="file"):
        try:
            results.append(process_document(path, options))
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.error("Error processing %s: %s", path, exc)
            results.append(ProcessedDocument(original_path=str(path), mime_type=mime_type_for(Path(path)), error=str(exc)))
    return results


def save_results(results: list[ProcessedDocument], output_dir: Path = DEFAULT_OUTPUT_DIR) -> list[Path]:
    """Write the report text and JSON data for every successful result; returns the written paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for result in results:
        if not result.success:
            continue
        stem = Path(result.original_path).stem

        text_file = output_dir / f"{stem}_enhanced.txt"
        with open(text_file, "w", encoding="utf-8") as fopen:
            fopen.write(result.report)
        logger.info("Wrote report to %s", text_file)

        json_file = output_dir / f"{stem}_data.json"
        with open(json_file, "w", encoding="utf-8") as fopen:
            fopen.write(result.model_dump_json(indent=2))
        logger.info("Wrote data to %s", json_file)

        written.extend([text_file, json_file])
    return written
