"""Format-specific text extraction for PDF, DOCX, and plain-text files.

Each extractor returns an ``ExtractedDocument``: the document text, optional
HTML markup (DOCX only, used for table extraction), and whatever metadata
the source format exposes.  No layout reconstruction or OCR is attempted;
PDF text comes straight from the text layer.
"""

import logging
from pathlib import Path

import mammoth
from pydantic import BaseModel, Field
from pypdf import PdfReader

from doc_enhancer.config import SUPPORTED_TYPES

logger = logging.getLogger(__name__)


class UnsupportedFileTypeError(ValueError):
    """Raised for file extensions with no extractor."""


class ExtractedDocument(BaseModel):
    """Raw extraction output for one source file."""

    text: str
    processing_method: str
    html: str | None = None
    page_count: int | None = None
    title: str | None = None
    warnings: list[str] = Field(default_factory=list)


# ─── Extractors ──────────────────────────────────────────────────────────────


def extract_pdf(path: Path) -> ExtractedDocument:
    """Extract the text layer of every page with pypdf."""
    reader = PdfReader(path)
    pages = [page.extract_text() or "" for page in reader.pages]
    title = reader.metadata.title if reader.metadata is not None else None
    logger.info("Read %d pages from %s", len(pages), path.name)
    return ExtractedDocument(
        text="\n".join(pages),
        processing_method="pypdf",
        page_count=len(pages),
        title=str(title) if title else None,
    )


def extract_docx(path: Path) -> ExtractedDocument:
    """Convert a DOCX with mammoth: HTML for the tables, raw text for the body."""
    with open(path, "rb") as fopen:
        html_result = mammoth.convert_to_html(fopen)
        fopen.seek(0)
        text_result = mammoth.extract_raw_text(fopen)

    warnings = [f"{message.type}: {message.message}" for message in html_result.messages]
    for warning in warnings:
        logger.debug("mammoth %s: %s", path.name, warning)
    return ExtractedDocument(
        text=text_result.value,
        processing_method="mammoth",
        html=html_result.value,
        warnings=warnings,
    )


def extract_text_file(path: Path) -> ExtractedDocument:
    """Read a plain-text or markdown file as UTF-8."""
    with open(path, "r", encoding="utf-8") as fopen:
        text = fopen.read()
    return ExtractedDocument(text=text, processing_method="text-reader")


EXTRACTORS = {
    ".pdf": extract_pdf,
    ".docx": extract_docx,
    ".txt": extract_text_file,
    ".md": extract_text_file,
}


def extract(path: Path) -> ExtractedDocument:
    """Dispatch to the extractor for the file's extension."""
    suffix = path.suffix.lower()
    if suffix not in EXTRACTORS:
        supported = ", ".join(SUPPORTED_TYPES)
        raise UnsupportedFileTypeError(f"Unsupported file type: {suffix or path.name}. Supported types: {supported}")
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return EXTRACTORS[suffix](path)
