"""Shared configuration for the document enhancement pipeline.

Values are read from the environment (a ``.env`` file at the project root is
loaded first) so the CLI defaults can be changed without editing code.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

OutputFormat = Literal["text", "markdown", "json"]
OUTPUT_FORMATS: tuple[str, ...] = ("text", "markdown", "json")

DEFAULT_OUTPUT_DIR = Path(os.getenv("DOC_ENHANCER_OUTPUT_DIR", "output"))
DEFAULT_OUTPUT_FORMAT = os.getenv("DOC_ENHANCER_OUTPUT_FORMAT", "text").lower()
if DEFAULT_OUTPUT_FORMAT not in OUTPUT_FORMATS:
    DEFAULT_OUTPUT_FORMAT = "text"
LOG_LEVEL = os.getenv("DOC_ENHANCER_LOG_LEVEL", "INFO").upper()

# Extension -> MIME type for every file type the extractors understand
SUPPORTED_TYPES = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
    ".md": "text/markdown",
}


class ProcessingOptions(BaseModel):
    """Per-run switches shared by the processor and the report formatter."""

    extract_tables: bool = True
    output_format: OutputFormat = "text"

    @property
    def table_format(self) -> str:
        """Renderer format implied by the output format."""
        return "markdown" if self.output_format == "markdown" else "grid"


def mime_type_for(path: Path) -> str | None:
    """Return the MIME type for a supported file, or None for anything else."""
    return SUPPORTED_TYPES.get(path.suffix.lower())
