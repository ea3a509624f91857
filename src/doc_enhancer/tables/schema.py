"""Pydantic models shared by the table pipeline and the report formatter.

A ``Table`` is the single structured representation produced by both the
text segmenter (detection.py) and the markup extractor (html.py), and the
only shape the renderer and report formatter depend on.
"""

from pydantic import BaseModel, Field, computed_field, model_validator


class Table(BaseModel):
    """An ordered grid of cell strings found in one document.

    Rows may have different lengths; renderers pad short rows to
    ``column_count`` before drawing.  ``start_line``/``end_line`` give the
    inclusive 0-based line span in the source text for segmented tables and
    are None for tables read from markup.
    """

    index: int = Field(ge=1)
    rows: list[list[str]]
    start_line: int | None = None
    end_line: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def row_count(self) -> int:
        return len(self.rows)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @model_validator(mode="after")
    def validate_not_empty(self) -> "Table":
        """Ensure the table has at least one row."""
        if not self.rows:
            raise ValueError(f"Table {self.index} has no rows")
        return self


class SegmentationResult(BaseModel):
    """Tables found in a text plus every other line, in original order."""

    tables: list[Table] = Field(default_factory=list)
    residual_text: str = ""


class DocumentMetadata(BaseModel):
    """Header fields for a document report."""

    filename: str
    mime_type: str | None = None
    processing_method: str
    page_count: int | None = None
    title: str | None = None


class DocumentReport(BaseModel):
    """Fully assembled report for one document."""

    metadata: DocumentMetadata
    tables: list[Table] = Field(default_factory=list)
    body: str = ""
    text: str = ""
