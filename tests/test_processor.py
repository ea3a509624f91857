"""Tests for per-file processing, batch processing, and saving results."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

from doc_enhancer import processor
from doc_enhancer.config import ProcessingOptions
from doc_enhancer.extractors import ExtractedDocument
from doc_enhancer.processor import ProcessedDocument, process_document, process_files, save_results


class TestProcessDocument:

    def test_text_file_with_tables(self, tmp_path, mixed_text):
        path = tmp_path / "sales.txt"
        path.write_text(mixed_text, encoding="utf-8")

        result = process_document(path)
        assert result.success
        assert result.mime_type == "text/plain"
        assert result.processing_method == "text-reader"
        assert len(result.tables) == 2
        assert "**File:** sales.txt" in result.report
        assert "┌" in result.report

    def test_markdown_output(self, tmp_path, quarterly_text):
        path = tmp_path / "q.md"
        path.write_text(quarterly_text, encoding="utf-8")
        result = process_document(path, ProcessingOptions(output_format="markdown"))
        assert "| Q1 | Revenue | 100k | Growth |" in result.report

    def test_tables_disabled(self, tmp_path, quarterly_text):
        path = tmp_path / "q.txt"
        path.write_text(quarterly_text, encoding="utf-8")
        result = process_document(path, ProcessingOptions(extract_tables=False))
        assert result.tables == []
        assert "## Extracted Tables" not in result.report
        assert result.report.endswith(quarterly_text)

    def test_markup_tables_used_for_docx(self, tmp_path, monkeypatch):
        extracted = ExtractedDocument(
            text="Part\tQty\tPrice\nBolt\t10\t0.25",
            processing_method="mammoth",
            html="<table><tr><td>Part</td><td>Qty</td></tr><tr><td>Bolt</td><td>10</td></tr></table>",
        )
        monkeypatch.setattr(processor, "extract", lambda path: extracted)

        result = process_document(tmp_path / "parts.docx")
        assert result.processing_method == "mammoth"
        assert [t.rows for t in result.tables] == [[["Part", "Qty"], ["Bolt", "10"]]]
        # Body is the raw text, not re-segmented
        assert result.report.endswith("## Document Content\n\n" + extracted.text)


class TestProcessFiles:

    def test_failures_recorded_and_batch_continues(self, tmp_path, quarterly_text):
        good = tmp_path / "good.txt"
        good.write_text(quarterly_text, encoding="utf-8")
        bad = tmp_path / "bad.xlsx"
        bad.write_bytes(b"")

        results = process_files([bad, good])
        assert [r.success for r in results] == [False, True]
        assert "Unsupported file type" in results[0].error
        assert len(results[1].tables) == 1


class TestSaveResults:

    def test_writes_report_and_json(self, tmp_path, quarterly_text):
        source = tmp_path / "q.txt"
        source.write_text(quarterly_text, encoding="utf-8")
        results = process_files([source])
        out_dir = tmp_path / "out" / "nested"

        written = save_results(results, out_dir)
        assert written == [out_dir / "q_enhanced.txt", out_dir / "q_data.json"]
        assert (out_dir / "q_enhanced.txt").read_text(encoding="utf-8") == results[0].report

        data = json.loads((out_dir / "q_data.json").read_text(encoding="utf-8"))
        assert data["original_path"] == str(source)
        assert data["tables"][0]["row_count"] == 2
        assert data["tables"][0]["column_count"] == 4
        assert data["metadata"]["processing_method"] == "text-reader"

    def test_failed_results_skipped(self, tmp_path):
        failed = ProcessedDocument(original_path="missing.pdf", error="File not found")
        assert save_results([failed], tmp_path / "out") == []
        assert list((tmp_path / "out").iterdir()) == []
