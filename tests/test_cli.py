"""Tests for the command-line entry point."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from doc_enhancer.cli import build_parser, main


class TestParser:

    def test_process_defaults(self):
        args = build_parser().parse_args(["process", "a.txt"])
        assert args.tables is True
        assert args.format in ("text", "markdown", "json")

    def test_no_tables_flag(self):
        args = build_parser().parse_args(["process", "a.txt", "--no-tables", "-f", "markdown"])
        assert args.tables is False
        assert args.format == "markdown"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:

    def test_process_writes_outputs(self, tmp_path, quarterly_text, capsys):
        source = tmp_path / "q.txt"
        source.write_text(quarterly_text, encoding="utf-8")
        out_dir = tmp_path / "out"

        assert main(["process", str(source), "-o", str(out_dir)]) == 0
        assert (out_dir / "q_enhanced.txt").exists()
        assert (out_dir / "q_data.json").exists()
        output = capsys.readouterr().out
        assert "1 successful, 0 failed" in output
        assert "Found 1 tables" in output

    def test_missing_files_only(self, tmp_path):
        assert main(["process", str(tmp_path / "nope.txt"), "-o", str(tmp_path / "out")]) == 1

    def test_setup(self, capsys):
        assert main(["setup"]) == 0
        assert "[ok]      pydantic" in capsys.readouterr().out
