"""Command-line entry point.

Usage:
  doc-enhancer process report.pdf notes.txt -o output -f markdown
  doc-enhancer process contract.docx --no-tables
  doc-enhancer setup
"""

import argparse
import importlib.util
import logging
import sys
from pathlib import Path

from doc_enhancer.config import DEFAULT_OUTPUT_DIR, DEFAULT_OUTPUT_FORMAT, LOG_LEVEL, OUTPUT_FORMATS, ProcessingOptions
from doc_enhancer.processor import process_files, save_results

logger = logging.getLogger(__name__)

# (import name, distribution name) for every backend the pipeline needs
BACKENDS = (
    ("pypdf", "pypdf"),
    ("mammoth", "mammoth"),
    ("bs4", "beautifulsoup4"),
    ("pydantic", "pydantic"),
    ("dotenv", "python-dotenv"),
    ("tqdm", "tqdm"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doc-enhancer", description="Convert documents into structured, table-aware reports")
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser("process", help="Process documents and save the reports")
    process.add_argument("files", nargs="+", type=Path, help="Files to process (.pdf, .docx, .txt, .md)")
    process.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT_DIR, help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})")
    process.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format; markdown renders tables as markdown, the others as a grid (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    process.add_argument("--no-tables", dest="tables", action="store_false", help="Skip table extraction")

    subparsers.add_parser("setup", help="Check that the extraction backends are installed")
    return parser


def run_process(args: argparse.Namespace) -> int:
    """Process the given files; returns the exit status."""
    valid_files: list[Path] = []
    for path in args.files:
        if path.is_file():
            valid_files.append(path)
        else:
            logger.error("Not found: %s", path)

    if not valid_files:
        logger.error("No valid files found")
        return 1

    options = ProcessingOptions(extract_tables=args.tables, output_format=args.format)
    results = process_files(valid_files, options)
    save_results(results, args.output)

    successful = sum(1 for result in results if result.success)
    total_tables = sum(len(result.tables) for result in results)
    print(f"Processing complete: {successful} successful, {len(results) - successful} failed")
    print(f"Results saved to: {args.output}")
    if total_tables > 0:
        print(f"Found {total_tables} tables across all documents")
    return 0


def run_setup() -> int:
    """Report which backends are importable; returns 1 if any are missing."""
    missing = 0
    for module_name, distribution in BACKENDS:
        if importlib.util.find_spec(module_name) is not None:
            print(f"[ok]      {distribution}")
        else:
            print(f"[missing] {distribution}  (pip install {distribution})")
            missing += 1
    return 1 if missing else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "setup":
            return run_setup()
        return run_process(args)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("Error: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
