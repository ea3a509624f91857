"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

QUARTERLY_TEXT = "Q1   Revenue   100k   Growth\nQ2   Revenue   150k   Growth\n"


@pytest.fixture
def quarterly_text() -> str:
    """Two space-aligned data rows and nothing else."""
    return QUARTERLY_TEXT


@pytest.fixture
def mixed_text() -> str:
    """Prose, a three-row table, more prose, a tab-delimited table, and a closing line."""
    return "\n".join(
        [
            "Quarterly summary for the sales team.",
            "",
            "Region   Units 2023   Revenue 2023",
            "North   120   4,500",
            "South   95   3,900",
            "Figures are unaudited.",
            "Item\tQty\tPrice",
            "Bolt\t10\t0.25",
            "End of report.",
        ]
    )
