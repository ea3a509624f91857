"""Document enhancement: structured reports with explicit table layout."""

__version__ = "2.0.0"
