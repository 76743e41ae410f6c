"""Enumerations for msgtable type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class TableFormat(StrEnum):
    """Tabular file encoding, selected by file extension.

    StrEnum provides automatic string conversion: str(TableFormat.CSV) == "csv"
    """

    CSV = "csv"
    """Comma-separated text, one row per line."""

    XLSX = "xlsx"
    """Spreadsheet workbook with a single sheet."""

    @property
    def extension(self) -> str:
        """File extension including the leading dot."""
        return f".{self.value}"


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


__all__ = [
    "OutputFormat",
    "TableFormat",
]
