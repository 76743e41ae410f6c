"""Table codec protocol and extension-based codec selection.

A codec converts between a list of cell-string rows and the bytes of one
table file. Codecs know nothing about headers, locales or keys: the row
layout belongs to MessageMatrix.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from msgtable.diagnostics import ErrorTemplate, UnsupportedFormatError
from msgtable.enums import TableFormat
from msgtable.types import Table

from .csv_codec import CsvTableCodec
from .xlsx_codec import XlsxTableCodec

__all__ = ["TableCodec", "codec_for_path", "table_format_for_path"]


class TableCodec(Protocol):
    """Protocol for reading and writing message tables.

    This is a Protocol (structural typing) rather than ABC so that any
    object with matching read/write methods can serve as a codec.

    Example:
        >>> class TsvCodec:
        ...     def read(self, path: Path) -> Table:
        ...         text = path.read_text(encoding="utf-8")
        ...         return [line.split("\\t") for line in text.splitlines()]
        ...     def write(self, table: Table, path: Path) -> None:
        ...         path.write_text("\\n".join("\\t".join(r) for r in table), encoding="utf-8")
    """

    def read(self, path: Path) -> Table:
        """Decode every row of the table file at ``path``.

        Raises:
            TableFormatError: If the file is not a valid table
            OSError: If the file cannot be read
        """
        ...

    def write(self, table: Table, path: Path) -> None:
        """Encode ``table`` into the file at ``path``, replacing it.

        Raises:
            TableFormatError: If a cell cannot be stored in this format
            OSError: If the file cannot be written
        """
        ...


def table_format_for_path(path: str | Path) -> TableFormat:
    """Table format selected by the file extension (case-insensitive).

    Raises:
        UnsupportedFormatError: If the extension is neither .csv nor .xlsx
    """
    suffix = Path(path).suffix.lower()
    for table_format in TableFormat:
        if suffix == table_format.extension:
            return table_format
    raise UnsupportedFormatError(ErrorTemplate.unsupported_table_format(str(path)), path=str(path))


def codec_for_path(path: str | Path) -> TableCodec:
    """Codec for the table file at ``path``.

    Example:
        >>> type(codec_for_path("messages.CSV")).__name__
        'CsvTableCodec'

    Raises:
        UnsupportedFormatError: If the extension is neither .csv nor .xlsx
    """
    match table_format_for_path(path):
        case TableFormat.CSV:
            return CsvTableCodec()
        case TableFormat.XLSX:
            return XlsxTableCodec()
