"""XLSX table codec backed by openpyxl.

Tables are written to a single worksheet named SHEET_NAME; reading takes the
first worksheet whatever its name.

Python 3.13+.
"""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from openpyxl import Workbook, load_workbook
from openpyxl.cell import WriteOnlyCell
from openpyxl.cell.cell import ERROR_CODES, Cell
from openpyxl.utils.exceptions import IllegalCharacterError, InvalidFileException

from msgtable.constants import SHEET_NAME
from msgtable.diagnostics import ErrorTemplate, TableFormatError
from msgtable.types import Table

__all__ = ["XlsxTableCodec"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class XlsxTableCodec:
    """Single-sheet workbook codec.

    Empty strings are stored as empty cells and read back as "". Non-string
    cell values (numbers typed in by a translator) are read as ``str(value)``.

    Attributes:
        sheet_name: Title of the worksheet created on write
    """

    sheet_name: str = SHEET_NAME

    def read(self, path: Path) -> Table:
        """Decode all rows of the first worksheet of ``path``."""
        try:
            workbook = load_workbook(Path(path), read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError) as e:
            raise TableFormatError(ErrorTemplate.table_unreadable(str(path), e)) from e
        try:
            if not workbook.worksheets:
                return []
            sheet = workbook.worksheets[0]
            table = [
                ["" if value is None else str(value) for value in row]
                for row in sheet.iter_rows(values_only=True)
            ]
        finally:
            workbook.close()
        logger.debug("Read %d XLSX row(s) from %s", len(table), path)
        return table

    def write(self, table: Table, path: Path) -> None:
        """Write ``table`` to ``path`` as a new workbook.

        Raises:
            TableFormatError: If a cell holds a character worksheets cannot
                store (control characters other than tab and newlines)
        """
        workbook = Workbook(write_only=True)
        sheet = workbook.create_sheet(self.sheet_name)
        for number, row in enumerate(table, start=1):
            try:
                sheet.append([_cell(sheet, value) for value in row])
            except IllegalCharacterError as e:
                raise TableFormatError(
                    ErrorTemplate.table_row_invalid(number, "control character in cell"),
                    row=number,
                ) from e
        workbook.save(Path(path))
        logger.debug("Wrote %d XLSX row(s) to %s", len(table), path)


def _cell(sheet: Any, value: str) -> Cell | str | None:
    if not value:
        return None
    if value.startswith("=") or value in ERROR_CODES:
        # Messages are text, never formulas or error values
        cell = WriteOnlyCell(sheet, value=value)
        cell.data_type = "s"
        return cell
    return value
