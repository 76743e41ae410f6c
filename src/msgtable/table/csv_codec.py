"""CSV table codec (standard library csv, UTF-8)."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from msgtable.diagnostics import ErrorTemplate, TableFormatError
from msgtable.types import Table

__all__ = ["CsvTableCodec"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CsvTableCodec:
    """Comma-separated table codec.

    Writes UTF-8 without a byte order mark; reading tolerates the BOM that
    spreadsheet applications add when saving CSV as UTF-8.

    Attributes:
        dialect: csv dialect name used for both directions
    """

    dialect: str = "excel"

    def read(self, path: Path) -> Table:
        """Decode all rows of ``path``."""
        try:
            with Path(path).open(encoding="utf-8-sig", newline="") as handle:
                table = [list(row) for row in csv.reader(handle, dialect=self.dialect)]
        except (UnicodeDecodeError, csv.Error) as e:
            raise TableFormatError(ErrorTemplate.table_unreadable(str(path), e)) from e
        logger.debug("Read %d CSV row(s) from %s", len(table), path)
        return table

    def write(self, table: Table, path: Path) -> None:
        """Write ``table`` to ``path`` as UTF-8 CSV."""
        with Path(path).open("w", encoding="utf-8", newline="") as handle:
            csv.writer(handle, dialect=self.dialect).writerows(table)
        logger.debug("Wrote %d CSV row(s) to %s", len(table), path)
