"""Message matrix: one row per flat key, one column per locale.

MessageMatrix is the in-memory form of a message table. It is built from
the global key order and the per-locale flat mappings on the way out, and
parsed from decoded table rows on the way in.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from msgtable.constants import CATEGORY_COLUMN, KEY_COLUMN, KEY_SEPARATOR
from msgtable.diagnostics import ErrorTemplate, TableFormatError
from msgtable.locale_utils import validate_locale_code
from msgtable.types import CategoryName, FlatKey, LocaleCode, Table

__all__ = [
    "MessageMatrix",
    "RowRecord",
    "build_matrix",
    "split_flat_key",
]

logger = logging.getLogger(__name__)


def split_flat_key(flat_key: FlatKey) -> tuple[CategoryName, str]:
    """Split a flat key into its category and the key within the category.

    Example:
        >>> split_flat_key("auth.inputs.email")
        ('auth', 'inputs.email')
    """
    category, _sep, key = flat_key.partition(KEY_SEPARATOR)
    return category, key


@dataclass(frozen=True, slots=True)
class RowRecord:
    """One message key across all locales.

    Attributes:
        category: Category name (first segment of the flat key)
        key: Key within the category
        values: One cell per matrix locale; None marks a missing translation
    """

    category: CategoryName
    key: str
    values: tuple[str | None, ...]

    @property
    def flat_key(self) -> FlatKey:
        """Full flat key including the category."""
        return f"{self.category}{KEY_SEPARATOR}{self.key}"

    def to_cells(self) -> list[str]:
        """Cells for the table, missing translations as empty strings."""
        return [self.category, self.key, *("" if v is None else v for v in self.values)]


@dataclass(frozen=True, slots=True)
class MessageMatrix:
    """Locales plus ordered rows.

    Attributes:
        locales: Locale columns in enumeration order
        rows: One RowRecord per global key, in global key order
    """

    locales: tuple[LocaleCode, ...]
    rows: tuple[RowRecord, ...]

    def __post_init__(self) -> None:
        """Validate that every row has one value per locale."""
        for row in self.rows:
            if len(row.values) != len(self.locales):
                msg = (
                    f"Row {row.flat_key!r} has {len(row.values)} values "
                    f"for {len(self.locales)} locales"
                )
                raise ValueError(msg)

    @property
    def header(self) -> tuple[str, ...]:
        """Header row: category, key, then the locales."""
        return (CATEGORY_COLUMN, KEY_COLUMN, *self.locales)

    @property
    def categories(self) -> tuple[CategoryName, ...]:
        """Distinct categories in first-appearance order."""
        return tuple(dict.fromkeys(row.category for row in self.rows))

    def cell(self, row: RowRecord, locale: LocaleCode) -> str | None:
        """Value of ``row`` for ``locale`` (None when missing).

        Raises:
            ValueError: If ``locale`` is not a matrix column
        """
        return row.values[self.locales.index(locale)]

    def column(self, locale: LocaleCode) -> dict[FlatKey, str]:
        """Non-empty values of one locale, keyed by flat key, in row order."""
        index = self.locales.index(locale)
        return {
            row.flat_key: row.values[index]
            for row in self.rows
            if row.values[index]
        }

    def to_table(self) -> Table:
        """Render header and rows as cell strings."""
        return [list(self.header), *(row.to_cells() for row in self.rows)]

    @classmethod
    def from_table(cls, table: Sequence[Sequence[str]]) -> MessageMatrix:
        """Parse decoded table rows.

        The first row must be ``category, key, <locale>...``. Blank rows are
        skipped, short rows are padded, empty cells become None.

        Args:
            table: Decoded rows of cell strings

        Returns:
            The parsed matrix

        Raises:
            TableFormatError: If the header or a row is malformed
        """
        if not table:
            raise TableFormatError(ErrorTemplate.table_empty())

        locales = _parse_header(table[0])
        width = len(locales) + 2
        rows: list[RowRecord] = []
        for number, cells in enumerate(table[1:], start=2):
            if not any(cell.strip() for cell in cells):
                continue
            if len(cells) > width and any(cell.strip() for cell in cells[width:]):
                logger.warning("Ignoring cells beyond the last locale column in row %d", number)
            padded = [*cells[:width], *([""] * (width - len(cells)))]
            category, key = padded[0].strip(), padded[1].strip()
            if not category:
                raise TableFormatError(
                    ErrorTemplate.table_row_invalid(number, "empty category"), row=number
                )
            if not key:
                raise TableFormatError(
                    ErrorTemplate.table_row_invalid(number, "empty key"), row=number
                )
            values = tuple(cell if cell else None for cell in padded[2:])
            rows.append(RowRecord(category=category, key=key, values=values))

        logger.debug("Parsed %d row(s) for locales %s", len(rows), ", ".join(locales))
        return cls(locales=locales, rows=tuple(rows))


def _parse_header(header: Sequence[str]) -> tuple[LocaleCode, ...]:
    names = [cell.strip() for cell in header]
    if names[:2] != [CATEGORY_COLUMN, KEY_COLUMN]:
        raise TableFormatError(
            ErrorTemplate.table_header_invalid(
                f"expected '{CATEGORY_COLUMN}, {KEY_COLUMN}' first, got {names[:2]!r}"
            ),
            row=1,
        )

    # Trailing empty header cells are spreadsheet padding, not locales
    while len(names) > 2 and not names[-1]:
        names.pop()

    locales = names[2:]
    if not locales:
        raise TableFormatError(ErrorTemplate.table_header_invalid("no locale columns"), row=1)
    for locale in locales:
        try:
            validate_locale_code(locale)
        except ValueError as e:
            raise TableFormatError(ErrorTemplate.table_header_invalid(str(e)), row=1) from e
    duplicates = sorted({locale for locale in locales if locales.count(locale) > 1})
    if duplicates:
        raise TableFormatError(
            ErrorTemplate.table_header_invalid(f"duplicate locale column(s) {duplicates}"),
            row=1,
        )
    return tuple(locales)


def build_matrix(
    key_order: Sequence[FlatKey],
    flat_by_locale: Mapping[LocaleCode, Mapping[FlatKey, str]],
) -> MessageMatrix:
    """Build the matrix from the global key order and each locale's flat mapping.

    A key missing from a locale yields a None cell; that marks a missing
    translation and is not an error.

    Args:
        key_order: Global key order (see merge_key_orders)
        flat_by_locale: Locale to flat mapping, in locale enumeration order

    Returns:
        Matrix with one row per global key
    """
    locales = tuple(flat_by_locale)
    rows = []
    for flat_key in key_order:
        category, key = split_flat_key(flat_key)
        values = tuple(flat_by_locale[locale].get(flat_key) for locale in locales)
        rows.append(RowRecord(category=category, key=key, values=values))
    logger.info("Built %d row(s) for %d locale(s)", len(rows), len(locales))
    return MessageMatrix(locales=locales, rows=tuple(rows))
