"""End-to-end conversions between catalog directories and message tables.

    generate_table  - <root>/<locale>/ packages -> .csv/.xlsx table
    parse_table     - .csv/.xlsx table -> <output>/<locale>/ packages

Both pipelines resolve the table codec and validate the default locale
before touching any catalog or file, so configuration mistakes fail fast.
Every failure aborts the whole run; nothing is partially converted.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from msgtable.catalog import (
    CatalogAssembler,
    LoadSummary,
    MissingTranslations,
    ModuleCatalogSource,
    ModuleCatalogWriter,
    WriteSummary,
    discover_locales,
    load_catalogs,
)
from msgtable.diagnostics import ConfigurationError, ErrorTemplate
from msgtable.enums import TableFormat
from msgtable.locale_utils import validate_locale_code, warn_unknown_locales
from msgtable.table import codec_for_path, table_format_for_path
from msgtable.transform import MessageMatrix
from msgtable.types import CategoryName, LocaleCode

__all__ = [
    "GenerateSummary",
    "ParseSummary",
    "generate_table",
    "parse_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerateSummary:
    """Outcome of generate_table.

    Attributes:
        locales: Locale columns, default locale first, then the others sorted
        row_count: Number of message rows (header excluded)
        table_path: Written table file
        table_format: Encoding of the table file
        load_summary: Per-locale load results
    """

    locales: tuple[LocaleCode, ...]
    row_count: int
    table_path: Path
    table_format: TableFormat
    load_summary: LoadSummary


@dataclass(frozen=True, slots=True)
class ParseSummary:
    """Outcome of parse_table.

    Attributes:
        locales: Locale packages written, in column order
        output_root: Directory holding the locale packages
        missing: Missing translations per non-default locale
        write_summary: Files written
    """

    locales: tuple[LocaleCode, ...]
    output_root: Path
    missing: tuple[MissingTranslations, ...]
    write_summary: WriteSummary

    def categories_for(self, locale: LocaleCode) -> tuple[CategoryName, ...]:
        """Categories written for ``locale``."""
        return self.write_summary.categories_for(locale)

    @property
    def missing_count(self) -> int:
        """Number of missing translations across all locales."""
        return sum(len(entry) for entry in self.missing)


def _validate_default_locale(default_locale: LocaleCode) -> None:
    try:
        validate_locale_code(default_locale)
    except ValueError as e:
        raise ConfigurationError(ErrorTemplate.invalid_locale(default_locale, str(e))) from e


def generate_table(
    source_root: str | Path,
    default_locale: LocaleCode,
    table_path: str | Path,
) -> GenerateSummary:
    """Build a message table from the locale packages under ``source_root``.

    Args:
        source_root: Directory with one package per locale
        default_locale: Locale whose key order seeds the row order
        table_path: Output file; its extension selects CSV or XLSX

    Returns:
        Summary of the generated table

    Raises:
        ConfigurationError: Unsupported table extension, unsafe or absent
            default locale
        CatalogLoadError: A locale package cannot be loaded
        CatalogStructureError: A catalog is malformed
        OSError: The table cannot be written
    """
    table_file = Path(table_path)
    codec = codec_for_path(table_file)
    _validate_default_locale(default_locale)

    discovered = discover_locales(source_root)
    if default_locale not in discovered:
        raise ConfigurationError(ErrorTemplate.default_locale_missing(default_locale, discovered))
    # Default locale is the first column; the others follow in directory order
    locales = (default_locale, *(locale for locale in discovered if locale != default_locale))
    warn_unknown_locales(locales)

    catalogs, load_summary = load_catalogs(ModuleCatalogSource(Path(source_root)), locales)
    logger.info("Loaded %r", load_summary)

    matrix = CatalogAssembler(default_locale).build_matrix(catalogs)
    codec.write(matrix.to_table(), table_file)
    logger.info("Wrote %d row(s) to %s", len(matrix.rows), table_file)

    return GenerateSummary(
        locales=matrix.locales,
        row_count=len(matrix.rows),
        table_path=table_file,
        table_format=table_format_for_path(table_file),
        load_summary=load_summary,
    )


def parse_table(
    table_path: str | Path,
    default_locale: LocaleCode,
    output_root: str | Path,
    *,
    max_workers: int | None = None,
) -> ParseSummary:
    """Rebuild locale packages under ``output_root`` from a message table.

    ``output_root`` is replaced only after the table has been read and
    fully assembled.

    Args:
        table_path: Input file; its extension selects CSV or XLSX
        default_locale: Reference locale for missing-translation reports
        output_root: Directory to replace with one package per locale
        max_workers: Thread pool size for module writes

    Returns:
        Summary of the written packages

    Raises:
        ConfigurationError: Unsupported table extension, unsafe or absent
            default locale, unsafe output root
        TableFormatError: The table is malformed
        KeyConflictError: Two keys of one category collide
        CatalogWriteError: A category is not a valid module name
        OSError: The table cannot be read or a module cannot be written
    """
    table_file = Path(table_path)
    codec = codec_for_path(table_file)
    _validate_default_locale(default_locale)

    matrix = MessageMatrix.from_table(codec.read(table_file))
    assembler = CatalogAssembler(default_locale)
    missing = assembler.missing_translations(matrix)
    catalogs = assembler.assemble(matrix)
    warn_unknown_locales(matrix.locales)

    write_summary = ModuleCatalogWriter(output_root, max_workers=max_workers).write(catalogs)
    for entry in missing:
        logger.warning("%d missing translation(s) in locale %s", len(entry), entry.locale)

    return ParseSummary(
        locales=write_summary.locales,
        output_root=write_summary.output_root,
        missing=missing,
        write_summary=write_summary,
    )
