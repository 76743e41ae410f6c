"""Catalog loading infrastructure.

Provides the protocol for catalog sources, the importable-module
implementation used by the CLI, locale discovery, and result/summary data
structures for tracking load attempts.

Components:
    CatalogSource - Protocol for loading one locale's catalog
    ModuleCatalogSource - Imports <root>/<locale>/__init__.py from disk
    discover_locales - Locale directories under a catalog root
    CatalogLoadResult - Immutable record of one loaded locale
    LoadSummary - Immutable aggregate of all load results

Python 3.13+.
"""

from __future__ import annotations

import importlib.util
import itertools
import logging
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from msgtable.constants import EXPORT_NAME, IGNORED_LOCALE_ENTRIES, INDEX_MODULE
from msgtable.diagnostics import CatalogLoadError, ConfigurationError, ErrorTemplate
from msgtable.locale_utils import validate_locale_code
from msgtable.types import LocaleCode

from .assembler import LocaleCatalog

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogSource",
    # Concrete source
    "ModuleCatalogSource",
    "discover_locales",
    "load_catalogs",
    # Load result types
    "CatalogLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)

# Unique names keep concurrently loaded locale packages apart in sys.modules
_module_ids = itertools.count()


class CatalogSource(Protocol):
    """Protocol for loading the catalog of one locale.

    This is a Protocol (structural typing) rather than ABC so that tests and
    callers can supply any object with matching methods, e.g. an in-memory
    source.

    Example:
        >>> class DictSource:
        ...     def __init__(self, data: dict[str, dict]) -> None:
        ...         self.data = data
        ...     def load(self, locale: str) -> LocaleCatalog:
        ...         return LocaleCatalog.from_mapping(locale, self.data[locale])
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"<memory>/{locale}"
    """

    def load(self, locale: LocaleCode) -> LocaleCatalog:
        """Load the catalog of ``locale``.

        Raises:
            CatalogLoadError: If the catalog cannot be loaded
            CatalogStructureError: If the loaded data is not a valid catalog
        """
        ...

    def describe_path(self, locale: LocaleCode) -> str:
        """Return human-readable path for diagnostics.

        Default implementation returns the locale itself.
        """
        return locale


def discover_locales(root: str | Path) -> tuple[LocaleCode, ...]:
    """Locale directories under a catalog root, sorted by name.

    Names containing a dot (hidden entries, stray files) and IGNORED_LOCALE_ENTRIES
    are skipped; plain files are never locales.

    Raises:
        CatalogLoadError: If ``root`` is not a directory
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise CatalogLoadError(
            ErrorTemplate.catalog_root_not_found(str(root_path)), path=str(root_path)
        )
    locales = tuple(
        sorted(
            entry.name
            for entry in root_path.iterdir()
            if entry.is_dir()
            and "." not in entry.name
            and entry.name not in IGNORED_LOCALE_ENTRIES
        )
    )
    logger.info("Discovered %d locale(s) in %s: %s", len(locales), root_path, ", ".join(locales))
    return locales


@dataclass(frozen=True, slots=True)
class ModuleCatalogSource:
    """Loads locale packages of importable Python modules.

    A locale package is ``<root>/<locale>/__init__.py`` whose ``messages``
    attribute maps category names to nested message mappings, usually by
    importing sibling ``<category>.py`` modules with relative imports.

    Each package is imported from its file path under a private module name
    and removed from ``sys.modules`` afterwards, so loading never depends on
    or pollutes the import path.

    Security:
        Locale codes containing path separators or ".." are rejected before
        any path is built.

    Attributes:
        root: Catalog root directory
        export_name: Module attribute holding the catalog mapping
    """

    root: Path
    export_name: str = EXPORT_NAME

    def describe_path(self, locale: LocaleCode) -> str:
        """Path of the locale's index module."""
        return str(Path(self.root) / locale / INDEX_MODULE)

    def load(self, locale: LocaleCode) -> LocaleCatalog:
        """Import the locale package and convert its export.

        Raises:
            ConfigurationError: If ``locale`` is not a safe identifier
            CatalogLoadError: If the package is missing, fails to import or
                does not export a mapping
            CatalogStructureError: If the exported mapping is malformed
        """
        try:
            validate_locale_code(locale)
        except ValueError as e:
            raise ConfigurationError(ErrorTemplate.invalid_locale(locale, str(e))) from e

        index_path = Path(self.root) / locale / INDEX_MODULE
        path = str(index_path)
        if not index_path.is_file():
            raise CatalogLoadError(ErrorTemplate.catalog_not_found(path), path=path)

        module_name = f"_msgtable_catalog_{next(_module_ids)}"
        spec = importlib.util.spec_from_file_location(
            module_name, index_path, submodule_search_locations=[str(index_path.parent)]
        )
        if spec is None or spec.loader is None:
            raise CatalogLoadError(
                ErrorTemplate.catalog_invalid(path, "not an importable module"), path=path
            )
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise CatalogLoadError(ErrorTemplate.catalog_import_failed(path, e), path=path) from e
        finally:
            _forget_module(module_name)

        if not hasattr(module, self.export_name):
            raise CatalogLoadError(
                ErrorTemplate.catalog_export_missing(path, self.export_name), path=path
            )
        exported = getattr(module, self.export_name)
        if not isinstance(exported, Mapping):
            raise CatalogLoadError(
                ErrorTemplate.catalog_invalid(
                    path, f"'{self.export_name}' is {type(exported).__name__}, not a mapping"
                ),
                path=path,
            )
        return LocaleCatalog.from_mapping(locale, exported)


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading one locale catalog.

    Attributes:
        locale: Locale code
        source_path: Human-readable path of the catalog
        category_count: Number of categories loaded
        message_count: Number of messages across all categories
    """

    locale: LocaleCode
    source_path: str
    category_count: int
    message_count: int


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of catalog load results.

    Attributes:
        results: One result per loaded locale, in load order
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(locales={self.total_locales}, "
            f"categories={self.total_categories}, "
            f"messages={self.total_messages})"
        )

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Loaded locales in load order."""
        return tuple(r.locale for r in self.results)

    @property
    def total_locales(self) -> int:
        """Number of loaded locales."""
        return len(self.results)

    @property
    def total_categories(self) -> int:
        """Number of categories across all locales."""
        return sum(r.category_count for r in self.results)

    @property
    def total_messages(self) -> int:
        """Number of messages across all locales."""
        return sum(r.message_count for r in self.results)

    def get_by_locale(self, locale: LocaleCode) -> CatalogLoadResult | None:
        """Result for ``locale``, or None if it was not loaded."""
        for result in self.results:
            if result.locale == locale:
                return result
        return None


def load_catalogs(
    source: CatalogSource, locales: Iterable[LocaleCode]
) -> tuple[tuple[LocaleCatalog, ...], LoadSummary]:
    """Load every locale from ``source`` in the given order.

    The first failure propagates; there are no partial results.

    Returns:
        The catalogs and a summary of what was loaded
    """
    catalogs: list[LocaleCatalog] = []
    results: list[CatalogLoadResult] = []
    for locale in locales:
        catalog = source.load(locale)
        result = CatalogLoadResult(
            locale=locale,
            source_path=source.describe_path(locale),
            category_count=len(catalog),
            message_count=catalog.message_count,
        )
        logger.debug(
            "Loaded %s from %s: %d categor(ies), %d message(s)",
            locale,
            result.source_path,
            result.category_count,
            result.message_count,
        )
        catalogs.append(catalog)
        results.append(result)
    return tuple(catalogs), LoadSummary(results=tuple(results))


def _forget_module(module_name: str) -> None:
    prefix = f"{module_name}."
    for name in [n for n in sys.modules if n == module_name or n.startswith(prefix)]:
        del sys.modules[name]
