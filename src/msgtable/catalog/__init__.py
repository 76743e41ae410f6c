"""Locale catalogs: loading, assembly and module output.

Python 3.13+.
"""

from .assembler import CatalogAssembler, LocaleCatalog, MissingTranslations
from .loading import (
    CatalogLoadResult,
    CatalogSource,
    LoadSummary,
    ModuleCatalogSource,
    discover_locales,
    load_catalogs,
)
from .writer import (
    ModuleCatalogWriter,
    WriteSummary,
    render_category_module,
    render_index_module,
    validate_category_name,
)

__all__ = [
    "CatalogAssembler",
    "CatalogLoadResult",
    "CatalogSource",
    "LoadSummary",
    "LocaleCatalog",
    "MissingTranslations",
    "ModuleCatalogSource",
    "ModuleCatalogWriter",
    "WriteSummary",
    "discover_locales",
    "load_catalogs",
    "render_category_module",
    "render_index_module",
    "validate_category_name",
]
