"""msgtable - Convert localization message catalogs to translator tables and back.

Per-locale catalogs are directories of importable Python modules holding
nested message mappings; tables are CSV or XLSX files with one row per
message key and one column per locale.

Public API:
    generate_table - Catalog directory -> table file
    parse_table - Table file -> catalog directory
    flatten / unflatten - Tree <-> flat dotted keys
    merge_key_orders - Positional merge of per-locale key orders
    build_matrix / MessageMatrix - Flat keys <-> table rows
    Leaf / Namespace - Message tree nodes

Exceptions:
    CatalogError - Base exception class
    ConfigurationError - Invalid run configuration
    KeyConflictError - Colliding keys while rebuilding a tree

Submodules:
    msgtable.catalog - Catalog sources, assembler and module writer
    msgtable.table - CSV and XLSX codecs
    msgtable.diagnostics - Error types, codes and formatting
    msgtable.cli - Command line entry points
"""

from .conversion import GenerateSummary, ParseSummary, generate_table, parse_table
from .diagnostics import (
    CatalogError,
    CatalogLoadError,
    CatalogStructureError,
    CatalogWriteError,
    ConfigurationError,
    KeyConflictError,
    TableFormatError,
    UnsupportedFormatError,
)
from .transform import MessageMatrix, build_matrix, flatten, merge_key_orders, unflatten
from .tree import Leaf, MessageTree, Namespace

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("msgtable")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "CatalogLoadError",
    "CatalogStructureError",
    "CatalogWriteError",
    "ConfigurationError",
    "GenerateSummary",
    "KeyConflictError",
    "Leaf",
    "MessageMatrix",
    "MessageTree",
    "Namespace",
    "ParseSummary",
    "TableFormatError",
    "UnsupportedFormatError",
    "__version__",
    "build_matrix",
    "flatten",
    "generate_table",
    "merge_key_orders",
    "parse_table",
    "unflatten",
]
