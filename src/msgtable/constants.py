"""Shared constants for msgtable.

Centralizes the defaults and fixed names used by the transformation engine,
the catalog loader/writer and the CLI. Placing them here avoids circular
imports between the transform, table and catalog packages.

Constants are grouped by domain:
- Depth limits: Recursion protection for tree traversal
- Table layout: Header column names and key separator
- Catalog modules: Names used when loading and emitting locale packages
- CLI defaults: Values offered by the interactive prompts

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Table layout
    "CATEGORY_COLUMN",
    "KEY_COLUMN",
    "KEY_SEPARATOR",
    "SHEET_NAME",
    # Catalog modules
    "EXPORT_NAME",
    "MODULE_EXTENSION",
    "INDEX_MODULE",
    "IGNORED_LOCALE_ENTRIES",
    # CLI defaults
    "ARGUMENTS_FLAG",
    "DEFAULT_LOCALE",
    "DEFAULT_MESSAGES_PATH",
    "DEFAULT_TABLE_PATH",
    "DEFAULT_OUTPUT_PATH",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth of a message tree.
# Used by: Namespace.from_mapping, flatten, unflatten.
# Real catalogs rarely nest deeper than 5 levels; 100 keeps every recursive
# walk far below the interpreter recursion limit.
MAX_DEPTH: int = 100

# ============================================================================
# TABLE LAYOUT
# ============================================================================

CATEGORY_COLUMN: str = "category"
KEY_COLUMN: str = "key"

# Joins path segments into flat keys: ("inputs", "email") -> "inputs.email"
KEY_SEPARATOR: str = "."

# Name of the single worksheet written to .xlsx tables
SHEET_NAME: str = "sheet1"

# ============================================================================
# CATALOG MODULES
# ============================================================================

# Module-level name holding the nested mapping in category and index modules
EXPORT_NAME: str = "messages"

MODULE_EXTENSION: str = ".py"

# Aggregating module of a locale package
INDEX_MODULE: str = "__init__.py"

# Names under a catalog root that are never locales (besides dotted names)
IGNORED_LOCALE_ENTRIES: frozenset[str] = frozenset({"__pycache__"})

# ============================================================================
# CLI DEFAULTS
# ============================================================================

ARGUMENTS_FLAG: str = "--arguments"
DEFAULT_LOCALE: str = "zh"
DEFAULT_MESSAGES_PATH: str = "./messages"
DEFAULT_TABLE_PATH: str = "./output-messages.xlsx"
DEFAULT_OUTPUT_PATH: str = "./output-messages"
