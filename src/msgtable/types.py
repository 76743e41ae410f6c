"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout msgtable and by user code
when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CategoryName",
    "FlatKey",
    "LocaleCode",
    "Table",
]

type LocaleCode = str
"""Locale identifier as used for directory and column names (e.g., 'zh', 'jp')."""

type CategoryName = str
"""Top-level message grouping within a locale (e.g., 'auth')."""

type FlatKey = str
"""Dot-joined path of one message (e.g., 'auth.inputs.email')."""

type Table = list[list[str]]
"""Rows of cell strings; the first row is the header."""
