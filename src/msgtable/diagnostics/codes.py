"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
msgtable exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (bad arguments, formats, locales)
        2000-2999: Load errors (locale catalogs that cannot be imported)
        3000-3999: Structure errors (malformed trees, key conflicts)
        4000-4999: Table errors (malformed header or rows)
        5000-5999: Write errors (catalogs that cannot be emitted)
    """

    # Configuration errors (1000-1999)
    UNSUPPORTED_TABLE_FORMAT = 1001
    TOO_FEW_ARGUMENTS = 1002
    DEFAULT_LOCALE_MISSING = 1003
    INVALID_LOCALE = 1004
    UNSAFE_OUTPUT_ROOT = 1005

    # Load errors (2000-2999)
    CATALOG_ROOT_NOT_FOUND = 2001
    CATALOG_NOT_FOUND = 2002
    CATALOG_IMPORT_FAILED = 2003
    CATALOG_EXPORT_MISSING = 2004
    CATALOG_INVALID = 2005

    # Structure errors (3000-3999)
    KEY_CONFLICT = 3001
    INVALID_NODE = 3002
    INVALID_KEY = 3003
    NESTING_DEPTH_EXCEEDED = 3004

    # Table errors (4000-4999)
    TABLE_EMPTY = 4001
    TABLE_HEADER_INVALID = 4002
    TABLE_ROW_INVALID = 4003
    TABLE_UNREADABLE = 4004

    # Write errors (5000-5999)
    INVALID_CATEGORY_NAME = 5001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A coded error message with an optional location and fix hint.

    Attributes:
        code: Diagnostic code
        message: One-line description shown to the user
        hint: How to fix the problem, if there is a useful suggestion
        location: Where the error happened (file path, "row 7", ...)
        severity: "error" aborts the run; "warning" is informational
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Render in the default (rust) style.

        Example output:
            error[KEY_CONFLICT]: Conflict Key Error: a.b.c in auth (collides with a.b)
              --> auth
              = help: A path cannot hold both a message and nested messages
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
