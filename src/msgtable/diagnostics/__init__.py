"""Diagnostic system for msgtable errors.

Provides structured error diagnostics with codes, hints and locations.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogError,
    CatalogLoadError,
    CatalogStructureError,
    CatalogWriteError,
    ConfigurationError,
    KeyConflictError,
    TableFormatError,
    UnsupportedFormatError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CatalogError",
    "CatalogLoadError",
    "CatalogStructureError",
    "CatalogWriteError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "KeyConflictError",
    "OutputFormat",
    "TableFormatError",
    "UnsupportedFormatError",
]
