"""msgtable exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
Conversion is all-or-nothing: every error here aborts the run.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CatalogError(Exception):
    """Base exception for all msgtable errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(CatalogError):
    """Invalid run configuration.

    Raised before any transformation starts: too few CLI arguments,
    a default locale absent from the catalogs, an unsafe locale identifier
    or output directory.
    """


class UnsupportedFormatError(ConfigurationError):
    """Table file extension is neither .csv nor .xlsx.

    Attributes:
        path: The offending table path
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class CatalogLoadError(CatalogError):
    """A locale catalog cannot be loaded.

    Attributes:
        path: Path of the locale package or module that failed
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class CatalogStructureError(CatalogError):
    """Malformed message tree or flat key.

    Examples:
    - A message value that is neither a string nor a mapping
    - A name that is empty or contains the key separator
    - Nesting deeper than MAX_DEPTH
    """


class KeyConflictError(CatalogStructureError):
    """Two flat keys collide on one tree path.

    Example:
        {"a.b": "x", "a.b.c": "y"} requires "a.b" to be both a message
        and a namespace.

    Attributes:
        key: The key whose insertion collided
        existing_key: The key already occupying the path
        category: Category in which the collision happened
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str,
        existing_key: str,
        category: str = "",
    ) -> None:
        """Initialize KeyConflictError.

        Args:
            message: Error message string OR Diagnostic object
            key: The key whose insertion collided
            existing_key: The key already occupying the path
            category: Category in which the collision happened
        """
        super().__init__(message)
        self.key = key
        self.existing_key = existing_key
        self.category = category


class TableFormatError(CatalogError):
    """Malformed message table.

    Attributes:
        row: 1-based row number (header is row 1), None for whole-table errors
    """

    def __init__(self, message: str | Diagnostic, *, row: int | None = None) -> None:
        super().__init__(message)
        self.row = row


class CatalogWriteError(CatalogError):
    """A parsed catalog cannot be emitted as locale modules."""
