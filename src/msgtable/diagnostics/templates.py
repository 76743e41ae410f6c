"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def unsupported_table_format(path: str) -> Diagnostic:
        """Table file extension is not recognized.

        Args:
            path: The table path as given by the user

        Returns:
            Diagnostic for UNSUPPORTED_TABLE_FORMAT
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_TABLE_FORMAT,
            message=f"Unknown file type: {path}",
            hint="Use a .csv or .xlsx file name",
            location=path,
        )

    @staticmethod
    def too_few_arguments(count: int) -> Diagnostic:
        """Fewer than three values followed --arguments.

        Args:
            count: Number of values actually passed

        Returns:
            Diagnostic for TOO_FEW_ARGUMENTS
        """
        return Diagnostic(
            code=DiagnosticCode.TOO_FEW_ARGUMENTS,
            message=f"Too few arguments to --arguments, {count} passed in",
            hint="Pass exactly three values, or omit --arguments to be prompted",
        )

    @staticmethod
    def default_locale_missing(locale: str, available: Iterable[str]) -> Diagnostic:
        """Default locale is not among the loaded catalogs.

        Args:
            locale: The requested default locale
            available: Locales that were found

        Returns:
            Diagnostic for DEFAULT_LOCALE_MISSING
        """
        found = ", ".join(available) or "none"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_LOCALE_MISSING,
            message=f"Default locale '{locale}' not found (available: {found})",
            hint="The default locale seeds the key order and must have a catalog",
        )

    @staticmethod
    def invalid_locale(locale: str, reason: str) -> Diagnostic:
        """Locale identifier cannot be used as a directory name.

        Args:
            locale: The offending identifier
            reason: Why it was rejected

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=f"Invalid locale {locale!r}: {reason}",
        )

    @staticmethod
    def unsafe_output_root(path: str) -> Diagnostic:
        """Output root would remove the working directory or a parent of it.

        Args:
            path: Resolved output root

        Returns:
            Diagnostic for UNSAFE_OUTPUT_ROOT
        """
        return Diagnostic(
            code=DiagnosticCode.UNSAFE_OUTPUT_ROOT,
            message=f"Refusing to replace output directory: {path}",
            hint="The output directory is deleted first; choose a dedicated directory",
            location=path,
        )

    # ------------------------------------------------------------------
    # Load errors
    # ------------------------------------------------------------------

    @staticmethod
    def catalog_root_not_found(path: str) -> Diagnostic:
        """Messages root directory does not exist.

        Args:
            path: The root path

        Returns:
            Diagnostic for CATALOG_ROOT_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_ROOT_NOT_FOUND,
            message=f"Messages directory not found: {path}",
            location=path,
        )

    @staticmethod
    def catalog_not_found(path: str) -> Diagnostic:
        """Locale entry is not an importable package.

        Args:
            path: Path of the locale entry

        Returns:
            Diagnostic for CATALOG_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_NOT_FOUND,
            message=f"Unknown filename: {path}",
            hint="Each locale directory needs an __init__.py exporting 'messages'",
            location=path,
        )

    @staticmethod
    def catalog_import_failed(path: str, error: BaseException) -> Diagnostic:
        """Importing a locale package raised.

        Args:
            path: Path of the locale package
            error: The exception raised while importing

        Returns:
            Diagnostic for CATALOG_IMPORT_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_IMPORT_FAILED,
            message=f"Cannot import {path}: {type(error).__name__}: {error}",
            location=path,
        )

    @staticmethod
    def catalog_export_missing(path: str, name: str) -> Diagnostic:
        """Locale package has no export with the expected name.

        Args:
            path: Path of the locale package
            name: The expected module attribute

        Returns:
            Diagnostic for CATALOG_EXPORT_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_EXPORT_MISSING,
            message=f"{path} does not define '{name}'",
            hint=f"Define '{name}' as a mapping of category name to messages",
            location=path,
        )

    @staticmethod
    def catalog_invalid(path: str, reason: str) -> Diagnostic:
        """Locale package exports something that is not a valid catalog.

        Args:
            path: Path of the locale package
            reason: What is wrong with the export

        Returns:
            Diagnostic for CATALOG_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_INVALID,
            message=f"Invalid catalog in {path}: {reason}",
            location=path,
        )

    # ------------------------------------------------------------------
    # Structure errors
    # ------------------------------------------------------------------

    @staticmethod
    def key_conflict(key: str, existing_key: str, category: str) -> Diagnostic:
        """Two flat keys collide on one tree path.

        Args:
            key: The key being inserted
            existing_key: The key already occupying the path
            category: Category of both keys

        Returns:
            Diagnostic for KEY_CONFLICT
        """
        return Diagnostic(
            code=DiagnosticCode.KEY_CONFLICT,
            message=f"Conflict Key Error: {key} in {category} (collides with {existing_key})",
            hint="A path cannot hold both a message and nested messages",
            location=category or None,
        )

    @staticmethod
    def invalid_node(path: str, type_name: str) -> Diagnostic:
        """Tree value is neither a string nor a mapping.

        Args:
            path: Dotted path of the value
            type_name: Type of the offending value

        Returns:
            Diagnostic for INVALID_NODE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_NODE,
            message=f"Value at '{path}' must be a string or a mapping, got {type_name}",
        )

    @staticmethod
    def invalid_key(key: str, reason: str) -> Diagnostic:
        """Name or flat key cannot be represented.

        Args:
            key: The offending key
            reason: Why it was rejected

        Returns:
            Diagnostic for INVALID_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=f"Invalid key {key!r}: {reason}",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Message tree nesting exceeded the limit.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=f"Maximum nesting depth ({max_depth}) exceeded",
        )

    # ------------------------------------------------------------------
    # Table errors
    # ------------------------------------------------------------------

    @staticmethod
    def table_empty() -> Diagnostic:
        """Table has no header row.

        Returns:
            Diagnostic for TABLE_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_EMPTY,
            message="Table is empty",
            hint="The first row must be: category, key, <locale>...",
        )

    @staticmethod
    def table_header_invalid(reason: str) -> Diagnostic:
        """Header row is malformed.

        Args:
            reason: What is wrong with the header

        Returns:
            Diagnostic for TABLE_HEADER_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_HEADER_INVALID,
            message=f"Invalid header row: {reason}",
            hint="The first row must be: category, key, <locale>...",
            location="row 1",
        )

    @staticmethod
    def table_row_invalid(row: int, reason: str) -> Diagnostic:
        """Data row is malformed.

        Args:
            row: 1-based row number
            reason: What is wrong with the row

        Returns:
            Diagnostic for TABLE_ROW_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_ROW_INVALID,
            message=f"Invalid row {row}: {reason}",
            location=f"row {row}",
        )

    @staticmethod
    def table_unreadable(path: str, error: BaseException) -> Diagnostic:
        """Table file cannot be decoded.

        Args:
            path: Table path
            error: Decoder exception

        Returns:
            Diagnostic for TABLE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_UNREADABLE,
            message=f"Cannot read table {path}: {error}",
            location=path,
        )

    # ------------------------------------------------------------------
    # Write errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_category_name(category: str) -> Diagnostic:
        """Category cannot become a module name.

        Args:
            category: The offending category

        Returns:
            Diagnostic for INVALID_CATEGORY_NAME
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_CATEGORY_NAME,
            message=f"Category {category!r} is not a valid module name",
            hint="Categories must be Python identifiers that are not keywords",
        )
