"""Rendering of diagnostics for the command line.

Three styles, selected with ``--error-format``:

    rust    error[KEY_CONFLICT]: ... / --> location / = help: ...
    simple  KEY_CONFLICT: ...
    json    one JSON object per diagnostic

Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass

from msgtable.enums import OutputFormat

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns a Diagnostic into text for stderr.

    Attributes:
        output_format: Rendering style
        color: Wrap the severity in ANSI colors (rust style only)

    Example:
        >>> from msgtable.diagnostics import ErrorTemplate
        >>> print(DiagnosticFormatter().format(ErrorTemplate.unsupported_table_format("a.txt")))
        error[UNSUPPORTED_TABLE_FORMAT]: Unknown file type: a.txt
          --> a.txt
          = help: Use a .csv or .xlsx file name
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Render ``diagnostic`` in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {diagnostic.message}"
            case OutputFormat.JSON:
                return json.dumps(_as_record(diagnostic), ensure_ascii=False)

    def _rust(self, diagnostic: Diagnostic) -> str:
        severity: str = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_ANSI_RESET}"
        lines = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.location:
            lines.append(f"  --> {diagnostic.location}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)


def _as_record(diagnostic: Diagnostic) -> dict[str, str | int]:
    record: dict[str, str | int] = {
        "code": diagnostic.code.name,
        "code_value": diagnostic.code.value,
        "message": diagnostic.message,
        "severity": diagnostic.severity,
    }
    if diagnostic.location:
        record["location"] = diagnostic.location
    if diagnostic.hint:
        record["hint"] = diagnostic.hint
    return record
