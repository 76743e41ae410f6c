"""Command line interface.

Two commands, each taking three values either from ``--arguments A B C`` or
from interactive prompts with defaults:

    msgtable-generate  <messages dir> <default locale> <table file>
    msgtable-parse     <table file> <default locale> <output dir>

``python -m msgtable generate|parse ...`` runs the same commands.

Exit codes:
    0 - Success
    1 - Catalog, table or file system error
    2 - Configuration error (bad arguments, unsupported table format, ...)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from msgtable.constants import (
    ARGUMENTS_FLAG,
    DEFAULT_LOCALE,
    DEFAULT_MESSAGES_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TABLE_PATH,
)
from msgtable.conversion import generate_table, parse_table
from msgtable.diagnostics import (
    CatalogError,
    ConfigurationError,
    DiagnosticFormatter,
    ErrorTemplate,
)
from msgtable.enums import OutputFormat

__all__ = ["generate_main", "main", "parse_main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2

type Prompt = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class _Question:
    text: str
    default: str

    def ask(self, prompt: Prompt) -> str:
        answer = prompt(f"{self.text}: ({self.default}) ").strip()
        return answer or self.default


@dataclass(frozen=True, slots=True)
class _Command:
    name: str
    description: str
    metavars: tuple[str, str, str]
    questions: tuple[_Question, _Question, _Question]
    run: Callable[[str, str, str], object]


_GENERATE = _Command(
    name="generate",
    description="Build a message table from per-locale message packages.",
    metavars=("MESSAGES_DIR", "DEFAULT_LOCALE", "TABLE_FILE"),
    questions=(
        _Question("Enter your messages directory path", DEFAULT_MESSAGES_PATH),
        _Question("Enter your default locale", DEFAULT_LOCALE),
        _Question("Enter your output filename", DEFAULT_TABLE_PATH),
    ),
    run=generate_table,
)

_PARSE = _Command(
    name="parse",
    description="Rebuild per-locale message packages from a message table.",
    metavars=("TABLE_FILE", "DEFAULT_LOCALE", "OUTPUT_DIR"),
    questions=(
        _Question("Enter your input message filename", DEFAULT_TABLE_PATH),
        _Question("Enter your default locale", DEFAULT_LOCALE),
        _Question("Enter your output messages path", DEFAULT_OUTPUT_PATH),
    ),
    run=parse_table,
)


def _add_options(parser: argparse.ArgumentParser, command: _Command) -> None:
    parser.add_argument(
        ARGUMENTS_FLAG,
        nargs="*",
        metavar="VALUE",
        help=f"Non-interactive values: {' '.join(command.metavars)}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v: info, -vv: debug)",
    )
    parser.add_argument(
        "--error-format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Error rendering (default: rust)",
    )


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _resolve_values(
    command: _Command, arguments: list[str] | None, prompt: Prompt
) -> tuple[str, str, str]:
    if arguments is None:
        first, second, third = (question.ask(prompt) for question in command.questions)
        return first, second, third
    if len(arguments) < 3:
        raise ConfigurationError(ErrorTemplate.too_few_arguments(len(arguments)))
    if len(arguments) > 3:
        logger.warning("Ignoring extra value(s) to %s: %s", ARGUMENTS_FLAG, arguments[3:])
    return arguments[0], arguments[1], arguments[2]


def _report(error: CatalogError, formatter: DiagnosticFormatter) -> None:
    if error.diagnostic is not None:
        print(formatter.format(error.diagnostic), file=sys.stderr)
    else:
        print(f"error: {error}", file=sys.stderr)


def _run(command: _Command, args: argparse.Namespace, prompt: Prompt) -> int:
    _configure_logging(args.verbose)
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.error_format), color=sys.stderr.isatty()
    )
    try:
        values = _resolve_values(command, args.arguments, prompt)
        summary = command.run(*values)
    except ConfigurationError as e:
        _report(e, formatter)
        return EXIT_CONFIGURATION
    except CatalogError as e:
        _report(e, formatter)
        return EXIT_FAILURE
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info("%s finished: %r", command.name, summary)
    print("Success!")
    return EXIT_OK


def _command_main(command: _Command, argv: Sequence[str] | None, prompt: Prompt) -> int:
    parser = argparse.ArgumentParser(
        prog=f"msgtable-{command.name}", description=command.description
    )
    _add_options(parser, command)
    return _run(command, parser.parse_args(argv), prompt)


def generate_main(argv: Sequence[str] | None = None, prompt: Prompt = input) -> int:
    """Entry point of ``msgtable-generate``."""
    return _command_main(_GENERATE, argv, prompt)


def parse_main(argv: Sequence[str] | None = None, prompt: Prompt = input) -> int:
    """Entry point of ``msgtable-parse``."""
    return _command_main(_PARSE, argv, prompt)


def main(argv: Sequence[str] | None = None, prompt: Prompt = input) -> int:
    """Entry point of ``python -m msgtable`` with generate/parse subcommands."""
    parser = argparse.ArgumentParser(
        prog="msgtable",
        description="Convert message catalogs to translator tables and back.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m msgtable generate --arguments ./messages zh ./messages.xlsx
  python -m msgtable parse --arguments ./messages.xlsx zh ./output-messages
""",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    commands = {command.name: command for command in (_GENERATE, _PARSE)}
    for command in commands.values():
        _add_options(
            subparsers.add_parser(command.name, description=command.description), command
        )
    args = parser.parse_args(argv)
    return _run(commands[args.command], args, prompt)


if __name__ == "__main__":
    sys.exit(main())
