"""Emit locale catalogs as importable Python packages.

Output layout for every locale:

    <output_root>/<locale>/<category>.py   messages = {...}
    <output_root>/<locale>/__init__.py     imports the categories, exports messages

Category modules are written concurrently; a locale's __init__.py is written
only once all of that locale's category modules are on disk.

Python 3.13+.
"""

from __future__ import annotations

import keyword
import logging
import shutil
import tempfile
from collections.abc import Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from msgtable.constants import EXPORT_NAME, INDEX_MODULE, MODULE_EXTENSION
from msgtable.core.depth_guard import DepthGuard
from msgtable.diagnostics import CatalogWriteError, ConfigurationError, ErrorTemplate
from msgtable.locale_utils import validate_locale_code
from msgtable.tree import Leaf, MessageTree, Namespace
from msgtable.types import CategoryName, LocaleCode

from .assembler import LocaleCatalog

__all__ = [
    "ModuleCatalogWriter",
    "WriteSummary",
    "render_category_module",
    "render_index_module",
    "validate_category_name",
]

logger = logging.getLogger(__name__)

_INDENT = "    "
_HEADER = "# Generated by msgtable. Edit the message table instead of this file."


def validate_category_name(category: CategoryName) -> None:
    """Check that ``category`` can be a module and variable name.

    Raises:
        CatalogWriteError: If it is not an identifier, is a keyword or is a
            dunder name
    """
    if (
        not category.isidentifier()
        or keyword.iskeyword(category)
        or (category.startswith("__") and category.endswith("__"))
    ):
        raise CatalogWriteError(ErrorTemplate.invalid_category_name(category))


def render_category_module(tree: MessageTree) -> str:
    """Source of a category module defining ``messages`` as a dict literal.

    Example:
        >>> print(render_category_module(Namespace.from_mapping({"a": {"b": "x"}})), end="")
        # Generated by msgtable. Edit the message table instead of this file.
        messages = {
            'a': {
                'b': 'x',
            },
        }
    """
    lines = [_HEADER, f"{EXPORT_NAME} = {{"]
    _render_namespace(lines, tree, DepthGuard())
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render_namespace(lines: list[str], namespace: Namespace, guard: DepthGuard) -> None:
    with guard:
        indent = _INDENT * guard.level
        for name, node in namespace.entries:
            match node:
                case Leaf(value=value):
                    lines.append(f"{indent}{name!r}: {value!r},")
                case Namespace():
                    lines.append(f"{indent}{name!r}: {{")
                    _render_namespace(lines, node, guard)
                    lines.append(f"{indent}}},")


def render_index_module(categories: Sequence[CategoryName]) -> str:
    """Source of a locale's __init__.py re-exporting ``categories``.

    Example:
        >>> print(render_index_module(["auth"]), end="")
        # Generated by msgtable. Edit the message table instead of this file.
        from .auth import messages as auth
        <BLANKLINE>
        messages = {
            'auth': auth,
        }
    """
    lines = [_HEADER]
    lines.extend(f"from .{category} import {EXPORT_NAME} as {category}" for category in categories)
    if categories:
        lines.append("")
        lines.append(f"{EXPORT_NAME} = {{")
        lines.extend(f"{_INDENT}{category!r}: {category}," for category in categories)
        lines.append("}")
    else:
        lines.append(f"{EXPORT_NAME} = {{}}")
    return "\n".join(lines) + "\n"


@dataclass(frozen=True, slots=True)
class WriteSummary:
    """Outcome of writing catalogs.

    Attributes:
        output_root: Directory that was replaced
        categories: (locale, written categories) pairs in locale order
        files: Every file written, index modules included
    """

    output_root: Path
    categories: tuple[tuple[LocaleCode, tuple[CategoryName, ...]], ...]
    files: tuple[Path, ...]

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales written, one directory each."""
        return tuple(locale for locale, _names in self.categories)

    @property
    def file_count(self) -> int:
        """Number of files written."""
        return len(self.files)

    def categories_for(self, locale: LocaleCode) -> tuple[CategoryName, ...]:
        """Categories written for ``locale`` (empty if none or unknown)."""
        for name, written in self.categories:
            if name == locale:
                return written
        return ()


class ModuleCatalogWriter:
    """Writes LocaleCatalogs as Python packages under ``output_root``.

    The output root is replaced as a whole by a freshly written directory.
    Replacing the filesystem root, the working directory or one of its
    parents is refused.

    Args:
        output_root: Directory receiving one package per locale
        max_workers: Thread pool size for category writes (executor default
            when None)
    """

    __slots__ = ("max_workers", "output_root")

    def __init__(self, output_root: str | Path, *, max_workers: int | None = None) -> None:
        self.output_root = Path(output_root)
        self.max_workers = max_workers

    def __repr__(self) -> str:
        return f"ModuleCatalogWriter(output_root={str(self.output_root)!r})"

    def write(self, catalogs: Iterable[LocaleCatalog]) -> WriteSummary:
        """Replace the output root with one package per catalog.

        Every locale code and category name is validated before anything is
        written. Packages are written into a staging directory next to the
        output root, which replaces the output root only once every module
        is on disk; a failed write leaves the previous output untouched.

        Raises:
            ConfigurationError: If the output root is unsafe to replace or a
                locale code is unsafe as a directory name
            CatalogWriteError: If a category name is not a valid module name
            OSError: If a file or directory cannot be written
        """
        batch = tuple(catalogs)
        for catalog in batch:
            try:
                validate_locale_code(catalog.locale)
            except ValueError as e:
                raise ConfigurationError(
                    ErrorTemplate.invalid_locale(catalog.locale, str(e))
                ) from e
            for category in catalog.names:
                validate_category_name(category)
        self._check_output_root()

        self.output_root.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(
            tempfile.mkdtemp(prefix=f".{self.output_root.name}-", dir=self.output_root.parent)
        )
        try:
            written, files = self._write_packages(staging, batch)
            self._replace_output_root(staging)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        logger.info(
            "Wrote %d locale package(s), %d file(s) to %s",
            len(written),
            len(files),
            self.output_root,
        )
        return WriteSummary(
            output_root=self.output_root,
            categories=tuple(written),
            files=tuple(self.output_root / relative for relative in files),
        )

    def _write_packages(
        self, staging: Path, batch: tuple[LocaleCatalog, ...]
    ) -> tuple[list[tuple[LocaleCode, tuple[CategoryName, ...]]], list[Path]]:
        for catalog in batch:
            (staging / catalog.locale).mkdir()

        files: list[Path] = []
        written: list[tuple[LocaleCode, tuple[CategoryName, ...]]] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            pending: list[tuple[LocaleCatalog, list[tuple[CategoryName, Future[Path]]]]] = []
            for catalog in batch:
                futures = [
                    (
                        category,
                        executor.submit(
                            _write_module,
                            staging,
                            Path(catalog.locale, f"{category}{MODULE_EXTENSION}"),
                            render_category_module(tree),
                        ),
                    )
                    for category, tree in catalog.categories
                ]
                pending.append((catalog, futures))

            for catalog, futures in pending:
                categories = tuple(category for category, _future in futures)
                files.extend(future.result() for _category, future in futures)
                files.append(
                    _write_module(
                        staging,
                        Path(catalog.locale, INDEX_MODULE),
                        render_index_module(categories),
                    )
                )
                written.append((catalog.locale, categories))
                logger.debug("Wrote %s with %d categor(ies)", catalog.locale, len(categories))
        return written, files

    def _check_output_root(self) -> None:
        resolved = self.output_root.resolve()
        cwd = Path.cwd().resolve()
        if resolved == Path(resolved.anchor) or resolved == cwd or resolved in cwd.parents:
            raise ConfigurationError(ErrorTemplate.unsafe_output_root(str(self.output_root)))

    def _replace_output_root(self, staging: Path) -> None:
        if self.output_root.is_dir() and not self.output_root.is_symlink():
            shutil.rmtree(self.output_root)
        elif self.output_root.exists() or self.output_root.is_symlink():
            self.output_root.unlink()
        staging.rename(self.output_root)
        logger.debug("Moved %s to %s", staging, self.output_root)


def _write_module(staging: Path, relative: Path, source: str) -> Path:
    (staging / relative).write_text(source, encoding="utf-8")
    logger.debug("Wrote %s", relative)
    return relative
