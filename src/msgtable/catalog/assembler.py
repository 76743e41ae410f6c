"""Locale catalogs and their conversion to and from the message matrix.

CatalogAssembler is the seam between whole-locale catalogs and the
transformation engine:

    generate:  LocaleCatalog... -> flatten -> merge_key_orders -> build_matrix
    parse:     MessageMatrix -> group by (locale, category) -> unflatten

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from msgtable.diagnostics import CatalogStructureError, ConfigurationError, ErrorTemplate
from msgtable.transform import (
    MessageMatrix,
    build_matrix,
    flatten,
    merge_key_orders,
    unflatten,
)
from msgtable.transform.flattener import validate_name
from msgtable.tree import MessageTree, Namespace, count_messages
from msgtable.types import CategoryName, FlatKey, LocaleCode

__all__ = ["CatalogAssembler", "LocaleCatalog", "MissingTranslations"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleCatalog:
    """All categories of one locale.

    Attributes:
        locale: Locale code
        categories: (category, tree) pairs in category order
    """

    locale: LocaleCode
    categories: tuple[tuple[CategoryName, MessageTree], ...] = ()

    def __post_init__(self) -> None:
        """Validate that category names are unique."""
        names = self.names
        if len(set(names)) != len(names):
            msg = f"Duplicate category in locale {self.locale!r}: {names!r}"
            raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self) -> Iterator[tuple[CategoryName, MessageTree]]:
        return iter(self.categories)

    @property
    def names(self) -> tuple[CategoryName, ...]:
        """Category names in order."""
        return tuple(name for name, _tree in self.categories)

    @property
    def message_count(self) -> int:
        """Number of messages across all categories."""
        return sum(count_messages(tree) for _name, tree in self.categories)

    def get(self, category: CategoryName) -> MessageTree | None:
        """Tree of ``category``, or None."""
        for name, tree in self.categories:
            if name == category:
                return tree
        return None

    def to_dict(self) -> dict[CategoryName, dict[str, Any]]:
        """Plain nested dicts keyed by category."""
        return {name: tree.to_dict() for name, tree in self.categories}

    @classmethod
    def from_mapping(cls, locale: LocaleCode, mapping: Mapping[str, Any]) -> LocaleCatalog:
        """Build a catalog from ``{category: nested mapping}``.

        Raises:
            CatalogStructureError: If a category is not a mapping or any tree
                is malformed
        """
        categories: list[tuple[CategoryName, MessageTree]] = []
        for name, value in mapping.items():
            if not isinstance(name, str):
                raise CatalogStructureError(
                    ErrorTemplate.invalid_key(repr(name), "category names must be strings")
                )
            match value:
                case Namespace():
                    categories.append((name, value))
                case Mapping():
                    categories.append((name, Namespace.from_mapping(value)))
                case _:
                    raise CatalogStructureError(
                        ErrorTemplate.invalid_node(name, type(value).__name__)
                    )
        return cls(locale=locale, categories=tuple(categories))


@dataclass(frozen=True, slots=True)
class MissingTranslations:
    """Keys the default locale has but ``locale`` lacks.

    Attributes:
        locale: The incomplete locale
        keys: Flat keys without a value, in row order
    """

    locale: LocaleCode
    keys: tuple[FlatKey, ...]

    def __len__(self) -> int:
        return len(self.keys)


class CatalogAssembler:
    """Converts locale catalogs to a matrix and back.

    Args:
        default_locale: Locale whose key order seeds the merged order and
            against which missing translations are reported
    """

    __slots__ = ("default_locale",)

    def __init__(self, default_locale: LocaleCode) -> None:
        self.default_locale = default_locale

    def __repr__(self) -> str:
        return f"CatalogAssembler(default_locale={self.default_locale!r})"

    @staticmethod
    def flatten_catalog(catalog: LocaleCatalog) -> dict[FlatKey, str]:
        """Flatten every category with its name as prefix, in category order.

        Raises:
            CatalogStructureError: If a category name is empty or contains the
                key separator, or a tree has an invalid name
        """
        flat: dict[FlatKey, str] = {}
        for category, tree in catalog.categories:
            validate_name(category)
            entries = flatten(tree, category)
            logger.debug(
                "Flattened %s/%s: %d message(s)", catalog.locale, category, len(entries)
            )
            flat.update(entries)
        return flat

    def build_matrix(self, catalogs: Iterable[LocaleCatalog]) -> MessageMatrix:
        """Flatten ``catalogs`` (in locale order) and build the message matrix.

        Raises:
            ConfigurationError: If no catalog belongs to the default locale
            CatalogStructureError: If a tree has an invalid name
        """
        flat_by_locale = {catalog.locale: self.flatten_catalog(catalog) for catalog in catalogs}
        key_order = merge_key_orders(
            {locale: list(flat) for locale, flat in flat_by_locale.items()},
            self.default_locale,
        )
        return build_matrix(key_order, flat_by_locale)

    def assemble(self, matrix: MessageMatrix) -> tuple[LocaleCatalog, ...]:
        """Rebuild one catalog per matrix locale.

        Categories keep their first-appearance order in the matrix; a
        category without any value for a locale is left out of that
        locale's catalog.

        Raises:
            KeyConflictError: If two keys of one category collide
            CatalogStructureError: If a key has an empty path segment
        """
        categories = matrix.categories
        catalogs: list[LocaleCatalog] = []
        for index, locale in enumerate(matrix.locales):
            trees: list[tuple[CategoryName, MessageTree]] = []
            for category in categories:
                entries = [
                    (row.key, row.values[index])
                    for row in matrix.rows
                    if row.category == category and row.values[index]
                ]
                if entries:
                    trees.append((category, unflatten(entries, category=category)))
            catalog = LocaleCatalog(locale=locale, categories=tuple(trees))
            logger.debug(
                "Assembled %s: %d categor(ies), %d message(s)",
                locale,
                len(catalog),
                catalog.message_count,
            )
            catalogs.append(catalog)
        return tuple(catalogs)

    def missing_translations(self, matrix: MessageMatrix) -> tuple[MissingTranslations, ...]:
        """Keys translated in the default locale but empty in another locale.

        Only locales with at least one missing key are reported.

        Raises:
            ConfigurationError: If the default locale is not a matrix column
        """
        if self.default_locale not in matrix.locales:
            raise ConfigurationError(
                ErrorTemplate.default_locale_missing(self.default_locale, matrix.locales)
            )
        default_index = matrix.locales.index(self.default_locale)
        report: list[MissingTranslations] = []
        for index, locale in enumerate(matrix.locales):
            if index == default_index:
                continue
            keys = tuple(
                row.flat_key
                for row in matrix.rows
                if row.values[default_index] and not row.values[index]
            )
            if keys:
                report.append(MissingTranslations(locale=locale, keys=keys))
        return tuple(report)
