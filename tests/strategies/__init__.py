"""Hypothesis strategies for msgtable property-based testing.

Usage:
    from tests.strategies import message_trees, locale_catalog_sets
    from tests.strategies.trees import InMemoryCatalogSource
"""

from .trees import (
    InMemoryCatalogSource,
    PackageWriter,
    category_names,
    locale_catalog_sets,
    message_texts,
    message_trees,
    tree_names,
)

__all__ = [
    "InMemoryCatalogSource",
    "PackageWriter",
    "category_names",
    "locale_catalog_sets",
    "message_texts",
    "message_trees",
    "tree_names",
]
