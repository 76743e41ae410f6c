"""Rebuild message trees from flat keys, detecting structural conflicts.

Each Namespace is built exactly once, from the entries that share its path
prefix, grouped in first-appearance order. Grouping keeps the original key
order, so unflatten(flatten(tree)) reproduces ``tree`` including order.

A path that must be both a message and a namespace ("a.b" next to "a.b.c"),
or a key that appears twice, is a conflict. Conflicts are always fatal.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import NoReturn

from msgtable.constants import KEY_SEPARATOR
from msgtable.core.depth_guard import DepthGuard
from msgtable.diagnostics import CatalogStructureError, ErrorTemplate, KeyConflictError
from msgtable.tree import Leaf, Namespace, Node
from msgtable.types import CategoryName

__all__ = ["unflatten"]


@dataclass(frozen=True, slots=True)
class _Entry:
    key: str
    segments: tuple[str, ...]
    value: str


def unflatten(
    entries: Mapping[str, str | None] | Iterable[tuple[str, str | None]],
    *,
    category: CategoryName = "",
) -> Namespace:
    """Rebuild a nested tree from flat keys.

    Entries whose value is None or empty are skipped entirely: a missing
    translation produces no leaf at all.

    Args:
        entries: Flat key to message, as a mapping or as (key, value) pairs;
            pairs may repeat a key, which is reported as a conflict
        category: Category name used in error messages

    Returns:
        The reconstructed tree

    Raises:
        KeyConflictError: If two keys collide on one path
        CatalogStructureError: If a key has an empty path segment or nesting
            exceeds MAX_DEPTH

    Example:
        >>> unflatten({"inputs.email": "E-mail"}).to_dict()
        {'inputs': {'email': 'E-mail'}}
    """
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    parsed: list[_Entry] = []
    for key, value in pairs:
        if not value:
            continue
        segments = tuple(key.split(KEY_SEPARATOR))
        if not all(segments):
            raise CatalogStructureError(ErrorTemplate.invalid_key(key, "empty path segment"))
        parsed.append(_Entry(key=key, segments=segments, value=value))
    return _build(parsed, 0, category, DepthGuard())


def _build(
    entries: list[_Entry], depth: int, category: CategoryName, guard: DepthGuard
) -> Namespace:
    with guard:
        groups: dict[str, list[_Entry]] = {}
        for entry in entries:
            groups.setdefault(entry.segments[depth], []).append(entry)

        children: list[tuple[str, Node]] = []
        for name, group in groups.items():
            terminal = next((e for e in group if len(e.segments) == depth + 1), None)
            if terminal is None:
                children.append((name, _build(group, depth + 1, category, guard)))
            elif len(group) == 1:
                children.append((name, Leaf(terminal.value)))
            else:
                _raise_conflict(group, terminal, category)
        return Namespace(tuple(children))


def _raise_conflict(group: list[_Entry], terminal: _Entry, category: CategoryName) -> NoReturn:
    # The first entry claims the path; report the first one that collides with it.
    existing = group[0]
    offending = group[1] if terminal is existing else terminal
    raise KeyConflictError(
        ErrorTemplate.key_conflict(offending.key, existing.key, category),
        key=offending.key,
        existing_key=existing.key,
        category=category,
    )
