"""Positional merge of per-locale key orders into one global key order.

The merged order is what makes generated tables readable and stable across
runs: keys shared by several locales act as anchors, and keys that only some
locales have are placed next to the anchors they follow in those locales,
rather than being appended or sorted.

Algorithm (per locale pass, locales in enumeration order):
    cursor = 0
    for key in locale_keys:
        if key in accumulator: cursor = accumulator.index(key)
        else: accumulator.insert(cursor, key); cursor += 1

The accumulator is seeded with the default locale's keys. Inserting at the
cursor and then advancing it means the element under the cursor never
changes between two matches, so the cursor is equivalent to "insert before
this anchor key". KeyOrder stores the sequence as a doubly linked list keyed
by flat key, which turns both the membership test and the insertion into
dict operations.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence

from msgtable.diagnostics import ConfigurationError, ErrorTemplate
from msgtable.types import FlatKey, LocaleCode

__all__ = ["KeyOrder", "merge_key_orders"]

logger = logging.getLogger(__name__)


class KeyOrder:
    """Ordered set of keys with constant-time insertion before any member.

    Example:
        >>> order = KeyOrder(["email", "name"])
        >>> order.insert_before("captcha", "name")
        >>> list(order)
        ['email', 'captcha', 'name']
    """

    __slots__ = ("_first", "_last", "_next", "_prev")

    def __init__(self, keys: Iterable[str] = ()) -> None:
        """Initialize with ``keys`` in order; repeated keys are kept once."""
        self._next: dict[str, str | None] = {}
        self._prev: dict[str, str | None] = {}
        self._first: str | None = None
        self._last: str | None = None
        for key in keys:
            if key not in self:
                self.insert_before(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._next

    def __len__(self) -> int:
        return len(self._next)

    def __iter__(self) -> Iterator[str]:
        key = self._first
        while key is not None:
            yield key
            key = self._next[key]

    def __repr__(self) -> str:
        return f"KeyOrder({list(self)!r})"

    @property
    def first(self) -> str | None:
        """First key, or None when empty."""
        return self._first

    def insert_before(self, key: str, anchor: str | None) -> None:
        """Insert ``key`` directly before ``anchor`` (at the end when None).

        Raises:
            ValueError: If ``key`` is already present
            KeyError: If ``anchor`` is not present
        """
        if key in self._next:
            msg = f"Key already present: {key!r}"
            raise ValueError(msg)
        if anchor is None:
            prev, nxt = self._last, None
        else:
            if anchor not in self._next:
                raise KeyError(anchor)
            prev, nxt = self._prev[anchor], anchor

        self._prev[key] = prev
        self._next[key] = nxt
        if prev is None:
            self._first = key
        else:
            self._next[prev] = key
        if nxt is None:
            self._last = key
        else:
            self._prev[nxt] = key


def merge_key_orders(
    key_sets: Mapping[LocaleCode, Sequence[FlatKey]]
    | Iterable[tuple[LocaleCode, Sequence[FlatKey]]],
    default_locale: LocaleCode,
) -> tuple[FlatKey, ...]:
    """Merge every locale's key order into one de-duplicated global order.

    Args:
        key_sets: Locale to ordered keys, in locale enumeration order
            (a mapping or a sequence of pairs)
        default_locale: Locale whose order seeds the result

    Returns:
        Global key order: a superset of every input, without duplicates

    Raises:
        ConfigurationError: If ``default_locale`` is not in ``key_sets``

    Example:
        >>> merge_key_orders(
        ...     {"zh": ["a.email", "a.name"], "jp": ["a.email", "a.name", "a.captcha"]},
        ...     "zh",
        ... )
        ('a.email', 'a.captcha', 'a.name')
    """
    sets = dict(key_sets) if not isinstance(key_sets, Mapping) else key_sets
    if default_locale not in sets:
        raise ConfigurationError(ErrorTemplate.default_locale_missing(default_locale, sets))

    order = KeyOrder(sets[default_locale])
    for locale, keys in sets.items():
        anchor = order.first
        inserted = 0
        for key in keys:
            if key in order:
                anchor = key
            else:
                order.insert_before(key, anchor)
                inserted += 1
        if inserted:
            logger.debug("Merged %d key(s) only present in locale %s", inserted, locale)

    return tuple(order)
