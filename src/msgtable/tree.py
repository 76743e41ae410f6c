"""Message tree node definitions.

A message tree is a tagged variant: every node is either a Leaf holding one
message string or a Namespace holding ordered, uniquely named children.
Traversal code dispatches on the node class with ``match`` instead of
inspecting plain dict/str values.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from msgtable.constants import KEY_SEPARATOR
from msgtable.core.depth_guard import DepthGuard
from msgtable.diagnostics import CatalogStructureError, ErrorTemplate

__all__ = [
    "Leaf",
    "MessageTree",
    "Namespace",
    "Node",
    "count_messages",
]


@dataclass(frozen=True, slots=True)
class Leaf:
    """A single message.

    Attributes:
        value: The message text
    """

    value: str


@dataclass(frozen=True, slots=True)
class Namespace:
    """An ordered level of named children.

    Children keep insertion order; names are unique within one namespace.
    Equality is order-sensitive, so two trees are equal only when both their
    shape and their key order match.

    Attributes:
        entries: (name, node) pairs in insertion order

    Example:
        >>> tree = Namespace.from_mapping({"inputs": {"email": "E-mail"}})
        >>> tree.get("inputs")
        Namespace(entries=(('email', Leaf(value='E-mail')),))
    """

    entries: tuple[tuple[str, Node], ...] = ()

    def __post_init__(self) -> None:
        """Validate that child names are unique."""
        seen: set[str] = set()
        for name, _node in self.entries:
            if name in seen:
                msg = f"Duplicate name in namespace: {name!r}"
                raise ValueError(msg)
            seen.add(name)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _node in self.entries)

    def __contains__(self, name: object) -> bool:
        return any(entry_name == name for entry_name, _node in self.entries)

    def get(self, name: str) -> Node | None:
        """Return the child called ``name``, or None."""
        for entry_name, node in self.entries:
            if entry_name == name:
                return node
        return None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Namespace:
        """Build a tree from plain nested mappings.

        Strings become Leaf nodes and mappings become Namespace nodes;
        existing Leaf/Namespace values are kept as they are.

        Args:
            mapping: Nested mapping of names to strings or mappings

        Returns:
            The equivalent Namespace

        Raises:
            CatalogStructureError: If a name is not a string, a value is
                neither a string nor a mapping, or nesting exceeds MAX_DEPTH
        """
        return _namespace_from_mapping(mapping, (), DepthGuard())

    def to_dict(self) -> dict[str, Any]:
        """Convert back to plain nested dicts, preserving order."""
        result: dict[str, Any] = {}
        for name, node in self.entries:
            match node:
                case Leaf(value=value):
                    result[name] = value
                case Namespace():
                    result[name] = node.to_dict()
        return result


def _namespace_from_mapping(
    mapping: Mapping[str, Any], path: tuple[str, ...], guard: DepthGuard
) -> Namespace:
    with guard:
        entries: list[tuple[str, Node]] = []
        for name, value in mapping.items():
            if not isinstance(name, str):
                raise CatalogStructureError(
                    ErrorTemplate.invalid_key(repr(name), "names must be strings")
                )
            child_path = (*path, name)
            match value:
                case str():
                    entries.append((name, Leaf(value)))
                case Leaf() | Namespace():
                    entries.append((name, value))
                case Mapping():
                    entries.append((name, _namespace_from_mapping(value, child_path, guard)))
                case _:
                    raise CatalogStructureError(
                        ErrorTemplate.invalid_node(
                            KEY_SEPARATOR.join(child_path), type(value).__name__
                        )
                    )
        return Namespace(tuple(entries))


def count_messages(node: Node) -> int:
    """Count the Leaf nodes of a tree."""
    match node:
        case Leaf():
            return 1
        case Namespace():
            return sum(count_messages(child) for _name, child in node.entries)


# Type aliases (evaluated lazily, so they may follow the class definitions)
type Node = Leaf | Namespace
"""Any message tree node."""

type MessageTree = Namespace
"""One category of one locale."""
