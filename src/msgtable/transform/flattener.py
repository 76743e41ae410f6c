"""Flatten message trees into dotted keys.

Python 3.13+.
"""

from __future__ import annotations

from msgtable.constants import KEY_SEPARATOR
from msgtable.core.depth_guard import DepthGuard
from msgtable.diagnostics import CatalogStructureError, ErrorTemplate
from msgtable.tree import Leaf, Namespace
from msgtable.types import FlatKey

__all__ = ["flatten", "validate_name"]


def validate_name(name: str) -> None:
    """Reject names that would make flattening lossy.

    An empty name or one containing the key separator cannot be told apart
    from a different tree path once joined.

    Raises:
        CatalogStructureError: If ``name`` is empty or contains the separator
    """
    if not name:
        raise CatalogStructureError(ErrorTemplate.invalid_key(name, "empty name"))
    if KEY_SEPARATOR in name:
        raise CatalogStructureError(
            ErrorTemplate.invalid_key(name, f"names may not contain {KEY_SEPARATOR!r}")
        )


def flatten(tree: Namespace, prefix: str = "") -> dict[FlatKey, str]:
    """Flatten a tree into an ordered mapping of dotted keys to messages.

    Traversal is depth-first, pre-order, following each namespace's own
    insertion order. The returned dict preserves first-visit order.

    Args:
        tree: Tree to flatten
        prefix: Key prefix for every entry (no leading dot when empty)

    Returns:
        Mapping of flat key to message text

    Raises:
        CatalogStructureError: If a name is empty or contains the separator,
            or nesting exceeds MAX_DEPTH

    Example:
        >>> flatten(Namespace.from_mapping({"inputs": {"email": "E-mail"}}), "auth")
        {'auth.inputs.email': 'E-mail'}
    """
    flat: dict[FlatKey, str] = {}
    _flatten_into(flat, tree, prefix, DepthGuard())
    return flat


def _flatten_into(
    flat: dict[FlatKey, str], namespace: Namespace, prefix: str, guard: DepthGuard
) -> None:
    with guard:
        for name, node in namespace.entries:
            validate_name(name)
            key = f"{prefix}{KEY_SEPARATOR}{name}" if prefix else name
            match node:
                case Leaf(value=value):
                    flat[key] = value
                case Namespace():
                    _flatten_into(flat, node, key, guard)
