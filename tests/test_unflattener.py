"""Tests for transform/unflattener.py: tree reconstruction and conflicts.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from msgtable.constants import MAX_DEPTH
from msgtable.diagnostics import (
    CatalogStructureError,
    DiagnosticCode,
    KeyConflictError,
)
from msgtable.transform import flatten, unflatten
from msgtable.tree import Leaf, Namespace
from tests.strategies import message_trees


class TestUnflatten:
    """Grouping flat keys back into trees."""

    def test_nested_keys(self) -> None:
        """Dotted keys become nested namespaces."""
        tree = unflatten({"inputs.email": "E-mail", "inputs.name": "Name", "title": "T"})

        assert tree.to_dict() == {"inputs": {"email": "E-mail", "name": "Name"}, "title": "T"}

    def test_first_appearance_order(self) -> None:
        """Interleaved keys group under their first-seen namespace."""
        tree = unflatten({"a.x": "1", "b.y": "2", "a.z": "3"})

        assert list(tree) == ["a", "b"]
        assert tree.to_dict() == {"a": {"x": "1", "z": "3"}, "b": {"y": "2"}}

    def test_skips_missing_values(self) -> None:
        """None and empty values produce no leaf at all."""
        tree = unflatten([("a.x", "1"), ("a.y", None), ("b.z", "")])

        assert tree == Namespace((("a", Namespace((("x", Leaf("1")),))),))

    def test_all_values_missing(self) -> None:
        """Only missing values give an empty tree."""
        assert unflatten({"a": None, "b.c": ""}) == Namespace()

    @pytest.mark.parametrize("key", ["a..b", ".a", "a.", "."])
    def test_empty_segment(self, key: str) -> None:
        """Empty path segments are refused."""
        with pytest.raises(CatalogStructureError) as exc_info:
            unflatten({key: "x"})

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_KEY

    def test_depth_limit(self) -> None:
        """Keys with more segments than MAX_DEPTH are refused."""
        key = ".".join(["n"] * (MAX_DEPTH + 1))

        with pytest.raises(CatalogStructureError) as exc_info:
            unflatten({key: "x"})

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED


class TestConflicts:
    """A path cannot be both a message and a namespace."""

    def test_leaf_then_namespace(self) -> None:
        """'a.b' then 'a.b.c' conflicts."""
        with pytest.raises(KeyConflictError) as exc_info:
            unflatten({"a.b": "x", "a.b.c": "y"}, category="auth")

        error = exc_info.value
        assert error.key == "a.b.c"
        assert error.existing_key == "a.b"
        assert error.category == "auth"
        assert "Conflict Key Error: a.b.c in auth" in str(error)

    def test_namespace_then_leaf(self) -> None:
        """'a.b.c' then 'a.b' conflicts as well."""
        with pytest.raises(KeyConflictError) as exc_info:
            unflatten({"a.b.c": "y", "a.b": "x"})

        assert exc_info.value.key == "a.b"
        assert exc_info.value.existing_key == "a.b.c"

    def test_leaf_between_siblings(self) -> None:
        """The reported key is the one that collides, not an innocent sibling."""
        with pytest.raises(KeyConflictError) as exc_info:
            unflatten({"a.b.c": "1", "a.b.d": "2", "a.b": "3"})

        assert exc_info.value.key == "a.b"
        assert exc_info.value.existing_key == "a.b.c"

    def test_duplicate_key(self) -> None:
        """The same key twice conflicts."""
        with pytest.raises(KeyConflictError) as exc_info:
            unflatten([("inputs.email", "1"), ("inputs.email", "2")])

        assert exc_info.value.key == "inputs.email"
        assert exc_info.value.existing_key == "inputs.email"

    def test_conflict_diagnostic(self) -> None:
        """The error carries a KEY_CONFLICT diagnostic located at the category."""
        with pytest.raises(KeyConflictError) as exc_info:
            unflatten({"a": "x", "a.b": "y"}, category="auth")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.KEY_CONFLICT
        assert diagnostic.location == "auth"

    def test_skipped_value_does_not_conflict(self) -> None:
        """An empty cell never claims a path."""
        tree = unflatten({"a.b": "", "a.b.c": "y"})

        assert tree.to_dict() == {"a": {"b": {"c": "y"}}}


class TestRoundTrip:
    """unflatten(flatten(T)) == T."""

    @given(message_trees())
    def test_round_trip(self, tree: Namespace) -> None:
        """Shape and order survive flattening."""
        assert unflatten(flatten(tree)) == tree

    @given(message_trees())
    def test_reflatten_is_stable(self, tree: Namespace) -> None:
        """Flattening the rebuilt tree gives the same keys in the same order."""
        flat = flatten(tree)

        assert list(flatten(unflatten(flat)).items()) == list(flat.items())


@pytest.mark.fuzz
class TestRoundTripFuzz:
    """Deep and wide trees, run with ``pytest -m fuzz``."""

    @settings(max_examples=1000, deadline=None)
    @given(message_trees(max_depth=6, max_width=4))
    def test_round_trip_large_trees(self, tree: Namespace) -> None:
        """Large trees survive flattening unchanged."""
        assert unflatten(flatten(tree)) == tree
