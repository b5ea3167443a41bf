"""Tests for kind-path queries."""

from collections.abc import Callable

import pytest

from javadts.syntax.query import collect, query, query_first
from javadts.syntax.tree import SyntaxNode

NESTED = """
package a.b;

class Outer {
  class Inner {
    void run() {}
  }

  void stop() {}
}
"""


def _names(nodes: list[SyntaxNode]) -> list[str]:
    return [node.first("name").text for node in nodes]  # type: ignore[union-attr]


class TestCollect:
    """collect: every match in the subtree, pre-order."""

    def test_includes_root_when_it_matches(self) -> None:
        root = SyntaxNode(kind="program", children=(SyntaxNode(kind="program"),))

        assert len(collect(root, "program")) == 2

    def test_descends_into_matches(self, parse: Callable[[str], SyntaxNode]) -> None:
        root = parse(NESTED)

        assert _names(collect(root, "class_declaration")) == ["Outer", "Inner"]

    def test_no_match_returns_empty(self, parse: Callable[[str], SyntaxNode]) -> None:
        assert collect(parse(NESTED), "enum_declaration") == []


class TestQuery:
    """query: multi-hop kind paths."""

    def test_single_hop_equals_collect(self, parse: Callable[[str], SyntaxNode]) -> None:
        root = parse(NESTED)

        assert query(root, ["method_declaration"]) == collect(root, "method_declaration")

    def test_multi_hop_searches_below_each_match(self, parse: Callable[[str], SyntaxNode]) -> None:
        """Nested matches contribute their own results again."""
        # Given
        root = parse(NESTED)

        # When
        methods = query(root, ["class_declaration", "method_declaration"])

        # Then
        assert _names(methods) == ["run", "stop", "run"]

    def test_hop_does_not_match_the_match_itself(self) -> None:
        """Later hops are evaluated against the children of a match."""
        leaf = SyntaxNode(kind="a")
        root = SyntaxNode(kind="a", children=(leaf,))

        assert query(root, ["a", "a"]) == [leaf]

    def test_empty_path_raises(self, parse: Callable[[str], SyntaxNode]) -> None:
        with pytest.raises(ValueError):
            query(parse(NESTED), [])

    def test_query_first(self, parse: Callable[[str], SyntaxNode]) -> None:
        root = parse(NESTED)

        first = query_first(root, ["class_declaration", "method_declaration"])

        assert first is not None
        assert first.first("name").text == "run"  # type: ignore[union-attr]
        assert query_first(root, ["enum_declaration"]) is None
