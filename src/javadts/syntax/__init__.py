"""Java syntax trees: parsing and kind-path queries."""

from javadts.syntax.parser import JavaParser
from javadts.syntax.query import collect, query, query_first
from javadts.syntax.tree import SyntaxNode, from_tree_sitter

__all__ = [
    "JavaParser",
    "SyntaxNode",
    "collect",
    "from_tree_sitter",
    "query",
    "query_first",
]
