"""Kind-path queries over SyntaxNode trees.

A query path is a list of node kinds. ``query(root, ["a", "b"])`` finds every
``a`` node under root, then every ``b`` node under the children of each
``a``. Hops between kinds are unfiltered: a ``b`` may sit at any depth below
its ``a``.
"""

from __future__ import annotations

from collections.abc import Sequence

from javadts.syntax.tree import SyntaxNode


def collect(node: SyntaxNode, kind: str) -> list[SyntaxNode]:
    """All nodes of `kind` in the subtree at `node`, depth-first pre-order.

    `node` itself is included when it matches, and matches are searched
    recursively, so a match nested inside another match is also returned.
    """
    found: list[SyntaxNode] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if current.kind == kind:
            found.append(current)
        stack.extend(reversed(current.children))
    return found


def query(root: SyntaxNode, path: Sequence[str]) -> list[SyntaxNode]:
    """Evaluate a kind path against root; results in discovery order.

    Raises:
        ValueError: If path is empty.
    """
    if not path:
        raise ValueError("Query path must name at least one node kind")

    matches = collect(root, path[0])
    if len(path) == 1:
        return matches

    results: list[SyntaxNode] = []
    rest = path[1:]
    for match in matches:
        for child in match.children:
            results.extend(query(child, rest))
    return results


def query_first(root: SyntaxNode, path: Sequence[str]) -> SyntaxNode | None:
    """First result of query(root, path), or None."""
    results = query(root, path)
    return results[0] if results else None
