"""Immutable syntax nodes built from tree-sitter parse trees.

A SyntaxNode keeps only what the renderers read: the node kind, its source
text, its named children (each remembering the grammar field it fills), the
anonymous tokens it holds (keywords such as ``static`` or ``...``) and the
comments that directly precede it. Comments never appear as children; they
are attached to the next named sibling as leading trivia.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

COMMENT_KINDS = frozenset({"line_comment", "block_comment", "comment"})


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """A read-only parse tree node."""

    kind: str
    text: str = ""
    children: tuple[SyntaxNode, ...] = ()
    field: str | None = None  # Grammar field this node fills in its parent
    tokens: tuple[str, ...] = ()  # Anonymous child tokens, in source order
    comments: tuple[str, ...] = ()  # Leading comment trivia
    line: int = 0  # 1-based start line

    @property
    def slots(self) -> Mapping[str, tuple[SyntaxNode, ...]]:
        """Children grouped by slot: the field name, else the child kind."""
        grouped: dict[str, list[SyntaxNode]] = {}
        for child in self.children:
            grouped.setdefault(child.field or child.kind, []).append(child)
        return {name: tuple(nodes) for name, nodes in grouped.items()}

    def slot(self, name: str) -> tuple[SyntaxNode, ...]:
        """Children filling the grammar field `name`."""
        return tuple(child for child in self.children if child.field == name)

    def first(self, name: str) -> SyntaxNode | None:
        """First child filling the grammar field `name`."""
        for child in self.children:
            if child.field == name:
                return child
        return None

    def of_kind(self, *kinds: str) -> tuple[SyntaxNode, ...]:
        """Immediate children whose kind is one of `kinds`."""
        return tuple(child for child in self.children if child.kind in kinds)

    def first_of_kind(self, *kinds: str) -> SyntaxNode | None:
        for child in self.children:
            if child.kind in kinds:
                return child
        return None

    def has_token(self, token: str) -> bool:
        return token in self.tokens

    @property
    def doc_comment(self) -> str | None:
        """The last ``/** ... */`` comment directly preceding this node."""
        for comment in reversed(self.comments):
            if comment.startswith("/**"):
                return comment
        return None


def from_tree_sitter(node: Any, field: str | None = None) -> SyntaxNode:
    """Convert a tree-sitter node (and its subtree) into a SyntaxNode."""
    children: list[SyntaxNode] = []
    tokens: list[str] = []
    pending_comments: list[str] = []

    cursor = node.walk()
    if cursor.goto_first_child():
        while True:
            child = cursor.node
            if child.type in COMMENT_KINDS:
                pending_comments.append(_text(child))
            elif child.is_named:
                converted = from_tree_sitter(child, cursor.field_name)
                if pending_comments:
                    converted = _with_comments(converted, tuple(pending_comments))
                    pending_comments = []
                children.append(converted)
            else:
                tokens.append(child.type)
            if not cursor.goto_next_sibling():
                break

    return SyntaxNode(
        kind=node.type,
        text=_text(node),
        children=tuple(children),
        field=field,
        tokens=tuple(tokens),
        line=node.start_point[0] + 1,
    )


def _with_comments(node: SyntaxNode, comments: tuple[str, ...]) -> SyntaxNode:
    return SyntaxNode(
        kind=node.kind,
        text=node.text,
        children=node.children,
        field=node.field,
        tokens=node.tokens,
        comments=comments,
        line=node.line,
    )


def _text(node: Any) -> str:
    return node.text.decode("utf-8") if node.text else ""
