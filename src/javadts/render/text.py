"""Small text helpers shared by the renderers."""

from __future__ import annotations

import textwrap

INDENT = "  "


def indent(text: str, levels: int = 1) -> str:
    """Indent every non-blank line of `text`."""
    return textwrap.indent(text, INDENT * levels)


def format_doc_comment(comment: str) -> str:
    """Re-align a ``/** ... */`` comment so it can be indented freely.

    Continuation lines lose their source indentation; lines starting with
    ``*`` get a single leading space so the stars line up under ``/**``.
    """
    lines = comment.strip().splitlines()
    if len(lines) == 1:
        return lines[0]
    aligned = [lines[0].strip()]
    for line in lines[1:]:
        stripped = line.strip()
        aligned.append(f" {stripped}" if stripped.startswith("*") else stripped)
    return "\n".join(aligned)


def with_doc(doc: str | None, body: str) -> str:
    """Prefix `body` with a formatted doc comment, if any."""
    if not doc:
        return body
    return f"{format_doc_comment(doc)}\n{body}"


def join_blocks(blocks: list[str]) -> str:
    """Join non-empty text blocks with a blank line between them."""
    return "\n\n".join(block for block in blocks if block)
