"""Tree-sitter parsing of Java compilation units.

Usage::

    parser = JavaParser()
    root = parser.parse_file(Path("java_source/com/acme/api/Host.java"))
    root.kind  # "program"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import tree_sitter
import tree_sitter_java

from javadts.core.errors import TranslationError
from javadts.syntax.tree import SyntaxNode, from_tree_sitter

log = structlog.get_logger(__name__)


@dataclass
class JavaParser:
    """Parses Java source into SyntaxNode trees.

    Source with syntax errors is rejected: the renderers assume a complete
    tree and a half-parsed declaration would silently lose members.
    """

    _parser: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        language = tree_sitter.Language(tree_sitter_java.language())
        self._parser = tree_sitter.Parser(language)

    def parse(self, source: bytes | str, path: str = "<memory>") -> SyntaxNode:
        """Parse Java source text.

        Args:
            source: Java source, as bytes or text.
            path: Name used in error messages.

        Raises:
            TranslationError: If the source does not parse cleanly.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        tree = self._parser.parse(source)
        error_line = _first_error_line(tree.root_node)
        if error_line is not None:
            raise TranslationError.syntax_error(path, error_line)

        root = from_tree_sitter(tree.root_node)
        log.debug("parsed", path=path, nodes=len(root.children))
        return root

    def parse_file(self, path: Path) -> SyntaxNode:
        return self.parse(path.read_bytes(), str(path))


def _first_error_line(node: Any) -> int | None:
    """1-based line of the first ERROR or missing node, if any."""
    if not node.has_error:
        return None
    if node.type == "ERROR" or node.is_missing:
        return node.start_point[0] + 1
    for child in node.children:
        line = _first_error_line(child)
        if line is not None:
            return line
    return node.start_point[0] + 1
