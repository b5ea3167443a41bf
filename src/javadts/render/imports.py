"""Java imports -> TypeScript namespace aliases.

``import com.bitwig.extension.api.Color;`` becomes
``import Color = com.bitwig.extension.api.Color;``. Imports of JDK types and
other paths on the block-list are dropped; static and wildcard imports have
no alias form and are dropped with a warning.
"""

from __future__ import annotations

import structlog

from javadts.render.model import ImportAlias
from javadts.render.options import RenderOptions
from javadts.syntax.tree import SyntaxNode

log = structlog.get_logger(__name__)

NAME_KINDS = ("scoped_identifier", "identifier")


def resolve_import(node: SyntaxNode, options: RenderOptions) -> ImportAlias | None:
    """Alias for one import_declaration, or None if it is dropped."""
    name_node = node.first_of_kind(*NAME_KINDS)
    if name_node is None:
        return None

    if node.has_token("static") or node.first_of_kind("asterisk") is not None:
        log.warning("import_skipped", path=name_node.text, line=node.line)
        return None

    parts = [part.strip() for part in name_node.text.split(".")]
    path = options.qualified_name(parts)
    if path in options.ignored_imports:
        return None
    return ImportAlias(name=parts[-1], path=path)


def render_imports(nodes: list[SyntaxNode], options: RenderOptions) -> str:
    """One alias line per surviving import, in source order."""
    aliases = [resolve_import(node, options) for node in nodes]
    return "\n".join(alias.render() for alias in aliases if alias is not None)
