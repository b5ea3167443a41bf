"""Java enums -> TypeScript enums with positional ordinals.

    enum NoteLatch { OFF, ON, TOGGLE }

becomes::

    enum NoteLatch {
      OFF = 0,
      ON = 1,
      TOGGLE = 2,
    }

Every enum in the compilation unit is emitted, nested ones included.
Constructor arguments and constant bodies are ignored.
"""

from __future__ import annotations

from javadts.render.model import EnumConstant, EnumDeclaration
from javadts.render.options import RenderOptions
from javadts.render.text import indent, join_blocks, with_doc
from javadts.syntax.query import query
from javadts.syntax.tree import SyntaxNode


def extract_enums(root: SyntaxNode) -> list[EnumDeclaration]:
    enums: list[EnumDeclaration] = []
    for node in query(root, ["enum_declaration"]):
        name_node = node.first("name")
        if name_node is None:
            continue
        body = node.first("body")
        constants = body.of_kind("enum_constant") if body is not None else ()
        enums.append(
            EnumDeclaration(
                name=name_node.text,
                constants=tuple(
                    EnumConstant(_constant_name(constant), ordinal, constant.doc_comment)
                    for ordinal, constant in enumerate(constants)
                ),
                doc=node.doc_comment,
            )
        )
    return enums


def render_enum(declaration: EnumDeclaration) -> str:
    lines = [
        with_doc(constant.doc, f"{constant.name} = {constant.ordinal},")
        for constant in declaration.constants
    ]
    if lines:
        body = "\n".join(lines)
        block = f"enum {declaration.name} {{\n{indent(body)}\n}}"
    else:
        block = f"enum {declaration.name} {{}}"
    return with_doc(declaration.doc, block)


def render_enums(root: SyntaxNode, options: RenderOptions) -> str:
    """Render every enum under root, in discovery order."""
    del options  # enum spelling does not depend on the translation tables
    return join_blocks([render_enum(enum) for enum in extract_enums(root)])


def _constant_name(node: SyntaxNode) -> str:
    name = node.first("name")
    return name.text if name is not None else node.text.split("(")[0].strip()
