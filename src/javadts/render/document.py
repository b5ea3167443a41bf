"""Render one Java compilation unit into a per-file declaration blob."""

from __future__ import annotations

from dataclasses import dataclass

from javadts.render.declarations import render_type_declarations
from javadts.render.enums import render_enums
from javadts.render.imports import render_imports
from javadts.render.options import RenderOptions
from javadts.render.text import indent, join_blocks
from javadts.syntax.tree import SyntaxNode

TOP_LEVEL_TYPE_KINDS = (
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "annotation_type_declaration",
    "record_declaration",
)


@dataclass(frozen=True, slots=True)
class RenderedFile:
    """Rendered output for one source file.

    Attributes:
        namespace: Dotted namespace from the package declaration, or None.
        body: Imports, enums and declarations, unindented.
        text: Full file text; wrapped in ``declare namespace`` when the
            namespace is known.
    """

    namespace: str | None
    body: str
    text: str


def package_namespace(root: SyntaxNode, options: RenderOptions) -> str | None:
    package = root.first_of_kind("package_declaration")
    if package is None:
        return None
    name = package.first_of_kind("scoped_identifier", "identifier")
    if name is None:
        return None
    return options.qualified_name([part.strip() for part in name.text.split(".")])


def render_compilation_unit(root: SyntaxNode, options: RenderOptions) -> RenderedFile:
    namespace = package_namespace(root, options)
    body = join_blocks(
        [
            render_imports(list(root.of_kind("import_declaration")), options),
            render_enums(root, options),
            render_type_declarations(list(root.of_kind(*TOP_LEVEL_TYPE_KINDS)), options),
        ]
    )

    if namespace is None:
        return RenderedFile(namespace=None, body=body, text=f"{body}\n" if body else "")

    inner = f"{indent(body)}\n" if body else ""
    text = f"declare namespace {namespace} {{\n{inner}}}\n"
    return RenderedFile(namespace=namespace, body=body, text=text)
