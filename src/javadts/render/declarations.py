"""Interface and class declarations -> ambient TypeScript declarations.

Each top-level interface or class becomes one block::

    /**
     * Javadoc, re-aligned
     */
    interface SoloValue extends SettableBooleanValue {
      toggle(exclusive: boolean): void;
    }

Enums are rendered separately (see enums.py). Nested classes and interfaces
have no ambient counterpart here and are skipped with a warning.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

import structlog

from javadts.core.errors import TranslationError
from javadts.render.model import (
    ConstructorMember,
    DeclarationKind,
    DeclarationStyle,
    FieldMember,
    Member,
    MethodMember,
    Parameter,
    TypeDeclaration,
    TypeParameter,
)
from javadts.render.options import RenderOptions
from javadts.render.text import indent, join_blocks, with_doc
from javadts.render.types import (
    TYPE_KINDS,
    count_dimensions,
    render_bound,
    render_result_type,
    render_type,
)
from javadts.syntax.query import query
from javadts.syntax.tree import SyntaxNode

log = structlog.get_logger(__name__)

NESTED_TYPE_KINDS = frozenset(
    {
        "class_declaration",
        "interface_declaration",
        "record_declaration",
        "annotation_type_declaration",
    }
)
INITIALIZER_KINDS = frozenset({"static_initializer", "block"})


def render_type_declarations(nodes: list[SyntaxNode], options: RenderOptions) -> str:
    """Render top-level type declarations, separated by blank lines."""
    return join_blocks([render_declaration(node, options) for node in nodes])


def render_declaration(node: SyntaxNode, options: RenderOptions) -> str:
    """Render one top-level declaration; "" for enums and annotation types."""
    declaration = extract_declaration(node, options)
    if declaration is None:
        return ""
    return render_type_declaration(declaration)


def declaration_style(name: str, callback_suffix: str) -> DeclarationStyle:
    if name.endswith(callback_suffix):
        return DeclarationStyle.CALL_SIGNATURE
    return DeclarationStyle.NAMED


def extract_declaration(node: SyntaxNode, options: RenderOptions) -> TypeDeclaration | None:
    """Read a declaration node into the model.

    Raises:
        TranslationError: For declaration kinds the renderer does not handle.
    """
    if node.kind == "enum_declaration":
        return None
    if node.kind == "annotation_type_declaration":
        log.warning("annotation_type_skipped", line=node.line)
        return None

    if node.kind == "interface_declaration":
        kind = DeclarationKind.INTERFACE
        parents = _interface_parents(node, options)
    elif node.kind == "class_declaration":
        kind = DeclarationKind.CLASS
        parents = _class_parents(node, options)
    else:
        raise TranslationError.unhandled_declaration(node.kind, node.line)

    name_node = node.first("name")
    if name_node is None:
        raise TranslationError.unhandled_declaration(node.kind, node.line)
    name = name_node.text

    body = node.first("body")
    members = tuple(_members(body, name, options)) if body is not None else ()
    if kind is DeclarationKind.INTERFACE:
        # Type members cannot be static (TS1070)
        members = tuple(_instance_member(m) for m in members)

    return TypeDeclaration(
        kind=kind,
        name=name,
        style=declaration_style(name, options.callback_suffix),
        type_parameters=_type_parameters(node.first("type_parameters"), options),
        parents=parents,
        doc=node.doc_comment,
        members=members,
    )


def render_type_declaration(declaration: TypeDeclaration) -> str:
    header = (
        f"{declaration.kind.value} {declaration.name}"
        f"{_render_type_parameters(declaration.type_parameters)}"
    )
    if declaration.parents:
        header += f" extends {', '.join(declaration.parents)}"

    body = join_blocks([render_member(m, declaration.style) for m in declaration.members])
    block = f"{header} {{\n{indent(body)}\n}}" if body else f"{header} {{}}"
    return with_doc(declaration.doc, block)


def render_member(member: Member, style: DeclarationStyle) -> str:
    if isinstance(member, MethodMember):
        name = "" if style is DeclarationStyle.CALL_SIGNATURE else member.name
        static = "static " if member.static else ""
        type_params = _render_type_parameters(member.type_parameters)
        params = _render_parameters(member.parameters)
        line = f"{static}{name}{type_params}({params}): {member.result};"
    elif isinstance(member, FieldMember):
        static = "static " if member.static else ""
        line = f"{static}{member.name}: {member.type};"
    else:
        line = f"constructor({_render_parameters(member.parameters)});"
    return with_doc(member.doc, line)


def _render_type_parameters(params: tuple[TypeParameter, ...]) -> str:
    if not params:
        return ""
    return "<" + ", ".join(p.render() for p in params) + ">"


def _render_parameters(params: tuple[Parameter, ...]) -> str:
    return ", ".join(p.render() for p in params)


# =============================================================================
# Extraction
# =============================================================================


def _type_parameters(node: SyntaxNode | None, options: RenderOptions) -> tuple[TypeParameter, ...]:
    if node is None:
        return ()
    params: list[TypeParameter] = []
    for param in query(node, ["type_parameter"]):
        name_node = param.first_of_kind("type_identifier", "identifier")
        if name_node is None:
            raise TranslationError.unresolved_type(param.kind, param.text, param.line)
        bound_node = param.first_of_kind("type_bound")
        bound = None
        if bound_node is not None:
            bounds = [render_bound(t, options.type_overrides) for t in bound_node.of_kind(*TYPE_KINDS)]
            bound = " & ".join(bounds) or None
        params.append(TypeParameter(name_node.text, bound))
    return tuple(params)


def _interface_parents(node: SyntaxNode, options: RenderOptions) -> tuple[str, ...]:
    extends = node.first_of_kind("extends_interfaces")
    if extends is None:
        return ()
    type_list = extends.first_of_kind("type_list")
    if type_list is None:
        return ()
    return tuple(render_type(t, options.type_overrides) for t in type_list.of_kind(*TYPE_KINDS))


def _class_parents(node: SyntaxNode, options: RenderOptions) -> tuple[str, ...]:
    superclass = node.first("superclass")
    if superclass is None:
        return ()
    parent = superclass.first_of_kind(*TYPE_KINDS)
    if parent is None:
        raise TranslationError.unresolved_type(superclass.kind, superclass.text, superclass.line)
    return (render_type(parent, options.type_overrides),)


def _members(body: SyntaxNode, owner: str, options: RenderOptions) -> Iterator[Member]:
    for child in body.children:
        kind = child.kind
        if kind == "method_declaration":
            yield _method(child, owner, options)
        elif kind == "constructor_declaration":
            yield _constructor(child, owner, options)
        elif kind in ("field_declaration", "constant_declaration"):
            yield from _fields(child, owner, options)
        elif kind == "enum_declaration":
            continue  # emitted by the enum renderer
        elif kind in NESTED_TYPE_KINDS:
            name_node = child.first("name")
            log.warning(
                "nested_declaration_skipped",
                owner=owner,
                kind=kind,
                name=name_node.text if name_node else None,
                line=child.line,
            )
        elif kind in INITIALIZER_KINDS:
            log.warning("initializer_skipped", owner=owner, line=child.line)
        else:
            raise TranslationError.unhandled_member(kind, owner, child.line)


def _instance_member(member: Member) -> Member:
    if isinstance(member, (MethodMember, FieldMember)) and member.static:
        return replace(member, static=False)
    return member


def _is_static(node: SyntaxNode) -> bool:
    modifiers = node.first_of_kind("modifiers")
    return modifiers is not None and modifiers.has_token("static")


def _required(node: SyntaxNode, field: str, owner: str) -> SyntaxNode:
    child = node.first(field)
    if child is None:
        raise TranslationError.unhandled_member(node.kind, owner, node.line)
    return child


def _method(node: SyntaxNode, owner: str, options: RenderOptions) -> MethodMember:
    name = _required(node, "name", owner).text
    result = render_result_type(node.first("type"), options.type_overrides, name, node.line)
    result += "[]" * count_dimensions(node.first("dimensions"))
    return MethodMember(
        name=name,
        parameters=_parameters(_required(node, "parameters", owner), owner, options),
        result=result,
        static=_is_static(node),
        type_parameters=_type_parameters(node.first("type_parameters"), options),
        doc=node.doc_comment,
    )


def _constructor(node: SyntaxNode, owner: str, options: RenderOptions) -> ConstructorMember:
    return ConstructorMember(
        parameters=_parameters(_required(node, "parameters", owner), owner, options),
        doc=node.doc_comment,
    )


def _fields(node: SyntaxNode, owner: str, options: RenderOptions) -> Iterator[FieldMember]:
    field_type = render_type(_required(node, "type", owner), options.type_overrides)
    static = _is_static(node)
    doc = node.doc_comment
    for declarator in node.slot("declarator"):
        name = _required(declarator, "name", owner).text
        dims = count_dimensions(declarator.first("dimensions"))
        yield FieldMember(name=name, type=field_type + "[]" * dims, static=static, doc=doc)
        doc = None  # one comment for `int a, b;`


def _parameters(node: SyntaxNode, owner: str, options: RenderOptions) -> tuple[Parameter, ...]:
    params: list[Parameter] = []
    for child in node.children:
        if child.kind == "formal_parameter":
            param_type = render_type(_required(child, "type", owner), options.type_overrides)
            param_type += "[]" * count_dimensions(child.first("dimensions"))
            name = _required(child, "name", owner).text
            params.append(Parameter(options.identifier(name), param_type))
        elif child.kind == "spread_parameter":
            type_node = child.first_of_kind(*TYPE_KINDS)
            declarator = child.first_of_kind("variable_declarator")
            if type_node is None or declarator is None:
                raise TranslationError.unhandled_member(child.kind, owner, child.line)
            name = _required(declarator, "name", owner).text
            params.append(
                Parameter(
                    options.identifier(name),
                    render_type(type_node, options.type_overrides),
                    variadic=True,
                )
            )
    return tuple(params)
