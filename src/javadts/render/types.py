"""Java type references -> TypeScript type expressions.

Rendering happens in two steps: ``resolve_type`` reads a type node into a
TypeRef, ``TypeRef.render`` spells it with the override table applied. Both
depend only on the node's own subtree, so a given type shape renders the
same way wherever it appears.

    boolean            -> boolean
    int, long, double  -> number
    List<int[]>        -> List<number[]>
    List<Integer>[]    -> List<number>[]
    Map<String, ?>     -> Map<string, any>
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from javadts.core.errors import TranslationError
from javadts.syntax.tree import SyntaxNode

PRIMITIVE_KINDS = frozenset({"boolean_type", "integral_type", "floating_point_type"})

TYPE_KINDS = frozenset(
    {
        "boolean_type",
        "integral_type",
        "floating_point_type",
        "type_identifier",
        "scoped_type_identifier",
        "generic_type",
        "array_type",
        "annotated_type",
    }
)

NUMBER = "number"
BOOLEAN = "boolean"
WILDCARD = "any"


@dataclass(frozen=True, slots=True)
class TypeRef:
    """A resolved type reference."""

    name: str
    args: tuple[TypeRef, ...] = ()
    array_depth: int = 0
    primitive: bool = False
    wildcard: bool = False

    def render(self, overrides: Mapping[str, str], *, override_name: bool = True) -> str:
        """Spell the type; with `override_name` off only the arguments are overridden."""
        if self.wildcard:
            base = WILDCARD
        elif self.primitive:
            base = self.name
        elif override_name and self.name in overrides:
            # Overridden spellings are never generic in TypeScript
            base = overrides[self.name]
            if self.array_depth and "=>" in base:
                base = f"({base})"
        else:
            args = ", ".join(arg.render(overrides) for arg in self.args)
            base = f"{self.name}<{args}>" if args else self.name
        return base + "[]" * self.array_depth


def resolve_type(node: SyntaxNode) -> TypeRef:
    """Read a type node into a TypeRef.

    Raises:
        TranslationError: If `node` is not a type the renderer understands.
    """
    kind = node.kind
    if kind == "boolean_type":
        return TypeRef(BOOLEAN, primitive=True)
    if kind in PRIMITIVE_KINDS:
        return TypeRef(NUMBER, primitive=True)
    if kind == "type_identifier":
        return TypeRef(node.text)
    if kind == "scoped_type_identifier":
        return TypeRef(_scoped_name(node))
    if kind == "generic_type":
        return _resolve_generic(node)
    if kind == "array_type":
        element = node.first("element")
        dimensions = node.first("dimensions")
        if element is None or dimensions is None:
            raise TranslationError.unresolved_type(kind, node.text, node.line)
        ref = resolve_type(element)
        return replace(ref, array_depth=ref.array_depth + count_dimensions(dimensions))
    if kind == "annotated_type":
        inner = node.first_of_kind(*TYPE_KINDS)
        if inner is None:
            raise TranslationError.unresolved_type(kind, node.text, node.line)
        return resolve_type(inner)
    if kind == "wildcard":
        bounds = node.of_kind(*TYPE_KINDS)
        if not bounds:
            return TypeRef("?", wildcard=True)
        return resolve_type(bounds[-1])
    raise TranslationError.unresolved_type(kind, node.text, node.line)


def render_type(node: SyntaxNode, overrides: Mapping[str, str]) -> str:
    """Render one Java type node as a TypeScript type expression."""
    return resolve_type(node).render(overrides)


def render_bound(node: SyntaxNode, overrides: Mapping[str, str]) -> str:
    """Render a type parameter bound: the bound keeps its Java name, its arguments do not."""
    return resolve_type(node).render(overrides, override_name=False)


def render_result_type(
    node: SyntaxNode | None,
    overrides: Mapping[str, str],
    method: str = "<anonymous>",
    line: int = 0,
) -> str:
    """Render a method result type; ``void`` stays ``void``."""
    if node is None:
        raise TranslationError.unhandled_result_type(method, line)
    if node.kind == "void_type":
        return "void"
    if node.kind not in TYPE_KINDS:
        raise TranslationError.unhandled_result_type(method, node.line)
    return render_type(node, overrides)


def count_dimensions(node: SyntaxNode | None) -> int:
    """Number of ``[]`` pairs in a dimensions node."""
    if node is None:
        return 0
    return node.text.count("[")


def _resolve_generic(node: SyntaxNode) -> TypeRef:
    head = node.first_of_kind("type_identifier", "scoped_type_identifier")
    if head is None:
        raise TranslationError.unresolved_type(node.kind, node.text, node.line)
    name = head.text if head.kind == "type_identifier" else _scoped_name(head)

    arguments = node.first_of_kind("type_arguments")
    args: tuple[TypeRef, ...] = ()
    if arguments is not None:
        args = tuple(
            resolve_type(arg) for arg in arguments.of_kind(*TYPE_KINDS, "wildcard")
        )
    return TypeRef(name, args)


def _scoped_name(node: SyntaxNode) -> str:
    """Dotted name of a scoped type (``Map.Entry``); generic parts drop their arguments."""
    parts: list[str] = []
    for child in node.children:
        if child.kind == "type_identifier":
            parts.append(child.text)
        elif child.kind == "scoped_type_identifier":
            parts.append(_scoped_name(child))
        elif child.kind == "generic_type":
            parts.append(_resolve_generic(child).name)
    if not parts:
        raise TranslationError.unresolved_type(node.kind, node.text, node.line)
    return ".".join(parts)
