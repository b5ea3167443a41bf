"""Declaration model shared by the renderers.

Types are already rendered to TypeScript strings by the time they land in
the model; the model only fixes structure and order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DeclarationKind(str, Enum):
    INTERFACE = "interface"
    CLASS = "class"


class DeclarationStyle(Enum):
    """How a declaration's methods are rendered.

    NAMED: ``name(args): Result;``
    CALL_SIGNATURE: ``(args): Result;`` for function-shaped contracts
    (callback interfaces).
    """

    NAMED = "named"
    CALL_SIGNATURE = "call_signature"


@dataclass(frozen=True, slots=True)
class TypeParameter:
    name: str
    bound: str | None = None

    def render(self) -> str:
        if self.bound is None:
            return self.name
        return f"{self.name} extends {self.bound} = {self.bound}"


@dataclass(frozen=True, slots=True)
class Parameter:
    name: str
    type: str
    variadic: bool = False

    def render(self) -> str:
        if self.variadic:
            return f"...{self.name}: {self.type}[]"
        return f"{self.name}: {self.type}"


@dataclass(frozen=True, slots=True)
class MethodMember:
    name: str
    parameters: tuple[Parameter, ...]
    result: str
    static: bool = False
    type_parameters: tuple[TypeParameter, ...] = ()
    doc: str | None = None


@dataclass(frozen=True, slots=True)
class FieldMember:
    name: str
    type: str
    static: bool = False
    doc: str | None = None


@dataclass(frozen=True, slots=True)
class ConstructorMember:
    parameters: tuple[Parameter, ...]
    doc: str | None = None


Member = MethodMember | FieldMember | ConstructorMember


@dataclass(frozen=True)
class TypeDeclaration:
    kind: DeclarationKind
    name: str
    style: DeclarationStyle = DeclarationStyle.NAMED
    type_parameters: tuple[TypeParameter, ...] = ()
    parents: tuple[str, ...] = ()
    doc: str | None = None
    members: tuple[Member, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class EnumConstant:
    name: str
    ordinal: int
    doc: str | None = None


@dataclass(frozen=True)
class EnumDeclaration:
    name: str
    constants: tuple[EnumConstant, ...] = ()
    doc: str | None = None


@dataclass(frozen=True, slots=True)
class ImportAlias:
    name: str
    path: str

    def render(self) -> str:
        return f"import {self.name} = {self.path};"
