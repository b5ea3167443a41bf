"""Rendering of Java syntax trees into TypeScript declarations."""

from javadts.render.declarations import render_declaration, render_type_declarations
from javadts.render.document import RenderedFile, render_compilation_unit
from javadts.render.enums import render_enums
from javadts.render.imports import render_imports
from javadts.render.options import RenderOptions
from javadts.render.types import render_result_type, render_type

__all__ = [
    "RenderOptions",
    "RenderedFile",
    "render_compilation_unit",
    "render_declaration",
    "render_enums",
    "render_imports",
    "render_result_type",
    "render_type",
    "render_type_declarations",
]
