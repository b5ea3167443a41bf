"""Namespace bundling of per-file declarations."""

from javadts.bundle.bundler import (
    Declaration,
    bundle_declarations,
    dedupe_imports,
    parse_declaration,
    read_declarations,
    write_bundle,
)

__all__ = [
    "Declaration",
    "bundle_declarations",
    "dedupe_imports",
    "parse_declaration",
    "read_declarations",
    "write_bundle",
]
