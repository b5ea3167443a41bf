"""Merge per-file declarations into one artifact, grouped by namespace.

Each scratch file looks like::

    declare namespace com.bitwig.extension.api {
      import Color = com.bitwig.extension.api.Color;
      ...
    }

The bundler strips the wrapper, groups bodies by namespace, drops imports
that alias the enclosing namespace or repeat an earlier import, and emits
one ``declare namespace`` block per namespace.
"""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog

from javadts.config.constants import DECLARATION_SUFFIX, JAVA_SUFFIX
from javadts.core.errors import BundleError

log = structlog.get_logger(__name__)

NAMESPACE_RE = re.compile(r"^declare namespace (\S+) \{$")
IMPORT_RE = re.compile(r"^import \S+ = (\S+);$")


@dataclass(frozen=True, slots=True)
class Declaration:
    """One scratch file, unwrapped.

    Attributes:
        namespace: Dotted namespace from the file's first line.
        body: Lines between the wrapper lines, indentation kept.
        relative_path: Path of the scratch file below the scratch root.
    """

    namespace: str
    body: str
    relative_path: Path

    @property
    def source_path(self) -> str:
        """Relative path of the Java file this declaration came from."""
        name = self.relative_path.name.removesuffix(DECLARATION_SUFFIX) + JAVA_SUFFIX
        return self.relative_path.with_name(name).as_posix()

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.relative_path.name, self.relative_path.as_posix())


def parse_declaration(text: str, relative_path: Path) -> Declaration:
    """Unwrap one scratch file.

    Raises:
        BundleError: If the first line is not a namespace declaration.
    """
    lines = text.rstrip("\n").split("\n")
    match = NAMESPACE_RE.match(lines[0].strip()) if lines else None
    if match is None or len(lines) < 2:
        raise BundleError.missing_namespace(relative_path.as_posix())
    return Declaration(
        namespace=match.group(1),
        body="\n".join(lines[1:-1]),
        relative_path=relative_path,
    )


def read_declarations(scratch_root: Path) -> list[Declaration]:
    """Read every ``.d.ts`` file under the scratch tree."""
    declarations = [
        parse_declaration(path.read_text(encoding="utf-8"), path.relative_to(scratch_root))
        for path in sorted(scratch_root.rglob(f"*{DECLARATION_SUFFIX}"))
    ]
    log.debug("declarations_read", root=str(scratch_root), count=len(declarations))
    return declarations


def import_target(line: str) -> str | None:
    """Qualified name aliased by an import line, or None for other lines."""
    match = IMPORT_RE.match(line.strip())
    return match.group(1) if match else None


def dedupe_imports(namespace: str, body: str, seen: set[str]) -> str:
    """Drop self-namespace and already-seen import lines from `body`.

    `seen` is updated with the imports kept.
    """
    kept: list[str] = []
    for line in body.split("\n"):
        target = import_target(line)
        if target is not None:
            target_namespace = target.rpartition(".")[0]
            if target_namespace == namespace or target in seen:
                continue
            seen.add(target)
        kept.append(line)
    return "\n".join(kept)


def bundle_declarations(
    declarations: Iterable[Declaration],
    header: str = "",
    trailer: str = "",
) -> str:
    """Bundle declarations into one text, deterministic for a given input set."""
    grouped: dict[str, list[Declaration]] = defaultdict(list)
    for declaration in declarations:
        grouped[declaration.namespace].append(declaration)

    sections: list[str] = []
    if header:
        sections.append(header.rstrip("\n") + "\n")

    for namespace in sorted(grouped):
        seen: set[str] = set()
        blocks: list[str] = []
        for declaration in sorted(grouped[namespace], key=lambda d: d.sort_key):
            body = dedupe_imports(namespace, declaration.body, seen)
            source = f"  // source: {declaration.source_path}"
            blocks.append(f"{source}\n{body}" if body.strip() else source)
        inner = "\n\n".join(blocks)
        sections.append(f"declare namespace {namespace} {{\n{inner}\n}}\n")

    if trailer:
        sections.append(trailer.rstrip("\n") + "\n")

    log.debug("bundled", namespaces=len(grouped))
    return "\n".join(sections)


def write_bundle(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    log.info("bundle_written", path=str(path), bytes=len(text.encode("utf-8")))
    return path
