"""Fixed patches applied to generated declaration files.

Some generated declarations need hand corrections that no general rule
produces: a comment suppressing a known type error, or a signature that
TypeScript can express more precisely than Java. Each mod targets one file
below the scratch root and must match at least once when applied strictly,
so a mod gone stale after an API update fails the build instead of
silently doing nothing.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog

from javadts.config.models import ModSpec
from javadts.core.errors import ModError

log = structlog.get_logger(__name__)

DEFAULT_COMMENT = "// @ts-ignore"


class Mod(ABC):
    """A patch against one file, relative to the scratch root."""

    file: str

    @abstractmethod
    def apply(self, text: str) -> tuple[str, int]:
        """Return the patched text and the number of matches."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Short label used in logs and errors."""
        ...


@dataclass(frozen=True)
class Substitution(Mod):
    """Replace `search` with `replace`.

    A compiled pattern replaces every match and may use ``\\1`` group
    references; a plain string replaces its first occurrence only.
    """

    file: str
    search: str | re.Pattern[str]
    replace: str

    def apply(self, text: str) -> tuple[str, int]:
        if isinstance(self.search, re.Pattern):
            return self.search.subn(self.replace, text)
        if self.search not in text:
            return text, 0
        return text.replace(self.search, self.replace, 1), 1

    def describe(self) -> str:
        search = self.search.pattern if isinstance(self.search, re.Pattern) else self.search
        return f"replace {search!r}"


@dataclass(frozen=True)
class PrependComment(Mod):
    """Insert `comment` directly above the declaration named `declaration`.

    The comment takes the declaration's indentation. A declaration already
    preceded by the comment counts as matched and is left alone.
    """

    file: str
    declaration: str
    comment: str = DEFAULT_COMMENT

    def _pattern(self) -> re.Pattern[str]:
        return re.compile(
            rf"^(?P<indent>[ \t]*)(?:export\s+)?(?:declare\s+)?(?:abstract\s+)?"
            rf"(?:interface|class|enum)\s+{re.escape(self.declaration)}\b"
        )

    def apply(self, text: str) -> tuple[str, int]:
        pattern = self._pattern()
        lines = text.split("\n")
        patched: list[str] = []
        matches = 0
        for line in lines:
            match = pattern.match(line)
            if match is not None:
                matches += 1
                if not (patched and patched[-1].strip() == self.comment):
                    patched.append(f"{match.group('indent')}{self.comment}")
            patched.append(line)
        return "\n".join(patched), matches

    def describe(self) -> str:
        return f"prepend {self.comment!r} to {self.declaration}"


@dataclass(frozen=True, slots=True)
class ModResult:
    file: str
    mod: str
    matches: int
    changed: bool


def mod_from_spec(spec: ModSpec) -> Mod:
    """Build a Mod from its configuration form."""
    if spec.kind == "prepend_comment":
        assert spec.declaration is not None
        return PrependComment(file=spec.file, declaration=spec.declaration, comment=spec.comment)
    assert spec.search is not None
    search: str | re.Pattern[str] = re.compile(spec.search, re.MULTILINE) if spec.regex else spec.search
    return Substitution(file=spec.file, search=search, replace=spec.replace)


def apply_mods(root: Path, mods: Iterable[Mod], *, strict: bool = True) -> list[ModResult]:
    """Apply mods in order to files below `root`.

    Raises:
        ModError: In strict mode, when a target file is missing or a mod
            matches nothing.
    """
    results: list[ModResult] = []
    for mod in mods:
        path = root / mod.file
        label = mod.describe()
        if not path.is_file():
            if strict:
                raise ModError.target_missing(mod.file, label)
            log.warning("mod_target_missing", file=mod.file, mod=label)
            results.append(ModResult(mod.file, label, 0, False))
            continue

        original = path.read_text(encoding="utf-8")
        patched, matches = mod.apply(original)
        if matches == 0:
            if strict:
                raise ModError.no_match(mod.file, label)
            log.warning("mod_no_match", file=mod.file, mod=label)

        changed = patched != original
        if changed:
            path.write_text(patched, encoding="utf-8")
            log.info("mod_applied", file=mod.file, mod=label, matches=matches)
        results.append(ModResult(mod.file, label, matches, changed))
    return results
