"""Translation tables shared by the renderers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from javadts.config.constants import (
    DEFAULT_CALLBACK_SUFFIX,
    DEFAULT_IGNORED_IMPORTS,
    DEFAULT_RESERVED_RENAMES,
    DEFAULT_TYPE_OVERRIDES,
)
from javadts.config.models import TranslateConfig


@dataclass(frozen=True)
class RenderOptions:
    """Read-only view of TranslateConfig used while rendering."""

    type_overrides: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_TYPE_OVERRIDES))
    )
    ignored_imports: frozenset[str] = frozenset(DEFAULT_IGNORED_IMPORTS)
    callback_suffix: str = DEFAULT_CALLBACK_SUFFIX
    reserved_renames: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_RESERVED_RENAMES))
    )

    @classmethod
    def from_config(cls, config: TranslateConfig) -> RenderOptions:
        return cls(
            type_overrides=MappingProxyType(dict(config.type_overrides)),
            ignored_imports=frozenset(config.ignored_imports),
            callback_suffix=config.callback_suffix,
            reserved_renames=MappingProxyType(dict(config.reserved_renames)),
        )

    def identifier(self, name: str) -> str:
        """`name`, renamed if it is reserved in TypeScript."""
        return self.reserved_renames.get(name, name)

    def qualified_name(self, parts: list[str]) -> str:
        """Dotted path with reserved segments renamed (``a.function.B`` -> ``a.func.B``)."""
        return ".".join(self.identifier(part) for part in parts)
