"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (JAVADTS__SECTION__KEY)
3. Project YAML (javadts.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    JAVADTS__<SECTION>__<KEY>=<VALUE>

Examples:
    JAVADTS__LOGGING__LEVEL=DEBUG
    JAVADTS__SOURCE__ROOT=/tmp/extension-api-sources
    JAVADTS__MODS__STRICT=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from javadts.config.constants import (
    DEFAULT_CALLBACK_SUFFIX,
    DEFAULT_IGNORED_IMPORTS,
    DEFAULT_RESERVED_RENAMES,
    DEFAULT_SKIP_SUFFIXES,
    DEFAULT_TYPE_OVERRIDES,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        JAVADTS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every converted member.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SourceConfig(BaseModel):
    """Java source tree configuration.

    Env vars:
        JAVADTS__SOURCE__ROOT: Directory holding the extracted Java sources
    """

    root: Path = Field(
        default=Path("java_source"),
        description="Root of the Java source tree (package directories below it).",
    )
    skip_suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKIP_SUFFIXES),
        description="Skip source files whose name ends with one of these suffixes.",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns (relative to root, POSIX separators) to leave out.",
    )


class OutputConfig(BaseModel):
    """Artifact configuration.

    Env vars:
        JAVADTS__OUTPUT__OUT_FILE: Bundled declaration file
        JAVADTS__OUTPUT__SCRATCH_DIR: Per-file intermediate tree
        JAVADTS__OUTPUT__KEEP_SCRATCH: Keep the intermediate tree after bundling
    """

    out_file: Path = Field(
        default=Path("bitwig-api.d.ts"),
        description="Path of the bundled declaration artifact.",
    )
    scratch_dir: Path = Field(
        default=Path("types"),
        description="Per-file declarations are written here, then bundled. "
        "The directory is cleared at the start of every build.",
    )
    keep_scratch: bool = Field(
        default=False,
        description="Keep the per-file declarations after a successful bundle.",
    )
    api_version: str = Field(
        default="18",
        description="API version quoted in the artifact header.",
    )
    header: str | None = Field(
        default=None,
        description="Replaces the built-in artifact header when set.",
    )
    trailer_path: Path | None = Field(
        default=None,
        description="File appended verbatim after the namespaces. "
        "Default: the built-in host globals trailer.",
    )


class TranslateConfig(BaseModel):
    """Translation tables.

    Env vars:
        JAVADTS__TRANSLATE__CALLBACK_SUFFIX: Suffix marking function-shaped interfaces
    """

    type_overrides: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_TYPE_OVERRIDES),
        description="Exact Java type name -> TypeScript spelling.",
    )
    ignored_imports: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_IMPORTS),
        description="Qualified imports dropped from the output.",
    )
    callback_suffix: str = Field(
        default=DEFAULT_CALLBACK_SUFFIX,
        description="Declarations ending with this suffix render as call signatures.",
    )
    reserved_renames: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_RESERVED_RENAMES),
        description="Identifiers reserved in TypeScript and their replacements.",
    )

    @field_validator("callback_suffix")
    @classmethod
    def validate_callback_suffix(cls, v: str) -> str:
        if not v or not v.isidentifier():
            raise ValueError(f"Callback suffix must be an identifier, got {v!r}")
        return v


class ModSpec(BaseModel):
    """A mod declared in configuration.

    kind=replace: replace `search` with `replace` in `file` (regex when `regex`).
    kind=prepend_comment: put `comment` above the `declaration` header in `file`.
    """

    kind: Literal["replace", "prepend_comment"] = "replace"
    file: str
    search: str | None = None
    replace: str = ""
    regex: bool = False
    declaration: str | None = None
    comment: str = "// @ts-ignore"

    @model_validator(mode="after")
    def validate_kind_fields(self) -> "ModSpec":
        if self.kind == "replace" and not self.search:
            raise ValueError("replace mods need a 'search' value")
        if self.kind == "prepend_comment" and not self.declaration:
            raise ValueError("prepend_comment mods need a 'declaration' value")
        return self


class ModsConfig(BaseModel):
    """Mods configuration.

    Env vars:
        JAVADTS__MODS__ENABLED: Apply mods at all
        JAVADTS__MODS__STRICT: Fail the build when a mod matches nothing
        JAVADTS__MODS__BUILTIN: Include the built-in Bitwig API mods
    """

    enabled: bool = Field(default=True, description="Apply mods before bundling.")
    strict: bool = Field(
        default=True,
        description="Fail when a mod matches nothing or its target file is missing.",
    )
    builtin: bool = Field(
        default=True,
        description="Include the built-in mods for the Bitwig controller API.",
    )
    extra: list[ModSpec] = Field(
        default_factory=list,
        description="Additional mods, applied after the built-in ones.",
    )


class JavaDtsConfig(BaseModel):
    """Root configuration for javadts.

    All settings can be configured via:
    1. Environment variables: JAVADTS__SECTION__KEY
    2. javadts.yaml in the project directory
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    translate: TranslateConfig = Field(default_factory=TranslateConfig)
    mods: ModsConfig = Field(default_factory=ModsConfig)
