"""Translation constants.

Built-in defaults for the translation tables. Every table here can be
overridden through TranslateConfig (see models.py); the values below are the
ones the Bitwig controller API needs.
"""

# =============================================================================
# Type Overrides
# =============================================================================
# Exact Java type name -> TypeScript spelling. Overridden names drop their
# generic arguments.

DEFAULT_TYPE_OVERRIDES: dict[str, str] = {
    "String": "string",
    "Byte": "number",
    "Short": "number",
    "Integer": "number",
    "Long": "number",
    "Float": "number",
    "Double": "number",
    "Boolean": "boolean",
    "BigDecimal": "number",
    "BigInteger": "number",
    "Number": "number",
    "Void": "void",
    "Object": "object",
    "Runnable": "() => void",
    "JSObject": "() => void",
    "Future": "unknown",
}

# =============================================================================
# Import Block-list
# =============================================================================
# Qualified import paths with no TypeScript counterpart. Matched after
# reserved segment renaming.

DEFAULT_IGNORED_IMPORTS: tuple[str, ...] = (
    "java.util.Collections",
    "java.util.ArrayList",
    "java.util.concurrent.Callable",
    "com.bitwig.extension.api.opensoundcontrol.OscNode",
    "com.bitwig.extension.api.opensoundcontrol.OscMethod",
    "java.util.concurrent.Future",
    "java.io.IOException",
    "java.lang.annotation.Retention",
    "java.lang.annotation.RetentionPolicy",
    "java.nio.charset.StandardCharsets",
    "java.util.Arrays",
    "jdk.nashorn.api.scripting.JSObject",
)

# =============================================================================
# Reserved Words
# =============================================================================
# Java identifiers that are reserved in TypeScript. Applied to parameter names
# and to namespace/import path segments.

DEFAULT_RESERVED_RENAMES: dict[str, str] = {
    "function": "func",
    "delete": "del",
    "in": "input",
    "typeof": "typeOf",
    "with": "withValue",
    "export": "exported",
    "debugger": "debug",
}

DEFAULT_CALLBACK_SUFFIX = "Callback"
"""Declarations whose name ends with this render methods as call signatures."""

# =============================================================================
# Source Discovery
# =============================================================================

JAVA_SUFFIX = ".java"
DECLARATION_SUFFIX = ".d.ts"

DEFAULT_SKIP_SUFFIXES: tuple[str, ...] = ("Exception.java",)
"""Source files whose name ends with one of these are not translated."""

CONFIG_FILE_NAME = "javadts.yaml"
"""Project config file looked up in the project directory."""
