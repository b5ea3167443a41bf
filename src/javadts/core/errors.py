"""javadts error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Translation (structural problems in the Java source tree)
- 4xxx: Bundle
- 5xxx: Mods
"""

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Translation (3xxx)
    UNHANDLED_DECLARATION = 3001
    UNRESOLVED_TYPE = 3002
    UNHANDLED_RESULT_TYPE = 3003
    UNHANDLED_MEMBER = 3004
    SYNTAX_ERROR = 3005

    # Bundle (4xxx)
    MISSING_NAMESPACE = 4001

    # Mods (5xxx)
    MOD_NO_MATCH = 5001
    MOD_TARGET_MISSING = 5002


@dataclass(frozen=True, slots=True)
class JavaDtsError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'UNRESOLVED_TYPE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(JavaDtsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"File not found: {path}",
            details={"path": path},
        )


class TranslationError(JavaDtsError):
    """The Java source left the grammar subset the renderers understand.

    Always fatal: fixing it means changing a renderer, not retrying.
    """

    @classmethod
    def unhandled_declaration(cls, kind: str, line: int = 0) -> "TranslationError":
        return cls(
            code=ErrorCode.UNHANDLED_DECLARATION,
            message=f"Unhandled type declaration kind '{kind}' (line {line})",
            details={"kind": kind, "line": line},
        )

    @classmethod
    def unresolved_type(cls, kind: str, text: str, line: int = 0) -> "TranslationError":
        return cls(
            code=ErrorCode.UNRESOLVED_TYPE,
            message=f"Cannot resolve type '{text}' from node '{kind}' (line {line})",
            details={"kind": kind, "text": text, "line": line},
        )

    @classmethod
    def unhandled_result_type(cls, method: str, line: int = 0) -> "TranslationError":
        return cls(
            code=ErrorCode.UNHANDLED_RESULT_TYPE,
            message=f"Unhandled result type for method '{method}' (line {line})",
            details={"method": method, "line": line},
        )

    @classmethod
    def unhandled_member(cls, kind: str, owner: str, line: int = 0) -> "TranslationError":
        return cls(
            code=ErrorCode.UNHANDLED_MEMBER,
            message=f"Unhandled member kind '{kind}' in '{owner}' (line {line})",
            details={"kind": kind, "owner": owner, "line": line},
        )

    @classmethod
    def syntax_error(cls, path: str, line: int) -> "TranslationError":
        return cls(
            code=ErrorCode.SYNTAX_ERROR,
            message=f"Java syntax error in {path} (line {line})",
            details={"path": path, "line": line},
        )

    def in_file(self, path: str) -> "TranslationError":
        """Copy of this error that also names the offending source file."""
        if "file" in self.details:
            return self
        return replace(
            self,
            message=f"{path}: {self.message}",
            details={**self.details, "file": path},
        )


class BundleError(JavaDtsError):
    """Per-file outputs could not be merged."""

    @classmethod
    def missing_namespace(cls, path: str) -> "BundleError":
        return cls(
            code=ErrorCode.MISSING_NAMESPACE,
            message=f"Unable to find namespace in {path}",
            details={"path": path},
        )


class ModError(JavaDtsError):
    """A mod no longer lines up with the generated output."""

    @classmethod
    def no_match(cls, file: str, mod: str) -> "ModError":
        return cls(
            code=ErrorCode.MOD_NO_MATCH,
            message=f"Mod {mod} matched nothing in {file}",
            details={"file": file, "mod": mod},
        )

    @classmethod
    def target_missing(cls, file: str, mod: str) -> "ModError":
        return cls(
            code=ErrorCode.MOD_TARGET_MISSING,
            message=f"Mod {mod} targets missing file {file}",
            details={"file": file, "mod": mod},
        )
