"""Core module exports."""

from javadts.core.errors import (
    BundleError,
    ConfigError,
    ErrorCode,
    JavaDtsError,
    ModError,
    TranslationError,
)
from javadts.core.logging import configure_logging, source_context
from javadts.core.progress import Stage, progress, status, task

__all__ = [
    # Errors
    "BundleError",
    "ConfigError",
    "ErrorCode",
    "JavaDtsError",
    "ModError",
    "TranslationError",
    # Logging
    "configure_logging",
    "source_context",
    # Progress
    "Stage",
    "progress",
    "status",
    "task",
]
