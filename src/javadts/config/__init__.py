"""Config module exports."""

from javadts.config.loader import JavaDtsSettings, load_config
from javadts.config.models import (
    JavaDtsConfig,
    LoggingConfig,
    ModsConfig,
    ModSpec,
    OutputConfig,
    SourceConfig,
    TranslateConfig,
)

__all__ = [
    "load_config",
    "JavaDtsConfig",
    "JavaDtsSettings",
    "LoggingConfig",
    "ModsConfig",
    "ModSpec",
    "OutputConfig",
    "SourceConfig",
    "TranslateConfig",
]
