"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (JAVADTS__SECTION__KEY)
3. Project config (javadts.yaml)
4. Built-in defaults (lowest priority)

Relative paths in the source/output sections are resolved against the
project directory.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from javadts.config.constants import CONFIG_FILE_NAME
from javadts.config.models import (
    JavaDtsConfig,
    LoggingConfig,
    ModsConfig,
    OutputConfig,
    SourceConfig,
    TranslateConfig,
)
from javadts.core.errors import ConfigError


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source."""

    class JavaDtsSettings(BaseSettings):
        """Root config. Env vars: JAVADTS__LOGGING__LEVEL, JAVADTS__SOURCE__ROOT, etc."""

        model_config = SettingsConfigDict(
            env_prefix="JAVADTS__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        source: SourceConfig = SourceConfig()
        output: OutputConfig = OutputConfig()
        translate: TranslateConfig = TranslateConfig()
        mods: ModsConfig = ModsConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml file
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return JavaDtsSettings


JavaDtsSettings = _make_settings_class({})


def _resolve(path: Path | None, base: Path) -> Path | None:
    if path is None:
        return None
    path = path.expanduser()
    return path if path.is_absolute() else base / path


def _resolve_paths(config: JavaDtsConfig, base: Path) -> JavaDtsConfig:
    source = config.source.model_copy(update={"root": _resolve(config.source.root, base)})
    output = config.output.model_copy(
        update={
            "out_file": _resolve(config.output.out_file, base),
            "scratch_dir": _resolve(config.output.scratch_dir, base),
            "trailer_path": _resolve(config.output.trailer_path, base),
        }
    )
    return config.model_copy(update={"source": source, "output": output})


def load_config(
    project_dir: Path | None = None,
    *,
    config_file: Path | None = None,
    **kwargs: Any,
) -> JavaDtsConfig:
    """Load config: defaults < javadts.yaml < env vars < kwargs.

    Args:
        project_dir: Directory holding javadts.yaml; relative paths resolve
                     against it. Defaults to the current working directory.
        config_file: Explicit config file (must exist) instead of javadts.yaml.
        **kwargs: Override values per section (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    project_dir = project_dir or Path.cwd()

    if config_file is not None:
        if not config_file.exists():
            raise ConfigError.file_not_found(str(config_file))
        yaml_config = _load_yaml(config_file)
    else:
        yaml_config = _load_yaml(project_dir / CONFIG_FILE_NAME)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
        config = JavaDtsConfig.model_validate(settings.model_dump())
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e

    return _resolve_paths(config, project_dir)
