"""Logging for javadts runs.

structlog events are handed to stdlib handlers, one per configured output,
each with its own renderer (console or JSON) and level. While a source file
is being converted its path is bound as ``source`` in the structlog context,
so warnings raised deep inside the renderers still name the file they came
from.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from javadts.config.models import LoggingConfig, LogOutputConfig

CONSOLE_DESTINATIONS = ("stderr", "stdout")

_log_file: Path | None = None


def get_log_file_path() -> Path | None:
    """First file output of the active configuration, used in CLI error hints."""
    return _log_file


class ConsoleSuppressingFilter(logging.Filter):
    """Hold back console records while a progress bar owns the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        from javadts.core.progress import is_console_suppressed

        return not is_console_suppressed()


@contextmanager
def source_context(source: str) -> Iterator[None]:
    """Tag every event logged inside the block with ``source=<source>``."""
    with structlog.contextvars.bound_contextvars(source=source):
        yield


def configure_logging(*, config: LoggingConfig | None = None, level: str = "INFO") -> None:
    """Route structlog events to the outputs in `config`.

    Without a config a single console output on stderr at `level` is used;
    the CLI does that before the project config has been loaded.
    """
    global _log_file
    from javadts.config.models import LoggingConfig

    if config is None:
        config = LoggingConfig.model_validate({"level": level})

    root_level = logging.getLevelNamesMapping()[config.level]
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers bound at import time
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)

    _log_file = None
    for output in config.outputs:
        handler = _handler(output)
        handler.setLevel(output.level or config.level)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(processor=_renderer(output), foreign_pre_chain=pre_chain)
        )
        root.addHandler(handler)
        if _log_file is None and output.destination not in CONSOLE_DESTINATIONS:
            _log_file = Path(output.destination)


def _handler(output: LogOutputConfig) -> logging.Handler:
    if output.destination in CONSOLE_DESTINATIONS:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        handler: logging.Handler = logging.StreamHandler(stream)
        handler.addFilter(ConsoleSuppressingFilter())
        return handler

    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding="utf-8")


def _renderer(output: LogOutputConfig) -> structlog.types.Processor:
    if output.format == "json":
        return structlog.processors.JSONRenderer()
    colors = output.destination == "stderr" and sys.stderr.isatty()
    return structlog.dev.ConsoleRenderer(colors=colors)
