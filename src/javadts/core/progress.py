"""Terminal feedback for builds: status lines, timed stages, a file progress bar.

All of it goes to stderr so ``javadts convert`` can stream declarations to
stdout. Usage::

    with task("Converting Java sources") as stage:
        for path in progress(sources, desc="Converting"):
            ...
    stage.elapsed  # seconds, also recorded on failure
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TypeVar

import structlog
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from javadts.core.formatting import format_duration

T = TypeVar("T")

log = structlog.get_logger(__name__)

# Smaller file lists finish before a bar is worth drawing
BAR_MIN_ITEMS = 100

_console = Console(stderr=True)
_console_suppressed: ContextVar[bool] = ContextVar("console_suppressed", default=False)

_MARKERS = {
    "success": "[green]✓[/green]",
    "error": "[red]✗[/red]",
    "info": " ",
}


@dataclass
class Stage:
    """A named build stage and how long it ran."""

    name: str
    elapsed: float = 0.0


def _stderr_is_tty() -> bool:
    return sys.stderr.isatty()


def is_console_suppressed() -> bool:
    return _console_suppressed.get()


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Keep console log handlers quiet; file outputs still receive everything."""
    token = _console_suppressed.set(True)
    try:
        yield
    finally:
        _console_suppressed.reset(token)


def status(message: str, *, style: str = "info") -> None:
    """Print one status line to stderr, prefixed by the style's marker."""
    _console.print(f"{_MARKERS.get(style, ' ')} {message}", highlight=False)


def progress(items: Sequence[T], *, desc: str) -> Iterator[T]:
    """Yield `items`, drawing a bar on a terminal when there are many of them."""
    if not (_stderr_is_tty() and len(items) >= BAR_MIN_ITEMS):
        yield from items
        return

    columns = (TextColumn(f"  {desc}"), BarColumn(bar_width=30), MofNCompleteColumn())
    with suppress_console_logs(), Progress(*columns, console=_console, transient=True) as bar:
        bar_task = bar.add_task(desc, total=len(items))
        for item in items:
            yield item
            bar.advance(bar_task)


@contextmanager
def task(name: str) -> Iterator[Stage]:
    """Run one build stage, then print its outcome and duration."""
    stage = Stage(name)
    start = time.perf_counter()
    try:
        yield stage
    except Exception as e:
        stage.elapsed = time.perf_counter() - start
        status(f"{name} failed: {e}", style="error")
        log.error("stage_failed", stage=name, elapsed_s=round(stage.elapsed, 3), error=str(e))
        raise
    stage.elapsed = time.perf_counter() - start
    status(f"{name} ({format_duration(stage.elapsed)})", style="success")
    log.debug("stage_done", stage=name, elapsed_s=round(stage.elapsed, 3))
