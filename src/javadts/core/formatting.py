"""One-line summaries for the terminal."""

from __future__ import annotations

from pathlib import Path


def pluralize(count: int, noun: str, plural: str | None = None) -> str:
    """``(1, "file")`` -> ``1 file``; ``(2, "file")`` -> ``2 files``."""
    if count == 1:
        return f"1 {noun}"
    return f"{count} {plural or noun + 's'}"


def format_duration(seconds: float) -> str:
    """Milliseconds under a second, tenths under a minute, then ``Xm YYs``."""
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds}")
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs:02d}s"


def build_summary(out_file: Path, files: int, namespaces: int, mods_applied: int = 0) -> str:
    """Closing line of a build, e.g. ``Wrote api.d.ts (3 files, 1 namespace)``."""
    counts = [pluralize(files, "file"), pluralize(namespaces, "namespace")]
    if mods_applied:
        counts.append(f"{pluralize(mods_applied, 'mod')} applied")
    return f"Wrote {out_file} ({', '.join(counts)})"
