"""Text templates for the bundled artifact."""

from pathlib import Path

HEADER_TEMPLATE = """\
// Type definitions for Bitwig Studio Control Surface Scripting API v{api_version}
// Project: https://bitwig.com
// Generated by javadts {version}
"""


def get_header(api_version: str, version: str) -> str:
    """Return the default artifact header."""
    return HEADER_TEMPLATE.format(api_version=api_version, version=version)


def get_trailer() -> str:
    """Return the built-in trailer declaring the script runtime globals."""
    return (Path(__file__).parent / "additional-types.d.ts").read_text(encoding="utf-8")


__all__ = ["HEADER_TEMPLATE", "get_header", "get_trailer"]
