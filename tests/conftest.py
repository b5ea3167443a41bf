"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local javadts package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of javadts modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("javadts"):
        del sys.modules[module_name]

from javadts.render.options import RenderOptions  # noqa: E402
from javadts.syntax.parser import JavaParser  # noqa: E402
from javadts.syntax.tree import SyntaxNode  # noqa: E402


@pytest.fixture(scope="session")
def java_parser() -> JavaParser:
    """One tree-sitter parser shared by the whole run."""
    return JavaParser()


@pytest.fixture
def parse(java_parser: JavaParser) -> Callable[[str], SyntaxNode]:
    """Parse Java source text into a SyntaxNode tree."""
    return java_parser.parse


@pytest.fixture
def options() -> RenderOptions:
    """Default translation tables."""
    return RenderOptions()


@pytest.fixture
def write_java() -> Callable[[Path, str, str], Path]:
    """Write a Java file below a root, creating package directories."""

    def _write(root: Path, relative: str, source: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write
