"""Tests for import alias rendering."""

from collections.abc import Callable

from structlog.testing import capture_logs

from javadts.render.imports import render_imports, resolve_import
from javadts.render.model import ImportAlias
from javadts.render.options import RenderOptions
from javadts.syntax.tree import SyntaxNode

Parse = Callable[[str], SyntaxNode]


def import_nodes(parse: Parse, *lines: str) -> list[SyntaxNode]:
    root = parse("package com.acme;\n" + "\n".join(lines) + "\ninterface Host {}\n")
    return list(root.of_kind("import_declaration"))


class TestResolveImport:
    """Single import resolution."""

    def test_alias_uses_last_segment(self, parse: Parse, options: RenderOptions) -> None:
        (node,) = import_nodes(parse, "import com.bitwig.extension.api.Color;")

        assert resolve_import(node, options) == ImportAlias(
            name="Color", path="com.bitwig.extension.api.Color"
        )

    def test_reserved_segments_renamed(self, parse: Parse, options: RenderOptions) -> None:
        (node,) = import_nodes(parse, "import com.acme.function.Thing;")

        alias = resolve_import(node, options)

        assert alias is not None
        assert alias.render() == "import Thing = com.acme.func.Thing;"

    def test_blocked_import_dropped_silently(self, parse: Parse, options: RenderOptions) -> None:
        (node,) = import_nodes(parse, "import java.util.ArrayList;")

        with capture_logs() as logs:
            assert resolve_import(node, options) is None
        assert logs == []

    def test_static_and_wildcard_imports_skipped_with_warning(
        self, parse: Parse, options: RenderOptions
    ) -> None:
        nodes = import_nodes(parse, "import static java.lang.Math.max;", "import java.util.*;")

        with capture_logs() as logs:
            assert [resolve_import(node, options) for node in nodes] == [None, None]
        assert [entry["event"] for entry in logs] == ["import_skipped", "import_skipped"]


class TestRenderImports:
    """Import block rendering."""

    def test_source_order_and_duplicates_kept(self, parse: Parse, options: RenderOptions) -> None:
        nodes = import_nodes(
            parse,
            "import com.acme.b.Beta;",
            "import java.util.ArrayList;",
            "import com.acme.a.Alpha;",
            "import com.acme.b.Beta;",
        )

        assert render_imports(nodes, options) == (
            "import Beta = com.acme.b.Beta;\n"
            "import Alpha = com.acme.a.Alpha;\n"
            "import Beta = com.acme.b.Beta;"
        )

    def test_custom_block_list(self, parse: Parse) -> None:
        nodes = import_nodes(parse, "import com.acme.Internal;", "import com.acme.Public;")
        options = RenderOptions(ignored_imports=frozenset({"com.acme.Internal"}))

        assert render_imports(nodes, options) == "import Public = com.acme.Public;"

    def test_no_imports(self, options: RenderOptions) -> None:
        assert render_imports([], options) == ""
