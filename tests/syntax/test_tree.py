"""Tests for SyntaxNode accessors."""

from javadts.syntax.tree import SyntaxNode


def _node() -> SyntaxNode:
    return SyntaxNode(
        kind="method_declaration",
        children=(
            SyntaxNode(kind="modifiers", tokens=("public", "static")),
            SyntaxNode(kind="void_type", field="type"),
            SyntaxNode(kind="identifier", text="run", field="name"),
            SyntaxNode(kind="formal_parameters", field="parameters"),
        ),
        comments=("/** first */", "// between", "/** second */"),
    )


class TestSyntaxNode:
    """Accessor behavior on hand-built nodes."""

    def test_first_by_field(self) -> None:
        name = _node().first("name")

        assert name is not None and name.text == "run"
        assert _node().first("body") is None

    def test_slot_and_slots(self) -> None:
        node = _node()

        assert [n.kind for n in node.slot("type")] == ["void_type"]
        assert set(node.slots) == {"modifiers", "type", "name", "parameters"}

    def test_of_kind(self) -> None:
        assert len(_node().of_kind("modifiers", "identifier")) == 2
        assert _node().first_of_kind("block") is None

    def test_has_token(self) -> None:
        modifiers = _node().first_of_kind("modifiers")

        assert modifiers is not None
        assert modifiers.has_token("static")
        assert not modifiers.has_token("final")

    def test_doc_comment_is_last_javadoc(self) -> None:
        assert _node().doc_comment == "/** second */"

    def test_doc_comment_ignores_plain_comments(self) -> None:
        node = SyntaxNode(kind="field_declaration", comments=("// note", "/* block */"))

        assert node.doc_comment is None
