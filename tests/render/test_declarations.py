"""Tests for interface and class declaration rendering."""

from collections.abc import Callable

import pytest
from structlog.testing import capture_logs

from javadts.core.errors import ErrorCode, TranslationError
from javadts.render.declarations import (
    declaration_style,
    extract_declaration,
    render_declaration,
    render_type_declarations,
)
from javadts.render.document import TOP_LEVEL_TYPE_KINDS
from javadts.render.model import (
    DeclarationKind,
    DeclarationStyle,
    FieldMember,
    MethodMember,
)
from javadts.render.options import RenderOptions
from javadts.syntax.tree import SyntaxNode

Parse = Callable[[str], SyntaxNode]


def top_level(parse: Parse, source: str) -> list[SyntaxNode]:
    return list(parse(source).of_kind(*TOP_LEVEL_TYPE_KINDS))


def render_one(parse: Parse, source: str, options: RenderOptions) -> str:
    return render_declaration(top_level(parse, source)[0], options)


class TestInterfaces:
    """Interface rendering."""

    def test_interface_with_parent(self, parse: Parse, options: RenderOptions) -> None:
        source = (
            "public interface SoloValue extends SettableBooleanValue {\n"
            "  void toggle(boolean exclusive);\n"
            "}\n"
        )

        assert render_one(parse, source, options) == (
            "interface SoloValue extends SettableBooleanValue {\n"
            "  toggle(exclusive: boolean): void;\n"
            "}"
        )

    def test_generic_interface_with_several_parents(self, parse: Parse, options: RenderOptions) -> None:
        source = (
            "public interface Bank<T extends Track & Named> extends ObjectProxy, Scrollable<T> {\n"
            "  T getItemAt(int index);\n"
            "\n"
            "  <V> V map(Function<T, V> mapper);\n"
            "}\n"
        )

        assert render_one(parse, source, options) == (
            "interface Bank<T extends Track & Named = Track & Named> extends ObjectProxy, Scrollable<T> {\n"
            "  getItemAt(index: number): T;\n"
            "\n"
            "  map<V>(mapper: Function<T, V>): V;\n"
            "}"
        )

    def test_doc_comments_are_realigned(self, parse: Parse, options: RenderOptions) -> None:
        source = (
            "/**\n"
            "     * A track.\n"
            "     */\n"
            "public interface Track {\n"
            "    /**\n"
            "     * Selects it.\n"
            "     */\n"
            "    void select();\n"
            "}\n"
        )

        assert render_one(parse, source, options) == (
            "/**\n"
            " * A track.\n"
            " */\n"
            "interface Track {\n"
            "  /**\n"
            "   * Selects it.\n"
            "   */\n"
            "  select(): void;\n"
            "}"
        )

    def test_empty_interface(self, parse: Parse, options: RenderOptions) -> None:
        assert render_one(parse, "interface Marker {}", options) == "interface Marker {}"

    def test_interface_members_are_never_static(self, parse: Parse, options: RenderOptions) -> None:
        """Static interface methods and implicit constants render as plain type members."""
        source = (
            "public interface Host {\n"
            "  static Host create() { return null; }\n"
            "\n"
            "  static final String PANEL_LAYOUT_MIX = \"MIX\";\n"
            "}\n"
        )

        rendered = render_one(parse, source, options)

        assert rendered == (
            "interface Host {\n"
            "  create(): Host;\n"
            "\n"
            "  PANEL_LAYOUT_MIX: string;\n"
            "}"
        )
        assert "static" not in rendered

    def test_bound_keeps_java_name_and_overrides_arguments(self, parse: Parse, options: RenderOptions) -> None:
        source = "interface Cache<K extends Object, V extends Comparable<Integer>> {}"

        assert render_one(parse, source, options) == (
            "interface Cache<K extends Object = Object, V extends Comparable<number> = Comparable<number>> {}"
        )


class TestCallbackStyle:
    """Callback declarations render methods as call signatures."""

    def test_callback_method_is_unnamed(self, parse: Parse, options: RenderOptions) -> None:
        source = (
            "public interface DoubleValueChangedCallback extends ValueChangedCallback {\n"
            "  void valueChanged(double newValue);\n"
            "}\n"
        )

        assert render_one(parse, source, options) == (
            "interface DoubleValueChangedCallback extends ValueChangedCallback {\n"
            "  (newValue: number): void;\n"
            "}"
        )

    def test_other_declarations_keep_names(self, parse: Parse, options: RenderOptions) -> None:
        source = "interface Callbacks { void valueChanged(double newValue); }"

        assert "valueChanged(newValue: number): void;" in render_one(parse, source, options)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("NoArgsCallback", DeclarationStyle.CALL_SIGNATURE),
            ("Callback", DeclarationStyle.CALL_SIGNATURE),
            ("CallbackRegistry", DeclarationStyle.NAMED),
            ("Track", DeclarationStyle.NAMED),
        ],
    )
    def test_declaration_style(self, name: str, expected: DeclarationStyle) -> None:
        assert declaration_style(name, "Callback") is expected

    def test_custom_suffix(self, parse: Parse) -> None:
        options = RenderOptions(callback_suffix="Handler")
        source = "interface ClickHandler { void onClick(int x); }"

        assert "  (x: number): void;" in render_one(parse, source, options)


class TestClasses:
    """Class rendering: fields, constructors, statics."""

    SOURCE = (
        "public class Color {\n"
        "  public static final int MAX = 255, MIN = 0;\n"
        "  private double red;\n"
        "  public Color(double red, double green) {}\n"
        "  public static Color fromHex(String... function) { return null; }\n"
        "  public int[] toArray(int in[]) { return null; }\n"
        "  static { init(); }\n"
        "  class Nested {}\n"
        "  enum Mode { A, B }\n"
        "}\n"
    )

    def test_members_in_order(self, parse: Parse, options: RenderOptions) -> None:
        assert render_one(parse, self.SOURCE, options) == (
            "class Color {\n"
            "  static MAX: number;\n"
            "\n"
            "  static MIN: number;\n"
            "\n"
            "  red: number;\n"
            "\n"
            "  constructor(red: number, green: number);\n"
            "\n"
            "  static fromHex(...func: string[]): Color;\n"
            "\n"
            "  toArray(input: number[]): number[];\n"
            "}"
        )

    def test_skipped_members_warn(self, parse: Parse, options: RenderOptions) -> None:
        with capture_logs() as logs:
            render_one(parse, self.SOURCE, options)

        events = [entry["event"] for entry in logs]
        assert "initializer_skipped" in events
        assert "nested_declaration_skipped" in events

    def test_superclass(self, parse: Parse, options: RenderOptions) -> None:
        source = "public class Clip extends Base<String> implements Foo {}"

        assert render_one(parse, source, options) == "class Clip extends Base<string> {}"

    def test_extract_model(self, parse: Parse, options: RenderOptions) -> None:
        declaration = extract_declaration(top_level(parse, self.SOURCE)[0], options)

        assert declaration is not None
        assert declaration.kind is DeclarationKind.CLASS
        assert declaration.members[0] == FieldMember(name="MAX", type="number", static=True)
        methods = [m for m in declaration.members if isinstance(m, MethodMember)]
        assert [m.name for m in methods] == ["fromHex", "toArray"]
        assert methods[0].parameters[0].variadic is True


class TestSkippedAndRejected:
    """Declarations with no rendering."""

    def test_enum_renders_nothing(self, parse: Parse, options: RenderOptions) -> None:
        assert render_one(parse, "enum Mode { A }", options) == ""

    def test_annotation_type_renders_nothing(self, parse: Parse, options: RenderOptions) -> None:
        with capture_logs() as logs:
            assert render_one(parse, "public @interface Marker {}", options) == ""

        assert logs[0]["event"] == "annotation_type_skipped"

    def test_record_raises(self, parse: Parse, options: RenderOptions) -> None:
        with pytest.raises(TranslationError) as exc_info:
            render_one(parse, "record Point(int x, int y) {}", options)

        assert exc_info.value.code == ErrorCode.UNHANDLED_DECLARATION
        assert exc_info.value.details["kind"] == "record_declaration"

    def test_unknown_member_raises(self, options: RenderOptions) -> None:
        node = SyntaxNode(
            kind="interface_declaration",
            children=(
                SyntaxNode(kind="identifier", text="Host", field="name"),
                SyntaxNode(
                    kind="interface_body",
                    field="body",
                    children=(SyntaxNode(kind="mystery_member", line=4),),
                ),
            ),
        )

        with pytest.raises(TranslationError) as exc_info:
            render_declaration(node, options)

        assert exc_info.value.code == ErrorCode.UNHANDLED_MEMBER
        assert exc_info.value.details == {"kind": "mystery_member", "owner": "Host", "line": 4}


class TestRenderTypeDeclarations:
    """Several top-level declarations."""

    def test_blocks_separated_by_blank_line(self, parse: Parse, options: RenderOptions) -> None:
        nodes = top_level(parse, "interface A {}\nenum E { X }\nclass B {}\n")

        assert render_type_declarations(nodes, options) == "interface A {}\n\nclass B {}"
