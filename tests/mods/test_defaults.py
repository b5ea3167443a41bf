"""Tests for the built-in Bitwig API mods."""

from pathlib import Path

from javadts.mods import BITWIG_MODS, PrependComment, apply_mods

API = "com/bitwig/extension/controller/api"

GENERATED = {
    "SoloValue": (
        "declare namespace com.bitwig.extension.controller.api {\n"
        "  interface SoloValue extends SettableBooleanValue {\n"
        "    toggle(exclusive: boolean): void;\n"
        "  }\n"
        "}\n"
    ),
    "RangedValue": (
        "declare namespace com.bitwig.extension.controller.api {\n"
        "  interface RangedValue extends Value<DoubleValueChangedCallback> {}\n"
        "}\n"
    ),
    "IntegerValue": (
        "declare namespace com.bitwig.extension.controller.api {\n"
        "  interface IntegerValue extends Value<IntegerValueChangedCallback> {}\n"
        "}\n"
    ),
    "StringArrayValue": (
        "declare namespace com.bitwig.extension.controller.api {\n"
        "  interface StringArrayValue extends ObjectArrayValue<string> {}\n"
        "}\n"
    ),
    "ControllerHost": (
        "declare namespace com.bitwig.extension.controller.api {\n"
        "  interface ControllerHost extends Host {\n"
        "    scheduleTask(callback: () => void, args: object, delay: number): void;\n"
        "  }\n"
        "}\n"
    ),
    "NoteInput": (
        "declare namespace com.bitwig.extension.controller.api {\n"
        "  interface NoteInput {\n"
        "    setKeyTranslationTable(table: object[]): void;\n"
        "  }\n"
        "}\n"
    ),
    "Application": (
        "declare namespace com.bitwig.extension.controller.api {\n"
        "  interface Application {\n"
        "    PANEL_LAYOUT_ARRANGE: string;\n"
        "\n"
        "    PANEL_LAYOUT_MIX: string;\n"
        "  }\n"
        "}\n"
    ),
}


def _scratch(root: Path) -> Path:
    api = root / API
    api.mkdir(parents=True)
    for name, text in GENERATED.items():
        (api / f"{name}.d.ts").write_text(text)
    return api


class TestBitwigMods:
    """Built-in mods against representative generated files."""

    def test_ignore_comment_targets(self) -> None:
        targets = {mod.declaration for mod in BITWIG_MODS if isinstance(mod, PrependComment)}

        assert targets == {"SoloValue", "RangedValue", "IntegerValue", "StringArrayValue"}

    def test_all_mods_match(self, tmp_path: Path) -> None:
        # Given
        api = _scratch(tmp_path)

        # When
        results = apply_mods(tmp_path, BITWIG_MODS, strict=True)

        # Then
        assert all(result.matches > 0 for result in results)
        assert "  // @ts-ignore\n  interface SoloValue extends" in (api / "SoloValue.d.ts").read_text()
        assert (
            "scheduleTask<T extends any[]>(callback: (...args: T) => void, args: T, delay: number): void;"
            in (api / "ControllerHost.d.ts").read_text()
        )
        assert "setKeyTranslationTable(table: number[]): void;" in (api / "NoteInput.d.ts").read_text()
        application = (api / "Application.d.ts").read_text()
        assert "PANEL_LAYOUT_ARRANGE: 'ARRANGE';" in application
        assert "PANEL_LAYOUT_MIX: 'MIX';" in application

    def test_applying_twice_matches_applying_once(self, tmp_path: Path) -> None:
        api = _scratch(tmp_path)
        apply_mods(tmp_path, BITWIG_MODS, strict=True)
        once = {path.name: path.read_text() for path in api.iterdir()}

        apply_mods(tmp_path, BITWIG_MODS, strict=False)

        assert {path.name: path.read_text() for path in api.iterdir()} == once
