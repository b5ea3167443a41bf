"""Built-in mods for the Bitwig controller API."""

from __future__ import annotations

import re

from javadts.mods.engine import Mod, PrependComment, Substitution

API_DIR = "com/bitwig/extension/controller/api"


def _api_file(name: str) -> str:
    return f"{API_DIR}/{name}.d.ts"


# These value interfaces inherit incompatible overloads of get()/set()
# from their generic parents.
IGNORED_DECLARATIONS = ("SoloValue", "RangedValue", "IntegerValue", "StringArrayValue")

BITWIG_MODS: tuple[Mod, ...] = (
    *(PrependComment(file=_api_file(name), declaration=name) for name in IGNORED_DECLARATIONS),
    Substitution(
        file=_api_file("ControllerHost"),
        search="scheduleTask(callback: () => void, args: object, delay: number): void;",
        replace="scheduleTask<T extends any[]>(callback: (...args: T) => void, args: T, delay: number): void;",
    ),
    Substitution(
        file=_api_file("NoteInput"),
        search=re.compile(r"table: object\[\]"),
        replace="table: number[]",
    ),
    Substitution(
        file=_api_file("Application"),
        search=re.compile(r"PANEL_LAYOUT_(.+): string;"),
        replace=r"PANEL_LAYOUT_\1: '\1';",
    ),
)
