"""Hand corrections applied to generated declarations before bundling."""

from javadts.mods.defaults import BITWIG_MODS
from javadts.mods.engine import (
    Mod,
    ModResult,
    PrependComment,
    Substitution,
    apply_mods,
    mod_from_spec,
)

__all__ = [
    "BITWIG_MODS",
    "Mod",
    "ModResult",
    "PrependComment",
    "Substitution",
    "apply_mods",
    "mod_from_spec",
]
