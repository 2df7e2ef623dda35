"""Layout — compilation des positions + composition overlay / flow."""
from .position import (
    HORIZONTAL_BASE,
    VERTICAL_BASE,
    CENTER_ANCHOR_TRANSFORM,
    CompiledPosition,
    compile_position,
)
from .compositor import PlacedElement, Composition, composite

__all__ = [
    "HORIZONTAL_BASE",
    "VERTICAL_BASE",
    "CENTER_ANCHOR_TRANSFORM",
    "CompiledPosition",
    "compile_position",
    "PlacedElement",
    "Composition",
    "composite",
]
