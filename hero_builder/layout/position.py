"""
Compilation ancre symbolique → coordonnées en %.

Tables de base uniques : le compositor et le renderer les lisent ici,
l'aperçu éditeur et la page publique ne peuvent donc pas diverger.
Aucun bornage : un offset peut sortir de [0, 100] (débord volontaire).
"""
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from ..blocks.base import Position

HORIZONTAL_BASE = MappingProxyType({
    "left":         10,
    "left-center":  25,
    "center":       50,
    "right-center": 75,
    "right":        90,
})

VERTICAL_BASE = MappingProxyType({
    "top":           10,
    "top-center":    30,
    "middle":        50,
    "bottom-center": 70,
    "bottom":        90,
})

# L'élément est ancré par son centre sur le point compilé
CENTER_ANCHOR_TRANSFORM = "translate(-50%, -50%)"


class CompiledPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    left_percent: float
    top_percent: float

    def css(self) -> str:
        return f"left:{format_number(self.left_percent)}%;top:{format_number(self.top_percent)}%"


def compile_position(position: Position) -> CompiledPosition:
    return CompiledPosition(
        left_percent=HORIZONTAL_BASE[position.horizontal] + position.offset_x,
        top_percent=VERTICAL_BASE[position.vertical] + position.offset_y,
    )


def format_number(value: float) -> str:
    """55.0 → "55", 12.5 → "12.5"."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))
