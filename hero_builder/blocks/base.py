"""
Modèles de base du bloc Hero.

Noms Python en snake_case, noms de stockage en camelCase (belowImage, offsetX…) :
model_dump(by_alias=True) reproduit le document hébergé à l'identique.
Tous les modèles sont gelés — un rendu travaille toujours sur un snapshot.
"""
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.responsive import Responsive

HorizontalAnchor = Literal["left", "left-center", "center", "right-center", "right"]
VerticalAnchor   = Literal["top", "top-center", "middle", "bottom-center", "bottom"]
ElementKind      = Literal["logo", "text", "button"]


class HeroModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Position(HeroModel):
    """Ancre symbolique + décalage en % (plage conseillée -20..20, non bornée)."""
    horizontal: HorizontalAnchor = "center"
    vertical: VerticalAnchor = "middle"
    offset_x: float = 0
    offset_y: float = 0


class ElementBase(HeroModel):
    """Champs communs logo / texte / bouton."""
    kind: ClassVar[ElementKind]

    id: str = Field(..., min_length=1)
    order: Responsive[int]
    visible: Responsive[bool]
    below_image: Responsive[bool]
    position: Responsive[Position]
