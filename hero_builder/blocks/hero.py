"""Bloc Hero — image de fond, voile optionnel, logos / textes / boutons positionnés par device."""
import uuid
from typing import Annotated, ClassVar, Iterator, Literal, Optional, Tuple, Union

from pydantic import Field, model_validator

from ..core.responsive import Responsive
from .base import HeroModel, ElementBase, ElementKind, Position, HorizontalAnchor, VerticalAnchor

FontWeight         = Literal["300", "400", "500", "600", "700", "800"]
ButtonActionType   = Literal["link", "scroll-to-anchor", "telephone", "email"]
ButtonVariant      = Literal["primary", "secondary", "outline", "custom"]
ButtonSize         = Literal["small", "medium", "large"]
ButtonBorderRadius = Literal["none", "small", "medium", "large", "pill"]

# Échelle d'un logo en %
LogoScale = Annotated[float, Field(ge=10, le=200)]


# ── Fond + voile ─────────────────────────────────────────────────────────────

class Background(HeroModel):
    """Image de fond — toujours en cover, point focal en % (0–100)."""
    image: str = ""
    x: float = Field(default=50, ge=0, le=100)
    y: float = Field(default=50, ge=0, le=100)


class Overlay(HeroModel):
    enabled: bool = False
    color: str = "#000000"
    opacity: float = Field(default=50, ge=0, le=100)


# ── Éléments ─────────────────────────────────────────────────────────────────

class LogoElement(ElementBase):
    kind: ClassVar[ElementKind] = "logo"
    logo_ref: str = ""
    scale: Responsive[LogoScale]


class TextElement(ElementBase):
    kind: ClassVar[ElementKind] = "text"
    content: str = ""
    font_family: str = "Inter, sans-serif"
    font_size: Responsive[float]
    font_weight: FontWeight = "600"
    color: str = "#ffffff"


class ButtonAction(HeroModel):
    type: ButtonActionType = "link"
    value: str = ""


class ButtonStyle(HeroModel):
    variant: ButtonVariant = "primary"
    size: ButtonSize = "medium"
    border_radius: ButtonBorderRadius = "medium"
    # Couleurs utilisées uniquement si variant == "custom"
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    border_color: Optional[str] = None


class ButtonElement(ElementBase):
    kind: ClassVar[ElementKind] = "button"
    label: str = "Button"
    action: ButtonAction = ButtonAction()
    style: ButtonStyle = ButtonStyle()


HeroElement = Union[LogoElement, TextElement, ButtonElement]


# ── Bloc ─────────────────────────────────────────────────────────────────────

class HeroBlock(HeroModel):
    """
    Document de configuration d'un bloc Hero.

    logos / texts / buttons sont dans l'ordre d'insertion ; ce n'est pas un
    ordre de rendu (voir layout.compositor).
    """
    block_type: Literal["hero_block"] = "hero_block"
    background: Background = Background()
    overlay: Overlay = Overlay()
    height: Responsive[str] = Responsive[str](desktop="600px", tablet="500px", mobile="400px")
    logos: Tuple[LogoElement, ...] = ()
    texts: Tuple[TextElement, ...] = ()
    buttons: Tuple[ButtonElement, ...] = ()

    @model_validator(mode="after")
    def _unique_ids(self):
        seen = set()
        for element in self.elements():
            if element.id in seen:
                raise ValueError(f"id d'élément dupliqué : {element.id!r}")
            seen.add(element.id)
        return self

    def elements(self) -> Iterator[HeroElement]:
        """Tous les éléments : logos, puis textes, puis boutons."""
        yield from self.logos
        yield from self.texts
        yield from self.buttons

    def find(self, element_id: str) -> Optional[HeroElement]:
        return next((e for e in self.elements() if e.id == element_id), None)


# ── Valeurs par défaut ───────────────────────────────────────────────────────

def generate_id() -> str:
    return str(uuid.uuid4())


def default_position(horizontal: HorizontalAnchor = "center", vertical: VerticalAnchor = "middle") -> Responsive[Position]:
    return Responsive[Position].uniform(Position(horizontal=horizontal, vertical=vertical))


def create_default_hero() -> HeroBlock:
    """Document complet créé à l'ajout d'un bloc Hero sur une page."""
    return HeroBlock()


def new_text(index: int = 0, element_id: Optional[str] = None) -> TextElement:
    return TextElement(
        id=element_id or generate_id(),
        content="New text",
        font_size=Responsive[float](desktop=48, tablet=36, mobile=28),
        order=Responsive[int].uniform(index),
        visible=Responsive[bool].uniform(True),
        below_image=Responsive[bool].uniform(False),
        position=default_position(),
    )


def new_button(index: int = 0, element_id: Optional[str] = None) -> ButtonElement:
    return ButtonElement(
        id=element_id or generate_id(),
        order=Responsive[int].uniform(index),
        visible=Responsive[bool].uniform(True),
        below_image=Responsive[bool].uniform(False),
        position=default_position(vertical="bottom-center"),
    )


def new_logo(logo_ref: str = "", index: int = 0, element_id: Optional[str] = None) -> LogoElement:
    return LogoElement(
        id=element_id or generate_id(),
        logo_ref=logo_ref,
        scale=Responsive[LogoScale].uniform(100),
        order=Responsive[int].uniform(index),
        visible=Responsive[bool].uniform(True),
        below_image=Responsive[bool].uniform(False),
        position=default_position(vertical="top-center"),
    )
