"""
Bloc Hero — exports publics.
"""
from .base import HeroModel, Position, ElementBase, HorizontalAnchor, VerticalAnchor, ElementKind
from .hero import (
    Background, Overlay,
    LogoElement, TextElement, ButtonElement, HeroElement, LogoScale,
    ButtonAction, ButtonStyle,
    HeroBlock,
    generate_id, default_position,
    create_default_hero, new_logo, new_text, new_button,
)

__all__ = [
    # Base
    "HeroModel", "Position", "ElementBase", "HorizontalAnchor", "VerticalAnchor", "ElementKind",
    # Fond
    "Background", "Overlay",
    # Éléments
    "LogoElement", "TextElement", "ButtonElement", "HeroElement", "LogoScale",
    "ButtonAction", "ButtonStyle",
    # Bloc
    "HeroBlock",
    # Défauts
    "generate_id", "default_position",
    "create_default_hero", "new_logo", "new_text", "new_button",
]
