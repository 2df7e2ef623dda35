"""Fixtures partagées — documents de démo (seeds/) + fabriques d'éléments."""
import json
from pathlib import Path

import pytest

from hero_builder import (
    AssetRegistry, HeroBlock, Position, Responsive,
    LogoElement, LogoScale, TextElement, ButtonElement, ButtonAction,
    parse_document,
)

SEEDS_DIR = Path(__file__).parent.parent / "seeds"


def load_seed(name: str) -> dict:
    with open(SEEDS_DIR / name, encoding="utf-8") as f:
        return json.load(f)


def per_device(mobile, tablet, desktop) -> dict:
    return {"mobile": mobile, "tablet": tablet, "desktop": desktop}


def _base(element_id, visible, below, position):
    return dict(
        id=element_id,
        order=Responsive[int].uniform(0),
        visible=Responsive[bool](**visible) if isinstance(visible, dict) else Responsive[bool].uniform(visible),
        below_image=Responsive[bool](**below) if isinstance(below, dict) else Responsive[bool].uniform(below),
        position=Responsive[Position].uniform(position or Position()),
    )


def make_text(element_id, visible=True, below=False, position=None, content="Texte") -> TextElement:
    return TextElement(
        content=content,
        font_size=Responsive[float](mobile=20, tablet=30, desktop=40),
        **_base(element_id, visible, below, position),
    )


def make_logo(element_id, logo_ref="salon-logo", visible=True, below=False, position=None) -> LogoElement:
    return LogoElement(
        logo_ref=logo_ref,
        scale=Responsive[LogoScale](mobile=50, tablet=75, desktop=100),
        **_base(element_id, visible, below, position),
    )


def make_button(element_id, action=None, visible=True, below=False, position=None) -> ButtonElement:
    return ButtonElement(
        label="Go",
        action=action or ButtonAction(type="link", value="https://example.com"),
        **_base(element_id, visible, below, position),
    )


@pytest.fixture
def demo_block() -> HeroBlock:
    return parse_document(load_seed("demo_hero.json"))


@pytest.fixture
def assets() -> AssetRegistry:
    return AssetRegistry.from_file(SEEDS_DIR / "logos.json")
