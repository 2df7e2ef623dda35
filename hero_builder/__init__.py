"""
Hero Builder — moteur de placement responsive du bloc Hero.

Usage (rendu) :
    >>> from hero_builder import parse_document, render_page
    >>> block = parse_document(stored_dict)
    >>> html = render_page(block, "mobile", assets)

Usage (composition seule) :
    >>> from hero_builder import composite
    >>> result = composite(block, "desktop", assets)
    >>> [p.id for p in result.overlay], [p.id for p in result.flow]

Usage (édition) :
    >>> from hero_builder import HeroDraft, add_text, set_device_value
    >>> draft = HeroDraft("home", "hero-1", block)
    >>> text = draft.apply(add_text)
    >>> draft.apply(set_device_value, text.id, "below_image", "mobile", True)
"""

# ── core ─────────────────────────────────────────────────────────────────────
from .core import (
    HeroError, DataIntegrityError, AssetResolutionError, ActionDispatchError, ElementNotFoundError,
    DeviceClass, DEVICE_CLASSES, DeviceSource, FixedViewport, ViewportClassifier, classify_width,
    Responsive, resolve,
)

# ── blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    Position, Background, Overlay,
    LogoElement, TextElement, ButtonElement, HeroElement, LogoScale,
    ButtonAction, ButtonStyle,
    HeroBlock,
    create_default_hero, new_logo, new_text, new_button,
)
from .assets import AssetRegistry, LogoDesign, LogoCanvas, LogoImage, LogoText

# ── layout ───────────────────────────────────────────────────────────────────
from .layout import (
    HORIZONTAL_BASE, VERTICAL_BASE, CompiledPosition, compile_position,
    PlacedElement, Composition, composite,
)

# ── rendu ────────────────────────────────────────────────────────────────────
from .renderer import Node, render, render_html, render_page, dispatch_action, action_href, Navigator

# ── documents / édition ──────────────────────────────────────────────────────
from .manifest import parse_document, dump_document, upgrade_legacy_document
from .editor import (
    HeroDraft,
    add_element, add_logo, add_text, add_button, remove_element,
    update_element, set_device_value, set_position,
    update_background, update_overlay, set_height,
)
from .store import ContentStore, MemoryContentStore, SqlContentStore, load_document, save_document
from .view import HeroView

__version__ = "0.3.0"

__all__ = [
    # core
    "HeroError", "DataIntegrityError", "AssetResolutionError", "ActionDispatchError", "ElementNotFoundError",
    "DeviceClass", "DEVICE_CLASSES", "DeviceSource", "FixedViewport", "ViewportClassifier", "classify_width",
    "Responsive", "resolve",
    # blocs
    "Position", "Background", "Overlay",
    "LogoElement", "TextElement", "ButtonElement", "HeroElement", "LogoScale",
    "ButtonAction", "ButtonStyle", "HeroBlock",
    "create_default_hero", "new_logo", "new_text", "new_button",
    "AssetRegistry", "LogoDesign", "LogoCanvas", "LogoImage", "LogoText",
    # layout
    "HORIZONTAL_BASE", "VERTICAL_BASE", "CompiledPosition", "compile_position",
    "PlacedElement", "Composition", "composite",
    # rendu
    "Node", "render", "render_html", "render_page", "dispatch_action", "action_href", "Navigator",
    # documents / édition
    "parse_document", "dump_document", "upgrade_legacy_document",
    "HeroDraft",
    "add_element", "add_logo", "add_text", "add_button", "remove_element",
    "update_element", "set_device_value", "set_position",
    "update_background", "update_overlay", "set_height",
    "ContentStore", "MemoryContentStore", "SqlContentStore", "load_document", "save_document",
    "HeroView",
]
