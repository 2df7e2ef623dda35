"""
Renderer Hero — bloc + device class + registre de logos → arbre visuel.

Fonction pure appelée à l'identique par l'aperçu éditeur et la page publique :
chaque site d'appel fournit seulement un snapshot du document et une device class.
"""
from typing import Optional, Union

from ..assets import AssetRegistry, LogoDesign
from ..blocks.hero import HeroBlock, ButtonElement, LogoElement, TextElement
from ..core.responsive import resolve
from ..core.viewport import DeviceClass
from ..layout.compositor import Composition, PlacedElement, composite
from ..layout.position import CENTER_ANCHOR_TRANSFORM, format_number
from .actions import action_href
from .tree import Node, node

NEUTRAL_BACKGROUND = "#374151"


def render(
    block: HeroBlock,
    device: Union[DeviceClass, str],
    assets: Optional[AssetRegistry] = None,
) -> Node:
    """Arbre visuel complet du bloc pour une device class."""
    device = DeviceClass(device)
    composition = composite(block, device, assets if assets is not None else AssetRegistry())

    stage = node(
        "div",
        *_tint(block),
        *(_render_overlay(p) for p in composition.overlay),
        classes=("hero-v2__stage",),
        style=_stage_style(block, device),
    )
    children = [stage]
    if composition.flow:
        children.append(_render_below(composition))

    return node(
        "div",
        *children,
        classes=("hero-v2", f"hero-v2--{device.value}"),
        attrs={"data-device": device.value},
    )


# ── Fond + voile ─────────────────────────────────────────────────────────────

# Caractères qui fermeraient url('...') ou la déclaration
_CSS_URL_ESCAPES = str.maketrans({
    "'": "%27", '"': "%22", "(": "%28", ")": "%29", "\\": "%5C",
    ";": "%3B", "\n": "%0A", "\r": "%0D",
})


def css_url(url: str) -> str:
    return f"url('{url.translate(_CSS_URL_ESCAPES)}')"


def _stage_style(block: HeroBlock, device: DeviceClass) -> dict:
    bg = block.background
    return {
        "height":              resolve(block.height, device),
        "background-image":    css_url(bg.image) if bg.image else None,
        "background-color":    None if bg.image else NEUTRAL_BACKGROUND,
        "background-size":     "cover",
        "background-position": f"{format_number(bg.x)}% {format_number(bg.y)}%",
    }


def _tint(block: HeroBlock) -> tuple:
    """Voile plein cadre au-dessus du fond, sous les éléments ; absent si désactivé."""
    ov = block.overlay
    if not ov.enabled:
        return ()
    return (node(
        "div",
        classes=("hero-v2__tint",),
        style={"background-color": ov.color, "opacity": format_number(ov.opacity / 100)},
    ),)


# ── Overlay (positionné sur l'image) ─────────────────────────────────────────

def _render_overlay(placed: PlacedElement) -> Node:
    element = placed.element
    transform = CENTER_ANCHOR_TRANSFORM
    if isinstance(element, LogoElement):
        inner = _logo_svg(placed.logo, 1) if placed.logo else None
        transform = f"{CENTER_ANCHOR_TRANSFORM} scale({format_number(placed.scale / 100)})"
    elif isinstance(element, TextElement):
        inner = _text(element, placed.font_size)
    else:
        inner = _button(element)

    pos = placed.position
    return node(
        "div",
        *([inner] if inner else []),
        classes=("hero-v2__item", f"hero-v2__item--{element.kind}"),
        style={
            "left":      f"{format_number(pos.left_percent)}%",
            "top":       f"{format_number(pos.top_percent)}%",
            "transform": transform,
        },
        key=element.id,
    )


# ── Flow (sous l'image) ──────────────────────────────────────────────────────

def _render_below(composition: Composition) -> Node:
    logos, texts, buttons = [], [], []
    for placed in composition.flow:
        element = placed.element
        if isinstance(element, LogoElement):
            if placed.logo:
                logos.append(node(
                    "div", _logo_svg(placed.logo, placed.scale / 100),
                    classes=("hero-v2__logo-row",), key=element.id,
                ))
        elif isinstance(element, TextElement):
            texts.append(_text(element, placed.font_size, key=element.id))
        else:
            buttons.append(_button(element, key=element.id))

    rows = logos + texts
    if buttons:
        rows.append(node("div", *buttons, classes=("hero-v2__buttons",)))
    return node(
        "div",
        node("div", *rows, classes=("hero-v2__below-inner",)),
        classes=("hero-v2__below",),
    )


# ── Éléments ─────────────────────────────────────────────────────────────────

def _text(element: TextElement, font_size: float, key: Optional[str] = None) -> Node:
    return node(
        "div",
        classes=("hero-v2__text",),
        style={
            "font-family": element.font_family,
            "font-size":   f"{format_number(font_size)}px",
            "font-weight": element.font_weight,
            "color":       element.color,
        },
        text=element.content,
        raw_html=True,
        key=key,
    )


def _button(element: ButtonElement, key: Optional[str] = None) -> Node:
    st = element.style
    style = None
    if st.variant == "custom":
        style = {
            "background-color": st.background_color,
            "color":            st.text_color,
            "border-color":     st.border_color,
            "border-width":     "2px",
            "border-style":     "solid",
        }
    return node(
        "a",
        classes=(
            "hero-btn",
            f"hero-btn--{st.variant}",
            f"hero-btn--{st.size}",
            f"hero-btn--radius-{st.border_radius}",
        ),
        style=style,
        attrs={
            "href":        action_href(element.action),
            "data-action": element.action.type,
        },
        text=element.label,
        key=key,
    )


def _logo_svg(logo: LogoDesign, scale: float) -> Node:
    """Logo en SVG inline ; scale redimensionne la boîte, pas le viewBox."""
    c = logo.canvas
    parts = []
    if c.background_color != "transparent":
        parts.append(node("rect", attrs={
            "width": format_number(c.width), "height": format_number(c.height), "fill": c.background_color,
        }))
    if logo.image:
        im = logo.image
        parts.append(node("image", attrs={
            "href": im.url,
            "x": format_number(im.x), "y": format_number(im.y),
            "width": format_number(im.width), "height": format_number(im.height),
            "preserveAspectRatio": "xMidYMid meet",
        }))
    for t in logo.texts:
        parts.append(node("text", attrs={
            "x": format_number(t.x),
            "y": format_number(t.y),
            "font-family": t.font_family,
            "font-size": format_number(t.font_size),
            "font-weight": t.font_weight,
            "fill": t.color,
            "letter-spacing": format_number(t.letter_spacing) if t.letter_spacing is not None else None,
            "dominant-baseline": "hanging",
        }, text=t.content, key=t.id))

    return node(
        "svg",
        *parts,
        classes=("hero-v2__logo",),
        attrs={
            "width": format_number(c.width * scale),
            "height": format_number(c.height * scale),
            "viewBox": f"0 0 {format_number(c.width)} {format_number(c.height)}",
            "xmlns": "http://www.w3.org/2000/svg",
        },
    )
