"""
Renderer HTML — sérialise l'arbre visuel Hero.

render_html() : fragment du bloc (aperçu éditeur, intégration dans une page)
render_page() : document HTML complet avec le CSS compilé
"""
from html import escape
from typing import Optional, Union

from ..assets import AssetRegistry
from ..blocks.hero import HeroBlock
from ..core.viewport import DeviceClass
from .css import get_compiled_scss
from .hero import render
from .tree import Node

# Éléments SVG sans contenu → balise auto-fermante
_EMPTY_SVG_TAGS = {"rect", "image"}


def to_html(n: Node, indent: int = 0) -> str:
    pad = "  " * indent
    attrs = []
    if n.classes:
        attrs.append(f'class="{escape(" ".join(n.classes))}"')
    if n.style:
        attrs.append(f'style="{escape(";".join(f"{k}:{v}" for k, v in n.style))}"')
    for k, v in n.attrs:
        attrs.append(f'{k}="{escape(v)}"')
    if n.key:
        attrs.append(f'data-key="{escape(n.key)}"')
    open_tag = f"<{n.tag}{' ' if attrs else ''}{' '.join(attrs)}"

    if n.tag in _EMPTY_SVG_TAGS and not n.children and n.text is None:
        return f"{pad}{open_tag}/>"

    text = ""
    if n.text is not None:
        text = n.text if n.raw_html else escape(n.text)
    if not n.children:
        return f"{pad}{open_tag}>{text}</{n.tag}>"

    inner = "\n".join(to_html(c, indent + 1) for c in n.children)
    return f"{pad}{open_tag}>{text}\n{inner}\n{pad}</{n.tag}>"


def render_html(
    block: HeroBlock,
    device: Union[DeviceClass, str],
    assets: Optional[AssetRegistry] = None,
) -> str:
    """Fragment HTML du bloc Hero."""
    return to_html(render(block, device, assets))


def render_page(
    block: HeroBlock,
    device: Union[DeviceClass, str],
    assets: Optional[AssetRegistry] = None,
    title: str = "",
    lang: str = "fr",
    extra_head: str = "",
) -> str:
    """Document HTML complet (bloc + CSS)."""
    css = get_compiled_scss()
    body = render_html(block, device, assets)

    return f"""<!DOCTYPE html>
<html lang="{escape(lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(title)}</title>
  <style>{css}</style>
  {extra_head}
</head>
<body>
{body}
</body>
</html>"""
