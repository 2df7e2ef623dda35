"""Renderer — arbre visuel, HTML, CSS, actions des boutons."""
from .tree import Node, node
from .hero import render, NEUTRAL_BACKGROUND
from .actions import Navigator, action_href, action_target, dispatch_action
from .html import to_html, render_html, render_page
from .css import get_compiled_scss, invalidate_scss_cache

__all__ = [
    "Node", "node",
    "render", "NEUTRAL_BACKGROUND",
    "Navigator", "action_href", "action_target", "dispatch_action",
    "to_html", "render_html", "render_page",
    "get_compiled_scss", "invalidate_scss_cache",
]
