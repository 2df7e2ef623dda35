"""
Actions des boutons Hero — seule opération à effet de bord du moteur.

link              → navigate(url)
scroll-to-anchor  → scroll_to(id) si l'ancre existe, sinon no-op
telephone / email → navigate("tel:…" / "mailto:…")

Une cible vide ou une ancre absente n'est jamais une erreur remontée : no-op + log.
"""
import logging
from typing import Optional, Protocol
from urllib.parse import quote

from ..blocks.hero import ButtonAction
from ..core.errors import ActionDispatchError

log = logging.getLogger(__name__)


class Navigator(Protocol):
    """Surface de navigation fournie par l'hôte (navigateur, harness de test…)."""
    def navigate(self, url: str) -> None: ...
    def has_anchor(self, anchor_id: str) -> bool: ...
    def scroll_to(self, anchor_id: str) -> None: ...


def action_target(action: ButtonAction) -> str:
    """URL ou id d'ancre de l'action ; ActionDispatchError si inexploitable."""
    value = action.value.strip()
    if not value:
        raise ActionDispatchError(f"Action {action.type!r} sans cible")

    if action.type == "telephone":
        return "tel:" + "".join(value.split())
    if action.type == "email":
        return "mailto:" + quote(value, safe="@.+-_")
    if action.type == "scroll-to-anchor":
        return value.lstrip("#")
    return value


def action_href(action: ButtonAction) -> Optional[str]:
    """href statique pour le HTML (None si l'action n'a pas de cible)."""
    try:
        target = action_target(action)
    except ActionDispatchError:
        return None
    return f"#{target}" if action.type == "scroll-to-anchor" else target


def dispatch_action(action: ButtonAction, navigator: Navigator) -> bool:
    """Exécute l'action ; retourne True si une navigation / un scroll a eu lieu."""
    try:
        target = action_target(action)
        if action.type == "scroll-to-anchor":
            if not navigator.has_anchor(target):
                raise ActionDispatchError(f"Ancre absente : #{target}")
            navigator.scroll_to(target)
        else:
            navigator.navigate(target)
    except ActionDispatchError as e:
        log.info("Action bouton ignorée : %s", e)
        return False
    return True
