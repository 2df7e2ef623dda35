"""
Opérations d'édition du bloc Hero.

Chaque opération prend un document et retourne une nouvelle version ; l'entrée
n'est jamais modifiée. set_device_value() ne touche qu'une tranche (mobile,
tablet ou desktop) d'une seule propriété, les autres tranches restent intactes.

HeroDraft garde le brouillon local de l'éditeur : les modifications sont
synchrones, l'enregistrement est une opération séparée qui peut échouer sans
empêcher le rendu du brouillon.
"""
from typing import Any, Callable, Optional, Tuple, Union

from pydantic import BaseModel

from .assets import AssetRegistry
from .blocks.base import Position
from .blocks.hero import (
    HeroBlock, HeroElement, LogoElement, TextElement, ButtonElement,
    new_logo, new_text, new_button,
)
from .core.errors import ElementNotFoundError
from .core.responsive import Responsive, resolve
from .core.viewport import DeviceClass
from .renderer.tree import Node
from .renderer.hero import render
from .store import ContentStore, save_document

_COLLECTIONS = {"logo": "logos", "text": "texts", "button": "buttons"}


def _fields(model: BaseModel) -> dict:
    return {name: getattr(model, name) for name in type(model).model_fields}


def _with(block: HeroBlock, **updates) -> HeroBlock:
    """Nouvelle version validée du bloc (ids uniques revérifiés)."""
    return HeroBlock(**{**_fields(block), **updates})


def _locate(block: HeroBlock, element_id: str) -> Tuple[str, int]:
    for collection in _COLLECTIONS.values():
        for index, element in enumerate(getattr(block, collection)):
            if element.id == element_id:
                return collection, index
    raise ElementNotFoundError(element_id)


# ── Ajout / suppression ──────────────────────────────────────────────────────

def add_element(block: HeroBlock, element: HeroElement) -> HeroBlock:
    collection = _COLLECTIONS[element.kind]
    return _with(block, **{collection: getattr(block, collection) + (element,)})


def add_logo(block: HeroBlock, logo_ref: str = "") -> Tuple[HeroBlock, LogoElement]:
    element = new_logo(logo_ref, index=len(block.logos))
    return add_element(block, element), element


def add_text(block: HeroBlock) -> Tuple[HeroBlock, TextElement]:
    element = new_text(index=len(block.texts))
    return add_element(block, element), element


def add_button(block: HeroBlock) -> Tuple[HeroBlock, ButtonElement]:
    element = new_button(index=len(block.buttons))
    return add_element(block, element), element


def remove_element(block: HeroBlock, element_id: str) -> HeroBlock:
    collection, index = _locate(block, element_id)
    items = getattr(block, collection)
    return _with(block, **{collection: items[:index] + items[index + 1:]})


# ── Mise à jour ──────────────────────────────────────────────────────────────

def update_element(block: HeroBlock, element_id: str, **changes: Any) -> HeroBlock:
    """Remplace des champs d'un élément (noms Python : below_image, logo_ref…)."""
    if "id" in changes:
        raise ValueError("L'id d'un élément est stable et ne peut pas être modifié")
    collection, index = _locate(block, element_id)
    items = getattr(block, collection)
    element = items[index]
    updated = type(element)(**{**_fields(element), **changes})
    return _with(block, **{collection: items[:index] + (updated,) + items[index + 1:]})


def set_device_value(
    block: HeroBlock,
    element_id: str,
    field: str,
    device: Union[DeviceClass, str],
    value: Any,
) -> HeroBlock:
    """Change une seule tranche device d'une propriété responsive d'un élément."""
    element = block.find(element_id)
    if element is None:
        raise ElementNotFoundError(element_id)
    current = getattr(element, field, None)
    if not isinstance(current, Responsive):
        raise ValueError(f"{field!r} n'est pas une propriété responsive de {element.kind}")
    return update_element(block, element_id, **{field: current.replace(device, value)})


def set_position(
    block: HeroBlock,
    element_id: str,
    device: Union[DeviceClass, str],
    **changes: Any,
) -> HeroBlock:
    """Ajuste ancre / offset d'un élément pour une device class."""
    element = block.find(element_id)
    if element is None:
        raise ElementNotFoundError(element_id)
    position = resolve(element.position, device)
    moved = Position(**{**_fields(position), **changes})
    return set_device_value(block, element_id, "position", device, moved)


def update_background(block: HeroBlock, **changes: Any) -> HeroBlock:
    return _with(block, background=type(block.background)(**{**_fields(block.background), **changes}))


def update_overlay(block: HeroBlock, **changes: Any) -> HeroBlock:
    return _with(block, overlay=type(block.overlay)(**{**_fields(block.overlay), **changes}))


def set_height(block: HeroBlock, device: Union[DeviceClass, str], value: str) -> HeroBlock:
    return _with(block, height=block.height.replace(device, value))


# ── Brouillon éditeur ────────────────────────────────────────────────────────

class HeroDraft:
    """
    Brouillon local d'un bloc Hero.

    >>> draft = HeroDraft("home", "hero-1", create_default_hero())
    >>> text = draft.apply(add_text)
    >>> draft.apply(set_device_value, text.id, "below_image", "mobile", True)
    >>> draft.save(store)
    """

    def __init__(self, page_id: str, block_id: str, block: HeroBlock):
        self.page_id = page_id
        self.block_id = block_id
        self.block = block
        self.version = 0
        self.saved_version: Optional[int] = None

    @property
    def dirty(self) -> bool:
        return self.saved_version != self.version

    def apply(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """
        Applique une opération d'édition au brouillon.

        Les opérations add_* retournent (bloc, élément) : l'élément créé est
        renvoyé à l'appelant. Sinon le nouveau bloc est renvoyé.
        """
        result = operation(self.block, *args, **kwargs)
        created = None
        if isinstance(result, tuple):
            result, created = result
        self.block = result
        self.version += 1
        return created if created is not None else result

    def render(self, device: Union[DeviceClass, str], assets: Optional[AssetRegistry] = None) -> Node:
        """Aperçu — même renderer que la page publique."""
        return render(self.block, device, assets)

    def save(self, store: ContentStore) -> None:
        """Enregistre la version courante ; une erreur du store est remontée telle quelle."""
        version = self.version
        save_document(store, self.page_id, self.block_id, self.block)
        self.saved_version = version
