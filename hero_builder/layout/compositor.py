"""
Compositor — répartit les éléments d'un bloc Hero entre overlay (sur l'image)
et flow (sous l'image) pour une device class.

Fonction pure : aucun état partagé, aucune référence à l'aperçu éditeur ni à la
page publique. Deux appels avec le même snapshot donnent le même résultat.

Ordre : groupe de type (logos, textes, boutons) puis ordre d'insertion.
Le champ `order` des éléments n'est pas consulté ici.
"""
import logging
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..assets import AssetRegistry, LogoDesign
from ..blocks.base import ElementKind
from ..blocks.hero import HeroBlock, HeroElement, LogoElement, TextElement
from ..core.errors import AssetResolutionError
from ..core.responsive import resolve
from ..core.viewport import DeviceClass
from .position import CompiledPosition, compile_position

log = logging.getLogger(__name__)


class PlacedElement(BaseModel):
    """Élément prêt à dessiner pour une device class donnée."""
    model_config = ConfigDict(frozen=True)

    element: HeroElement
    position: Optional[CompiledPosition] = None  # None → flow
    scale: Optional[float] = None                # logos, en %
    font_size: Optional[float] = None            # textes, en px
    logo: Optional[LogoDesign] = None

    @property
    def id(self) -> str:
        return self.element.id

    @property
    def kind(self) -> ElementKind:
        return self.element.kind


class Composition(BaseModel):
    model_config = ConfigDict(frozen=True)

    device: DeviceClass
    overlay: Tuple[PlacedElement, ...] = ()
    flow: Tuple[PlacedElement, ...] = ()

    def ids(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return (
            tuple(p.id for p in self.overlay),
            tuple(p.id for p in self.flow),
        )


def composite(
    block: HeroBlock,
    device: Union[DeviceClass, str],
    assets: Optional[AssetRegistry] = None,
) -> Composition:
    """
    1. visible[device] faux → élément retiré des deux partitions
    2. below_image[device] vrai → flow, sinon overlay
    3. overlay : position compilée attachée (ancrage au centre)

    Si un registre est fourni, un logo dont le logo_ref est introuvable est
    ignoré (log) ; les autres éléments ne sont pas affectés.
    """
    device = DeviceClass(device)
    overlay, flow = [], []

    for element in block.elements():
        if not resolve(element.visible, device):
            continue

        logo = None
        if isinstance(element, LogoElement) and assets is not None:
            try:
                logo = assets.resolve(element.logo_ref)
            except AssetResolutionError as e:
                log.warning("Hero : logo %s ignoré (%s)", element.id, e)
                continue

        below = resolve(element.below_image, device)
        placed = PlacedElement(
            element=element,
            position=None if below else compile_position(resolve(element.position, device)),
            scale=resolve(element.scale, device) if isinstance(element, LogoElement) else None,
            font_size=resolve(element.font_size, device) if isinstance(element, TextElement) else None,
            logo=logo,
        )
        (flow if below else overlay).append(placed)

    return Composition(device=device, overlay=tuple(overlay), flow=tuple(flow))
