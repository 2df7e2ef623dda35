"""
Vue dérivée d'un bloc Hero qui suit le viewport.

Chaque changement de device class relance une composition complète ; le
document source n'est jamais modifié, seule la vue dérivée est recalculée.
"""
import logging
from typing import Optional

from .assets import AssetRegistry
from .blocks.hero import HeroBlock
from .core.viewport import DeviceClass, DeviceSource, ViewportClassifier
from .layout.compositor import Composition, composite
from .renderer.hero import render
from .renderer.tree import Node

log = logging.getLogger(__name__)


class HeroView:
    def __init__(self, block: HeroBlock, viewport: DeviceSource, assets: Optional[AssetRegistry] = None):
        self.block = block
        self.viewport = viewport
        self.assets = assets
        self._unsubscribe = None
        self.composition = composite(block, viewport.current, assets)
        if isinstance(viewport, ViewportClassifier):
            self._unsubscribe = viewport.subscribe(self._on_device_change)

    @property
    def device(self) -> DeviceClass:
        return self.composition.device

    def _on_device_change(self, device: DeviceClass) -> None:
        log.debug("Hero : recomposition pour %s", device.value)
        self.composition = composite(self.block, device, self.assets)

    def refresh(self) -> Composition:
        """Recompose pour la device class courante (idempotent)."""
        self.composition = composite(self.block, self.viewport.current, self.assets)
        return self.composition

    def set_block(self, block: HeroBlock) -> Composition:
        """Nouvelle version du document (ex. brouillon édité) → recomposition."""
        self.block = block
        return self.refresh()

    def render(self) -> Node:
        return render(self.block, self.device, self.assets)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
