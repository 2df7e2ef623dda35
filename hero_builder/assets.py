"""
Registre des logos (conçus dans le Logo Designer) — collaborateur externe.

Le moteur ne fait que lire : get() tolérant, resolve() strict (AssetResolutionError).
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import Field

from .blocks.base import HeroModel
from .core.errors import AssetResolutionError

log = logging.getLogger(__name__)


class LogoCanvas(HeroModel):
    width: float = 400
    height: float = 200
    background_color: str = "transparent"


class LogoImage(HeroModel):
    url: str
    x: float = 0
    y: float = 0
    width: float
    height: float


class LogoText(HeroModel):
    id: str
    content: str = ""
    x: float = 0
    y: float = 0
    font_family: str = "Inter, sans-serif"
    font_size: float = 32
    font_weight: str = "400"
    color: str = "#000000"
    letter_spacing: Optional[float] = None


class LogoDesign(HeroModel):
    id: str
    name: str = ""
    canvas: LogoCanvas = LogoCanvas()
    image: Optional[LogoImage] = None
    texts: List[LogoText] = Field(default_factory=list)


class AssetRegistry:
    """Lookup id → LogoDesign."""

    def __init__(self, logos: Iterable[LogoDesign] = ()):
        self._logos: Dict[str, LogoDesign] = {logo.id: logo for logo in logos}

    def __len__(self) -> int:
        return len(self._logos)

    def __contains__(self, logo_ref: str) -> bool:
        return logo_ref in self._logos

    def get(self, logo_ref: str) -> Optional[LogoDesign]:
        return self._logos.get(logo_ref)

    def resolve(self, logo_ref: str) -> LogoDesign:
        logo = self._logos.get(logo_ref)
        if logo is None:
            raise AssetResolutionError(logo_ref)
        return logo

    def add(self, logo: LogoDesign) -> None:
        self._logos[logo.id] = logo

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AssetRegistry":
        """Charge un JSON : liste de LogoDesign, ou {"logos": [...]} (export du site)."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        items = data.get("logos", []) if isinstance(data, dict) else data
        registry = cls(LogoDesign.model_validate(item) for item in items)
        log.info("Registre logos chargé : %d logo(s) depuis %s", len(registry), path)
        return registry
