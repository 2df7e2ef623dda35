"""
Parser de documents Hero — dict stocké → HeroBlock (et retour).

Le stockage est opaque : seul le round-trip compte, et il est sans perte
(model_dump(by_alias=True) ↔ parse_document).

Mode legacy : les documents écrits par l'ancien éditeur ont des maps
responsives partielles (tablet / mobile absents = hériter). Ils sont complétés
au chargement (mobile ← tablet ← desktop) pour que la résolution reste stricte
à l'exécution. Sans clé desktop, le document est corrompu.
"""
import copy
import logging
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from ..blocks.hero import HeroBlock
from ..core.errors import DataIntegrityError

log = logging.getLogger(__name__)

_COMMON_RESPONSIVE = ("order", "visible", "belowImage", "position")

RESPONSIVE_FIELDS: Dict[str, Tuple[str, ...]] = {
    "logos":   _COMMON_RESPONSIVE + ("scale",),
    "texts":   _COMMON_RESPONSIVE + ("fontSize",),
    "buttons": _COMMON_RESPONSIVE,
}

_LEGACY_ACTION_TYPES = {"scroll": "scroll-to-anchor", "phone": "telephone"}


def parse_document(data: Dict[str, Any], legacy: bool = False) -> HeroBlock:
    """
    Valide un document stocké.

    Toute erreur de validation (map incomplète, valeur hors plage, id dupliqué)
    → DataIntegrityError.
    """
    if legacy:
        data = upgrade_legacy_document(data)
    try:
        return HeroBlock.model_validate(data)
    except ValidationError as e:
        raise DataIntegrityError(f"Document Hero invalide : {e}") from e


def dump_document(block: HeroBlock) -> Dict[str, Any]:
    """Forme stockée (clés camelCase, JSON-compatible)."""
    return block.model_dump(mode="json", by_alias=True)


# ── Migration legacy ─────────────────────────────────────────────────────────

def _complete(values: Any, where: str) -> Tuple[Any, bool]:
    """Complète une map {desktop, tablet?, mobile?} ; retourne (map, modifiée ?)."""
    if not isinstance(values, dict):
        return values, False
    extra = set(values) - {"mobile", "tablet", "desktop"}
    if extra:
        raise DataIntegrityError(f"{where} : clés inconnues {sorted(extra)}")
    if values.get("desktop") is None:
        raise DataIntegrityError(f"{where} : valeur desktop absente")
    tablet = values.get("tablet")
    if tablet is None:
        tablet = values["desktop"]
    mobile = values.get("mobile")
    if mobile is None:
        mobile = tablet
    completed = {"desktop": values["desktop"], "tablet": tablet, "mobile": mobile}
    return completed, completed != values


def upgrade_legacy_document(data: Dict[str, Any]) -> Dict[str, Any]:
    """Retourne une copie du document au format courant ; l'entrée n'est pas modifiée."""
    doc = copy.deepcopy(data)
    changed = False

    if "background" not in doc and ("backgroundImage" in doc or "backgroundPosition" in doc):
        doc["background"] = {
            "image": doc.pop("backgroundImage", "") or "",
            **(doc.pop("backgroundPosition", None) or {}),
        }
        changed = True

    if "height" in doc:
        doc["height"], c = _complete(doc["height"], "height")
        changed |= c

    for collection, fields in RESPONSIVE_FIELDS.items():
        for index, element in enumerate(doc.get(collection) or []):
            if not isinstance(element, dict):
                continue
            for field in fields:
                if field in element:
                    element[field], c = _complete(element[field], f"{collection}[{index}].{field}")
                    changed |= c
            changed |= _rename_legacy_keys(collection, element)

    if changed:
        log.info("Document Hero legacy migré au format courant")
    return doc


def _rename_legacy_keys(collection: str, element: Dict[str, Any]) -> bool:
    changed = False
    if collection == "logos" and "logoId" in element and "logoRef" not in element:
        element["logoRef"] = element.pop("logoId")
        changed = True
    if collection == "buttons":
        if "text" in element and "label" not in element:
            element["label"] = element.pop("text")
            changed = True
        action = element.get("action")
        if isinstance(action, dict) and action.get("type") in _LEGACY_ACTION_TYPES:
            action["type"] = _LEGACY_ACTION_TYPES[action["type"]]
            changed = True
    return changed
