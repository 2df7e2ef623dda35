"""
Erreurs du moteur Hero.

DataIntegrityError    → donnée incomplète (map par device sans clé) — non récupérable
AssetResolutionError  → logoRef introuvable — récupéré : le logo est ignoré
ActionDispatchError   → cible d'action absente ou invalide — récupéré : no-op
"""


class HeroError(Exception):
    """Racine des erreurs hero_builder."""


class DataIntegrityError(HeroError, ValueError):
    """Map responsive incomplète ou document invalide au chargement."""


class AssetResolutionError(HeroError, LookupError):
    def __init__(self, logo_ref: str):
        super().__init__(f"Logo introuvable : {logo_ref!r}")
        self.logo_ref = logo_ref


class ActionDispatchError(HeroError):
    """Action de bouton sans cible exploitable."""


class ElementNotFoundError(HeroError, KeyError):
    def __init__(self, element_id: str):
        super().__init__(element_id)
        self.element_id = element_id

    def __str__(self) -> str:
        return f"Élément inconnu : {self.element_id!r}"
