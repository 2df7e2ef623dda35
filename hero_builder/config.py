"""
Configuration — variables d'environnement lues à l'appel de get_settings().

HERO_DB_PATH         base SQLite du store de documents
HERO_ASSETS_PATH     JSON des logos (optionnel)
ADMIN_TOKEN          token des endpoints d'écriture
HERO_LOG_LEVEL       niveau de log (INFO par défaut)
HERO_DEFAULT_DEVICE  device class si la requête ne donne ni device ni width
"""
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .core.viewport import DeviceClass

DATA_DIR = Path(__file__).parent.parent / "data"


class Settings(BaseModel):
    db_path: str
    assets_path: Optional[str] = None
    admin_token: str = "changeme"
    log_level: str = "INFO"
    default_device: DeviceClass = DeviceClass.DESKTOP


def get_settings() -> Settings:
    """Snapshot des variables d'environnement (relu à chaque appel)."""
    return Settings(
        db_path=os.getenv("HERO_DB_PATH", str(DATA_DIR / "hero_builder.db")),
        assets_path=os.getenv("HERO_ASSETS_PATH") or None,
        admin_token=os.getenv("ADMIN_TOKEN", "changeme"),
        log_level=os.getenv("HERO_LOG_LEVEL", "INFO").upper(),
        default_device=os.getenv("HERO_DEFAULT_DEVICE", "desktop"),
    )
