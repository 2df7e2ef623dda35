"""
App FastAPI hero_builder.
Démarrer : uvicorn hero_builder.app:create_app --factory --reload --port 8002
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from .assets import AssetRegistry
from .config import Settings, get_settings
from .router import router
from .store import ContentStore, SqlContentStore

log = logging.getLogger(__name__)


def create_app(
    store: Optional[ContentStore] = None,
    assets: Optional[AssetRegistry] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")

    if store is None:
        Path(settings.db_path).parent.mkdir(parents=True, exist_ok=True)
        store = SqlContentStore.from_path(settings.db_path)
        log.info("Store Hero : %s", settings.db_path)
    if assets is None:
        assets = AssetRegistry.from_file(settings.assets_path) if settings.assets_path else AssetRegistry()

    app = FastAPI(title="Hero Builder", version="0.3.0", docs_url="/docs")
    app.state.settings = settings
    app.state.store = store
    app.state.assets = assets
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "hero_builder"}

    return app

