"""
Router FastAPI — endpoints Hero.

GET  /hero/schema                    → JSON schema du document Hero
POST /hero/validate                  → {"valid": bool, "error"?}
POST /hero/composite                 → composition overlay / flow (JSON)
POST /hero/preview                   → aperçu éditeur (HTML) — jamais enregistré
GET  /hero/{page_id}/{block_id}      → page publique (HTML)
POST /hero/{page_id}/{block_id}      → crée un document par défaut (token)
PUT  /hero/{page_id}/{block_id}      → valide + enregistre (token)

L'aperçu et la page publique passent par le même render_page().
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .assets import AssetRegistry
from .blocks.hero import HeroBlock, create_default_hero
from .config import Settings
from .core.errors import DataIntegrityError
from .core.viewport import DeviceClass, classify_width
from .layout.compositor import composite
from .manifest.parser import dump_document, parse_document
from .renderer.html import render_html, render_page
from .store import ContentStore, load_document, save_document

router = APIRouter(prefix="/hero", tags=["hero"])


# ── Dépendances ──────────────────────────────────────────────────────────────

def get_store(request: Request) -> ContentStore:
    return request.app.state.store


def get_assets(request: Request) -> AssetRegistry:
    return request.app.state.assets


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_device(
    request: Request,
    device: Optional[DeviceClass] = Query(None, description="mobile | tablet | desktop"),
    width: Optional[int] = Query(None, ge=0, description="Largeur de la surface de rendu (px)"),
) -> DeviceClass:
    """device explicite > largeur classée > device par défaut de la config."""
    if device is not None:
        return device
    if width is not None:
        return classify_width(width)
    return request.app.state.settings.default_device


def _check_token(token: str, settings: Settings):
    if token != settings.admin_token:
        raise HTTPException(403, "Accès refusé")


def _parse(document: Dict[str, Any]) -> HeroBlock:
    try:
        return parse_document(document)
    except DataIntegrityError as e:
        raise HTTPException(422, str(e))


# ── Schéma / validation / composition ────────────────────────────────────────

@router.get("/schema", summary="JSON schema du document Hero")
def schema() -> JSONResponse:
    return JSONResponse(HeroBlock.model_json_schema(by_alias=True))


@router.post("/validate", summary="Valide un document sans le rendre")
def validate(document: Dict[str, Any] = Body(...)) -> dict:
    try:
        parse_document(document)
        return {"valid": True}
    except DataIntegrityError as e:
        return {"valid": False, "error": str(e)}


@router.post("/composite", summary="Répartition overlay / flow pour une device class")
def composite_route(
    document: Dict[str, Any] = Body(...),
    device: DeviceClass = Depends(get_device),
    assets: AssetRegistry = Depends(get_assets),
) -> dict:
    result = composite(_parse(document), device, assets)
    return {
        "device": result.device.value,
        "overlay": [
            {
                "id":          p.id,
                "kind":        p.kind,
                "leftPercent": p.position.left_percent,
                "topPercent":  p.position.top_percent,
            }
            for p in result.overlay
        ],
        "flow": [{"id": p.id, "kind": p.kind} for p in result.flow],
    }


# ── Rendu : aperçu éditeur + page publique ───────────────────────────────────

@router.post("/preview", response_class=HTMLResponse, summary="Aperçu éditeur d'un brouillon")
def preview(
    document: Dict[str, Any] = Body(...),
    fragment: bool = Query(False, description="Fragment du bloc seul, sans <html>"),
    device: DeviceClass = Depends(get_device),
    assets: AssetRegistry = Depends(get_assets),
) -> HTMLResponse:
    block = _parse(document)
    html = render_html(block, device, assets) if fragment else render_page(block, device, assets)
    return HTMLResponse(html)


@router.get("/{page_id}/{block_id}", response_class=HTMLResponse, summary="Rendu public")
def public_page(
    page_id: str,
    block_id: str,
    fragment: bool = Query(False),
    device: DeviceClass = Depends(get_device),
    store: ContentStore = Depends(get_store),
    assets: AssetRegistry = Depends(get_assets),
) -> HTMLResponse:
    try:
        block = load_document(store, page_id, block_id)
    except DataIntegrityError as e:
        raise HTTPException(422, str(e))
    if block is None:
        raise HTTPException(404, f"Bloc Hero introuvable : {page_id}/{block_id}")
    html = render_html(block, device, assets) if fragment else render_page(block, device, assets)
    return HTMLResponse(html)


# ── Écriture ─────────────────────────────────────────────────────────────────

@router.post("/{page_id}/{block_id}", status_code=201, summary="Crée un bloc Hero par défaut")
def create(
    page_id: str,
    block_id: str,
    token: str = Query(""),
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings_dep),
) -> dict:
    _check_token(token, settings)
    if store.get(page_id, block_id) is not None:
        raise HTTPException(409, f"Bloc Hero déjà existant : {page_id}/{block_id}")
    block = create_default_hero()
    save_document(store, page_id, block_id, block)
    return dump_document(block)


@router.put("/{page_id}/{block_id}", summary="Enregistre un document Hero")
def save(
    page_id: str,
    block_id: str,
    document: Dict[str, Any] = Body(...),
    token: str = Query(""),
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings_dep),
) -> dict:
    _check_token(token, settings)
    block = _parse(document)
    save_document(store, page_id, block_id, block)
    return {"ok": True}
