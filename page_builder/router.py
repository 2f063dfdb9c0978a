"""
Router FastAPI — endpoints page_builder.

GET  /page-builder/catalog  → variantes de blocs disponibles + JSON schemas + bloc par défaut
POST /page-builder/blocks   → {"type": ...} → nouveau bloc avec ses valeurs par défaut
POST /page-builder/render   → {"blocks": [...], "accentColor"?} → fragment HTML
POST /page-builder/images   → {"blocks": [...], "coverImage"?} → index lightbox
"""
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import Field

from .blocks import BLOCK_CATALOG, BLOCK_REGISTRY, CamelModel, parse_block
from .core.factory import create_block
from .core.image_index import collect_all_images
from .renderer.html import RenderContext, render_blocks

router = APIRouter(prefix="/page-builder", tags=["page_builder"])


class BlocksPayload(CamelModel):
    blocks: List[Any] = Field(default_factory=list)
    accent_color: str = "#6366F1"
    cover_image: Optional[str] = None


class NewBlockPayload(CamelModel):
    type: str


def _parse(payload: BlocksPayload) -> list:
    return [b for b in (parse_block(item) for item in payload.blocks) if b is not None]


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne le catalogue des variantes avec leurs JSON schemas Pydantic."""
    catalog_data = []
    for block_type, cls in BLOCK_REGISTRY.items():
        catalog_data.append({
            "type":        block_type,
            "label":       BLOCK_CATALOG[block_type]["label"],
            "description": BLOCK_CATALOG[block_type]["description"],
            "default":     create_block(block_type).model_dump(by_alias=True, exclude_none=True),
            "schema":      cls.model_json_schema(by_alias=True),
        })
    return JSONResponse({"blocks": catalog_data})


@router.post("/blocks", summary="Crée un bloc avec ses valeurs par défaut")
def new_block(payload: NewBlockPayload) -> dict:
    if payload.type not in BLOCK_REGISTRY:
        raise HTTPException(400, f"Type de bloc inconnu : {payload.type}")
    return create_block(payload.type).model_dump(by_alias=True, exclude_none=True)


@router.post("/render", response_class=HTMLResponse, summary="Rend une liste de blocs en HTML")
def render(payload: BlocksPayload) -> HTMLResponse:
    blocks = _parse(payload)
    ctx = RenderContext(images=collect_all_images(blocks, payload.cover_image or ""), accent_color=payload.accent_color)
    return HTMLResponse(content=render_blocks(blocks, ctx))


@router.post("/images", summary="Index des images lightbox d'une liste de blocs")
def images(payload: BlocksPayload) -> dict:
    index = collect_all_images(_parse(payload), payload.cover_image or "")
    return {"images": [img.model_dump(exclude_none=True) for img in index]}
