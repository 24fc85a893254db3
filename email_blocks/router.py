"""
Router FastAPI — endpoints email_blocks.

POST /email-blocks/render          → {blocks, globalSettings?, mergeTags?} → HTMLResponse
POST /email-blocks/validate        → {blocks} → {"valid": bool, "errors"?}
POST /email-blocks/validate-email  → Email JSON → {"valid": bool, "errors"?}
GET  /email-blocks/catalog         → définitions des blocs + leurs JSON schemas
GET  /email-blocks/variations      → définitions des variantes de layout (?category=)
POST /email-blocks/defaults        → {type, variation?, position?} → bloc par défaut
POST /email-blocks/migrate         → EmailContent (sections) → {"blocks": [...]}
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import Field, ValidationError

from .blocks import BLOCK_CLASSES
from .core.primitives import EmailModel
from .core.schemas import GlobalEmailSettings
from .core.validation import get_validation_errors, validate_blocks, validate_email
from .migration import EmailContent, MigrationError, content_to_blocks
from .registry import (
    LAYOUT_VARIATION_DEFINITIONS, create_default_block, get_all_block_definitions,
    get_layout_variations_by_category,
)
from .renderer.html import render_blocks_to_email

log = logging.getLogger(__name__)

router = APIRouter(prefix="/email-blocks", tags=["email_blocks"])


class RenderRequest(EmailModel):
    blocks: List[Any]
    global_settings: Optional[GlobalEmailSettings] = None
    merge_tags: Dict[str, str] = Field(default_factory=dict)


class ValidateRequest(EmailModel):
    blocks: Any = None


class DefaultsRequest(EmailModel):
    type: str
    variation: Optional[str] = None
    position: int = Field(default=0, ge=0)


def _dump(block) -> dict:
    return block.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.post("/render", response_class=HTMLResponse, summary="Rend des blocs en HTML email")
def render(request: RenderRequest):
    """Valide les blocs puis retourne le document HTML complet ; 422 si invalides."""
    result = validate_blocks(request.blocks)
    if not result.success:
        return JSONResponse({"valid": False, "errors": result.errors}, status_code=422)
    html = render_blocks_to_email(result.data, request.global_settings, request.merge_tags)
    return HTMLResponse(content=html)


@router.post("/validate", summary="Valide des blocs sans les rendre")
def validate(request: ValidateRequest) -> dict:
    result = validate_blocks(request.blocks)
    if result.success:
        return {"valid": True}
    return {"valid": False, "errors": result.errors}


@router.post("/validate-email", summary="Valide un Email complet")
def validate_email_route(payload: Dict[str, Any]) -> dict:
    result = validate_email(payload)
    if result.success:
        return {"valid": True}
    return {"valid": False, "errors": result.errors}


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Catalogue des blocs avec leurs JSON schemas Pydantic."""
    catalog_data = []
    for definition in get_all_block_definitions():
        entry = definition.model_dump(by_alias=True)
        entry["schema"] = BLOCK_CLASSES[definition.type].model_json_schema(by_alias=True)
        catalog_data.append(entry)
    return JSONResponse({"blocks": catalog_data})


@router.get("/variations", summary="Liste les variantes de layout")
def variations(category: Optional[str] = None) -> JSONResponse:
    if category:
        definitions = get_layout_variations_by_category(category)
    else:
        definitions = list(LAYOUT_VARIATION_DEFINITIONS.values())
    return JSONResponse({"variations": [d.model_dump(by_alias=True) for d in definitions]})


@router.post("/defaults", summary="Retourne un bloc par défaut")
def defaults(request: DefaultsRequest) -> JSONResponse:
    try:
        block = create_default_block(request.type, request.position, request.variation)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    return JSONResponse(_dump(block))


@router.post("/migrate", summary="Convertit un contenu à sections en blocs")
def migrate(content: EmailContent) -> JSONResponse:
    try:
        blocks = content_to_blocks(content)
    except MigrationError as e:
        log.warning("Migration refusée : %s", e)
        return JSONResponse({"error": str(e)}, status_code=422)
    except ValidationError as e:
        log.warning("Migration : %d erreur(s) de validation", e.error_count())
        return JSONResponse({"error": "blocs produits invalides", "errors": get_validation_errors(e)}, status_code=422)
    return JSONResponse({"blocks": [_dump(b) for b in blocks]})
