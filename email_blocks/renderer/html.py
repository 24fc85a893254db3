"""
Renderer HTML email — génère le document complet à partir d'une liste de blocs.

Dispatch : table type → renderer construite à l'import ; les blocs `layouts`
passent ensuite par la table variante → compositeur.
Sortie : tables de présentation uniquement, canevas fixe (pas de responsive).
"""
import logging
from functools import partial
from typing import Any, Dict, Iterable, Optional, Union

from pydantic import TypeAdapter

from ..blocks import EmailBlock
from ..core import config
from ..core.schemas import GlobalEmailSettings
from .base import BlockRenderer, RenderContext, sort_blocks
from .container import render_container_block
from .layouts import render_layout_block
from .simple import (
    render_button_block, render_divider_block, render_image_block, render_logo_block,
    render_spacer_block, render_text_block,
)
from .social import render_address_block, render_footer_block, render_link_bar_block, render_social_links_block
from .utils import escape_html

log = logging.getLogger(__name__)

_BLOCK_ADAPTER = TypeAdapter(EmailBlock)


# ── Dispatch ────────────────────────────────────────────────────────────────

def render_block(block, context: RenderContext) -> str:
    """Rend un bloc validé. Type sans renderer → "" + warning (ou ValueError en mode strict)."""
    renderer = BLOCK_RENDERERS.get(block.type)
    if renderer is None:
        if config.STRICT_RENDER:
            raise ValueError(f"Aucun renderer pour le type de bloc : {block.type!r}")
        log.warning("bloc %s ignoré : aucun renderer pour le type %r", block.id, block.type)
        return ""
    return renderer(block, context)


BLOCK_RENDERERS: Dict[str, BlockRenderer] = {
    "logo":         render_logo_block,
    "spacer":       render_spacer_block,
    "text":         render_text_block,
    "image":        render_image_block,
    "button":       render_button_block,
    "divider":      render_divider_block,
    "social-links": render_social_links_block,
    "footer":       render_footer_block,
    "link-bar":     render_link_bar_block,
    "address":      render_address_block,
    "layouts":      render_layout_block,
    "container":    partial(render_container_block, render_child=render_block),
}


# ── Point d'entrée public ───────────────────────────────────────────────────

def _coerce_settings(global_settings: Union[GlobalEmailSettings, dict, None]) -> GlobalEmailSettings:
    if global_settings is None:
        return GlobalEmailSettings()
    if isinstance(global_settings, GlobalEmailSettings):
        return global_settings
    return GlobalEmailSettings.model_validate(global_settings)


def render_blocks_to_email(
    blocks: Iterable[Any],
    global_settings: Union[GlobalEmailSettings, dict, None] = None,
    merge_tags: Optional[Dict[str, str]] = None,
) -> str:
    """
    Génère le HTML email complet.

    Les blocs peuvent être des modèles validés ou des dicts bruts (camelCase) ;
    un dict invalide lève pydantic.ValidationError.
    """
    settings = _coerce_settings(global_settings)
    validated = [b if not isinstance(b, dict) else _BLOCK_ADAPTER.validate_python(b) for b in blocks]
    context = RenderContext(global_settings=settings, merge_tags=dict(merge_tags or {}))

    ordered = sort_blocks(validated)
    fragments = [render_block(b, context) for b in ordered]
    blocks_html = "\n".join(f for f in fragments if f)
    log.debug("rendu email : %d blocs, %d caractères", len(ordered), len(blocks_html))
    return wrap_in_email_structure(blocks_html, settings)


# ── Enveloppe ───────────────────────────────────────────────────────────────

def wrap_in_email_structure(blocks_html: str, global_settings: Union[GlobalEmailSettings, dict, None] = None) -> str:
    s = _coerce_settings(global_settings)
    rows = f"          <tr><td>{blocks_html}</td></tr>"
    return f"""<!DOCTYPE html>
<html lang="en" xmlns:v="urn:schemas-microsoft-com:vml" xmlns:o="urn:schemas-microsoft-com:office:office">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width={s.max_width}">
  <meta http-equiv="X-UA-Compatible" content="IE=edge">
  <!--[if mso]>
  <xml>
    <o:OfficeDocumentSettings>
      <o:PixelsPerInch>96</o:PixelsPerInch>
      <o:AllowPNG/>
    </o:OfficeDocumentSettings>
  </xml>
  <![endif]-->
  <style type="text/css">
    body {{
      -webkit-text-size-adjust: 100%;
      -ms-text-size-adjust: 100%;
      min-width: {s.max_width}px !important;
    }}
    table {{
      table-layout: fixed !important;
    }}
    img {{
      -ms-interpolation-mode: bicubic;
    }}
  </style>
</head>
<body style="margin: 0; padding: 0; font-family: {escape_html(s.font_family)}; background-color: {s.background_color};">
  <table role="presentation" width="100%" cellpadding="0" cellspacing="0" style="background-color: {s.background_color};">
    <tr>
      <td align="center" style="padding: 20px;">
        <!--[if mso]>
        <table role="presentation" align="center" width="{s.max_width}" cellpadding="0" cellspacing="0"><tr><td>
        <![endif]-->
        <table role="presentation" width="100%" cellpadding="0" cellspacing="0" style="max-width: {s.max_width}px; background-color: {s.content_background_color};">
{rows}
        </table>
        <!--[if mso]>
        </td></tr></table>
        <![endif]-->
      </td>
    </tr>
  </table>
</body>
</html>"""
