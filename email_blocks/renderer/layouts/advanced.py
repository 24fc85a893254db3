"""
Compositeurs avancés : image overlay (et variantes positionnées), carte centrée,
image compacte + texte, feature magazine.

Pas de positionnement absolu : les clients email l'ignorent, tout passe par des
cellules de table et du VML pour Outlook.
"""
from ...blocks import LayoutsBlock
from ...core.constants import COLUMN_GAP, COMPACT_IMAGE, MAX_WIDTH
from ...core.placeholders import process_image_url
from ..base import RenderContext
from ..utils import TABLE_ATTRS, background_css, css_url, escape_html, escape_text
from .helpers import (
    padding_str, render_layout_button, render_layout_image, render_placeholder, shown,
    wrap_layout_container,
)

OVERLAY_HEIGHT = 400

# variante → (align horizontal, valign)
_OVERLAY_POSITIONS = {
    "image-overlay":               ("center", "top"),
    "hero-image-overlay":          ("center", "middle"),
    "image-overlay-center":        ("center", "middle"),
    "image-overlay-top-left":      ("left", "top"),
    "image-overlay-top-right":     ("right", "top"),
    "image-overlay-bottom-left":   ("left", "bottom"),
    "image-overlay-bottom-right":  ("right", "bottom"),
    "image-overlay-center-bottom": ("center", "bottom"),
}


# ── Image overlay ───────────────────────────────────────────────────────────

def render_image_overlay_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    align, valign = _OVERLAY_POSITIONS.get(b.layout_variation, ("center", "top"))
    if s.flip:
        valign = "bottom"
    align = s.align or align

    url = ctx.merge(d.image.url) if d.image is not None else None
    raw_src = process_image_url(url, "hero", MAX_WIDTH, OVERLAY_HEIGHT)
    src = escape_html(raw_src)
    css_src = escape_html(css_url(raw_src))
    title_color = s.title_color or "#ffffff"
    text_color = s.paragraph_color or "#ffffff"

    parts = []
    if d.badge:
        parts.append(
            f'<span style="display: inline-block; background-color: rgba(0, 0, 0, 0.7); color: #ffffff; '
            f'font-size: 20px; font-weight: 700; padding: 16px 20px; margin-bottom: 16px;">'
            f'{escape_html(ctx.merge(d.badge))}</span>'
        )
    if shown(s.show_title) and d.title:
        parts.append(
            f'<h1 style="margin: 0; font-size: {s.title_font_size or "40px"}; font-weight: 700; '
            f'color: {title_color}; line-height: 1.2; text-align: {align};">{escape_html(ctx.merge(d.title))}</h1>'
        )
    if shown(s.show_paragraph) and d.paragraph:
        parts.append(
            f'<p style="margin: 16px 0 0; font-size: {s.paragraph_font_size or "18px"}; color: {text_color}; '
            f'line-height: 1.6; text-align: {align};">{escape_text(ctx.merge(d.paragraph))}</p>'
        )
    if shown(s.show_button) and d.button is not None and d.button.text:
        parts.append(render_layout_button(d.button, s, ctx, align=align))

    return f"""
<table {TABLE_ATTRS}>
  <tr>
    <td background="{src}" valign="{valign}" style="background-image: url('{css_src}'); background-size: cover; background-position: center; min-height: {OVERLAY_HEIGHT}px;">
      <!--[if gte mso 9]><v:rect xmlns:v="urn:schemas-microsoft-com:vml" fill="true" stroke="false" style="width:{MAX_WIDTH}px;height:{OVERLAY_HEIGHT}px;"><v:fill type="frame" src="{src}" color="#111827" /><v:textbox inset="0,0,0,0"><![endif]-->
      <table {TABLE_ATTRS} height="{OVERLAY_HEIGHT}">
        <tr>
          <td align="{align}" valign="{valign}" style="padding: {padding_str(s, (60, 40, 60, 40))}; height: {OVERLAY_HEIGHT}px;">
            {"".join(parts)}
          </td>
        </tr>
      </table>
      <!--[if gte mso 9]></v:textbox></v:rect><![endif]-->
    </td>
  </tr>
</table>"""


# ── Carte centrée ───────────────────────────────────────────────────────────

def render_card_centered_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    title_color = s.title_color or "#111827"
    parts = []
    if shown(s.show_title) and d.title:
        parts.append(
            f'<h1 style="margin: 0 0 16px; font-size: 72px; font-weight: 700; color: {title_color}; '
            f'line-height: 1; text-align: center;">{escape_html(ctx.merge(d.title))}</h1>'
        )
    if d.subtitle:
        parts.append(
            f'<h2 style="margin: 0; font-size: 24px; font-weight: 500; color: #374151; line-height: 1.3; '
            f'text-align: center;">{escape_html(ctx.merge(d.subtitle))}</h2>'
        )
    if d.divider is not False:
        color = s.divider_color or "#e5e7eb"
        parts.append(f'<div style="margin: 24px auto; width: 60px; height: 2px; background-color: {color};"></div>')
    if shown(s.show_paragraph) and d.paragraph:
        parts.append(
            f'<p style="margin: 0 0 24px; font-size: {s.paragraph_font_size or "16px"}; color: #6b7280; '
            f'line-height: 1.6; text-align: center;">{escape_text(ctx.merge(d.paragraph))}</p>'
        )
    if shown(s.show_button) and d.button is not None and d.button.text:
        parts.append(render_layout_button(d.button, s, ctx, align="center"))

    card = f"""<table {TABLE_ATTRS} style="background-color: #ffffff; border: 1px solid #e5e7eb;">
        <tr>
          <td align="center" style="padding: 60px 40px;">
            {"".join(parts)}
          </td>
        </tr>
      </table>"""
    return wrap_layout_container(card, s)


# ── Image compacte + texte ──────────────────────────────────────────────────

def render_compact_image_text_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    image = render_layout_image(
        d.image, s, ctx, width=COMPACT_IMAGE, height=COMPACT_IMAGE,
        extra_style=" border: 1px solid #e5e7eb;",
    )
    parts = []
    if d.title:
        parts.append(
            f'<p style="margin: 0 0 4px; font-size: 14px; font-style: italic; color: #9ca3af;">'
            f'{escape_html(ctx.merge(d.title))}</p>'
        )
    if d.subtitle:
        parts.append(
            f'<p style="margin: 0 0 8px; font-size: 16px; font-weight: 500; color: #111827;">'
            f'{escape_html(ctx.merge(d.subtitle))}</p>'
        )
    if d.paragraph:
        parts.append(
            f'<p style="margin: 0; font-size: {s.paragraph_font_size or "14px"}; color: {s.paragraph_color or "#374151"}; '
            f'line-height: 1.6;">{escape_text(ctx.merge(d.paragraph))}</p>'
        )
    text = "".join(parts) or render_placeholder("", "Add content in settings")

    inner = f"""<table role="presentation" cellpadding="0" cellspacing="0">
        <tr>
          <td width="{COMPACT_IMAGE}" valign="top" style="width: {COMPACT_IMAGE}px;">{image}</td>
          <td width="{COLUMN_GAP}" style="width: {COLUMN_GAP}px;">&nbsp;</td>
          <td valign="middle">{text}</td>
        </tr>
      </table>"""
    return wrap_layout_container(inner, s, default_padding=(30, 20, 30, 20))


# ── Magazine ────────────────────────────────────────────────────────────────

MAGAZINE_IMAGE = 500
_SERIF = "Georgia, 'Times New Roman', serif"


def render_magazine_feature_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    title_color = s.title_color or "#000000"
    parts = []
    if shown(s.show_title) and d.title:
        parts.append(
            f'<h1 style="margin: 0 0 24px; font-family: {_SERIF}; font-size: 48px; font-weight: 400; '
            f'color: {title_color}; line-height: 1.2; text-align: center;">{escape_html(ctx.merge(d.title))}</h1>'
        )
    parts.append(
        f'<div style="text-align: center;">'
        f'{render_layout_image(d.image, s, ctx, width=MAGAZINE_IMAGE, height=MAGAZINE_IMAGE, extra_style=" margin: 0 auto;")}'
        f'</div>'
    )
    if d.badge:
        parts.append(
            f'<p style="margin: 16px 0; font-family: {_SERIF}; font-size: 120px; font-weight: 400; color: #000000; '
            f'line-height: 1; text-align: center;">{escape_html(ctx.merge(d.badge))}</p>'
        )
    if shown(s.show_paragraph) and d.paragraph:
        parts.append(
            f'<p style="margin: 0; padding: 0 10%; font-size: {s.paragraph_font_size or "16px"}; '
            f'color: {s.paragraph_color or "#374151"}; line-height: 1.6; text-align: center;">'
            f'{escape_text(ctx.merge(d.paragraph))}</p>'
        )
    bg = background_css(s.background_color or "#9CADB7").strip()
    style = f' style="{bg}"' if bg else ""
    return f"""
<table {TABLE_ATTRS}{style}>
  <tr>
    <td style="padding: {padding_str(s, (60, 40, 60, 40))};">
      {"".join(parts)}
    </td>
  </tr>
</table>"""
