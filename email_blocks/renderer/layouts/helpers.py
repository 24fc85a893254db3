"""
Helpers des layouts — arithmétique des colonnes (canevas 600px fixe) et
éléments réutilisables (header, titre, séparateur, paragraphe, bouton, image).
"""
from typing import NamedTuple, Optional

from ...core.constants import (
    COLUMN_GAP, IMAGE_ASPECT_RATIO, MAX_WIDTH,
    TWO_COL_30, TWO_COL_40, TWO_COL_50, TWO_COL_60, TWO_COL_70,
)
from ...core.placeholders import process_image_url
from ..base import RenderContext
from ..utils import TABLE_ATTRS, background_css, escape_html, escape_text

DEFAULT_LAYOUT_PADDING = (40, 20, 40, 20)


class ColumnWidths(NamedTuple):
    left_px: int
    right_px: int

    @property
    def left(self) -> str:
        return f"{self.left_px}px"

    @property
    def right(self) -> str:
        return f"{self.right_px}px"


_TWO_COLUMN_WIDTHS = {
    "two-column-50-50": ColumnWidths(TWO_COL_50, TWO_COL_50),
    "two-column-60-40": ColumnWidths(TWO_COL_60, TWO_COL_40),
    "two-column-40-60": ColumnWidths(TWO_COL_40, TWO_COL_60),
    "two-column-70-30": ColumnWidths(TWO_COL_70, TWO_COL_30),
    "two-column-30-70": ColumnWidths(TWO_COL_30, TWO_COL_70),
}


def calculate_column_widths(variation: str) -> ColumnWidths:
    """Largeurs gauche/droite d'une variante deux colonnes (défaut 50/50)."""
    return _TWO_COLUMN_WIDTHS.get(variation, _TWO_COLUMN_WIDTHS["two-column-50-50"])


def calculate_multi_column_width(columns: int) -> int:
    """floor((600 - (n-1)·20) / n) — largeur d'une colonne sur n."""
    return (MAX_WIDTH - (columns - 1) * COLUMN_GAP) // columns


def padding_values(settings, default=DEFAULT_LAYOUT_PADDING) -> tuple:
    p = settings.padding
    if p is None:
        return default
    return (p.top, p.right, p.bottom, p.left)


def padding_str(settings, default=DEFAULT_LAYOUT_PADDING) -> str:
    t, r, b, l = padding_values(settings, default)
    return f"{t}px {r}px {b}px {l}px"


def shown(flag: Optional[bool]) -> bool:
    """Les flags show* sont actifs sauf s'ils valent explicitement False."""
    return flag is not False


# ── Éléments ────────────────────────────────────────────────────────────────

def render_layout_header(text: Optional[str], settings, ctx: RenderContext, align: Optional[str] = None) -> str:
    if not text:
        return ""
    align = align or settings.align or "center"
    font_size = settings.header_font_size or "14px"
    color = settings.header_color or "#6b7280"
    return f"""
<table {TABLE_ATTRS}>
  <tr>
    <td align="{align}" style="padding-bottom: 12px;">
      <p style="margin: 0; font-size: {font_size}; font-weight: 600; color: {color}; line-height: 1.4; text-transform: uppercase; letter-spacing: 0.05em;">{escape_html(ctx.merge(text))}</p>
    </td>
  </tr>
</table>"""


def render_layout_title(text: Optional[str], settings, ctx: RenderContext, align: Optional[str] = None) -> str:
    if not text:
        return ""
    align = align or settings.align or "center"
    font_size = settings.title_font_size or "48px"
    color = settings.title_color or "#111827"
    return (
        f'<h1 style="margin: 0 0 16px 0; font-size: {font_size}; font-weight: 700; color: {color}; '
        f'line-height: 1.2; text-align: {align}; word-wrap: break-word; overflow-wrap: break-word;">'
        f'{escape_html(ctx.merge(text))}</h1>'
    )


def render_layout_divider(settings, align: Optional[str] = None) -> str:
    align = align or settings.align or "center"
    color = settings.divider_color or "#e5e7eb"
    thickness = settings.divider_thickness or "1px"
    width = settings.divider_width or "60px"
    return f"""
<table {TABLE_ATTRS}>
  <tr>
    <td align="{align}" style="padding-top: 20px; padding-bottom: 20px;">
      <div style="width: {width}; height: 0; border-top: {thickness} solid {color}; margin: 0 auto;"></div>
    </td>
  </tr>
</table>"""


def render_layout_paragraph(text: Optional[str], settings, ctx: RenderContext, align: Optional[str] = None) -> str:
    if not text:
        return ""
    align = align or settings.align or "center"
    font_size = settings.paragraph_font_size or "16px"
    color = settings.paragraph_color or "#374151"
    return (
        f'<p style="margin: 0 0 24px 0; font-size: {font_size}; font-weight: 400; color: {color}; '
        f'line-height: 1.6; text-align: {align}; word-wrap: break-word; overflow-wrap: break-word;">'
        f'{escape_text(ctx.merge(text))}</p>'
    )


def render_layout_button(button, settings, ctx: RenderContext, align: Optional[str] = None) -> str:
    if button is None:
        return ""
    text = button.text or "Click Here"
    url = ctx.merge(button.url or "#")
    align = align or settings.align or "center"
    bg = settings.button_background_color or "#7c3aed"
    color = settings.button_text_color or "#ffffff"
    font_size = settings.button_font_size or "16px"
    radius = settings.button_border_radius or "8px"
    return f"""
<table {TABLE_ATTRS}>
  <tr>
    <td align="{align}" style="padding-top: 8px;">
      <table role="presentation" cellpadding="0" cellspacing="0">
        <tr>
          <td style="border-radius: {radius}; background-color: {bg};">
            <a href="{escape_html(url)}" style="display: inline-block; padding: 14px 32px; font-size: {font_size}; font-weight: 600; color: {color}; text-decoration: none; border-radius: {radius};">{escape_html(ctx.merge(text))}</a>
          </td>
        </tr>
      </table>
    </td>
  </tr>
</table>"""


def render_layout_image(image, settings, ctx: RenderContext, width: int = MAX_WIDTH,
                        height: Optional[int] = None, extra_style: str = "") -> str:
    """Image à largeur fixe ; URL vide, tag non résolu ou URL de démo → placeholder."""
    height = height or int(width * IMAGE_ASPECT_RATIO)
    url = ctx.merge(image.url) if image is not None else None
    alt = image.alt_text if image is not None else ""
    src = process_image_url(url, "image", width, height)
    radius = settings.border_radius or "8px"
    return (
        f'<img src="{escape_html(src)}" alt="{escape_html(alt)}" width="{width}" '
        f'style="display: block; width: {width}px; max-width: {width}px; height: auto; '
        f'border-radius: {radius};{extra_style}" />'
    )


def render_placeholder(title: str, hint: str = "Add content in settings") -> str:
    title_html = f"{title}<br/>\n  " if title else ""
    return (
        f'<p style="margin: 0; padding: 20px; text-align: center; color: #9ca3af; font-size: 14px;">'
        f'{title_html}<span style="font-size: 12px; color: #d1d5db;">{hint}</span></p>'
    )


def wrap_layout_container(inner: str, settings, default_padding=DEFAULT_LAYOUT_PADDING,
                          default_background: Optional[str] = None) -> str:
    """Table fond + padding autour des éléments d'un layout."""
    bg = background_css(settings.background_color or default_background)
    style = f' style="{bg.strip()}"' if bg else ""
    return f"""
<table {TABLE_ATTRS}{style}>
  <tr>
    <td style="padding: {padding_str(settings, default_padding)};">
      {inner}
    </td>
  </tr>
</table>"""
