"""
Renderers des blocs simples : logo, spacer, text, image, button, divider.

Chaque renderer reçoit (bloc, contexte) et retourne un fragment <table> autonome.
"""
from ..blocks import ButtonBlock, DividerBlock, ImageBlock, LogoBlock, SpacerBlock, TextBlock
from ..core.constants import IMAGE_ASPECT_RATIO, IMAGE_GRID_WIDTHS, MAX_WIDTH
from ..core.merge_tags import is_merge_tag
from ..core.placeholders import process_image_url
from .base import RenderContext
from .utils import (
    TABLE_ATTRS, background_css, escape_html, escape_text, get_outlook_arcsize, padding_css, px, wrap_table,
)

BUTTON_SIZES = {
    "small":  ("14px", (10, 20)),
    "medium": ("16px", (12, 24)),
    "large":  ("18px", (14, 32)),
}

ASPECT_RATIOS = {
    "1:1":  1.0,
    "16:9": 9 / 16,
    "4:3":  3 / 4,
    "3:4":  4 / 3,
    "2:3":  3 / 2,
}


# ── Logo ────────────────────────────────────────────────────────────────────

def render_logo_block(b: LogoBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    image_url = ctx.merge(d.image_url)

    width_px = px(s.width, 150)
    height_px = px(s.height, 80) if s.height and s.height != "auto" else 80
    src = process_image_url(image_url, "logo", width_px, height_px)

    # Tag non résolu : hauteur mini pour garder la place du logo
    min_height = " min-height: 80px;" if is_merge_tag(image_url) else ""
    height_attr = f' height="{px(s.height)}"' if s.height and s.height != "auto" else ""
    img = (
        f'<img src="{escape_html(src)}" alt="{escape_html(d.alt_text)}" width="{width_px}"{height_attr} '
        f'style="display: block; width: {s.width}; height: {s.height or "auto"}; border: none;{min_height}" />'
    )
    if d.link_url:
        img = f'<a href="{escape_html(ctx.merge(d.link_url))}" style="text-decoration: none;">{img}</a>'

    return wrap_table(
        f'align="{s.align}" style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        img,
    )


# ── Spacer ──────────────────────────────────────────────────────────────────

def render_spacer_block(b: SpacerBlock, ctx: RenderContext) -> str:
    h = b.settings.height
    return f"""
<table {TABLE_ATTRS}>
  <tr>
    <td style="height: {h}px; line-height: {h}px; font-size: {h}px;{background_css(b.settings.background_color)}">&nbsp;</td>
  </tr>
</table>"""


# ── Text ────────────────────────────────────────────────────────────────────

def render_text_block(b: TextBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    font_family = f" font-family: {escape_html(s.font_family)};" if s.font_family else ""
    text = escape_text(ctx.merge(d.text))
    tag = s.tag
    inner = (
        f'<{tag} style="margin: 0; font-size: {s.font_size}; font-weight: {s.font_weight}; '
        f'color: {s.color}; line-height: {s.line_height}; text-align: {s.align};{font_family} '
        f'word-wrap: break-word; overflow-wrap: break-word;">{text}</{tag}>'
    )
    return wrap_table(
        f'align="{s.align}" style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        inner,
    )


# ── Image ───────────────────────────────────────────────────────────────────

def _single_image(b: ImageBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    image_url = ctx.merge(d.image_url)
    width_px = px(s.width, MAX_WIDTH) if s.width != "100%" else MAX_WIDTH
    fixed_height = px(s.height) if s.height and s.height != "auto" else None
    src = process_image_url(image_url, "image", width_px, fixed_height or int(width_px * IMAGE_ASPECT_RATIO))

    radius = f" border-radius: {s.border_radius};" if s.border_radius else ""
    min_height = " min-height: 200px;" if is_merge_tag(image_url) else ""
    height_attr = f' height="{fixed_height}"' if fixed_height else ""
    height_css = f"{fixed_height}px" if fixed_height else "auto"
    img = (
        f'<img src="{escape_html(src)}" alt="{escape_html(d.alt_text)}" width="{width_px}"{height_attr} '
        f'style="display: block; width: {s.width}; max-width: 100%; height: {height_css}; border: none;{min_height}{radius}" />'
    )
    if d.link_url:
        img = f'<a href="{escape_html(ctx.merge(d.link_url))}" style="text-decoration: none; display: inline-block;">{img}</a>'

    caption = ""
    if d.caption:
        caption = (
            f'\n      <p style="margin: 8px 0 0; font-size: 14px; color: #6b7280; text-align: {s.align};">'
            f'{escape_html(ctx.merge(d.caption))}</p>'
        )
    return wrap_table(
        f'align="{s.align}" style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        img + caption,
    )


def _grid_image(b: ImageBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    cols = s.columns
    gap = s.gap
    cell_px = IMAGE_GRID_WIDTHS[cols]
    ratio = ASPECT_RATIOS.get(s.aspect_ratio)
    cell_height = int(cell_px * ratio) if ratio else None
    radius = f" border-radius: {s.border_radius};" if s.border_radius else ""

    rows = []
    images = d.images
    for start in range(0, len(images), cols):
        row = images[start:start + cols]
        cells = []
        for idx, img in enumerate(row):
            url = ctx.merge(img.url)
            src = process_image_url(url, "image", cell_px, cell_height or int(cell_px * IMAGE_ASPECT_RATIO))
            pad_right = f"{gap}px" if idx < len(row) - 1 else "0"
            pad_bottom = f"{gap}px" if start + cols < len(images) else "0"
            if cell_height:
                # Recadrage à hauteur fixe (ratio imposé)
                tag = (
                    f'<img src="{escape_html(src)}" alt="{escape_html(img.alt_text)}" width="{cell_px}" height="{cell_height}" '
                    f'style="display: block; width: {cell_px}px; height: {cell_height}px; object-fit: cover; border: none;{radius}" />'
                )
            else:
                tag = (
                    f'<img src="{escape_html(src)}" alt="{escape_html(img.alt_text)}" width="{cell_px}" '
                    f'style="display: block; width: {cell_px}px; max-width: {cell_px}px; height: auto; border: none;{radius}" />'
                )
            if img.link_url:
                tag = f'<a href="{escape_html(ctx.merge(img.link_url))}" style="text-decoration: none; display: block;">{tag}</a>'
            cells.append(
                f'<td width="{cell_px}" valign="top" style="width: {cell_px}px; max-width: {cell_px}px; '
                f'padding-right: {pad_right}; padding-bottom: {pad_bottom};">{tag}</td>'
            )
        rows.append(f"<tr>{''.join(cells)}</tr>")

    grid = f'<table {TABLE_ATTRS} style="table-layout: fixed;">{"".join(rows)}</table>'
    return wrap_table(
        f'style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        grid,
    )


def render_image_block(b: ImageBlock, ctx: RenderContext) -> str:
    if b.content.images:
        return _grid_image(b, ctx)
    return _single_image(b, ctx)


# ── Button ──────────────────────────────────────────────────────────────────

def render_button_block(b: ButtonBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    font_size, (pad_v, pad_h) = BUTTON_SIZES[s.size]
    if s.padding is not None:
        button_padding = padding_css(s.padding)
    else:
        button_padding = f"{pad_v}px {pad_h}px {pad_v}px {pad_h}px"

    container = padding_css(s.container_padding) if s.container_padding else "32px 40px 32px 40px"
    td_attrs = f'align="{s.align}" style="padding: {container};{background_css(s.background_color)}"'

    url = escape_html(ctx.merge(d.url))
    text = escape_html(ctx.merge(d.text))

    if s.style == "ghost":
        link = (
            f'<a href="{url}" style="display: inline-block; font-size: {font_size}; font-weight: {s.font_weight}; '
            f'color: {s.color}; text-decoration: underline;">{text}</a>'
        )
        return wrap_table(td_attrs, link)

    if s.style == "outline":
        cell_style = f"border-radius: {s.border_radius}; border: 2px solid {s.color}; background-color: transparent;"
        text_color = s.color
    else:
        cell_style = f"border-radius: {s.border_radius}; background-color: {s.color};"
        text_color = s.text_color

    anchor_table = f"""<table role="presentation" cellpadding="0" cellspacing="0" style="margin: 0 auto;">
        <tr>
          <td align="center" style="{cell_style}">
            <a href="{url}" style="display: inline-block; padding: {button_padding}; font-size: {font_size}; font-weight: {s.font_weight}; color: {text_color}; text-decoration: none; border-radius: {s.border_radius};">{text}</a>
          </td>
        </tr>
      </table>"""

    if s.style == "outline":
        return wrap_table(td_attrs, anchor_table)

    # Solid : VML pour Outlook, table HTML pour les autres clients
    vml = (
        f'<!--[if mso]><v:roundrect xmlns:v="urn:schemas-microsoft-com:vml" '
        f'xmlns:w="urn:schemas-microsoft-com:office:word" href="{url}" '
        f'style="height:auto;v-text-anchor:middle;width:auto;" arcsize="{get_outlook_arcsize(s.border_radius)}" '
        f'strokecolor="{s.color}" fillcolor="{s.color}"><w:anchorlock/>'
        f'<center style="color:{s.text_color};font-size:{font_size};font-weight:{s.font_weight};">{text}</center>'
        f'</v:roundrect><![endif]-->'
    )
    return wrap_table(td_attrs, f"{vml}\n      <!--[if !mso]><!-->{anchor_table}<!--<![endif]-->")


# ── Divider ─────────────────────────────────────────────────────────────────

def render_divider_block(b: DividerBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    align = s.align or "center"

    if s.style == "decorative" and d.decorative_element:
        return wrap_table(
            f'align="{align}" style="padding: {padding_css(s.padding)}; font-size: 32px; line-height: 1;"',
            escape_html(d.decorative_element),
        )

    border_style = s.style if s.style in ("solid", "dashed", "dotted") else "solid"
    line = (
        f'<div style="width: {s.width or "100%"}; height: 0; '
        f'border-top: {s.thickness or 1}px {border_style} {s.color or "#e5e7eb"}; margin: 0 auto;"></div>'
    )
    return wrap_table(f'align="{align}" style="padding: {padding_css(s.padding)};"', line)
