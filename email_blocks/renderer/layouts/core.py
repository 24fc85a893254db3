"""
Compositeurs de base : hero, deux colonnes, stats, texte deux colonnes,
N colonnes égales, fallback générique.
"""
from ...blocks import LayoutsBlock
from ...core.constants import COLUMN_GAP, MAX_WIDTH
from ..base import RenderContext
from ..utils import TABLE_ATTRS, escape_html, escape_text
from .helpers import (
    calculate_column_widths, calculate_multi_column_width, padding_values, render_layout_button,
    render_layout_divider, render_layout_header, render_layout_image, render_layout_paragraph,
    render_layout_title, render_placeholder, shown, wrap_layout_container,
)


def _stacked_elements(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    parts = []
    if shown(s.show_header) and d.header:
        parts.append(render_layout_header(d.header, s, ctx))
    if shown(s.show_title) and d.title:
        parts.append(render_layout_title(d.title, s, ctx))
    if s.show_divider is True and (d.divider or s.divider_color):
        parts.append(render_layout_divider(s))
    if shown(s.show_paragraph) and d.paragraph:
        parts.append(render_layout_paragraph(d.paragraph, s, ctx))
    if shown(s.show_button) and d.button is not None and d.button.text:
        parts.append(render_layout_button(d.button, s, ctx))
    return "\n".join(parts)


# ── Hero ────────────────────────────────────────────────────────────────────

def render_hero_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    inner = _stacked_elements(b, ctx) or render_placeholder("Hero Layout")
    return wrap_layout_container(inner, b.settings)


def render_generic_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    """Fallback des variantes sans compositeur dédié : même pile que le hero."""
    inner = _stacked_elements(b, ctx) or render_placeholder("Layout")
    return wrap_layout_container(inner, b.settings)


# ── Deux colonnes image / texte ─────────────────────────────────────────────

def render_two_column_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    widths = calculate_column_widths(b.layout_variation)
    flip = bool(s.flip)
    image_px, text_px = (widths.right_px, widths.left_px) if flip else (widths.left_px, widths.right_px)
    valign = s.vertical_align or "middle"

    image_html = render_layout_image(d.image, s, ctx, width=image_px - COLUMN_GAP)

    text_parts = []
    if shown(s.show_title) and d.title:
        text_parts.append(render_layout_title(d.title, s, ctx, align="left"))
    if shown(s.show_paragraph) and d.paragraph:
        text_parts.append(render_layout_paragraph(d.paragraph, s, ctx, align="left"))
    if shown(s.show_button) and d.button is not None and d.button.text:
        text_parts.append(render_layout_button(d.button, s, ctx, align="left"))
    text_html = "\n".join(text_parts) or '<p style="color: #9ca3af; font-size: 14px;">Add content in settings</p>'

    # La gouttière de 20px est portée par la colonne image, côté texte
    gutter = "padding-left" if flip else "padding-right"
    image_cell = (
        f'<td width="{image_px}" valign="{valign}" style="width: {image_px}px; max-width: {image_px}px; '
        f'min-width: {image_px}px; {gutter}: {COLUMN_GAP}px;">{image_html}</td>'
    )
    text_cell = (
        f'<td width="{text_px}" valign="{valign}" style="width: {text_px}px; max-width: {text_px}px; '
        f'min-width: {text_px}px;">{text_html}</td>'
    )
    cells = text_cell + image_cell if flip else image_cell + text_cell
    inner = f'<table {TABLE_ATTRS} style="table-layout: fixed;"><tr>{cells}</tr></table>'
    return wrap_layout_container(inner, s)


# ── Deux colonnes de texte ──────────────────────────────────────────────────

def render_two_column_text_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    _, pad_r, _, pad_l = padding_values(s)
    column_px = (MAX_WIDTH - pad_l - pad_r - COLUMN_GAP) // 2
    font_size = s.paragraph_font_size or "16px"
    color = s.paragraph_color or "#374151"

    def column(text, side):
        body = escape_text(ctx.merge(text)) if text else ""
        return (
            f'<td width="{column_px}" valign="top" style="width: {column_px}px; padding-{side}: 10px;">'
            f'<p style="margin: 0; font-size: {font_size}; color: {color}; line-height: 1.6;">{body}</p></td>'
        )

    if not d.left_column and not d.right_column:
        return wrap_layout_container(render_placeholder("Two Column Text"), s)
    cells = column(d.left_column, "right") + column(d.right_column, "left")
    inner = f'<table {TABLE_ATTRS} style="table-layout: fixed;"><tr>{cells}</tr></table>'
    return wrap_layout_container(inner, s)


# ── Stats ───────────────────────────────────────────────────────────────────

_STATS_COLUMNS = {"stats-2-col": 2, "stats-3-col": 3, "stats-4-col": 4}


def render_stats_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    if not d.items:
        return wrap_layout_container(render_placeholder("", "Add stats items in settings"), s)

    columns = _STATS_COLUMNS.get(b.layout_variation, 3)
    cell_px = calculate_multi_column_width(columns)
    value_color = s.title_color or "#111827"
    title_color = s.paragraph_color or "#374151"

    rows = []
    for start in range(0, len(d.items), columns):
        cells = []
        for item in d.items[start:start + columns]:
            description = ""
            if item.description:
                description = (
                    f'<p style="margin: 4px 0 0; font-size: 14px; color: #6b7280; line-height: 1.4;">'
                    f'{escape_html(ctx.merge(item.description))}</p>'
                )
            cells.append(
                f'<td width="{cell_px}" align="center" valign="top" style="width: {cell_px}px; padding: 0 10px 20px;">'
                f'<p style="margin: 0; font-size: 36px; font-weight: 700; color: {value_color}; line-height: 1.2;">'
                f'{escape_html(ctx.merge(item.value))}</p>'
                f'<p style="margin: 8px 0 0; font-size: 16px; font-weight: 600; color: {title_color};">'
                f'{escape_html(ctx.merge(item.title))}</p>{description}</td>'
            )
        rows.append(f"<tr>{''.join(cells)}</tr>")
    inner = f'<table {TABLE_ATTRS} style="table-layout: fixed;">{"".join(rows)}</table>'
    return wrap_layout_container(inner, s)


# ── N colonnes égales ───────────────────────────────────────────────────────

_EQUAL_COLUMNS = {
    "three-column-equal": 3,
    "three-column-wide-center": 3,
    "three-column-wide-outer": 3,
    "four-column-equal": 4,
    "five-column-equal": 5,
}


def render_multi_column_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    if not d.columns:
        return wrap_layout_container(render_placeholder("", "Add columns in settings"), s)

    n = _EQUAL_COLUMNS.get(b.layout_variation, len(d.columns))
    cell_px = calculate_multi_column_width(n)
    title_size = s.title_font_size or "18px"
    title_color = s.title_color or "#111827"
    text_size = s.paragraph_font_size or "14px"
    text_color = s.paragraph_color or "#374151"

    rows = []
    for start in range(0, len(d.columns), n):
        row = d.columns[start:start + n]
        cells = []
        for idx, col in enumerate(row):
            parts = []
            if col.image is not None:
                parts.append(render_layout_image(col.image, s, ctx, width=cell_px))
            if col.title:
                parts.append(
                    f'<h3 style="margin: 12px 0 8px; font-size: {title_size}; font-weight: 700; color: {title_color};">'
                    f'{escape_html(ctx.merge(col.title))}</h3>'
                )
            if col.paragraph:
                parts.append(
                    f'<p style="margin: 0; font-size: {text_size}; color: {text_color}; line-height: 1.6;">'
                    f'{escape_text(ctx.merge(col.paragraph))}</p>'
                )
            gap = f" padding-right: {COLUMN_GAP}px;" if idx < len(row) - 1 else ""
            cells.append(
                f'<td width="{cell_px}" valign="top" style="width: {cell_px}px; max-width: {cell_px}px;{gap}">'
                f'{"".join(parts)}</td>'
            )
        rows.append(f"<tr>{''.join(cells)}</tr>")
    inner = f'<table {TABLE_ATTRS} style="table-layout: fixed;">{"".join(rows)}</table>'
    return wrap_layout_container(inner, s)
