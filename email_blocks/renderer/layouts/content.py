"""
Compositeurs de contenu : témoignages, grilles de features, tableaux de comparaison.
"""
from ...blocks import LayoutsBlock
from ...core.constants import COLUMN_GAP
from ...core.placeholders import process_avatar_url
from ..base import RenderContext
from ..utils import TABLE_ATTRS, escape_html, escape_text
from .helpers import (
    calculate_multi_column_width, render_layout_title, render_placeholder, shown, wrap_layout_container,
)

AVATAR_SIZE = 64


# ── Témoignages ─────────────────────────────────────────────────────────────

def _avatar(url, ctx: RenderContext) -> str:
    src = escape_html(process_avatar_url(ctx.merge(url)))
    return (
        f'<img src="{src}" alt="" width="{AVATAR_SIZE}" height="{AVATAR_SIZE}" '
        f'style="display: block; width: {AVATAR_SIZE}px; height: {AVATAR_SIZE}px; border-radius: 50%; border: none;" />'
    )


def _attribution(b: LayoutsBlock, ctx: RenderContext, align: str) -> str:
    d = b.content
    lines = []
    if d.author:
        lines.append(
            f'<p style="margin: 0; font-size: 16px; font-weight: 700; color: #111827; text-align: {align};">'
            f'{escape_html(ctx.merge(d.author))}</p>'
        )
    details = ", ".join(ctx.merge(x) for x in (d.role, d.company) if x)
    if details:
        lines.append(
            f'<p style="margin: 4px 0 0; font-size: 14px; color: #6b7280; text-align: {align};">'
            f'{escape_html(details)}</p>'
        )
    return "".join(lines)


def render_testimonial_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    if not d.quote:
        return wrap_layout_container(render_placeholder("Testimonial"), s)

    variation = b.layout_variation
    align = "left" if variation == "testimonial-with-image" else (s.align or "center")
    quote_size = s.paragraph_font_size or "18px"
    quote_color = s.paragraph_color or "#374151"
    quote = (
        f'<p style="margin: 0 0 20px; font-size: {quote_size}; font-style: italic; color: {quote_color}; '
        f'line-height: 1.6; text-align: {align};">&ldquo;{escape_text(ctx.merge(d.quote))}&rdquo;</p>'
    )
    attribution = _attribution(b, ctx, align)

    if variation == "testimonial-with-image":
        inner = f"""<table role="presentation" cellpadding="0" cellspacing="0">
        <tr>
          <td width="{AVATAR_SIZE}" valign="top" style="width: {AVATAR_SIZE}px;">{_avatar(d.avatar_url, ctx)}</td>
          <td width="{COLUMN_GAP}" style="width: {COLUMN_GAP}px;">&nbsp;</td>
          <td valign="top">{quote}{attribution}</td>
        </tr>
      </table>"""
        return wrap_layout_container(inner, s)

    avatar = f'<table role="presentation" cellpadding="0" cellspacing="0" style="margin: 0 auto 16px;"><tr><td>{_avatar(d.avatar_url, ctx)}</td></tr></table>'
    body = avatar + quote + attribution

    if variation == "testimonial-card":
        accent = s.divider_color or s.button_background_color or "#7c3aed"
        body = f"""<table {TABLE_ATTRS} style="background-color: #ffffff; border-left: 4px solid {accent};">
        <tr>
          <td style="padding: 32px;">{body}</td>
        </tr>
      </table>"""
    return wrap_layout_container(body, s)


# ── Grille de features ──────────────────────────────────────────────────────

def _feature_columns(variation: str, count: int) -> int:
    if variation == "feature-grid-4-items":
        return 2
    return max(1, min(count, 3))


def render_feature_grid_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    if not d.features:
        return wrap_layout_container(render_placeholder("Feature Grid", "Add features in settings"), s)

    columns = _feature_columns(b.layout_variation, len(d.features))
    cell_px = calculate_multi_column_width(columns)
    title_size = s.title_font_size or "18px"
    title_color = s.title_color or "#111827"
    text_size = s.paragraph_font_size or "14px"
    text_color = s.paragraph_color or "#374151"

    rows = []
    for start in range(0, len(d.features), columns):
        row = d.features[start:start + columns]
        cells = []
        for idx, feature in enumerate(row):
            parts = []
            if feature.icon:
                parts.append(f'<p style="margin: 0 0 8px; font-size: 32px; line-height: 1;">{escape_html(feature.icon)}</p>')
            if feature.title:
                parts.append(
                    f'<h3 style="margin: 0 0 8px; font-size: {title_size}; font-weight: 700; color: {title_color};">'
                    f'{escape_html(ctx.merge(feature.title))}</h3>'
                )
            if feature.description:
                parts.append(
                    f'<p style="margin: 0; font-size: {text_size}; color: {text_color}; line-height: 1.6;">'
                    f'{escape_text(ctx.merge(feature.description))}</p>'
                )
            gap = f" padding-right: {COLUMN_GAP}px;" if idx < len(row) - 1 else ""
            cells.append(
                f'<td width="{cell_px}" valign="top" style="width: {cell_px}px; max-width: {cell_px}px; '
                f'padding-bottom: 24px;{gap}">{"".join(parts)}</td>'
            )
        rows.append(f"<tr>{''.join(cells)}</tr>")

    heading = ""
    if shown(s.show_title) and d.title:
        heading = render_layout_title(d.title, s, ctx)
    grid = f'<table {TABLE_ATTRS} style="table-layout: fixed;">{"".join(rows)}</table>'
    return wrap_layout_container(heading + grid, s)


# ── Comparaison ─────────────────────────────────────────────────────────────

_BEFORE_STYLE = ("#fef2f2", "#dc2626")
_AFTER_STYLE = ("#f0fdf4", "#16a34a")
_NEUTRAL_STYLE = ("#f9fafb", "#374151")


def _comparison_cell(label, text, colors, cell_px: int, ctx: RenderContext, gap: bool) -> str:
    background, label_color = colors
    padding_right = f" border-right: {COLUMN_GAP}px solid transparent;" if gap else ""
    return (
        f'<td width="{cell_px}" valign="top" style="width: {cell_px}px; background-color: {background}; '
        f'padding: 20px;{padding_right}">'
        f'<p style="margin: 0 0 8px; font-size: 14px; font-weight: 700; color: {label_color}; '
        f'text-transform: uppercase; letter-spacing: 0.05em;">{escape_html(ctx.merge(label))}</p>'
        f'<p style="margin: 0; font-size: 15px; color: #374151; line-height: 1.6;">{escape_text(ctx.merge(text))}</p>'
        f'</td>'
    )


def render_comparison_layout(b: LayoutsBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    if d.before is None or d.after is None:
        return wrap_layout_container(render_placeholder("Comparison", "Add before and after in settings"), s)

    sides = [
        (d.before.label or "Before", d.before.text, _BEFORE_STYLE),
        (d.after.label or "After", d.after.text, _AFTER_STYLE),
    ]
    if b.layout_variation == "comparison-table-3-col":
        # troisième colonne : premier élément seulement
        for item in d.items[:1]:
            sides.append((item.title or "", item.description, _NEUTRAL_STYLE))

    cell_px = calculate_multi_column_width(len(sides))
    cells = "".join(
        _comparison_cell(label, text, colors, cell_px, ctx, gap=idx < len(sides) - 1)
        for idx, (label, text, colors) in enumerate(sides)
    )
    heading = ""
    if shown(s.show_title) and d.title:
        heading = render_layout_title(d.title, s, ctx)
    table = f'<table {TABLE_ATTRS} style="table-layout: fixed;"><tr>{cells}</tr></table>'
    return wrap_layout_container(heading + table, s)
