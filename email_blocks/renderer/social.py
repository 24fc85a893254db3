"""
Renderers des blocs sociaux et de pied de page : social-links, footer, link-bar, address.
"""
from ..blocks import AddressBlock, FooterBlock, LinkBarBlock, SocialLinksBlock
from ..core.placeholders import get_social_icon_url
from .base import RenderContext
from .utils import background_css, escape_html, padding_css, px, wrap_table

_TABLE_ALIGN = {
    "left":   "",
    "right":  "margin-left: auto;",
    "center": "margin: 0 auto;",
}


# ── Social links ────────────────────────────────────────────────────────────

def render_social_links_block(b: SocialLinksBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    half = s.spacing // 2
    size = px(s.icon_size, 32)

    # Liens sans plateforme ou sans URL ignorés
    links = [link for link in d.links if link.platform and link.url]
    cells = []
    for link in links:
        icon = get_social_icon_url(link.platform, s.icon_style, s.icon_color, size)
        cells.append(
            f'<td style="padding: 0 {half}px; vertical-align: middle;">'
            f'<a href="{escape_html(ctx.merge(link.url))}" style="text-decoration: none; display: inline-block;">'
            f'<img src="{escape_html(icon)}" alt="{link.platform}" width="{size}" height="{size}" '
            f'style="display: block; border: none;" /></a></td>'
        )

    row = f"""<table role="presentation" cellpadding="0" cellspacing="0" style="{_TABLE_ALIGN[s.align]}">
        <tr>{''.join(cells)}</tr>
      </table>"""
    return wrap_table(
        f'align="{s.align}" style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        row,
    )


# ── Footer ──────────────────────────────────────────────────────────────────

def render_footer_block(b: FooterBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    text_style = f"font-size: {s.font_size}; color: {s.text_color}; line-height: {s.line_height};"
    link_style = f"color: {s.link_color or s.text_color}; text-decoration: underline;"

    parts = [f'<p style="margin: 0 0 8px; {text_style}"><strong>{escape_html(ctx.merge(d.company_name))}</strong></p>']
    if d.company_address:
        parts.append(f'<p style="margin: 0 0 8px; {text_style}">{escape_html(ctx.merge(d.company_address))}</p>')
    if d.custom_text:
        parts.append(f'<p style="margin: 0 0 12px; {text_style}">{escape_html(ctx.merge(d.custom_text))}</p>')

    unsubscribe = ctx.merge(d.unsubscribe_url) or ""
    preferences = ctx.merge(d.preferences_url) or ""
    links = f'<a href="{escape_html(unsubscribe)}" style="{link_style}">Unsubscribe</a>'
    if preferences:
        links += f' | <a href="{escape_html(preferences)}" style="{link_style}">Preferences</a>'
    parts.append(f'<p style="margin: 0; {text_style}">{links}</p>')

    return wrap_table(
        f'align="{s.align}" style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        "\n      ".join(parts),
    )


# ── Link bar ────────────────────────────────────────────────────────────────

def render_link_bar_block(b: LinkBarBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content
    half = s.spacing // 2
    anchors = [
        f'<a href="{escape_html(ctx.merge(link.url))}" style="color: {s.link_color}; '
        f'font-size: {s.font_size}; text-decoration: none;">{escape_html(ctx.merge(link.text))}</a>'
        for link in d.links
    ]

    if s.orientation == "vertical":
        rows = "".join(
            f'<tr><td align="{s.align}" style="padding: {half}px 0; color: {s.text_color};">{a}</td></tr>'
            for a in anchors
        )
    else:
        cells = "".join(
            f'<td style="padding: 0 {half}px; color: {s.text_color};">{a}</td>' for a in anchors
        )
        rows = f"<tr>{cells}</tr>"

    bar = f'<table role="presentation" cellpadding="0" cellspacing="0" style="{_TABLE_ALIGN[s.align]}">{rows}</table>'
    return wrap_table(
        f'align="{s.align}" style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        bar,
    )


# ── Address ─────────────────────────────────────────────────────────────────

def render_address_block(b: AddressBlock, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    def m(value):
        return escape_html(ctx.merge(value)) if value else ""

    locality = " ".join(p for p in (", ".join(p for p in (m(d.city), m(d.state)) if p), m(d.zip)) if p)
    lines = [line for line in (m(d.company_name), m(d.street), locality, m(d.country)) if line]
    if not lines:
        return ""

    body = (
        f'<p style="margin: 0; font-size: {s.font_size}; color: {s.text_color}; '
        f'line-height: {s.line_height}; text-align: {s.align};">{"<br />".join(lines)}</p>'
    )
    return wrap_table(
        f'align="{s.align}" style="padding: {padding_css(s.padding)};{background_css(s.background_color)}"',
        body,
    )
