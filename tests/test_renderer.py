"""
Tests renderer HTML email — enveloppe, dispatch, ordre, blocs simples et sociaux.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
import re

import pytest
from pydantic import ValidationError

from email_blocks.blocks import BLOCK_TYPES
from email_blocks.core import config
from email_blocks.core.schemas import GlobalEmailSettings
from email_blocks.renderer import (
    BLOCK_RENDERERS, BlockRenderer, RenderContext, check_email_html, get_outlook_arcsize, render_block,
    render_blocks_to_email, wrap_in_email_structure,
)
from email_blocks.renderer.utils import css_url, escape_html


def block(type_, id="b1", position=0, settings=None, content=None, **extra):
    data = {"id": id, "type": type_, "position": position, "settings": settings or {}, "content": content or {}}
    data.update(extra)
    return data


def text(body, id="t", position=0, **settings):
    return block("text", id=id, position=position, settings=settings, content={"text": body})


def render_one(data, merge_tags=None):
    return render_blocks_to_email([data], merge_tags=merge_tags)


# ── Enveloppe ─────────────────────────────────────────────────────────────

def test_document_structure():
    html = render_blocks_to_email([text("Bonjour")])
    assert html.startswith("<!DOCTYPE html>")
    assert "<o:PixelsPerInch>96</o:PixelsPerInch>" in html
    assert "<o:AllowPNG/>" in html
    assert '<meta http-equiv="X-UA-Compatible" content="IE=edge">' in html
    assert "<!--[if mso]>" in html
    assert "max-width: 600px;" in html
    assert html.rstrip().endswith("</html>")


def test_global_settings_applied():
    settings = GlobalEmailSettings(
        background_color="#000000", content_background_color="#fafafa",
        max_width=640, font_family="Georgia, serif",
    )
    html = render_blocks_to_email([text("x")], settings)
    assert "font-family: Georgia, serif;" in html
    assert "background-color: #000000;" in html
    assert "max-width: 640px; background-color: #fafafa;" in html
    assert 'width="640"' in html


def test_global_settings_as_dict():
    html = render_blocks_to_email([text("x")], {"maxWidth": 700})
    assert "max-width: 700px;" in html


# ── Polices et valeurs CSS hostiles ───────────────────────────────────────

HOSTILE_FONT = 'Arial;"><script>alert(1)</script><table x="'


def test_text_hostile_font_family_rejected():
    with pytest.raises(ValidationError):
        render_one(text("x", fontFamily=HOSTILE_FONT))


def test_text_font_stack_escaped():
    html = render_one(text("x", fontFamily="Georgia, 'Times New Roman', serif"))
    assert "font-family: Georgia, &#039;Times New Roman&#039;, serif;" in html
    assert check_email_html(html).is_valid


def test_global_hostile_font_family_rejected():
    with pytest.raises(ValidationError):
        GlobalEmailSettings(font_family='x;"><form action="https://evil.io">')
    with pytest.raises(ValidationError):
        wrap_in_email_structure("<p>x</p>", {"fontFamily": HOSTILE_FONT})


def test_global_font_stack_escaped():
    html = wrap_in_email_structure("<p>x</p>", {"fontFamily": "'Helvetica Neue', Arial, sans-serif"})
    assert "font-family: &#039;Helvetica Neue&#039;, Arial, sans-serif;" in html
    assert check_email_html(html).is_valid


def test_wrap_with_default_settings():
    html = wrap_in_email_structure("<p>x</p>")
    assert "<tr><td><p>x</p></td></tr>" in html


def test_every_table_has_presentation_role():
    html = render_blocks_to_email([
        text("a"),
        block("button", id="b", position=1, content={"text": "Go", "url": "{{cta_url}}"}),
        block("layouts", id="l", position=2, layoutVariation="two-column-60-40"),
    ])
    tables = re.findall(r"<table\b[^>]*>", html)
    assert tables
    assert all('role="presentation"' in t for t in tables)


def test_output_passes_safety_check():
    result = check_email_html(render_blocks_to_email([text("<script>alert(1)</script>")]))
    assert result.is_valid, result.errors


# ── Dispatch + ordre ──────────────────────────────────────────────────────

def test_every_block_type_has_renderer():
    assert set(BLOCK_RENDERERS) == set(BLOCK_TYPES)
    assert all(isinstance(fn, BlockRenderer) for fn in BLOCK_RENDERERS.values())


def test_blocks_sorted_by_position():
    html = render_blocks_to_email([text("DEUX", id="a", position=2), text("ZERO", id="b"), text("UN", id="c", position=1)])
    assert html.index("ZERO") < html.index("UN") < html.index("DEUX")


def test_equal_positions_keep_input_order():
    html = render_blocks_to_email([text("PREMIER", id="a", position=1), text("SECOND", id="b", position=1)])
    assert html.index("PREMIER") < html.index("SECOND")


def test_invalid_dict_raises_validation_error():
    with pytest.raises(ValidationError):
        render_blocks_to_email([block("text", content={"text": ""})])


def test_rendering_is_deterministic():
    blocks = [text("a"), block("logo", id="l", position=1, content={"altText": "ACME", "imageUrl": "{{logo}}"})]
    assert render_blocks_to_email(blocks) == render_blocks_to_email(blocks)


class _Unknown:
    id = "u1"
    type = "carousel"
    position = 0


def test_unknown_type_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        assert render_block(_Unknown(), RenderContext()) == ""
    assert "carousel" in caplog.text
    assert "u1" in caplog.text


def test_unknown_type_strict_mode_raises(monkeypatch):
    monkeypatch.setattr(config, "STRICT_RENDER", True)
    with pytest.raises(ValueError):
        render_block(_Unknown(), RenderContext())


# ── Text ──────────────────────────────────────────────────────────────────

def test_text_escaped_and_newlines():
    html = render_one(text("a < b\nligne 2"))
    assert "a &lt; b<br />ligne 2" in html


def test_text_tag_and_styles():
    html = render_one(text("Titre", tag="h2", fontSize="32px", color="#111827", align="center"))
    assert "<h2 style=" in html
    assert "font-size: 32px;" in html
    assert "color: #111827;" in html
    assert "text-align: center;" in html


def test_text_merge_tags():
    html = render_one(text("Bonjour {{first_name}} {{unknown}}"), {"first_name": "Ana"})
    assert "Bonjour Ana {{unknown}}" in html


# ── Logo / image ──────────────────────────────────────────────────────────

def test_logo_unresolved_tag_gives_placeholder():
    html = render_one(block("logo", content={"altText": "ACME", "imageUrl": "{{logo_url}}"}))
    assert 'src="data:image/svg+xml,' in html
    assert "min-height: 80px;" in html


def test_logo_resolved_tag_and_link():
    html = render_one(
        block("logo", settings={"width": "120px", "height": "40px"},
              content={"altText": "ACME", "imageUrl": "{{logo_url}}", "linkUrl": "https://acme.io"}),
        {"logo_url": "https://cdn.acme.io/logo.png"},
    )
    assert 'src="https://cdn.acme.io/logo.png"' in html
    assert 'width="120"' in html and 'height="40"' in html
    assert '<a href="https://acme.io"' in html


def test_single_image_caption():
    html = render_one(block("image", content={
        "altText": "Produit", "imageUrl": "https://cdn.acme.io/p.png", "caption": "Notre produit",
    }, settings={"borderRadius": "8px"}))
    assert 'src="https://cdn.acme.io/p.png"' in html
    assert "Notre produit" in html
    assert "border-radius: 8px;" in html


def test_single_image_placeholder_size():
    html = render_one(block("image", content={"altText": "x", "imageUrl": ""}))
    assert "data:image/svg+xml," in html
    assert "height%3D%22402%22" in html


def test_single_image_fixed_height():
    html = render_one(block("image", settings={"width": "300px", "height": "120px"},
                            content={"altText": "x", "imageUrl": "https://cdn.acme.io/p.png"}))
    assert 'width="300" height="120"' in html
    assert "height: 120px;" in html


@pytest.mark.parametrize("columns,cell", [(1, 600), (2, 290), (3, 190)])
def test_image_grid_cell_widths(columns, cell):
    images = [{"url": "https://cdn.acme.io/%d.png" % i, "altText": str(i)} for i in range(columns * 2)]
    html = render_one(block("image", settings={"columns": columns}, content={"altText": "g", "images": images}))
    assert f'<td width="{cell}"' in html
    assert html.count(f'<td width="{cell}"') == columns * 2


def test_image_grid_aspect_ratio_crop():
    images = [{"url": "https://cdn.acme.io/a.png"}, {"url": "https://cdn.acme.io/b.png"}]
    html = render_one(block("image", settings={"columns": 2, "aspectRatio": "1:1"}, content={"altText": "g", "images": images}))
    assert 'height="290"' in html
    assert "object-fit: cover;" in html


# ── Button ────────────────────────────────────────────────────────────────

def test_button_merge_tag_url():
    html = render_one(block("button", content={"text": "Go", "url": "{{cta_url}}"}),
                      {"cta_url": "https://example.org/go"})
    assert 'href="https://example.org/go"' in html


def test_button_solid_has_vml():
    html = render_one(block("button", settings={"borderRadius": "6px"}, content={"text": "Go", "url": "https://acme.io"}))
    assert "<v:roundrect" in html
    assert 'arcsize="20%"' in html
    assert "<!--[if !mso]><!-->" in html


@pytest.mark.parametrize("size,font,padding", [
    ("small", "14px", "10px 20px 10px 20px"),
    ("medium", "16px", "12px 24px 12px 24px"),
    ("large", "18px", "14px 32px 14px 32px"),
])
def test_button_size_presets(size, font, padding):
    html = render_one(block("button", settings={"size": size}, content={"text": "Go", "url": "https://acme.io"}))
    assert f"font-size: {font};" in html
    assert f"padding: {padding};" in html


def test_button_default_container_padding():
    html = render_one(block("button", content={"text": "Go", "url": "https://acme.io"}))
    assert "padding: 32px 40px 32px 40px;" in html


def test_button_outline_and_ghost():
    outline = render_one(block("button", settings={"style": "outline", "color": "#ff0000"}, content={"text": "Go", "url": "https://acme.io"}))
    assert "border: 2px solid #ff0000;" in outline
    assert "<v:roundrect" not in outline
    ghost = render_one(block("button", settings={"style": "ghost"}, content={"text": "Go", "url": "https://acme.io"}))
    assert "text-decoration: underline;" in ghost


@pytest.mark.parametrize("radius,arcsize", [
    ("0px", "10%"), ("4px", "10%"), ("8px", "20%"), ("12px", "15%"), ("24px", "50%"), (None, "10%"),
])
def test_outlook_arcsize(radius, arcsize):
    assert get_outlook_arcsize(radius) == arcsize


# ── Divider / spacer ──────────────────────────────────────────────────────

def test_divider_defaults():
    html = render_one(block("divider"))
    assert "border-top: 1px solid #e5e7eb;" in html
    assert "width: 100%;" in html


@pytest.mark.parametrize("width", ['1px"></div><iframe src="https://evil.io">', "50%", "calc(100%)"])
def test_divider_width_rejected(width):
    with pytest.raises(ValidationError):
        render_one(block("divider", settings={"width": width}))


@pytest.mark.parametrize("width", ["240px", "100%"])
def test_divider_width_accepted(width):
    html = render_one(block("divider", settings={"width": width}))
    assert f"width: {width};" in html
    assert check_email_html(html).is_valid


def test_divider_decorative():
    html = render_one(block("divider", settings={"style": "decorative"}, content={"decorativeElement": "✦"}))
    assert "✦" in html
    assert "font-size: 32px;" in html


def test_spacer_height():
    html = render_one(block("spacer", settings={"height": 24}))
    assert "height: 24px; line-height: 24px; font-size: 24px;" in html
    assert "&nbsp;" in html


# ── Social / footer / link bar / address ──────────────────────────────────

def test_social_links_icons_and_spacing():
    html = render_one(block("social-links", settings={"spacing": 30}, content={"links": [
        {"platform": "twitter", "url": "https://x.com/acme"},
        {"platform": "github", "url": "https://github.com/acme"},
    ]}))
    assert html.count('alt="twitter"') == 1
    assert "padding: 0 15px;" in html
    assert "margin: 0 auto;" in html
    assert 'src="data:image/svg+xml,' in html


@pytest.mark.parametrize("align,style", [("left", 'style=""'), ("right", "margin-left: auto;")])
def test_social_links_alignment(align, style):
    html = render_one(block("social-links", settings={"align": align},
                            content={"links": [{"platform": "twitter", "url": "https://x.com/acme"}]}))
    assert style in html


def test_footer_links():
    html = render_one(block("footer", settings={"linkColor": "#2563eb"}, content={
        "companyName": "{{company_name}}", "unsubscribeUrl": "{{unsubscribe_url}}",
        "preferencesUrl": "{{preferences_url}}", "companyAddress": "1 rue de Paris",
    }), {"company_name": "ACME", "unsubscribe_url": "https://acme.io/u"})
    assert "<strong>ACME</strong>" in html
    assert '<a href="https://acme.io/u" style="color: #2563eb; text-decoration: underline;">Unsubscribe</a>' in html
    assert "Preferences" in html
    assert "1 rue de Paris" in html


def test_footer_without_preferences():
    html = render_one(block("footer", content={"companyName": "ACME", "unsubscribeUrl": "https://acme.io/u"}))
    assert "Unsubscribe" in html
    assert "Preferences" not in html


def test_link_bar_horizontal_and_vertical():
    links = {"links": [{"text": "Accueil", "url": "{{home_url}}"}, {"text": "Blog", "url": "https://acme.io/blog"}]}
    horizontal = render_one(block("link-bar", content=links), {"home_url": "https://acme.io"})
    assert 'href="https://acme.io"' in horizontal
    assert horizontal.count('<td style="padding: 0 8px;') == 2
    vertical = render_one(block("link-bar", settings={"orientation": "vertical"}, content=links))
    assert vertical.count('<tr><td align="center"') == 2


def test_address_lines():
    html = render_one(block("address", content={
        "companyName": "ACME", "street": "1 rue de Paris", "city": "Lyon", "state": "ARA", "zip": "69001", "country": "France",
    }))
    assert "ACME<br />1 rue de Paris<br />Lyon, ARA 69001<br />France" in html


def test_empty_address_renders_nothing():
    ctx = RenderContext()
    from email_blocks.blocks import AddressBlock
    assert render_block(AddressBlock(id="a", settings={}), ctx) == ""


# ── Container ─────────────────────────────────────────────────────────────

def test_container_stack_renders_children_in_order():
    html = render_one(block("container", content={"children": [text("SECOND", id="a", position=1), text("FIRST", id="b")]}))
    assert html.index("FIRST") < html.index("SECOND")


def test_container_grid_cell_width():
    children = [text(str(i), id=str(i), position=i) for i in range(4)]
    html = render_one(block("container", settings={"layout": "grid", "gridColumns": 2, "gap": 20}, content={"children": children}))
    assert html.count('<td width="290"') == 4


def test_container_depth_limit_at_render(monkeypatch, caplog):
    from email_blocks.blocks import ContainerBlock
    outer = ContainerBlock.model_validate(block("container", id="outer", content={"children": [
        block("container", id="inner", content={"children": [text("FOND")]}),
    ]}))
    # Limite abaissée après validation : seul le rendu la voit
    monkeypatch.setattr(config, "MAX_NESTING_DEPTH", 1)
    with caplog.at_level(logging.WARNING):
        html = render_block(outer, RenderContext())
    assert "FOND" not in html
    assert "inner" in caplog.text


def test_escape_html():
    assert escape_html('<a href="x">\'&') == "&lt;a href=&quot;x&quot;&gt;&#039;&amp;"
    assert escape_html(None) == ""


def test_css_url_encodes_breakout_characters():
    assert css_url("https://cdn.io/a b'(c)\".png") == "https://cdn.io/a%20b%27%28c%29%22.png"
    assert css_url("https://cdn.io/bg.jpg") == "https://cdn.io/bg.jpg"
    assert css_url(None) == ""
