"""
Tests merge tags + placeholders
  resolve_merge_tags(text, tags)        → str (tags inconnus intacts)
  process_image_url(url, kind, w, h)    → url | data:image/svg+xml,…
  process_avatar_url(url)               → url | avatar SVG
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from urllib.parse import unquote

import pytest

from email_blocks.core.merge_tags import (
    find_merge_tags, is_merge_tag, resolve_merge_tags, resolve_merge_tags_deep,
)
from email_blocks.core.placeholders import (
    get_placeholder_avatar, get_placeholder_image, get_social_icon_url,
    is_placeholder_url, process_avatar_url, process_image_url,
)


# ── Merge tags ────────────────────────────────────────────────────────────

def test_resolve_simple_tag():
    assert resolve_merge_tags("Bonjour {{first_name}}", {"first_name": "Ana"}) == "Bonjour Ana"


def test_resolve_tag_with_spaces():
    assert resolve_merge_tags("{{ first_name }} !", {"first_name": "Ana"}) == "Ana !"


def test_unresolved_tag_left_intact():
    assert resolve_merge_tags("Hi {{first_name}}, {{city}}", {"first_name": "Ana"}) == "Hi Ana, {{city}}"


def test_resolve_empty_and_none_unchanged():
    assert resolve_merge_tags("", {"a": "b"}) == ""
    assert resolve_merge_tags(None, {"a": "b"}) is None
    assert resolve_merge_tags("{{a}}", None) == "{{a}}"


def test_is_merge_tag():
    assert is_merge_tag("{{logo_url}}") is True
    assert is_merge_tag("https://x.com/{{id}}") is False
    assert is_merge_tag("") is False
    assert is_merge_tag(None) is False


def test_find_merge_tags_in_order():
    assert find_merge_tags("{{a}} puis {{ b }} puis {{a}}") == ["a", "b", "a"]
    assert find_merge_tags(None) == []


def test_resolve_deep():
    data = {"title": "Salut {{name}}", "items": ["{{name}}", 3, {"x": "{{other}}"}]}
    out = resolve_merge_tags_deep(data, {"name": "Léa"})
    assert out == {"title": "Salut Léa", "items": ["Léa", 3, {"x": "{{other}}"}]}
    # L'original n'est pas muté
    assert data["title"] == "Salut {{name}}"


# ── Placeholders images ───────────────────────────────────────────────────

@pytest.mark.parametrize("url", [
    None, "", "{{logo_url}}", "https://example.com/a.png",
    "https://via.placeholder.com/300", "url", "image", "logo",
])
def test_placeholder_urls_detected(url):
    assert is_placeholder_url(url) is True


def test_real_url_kept():
    url = "https://cdn.acme.io/hero.png"
    assert is_placeholder_url(url) is False
    assert process_image_url(url, "image", 600, 400) == url


def test_process_image_url_returns_svg_data_uri():
    src = process_image_url("{{hero_url}}", "image", 600, 402)
    assert src.startswith("data:image/svg+xml,")
    svg = unquote(src[len("data:image/svg+xml,"):])
    assert 'width="600"' in svg
    assert 'height="402"' in svg
    assert "Add image" in svg
    assert "#f3f4f6" in svg
    assert "#9ca3af" in svg


def test_logo_placeholder_text():
    svg = unquote(get_placeholder_image(150, 80, "logo"))
    assert "Add your logo" in svg


def test_placeholder_is_deterministic():
    assert get_placeholder_image(200, 100) == get_placeholder_image(200, 100)


# ── Avatars ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("url", [
    None, "", "{{avatar}}", "https://fake-people.io/1.png", "https://cdn.io/placeholder.png",
    "url", "avatar", "ftp://files/avatar.png", "/relative/me.png",
])
def test_avatar_placeholder(url):
    assert process_avatar_url(url) == get_placeholder_avatar()


def test_avatar_real_url_kept():
    assert process_avatar_url("https://cdn.acme.io/jane.jpg") == "https://cdn.acme.io/jane.jpg"
    assert process_avatar_url("data:image/png;base64,AAAA") == "data:image/png;base64,AAAA"


def test_avatar_svg_colors():
    svg = unquote(get_placeholder_avatar())
    assert 'width="64"' in svg
    assert "#e5e7eb" in svg and "#9ca3af" in svg


# ── Icônes sociales ───────────────────────────────────────────────────────

def test_social_icon_brand_color():
    svg = unquote(get_social_icon_url("linkedin", "color"))
    assert "#0A66C2" in svg


def test_social_icon_monochrome_default_color():
    svg = unquote(get_social_icon_url("twitter", "monochrome"))
    assert "#374151" in svg


def test_social_icon_outline_uses_stroke():
    svg = unquote(get_social_icon_url("github", "outline", "#ff0000"))
    assert 'stroke="#ff0000"' in svg
    assert 'fill="none"' in svg


def test_social_icon_unknown_platform_generic():
    svg = unquote(get_social_icon_url("mastodon", "color"))
    assert "#6b7280" in svg
    assert ">M<" in svg
