"""
Tests primitives — couleurs, px, padding, URL-ou-merge-tag.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import TypeAdapter, ValidationError

from email_blocks.core.primitives import (
    BackgroundColor, HexColor, Padding, PixelValue, UrlOrMergeTag, padding_of,
)
from email_blocks.core.schemas import GlobalEmailSettings


def _ok(tp, value):
    return TypeAdapter(tp).validate_python(value)


# ── Couleurs / px ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["#ffffff", "#A1b2C3"])
def test_hex_color_valid(value):
    assert _ok(HexColor, value) == value


@pytest.mark.parametrize("value", ["ffffff", "#fff", "#gggggg", "red", "transparent"])
def test_hex_color_invalid(value):
    with pytest.raises(ValidationError):
        _ok(HexColor, value)


def test_background_color_accepts_transparent():
    assert _ok(BackgroundColor, "transparent") == "transparent"


@pytest.mark.parametrize("value", ["16px", "0px", "600px"])
def test_pixel_value_valid(value):
    assert _ok(PixelValue, value) == value


@pytest.mark.parametrize("value", ["16", "1.5px", "2em", "100%"])
def test_pixel_value_invalid(value):
    with pytest.raises(ValidationError):
        _ok(PixelValue, value)


# ── Padding ───────────────────────────────────────────────────────────────

def test_padding_defaults_20():
    p = Padding()
    assert (p.top, p.right, p.bottom, p.left) == (20, 20, 20, 20)


def test_padding_bounds():
    with pytest.raises(ValidationError):
        Padding(top=201)
    with pytest.raises(ValidationError):
        Padding(left=-1)
    assert padding_of(0, 200, 0, 200).right == 200


# ── URL ou merge tag ──────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["https://x.com/a.png", "{{img}}", ""])
def test_url_or_merge_tag_valid(value):
    assert _ok(UrlOrMergeTag, value) == value


@pytest.mark.parametrize("value", ["not-a-url", "#", "/relative/path"])
def test_url_or_merge_tag_invalid(value):
    with pytest.raises(ValidationError):
        _ok(UrlOrMergeTag, value)


# ── GlobalEmailSettings ───────────────────────────────────────────────────

def test_global_settings_defaults():
    s = GlobalEmailSettings()
    assert s.max_width == 600
    assert s.background_color == "#f3f4f6"
    assert s.content_background_color == "#ffffff"


def test_global_settings_camel_case_input():
    s = GlobalEmailSettings.model_validate({"backgroundColor": "#000000", "maxWidth": 640})
    assert s.background_color == "#000000"
    assert s.max_width == 640


def test_global_settings_max_width_bounds():
    with pytest.raises(ValidationError):
        GlobalEmailSettings(max_width=300)
    with pytest.raises(ValidationError):
        GlobalEmailSettings(max_width=900)
