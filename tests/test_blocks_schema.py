"""
Tests schémas de blocs — union discriminée, layoutVariation, container récursif.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import TypeAdapter, ValidationError

from email_blocks.blocks import (
    BLOCK_CLASSES, BLOCK_TYPES, LAYOUT_VARIATIONS, ContainerBlock, EmailBlock,
    LayoutsBlock, LogoBlock, TextBlock, container_depth,
)
from email_blocks.core import config

ADAPTER = TypeAdapter(EmailBlock)


def text(id="t1", position=0, body="Bonjour"):
    return {"id": id, "type": "text", "position": position, "settings": {}, "content": {"text": body}}


def container(children, id="c1"):
    return {"id": id, "type": "container", "position": 0, "settings": {}, "content": {"children": children}}


def nested(depth):
    """Container imbriqué sur `depth` niveaux, texte au fond."""
    block = text()
    for i in range(depth):
        block = container([block], id=f"c{i}")
    return block


# ── Union discriminée ─────────────────────────────────────────────────────

def test_block_types_closed_set():
    assert set(BLOCK_TYPES) == {
        "logo", "spacer", "text", "image", "button", "divider", "social-links",
        "footer", "link-bar", "address", "layouts", "container",
    }


def test_dispatch_by_type():
    b = ADAPTER.validate_python(text())
    assert isinstance(b, TextBlock)
    assert b.settings.font_size == "16px"
    assert b.settings.tag == "p"


def test_unknown_type_rejected():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python({"id": "x", "type": "carousel", "settings": {}, "content": {}})


def test_empty_id_rejected():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python(text(id=""))


def test_negative_position_rejected():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python(text(position=-1))


def test_logo_image_url_rules():
    base = {"id": "l1", "type": "logo", "settings": {}, "content": {"altText": "ACME"}}
    for ok in ("https://x.com/a.png", "{{img}}", ""):
        data = {**base, "content": {"altText": "ACME", "imageUrl": ok}}
        assert isinstance(ADAPTER.validate_python(data), LogoBlock)
    with pytest.raises(ValidationError):
        ADAPTER.validate_python({**base, "content": {"altText": "ACME", "imageUrl": "not-a-url"}})


def test_snake_case_input_accepted():
    b = ADAPTER.validate_python({
        "id": "l1", "type": "logo", "settings": {},
        "content": {"alt_text": "ACME", "image_url": "{{logo_url}}"},
    })
    assert b.content.image_url == "{{logo_url}}"


def test_text_length_limits():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python(text(body=""))
    with pytest.raises(ValidationError):
        ADAPTER.validate_python(text(body="x" * 5001))


# ── layoutVariation ───────────────────────────────────────────────────────

def test_layout_variation_count():
    assert len(LAYOUT_VARIATIONS) == 62
    assert len(set(LAYOUT_VARIATIONS)) == 62


def test_layouts_requires_variation():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python({"id": "l", "type": "layouts", "settings": {}, "content": {}})


def test_layouts_rejects_unknown_variation():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python({
            "id": "l", "type": "layouts", "layoutVariation": "hero-left", "settings": {}, "content": {},
        })


def test_layouts_valid_variation():
    b = ADAPTER.validate_python({
        "id": "l", "type": "layouts", "layoutVariation": "stats-3-col", "settings": {}, "content": {},
    })
    assert isinstance(b, LayoutsBlock)
    assert b.layout_variation == "stats-3-col"


def test_variation_forbidden_on_other_types():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python({**text(), "layoutVariation": "hero-center"})


def test_variation_null_allowed_on_other_types():
    b = ADAPTER.validate_python({**text(), "layoutVariation": None})
    assert b.layout_variation is None


# ── Container ─────────────────────────────────────────────────────────────

def test_container_children_parsed_recursively():
    b = ADAPTER.validate_python(container([text(id="a"), text(id="b", position=1)]))
    assert isinstance(b, ContainerBlock)
    assert [c.id for c in b.content.children] == ["a", "b"]
    assert isinstance(b.content.children[0], TextBlock)


def test_container_requires_children():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python(container([]))


def test_container_max_ten_children():
    with pytest.raises(ValidationError):
        ADAPTER.validate_python(container([text(id=str(i)) for i in range(11)]))


def test_container_depth_helper():
    b = ADAPTER.validate_python(nested(3))
    assert container_depth(b) == 3
    assert container_depth(b.content.children[0].content.children[0].content.children[0]) == 0


def test_container_depth_limit():
    ADAPTER.validate_python(nested(config.MAX_NESTING_DEPTH))
    with pytest.raises(ValidationError):
        ADAPTER.validate_python(nested(config.MAX_NESTING_DEPTH + 1))


def test_every_block_class_has_literal_type():
    for block_type, cls in BLOCK_CLASSES.items():
        assert cls.model_fields["type"].default == block_type
