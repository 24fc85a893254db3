"""
Tests registry — définitions, variantes, défauts, factories, générateur d'ids.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import itertools

import pytest

from email_blocks.blocks import BLOCK_TYPES, LAYOUT_VARIATIONS, ContainerBlock, TextBlock
from email_blocks.registry import (
    BLOCK_CATEGORIES, BLOCK_DEFINITIONS, LAYOUT_VARIATION_DEFINITIONS,
    clone_block, create_address_block, create_default_block, create_layout_block, create_link_bar_block,
    generate_block_id, get_ai_block_recommendations, get_all_block_definitions, get_block_definition,
    get_block_display_name, get_blocks_by_category, get_blocks_for_use_case, get_default_block_content,
    get_default_block_settings, get_layout_variation_definition, get_layout_variation_display_name,
    get_layout_variations_by_category, reset_id_generator, search_blocks, set_id_generator,
)


@pytest.fixture
def counter_ids():
    """Générateur d'ids déterministe, restauré après le test."""
    counter = itertools.count(1)
    set_id_generator(lambda: f"b{next(counter)}")
    yield
    reset_id_generator()


# ── Définitions ───────────────────────────────────────────────────────────

def test_every_block_type_defined():
    assert set(BLOCK_DEFINITIONS) == set(BLOCK_TYPES)


def test_six_categories():
    assert [c.id for c in BLOCK_CATEGORIES] == ["structure", "content", "media", "cta", "social", "layout"]


def test_definitions_use_known_categories():
    ids = {c.id for c in BLOCK_CATEGORIES}
    assert all(d.category in ids for d in get_all_block_definitions())


def test_get_block_definition_unknown_raises():
    assert get_block_definition("button").type == "button"
    with pytest.raises(KeyError):
        get_block_definition("carousel")


def test_blocks_by_category():
    assert "button" in [d.type for d in get_blocks_by_category("cta")]


def test_search_blocks():
    assert "logo" in [d.type for d in search_blocks("LOGO")]
    assert len(search_blocks("")) == len(BLOCK_DEFINITIONS)
    assert search_blocks("zzz-nothing") == []


# ── Variantes ─────────────────────────────────────────────────────────────

def test_one_definition_per_variation():
    assert set(LAYOUT_VARIATION_DEFINITIONS) == set(LAYOUT_VARIATIONS)


def test_variation_lookup():
    d = get_layout_variation_definition("stats-3-col")
    assert d is not None and d.variation == "stats-3-col"
    assert get_layout_variation_definition("nope") is None


def test_variations_by_category():
    two_col = [d.variation for d in get_layout_variations_by_category("two-column")]
    assert "two-column-60-40" in two_col


def test_variation_display_name():
    assert get_layout_variation_display_name("two-column-60-40") == "Two Column 60 40"


# ── Défauts ───────────────────────────────────────────────────────────────

def test_defaults_return_fresh_copies():
    a = get_default_block_settings("text")
    a["padding"]["top"] = 99
    assert get_default_block_settings("text")["padding"]["top"] == 20


def test_defaults_unknown_type_empty():
    assert get_default_block_settings("carousel") == {}
    assert get_default_block_content("carousel") == {}


def test_default_urls_never_hash():
    assert get_default_block_content("button")["url"] == "{{cta_url}}"
    assert all(link["url"] != "#" for link in get_default_block_content("link-bar")["links"])


@pytest.mark.parametrize("block_type", [t for t in BLOCK_TYPES if t != "layouts"])
def test_every_default_block_validates(block_type, counter_ids):
    block = create_default_block(block_type)
    assert block.type == block_type


@pytest.mark.parametrize("variation", LAYOUT_VARIATIONS)
def test_every_layout_default_validates(variation, counter_ids):
    block = create_layout_block(variation, position=3)
    assert block.layout_variation == variation
    assert block.position == 3


def test_hero_defaults():
    s = get_default_block_settings("layouts", "hero-center")
    assert s["padding"] == {"top": 80, "right": 40, "bottom": 80, "left": 40}
    assert get_default_block_content("layouts", "hero-center")["button"]["url"] == "{{cta_url}}"


def test_stats_defaults_item_count():
    assert len(get_default_block_content("layouts", "stats-4-col")["items"]) == 4


# ── Factories ─────────────────────────────────────────────────────────────

def test_create_unknown_type_raises():
    with pytest.raises(ValueError):
        create_default_block("carousel")


def test_create_layouts_without_variation_raises():
    with pytest.raises(ValueError):
        create_default_block("layouts")


def test_container_default_has_text_child(counter_ids):
    block = create_default_block("container")
    assert isinstance(block, ContainerBlock)
    assert len(block.content.children) == 1
    assert isinstance(block.content.children[0], TextBlock)


def test_link_bar_and_address_factories(counter_ids):
    assert create_link_bar_block().type == "link-bar"
    assert create_address_block(position=2).position == 2


def test_injected_id_generator(counter_ids):
    assert create_default_block("text").id == "b1"
    assert create_default_block("text", id_generator=lambda: "fixed").id == "fixed"
    assert create_default_block("text").id == "b2"


def test_default_ids_unique():
    reset_id_generator()
    ids = {generate_block_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("block_") for i in ids)


def test_clone_block(counter_ids):
    original = create_default_block("text")
    copy = clone_block(original, position=5)
    assert copy.id != original.id
    assert copy.position == 5
    assert copy.content.text == original.content.text


# ── Noms + hints IA ───────────────────────────────────────────────────────

def test_display_name(counter_ids):
    assert get_block_display_name(create_layout_block("hero-center")) == "Hero Center"
    assert get_block_display_name(create_default_block("social-links")) == BLOCK_DEFINITIONS["social-links"].name


@pytest.mark.parametrize("campaign_type,expected_first", [
    ("Product launch", "logo"),
    ("weekly newsletter", "logo"),
    ("Black Friday sale", "logo"),
])
def test_ai_recommendations_keywords(campaign_type, expected_first):
    assert get_ai_block_recommendations(campaign_type)[0] == expected_first


def test_ai_recommendations_default():
    assert get_ai_block_recommendations("random") == ["logo", "text", "button", "footer"]
    assert "divider" in get_ai_block_recommendations("Newsletter")


def test_blocks_for_use_case_returns_definitions():
    defs = get_blocks_for_use_case("promo")
    assert [d.type for d in defs] == ["logo", "text", "button", "spacer"]
