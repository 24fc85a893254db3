"""
Registry — catalogue des blocs et variantes, valeurs par défaut, factories.
"""
from .categories import BLOCK_CATEGORIES, BlockCategory, BlockCategoryInfo
from .definitions import (
    BLOCK_DEFINITIONS,
    BLOCK_DISPLAY_NAMES,
    BlockDefinition,
    get_all_block_definitions,
    get_block_definition,
    get_blocks_by_category,
    search_blocks,
)
from .variations import (
    LAYOUT_VARIATION_DEFINITIONS,
    LayoutVariationCategory,
    LayoutVariationDefinition,
    get_layout_variation_definition,
    get_layout_variation_display_name,
    get_layout_variations_by_category,
)
from .defaults import get_default_block_content, get_default_block_settings
from .factory import (
    clone_block,
    create_address_block,
    create_default_block,
    create_layout_block,
    create_link_bar_block,
    generate_block_id,
    reset_id_generator,
    set_id_generator,
)
from .hints import get_ai_block_recommendations, get_blocks_for_use_case


def get_block_display_name(block) -> str:
    """Nom affiché d'un bloc : nom de la variante pour un layout, sinon nom du type."""
    if block.type == "layouts" and block.layout_variation:
        return get_layout_variation_display_name(block.layout_variation)
    return BLOCK_DISPLAY_NAMES.get(block.type, block.type)


__all__ = [
    "BLOCK_CATEGORIES", "BlockCategory", "BlockCategoryInfo",
    "BLOCK_DEFINITIONS", "BLOCK_DISPLAY_NAMES", "BlockDefinition",
    "get_all_block_definitions", "get_block_definition", "get_blocks_by_category", "search_blocks",
    "LAYOUT_VARIATION_DEFINITIONS", "LayoutVariationCategory", "LayoutVariationDefinition",
    "get_layout_variation_definition", "get_layout_variation_display_name",
    "get_layout_variations_by_category",
    "get_default_block_content", "get_default_block_settings",
    "clone_block", "create_address_block", "create_default_block", "create_layout_block",
    "create_link_bar_block", "generate_block_id", "reset_id_generator", "set_id_generator",
    "get_ai_block_recommendations", "get_blocks_for_use_case",
    "get_block_display_name",
]
