"""
Moteur de variantes de layout — table variante → compositeur, construite à l'import.

Toute variante de l'ensemble fermé a une entrée ; celles sans compositeur
dédié passent par `render_generic_layout`.
"""
import logging
from typing import Callable, Dict

from ...blocks import LAYOUT_VARIATIONS, LayoutsBlock
from ..base import RenderContext
from .advanced import (
    render_card_centered_layout, render_compact_image_text_layout, render_image_overlay_layout,
    render_magazine_feature_layout,
)
from .content import render_comparison_layout, render_feature_grid_layout, render_testimonial_layout
from .core import (
    render_generic_layout, render_hero_layout, render_multi_column_layout, render_stats_layout,
    render_two_column_layout, render_two_column_text_layout,
)
from .helpers import ColumnWidths, calculate_column_widths, calculate_multi_column_width

log = logging.getLogger(__name__)

LayoutRenderer = Callable[[LayoutsBlock, RenderContext], str]


def _composer_for(variation: str) -> LayoutRenderer:
    if variation in ("hero-center",):
        return render_hero_layout
    if variation == "two-column-text":
        return render_two_column_text_layout
    if variation.startswith("two-column-"):
        return render_two_column_layout
    if variation.startswith("stats-"):
        return render_stats_layout
    if variation in ("three-column-equal", "three-column-wide-center", "three-column-wide-outer",
                     "four-column-equal", "five-column-equal"):
        return render_multi_column_layout
    if variation.startswith("image-overlay") or variation == "hero-image-overlay":
        return render_image_overlay_layout
    if variation == "card-centered":
        return render_card_centered_layout
    if variation == "compact-image-text":
        return render_compact_image_text_layout
    if variation == "magazine-feature":
        return render_magazine_feature_layout
    if variation.startswith("testimonial-"):
        return render_testimonial_layout
    if variation.startswith("feature-grid-"):
        return render_feature_grid_layout
    if variation.startswith("comparison-table-"):
        return render_comparison_layout
    return render_generic_layout


LAYOUT_RENDERERS: Dict[str, LayoutRenderer] = {v: _composer_for(v) for v in LAYOUT_VARIATIONS}


def render_layout_block(b: LayoutsBlock, ctx: RenderContext) -> str:
    renderer = LAYOUT_RENDERERS.get(b.layout_variation, render_generic_layout)
    log.debug("layout %s → %s", b.layout_variation, renderer.__name__)
    return renderer(b, ctx)


__all__ = [
    "LAYOUT_RENDERERS", "render_layout_block", "render_generic_layout",
    "ColumnWidths", "calculate_column_widths", "calculate_multi_column_width",
]
