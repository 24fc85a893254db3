"""
Bloc Layouts — compositions complexes sous un type générique.

La variante (`layoutVariation`) est obligatoire et choisie dans un ensemble fermé ;
elle sélectionne le compositeur au rendu. Settings/content sont larges : chaque
famille n'en lit qu'une partie.
"""
from typing import List, Literal, Optional, get_args

from pydantic import Field

from ..core.primitives import (
    Alignment, BackgroundColor, EmailModel, HexColor, Padding, PixelValue, UrlOrMergeTag,
)
from .base import BaseBlock, BlockSettings, BlockContent

LayoutVariation = Literal[
    # Contenu
    "hero-center",
    "hero-image-overlay",
    "stats-2-col",
    "stats-3-col",
    "stats-4-col",
    "testimonial-centered",
    "testimonial-with-image",
    "testimonial-card",
    # Deux colonnes
    "two-column-50-50",
    "two-column-60-40",
    "two-column-40-60",
    "two-column-70-30",
    "two-column-30-70",
    # Trois colonnes
    "three-column-equal",
    "three-column-wide-center",
    "three-column-wide-outer",
    # Quatre colonnes et plus
    "four-column-equal",
    "five-column-equal",
    # Images
    "image-overlay",
    "image-overlay-center",
    "image-overlay-top-left",
    "image-overlay-top-right",
    "image-overlay-bottom-left",
    "image-overlay-bottom-right",
    "image-overlay-center-bottom",
    "image-collage-featured-left",
    "image-collage-featured-right",
    "image-collage-featured-center",
    # Avancés
    "zigzag-2-rows",
    "zigzag-3-rows",
    "zigzag-4-rows",
    "split-background",
    "product-card-image-top",
    "product-card-image-left",
    "badge-overlay-corner",
    "badge-overlay-center",
    "feature-grid-2-items",
    "feature-grid-3-items",
    "feature-grid-4-items",
    "feature-grid-6-items",
    "comparison-table-2-col",
    "comparison-table-3-col",
    "card-centered",
    "compact-image-text",
    "two-column-text",
    "magazine-feature",
    # Interactifs
    "carousel-2-slides",
    "carousel-3-5-slides",
    "carousel-6-10-slides",
    "tabs-2-tabs",
    "tabs-3-5-tabs",
    "tabs-6-8-tabs",
    "accordion-2-items",
    "accordion-3-5-items",
    "accordion-6-10-items",
    "masonry-2-col",
    "masonry-3-col",
    "masonry-4-col",
    "masonry-5-col",
    "container-stack",
    "container-grid",
    "container-flex",
]

LAYOUT_VARIATIONS: tuple = get_args(LayoutVariation)


class LayoutSettings(BlockSettings):
    padding: Optional[Padding] = None
    background_color: Optional[BackgroundColor] = None
    align: Optional[Alignment] = None
    show_header: Optional[bool] = None
    show_title: Optional[bool] = None
    show_divider: Optional[bool] = None
    show_paragraph: Optional[bool] = None
    show_button: Optional[bool] = None
    show_image: Optional[bool] = None
    header_color: Optional[HexColor] = None
    header_font_size: Optional[PixelValue] = None
    title_color: Optional[HexColor] = None
    title_font_size: Optional[PixelValue] = None
    paragraph_color: Optional[HexColor] = None
    paragraph_font_size: Optional[PixelValue] = None
    divider_color: Optional[HexColor] = None
    divider_width: Optional[PixelValue] = None
    divider_thickness: Optional[PixelValue] = None
    button_background_color: Optional[HexColor] = None
    button_text_color: Optional[HexColor] = None
    button_border_radius: Optional[PixelValue] = None
    button_font_size: Optional[PixelValue] = None
    border_radius: Optional[PixelValue] = None
    flip: Optional[bool] = None
    vertical_align: Optional[Literal["top", "middle", "bottom"]] = None


class LayoutButton(EmailModel):
    text: Optional[str] = Field(default=None, max_length=100)
    url: Optional[UrlOrMergeTag] = None


class LayoutImage(EmailModel):
    url: Optional[UrlOrMergeTag] = None
    alt_text: Optional[str] = Field(default=None, max_length=200)


class LayoutItem(EmailModel):
    """Élément de grille (stats, colonnes de comparaison)."""
    value: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class LayoutColumn(EmailModel):
    title: Optional[str] = None
    paragraph: Optional[str] = None
    image: Optional[LayoutImage] = None


class LayoutFeature(EmailModel):
    icon: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class ComparisonSide(EmailModel):
    label: Optional[str] = None
    text: Optional[str] = None


class LayoutContent(BlockContent):
    header: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    paragraph: Optional[str] = None
    badge: Optional[str] = None
    divider: Optional[bool] = None
    button: Optional[LayoutButton] = None
    image: Optional[LayoutImage] = None
    items: List[LayoutItem] = Field(default_factory=list, max_length=20)
    left_column: Optional[str] = None
    right_column: Optional[str] = None
    columns: List[LayoutColumn] = Field(default_factory=list, max_length=20)
    features: List[LayoutFeature] = Field(default_factory=list, max_length=20)
    quote: Optional[str] = None
    author: Optional[str] = None
    role: Optional[str] = None
    company: Optional[str] = None
    avatar_url: Optional[UrlOrMergeTag] = None
    before: Optional[ComparisonSide] = None
    after: Optional[ComparisonSide] = None


class LayoutsBlock(BaseBlock):
    type: Literal["layouts"] = "layouts"
    layout_variation: LayoutVariation
    settings: LayoutSettings = LayoutSettings()
    content: LayoutContent = LayoutContent()
