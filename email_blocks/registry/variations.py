"""
Variantes de layout — métadonnées (nom, catégorie, icône, hints IA).

Chaque variante de LAYOUT_VARIATIONS a exactement une définition.
"""
from typing import Dict, List, Literal, Optional

from ..core.primitives import EmailModel

LayoutVariationCategory = Literal[
    "content", "two-column", "three-column", "four-plus-column", "image", "advanced", "interactive",
]


class LayoutVariationDefinition(EmailModel):
    variation: str
    name: str
    description: str
    category: LayoutVariationCategory
    icon: str
    ai_hints: List[str]


# variation, nom, description, catégorie, icône, hints
_TABLE = [
    # Contenu
    ("hero-center", "Hero Center", "Centered hero with headline and subheadline", "content", "⭐",
     ["email opening", "major announcement", "centered headline"]),
    ("hero-image-overlay", "Hero Image Overlay", "Full-width image with text overlay", "content", "🎭",
     ["dramatic opening", "visual-first", "background image"]),
    ("stats-2-col", "Stats (2 Columns)", "2 impressive statistics side-by-side", "content", "📊",
     ["two metrics", "comparison stats", "key numbers"]),
    ("stats-3-col", "Stats (3 Columns)", "3 impressive statistics in a row", "content", "📊",
     ["key metrics", "three numbers", "achievements"]),
    ("stats-4-col", "Stats (4 Columns)", "4 impressive statistics in a row", "content", "📊",
     ["multiple metrics", "four numbers", "comprehensive stats"]),
    ("testimonial-centered", "Testimonial Centered", "Centered customer quote with avatar", "content", "💬",
     ["social proof", "customer quote", "review"]),
    ("testimonial-with-image", "Testimonial With Image", "Customer quote beside a photo", "content", "💬",
     ["social proof", "customer photo", "case study"]),
    ("testimonial-card", "Testimonial Card", "Quote inside a bordered card", "content", "💬",
     ["social proof", "highlighted review", "card"]),
    # Deux colonnes
    ("two-column-50-50", "Two Columns (50/50)", "Two equal-width columns", "two-column", "📐",
     ["equal columns", "side by side", "balanced layout"]),
    ("two-column-60-40", "Two Columns (60/40)", "Two columns with 60/40 split", "two-column", "📐",
     ["asymmetric columns", "wider left", "image and text"]),
    ("two-column-40-60", "Two Columns (40/60)", "Two columns with 40/60 split", "two-column", "📐",
     ["asymmetric columns", "wider right", "text and image"]),
    ("two-column-70-30", "Two Columns (70/30)", "Two columns with 70/30 split", "two-column", "📐",
     ["dominant left column", "sidebar layout"]),
    ("two-column-30-70", "Two Columns (30/70)", "Two columns with 30/70 split", "two-column", "📐",
     ["dominant right column", "sidebar layout"]),
    ("two-column-text", "Two Column Text", "Two columns of text only", "two-column", "📐",
     ["text columns", "no images", "magazine style"]),
    # Trois colonnes
    ("three-column-equal", "Three Columns", "Three equal-width columns", "three-column", "▥",
     ["three features", "product trio", "equal columns"]),
    ("three-column-wide-center", "Three Columns (Wide Center)", "Three columns with a wider middle", "three-column", "▥",
     ["featured middle", "pricing highlight"]),
    ("three-column-wide-outer", "Three Columns (Wide Outer)", "Three columns with wider sides", "three-column", "▥",
     ["narrow separator", "before and after"]),
    # Quatre colonnes et plus
    ("four-column-equal", "Four Columns", "Four equal-width columns", "four-plus-column", "▦",
     ["icon row", "four features", "category links"]),
    ("five-column-equal", "Five Columns", "Five equal-width columns", "four-plus-column", "▦",
     ["icon strip", "logo wall"]),
    # Images
    ("image-overlay", "Image Overlay", "Full-width background image with text overlay", "image", "🎨",
     ["dramatic hero", "full-width image", "text overlay"]),
    ("image-overlay-center", "Image Overlay (Center)", "Background image with centered text", "image", "🎨",
     ["centered overlay", "announcement"]),
    ("image-overlay-top-left", "Image Overlay (Top Left)", "Background image with text at top left", "image", "🎨",
     ["editorial overlay", "corner text"]),
    ("image-overlay-top-right", "Image Overlay (Top Right)", "Background image with text at top right", "image", "🎨",
     ["editorial overlay", "corner text"]),
    ("image-overlay-bottom-left", "Image Overlay (Bottom Left)", "Background image with text at bottom left", "image", "🎨",
     ["caption overlay", "corner text"]),
    ("image-overlay-bottom-right", "Image Overlay (Bottom Right)", "Background image with text at bottom right", "image", "🎨",
     ["caption overlay", "corner text"]),
    ("image-overlay-center-bottom", "Image Overlay (Center Bottom)", "Background image with text at bottom center", "image", "🎨",
     ["caption overlay", "product reveal"]),
    ("image-collage-featured-left", "Image Collage (Featured Left)", "Large image left with smaller images right", "image", "🖼️",
     ["photo collage", "gallery", "featured product"]),
    ("image-collage-featured-right", "Image Collage (Featured Right)", "Large image right with smaller images left", "image", "🖼️",
     ["photo collage", "gallery"]),
    ("image-collage-featured-center", "Image Collage (Featured Center)", "Large central image framed by smaller ones", "image", "🖼️",
     ["photo collage", "hero gallery"]),
    # Avancés
    ("zigzag-2-rows", "Zigzag (2 Rows)", "Alternating image and text rows", "advanced", "🔀",
     ["feature walkthrough", "alternating rows"]),
    ("zigzag-3-rows", "Zigzag (3 Rows)", "Three alternating image and text rows", "advanced", "🔀",
     ["feature walkthrough", "step by step"]),
    ("zigzag-4-rows", "Zigzag (4 Rows)", "Four alternating image and text rows", "advanced", "🔀",
     ["long feature tour"]),
    ("split-background", "Split Background", "Two-tone background behind content", "advanced", "🌓",
     ["contrast section", "promo band"]),
    ("product-card-image-top", "Product Card (Image Top)", "Product card with image above details", "advanced", "🛍️",
     ["product spotlight", "e-commerce"]),
    ("product-card-image-left", "Product Card (Image Left)", "Product card with image beside details", "advanced", "🛍️",
     ["product spotlight", "catalog item"]),
    ("badge-overlay-corner", "Badge Overlay (Corner)", "Image with a corner badge", "advanced", "🏷️",
     ["sale badge", "new arrival"]),
    ("badge-overlay-center", "Badge Overlay (Center)", "Image with a centered badge", "advanced", "🏷️",
     ["sale badge", "limited offer"]),
    ("feature-grid-2-items", "Feature Grid (2 Items)", "Two features with icons", "advanced", "✨",
     ["key benefits", "two features"]),
    ("feature-grid-3-items", "Feature Grid (3 Items)", "Three features with icons", "advanced", "✨",
     ["key benefits", "three features"]),
    ("feature-grid-4-items", "Feature Grid (4 Items)", "Four features in a 2×2 grid", "advanced", "✨",
     ["feature overview", "four benefits"]),
    ("feature-grid-6-items", "Feature Grid (6 Items)", "Six features in a 3×2 grid", "advanced", "✨",
     ["full feature list", "capabilities"]),
    ("comparison-table-2-col", "Comparison (2 Columns)", "Before and after comparison", "advanced", "⚖️",
     ["before and after", "old vs new"]),
    ("comparison-table-3-col", "Comparison (3 Columns)", "Three-way comparison table", "advanced", "⚖️",
     ["plan comparison", "competitor comparison"]),
    ("card-centered", "Card Centered", "Centered card with large number and text", "advanced", "🃏",
     ["featured card", "centered content", "number highlight"]),
    ("compact-image-text", "Compact Image Text", "Small image with text beside it", "advanced", "📸",
     ["thumbnail", "recipe preview", "compact layout"]),
    ("magazine-feature", "Magazine Feature", "Magazine-style feature with large image", "advanced", "📰",
     ["editorial", "magazine style", "feature article"]),
    # Interactifs
    ("carousel-2-slides", "Carousel (2 Slides)", "Two-slide image carousel", "interactive", "🎠",
     ["product showcase", "slides"]),
    ("carousel-3-5-slides", "Carousel (3-5 Slides)", "Image carousel with 3 to 5 slides", "interactive", "🎠",
     ["gallery", "slides"]),
    ("carousel-6-10-slides", "Carousel (6-10 Slides)", "Image carousel with 6 to 10 slides", "interactive", "🎠",
     ["large gallery", "catalog"]),
    ("tabs-2-tabs", "Tabs (2)", "Two tabbed panels", "interactive", "🗂️",
     ["toggle content", "two options"]),
    ("tabs-3-5-tabs", "Tabs (3-5)", "Three to five tabbed panels", "interactive", "🗂️",
     ["categorised content"]),
    ("tabs-6-8-tabs", "Tabs (6-8)", "Six to eight tabbed panels", "interactive", "🗂️",
     ["many categories"]),
    ("accordion-2-items", "Accordion (2 Items)", "Two collapsible items", "interactive", "🪗",
     ["faq", "details"]),
    ("accordion-3-5-items", "Accordion (3-5 Items)", "Three to five collapsible items", "interactive", "🪗",
     ["faq", "details"]),
    ("accordion-6-10-items", "Accordion (6-10 Items)", "Six to ten collapsible items", "interactive", "🪗",
     ["long faq"]),
    ("masonry-2-col", "Masonry (2 Columns)", "Two-column masonry grid", "interactive", "🧱",
     ["pinterest style", "mixed heights"]),
    ("masonry-3-col", "Masonry (3 Columns)", "Three-column masonry grid", "interactive", "🧱",
     ["pinterest style", "gallery"]),
    ("masonry-4-col", "Masonry (4 Columns)", "Four-column masonry grid", "interactive", "🧱",
     ["dense gallery"]),
    ("masonry-5-col", "Masonry (5 Columns)", "Five-column masonry grid", "interactive", "🧱",
     ["dense gallery"]),
    ("container-stack", "Container (Stack)", "Vertical stack of nested content", "interactive", "📦",
     ["grouped content"]),
    ("container-grid", "Container (Grid)", "Grid of nested content", "interactive", "📦",
     ["grouped cards"]),
    ("container-flex", "Container (Flex)", "Flexible row of nested content", "interactive", "📦",
     ["inline group"]),
]

LAYOUT_VARIATION_DEFINITIONS: Dict[str, LayoutVariationDefinition] = {
    row[0]: LayoutVariationDefinition(
        variation=row[0], name=row[1], description=row[2],
        category=row[3], icon=row[4], ai_hints=row[5],
    )
    for row in _TABLE
}


def get_layout_variation_definition(variation: str) -> Optional[LayoutVariationDefinition]:
    return LAYOUT_VARIATION_DEFINITIONS.get(variation)


def get_layout_variations_by_category(category: str) -> List[LayoutVariationDefinition]:
    return [d for d in LAYOUT_VARIATION_DEFINITIONS.values() if d.category == category]


def get_layout_variation_display_name(variation: str) -> str:
    """"two-column-60-40" → "Two Column 60 40"."""
    return " ".join(part.capitalize() for part in variation.split("-"))
