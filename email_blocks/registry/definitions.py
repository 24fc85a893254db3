"""
Définitions des blocs — métadonnées éditeur + indices d'usage pour l'IA.

Lecture seule : construit une fois au chargement, jamais muté.
"""
from typing import Dict, List

from ..core.primitives import EmailModel
from .categories import BlockCategory


class BlockDefinition(EmailModel):
    type: str
    name: str
    description: str
    category: BlockCategory
    icon: str
    ai_hints: List[str]
    preview_description: str


def _define(type_, name, description, category, icon, hints, preview) -> BlockDefinition:
    return BlockDefinition(
        type=type_, name=name, description=description, category=category,
        icon=icon, ai_hints=hints, preview_description=preview,
    )


BLOCK_DEFINITIONS: Dict[str, BlockDefinition] = {
    "logo": _define(
        "logo", "Logo", "Brand logo with link", "media", "🎨",
        ["Start of email", "Brand identity needed", "Professional header"],
        "Logo image centered at top",
    ),
    "spacer": _define(
        "spacer", "Spacer", "Vertical spacing", "structure", "⬜",
        ["Add breathing room", "Separate sections", "Control vertical rhythm"],
        "Empty vertical space",
    ),
    "text": _define(
        "text", "Text", "Text content (body or headings)", "content", "📄",
        ["Body copy", "Headings and titles", "Explanations", "Section titles", "Detailed information"],
        "Text paragraph or heading",
    ),
    "image": _define(
        "image", "Image", "Single image or grid (1-9 images, 1-3 columns)", "media", "🖼️",
        ["Product photos", "Visual content", "Screenshots", "Single images or grids (up to 3×3)",
         "Product galleries", "Photo grids"],
        "Image or image grid",
    ),
    "button": _define(
        "button", "Button", "Call-to-action button", "cta", "🔘",
        ["Primary CTA", "Secondary actions", "Conversion goals"],
        "Centered CTA button",
    ),
    "divider": _define(
        "divider", "Divider", "Horizontal line or decorative element", "structure", "➖",
        ["Separate sections", "Visual break", "Content organization"],
        "Horizontal divider line",
    ),
    "social-links": _define(
        "social-links", "Social Links", "Social media icons", "social", "🔗",
        ["Footer social links", "Connect on social media", "Follow us section"],
        "Row of social icons",
    ),
    "layouts": _define(
        "layouts", "Layouts", "Complex multi-element layouts", "layout", "📐",
        ["Hero sections", "Multi-column layouts", "Stats displays", "Feature showcases",
         "Complex compositions"],
        "Advanced layout with multiple elements",
    ),
    "footer": _define(
        "footer", "Footer", "Email footer with unsubscribe", "structure", "📧",
        ["End of email", "Legal requirements", "Contact information"],
        "Footer with company info and unsubscribe",
    ),
    "link-bar": _define(
        "link-bar", "Link Bar", "Horizontal or vertical navigation links", "structure", "🔗",
        ["Navigation", "Quick links", "Menu bar"],
        "Navigation link bar",
    ),
    "address": _define(
        "address", "Address", "Physical address display", "structure", "📍",
        ["Company address", "Contact information", "CAN-SPAM compliance"],
        "Physical address block",
    ),
    "container": _define(
        "container", "Container", "Groups child blocks in a stack or grid", "layout", "🗂️",
        ["Group related blocks", "Side-by-side blocks", "Boxed section"],
        "Box holding nested blocks",
    ),
}

BLOCK_DISPLAY_NAMES: Dict[str, str] = {t: d.name for t, d in BLOCK_DEFINITIONS.items()}
BLOCK_DISPLAY_NAMES["layouts"] = "Layout"


def get_all_block_definitions() -> List[BlockDefinition]:
    return list(BLOCK_DEFINITIONS.values())


def get_block_definition(block_type: str) -> BlockDefinition:
    """Lève KeyError si le type est inconnu."""
    return BLOCK_DEFINITIONS[block_type]


def get_blocks_by_category(category: str) -> List[BlockDefinition]:
    return [d for d in BLOCK_DEFINITIONS.values() if d.category == category]


def search_blocks(query: str) -> List[BlockDefinition]:
    """Recherche insensible à la casse dans le nom, la description et les hints."""
    q = (query or "").strip().lower()
    if not q:
        return get_all_block_definitions()
    return [
        d for d in BLOCK_DEFINITIONS.values()
        if q in d.name.lower()
        or q in d.description.lower()
        or any(q in hint.lower() for hint in d.ai_hints)
    ]
