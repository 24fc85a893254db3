"""
Recommandations IA — blocs suggérés selon le type de campagne.
"""
from typing import List

from .definitions import BLOCK_DEFINITIONS, BlockDefinition

_RECOMMENDATIONS = [
    (("launch", "announcement"),          ["logo", "text", "image", "button"]),
    (("newsletter", "update"),            ["logo", "text", "divider", "image", "button"]),
    (("promo", "sale", "discount"),       ["logo", "text", "button", "spacer"]),
    (("welcome", "onboard"),              ["logo", "text", "image", "button"]),
    (("testimonial", "proof"),            ["logo", "text", "button"]),
]

_DEFAULT_RECOMMENDATION = ["logo", "text", "button", "footer"]


def get_ai_block_recommendations(campaign_type: str) -> List[str]:
    """Types de blocs recommandés (mots-clés cherchés dans le type de campagne)."""
    kind = (campaign_type or "").lower()
    for keywords, block_types in _RECOMMENDATIONS:
        if any(k in kind for k in keywords):
            return list(block_types)
    return list(_DEFAULT_RECOMMENDATION)


def get_blocks_for_use_case(use_case: str) -> List[BlockDefinition]:
    return [BLOCK_DEFINITIONS[t] for t in get_ai_block_recommendations(use_case)]
