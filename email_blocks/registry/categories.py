"""Catégories de blocs (palette de l'éditeur)."""
from typing import List, Literal

from ..core.primitives import EmailModel

BlockCategory = Literal["structure", "content", "media", "cta", "social", "layout"]


class BlockCategoryInfo(EmailModel):
    id: BlockCategory
    name: str
    description: str


BLOCK_CATEGORIES: List[BlockCategoryInfo] = [
    BlockCategoryInfo(id="structure", name="Structure",       description="Layout and spacing elements"),
    BlockCategoryInfo(id="content",   name="Content",         description="Text and headings"),
    BlockCategoryInfo(id="media",     name="Media",           description="Images and logos"),
    BlockCategoryInfo(id="cta",       name="Call to Action",  description="Buttons and conversion elements"),
    BlockCategoryInfo(id="social",    name="Social & Proof",  description="Social links and testimonials"),
    BlockCategoryInfo(id="layout",    name="Advanced Layout", description="Complex multi-element blocks"),
]
