"""
Modèle « sections » historique — contenu généré avant l'éditeur par blocs.

EmailContent → headline + sections + CTA + footer
"""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.primitives import EmailModel

SectionType = Literal[
    "heading", "text", "list", "divider", "spacer",
    "hero", "feature-grid", "testimonial", "stats", "comparison", "cta-block",
]

SECTION_TYPES: tuple = (
    "heading", "text", "list", "divider", "spacer",
    "hero", "feature-grid", "testimonial", "stats", "comparison", "cta-block",
)


class SectionFeature(EmailModel):
    icon: Optional[str] = None
    title: str = ""
    description: str = ""


class SectionTestimonial(EmailModel):
    quote: str
    author: str
    role: Optional[str] = None
    avatar: Optional[str] = None


class SectionStat(EmailModel):
    value: str
    label: str


class SectionComparison(EmailModel):
    before: str
    after: str


class ContentSection(EmailModel):
    type: SectionType
    content: Optional[str] = None
    items: Optional[List[str]] = None
    size: Optional[Literal["small", "medium", "large"]] = None
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    features: Optional[List[SectionFeature]] = None
    testimonial: Optional[SectionTestimonial] = None
    stats: Optional[List[SectionStat]] = None
    comparison: Optional[SectionComparison] = None
    cta_text: Optional[str] = None
    cta_url: Optional[str] = None


class ContentCTA(EmailModel):
    text: str
    url: str
    secondary: Optional[dict] = None


class ContentFooter(EmailModel):
    company_name: str
    company_address: Optional[str] = None
    social_links: Optional[List[dict]] = None
    custom_text: Optional[str] = None


class EmailContent(EmailModel):
    preheader: Optional[str] = None
    headline: str = ""
    subheadline: Optional[str] = None
    sections: List[ContentSection] = Field(default_factory=list)
    cta: Optional[ContentCTA] = None
    footer: Optional[ContentFooter] = None
