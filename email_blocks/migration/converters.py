"""
Migration sections ↔ blocs.

section_to_block   ContentSection → bloc (None si type inconnu)
block_to_section   bloc → ContentSection (repli : section texte "[type block]")
content_to_blocks  EmailContent → liste de blocs (hero, sections, CTA, footer)
blocks_to_content  liste de blocs → EmailContent

Les sections riches (hero, stats, témoignage…) deviennent des blocs "layouts"
dont la variante conserve la famille d'origine pour le chemin retour.
"""
import logging
from typing import Any, Iterable, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..blocks import EmailBlock
from ..core.primitives import UrlOrMergeTag
from ..registry.defaults import get_default_block_settings
from ..registry.factory import IdGenerator, generate_block_id
from .sections import (
    SECTION_TYPES,
    ContentCTA,
    ContentFooter,
    ContentSection,
    EmailContent,
    SectionComparison,
    SectionFeature,
    SectionStat,
    SectionTestimonial,
)

log = logging.getLogger(__name__)

_BLOCK_ADAPTER = TypeAdapter(EmailBlock)
_URL_ADAPTER = TypeAdapter(UrlOrMergeTag)

BULLET = "• "
SPACER_SIZES = {"small": 16, "medium": 32, "large": 48}


class MigrationError(ValueError):
    """Section historique incomplète (données obligatoires manquantes)."""


def _make_block(block_type: str, position: int, settings: dict, content: dict,
                id_generator: Optional[IdGenerator], variation: Optional[str] = None):
    data = {
        "id": generate_block_id(id_generator),
        "type": block_type,
        "position": position,
        "settings": settings,
        "content": content,
    }
    if variation:
        data["layoutVariation"] = variation
    return _BLOCK_ADAPTER.validate_python(data)


def _safe_url(url: Optional[str], fallback: str = "{{cta_url}}") -> str:
    """URL historique inutilisable ("#", relative…) → merge tag de repli."""
    if not url:
        return fallback
    try:
        return _URL_ADAPTER.validate_python(url)
    except ValidationError:
        log.warning("URL historique invalide %r remplacée par %s", url, fallback)
        return fallback


def _layout(variation: str, position: int, content: dict, id_generator, **settings):
    base = get_default_block_settings("layouts", variation)
    base.update(settings)
    return _make_block("layouts", position, base, content, id_generator, variation)


# ── Section → bloc ──────────────────────────────────────────────────────────

def _heading_block(section: ContentSection, position: int, id_generator):
    settings = {
        "fontSize": "32px",
        "fontWeight": 700,
        "color": "#111827",
        "align": "left",
        "padding": {"top": 32, "right": 20, "bottom": 16, "left": 20},
        "lineHeight": "1.3",
        "tag": "h2",
    }
    return _make_block("text", position, settings, {"text": section.content}, id_generator)


def _text_block(section: ContentSection, position: int, id_generator):
    text = section.content or ""
    if section.type == "list" and section.items:
        text = "\n".join(f"{BULLET}{item}" for item in section.items)
    settings = {
        "fontSize": "16px",
        "fontWeight": 400,
        "color": "#374151",
        "align": "left",
        "padding": {"top": 0, "right": 20, "bottom": 20, "left": 20},
        "lineHeight": "1.6",
    }
    return _make_block("text", position, settings, {"text": text}, id_generator)


def _cta_block(section: ContentSection, position: int, id_generator):
    settings = get_default_block_settings("button")
    settings["containerPadding"] = {"top": 32, "right": 20, "bottom": 32, "left": 20}
    content = {
        "text": section.cta_text or "Click Here",
        "url": _safe_url(section.cta_url),
    }
    return _make_block("button", position, settings, content, id_generator)


def _divider_block(section: ContentSection, position: int, id_generator):
    return _make_block("divider", position, get_default_block_settings("divider"), {}, id_generator)


def _spacer_block(section: ContentSection, position: int, id_generator):
    height = SPACER_SIZES.get(section.size or "medium", 32)
    return _make_block("spacer", position, {"height": height}, {}, id_generator)


def _hero_block(section: ContentSection, position: int, id_generator):
    content = {"title": section.headline or "", "paragraph": section.subheadline}
    return _layout("hero-center", position, content, id_generator, showHeader=False)


def _feature_grid_block(section: ContentSection, position: int, id_generator):
    features = [f.model_dump(by_alias=True) for f in (section.features or [])]
    n = len(features)
    count = 2 if n == 2 else 4 if n == 4 else 6 if n >= 5 else 3
    return _layout(f"feature-grid-{count}-items", position, {"features": features}, id_generator)


def _testimonial_block(section: ContentSection, position: int, id_generator):
    t = section.testimonial
    if t is None:
        raise MigrationError("Section testimonial sans données de témoignage")
    content = {"quote": t.quote, "author": t.author, "role": t.role,
               "avatarUrl": _safe_url(t.avatar, fallback="") if t.avatar else None}
    return _layout("testimonial-centered", position, content, id_generator)


def _stats_block(section: ContentSection, position: int, id_generator):
    items = [{"value": s.value, "title": s.label} for s in (section.stats or [])]
    n = len(items)
    count = 2 if n == 2 else 4 if n == 4 else 3
    return _layout(f"stats-{count}-col", position, {"items": items}, id_generator)


def _comparison_block(section: ContentSection, position: int, id_generator):
    c = section.comparison
    if c is None:
        raise MigrationError("Section comparison sans données de comparaison")
    content = {
        "before": {"label": "Before", "text": c.before},
        "after": {"label": "After", "text": c.after},
    }
    return _layout("comparison-table-2-col", position, content, id_generator)


_SECTION_CONVERTERS = {
    "heading":      _heading_block,
    "text":         _text_block,
    "list":         _text_block,
    "divider":      _divider_block,
    "spacer":       _spacer_block,
    "hero":         _hero_block,
    "feature-grid": _feature_grid_block,
    "testimonial":  _testimonial_block,
    "stats":        _stats_block,
    "comparison":   _comparison_block,
    "cta-block":    _cta_block,
}


def section_to_block(
    section: Union[ContentSection, dict],
    position: int = 0,
    id_generator: Optional[IdGenerator] = None,
):
    """
    Convertit une section historique en bloc.

    Returns:
        Bloc validé, ou None si le type de section est inconnu (journalisé).

    Raises:
        MigrationError: section testimonial/comparison sans ses données.
    """
    if isinstance(section, dict):
        section_type = section.get("type")
        if section_type not in SECTION_TYPES:
            log.warning("Type de section inconnu ignoré : %r", section_type)
            return None
        section = ContentSection.model_validate(section)

    if section.type in ("heading", "text") and not section.content:
        log.warning("Section %s vide ignorée (position %d)", section.type, position)
        return None
    if section.type == "list" and not section.items and not section.content:
        log.warning("Section list vide ignorée (position %d)", position)
        return None

    return _SECTION_CONVERTERS[section.type](section, position, id_generator)


# ── Bloc → section ──────────────────────────────────────────────────────────

def _text_to_section(block) -> ContentSection:
    text = block.content.text
    if block.settings.tag in ("h1", "h2", "h3"):
        return ContentSection(type="heading", content=text)
    lines = text.split("\n")
    if all(line.startswith(BULLET) for line in lines):
        return ContentSection(type="list", items=[line[len(BULLET):] for line in lines])
    return ContentSection(type="text", content=text)


def _spacer_size(height: int) -> str:
    if height <= 20:
        return "small"
    if height >= 48:
        return "large"
    return "medium"


def _layout_to_section(block) -> Optional[ContentSection]:
    v, c = block.layout_variation, block.content
    if v.startswith("hero-"):
        return ContentSection(type="hero", headline=c.title or "", subheadline=c.paragraph)
    if v.startswith("feature-grid-"):
        features = [
            SectionFeature(icon=f.icon, title=f.title or "", description=f.description or "")
            for f in c.features
        ]
        return ContentSection(type="feature-grid", features=features)
    if v.startswith("testimonial-"):
        testimonial = SectionTestimonial(
            quote=c.quote or "", author=c.author or "", role=c.role, avatar=c.avatar_url,
        )
        return ContentSection(type="testimonial", testimonial=testimonial)
    if v.startswith("stats-"):
        stats = [SectionStat(value=i.value or "", label=i.title or "") for i in c.items]
        return ContentSection(type="stats", stats=stats)
    if v.startswith("comparison-table-"):
        comparison = SectionComparison(
            before=(c.before.text if c.before else None) or "",
            after=(c.after.text if c.after else None) or "",
        )
        return ContentSection(type="comparison", comparison=comparison)
    return None


def block_to_section(block) -> ContentSection:
    """Convertit un bloc en section historique ; repli : section texte "[type block]"."""
    if block.type == "text":
        return _text_to_section(block)
    if block.type == "button":
        return ContentSection(type="cta-block", cta_text=block.content.text, cta_url=block.content.url)
    if block.type == "divider":
        return ContentSection(type="divider")
    if block.type == "spacer":
        return ContentSection(type="spacer", size=_spacer_size(block.settings.height))
    if block.type == "layouts":
        section = _layout_to_section(block)
        if section is not None:
            return section
    return ContentSection(type="text", content=f"[{block.type} block]")


# ── Documents complets ──────────────────────────────────────────────────────

def content_to_blocks(
    content: Union[EmailContent, dict],
    id_generator: Optional[IdGenerator] = None,
) -> List[Any]:
    """
    EmailContent → blocs ordonnés : hero (headline), sections, bouton CTA, footer.
    Positions consécutives à partir de 0.
    """
    if isinstance(content, dict):
        content = EmailContent.model_validate(content)

    blocks = []
    position = 0

    if content.headline or content.subheadline:
        hero = {"title": content.headline, "paragraph": content.subheadline}
        blocks.append(_layout("hero-center", position, hero, id_generator, showHeader=False))
        position += 1

    for section in content.sections:
        block = section_to_block(section, position, id_generator)
        if block is not None:
            blocks.append(block)
            position += 1

    if content.cta:
        settings = get_default_block_settings("button")
        blocks.append(_make_block(
            "button", position, settings,
            {"text": content.cta.text, "url": _safe_url(content.cta.url)}, id_generator,
        ))
        position += 1

    if content.footer:
        footer = {
            "companyName": content.footer.company_name,
            "companyAddress": content.footer.company_address,
            "customText": content.footer.custom_text,
            "unsubscribeUrl": "{{unsubscribe_url}}",
            "preferencesUrl": "{{preferences_url}}",
        }
        blocks.append(_make_block(
            "footer", position, get_default_block_settings("footer"), footer, id_generator,
        ))

    log.info("Migration : %d sections → %d blocs", len(content.sections), len(blocks))
    return blocks


def blocks_to_content(blocks: Iterable[Any]) -> EmailContent:
    """
    Blocs → EmailContent : premier hero = headline, premier bouton = CTA,
    footer = footer, le reste en sections ordonnées. Headline par défaut "Email".
    """
    headline = ""
    subheadline = None
    cta = None
    footer = None
    sections = []

    for block in sorted(blocks, key=lambda b: b.position):
        if (block.type == "layouts" and block.layout_variation.startswith("hero-")
                and not headline):
            headline = block.content.title or ""
            subheadline = block.content.paragraph
            continue
        if block.type == "button" and cta is None:
            cta = ContentCTA(text=block.content.text, url=block.content.url)
            continue
        if block.type == "footer":
            footer = ContentFooter(
                company_name=block.content.company_name,
                company_address=block.content.company_address,
                custom_text=block.content.custom_text,
            )
            continue
        sections.append(block_to_section(block))

    return EmailContent(
        headline=headline or "Email",
        subheadline=subheadline,
        sections=sections,
        cta=cta,
        footer=footer,
    )
