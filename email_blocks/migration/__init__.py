"""Migration du modèle « sections » historique vers les blocs (et retour)."""
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
from .converters import (
    MigrationError,
    block_to_section,
    blocks_to_content,
    content_to_blocks,
    section_to_block,
)
from .checks import check_content_round_trip, check_section_round_trip

__all__ = [
    "SECTION_TYPES", "ContentCTA", "ContentFooter", "ContentSection", "EmailContent",
    "SectionComparison", "SectionFeature", "SectionStat", "SectionTestimonial",
    "MigrationError", "block_to_section", "blocks_to_content", "content_to_blocks",
    "section_to_block",
    "check_content_round_trip", "check_section_round_trip",
]
