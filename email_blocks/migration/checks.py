"""Vérifications aller-retour sections ↔ blocs."""
import logging
from typing import Union

from pydantic import ValidationError

from .converters import MigrationError, block_to_section, blocks_to_content, content_to_blocks, section_to_block
from .sections import ContentSection, EmailContent

log = logging.getLogger(__name__)


def check_section_round_trip(section: Union[ContentSection, dict]) -> bool:
    """True si section → bloc → section conserve le type."""
    if isinstance(section, dict):
        section = ContentSection.model_validate(section)
    try:
        block = section_to_block(section)
    except (MigrationError, ValidationError) as e:
        log.error("Aller-retour section %s en échec : %s", section.type, e)
        return False
    if block is None:
        return False
    return block_to_section(block).type == section.type


def check_content_round_trip(content: Union[EmailContent, dict]) -> bool:
    """True si headline et nombre de sections survivent à l'aller-retour."""
    if isinstance(content, dict):
        content = EmailContent.model_validate(content)
    try:
        converted = blocks_to_content(content_to_blocks(content))
    except (MigrationError, ValidationError) as e:
        log.error("Aller-retour contenu en échec : %s", e)
        return False
    return converted.headline == content.headline and len(converted.sections) == len(content.sections)
