"""
Blocs de base pour email_blocks.
Settings (présentation) / Content (données) séparés + BaseBlock discriminé par `type`.
"""
from typing import Optional

from pydantic import Field

from ..core.primitives import EmailModel


class BlockSettings(EmailModel):
    """Présentation d'un bloc (couleurs, tailles, alignement, padding)."""
    pass


class BlockContent(EmailModel):
    """Contenu d'un bloc (textes, URLs, données). Merge tags {{...}} autorisés."""
    pass


class BaseBlock(EmailModel):
    """Bloc de base (classe parente de tous les blocs).

    `layout_variation` n'est accepté que sur le type "layouts" : partout ailleurs
    il doit être absent ou null.
    """
    id: str = Field(..., min_length=1)
    type: str
    position: int = Field(default=0, ge=0)
    layout_variation: None = None
