"""
API publique de l'Email Block Builder.
"""
import logging
from typing import Dict, Optional, Tuple

from pydantic import TypeAdapter
from pydantic.alias_generators import to_camel

from .blocks import EmailBlock
from .core.schemas import Email, GlobalEmailSettings
from .registry.factory import IdGenerator, create_default_block
from .renderer.html import render_blocks_to_email

log = logging.getLogger(__name__)

_BLOCK_ADAPTER = TypeAdapter(EmailBlock)
_OVERRIDABLE = ("settings", "content")


def _camel_keys(value):
    if isinstance(value, dict):
        return {to_camel(k): _camel_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_camel_keys(v) for v in value]
    return value


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class EmailBuilder:
    """
    Builder d'email par blocs.

    Usage:
        >>> builder = EmailBuilder(merge_tags={"cta_url": "https://acme.io/go"})
        >>> builder.add("logo")
        >>> builder.add("layouts", variation="hero-center", content={"title": "Bonjour"})
        >>> builder.add("button")
        >>> html = builder.render()
    """

    def __init__(
        self,
        global_settings: Optional[GlobalEmailSettings] = None,
        merge_tags: Optional[Dict[str, str]] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        """
        Initialise le builder.

        Args:
            global_settings: Réglages du document (fond, largeur, police)
            merge_tags: Valeurs des {{tags}} appliquées au rendu
            id_generator: Générateur d'ids (sinon celui du processus)
        """
        self.global_settings = global_settings or GlobalEmailSettings()
        self.merge_tags = dict(merge_tags or {})
        self.id_generator = id_generator
        self._blocks: list = []

    @property
    def blocks(self) -> Tuple:
        return tuple(self._blocks)

    def _next_position(self) -> int:
        return max((b.position for b in self._blocks), default=-1) + 1

    def add(self, block_type: str, variation: Optional[str] = None, **overrides):
        """
        Ajoute un bloc par défaut à la position suivante.

        Args:
            block_type: Type de bloc ("text", "layouts"…)
            variation: Variante de layout (obligatoire pour "layouts")
            **overrides: settings= et/ou content= fusionnés dans les valeurs par défaut

        Returns:
            Bloc validé ajouté

        Raises:
            ValueError: type inconnu ou layout sans variante
            TypeError: clé d'override autre que settings/content
            pydantic.ValidationError: overrides invalides
        """
        unknown = set(overrides) - set(_OVERRIDABLE)
        if unknown:
            raise TypeError(f"Overrides non supportés : {sorted(unknown)} (attendus : {_OVERRIDABLE})")

        block = create_default_block(block_type, self._next_position(), variation, self.id_generator)
        if overrides:
            data = block.model_dump(by_alias=True, exclude_none=True)
            for key in _OVERRIDABLE:
                if overrides.get(key):
                    data[key] = _deep_merge(data.get(key, {}), _camel_keys(overrides[key]))
            block = _BLOCK_ADAPTER.validate_python(data)

        self._blocks.append(block)
        log.debug("Bloc ajouté : %s (%s) en position %d", block.id, block.type, block.position)
        return block

    def add_block(self, block):
        """
        Ajoute un bloc existant (modèle ou dict camelCase).

        Returns:
            Bloc validé ajouté
        """
        if isinstance(block, dict):
            block = _BLOCK_ADAPTER.validate_python(block)
        self._blocks.append(block)
        return block

    def build_email(self, subject: str, preview_text: str, notes: Optional[str] = None) -> Email:
        """
        Assemble un Email validé.

        Args:
            subject: Objet (1-100 caractères)
            preview_text: Texte de prévisualisation (1-150 caractères)
            notes: Notes libres

        Returns:
            Email validé
        """
        return Email(
            subject=subject,
            preview_text=preview_text,
            blocks=list(self._blocks),
            global_settings=self.global_settings,
            notes=notes,
        )

    def render(self) -> str:
        """
        Rend les blocs en HTML email complet.

        Returns:
            HTML complet
        """
        return render_blocks_to_email(self._blocks, self.global_settings, self.merge_tags)


# Fonction raccourcie pour usage direct
def render_email(email: Email, merge_tags: Optional[Dict[str, str]] = None) -> str:
    """
    Rend un Email en HTML complet (fonction raccourcie).

    Args:
        email: Email à rendre
        merge_tags: Valeurs des {{tags}}

    Returns:
        HTML complet
    """
    return render_blocks_to_email(email.blocks, email.global_settings, merge_tags)
