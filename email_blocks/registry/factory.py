"""
Factories — blocs par défaut, prêts à valider et à rendre.

Les ids viennent d'un générateur injectable (uuid4 par défaut) : les tests et
l'outillage déterministe peuvent le remplacer via set_id_generator().
"""
import logging
import uuid
from typing import Callable, Optional

from pydantic import TypeAdapter

from ..blocks import BLOCK_CLASSES, EmailBlock
from .defaults import get_default_block_content, get_default_block_settings

log = logging.getLogger(__name__)

IdGenerator = Callable[[], str]

_BLOCK_ADAPTER = TypeAdapter(EmailBlock)


def _uuid_id() -> str:
    return f"block_{uuid.uuid4().hex}"


_id_generator: IdGenerator = _uuid_id


def set_id_generator(fn: IdGenerator) -> None:
    """Remplace le générateur d'ids par défaut du processus."""
    global _id_generator
    _id_generator = fn


def reset_id_generator() -> None:
    global _id_generator
    _id_generator = _uuid_id


def generate_block_id(id_generator: Optional[IdGenerator] = None) -> str:
    return (id_generator or _id_generator)()


def create_default_block(
    block_type: str,
    position: int = 0,
    variation: Optional[str] = None,
    id_generator: Optional[IdGenerator] = None,
) -> EmailBlock:
    """
    Crée un bloc avec les settings/content par défaut du type (+ variante).

    Args:
        block_type:   type de bloc ("text", "layouts"…)
        position:     position dans l'email (≥ 0)
        variation:    variante de layout — obligatoire si block_type == "layouts"
        id_generator: générateur d'id ponctuel (sinon celui du processus)

    Returns:
        Bloc validé (instance du modèle Pydantic du type).

    Raises:
        ValueError: type inconnu, ou "layouts" sans variante.
    """
    if block_type not in BLOCK_CLASSES:
        raise ValueError(f"Type de bloc inconnu : {block_type!r}. Registry : {list(BLOCK_CLASSES)}")
    if block_type == "layouts" and not variation:
        raise ValueError("Un bloc 'layouts' exige une variante (layoutVariation)")

    content = get_default_block_content(block_type, variation)
    if block_type == "container":
        content["children"] = [
            _block_dict("text", 0, None, id_generator),
        ]

    return _BLOCK_ADAPTER.validate_python(_block_dict(block_type, position, variation, id_generator, content))


def _block_dict(block_type, position, variation, id_generator, content=None) -> dict:
    data = {
        "id": generate_block_id(id_generator),
        "type": block_type,
        "position": position,
        "settings": get_default_block_settings(block_type, variation),
        "content": content if content is not None else get_default_block_content(block_type, variation),
    }
    if block_type == "layouts":
        data["layoutVariation"] = variation
    return data


def create_layout_block(
    variation: str,
    position: int = 0,
    id_generator: Optional[IdGenerator] = None,
) -> EmailBlock:
    return create_default_block("layouts", position, variation, id_generator)


def create_link_bar_block(position: int = 0, id_generator: Optional[IdGenerator] = None) -> EmailBlock:
    return create_default_block("link-bar", position, id_generator=id_generator)


def create_address_block(position: int = 0, id_generator: Optional[IdGenerator] = None) -> EmailBlock:
    return create_default_block("address", position, id_generator=id_generator)


def clone_block(block, position: Optional[int] = None, id_generator: Optional[IdGenerator] = None):
    """Copie un bloc avec un nouvel id (et éventuellement une nouvelle position)."""
    update = {"id": generate_block_id(id_generator)}
    if position is not None:
        update["position"] = position
    log.debug("Clone du bloc %s (%s)", block.id, block.type)
    return block.model_copy(update=update, deep=True)
