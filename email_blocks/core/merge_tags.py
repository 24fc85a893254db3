"""
Merge tags — substitution des {{clé}} par les valeurs fournies à l'envoi.

Les tags sans correspondance sont laissés intacts.
"""
import re
from typing import Any, List, Optional

from .primitives import MERGE_TAG_RE

_TAG_RE = re.compile(r"\{\{\s*([\w.\-]+)\s*\}\}")


def is_merge_tag(value: Optional[str]) -> bool:
    """True si la valeur entière est un merge tag ("{{logo_url}}")."""
    return bool(value) and bool(MERGE_TAG_RE.match(value))


def find_merge_tags(text: Optional[str]) -> List[str]:
    """Liste les clés des merge tags présents dans le texte, dans l'ordre."""
    if not text:
        return []
    return _TAG_RE.findall(text)


def resolve_merge_tags(text: Optional[str], merge_tags: Optional[dict] = None) -> Optional[str]:
    """
    Remplace les {{clé}} par les valeurs du dictionnaire.
    Usage : resolve_merge_tags("Bonjour {{first_name}}", {"first_name": "Ana"})
    """
    if not merge_tags or not text:
        return text

    def replacer(match):
        key = match.group(1)
        return str(merge_tags[key]) if key in merge_tags else match.group(0)

    return _TAG_RE.sub(replacer, text)


def resolve_merge_tags_deep(obj: Any, merge_tags: Optional[dict] = None) -> Any:
    """Parcourt récursivement un dict/list/str et résout les merge tags."""
    if isinstance(obj, str):
        return resolve_merge_tags(obj, merge_tags)
    if isinstance(obj, dict):
        return {k: resolve_merge_tags_deep(v, merge_tags) for k, v in obj.items()}
    if isinstance(obj, list):
        return [resolve_merge_tags_deep(v, merge_tags) for v in obj]
    return obj
