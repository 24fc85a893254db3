"""
Contexte de rendu + Protocol Renderer (interface pluggable).
"""
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Protocol, runtime_checkable

from ..core.merge_tags import resolve_merge_tags
from ..core.schemas import GlobalEmailSettings


@dataclass(frozen=True)
class RenderContext:
    """Contexte transmis à chaque renderer de bloc (lecture seule)."""
    global_settings: GlobalEmailSettings = field(default_factory=GlobalEmailSettings)
    merge_tags: Dict[str, str] = field(default_factory=dict)
    depth: int = 0

    def merge(self, text: Optional[str]) -> Optional[str]:
        return resolve_merge_tags(text, self.merge_tags)

    def child(self) -> "RenderContext":
        """Contexte du niveau d'imbrication suivant (conteneurs)."""
        return replace(self, depth=self.depth + 1)


@runtime_checkable
class BlockRenderer(Protocol):
    def __call__(self, block, context: RenderContext) -> str: ...


def sort_blocks(blocks) -> list:
    """Tri stable par position ; à position égale, l'ordre d'origine est conservé."""
    return [b for _, b in sorted(enumerate(blocks), key=lambda pair: (pair[1].position, pair[0]))]
