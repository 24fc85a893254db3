"""Bloc Container — regroupe des blocs enfants (pile ou grille), récursif."""
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from ..core import config
from ..core.primitives import BackgroundColor, HexColor, Padding, PixelValue
from .base import BaseBlock, BlockSettings, BlockContent


class ContainerSettings(BlockSettings):
    layout: Literal["stack", "grid"] = "stack"
    grid_columns: int = Field(default=2, ge=1, le=4)
    gap: int = Field(default=24, ge=0, le=100)
    background_color: Optional[BackgroundColor] = None
    border_color: Optional[HexColor] = None
    border_width: int = Field(default=0, ge=0, le=10)
    border_radius: Optional[PixelValue] = None
    padding: Padding = Padding()


class ContainerContent(BlockContent):
    children: List["EmailBlock"] = Field(..., min_length=1, max_length=10)


def container_depth(block) -> int:
    """Profondeur d'imbrication : 1 pour un conteneur sans conteneur enfant."""
    if getattr(block, "type", None) != "container":
        return 0
    return 1 + max((container_depth(c) for c in block.content.children), default=0)


class ContainerBlock(BaseBlock):
    type: Literal["container"] = "container"
    settings: ContainerSettings = ContainerSettings()
    content: ContainerContent

    @model_validator(mode="after")
    def _check_depth(self):
        depth = container_depth(self)
        if depth > config.MAX_NESTING_DEPTH:
            raise ValueError(
                f"imbrication trop profonde : {depth} niveaux (max {config.MAX_NESTING_DEPTH})"
            )
        return self
