"""Bloc Spacer — espace vertical de hauteur fixe."""
from typing import Literal, Optional

from pydantic import Field

from ..core.primitives import BackgroundColor
from .base import BaseBlock, BlockSettings, BlockContent


class SpacerSettings(BlockSettings):
    height: int = Field(default=40, ge=0, le=200)
    background_color: Optional[BackgroundColor] = None


class SpacerContent(BlockContent):
    pass


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    settings: SpacerSettings
    content: SpacerContent = SpacerContent()
