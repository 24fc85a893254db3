"""Bloc Link Bar — barre de navigation textuelle (horizontale ou verticale)."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.primitives import (
    Alignment, BackgroundColor, EmailModel, HexColor, Padding, PixelValue, UrlOrMergeTag,
)
from .base import BaseBlock, BlockSettings, BlockContent


class NavLink(EmailModel):
    text: str = Field(..., min_length=1, max_length=100)
    url: UrlOrMergeTag


class LinkBarSettings(BlockSettings):
    align: Alignment = "center"
    orientation: Literal["horizontal", "vertical"] = "horizontal"
    padding: Padding = Padding()
    spacing: int = Field(default=16, ge=0, le=100)
    font_size: PixelValue = "14px"
    text_color: HexColor = "#374151"
    link_color: HexColor = "#2563eb"
    background_color: Optional[BackgroundColor] = None


class LinkBarContent(BlockContent):
    links: List[NavLink] = Field(..., min_length=1, max_length=10)


class LinkBarBlock(BaseBlock):
    type: Literal["link-bar"] = "link-bar"
    settings: LinkBarSettings
    content: LinkBarContent
