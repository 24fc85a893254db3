"""Bloc Text — paragraphe (ou titre h1–h3) aux styles inline."""
from typing import Literal, Optional

from pydantic import Field

from ..core.primitives import (
    Alignment, BackgroundColor, FontFamily, FontWeight, HexColor, LineHeight, Padding, PixelValue,
)
from .base import BaseBlock, BlockSettings, BlockContent


class TextSettings(BlockSettings):
    font_size: PixelValue = "16px"
    font_weight: FontWeight = 400
    font_family: Optional[FontFamily] = None
    color: HexColor = "#374151"
    align: Alignment = "left"
    background_color: Optional[BackgroundColor] = None
    padding: Padding = Padding()
    line_height: LineHeight = "1.6"
    tag: Literal["p", "h1", "h2", "h3"] = "p"


class TextContent(BlockContent):
    text: str = Field(..., min_length=1, max_length=5000)


class TextBlock(BaseBlock):
    type: Literal["text"] = "text"
    settings: TextSettings
    content: TextContent
