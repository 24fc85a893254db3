"""Bloc Button — bouton « bulletproof » (VML Outlook + table HTML)."""
from typing import Literal, Optional

from pydantic import Field

from ..core.primitives import (
    Alignment, BackgroundColor, EmailModel, FontWeight, HexColor, Padding, PixelValue, UrlOrMergeTag,
)
from .base import BaseBlock, BlockSettings, BlockContent


class ButtonPadding(EmailModel):
    """Padding interne du bouton (vertical / horizontal seulement)."""
    top: int = Field(default=14, ge=0, le=200)
    right: int = Field(default=32, ge=0, le=200)
    bottom: int = Field(default=14, ge=0, le=200)
    left: int = Field(default=32, ge=0, le=200)


class ButtonSettings(BlockSettings):
    style: Literal["solid", "outline", "ghost"] = "solid"
    color: HexColor = "#2563eb"
    text_color: HexColor = "#ffffff"
    align: Alignment = "center"
    size: Literal["small", "medium", "large"] = "medium"
    border_radius: PixelValue = "6px"
    font_size: PixelValue = "16px"
    font_weight: FontWeight = 600
    padding: Optional[ButtonPadding] = None
    container_padding: Optional[Padding] = None
    background_color: Optional[BackgroundColor] = None


class ButtonContent(BlockContent):
    text: str = Field(..., min_length=1, max_length=100)
    url: UrlOrMergeTag


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    settings: ButtonSettings
    content: ButtonContent
