"""Bloc Footer — société, adresse, texte libre, liens désinscription / préférences."""
from typing import Literal, Optional

from pydantic import Field

from ..core.primitives import (
    Alignment, BackgroundColor, HexColor, LineHeight, Padding, PixelValue, UrlOrMergeTag,
)
from .base import BaseBlock, BlockSettings, BlockContent


class FooterSettings(BlockSettings):
    background_color: Optional[BackgroundColor] = None
    text_color: HexColor = "#6b7280"
    font_size: PixelValue = "12px"
    align: Alignment = "center"
    padding: Padding = Padding(top=40, right=20, bottom=40, left=20)
    line_height: LineHeight = "1.6"
    link_color: Optional[HexColor] = None


class FooterContent(BlockContent):
    company_name: str = Field(..., min_length=1, max_length=200)
    company_address: Optional[str] = Field(default=None, max_length=500)
    custom_text: Optional[str] = Field(default=None, max_length=1000)
    unsubscribe_url: UrlOrMergeTag = Field(..., min_length=1, max_length=2000)
    preferences_url: Optional[UrlOrMergeTag] = Field(default=None, max_length=2000)


class FooterBlock(BaseBlock):
    type: Literal["footer"] = "footer"
    settings: FooterSettings
    content: FooterContent
