"""Bloc Address — adresse postale de l'expéditeur."""
from typing import Literal, Optional

from ..core.primitives import Alignment, BackgroundColor, HexColor, LineHeight, Padding, PixelValue
from .base import BaseBlock, BlockSettings, BlockContent


class AddressSettings(BlockSettings):
    align: Alignment = "center"
    padding: Padding = Padding()
    font_size: PixelValue = "12px"
    text_color: HexColor = "#6b7280"
    line_height: LineHeight = "1.6"
    background_color: Optional[BackgroundColor] = None


class AddressContent(BlockContent):
    company_name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None


class AddressBlock(BaseBlock):
    type: Literal["address"] = "address"
    settings: AddressSettings
    content: AddressContent = AddressContent()
