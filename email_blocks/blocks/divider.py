"""Bloc Divider — ligne horizontale ou élément décoratif."""
from typing import Literal, Optional, Union

from pydantic import Field

from ..core.primitives import Alignment, HexColor, Padding, PixelValue
from .base import BaseBlock, BlockSettings, BlockContent


class DividerSettings(BlockSettings):
    style: Literal["solid", "dashed", "dotted", "decorative"] = "solid"
    color: Optional[HexColor] = None
    thickness: Optional[int] = Field(default=None, ge=1, le=10)
    width: Optional[Union[PixelValue, Literal["100%"]]] = None
    padding: Padding = Padding(top=32, right=20, bottom=32, left=20)
    align: Optional[Alignment] = None


class DividerContent(BlockContent):
    decorative_element: Optional[str] = Field(default=None, max_length=10)


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    settings: DividerSettings
    content: DividerContent = DividerContent()
