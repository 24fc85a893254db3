"""Bloc Logo — image de marque centrée, lien optionnel."""
from typing import Literal, Optional, Union

from pydantic import Field

from ..core.primitives import Alignment, BackgroundColor, Padding, PixelValue, UrlOrMergeTag, padding_of
from .base import BaseBlock, BlockSettings, BlockContent


class LogoSettings(BlockSettings):
    align: Alignment = "center"
    width: PixelValue = "150px"
    height: Optional[Union[Literal["auto"], PixelValue]] = "auto"
    background_color: Optional[BackgroundColor] = None
    padding: Padding = padding_of(40, 20, 20, 20)


class LogoContent(BlockContent):
    image_url: UrlOrMergeTag = ""
    alt_text: str = Field(..., min_length=1, max_length=200)
    link_url: Optional[UrlOrMergeTag] = None


class LogoBlock(BaseBlock):
    type: Literal["logo"] = "logo"
    settings: LogoSettings
    content: LogoContent
