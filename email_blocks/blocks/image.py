"""Bloc Image — image unique avec légende, ou grille 1–3 colonnes."""
from typing import List, Literal, Optional, Union

from pydantic import Field

from ..core.primitives import (
    Alignment, BackgroundColor, ImageWidth, Padding, PixelValue, UrlOrMergeTag,
)
from .base import BaseBlock, BlockSettings, BlockContent

AspectRatio = Literal["auto", "1:1", "16:9", "4:3", "3:4", "2:3"]


class ImageSettings(BlockSettings):
    align: Alignment = "center"
    width: ImageWidth = "100%"
    height: Optional[Union[Literal["auto"], PixelValue]] = "auto"
    border_radius: Optional[PixelValue] = None
    padding: Padding = Padding()
    background_color: Optional[BackgroundColor] = None
    columns: int = Field(default=1, ge=1, le=3)
    gap: int = Field(default=8, ge=0, le=40)
    aspect_ratio: AspectRatio = "auto"


class GridImage(BlockContent):
    url: UrlOrMergeTag = ""
    alt_text: str = Field(default="", max_length=200)
    link_url: Optional[UrlOrMergeTag] = None


class ImageContent(BlockContent):
    image_url: UrlOrMergeTag = ""
    alt_text: str = Field(..., min_length=1, max_length=200)
    link_url: Optional[UrlOrMergeTag] = None
    caption: Optional[str] = Field(default=None, max_length=500)
    images: List[GridImage] = Field(default_factory=list, max_length=9)


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    settings: ImageSettings
    content: ImageContent
