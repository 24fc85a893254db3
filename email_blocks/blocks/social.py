"""Bloc Social Links — rangée d'icônes réseaux sociaux."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.primitives import (
    Alignment, BackgroundColor, EmailModel, HexColor, Padding, PixelValue, UrlOrMergeTag,
)
from .base import BaseBlock, BlockSettings, BlockContent

SocialPlatform = Literal["twitter", "linkedin", "facebook", "instagram", "youtube", "github", "tiktok"]


class SocialLink(EmailModel):
    platform: SocialPlatform
    url: UrlOrMergeTag


class SocialLinksSettings(BlockSettings):
    align: Alignment = "center"
    icon_size: PixelValue = "32px"
    spacing: int = Field(default=24, ge=0, le=100)
    icon_style: Literal["color", "monochrome", "outline"] = "color"
    icon_color: Optional[HexColor] = None
    padding: Padding = Padding()
    background_color: Optional[BackgroundColor] = None


class SocialLinksContent(BlockContent):
    links: List[SocialLink] = Field(..., min_length=1, max_length=10)


class SocialLinksBlock(BaseBlock):
    type: Literal["social-links"] = "social-links"
    settings: SocialLinksSettings
    content: SocialLinksContent
