"""
Blocs email — exports publics + EmailBlock discriminé par `type`.
"""
from typing import Annotated, Union

from pydantic import Field

from .base import BaseBlock, BlockSettings, BlockContent
from .logo import LogoBlock, LogoSettings, LogoContent
from .spacer import SpacerBlock, SpacerSettings, SpacerContent
from .text import TextBlock, TextSettings, TextContent
from .image import ImageBlock, ImageSettings, ImageContent, GridImage
from .button import ButtonBlock, ButtonSettings, ButtonContent, ButtonPadding
from .divider import DividerBlock, DividerSettings, DividerContent
from .social import SocialLinksBlock, SocialLinksSettings, SocialLinksContent, SocialLink
from .footer import FooterBlock, FooterSettings, FooterContent
from .link_bar import LinkBarBlock, LinkBarSettings, LinkBarContent, NavLink
from .address import AddressBlock, AddressSettings, AddressContent
from .layouts import (
    LayoutsBlock, LayoutSettings, LayoutContent, LayoutButton, LayoutImage,
    LayoutItem, LayoutColumn, LayoutFeature, ComparisonSide,
    LayoutVariation, LAYOUT_VARIATIONS,
)
from .container import ContainerBlock, ContainerSettings, ContainerContent, container_depth

# Union discriminée par `type`, utilisable dans TypeAdapter ou comme champ de modèle
EmailBlock = Annotated[
    Union[
        LogoBlock,
        SpacerBlock,
        TextBlock,
        ImageBlock,
        ButtonBlock,
        DividerBlock,
        SocialLinksBlock,
        FooterBlock,
        LinkBarBlock,
        AddressBlock,
        LayoutsBlock,
        ContainerBlock,
    ],
    Field(discriminator="type"),
]

# Résolution de la référence récursive Container → EmailBlock
ContainerContent.model_rebuild()
ContainerBlock.model_rebuild()

BLOCK_CLASSES: dict = {
    "logo":         LogoBlock,
    "spacer":       SpacerBlock,
    "text":         TextBlock,
    "image":        ImageBlock,
    "button":       ButtonBlock,
    "divider":      DividerBlock,
    "social-links": SocialLinksBlock,
    "footer":       FooterBlock,
    "link-bar":     LinkBarBlock,
    "address":      AddressBlock,
    "layouts":      LayoutsBlock,
    "container":    ContainerBlock,
}

BLOCK_TYPES: tuple = tuple(BLOCK_CLASSES)

__all__ = [
    # Base
    "BaseBlock", "BlockSettings", "BlockContent",
    "EmailBlock", "BLOCK_CLASSES", "BLOCK_TYPES",
    # Structure / contenu
    "LogoBlock", "LogoSettings", "LogoContent",
    "SpacerBlock", "SpacerSettings", "SpacerContent",
    "TextBlock", "TextSettings", "TextContent",
    "ImageBlock", "ImageSettings", "ImageContent", "GridImage",
    "ButtonBlock", "ButtonSettings", "ButtonContent", "ButtonPadding",
    "DividerBlock", "DividerSettings", "DividerContent",
    "SocialLinksBlock", "SocialLinksSettings", "SocialLinksContent", "SocialLink",
    "FooterBlock", "FooterSettings", "FooterContent",
    "LinkBarBlock", "LinkBarSettings", "LinkBarContent", "NavLink",
    "AddressBlock", "AddressSettings", "AddressContent",
    # Layouts
    "LayoutsBlock", "LayoutSettings", "LayoutContent", "LayoutButton", "LayoutImage",
    "LayoutItem", "LayoutColumn", "LayoutFeature", "ComparisonSide",
    "LayoutVariation", "LAYOUT_VARIATIONS",
    # Container
    "ContainerBlock", "ContainerSettings", "ContainerContent", "container_depth",
]
