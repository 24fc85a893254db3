"""
Schémas document : réglages globaux, Email, Campaign.
Structure : Campaign → Email → EmailBlock
"""
from typing import Dict, List, Literal, Optional

from pydantic import Field

from ..blocks import EmailBlock
from . import config
from .constants import DEFAULT_BACKGROUND, DEFAULT_CONTENT_BACKGROUND, MAX_WIDTH
from .primitives import EmailModel, FontFamily, HexColor

MergeTagMap = Dict[str, str]


class GlobalEmailSettings(EmailModel):
    """Réglages appliqués à l'enveloppe du document (fond, largeur, police)."""
    background_color: HexColor = DEFAULT_BACKGROUND
    content_background_color: HexColor = DEFAULT_CONTENT_BACKGROUND
    max_width: int = Field(default=MAX_WIDTH, ge=400, le=800)
    font_family: FontFamily = config.DEFAULT_FONT_FAMILY
    mobile_breakpoint: Optional[int] = Field(default=None, ge=320, le=768)


class Email(EmailModel):
    subject: str = Field(..., min_length=1, max_length=100)
    preview_text: str = Field(..., min_length=1, max_length=150)
    blocks: List[EmailBlock] = Field(..., min_length=1)
    global_settings: Optional[GlobalEmailSettings] = None
    notes: Optional[str] = None


class CampaignStrategy(EmailModel):
    goal: str
    key_message: str


class CampaignDesign(EmailModel):
    template: str
    cta_color: HexColor
    accent_color: Optional[HexColor] = None


class Campaign(EmailModel):
    """Campagne : 1 email ponctuel ou une séquence (max 5)."""
    campaign_name: str = Field(..., min_length=1, max_length=100)
    campaign_type: Literal["one-time", "sequence"]
    recommended_segment: Optional[str] = None
    strategy: Optional[CampaignStrategy] = None
    emails: List[Email] = Field(..., min_length=1, max_length=5)
    design: CampaignDesign
    segmentation_suggestion: Optional[str] = None
    send_time_suggestion: Optional[str] = None
    success_metrics: Optional[str] = None
