"""
email_blocks — moteur de rendu d'emails par blocs.

Blocs typés (Pydantic) → HTML email à base de tables, compatible Outlook (MSO/VML).

Usage:
    from email_blocks import EmailBuilder, render_blocks_to_email, validate_blocks

    builder = EmailBuilder(merge_tags={"cta_url": "https://acme.io/go"})
    builder.add("logo")
    builder.add("layouts", variation="hero-center")
    builder.add("button")
    html = builder.render()

    # Ou à partir de JSON brut (camelCase)
    result = validate_blocks(payload["blocks"])
    if result.success:
        html = render_blocks_to_email(result.data, merge_tags={"first_name": "Ana"})
"""
from .blocks import BLOCK_TYPES, LAYOUT_VARIATIONS, EmailBlock
from .builder import EmailBuilder, render_email
from .core.merge_tags import resolve_merge_tags
from .core.schemas import Campaign, Email, GlobalEmailSettings
from .core.validation import ValidationResult, validate_block, validate_blocks, validate_campaign, validate_email
from .migration import EmailContent, MigrationError, blocks_to_content, content_to_blocks
from .registry import create_default_block, create_layout_block
from .renderer import check_email_html, render_block, render_blocks_to_email

__version__ = "0.1.0"

__all__ = [
    "EmailBlock", "BLOCK_TYPES", "LAYOUT_VARIATIONS",
    "EmailBuilder", "render_email",
    "resolve_merge_tags",
    "Campaign", "Email", "GlobalEmailSettings",
    "ValidationResult", "validate_block", "validate_blocks", "validate_campaign", "validate_email",
    "EmailContent", "MigrationError", "blocks_to_content", "content_to_blocks",
    "create_default_block", "create_layout_block",
    "check_email_html", "render_block", "render_blocks_to_email",
]
