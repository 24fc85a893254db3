"""
Renderer email — blocs validés → document HTML table-based (Outlook compris).
"""
from .base import BlockRenderer, RenderContext, sort_blocks
from .html import BLOCK_RENDERERS, render_block, render_blocks_to_email, wrap_in_email_structure
from .layouts import LAYOUT_RENDERERS, calculate_column_widths, calculate_multi_column_width, render_layout_block
from .safety import HtmlCheckResult, check_email_html, sanitize_email_html
from .utils import escape_html, get_outlook_arcsize

__all__ = [
    "RenderContext", "BlockRenderer", "sort_blocks",
    "BLOCK_RENDERERS", "render_block", "render_blocks_to_email", "wrap_in_email_structure",
    "LAYOUT_RENDERERS", "render_layout_block", "calculate_column_widths", "calculate_multi_column_width",
    "HtmlCheckResult", "check_email_html", "sanitize_email_html",
    "escape_html", "get_outlook_arcsize",
]
