"""
Valeurs par défaut des blocs — settings et content par type (+ variante).

Retourne des dicts camelCase neufs à chaque appel (modifiables par l'appelant),
tous valides contre le schéma du type. Les URLs par défaut sont des merge tags
({{cta_url}}…) et jamais "#", rejeté par la validation.
"""
import copy
from typing import Optional

DEFAULT_PADDING = {"top": 20, "right": 20, "bottom": 20, "left": 20}


def _pad(top: int, right: int, bottom: int, left: int) -> dict:
    return {"top": top, "right": right, "bottom": bottom, "left": left}


_BLOCK_SETTINGS: dict = {
    "logo": {
        "align": "center",
        "width": "150px",
        "height": "auto",
        "backgroundColor": "transparent",
        "padding": _pad(40, 20, 20, 20),
    },
    "spacer": {
        "height": 40,
        "backgroundColor": "transparent",
    },
    "text": {
        "fontSize": "16px",
        "fontWeight": 400,
        "color": "#374151",
        "align": "left",
        "backgroundColor": "transparent",
        "padding": DEFAULT_PADDING,
        "lineHeight": "1.6",
    },
    "image": {
        "align": "center",
        "width": "100%",
        "height": "auto",
        "borderRadius": "0px",
        "padding": DEFAULT_PADDING,
        "columns": 1,
        "aspectRatio": "auto",
        "gap": 8,
        "backgroundColor": "transparent",
    },
    "button": {
        "style": "solid",
        "color": "#2563eb",
        "textColor": "#ffffff",
        "align": "center",
        "size": "medium",
        "borderRadius": "6px",
        "fontSize": "16px",
        "fontWeight": 600,
        "padding": _pad(14, 32, 14, 32),
        "containerPadding": DEFAULT_PADDING,
    },
    "divider": {
        "style": "solid",
        "color": "#e5e7eb",
        "thickness": 1,
        "width": "100%",
        "padding": _pad(32, 20, 32, 20),
    },
    "social-links": {
        "align": "center",
        "iconSize": "32px",
        "spacing": 24,
        "iconStyle": "color",
        "padding": DEFAULT_PADDING,
    },
    "footer": {
        "backgroundColor": "#f9fafb",
        "textColor": "#6b7280",
        "fontSize": "12px",
        "align": "center",
        "padding": _pad(40, 20, 40, 20),
        "lineHeight": "1.6",
        "linkColor": "#2563eb",
    },
    "link-bar": {
        "align": "center",
        "orientation": "horizontal",
        "padding": DEFAULT_PADDING,
        "spacing": 16,
        "fontSize": "14px",
        "textColor": "#374151",
        "linkColor": "#2563eb",
        "backgroundColor": "transparent",
    },
    "address": {
        "align": "center",
        "padding": DEFAULT_PADDING,
        "fontSize": "12px",
        "textColor": "#6b7280",
        "lineHeight": "1.6",
        "backgroundColor": "transparent",
    },
    "container": {
        "layout": "stack",
        "gridColumns": 2,
        "gap": 24,
        "borderWidth": 0,
        "padding": DEFAULT_PADDING,
    },
}

_BLOCK_CONTENT: dict = {
    "logo": {"imageUrl": "", "altText": "Company Logo"},
    "spacer": {},
    "text": {"text": "Your text content goes here. Edit this to add your message."},
    "image": {"imageUrl": "", "altText": "Image"},
    "button": {"text": "Click Here", "url": "{{cta_url}}"},
    "divider": {},
    "social-links": {
        "links": [
            {"platform": "twitter", "url": "https://twitter.com/yourcompany"},
            {"platform": "linkedin", "url": "https://linkedin.com/company/yourcompany"},
            {"platform": "facebook", "url": "https://facebook.com/yourcompany"},
        ],
    },
    "footer": {
        "companyName": "{{company_name}}",
        "companyAddress": "123 Main St, City, State 12345",
        "customText": "Questions? Just reply to this email.",
        "unsubscribeUrl": "{{unsubscribe_url}}",
        "preferencesUrl": "{{preferences_url}}",
    },
    "link-bar": {
        "links": [
            {"text": "Home", "url": "{{home_url}}"},
            {"text": "About", "url": "{{about_url}}"},
            {"text": "Contact", "url": "{{contact_url}}"},
        ],
    },
    "address": {
        "companyName": "{{company_name}}",
        "street": "123 Main Street",
        "city": "City",
        "state": "State",
        "zip": "12345",
        "country": "Country",
    },
}

# ── Layouts ─────────────────────────────────────────────────────────────────

_LAYOUT_BASE = {
    "align": "center",
    "showHeader": True,
    "showTitle": True,
    "showDivider": False,
    "showParagraph": True,
    "showButton": True,
    "showImage": False,
}

_DARK_BUTTON = {
    "buttonBackgroundColor": "#000000",
    "buttonTextColor": "#ffffff",
    "buttonBorderRadius": "6px",
    "buttonFontSize": "16px",
}

_STAT_ITEMS = [
    {"value": "10K+", "title": "Users", "description": "Active monthly users"},
    {"value": "99.9%", "title": "Uptime", "description": "Guaranteed reliability"},
    {"value": "24/7", "title": "Support", "description": "Always here to help"},
    {"value": "<1s", "title": "Response", "description": "Lightning fast"},
]

_FEATURES = [
    {"icon": "⚡", "title": "Fast", "description": "Set up in minutes, not days."},
    {"icon": "🔒", "title": "Secure", "description": "Your data stays protected."},
    {"icon": "📈", "title": "Scalable", "description": "Grows with your team."},
    {"icon": "🤝", "title": "Supported", "description": "Real humans ready to help."},
    {"icon": "🧩", "title": "Flexible", "description": "Fits your existing tools."},
    {"icon": "💡", "title": "Smart", "description": "Insights that guide decisions."},
]

_COLUMNS = [
    {"title": "First Feature", "paragraph": "Describe the first benefit here."},
    {"title": "Second Feature", "paragraph": "Describe the second benefit here."},
    {"title": "Third Feature", "paragraph": "Describe the third benefit here."},
    {"title": "Fourth Feature", "paragraph": "Describe the fourth benefit here."},
    {"title": "Fifth Feature", "paragraph": "Describe the fifth benefit here."},
]

_COLUMN_COUNTS = {
    "three-column-equal": 3,
    "three-column-wide-center": 3,
    "three-column-wide-outer": 3,
    "four-column-equal": 4,
    "five-column-equal": 5,
}


def _layout_settings(variation: Optional[str]) -> dict:
    v = variation or ""
    if v == "hero-center":
        extra = {
            "padding": _pad(80, 40, 80, 40),
            "backgroundColor": "#ffffff",
            "titleColor": "#000000",
            "paragraphColor": "#374151",
            "dividerColor": "#d17655",
            "titleFontSize": "36px",
            "paragraphFontSize": "18px",
            **_DARK_BUTTON,
        }
    elif v.startswith("two-column"):
        extra = {
            "padding": _pad(40, 20, 40, 20),
            "backgroundColor": "#ffffff",
            "titleColor": "#000000",
            "paragraphColor": "#374151",
            "titleFontSize": "28px",
            "paragraphFontSize": "16px",
            **_DARK_BUTTON,
        }
    elif v.startswith("stats-"):
        extra = {
            "padding": _pad(40, 20, 40, 20),
            "backgroundColor": "#eeecea",
            "titleColor": "#366460",
            "paragraphColor": "#374151",
            "titleFontSize": "32px",
            "paragraphFontSize": "14px",
        }
    elif v.startswith("image-overlay") or v == "hero-image-overlay":
        extra = {
            "padding": _pad(60, 40, 60, 40),
            "backgroundColor": "transparent",
            "titleColor": "#ffffff",
            "paragraphColor": "#ffffff",
            "titleFontSize": "40px",
            "paragraphFontSize": "18px",
            **_DARK_BUTTON,
        }
    elif v == "card-centered":
        extra = {
            "padding": _pad(60, 40, 60, 40),
            "backgroundColor": "#ded9d5",
            "titleColor": "#000000",
            "paragraphColor": "#374151",
            "titleFontSize": "32px",
            "paragraphFontSize": "16px",
            **_DARK_BUTTON,
        }
    elif v == "compact-image-text":
        extra = {
            "padding": _pad(30, 20, 30, 20),
            "backgroundColor": "#ffffff",
            "align": "left",
            "titleColor": "#000000",
            "paragraphColor": "#374151",
            "titleFontSize": "20px",
            "paragraphFontSize": "14px",
        }
    elif v == "magazine-feature":
        extra = {
            "padding": _pad(40, 20, 40, 20),
            "backgroundColor": "#ffffff",
            "align": "left",
            "titleColor": "#000000",
            "paragraphColor": "#374151",
            "titleFontSize": "28px",
            "paragraphFontSize": "16px",
        }
    elif v.startswith("testimonial-"):
        extra = {
            "padding": _pad(40, 40, 40, 40),
            "backgroundColor": "#f9fafb",
            "titleColor": "#111827",
            "paragraphColor": "#374151",
            "paragraphFontSize": "18px",
        }
    elif v.startswith("feature-grid-") or v in _COLUMN_COUNTS:
        extra = {
            "padding": _pad(40, 20, 40, 20),
            "backgroundColor": "#ffffff",
            "titleColor": "#111827",
            "paragraphColor": "#374151",
            "titleFontSize": "18px",
            "paragraphFontSize": "14px",
        }
    elif v.startswith("comparison-table-"):
        extra = {
            "padding": _pad(40, 20, 40, 20),
            "backgroundColor": "#ffffff",
            "titleColor": "#111827",
            "paragraphColor": "#374151",
        }
    else:
        extra = {
            "padding": _pad(40, 20, 40, 20),
            "backgroundColor": "transparent",
        }
    return {**_LAYOUT_BASE, **extra}


def _layout_content(variation: Optional[str]) -> dict:
    v = variation or ""
    if v == "hero-center":
        return {
            "header": "Introducing",
            "title": "Your Headline Here",
            "paragraph": "Add your description text here.",
            "button": {"text": "Get Started", "url": "{{cta_url}}"},
        }
    if v == "two-column-text":
        return {
            "leftColumn": (
                "This is the left column. You can use this layout to present information "
                "side-by-side, perfect for comparisons or parallel content streams."
            ),
            "rightColumn": (
                "This is the right column. Both columns will display at equal width, "
                "creating a balanced and professional appearance in your email."
            ),
        }
    if v.startswith("two-column"):
        return {
            "title": "Feature Title",
            "paragraph": (
                "Feature description goes here. Explain the benefits and value "
                "proposition in a clear, compelling way."
            ),
            "button": {"text": "Learn More", "url": "{{cta_url}}"},
            "image": {"url": "", "altText": "Feature image"},
        }
    if v.startswith("image-overlay") or v == "hero-image-overlay":
        return {
            "badge": "NEW",
            "title": "Stunning Visual Impact",
            "paragraph": "Create dramatic presentations with full-width imagery and overlaid text.",
            "button": {"text": "Explore Now", "url": "{{cta_url}}"},
            "image": {"url": "", "altText": "Background image"},
        }
    if v == "card-centered":
        return {
            "title": "Centered Message",
            "paragraph": (
                "Perfect for announcements, special offers, or any message that "
                "deserves spotlight attention."
            ),
            "button": {"text": "Take Action", "url": "{{cta_url}}"},
        }
    if v == "compact-image-text":
        return {
            "image": {"url": "", "altText": "Compact image"},
            "title": "Compact Layout",
            "subtitle": "Quick highlights",
            "paragraph": "Efficient side-by-side presentation with a small image and focused text content.",
        }
    if v == "magazine-feature":
        return {
            "badge": "FEATURED",
            "image": {"url": "", "altText": "Feature image"},
            "title": "Editorial Style Presentation",
            "paragraph": (
                "Create magazine-quality layouts that combine compelling imagery with "
                "engaging editorial content for maximum reader engagement."
            ),
        }
    if v.startswith("stats-"):
        count = int(v.split("-")[1])
        return {"items": copy.deepcopy(_STAT_ITEMS[:count])}
    if v.startswith("testimonial-"):
        return {
            "quote": "This product changed the way our team works. We ship twice as fast.",
            "author": "Jane Doe",
            "role": "Head of Marketing",
            "company": "Acme Inc.",
            "avatarUrl": "",
        }
    if v.startswith("feature-grid-"):
        count = int(v.split("-")[2])
        return {"title": "Why teams choose us", "features": copy.deepcopy(_FEATURES[:count])}
    if v in _COLUMN_COUNTS:
        return {"columns": copy.deepcopy(_COLUMNS[:_COLUMN_COUNTS[v]])}
    if v.startswith("comparison-table-"):
        content = {
            "title": "Before and after",
            "before": {"label": "Before", "text": "Manual work, scattered tools."},
            "after": {"label": "After", "text": "One workflow, automated."},
        }
        if v == "comparison-table-3-col":
            content["items"] = [{"title": "Competitors", "description": "Partial automation, extra cost."}]
        return content
    return {"title": "Layout Title", "paragraph": "Add your content here."}


# ── API publique ────────────────────────────────────────────────────────────

def get_default_block_settings(block_type: str, variation: Optional[str] = None) -> dict:
    """Settings par défaut (dict camelCase neuf). Type inconnu → {}."""
    if block_type == "layouts":
        return copy.deepcopy(_layout_settings(variation))
    return copy.deepcopy(_BLOCK_SETTINGS.get(block_type, {}))


def get_default_block_content(block_type: str, variation: Optional[str] = None) -> dict:
    """Content par défaut (dict camelCase neuf). Type inconnu → {}."""
    if block_type == "layouts":
        return _layout_content(variation)
    if block_type == "container":
        return {"children": []}
    return copy.deepcopy(_BLOCK_CONTENT.get(block_type, {}))
