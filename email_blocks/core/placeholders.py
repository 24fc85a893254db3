"""
Placeholders — images SVG inline pour URLs absentes, invalides ou non résolues.

Un merge tag non résolu ou une URL de démo (example.com…) ne doit jamais produire
une image cassée : on substitue un SVG data-URI aux dimensions de la cible.
"""
import re
from typing import Literal, Optional
from urllib.parse import quote

from .primitives import MERGE_TAG_RE

ImageKind = Literal["logo", "image", "hero"]

_SAFE_URI_CHARS = "-_.!~*'()"
_AVATAR_URL_RE = re.compile(r"^(https?://|data:)", re.IGNORECASE)

SOCIAL_BRAND_COLORS = {
    "twitter":   "#1DA1F2",
    "linkedin":  "#0A66C2",
    "facebook":  "#1877F2",
    "instagram": "#E4405F",
    "tiktok":    "#000000",
    "youtube":   "#FF0000",
    "github":    "#181717",
}

SOCIAL_LABELS = {
    "twitter":   "X",
    "linkedin":  "in",
    "facebook":  "f",
    "instagram": "IG",
    "tiktok":    "TT",
    "youtube":   "YT",
    "github":    "GH",
}


def _svg_data_uri(svg: str) -> str:
    return "data:image/svg+xml," + quote(svg, safe=_SAFE_URI_CHARS)


def get_placeholder_image(width: int = 400, height: int = 300, kind: ImageKind = "image") -> str:
    text = "Add your logo" if kind == "logo" else "Add image"
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">'
        f'<rect fill="#f3f4f6" width="{width}" height="{height}"/>'
        f'<text x="50%" y="50%" text-anchor="middle" dy=".3em" fill="#9ca3af" '
        f'font-family="system-ui, sans-serif" font-size="16">{text}</text>'
        f'</svg>'
    )
    return _svg_data_uri(svg)


def get_placeholder_avatar() -> str:
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64">'
        '<circle cx="32" cy="32" r="32" fill="#e5e7eb"/>'
        '<circle cx="32" cy="28" r="10" fill="#9ca3af"/>'
        '<path d="M16 50 Q32 40 48 50" stroke="#9ca3af" stroke-width="2" fill="none"/>'
        '</svg>'
    )
    return _svg_data_uri(svg)


def is_placeholder_url(url: Optional[str]) -> bool:
    """True si l'URL doit être remplacée par un placeholder (vide, tag, démo)."""
    if not url:
        return True
    if MERGE_TAG_RE.match(url):
        return True
    lower = url.lower()
    return (
        "example.com" in lower
        or "placeholder.com" in lower
        or lower in ("url", "image", "logo")
    )


def process_image_url(
    url: Optional[str],
    kind: ImageKind = "image",
    width: int = 400,
    height: int = 300,
) -> str:
    """Retourne l'URL telle quelle, ou un placeholder dimensionné si elle est inutilisable."""
    if is_placeholder_url(url):
        return get_placeholder_image(width, height, kind)
    return url


def process_avatar_url(url: Optional[str]) -> str:
    if not url or MERGE_TAG_RE.match(url):
        return get_placeholder_avatar()
    lower = url.lower()
    if "fake" in lower or "placeholder" in lower or lower in ("url", "avatar"):
        return get_placeholder_avatar()
    if not _AVATAR_URL_RE.match(url):
        return get_placeholder_avatar()
    return url


def get_social_icon_url(platform: str, style: str = "color", color: Optional[str] = None, size: int = 32) -> str:
    """
    Icône réseau social en SVG data-URI.

    color      → pastille à la couleur de la marque, lettre blanche
    monochrome → pastille à la couleur imposée (défaut #374151)
    outline    → cercle tracé, lettre de la couleur imposée
    Plateforme inconnue → pastille générique grise.
    """
    label = SOCIAL_LABELS.get(platform, (platform[:1] or "?").upper())
    if style == "color":
        fill = SOCIAL_BRAND_COLORS.get(platform, "#6b7280")
    else:
        fill = color or "#374151"
    r = size // 2
    font_size = max(size // 3, 8)

    if style == "outline":
        shape = f'<circle cx="{r}" cy="{r}" r="{r - 1}" fill="none" stroke="{fill}" stroke-width="2"/>'
        text_fill = fill
    else:
        shape = f'<circle cx="{r}" cy="{r}" r="{r}" fill="{fill}"/>'
        text_fill = "#ffffff"

    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}">'
        f'{shape}'
        f'<text x="50%" y="50%" text-anchor="middle" dy=".35em" fill="{text_fill}" '
        f'font-family="Arial, sans-serif" font-weight="700" font-size="{font_size}">{label}</text>'
        f'</svg>'
    )
    return _svg_data_uri(svg)
