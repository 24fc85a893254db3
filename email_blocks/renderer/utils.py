"""Utilitaires HTML email : échappement, padding, arcsize VML, cellules."""
import re
from typing import Optional

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_ESCAPE_RE = re.compile(r"[&<>\"']")

TABLE_ATTRS = 'role="presentation" width="100%" cellpadding="0" cellspacing="0"'


def escape_html(text: Optional[str]) -> str:
    if not text:
        return ""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], str(text))


_CSS_URL_ESCAPES = {"'": "%27", '"': "%22", "(": "%28", ")": "%29", "\\": "%5C"}
_CSS_URL_RE = re.compile(r"['\"()\\\s]")


def css_url(url: Optional[str]) -> str:
    """Encode une URL pour url('...') en CSS : quotes, parenthèses, antislash et blancs en %XX."""
    if not url:
        return ""
    return _CSS_URL_RE.sub(lambda m: _CSS_URL_ESCAPES.get(m.group(0), "%20"), str(url))


def escape_text(text: Optional[str]) -> str:
    """Échappe un texte et convertit les retours à la ligne en <br />."""
    return escape_html(text).replace("\n", "<br />")


def padding_css(padding) -> str:
    """Padding → "12px 24px 12px 24px" (ordre CSS haut/droite/bas/gauche)."""
    return f"{padding.top}px {padding.right}px {padding.bottom}px {padding.left}px"


def px(value: Optional[str], default: int = 0) -> int:
    """ "150px" → 150 ; valeur absente ou non numérique → default."""
    if not value:
        return default
    m = re.match(r"^\s*(\d+)", str(value))
    return int(m.group(1)) if m else default


def get_outlook_arcsize(border_radius: Optional[str]) -> str:
    """Arrondi CSS → arcsize VML pour <v:roundrect> (Outlook)."""
    radius = px(border_radius)
    if radius <= 4:
        return "10%"
    if radius <= 8:
        return "20%"
    if radius >= 24:
        return "50%"
    return "15%"


def background_css(color: Optional[str]) -> str:
    """ " background-color: X;" si couleur utile, sinon "" (transparent ignoré)."""
    if not color or color == "transparent":
        return ""
    return f" background-color: {color};"


def wrap_table(td_attrs: str, inner: str) -> str:
    """Table de présentation pleine largeur à une cellule."""
    return f"""
<table {TABLE_ATTRS}>
  <tr>
    <td {td_attrs}>
      {inner}
    </td>
  </tr>
</table>"""
