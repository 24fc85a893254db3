"""
Contrôle de sûreté du HTML email — balises interdites, handlers JS, tables sans rôle.

check_email_html(html)    → HtmlCheckResult(is_valid, errors, warnings)
sanitize_email_html(html) → HTML nettoyé (balises interdites, on*=, javascript:)
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List

log = logging.getLogger(__name__)

FORBIDDEN_TAGS = ("script", "iframe", "object", "embed", "applet", "form", "input", "textarea", "select")

_TAG_OPEN_RE = re.compile(r"<\s*(%s)\b" % "|".join(FORBIDDEN_TAGS), re.IGNORECASE)
_TAG_BLOCK_RE = re.compile(
    r"<\s*(%s)\b[^>]*>.*?<\s*/\s*\1\s*>" % "|".join(FORBIDDEN_TAGS), re.IGNORECASE | re.DOTALL
)
_TAG_SINGLE_RE = re.compile(r"<\s*/?\s*(%s)\b[^>]*>" % "|".join(FORBIDDEN_TAGS), re.IGNORECASE)
_EVENT_ATTR_RE = re.compile(r"""\s+on[a-z]+\s*=\s*("[^"]*"|'[^']*'|[^\s>]+)""", re.IGNORECASE)
_JS_HREF_RE = re.compile(r"""(href|src)\s*=\s*(["']?)\s*javascript:[^"'\s>]*\2""", re.IGNORECASE)
_TABLE_RE = re.compile(r"<table\b[^>]*>", re.IGNORECASE)
_STYLE_BLOCK_RE = re.compile(r"<style\b", re.IGNORECASE)
_IMG_SRC_RE = re.compile(r"""<img\b[^>]*\bsrc\s*=\s*["']([^"']*)["']""", re.IGNORECASE)
_POSITION_RE = re.compile(r"position\s*:\s*(absolute|fixed)", re.IGNORECASE)
_FLEX_RE = re.compile(r"display\s*:\s*(inline-)?flex", re.IGNORECASE)


@dataclass
class HtmlCheckResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def check_email_html(html: str) -> HtmlCheckResult:
    errors: List[str] = []
    warnings: List[str] = []

    for tag in sorted({m.group(1).lower() for m in _TAG_OPEN_RE.finditer(html)}):
        errors.append(f"balise interdite : <{tag}>")
    if _EVENT_ATTR_RE.search(html):
        errors.append("attribut gestionnaire d'événement (on*=) interdit")
    if _JS_HREF_RE.search(html):
        errors.append("URL javascript: interdite")
    missing_role = sum(1 for m in _TABLE_RE.finditer(html) if 'role="presentation"' not in m.group(0))
    if missing_role:
        errors.append(f"{missing_role} <table> sans role=\"presentation\"")

    if _STYLE_BLOCK_RE.search(html):
        warnings.append("bloc <style> : ignoré par certains clients, préférer les styles inline")
    insecure = [src for src in _IMG_SRC_RE.findall(html) if src.startswith("http://")]
    if insecure:
        warnings.append(f"{len(insecure)} image(s) non HTTPS")
    if _POSITION_RE.search(html):
        warnings.append("position absolute/fixed non supportée par les clients email")
    if _FLEX_RE.search(html):
        warnings.append("display:flex non supporté par Outlook")

    return HtmlCheckResult(is_valid=not errors, errors=errors, warnings=warnings)


def sanitize_email_html(html: str) -> str:
    cleaned = _TAG_BLOCK_RE.sub("", html)
    cleaned = _TAG_SINGLE_RE.sub("", cleaned)
    cleaned = _EVENT_ATTR_RE.sub("", cleaned)
    cleaned = _JS_HREF_RE.sub(r'\1="#"', cleaned)
    if cleaned != html:
        log.info("HTML nettoyé : %d caractères retirés", len(html) - len(cleaned))
    return cleaned
