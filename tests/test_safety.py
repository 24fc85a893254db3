"""
Tests contrôle de sûreté HTML
  check_email_html(html)    → HtmlCheckResult(is_valid, errors, warnings)
  sanitize_email_html(html) → HTML sans balises interdites / on*= / javascript:
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging

from email_blocks.renderer import check_email_html, render_blocks_to_email, sanitize_email_html
from email_blocks.registry import create_default_block

SAFE = '<table role="presentation" width="100%"><tr><td><p>Bonjour</p></td></tr></table>'


# ── check_email_html ──────────────────────────────────────────────────────

def test_safe_fragment_valid():
    result = check_email_html(SAFE)
    assert result.is_valid
    assert result.errors == []


def test_script_tag_rejected():
    result = check_email_html(SAFE + "<script>alert(1)</script>")
    assert not result.is_valid
    assert any("<script>" in e for e in result.errors)


def test_event_handler_rejected():
    result = check_email_html('<img src="https://cdn.acme.io/a.png" onerror="alert(1)" />')
    assert not result.is_valid


def test_javascript_href_rejected():
    result = check_email_html('<a href="javascript:alert(1)">x</a>')
    assert not result.is_valid
    assert any("javascript" in e for e in result.errors)


def test_table_without_role_rejected():
    result = check_email_html("<table><tr><td>x</td></tr></table>")
    assert not result.is_valid
    assert any("role" in e for e in result.errors)


def test_warnings_do_not_invalidate():
    html = SAFE + '<img src="http://cdn.acme.io/a.png" /><div style="display: flex; position: absolute;"></div>'
    result = check_email_html(html)
    assert result.is_valid
    assert len(result.warnings) == 3


def test_rendered_document_is_valid():
    blocks = [create_default_block(t, i, id_generator=lambda: "b") for i, t in enumerate(
        ["logo", "text", "image", "button", "divider", "social-links", "footer", "link-bar", "address", "spacer"]
    )]
    result = check_email_html(render_blocks_to_email(blocks))
    assert result.is_valid, result.errors


# ── sanitize_email_html ───────────────────────────────────────────────────

def test_sanitize_removes_script_block():
    cleaned = sanitize_email_html(SAFE + "<script>alert(1)</script>")
    assert "script" not in cleaned
    assert "alert" not in cleaned
    assert "Bonjour" in cleaned


def test_sanitize_removes_event_attributes():
    cleaned = sanitize_email_html('<img src="https://cdn.acme.io/a.png" onerror="alert(1)" />')
    assert "onerror" not in cleaned
    assert 'src="https://cdn.acme.io/a.png"' in cleaned


def test_sanitize_neutralises_javascript_links():
    cleaned = sanitize_email_html('<a href="javascript:alert(1)">x</a>')
    assert cleaned == '<a href="#">x</a>'


def test_sanitize_leaves_safe_html_untouched(caplog):
    with caplog.at_level(logging.INFO):
        assert sanitize_email_html(SAFE) == SAFE
    assert "nettoyé" not in caplog.text


def test_sanitized_output_passes_check():
    dirty = SAFE + '<iframe src="https://evil.io"></iframe><a href="javascript:void(0)" onclick="x()">a</a>'
    assert check_email_html(sanitize_email_html(dirty)).is_valid
