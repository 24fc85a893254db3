"""
Tests validation — les points d'entrée validate_* ne lèvent jamais.
Erreurs formatées "chemin.camelCase: message", sans tag d'union.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from email_blocks.core.validation import (
    ValidationResult, validate_block, validate_blocks, validate_campaign, validate_email,
)


DESIGN = {"template": "minimal", "ctaColor": "#2563eb"}


def text(id="t1", position=0, body="Bonjour"):
    return {"id": id, "type": "text", "position": position, "settings": {}, "content": {"text": body}}


@pytest.fixture
def email_payload():
    return {
        "subject": "Lancement",
        "previewText": "Notre nouveau produit est là",
        "blocks": [text()],
    }


# ── validate_block ────────────────────────────────────────────────────────

def test_validate_block_success():
    r = validate_block(text())
    assert isinstance(r, ValidationResult)
    assert r.success is True
    assert r.data.id == "t1"
    assert r.errors == []


def test_validate_block_error_path_is_camel_case_without_tag():
    r = validate_block({
        "id": "l1", "type": "logo", "settings": {},
        "content": {"altText": "ACME", "imageUrl": "not-a-url"},
    })
    assert r.success is False
    assert r.data is None
    assert any(e.startswith("content.imageUrl:") for e in r.errors)


def test_validate_block_unknown_type_never_raises():
    r = validate_block({"id": "x", "type": "carousel"})
    assert r.success is False
    assert r.errors


def test_validate_block_not_a_dict():
    r = validate_block("texte")
    assert r.success is False


# ── validate_blocks ───────────────────────────────────────────────────────

def test_validate_blocks_prefixes_index():
    r = validate_blocks([text(), {**text(id="t2"), "settings": {"color": "red"}}])
    assert r.success is False
    assert any(e.startswith("1.settings.color:") for e in r.errors)


def test_validate_blocks_not_a_list():
    r = validate_blocks({"blocks": []})
    assert r.success is False
    assert r.errors == ["blocks: doit être une liste"]


def test_validate_blocks_success():
    r = validate_blocks([text(), text(id="t2", position=1)])
    assert r.success is True
    assert len(r.data) == 2


# ── validate_email ────────────────────────────────────────────────────────

def test_validate_email_success(email_payload):
    r = validate_email(email_payload)
    assert r.success is True
    assert r.data.subject == "Lancement"


def test_validate_email_requires_blocks(email_payload):
    email_payload["blocks"] = []
    r = validate_email(email_payload)
    assert r.success is False
    assert any(e.startswith("blocks:") for e in r.errors)


def test_validate_email_subject_length(email_payload):
    email_payload["subject"] = "x" * 101
    r = validate_email(email_payload)
    assert r.success is False
    assert any(e.startswith("subject:") for e in r.errors)


def test_validate_email_nested_block_path(email_payload):
    email_payload["blocks"] = [text(), {**text(id="t2"), "content": {"text": ""}}]
    r = validate_email(email_payload)
    assert r.success is False
    assert any(e.startswith("blocks.1.content.text:") for e in r.errors)


# ── validate_campaign ─────────────────────────────────────────────────────

def test_validate_campaign(email_payload):
    r = validate_campaign({
        "campaignName": "Rentrée",
        "campaignType": "sequence",
        "design": DESIGN,
        "emails": [email_payload, email_payload],
    })
    assert r.success is True
    assert len(r.data.emails) == 2


def test_validate_campaign_too_many_emails(email_payload):
    r = validate_campaign({
        "campaignName": "Rentrée",
        "campaignType": "sequence",
        "design": DESIGN,
        "emails": [email_payload] * 6,
    })
    assert r.success is False


def test_validate_campaign_bad_type(email_payload):
    r = validate_campaign({"campaignName": "X", "campaignType": "drip", "design": DESIGN, "emails": [email_payload]})
    assert r.success is False
    assert any(e.startswith("campaignType:") for e in r.errors)
