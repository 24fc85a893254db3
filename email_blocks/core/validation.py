"""
Validation — points d'entrée qui ne lèvent jamais sur une entrée invalide.

validate_block(dict)    → ValidationResult(success, data | errors)
validate_blocks(list)   → idem, erreurs préfixées par l'index du bloc
validate_email(dict)    → idem pour un Email complet
validate_campaign(dict) → idem pour une Campaign

Chaque erreur est une chaîne "chemin.camelCase: message".
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from ..blocks import BLOCK_TYPES, EmailBlock
from .schemas import Campaign, Email

_BLOCK_ADAPTER = TypeAdapter(EmailBlock)
_BLOCKS_ADAPTER = TypeAdapter(List[EmailBlock])


@dataclass
class ValidationResult:
    success: bool
    data: Any = None
    errors: List[str] = field(default_factory=list)


def _clean_loc(loc: tuple) -> list:
    """Retire les tags de l'union discriminée ("logo", "layouts"…) du chemin."""
    parts = []
    prev: Optional[Any] = None
    for i, part in enumerate(loc):
        if part in BLOCK_TYPES and (i == 0 or isinstance(prev, int)):
            prev = part
            continue
        parts.append(str(part))
        prev = part
    return parts


def get_validation_errors(exc: ValidationError) -> List[str]:
    """Formate une ValidationError Pydantic en liste "chemin: message"."""
    messages = []
    for err in exc.errors():
        path = ".".join(_clean_loc(err["loc"]))
        messages.append(f"{path}: {err['msg']}" if path else err["msg"])
    return messages


def validate_block(candidate: Any) -> ValidationResult:
    try:
        return ValidationResult(success=True, data=_BLOCK_ADAPTER.validate_python(candidate))
    except ValidationError as e:
        return ValidationResult(success=False, errors=get_validation_errors(e))


def validate_blocks(candidates: Any) -> ValidationResult:
    if not isinstance(candidates, list):
        return ValidationResult(success=False, errors=["blocks: doit être une liste"])
    try:
        return ValidationResult(success=True, data=_BLOCKS_ADAPTER.validate_python(candidates))
    except ValidationError as e:
        return ValidationResult(success=False, errors=get_validation_errors(e))


def validate_email(candidate: Any) -> ValidationResult:
    try:
        return ValidationResult(success=True, data=Email.model_validate(candidate))
    except ValidationError as e:
        return ValidationResult(success=False, errors=get_validation_errors(e))


def validate_campaign(candidate: Any) -> ValidationResult:
    try:
        return ValidationResult(success=True, data=Campaign.model_validate(candidate))
    except ValidationError as e:
        return ValidationResult(success=False, errors=get_validation_errors(e))
