"""Format checks for phones, e-mail and postal codes (CEP)."""

from __future__ import annotations

import re

from cadastro.validation.documents import only_digits

LANDLINE_RE = re.compile(r"\d{10}")
CELL_PHONE_RE = re.compile(r"\d{11}")
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
CEP_RE = re.compile(r"[0-9]{5}-[0-9]{3}")


def is_valid_landline(raw: str | None) -> bool:
    """Area code + 8 digits once punctuation is stripped."""
    return bool(LANDLINE_RE.fullmatch(only_digits(raw)))


def is_valid_cell_phone(raw: str | None) -> bool:
    """Area code + 9 digits once punctuation is stripped."""
    return bool(CELL_PHONE_RE.fullmatch(only_digits(raw)))


def is_valid_email(raw: str | None) -> bool:
    return bool(raw) and EMAIL_RE.fullmatch(raw) is not None


def emails_match(email: str | None, confirmation: str | None) -> bool:
    return email == confirmation


def is_valid_cep(raw: str | None) -> bool:
    """Match ``NNNNN-NNN`` exactly; the hyphen is mandatory."""
    return bool(raw) and CEP_RE.fullmatch(raw) is not None


def strip_cep(raw: str | None) -> str:
    return (raw or "").replace("-", "")


__all__ = [
    "is_valid_landline",
    "is_valid_cell_phone",
    "is_valid_email",
    "emails_match",
    "is_valid_cep",
    "strip_cep",
]
