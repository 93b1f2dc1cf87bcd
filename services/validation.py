"""Field-level validation for the registration form.

Every function here is pure: it only looks at the value it is given and
reports problems as a human-readable message instead of raising.
"""
import re
from typing import Dict, Optional

from domain.constants import (
    FIELD_LABELS,
    FIELD_NAMES,
    MSG_EMAIL_FORMAT,
    MSG_NIK_LENGTH,
    MSG_NIK_NUMERIC,
    MSG_PASSPHRASE_SHORT,
    MSG_REQUIRED,
    NAME_FIELDS,
    NIK_LENGTH,
    PASSPHRASE_MIN_LENGTH,
)

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_DIGITS_RE = re.compile(r"[0-9]*")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.fullmatch(email))


def is_digits(value: str) -> bool:
    """True for an empty string or one made only of ASCII digits."""
    return bool(_DIGITS_RE.fullmatch(value))


def is_valid_nik(nik: str) -> bool:
    return is_digits(nik) and len(nik) == NIK_LENGTH


def _required(name: str) -> str:
    return MSG_REQUIRED.format(label=FIELD_LABELS[name])


def validate_field(name: str, value: str) -> Optional[str]:
    """Return the error message for `value` in field `name`, or None if valid.

    Unknown field names are treated as valid.
    """
    if name in NAME_FIELDS:
        return None if value.strip() else _required(name)

    if name == "nik":
        if not value.strip():
            return _required(name)
        if not is_digits(value):
            return MSG_NIK_NUMERIC
        if len(value) != NIK_LENGTH:
            return MSG_NIK_LENGTH
        return None

    if name == "email":
        if not value.strip():
            return _required(name)
        if not is_valid_email(value):
            return MSG_EMAIL_FORMAT
        return None

    if name == "kataSandi":
        # whitespace counts toward a passphrase, so only literal emptiness is "missing"
        if not value:
            return _required(name)
        if len(value) < PASSPHRASE_MIN_LENGTH:
            return MSG_PASSPHRASE_SHORT.format(count=len(value))
        return None

    return None


def validate_all(values: Dict[str, str]) -> Dict[str, Optional[str]]:
    return {name: validate_field(name, values.get(name, "")) for name in FIELD_NAMES}


def is_form_valid(values: Dict[str, str]) -> bool:
    """Every field filled in (after trimming) and every validator passes."""
    all_filled = all(values.get(name, "").strip() != "" for name in FIELD_NAMES)
    no_errors = all(error is None for error in validate_all(values).values())
    return all_filled and no_errors
