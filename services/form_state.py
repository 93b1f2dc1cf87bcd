"""Form state tracker: command handlers operating on a FormSession.

The handlers are the only writers of a session. Validity and password
strength are derived on every call from the raw values, never stored.
"""
import logging
from typing import List, Optional

from domain.constants import FIELD_NAMES, PHASE_CONFIRMED, PHASE_EDITING, SUMMARY_FIELDS
from domain.models import FormSession, PasswordStrength, SummaryRow
from services.strength import password_strength
from services.validation import is_digits, is_form_valid, validate_field
from utils.masking import mask_nik

logger = logging.getLogger(__name__)


def _check_field(name: str) -> None:
    if name not in FIELD_NAMES:
        raise KeyError(f"Unknown form field: {name}")


def new_session() -> FormSession:
    return FormSession()


def on_value_changed(session: FormSession, name: str, value: str) -> bool:
    """Store a new value for `name`.

    NIK input containing anything other than digits is rejected and the
    stored value is left as it was. Returns False in that case.
    Once a field has been touched its error is recomputed on every change.
    """
    _check_field(name)
    if name == "nik" and value and not is_digits(value):
        logger.debug("Rejected non-numeric input for nik")
        return False

    session.values[name] = value
    if session.touched.get(name):
        session.errors[name] = validate_field(name, value)
    return True


def on_blurred(session: FormSession, name: str) -> None:
    _check_field(name)
    session.touched[name] = True
    session.errors[name] = validate_field(name, session.values[name])


def visible_error(session: FormSession, name: str) -> Optional[str]:
    """Errors stay hidden until the field has been left at least once."""
    _check_field(name)
    if not session.touched.get(name):
        return None
    return session.errors.get(name)


def form_is_valid(session: FormSession) -> bool:
    return is_form_valid(session.values)


def current_strength(session: FormSession) -> PasswordStrength:
    return password_strength(session.values["kataSandi"])


def on_submitted(session: FormSession) -> bool:
    """Switch to the confirmation display when the whole form is valid."""
    if session.phase != PHASE_EDITING or not form_is_valid(session):
        logger.info("Submission refused (phase=%s)", session.phase)
        return False
    session.phase = PHASE_CONFIRMED
    logger.info("Registration confirmed")
    return True


def on_dismissed(session: FormSession) -> None:
    if session.phase == PHASE_CONFIRMED:
        session.phase = PHASE_EDITING
        logger.debug("Confirmation dismissed")


def confirmation_summary(session: FormSession) -> List[SummaryRow]:
    """Rows shown after a successful submission; the passphrase is omitted."""
    rows: List[SummaryRow] = []
    for label, name in SUMMARY_FIELDS:
        value = session.values[name]
        if name == "nik":
            value = mask_nik(value)
        rows.append(SummaryRow(label=label, value=value))
    return rows
