import streamlit as st
from typing import Callable

from domain.constants import (
    FIELD_LABELS,
    NIK_HINT,
    NIK_LENGTH,
    PASSPHRASE_MIN_LENGTH,
    PLACEHOLDERS,
    SUBMIT_BLOCKED_LABEL,
    SUBMIT_READY_LABEL,
)
from domain.models import FormSession
from services import form_state
from services.strength import shortfall_message
from .base import inject_base_css, required_label, error_line, hint_line, counter, strength_meter


def widget_key(key_prefix: str, name: str) -> str:
    return f"{key_prefix}_{name}"


def _commit(session: FormSession, key_prefix: str, name: str):
    """on_change callback: Streamlit commits a text input when it loses focus
    (or Enter is pressed), so a commit is a value change followed by a blur."""
    key = widget_key(key_prefix, name)
    accepted = form_state.on_value_changed(session, name, st.session_state[key])
    if not accepted:
        # put the widget back to the last accepted value
        st.session_state[key] = session.values[name]
    form_state.on_blurred(session, name)


def _text_field(session: FormSession, key_prefix: str, name: str, **kwargs):
    key = widget_key(key_prefix, name)
    if key not in st.session_state:
        st.session_state[key] = session.values[name]
    st.text_input(
        required_label(FIELD_LABELS[name]),
        key=key,
        placeholder=PLACEHOLDERS[name],
        on_change=_commit,
        args=(session, key_prefix, name),
        **kwargs,
    )


def _error(session: FormSession, name: str):
    message = form_state.visible_error(session, name)
    if message:
        st.markdown(error_line(message), unsafe_allow_html=True)


def _nik_field(session: FormSession, key_prefix: str):
    _text_field(session, key_prefix, "nik", max_chars=NIK_LENGTH)
    message = form_state.visible_error(session, "nik")
    left = error_line(message) if message else hint_line(NIK_HINT)
    right = counter(len(session.values["nik"]), NIK_LENGTH)
    st.markdown(f'<div class="field-meta">{left}{right}</div>', unsafe_allow_html=True)


def _passphrase_field(session: FormSession, key_prefix: str):
    # password inputs carry Streamlit's own show/hide toggle
    _text_field(session, key_prefix, "kataSandi", type="password")
    passphrase = session.values["kataSandi"]
    strength = form_state.current_strength(session)
    st.markdown(strength_meter(strength), unsafe_allow_html=True)
    st.markdown(
        f'<div class="field-meta">{hint_line(strength.label)}'
        f'{counter(len(passphrase), PASSPHRASE_MIN_LENGTH)}</div>',
        unsafe_allow_html=True,
    )
    if form_state.visible_error(session, "kataSandi") and len(passphrase) < PASSPHRASE_MIN_LENGTH:
        st.markdown(error_line(shortfall_message(passphrase)), unsafe_allow_html=True)


def render(session: FormSession, key_prefix: str, on_submit: Callable[[], None]):
    """
    Renders the registration form bound to `session`.

    Args:
        session (FormSession): The state object the widget callbacks write to.
        key_prefix (str): A unique prefix for Streamlit widget keys.
        on_submit (Callable): Invoked when the enabled submit button is clicked.
    """
    inject_base_css()

    for name in ("namaBapak", "namaIbu"):
        _text_field(session, key_prefix, name)
        _error(session, name)

    # siblings share a row
    col_adik, col_kakak = st.columns(2)
    with col_adik:
        _text_field(session, key_prefix, "namaAdik")
        _error(session, "namaAdik")
    with col_kakak:
        _text_field(session, key_prefix, "namaKakak")
        _error(session, "namaKakak")

    _nik_field(session, key_prefix)

    for name in ("email", "namaKamu"):
        _text_field(session, key_prefix, name)
        _error(session, name)

    _passphrase_field(session, key_prefix)

    ready = form_state.form_is_valid(session)
    st.button(
        SUBMIT_READY_LABEL if ready else SUBMIT_BLOCKED_LABEL,
        key=f"{key_prefix}_submit",
        disabled=not ready,
        type="primary",
        use_container_width=True,
        on_click=on_submit,
    )
