import streamlit as st

from domain.constants import PAGE_SUBTITLE, PAGE_TITLE, PHASE_CONFIRMED
from domain.models import FormSession
from services import form_state
from ui.components import registration_form, confirmation_card

SESSION_KEY = "registration_session"
KEY_PREFIX = "reg"


def get_session() -> FormSession:
    """Return the form session of this browser tab, creating it on first render."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = form_state.new_session()
    return st.session_state[SESSION_KEY]


def view():
    st.markdown("<div style='text-align:center; font-size:40px;'>⛰️</div>", unsafe_allow_html=True)
    st.header(PAGE_TITLE)
    st.caption(PAGE_SUBTITLE)

    session = get_session()

    if session.phase == PHASE_CONFIRMED:
        confirmation_card(
            form_state.confirmation_summary(session),
            on_close=lambda: form_state.on_dismissed(session),
            key=f"{KEY_PREFIX}_close",
        )
        return

    registration_form.render(
        session,
        key_prefix=KEY_PREFIX,
        on_submit=lambda: form_state.on_submitted(session),
    )
