import html
import streamlit as st
from typing import Callable, List

from domain.constants import CONFIRM_CLOSE_LABEL, CONFIRM_SUBTITLE, CONFIRM_TITLE
from domain.models import SummaryRow


def summary_row(row: SummaryRow):
    """
    Displays one label/value pair of the confirmation summary.
    """
    st.markdown(
        f"""
        <div style="
            display: flex;
            justify-content: space-between;
            font-size: 14px;
            padding: 4px 0;
        ">
            <span style="color: #94A3B8;">{row.label}:</span>
            <span style="font-weight: 600;">{html.escape(row.value)}</span>
        </div>
        """,
        unsafe_allow_html=True
    )


def confirmation_card(rows: List[SummaryRow], on_close: Callable[[], None], key: str = "confirm_close"):
    """Render the post-submission summary with a button that closes it."""
    with st.container(border=True):
        st.markdown("<div style='text-align:center; font-size:40px;'>✅</div>", unsafe_allow_html=True)
        st.subheader(CONFIRM_TITLE)
        st.caption(CONFIRM_SUBTITLE)
        with st.container(border=True):
            for row in rows:
                summary_row(row)
        st.button(CONFIRM_CLOSE_LABEL, key=key, on_click=on_close, use_container_width=True)
