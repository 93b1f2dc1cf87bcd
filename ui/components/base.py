import streamlit as st

from domain.constants import STRENGTH_SEGMENTS
from domain.models import PasswordStrength

SEGMENT_OFF = "#334155"  # slate-700
MUTED = "#64748B"  # slate-500
GREEN = "#4ADE80"  # green-400
RED = "#F87171"  # red-400


def inject_base_css():
    # emitted on every rerun; Streamlit discards elements a rerun does not repeat
    st.markdown(
        f"""
        <style>
        .req {{color:{RED};}}
        .field-error {{color:{RED}; font-size:12px; margin-top:-8px; margin-bottom:8px;}}
        .field-hint {{color:{MUTED}; font-size:12px; margin-top:-8px; margin-bottom:8px;}}
        .field-meta {{display:flex; justify-content:space-between; align-items:center;}}
        .counter {{font-size:12px; color:{MUTED};}}
        .counter.done {{color:{GREEN};}}
        .meter {{display:flex; gap:4px; margin:4px 0;}}
        .meter .seg {{flex:1; height:6px; border-radius:3px; background:{SEGMENT_OFF};}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def required_label(label: str) -> str:
    return f"{label} *"


def error_line(message: str) -> str:
    return f'<p class="field-error" role="alert">✕ {message}</p>'


def hint_line(message: str) -> str:
    return f'<p class="field-hint">{message}</p>'


def counter(current: int, target: int) -> str:
    cls = "counter done" if current >= target else "counter"
    return f'<span class="{cls}">{current}/{target}</span>'


def strength_meter(strength: PasswordStrength) -> str:
    segments = []
    for i in range(1, STRENGTH_SEGMENTS + 1):
        style = f' style="background:{strength.color};"' if strength.segment_lit(i) else ""
        segments.append(f'<div class="seg"{style}></div>')
    return f'<div class="meter">{"".join(segments)}</div>'
