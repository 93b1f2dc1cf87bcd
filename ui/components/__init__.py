"""
This package provides the reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: Basic, general-purpose pieces like the CSS injector, counters and the strength meter.
- `registration_form`: The eight-field registration form bound to a FormSession.
- `cards`: The confirmation summary shown after a successful submission.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    strength_meter,
    counter,
)

from .cards import (
    summary_row,
    confirmation_card,
)

from . import registration_form
