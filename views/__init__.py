"""View modules for manual routing.

Each page lives under `views/` and exposes a `view()` function that is
registered in `PAGE_REGISTRY` inside `app.py`.
"""
