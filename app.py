import logging
import streamlit as st

from domain.constants import PAGE_TITLE
from views import registration

# --- Page Registry ---
# Maps a page key to its label and rendering function.
PAGE_REGISTRY = {
    "registration": {
        "label": "📝 Pendaftaran",
        "render_func": registration.view,
    },
}
DEFAULT_PAGE = "registration"


def main():
    """
    Main application entry point.

    Sets up the page and renders the registration view. The registry keeps
    room for further pages without changing the router.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    st.set_page_config(page_title=PAGE_TITLE, page_icon="⛰️", layout="centered")

    page = PAGE_REGISTRY[DEFAULT_PAGE]
    page["render_func"]()


if __name__ == "__main__":
    main()
