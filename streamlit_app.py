import logging

import streamlit as st

from calorie_board.config.settings import load_settings
from calorie_board.helpers.catalog import DEFAULT_CATALOG, CatalogError, load_catalog

# UI modules
from calorie_board.ui.interactive_form import render_interactive_form
from calorie_board.ui.list_view import render_catalog

logger = logging.getLogger("calorie_board")

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _load_catalog_or_default(settings):
    try:
        return load_catalog(settings.catalog_file)
    except CatalogError as e:
        logger.warning("Falling back to built-in catalog: %s", e)
        st.error(f"Could not load catalog: {e}")
        return DEFAULT_CATALOG


def main():
    settings = load_settings()
    level = LOG_LEVELS.get(settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once handlers exist; keep the level current on reruns
    logging.getLogger().setLevel(level)

    st.set_page_config(
        page_title=settings.page_title,
        page_icon="🍎",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # List styling
    st.markdown("""
    <style>
    .list-category {
        color: #333;
        border-bottom: 2px solid #667eea;
        padding-bottom: 0.25rem;
    }
    .list-items li {
        margin: 0.25rem 0;
    }
    </style>
    """, unsafe_allow_html=True)

    st.title(f"🍎 {settings.page_title}")

    with st.sidebar:
        section = st.selectbox(
            "Section",
            (
                "Calorie Lists",
                "Interactive Form",
            ),
            key="section",
            help="Choose what to display"
        )

    # Route to appropriate section
    if section == "Calorie Lists":
        render_catalog(_load_catalog_or_default(settings))
    elif section == "Interactive Form":
        st.header("📝 Interactive Form")
        render_interactive_form()


if __name__ == "__main__":
    main()
