"""
Streamlit app entrypoint - navigation and startup.

This module serves as the entry point and handles:
- Logging setup from the ``app.log_level`` secret
- Navigation to the core pages (Find Shelter, Shelter Dashboard)
- Warming the shelter directory cache on startup
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

st.set_page_config(page_title="Night Shelter Finder", page_icon=":house:", layout="wide")

from src.utils.config import get_app_config, validate_configuration  # noqa: E402 - must import after set_page_config

logger = logging.getLogger(__name__)

__all__ = ["configure_logging", "warm_shelter_cache"]


def configure_logging() -> None:
    level_name = str(get_app_config()["log_level"]).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def warm_shelter_cache() -> bool:
    """Load the shelter directory once so the first page render is fast.

    Returns:
        True when the directory loaded, False otherwise
    """
    try:
        from src.data.ingestion import load_shelter_directory

        df = load_shelter_directory()
        logger.info(f"Shelter directory ready with {len(df)} shelters")
        return True
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load shelter directory: {e}")
        return False


_current_file = Path(__file__).name
_nav_items = [
    ("pages/1_🔎_Find_Shelter.py", "Find Shelter", "🔎"),
    ("pages/20_📊_Shelter_Dashboard.py", "Shelter Dashboard", "📊"),
]


def _build_and_run_app():
    """Build navigation and warm caches.

    Encapsulated to prevent duplicate rendering when pages import app.
    """
    configure_logging()

    for component, issue in validate_configuration().items():
        logger.warning(f"Configuration issue ({component}): {issue}")

    warm_shelter_cache()

    nav_pages = [st.Page(path, title=title, icon=icon) for path, title, icon in _nav_items if path != _current_file]
    pg = st.navigation(nav_pages)
    pg.run()


if __name__ == "__main__":
    _build_and_run_app()
