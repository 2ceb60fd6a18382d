"""
Shelter directory ingestion.

Loads the shelter directory snapshot from the configured file (CSV, Excel,
Parquet or JSON export of the hosted shelter table) or, when nothing is
configured, from the bundled sample. The result is normalised to the
canonical column layout and cached with Streamlit's cache so every page sees
the same snapshot until the TTL expires or the cache is refreshed.
"""

import logging
from typing import Optional

import pandas as pd
import streamlit as st

from src.data.io_utils import load_dataframe
from src.data.sample_shelters import sample_shelter_frame
from src.utils.cleaning import normalize_columns, normalize_status, validate_and_clean_coordinates
from src.utils.config import get_app_config, get_data_config

logger = logging.getLogger(__name__)

NUMERIC_COLUMNS = ("Total Beds", "Available Beds", "Volunteers")


def prepare_shelter_directory(raw_df: pd.DataFrame, limited_threshold: float = 0.2) -> pd.DataFrame:
    """Normalise a raw directory export: column names, numbers, status and coordinates."""
    df = normalize_columns(raw_df)

    for col in NUMERIC_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    if "Amenities" in df.columns:
        # JSON exports store amenities as lists
        df["Amenities"] = df["Amenities"].apply(
            lambda v: ", ".join(str(a) for a in v) if isinstance(v, (list, tuple)) else v
        )

    if "Shelter ID" in df.columns:
        df["Shelter ID"] = df["Shelter ID"].astype(str)
        before = len(df)
        df = df.drop_duplicates(subset=["Shelter ID"], keep="last")
        if len(df) < before:
            logger.warning(f"Dropped {before - len(df)} duplicate shelter records")

    df = normalize_status(df, limited_threshold=limited_threshold)
    df = validate_and_clean_coordinates(df)
    return df.reset_index(drop=True)


def _load_raw_directory(path: Optional[str]) -> pd.DataFrame:
    if path:
        logger.info(f"Loading shelter directory from {path}")
        return load_dataframe(path)
    logger.info("No shelter directory configured - using bundled sample shelters")
    return sample_shelter_frame()


@st.cache_data(ttl=get_data_config()["cache_ttl_seconds"])
def load_shelter_directory(path: Optional[str] = None) -> pd.DataFrame:
    """Load and normalise the shelter directory.

    Args:
        path: Optional file path; defaults to the ``data.shelters_path`` secret,
            then to the bundled sample directory

    Returns:
        pd.DataFrame in the canonical shelter column layout

    Raises:
        FileNotFoundError: If the configured file does not exist
        ValueError: If the file format is not supported
    """
    path = path or get_data_config()["shelters_path"] or None
    raw_df = _load_raw_directory(path)
    threshold = float(get_app_config()["limited_threshold"])
    df = prepare_shelter_directory(raw_df, limited_threshold=threshold)
    logger.info(f"Loaded {len(df)} shelters")
    return df


def refresh_shelter_directory() -> None:
    """Drop the cached snapshot so the next load re-reads the directory."""
    load_shelter_directory.clear()
    logger.info("Shelter directory cache cleared")
