"""Nearest-shelter ranking and recommended-shelter selection."""
import logging
from typing import Iterable, Mapping, Optional, Union

import pandas as pd

from src.utils.geo import Coordinate, calculate_distances

logger = logging.getLogger(__name__)

DISTANCE_COLUMN = "Distance (km)"

ShelterInput = Union[pd.DataFrame, Iterable[Mapping]]


def _as_frame(shelters: ShelterInput) -> pd.DataFrame:
    if isinstance(shelters, pd.DataFrame):
        return shelters.copy(deep=True)
    return pd.DataFrame(list(shelters))


def is_full(shelter_df: pd.DataFrame) -> pd.Series:
    """Boolean mask of shelters with no free beds.

    A shelter is full when its Status is "full" or, when the column exists,
    its Available Beds count is zero or less. "limited" shelters are not full.
    """
    mask = pd.Series(False, index=shelter_df.index)
    if "Status" in shelter_df.columns:
        mask |= shelter_df["Status"].astype(str).str.strip().str.lower().eq("full")
    if "Available Beds" in shelter_df.columns:
        beds = pd.to_numeric(shelter_df["Available Beds"], errors="coerce")
        mask |= beds.notna() & (beds <= 0)
    return mask


def nearest_shelters(origin: Coordinate, shelters: ShelterInput, exclude_full: bool = True) -> pd.DataFrame:
    """Rank shelters by distance from ``origin``, nearest first.

    Args:
        origin: ``(lat, lng)`` reference point
        shelters: Shelter DataFrame (or list of shelter dicts) with Latitude/Longitude
        exclude_full: Drop full shelters before ranking

    Returns:
        pd.DataFrame: New frame with a "Distance (km)" column, sorted ascending.
        Shelters at the same distance keep their input order. The input is not modified.
    """
    df = _as_frame(shelters)
    if df.empty:
        return df.assign(**{DISTANCE_COLUMN: pd.Series(dtype=float)})

    if exclude_full:
        df = df[~is_full(df)].copy()

    df[DISTANCE_COLUMN] = pd.Series(calculate_distances(origin, df), index=df.index, dtype=float)

    missing = df[DISTANCE_COLUMN].isna()
    if missing.any():
        logger.warning(f"Skipping {int(missing.sum())} shelters without usable coordinates")
        df = df[~missing].copy()

    return df.sort_values(by=DISTANCE_COLUMN, kind="mergesort").reset_index(drop=True)


def recommended_shelter(origin: Coordinate, shelters: ShelterInput) -> Optional[pd.Series]:
    """Nearest shelter with free beds, or None when every shelter is full."""
    ranked = nearest_shelters(origin, shelters, exclude_full=True)
    if ranked.empty:
        logger.info("No shelter with available beds found")
        return None
    return ranked.iloc[0]
