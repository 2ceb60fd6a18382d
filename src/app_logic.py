import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlencode

import pandas as pd

from src.data.ingestion import load_shelter_directory
from src.utils.cleaning import validate_shelter_data
from src.utils.geo import Coordinate
from src.utils.ranking import DISTANCE_COLUMN, is_full, nearest_shelters

__all__ = [
    "load_application_data",
    "filter_shelters_by_radius",
    "get_unique_amenities",
    "filter_shelters_by_amenities",
    "filter_shelters_by_query",
    "filter_shelters_by_status",
    "run_recommendation",
    "occupancy_rate",
    "compute_dashboard_stats",
    "build_directions_url",
    "validate_shelter_data",
]

logger = logging.getLogger(__name__)


def load_application_data() -> pd.DataFrame:
    """Load the shelter directory for the application.

    Returns:
        pd.DataFrame: Cleaned shelter directory (cached by ``load_shelter_directory``)

    Raises:
        Exception: If the configured directory cannot be read (caught by calling code)
    """
    shelter_df = load_shelter_directory()
    if shelter_df.empty:
        logger.warning("Shelter directory is empty")
    return shelter_df


def filter_shelters_by_radius(df: pd.DataFrame, max_radius_km: float) -> pd.DataFrame:
    """Keep shelters within ``max_radius_km`` of the origin.

    Args:
        df: Ranked shelter DataFrame with "Distance (km)" column
        max_radius_km: Maximum distance threshold in kilometers

    Returns:
        pd.DataFrame: Filtered DataFrame with only shelters within radius
    """
    if df is None or df.empty or DISTANCE_COLUMN not in df.columns:
        return df
    return df[df[DISTANCE_COLUMN] <= max_radius_km].copy()


def _split_amenities(value) -> list[str]:
    if value is None or (not isinstance(value, (list, tuple)) and pd.isna(value)):
        return []
    parts = value if isinstance(value, (list, tuple)) else str(value).split(",")
    return [str(p).strip() for p in parts if str(p).strip()]


def get_unique_amenities(shelter_df: pd.DataFrame) -> list[str]:
    """Sorted list of every amenity offered across the directory."""
    if shelter_df.empty or "Amenities" not in shelter_df.columns:
        return []

    unique_amenities = set()
    for value in shelter_df["Amenities"]:
        unique_amenities.update(_split_amenities(value))
    return sorted(unique_amenities)


def filter_shelters_by_amenities(df: pd.DataFrame, selected_amenities: list[str]) -> pd.DataFrame:
    """Keep shelters offering every selected amenity (case-insensitive)."""
    if df is None or df.empty:
        return df
    if not selected_amenities or "Amenities" not in df.columns:
        return df

    wanted = {a.strip().lower() for a in selected_amenities if a and a.strip()}

    def offers_all(value):
        offered = {a.lower() for a in _split_amenities(value)}
        return wanted.issubset(offered)

    mask = df["Amenities"].apply(offers_all)
    return df[mask].copy()


def filter_shelters_by_query(df: pd.DataFrame, query: Optional[str]) -> pd.DataFrame:
    """Keep shelters whose name or address contains ``query`` (case-insensitive)."""
    if df is None or df.empty or not query or not query.strip():
        return df

    needle = query.strip().lower()
    mask = pd.Series(False, index=df.index)
    for col in ("Shelter Name", "Address"):
        if col in df.columns:
            mask |= df[col].fillna("").astype(str).str.lower().str.contains(needle, regex=False)
    return df[mask].copy()


def filter_shelters_by_status(df: pd.DataFrame, status: Optional[str]) -> pd.DataFrame:
    """Keep shelters with the given status; "all" or None keeps everything."""
    if df is None or df.empty or not status or status.strip().lower() == "all":
        return df
    if "Status" not in df.columns:
        return df.iloc[0:0].copy()

    wanted = status.strip().lower()
    return df[df["Status"].astype(str).str.strip().str.lower() == wanted].copy()


def run_recommendation(
    shelter_df: pd.DataFrame,
    user_lat: float,
    user_lng: float,
    *,
    exclude_full: bool = True,
    max_radius_km: Optional[float] = None,
    selected_amenities: Optional[list[str]] = None,
) -> Tuple[Optional[pd.Series], pd.DataFrame]:
    """Run the shelter recommendation workflow.

    1. Filter by amenities (if specified)
    2. Rank by distance from the origin, optionally dropping full shelters
    3. Filter by maximum radius (if specified)
    4. Pick the nearest shelter that still has beds

    The best match is never a full shelter, even when ``exclude_full`` is False
    and full shelters are listed in the ranking.

    Returns:
        Tuple[Optional[pd.Series], pd.DataFrame]:
            - best: Nearest shelter with free beds (or None)
            - ranked_df: Matching shelters sorted by distance (or empty DataFrame)
    """
    working = shelter_df
    if selected_amenities:
        working = filter_shelters_by_amenities(working, selected_amenities)
        if working.empty:
            return None, pd.DataFrame()

    ranked = nearest_shelters(Coordinate(user_lat, user_lng), working, exclude_full=exclude_full)
    if max_radius_km is not None:
        ranked = filter_shelters_by_radius(ranked, max_radius_km).reset_index(drop=True)
    if ranked.empty:
        return None, pd.DataFrame()

    eligible = ranked[~is_full(ranked)]
    best = eligible.iloc[0] if not eligible.empty else None
    return best, ranked


def occupancy_rate(total_beds: Any, available_beds: Any) -> Optional[float]:
    """Percent of beds in use, or None when the total is unknown or zero."""
    try:
        total = float(total_beds)
        available = float(available_beds)
    except (TypeError, ValueError):
        return None
    if pd.isna(total) or pd.isna(available) or total <= 0:
        return None
    return (total - available) / total * 100


def compute_dashboard_stats(shelter_df: pd.DataFrame) -> Dict[str, Any]:
    """Headline numbers for the staff dashboard.

    Active shelters are those with free beds.
    """
    stats: Dict[str, Any] = {
        "total_shelters": len(shelter_df),
        "active_shelters": 0,
        "total_beds": 0,
        "available_beds": 0,
        "occupied_beds": 0,
        "occupancy_rate": None,
        "status_counts": {"available": 0, "limited": 0, "full": 0},
    }
    if shelter_df.empty:
        return stats

    stats["active_shelters"] = int((~is_full(shelter_df)).sum())

    if "Total Beds" in shelter_df.columns:
        stats["total_beds"] = int(pd.to_numeric(shelter_df["Total Beds"], errors="coerce").fillna(0).sum())
    if "Available Beds" in shelter_df.columns:
        stats["available_beds"] = int(pd.to_numeric(shelter_df["Available Beds"], errors="coerce").fillna(0).sum())
    stats["occupied_beds"] = max(stats["total_beds"] - stats["available_beds"], 0)
    stats["occupancy_rate"] = occupancy_rate(stats["total_beds"], stats["available_beds"])

    if "Status" in shelter_df.columns:
        counts = shelter_df["Status"].value_counts()
        for status in stats["status_counts"]:
            stats["status_counts"][status] = int(counts.get(status, 0))

    return stats


def build_directions_url(destination: Coordinate, origin: Optional[Coordinate] = None) -> str:
    """Google Maps walking directions link to ``destination``."""
    params = {"api": 1, "destination": f"{destination[0]},{destination[1]}", "travelmode": "walking"}
    if origin is not None:
        params["origin"] = f"{origin[0]},{origin[1]}"
    return "https://www.google.com/maps/dir/?" + urlencode(params)
