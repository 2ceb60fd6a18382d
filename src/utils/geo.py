"""Great-circle distance helpers and distance formatting."""
from typing import List, NamedTuple, Optional

import numpy as np
import pandas as pd

EARTH_RADIUS_KM = 6371.0


class Coordinate(NamedTuple):
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


def _haversine_km(lat1, lng1, lat2, lng2):
    # Works on scalars and numpy arrays alike
    lat1_rad = np.radians(lat1)
    lat2_rad = np.radians(lat2)
    dlat = np.radians(np.subtract(lat2, lat1))
    dlng = np.radians(np.subtract(lng2, lng1))

    h = np.sin(dlat / 2) ** 2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlng / 2) ** 2
    # Rounding can push h a hair past 1 for near-antipodal points
    h = np.clip(h, 0.0, 1.0)
    return 2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in kilometers between two ``(lat, lng)`` pairs.

    Inputs are not validated; out-of-range or non-finite values give
    meaningless results.

    Examples:
        >>> round(distance_km((28.6129, 77.2295), (28.6315, 77.2167)), 1)
        2.4
    """
    return float(_haversine_km(a[0], a[1], b[0], b[1]))


def calculate_distances(origin: Coordinate, shelter_df: pd.DataFrame) -> List[Optional[float]]:
    """Distance from ``origin`` to every row of ``shelter_df`` in kilometers.

    Rows whose Latitude or Longitude is missing or non-numeric get ``None``.
    """
    if shelter_df.empty:
        return []

    lat_arr = pd.to_numeric(shelter_df["Latitude"], errors="coerce").to_numpy(dtype=float)
    lng_arr = pd.to_numeric(shelter_df["Longitude"], errors="coerce").to_numpy(dtype=float)

    valid = ~np.isnan(lat_arr) & ~np.isnan(lng_arr)
    distances = np.full(len(shelter_df), np.nan)
    distances[valid] = _haversine_km(origin[0], origin[1], lat_arr[valid], lng_arr[valid])

    return [None if np.isnan(d) else float(d) for d in distances]


def format_distance(km: float) -> str:
    """Human-readable distance: meters below 1 km, else km with one decimal.

    Meters are rounded half-up to the nearest whole meter.
    """
    if km < 1:
        return f"{int(np.floor(km * 1000 + 0.5))} m"
    return f"{km:.1f} km"
