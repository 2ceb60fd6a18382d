"""Utilities package for the Night Shelter Finder.

Re-export stable helper functions from the utility submodules.
"""
# flake8: noqa: F401

from .addressing import validate_address, validate_coordinates, validate_phone_number
from .cleaning import (
    derive_status,
    normalize_columns,
    normalize_status,
    safe_numeric_conversion,
    validate_and_clean_coordinates,
    validate_shelter_data,
)
from .geo import Coordinate, calculate_distances, distance_km, format_distance
from .geocoding import geocode_address_with_cache, handle_geocoding_error, resolve_origin
from .io_utils import format_phone_number, get_word_bytes, handle_streamlit_error, sanitize_filename
from .ranking import is_full, nearest_shelters, recommended_shelter

__all__ = [
    # Geo-ranking core
    "Coordinate",
    "calculate_distances",
    "distance_km",
    "format_distance",
    "is_full",
    "nearest_shelters",
    "recommended_shelter",
    # Directory cleaning
    "derive_status",
    "normalize_columns",
    "normalize_status",
    "safe_numeric_conversion",
    "validate_and_clean_coordinates",
    "validate_shelter_data",
    # Origin resolution
    "geocode_address_with_cache",
    "handle_geocoding_error",
    "resolve_origin",
    # Validation and IO
    "validate_address",
    "validate_coordinates",
    "validate_phone_number",
    "format_phone_number",
    "get_word_bytes",
    "handle_streamlit_error",
    "sanitize_filename",
]
