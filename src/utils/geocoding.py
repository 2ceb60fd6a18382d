"""Geocoding helpers with caching and rate limiting, plus origin resolution."""
import logging
from typing import Any, Optional, Tuple

import streamlit as st
from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from src.utils.addressing import validate_coordinates
from src.utils.config import get_api_config, get_app_config, is_api_enabled
from src.utils.geo import Coordinate

logger = logging.getLogger(__name__)

# Cached factory
_RATE_LIMITED_GEOCODER = None


def _get_rate_limited_geocoder():
    global _RATE_LIMITED_GEOCODER
    if _RATE_LIMITED_GEOCODER is not None:
        return _RATE_LIMITED_GEOCODER

    config = get_api_config("geocoding")
    geolocator = Nominatim(user_agent=config["nominatim_user_agent"])
    rate_limited = RateLimiter(
        geolocator.geocode,
        min_delay_seconds=float(config["rate_limit_delay"]),
        max_retries=int(config["max_retries"]),
    )

    def geocode_fn(q, timeout=config["request_timeout"]):
        return rate_limited(q, timeout=timeout)

    _RATE_LIMITED_GEOCODER = geocode_fn
    return _RATE_LIMITED_GEOCODER


@st.cache_data(ttl=3600)
def _cached_geocode(address: str) -> Optional[Tuple[float, float]]:
    # Geocoder errors propagate so a failed lookup is never cached
    geocode_fn = _get_rate_limited_geocoder()
    location = geocode_fn(address)
    if location:
        return location.latitude, location.longitude
    return None


def geocode_address_with_cache(address: str) -> Optional[Tuple[float, float]]:
    """Geocode ``address`` to ``(lat, lng)``.

    Found and not-found results are cached for an hour. Timeouts and service
    errors return None with a warning and are retried on the next call.
    """
    try:
        return _cached_geocode(address)
    except (GeocoderTimedOut, GeocoderServiceError, GeocoderUnavailable) as e:
        logger.warning(f"Geocoding failed for '{address}': {e}")
        st.warning(handle_geocoding_error(address, e))
        return None


def handle_geocoding_error(address: str, error: Exception) -> str:
    et = str(error).lower()
    if "timeout" in et or "timed out" in et:
        return "⏱️ **Geocoding Timeout**: The address lookup service is taking too long. Please try again in a moment."
    if "unavailable" in et or "service" in et:
        return "🔌 **Service Unavailable**: The geocoding service is temporarily unavailable. Please try again later."
    if "rate" in et or "limit" in et:
        return "🚦 **Rate Limited**: Too many requests to the geocoding service. Please wait a moment and try again."
    if "network" in et or "connection" in et:
        return "🌐 **Network Error**: Cannot connect to the geocoding service. Please check your internet connection."
    return f"❌ **Geocoding Error**: Unable to find location for '{address}'. (Error: {type(error).__name__})"


def default_origin() -> Coordinate:
    config = get_app_config()
    return Coordinate(float(config["default_latitude"]), float(config["default_longitude"]))


def resolve_origin(
    address: Optional[str] = None, lat: Optional[Any] = None, lng: Optional[Any] = None
) -> Tuple[Coordinate, str]:
    """Work out the reference point for ranking.

    Explicit coordinates win, then a geocoded address (skipped when the
    ``geocoding.enabled`` secret is false), then the configured default location.

    Returns:
        Tuple of (origin, source) where source is "coordinates", "geocoded" or "default"
    """
    if lat is not None and lng is not None:
        try:
            lat_f, lng_f = float(lat), float(lng)
        except (TypeError, ValueError):
            lat_f = lng_f = None
        if lat_f is not None:
            ok, msg = validate_coordinates(lat_f, lng_f)
            if ok:
                return Coordinate(lat_f, lng_f), "coordinates"
            logger.warning(f"Ignoring supplied coordinates ({lat}, {lng}): {msg}")

    if address and address.strip():
        if not is_api_enabled("geocoding"):
            logger.info("Geocoding is disabled, using default location")
            return default_origin(), "default"
        result = geocode_address_with_cache(address.strip())
        if result is not None:
            return Coordinate(float(result[0]), float(result[1])), "geocoded"
        logger.info(f"Could not geocode '{address}', using default location")

    return default_origin(), "default"
