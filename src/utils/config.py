"""
Configuration and secrets management for the Night Shelter Finder app.

This module provides a centralized way to access application configuration
and secrets, with fallbacks for every value so the app runs without a
secrets file.

Usage:
    from src.utils.config import get_api_config, get_app_config

    # Get geocoding API configuration
    geocoding_config = get_api_config('geocoding')
    user_agent = geocoding_config.get('nominatim_user_agent')

    # Default origin used when no location is supplied
    app_config = get_app_config()
    lat, lng = app_config['default_latitude'], app_config['default_longitude']
"""

import logging
from typing import Any, Dict

import streamlit as st

logger = logging.getLogger(__name__)

# India Gate, New Delhi
DEFAULT_LATITUDE = 28.6129
DEFAULT_LONGITUDE = 77.2295


def get_secret(key_path: str, default: Any = None) -> Any:
    """
    Safely retrieve a secret from Streamlit's secrets management.

    Args:
        key_path: Dot-notation path to the secret (e.g., 'data.shelters_path')
        default: Default value if secret is not found

    Returns:
        The secret value or default if not found

    Examples:
        >>> get_secret('data.shelters_path', '')
        >>> get_secret('geocoding.nominatim_user_agent')
        >>> get_secret('app.debug_mode', False)
    """
    try:
        keys = key_path.split(".")
        value = st.secrets

        for key in keys:
            try:
                value = value[key]
            except Exception:
                return default

        return value
    except Exception as e:
        logger.warning(f"Failed to retrieve secret '{key_path}': {e}")
        return default


def get_api_config(api_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific API or service.

    Args:
        api_name: Name of the API/service (currently only 'geocoding')

    Returns:
        Dictionary containing the API configuration
    """
    if api_name == "geocoding":
        return {
            "nominatim_user_agent": get_secret("geocoding.nominatim_user_agent", "night_shelter_finder"),
            "request_timeout": get_secret("geocoding.request_timeout", 10),
            "rate_limit_delay": get_secret("geocoding.rate_limit_delay", 1.0),
            "max_retries": get_secret("geocoding.max_retries", 3),
            "enabled": get_secret("geocoding.enabled", True),
        }
    else:
        return {}


def get_app_config() -> Dict[str, Any]:
    """
    Get general application configuration.

    Returns:
        Dictionary containing app configuration
    """
    return {
        "environment": get_secret("app.environment", "production"),
        "debug_mode": get_secret("app.debug_mode", False),
        "log_level": get_secret("app.log_level", "INFO"),
        "default_latitude": get_secret("app.default_latitude", DEFAULT_LATITUDE),
        "default_longitude": get_secret("app.default_longitude", DEFAULT_LONGITUDE),
        "limited_threshold": get_secret("app.limited_threshold", 0.2),
        "default_radius_km": get_secret("app.default_radius_km", 10),
    }


def get_data_config() -> Dict[str, Any]:
    """
    Get shelter directory configuration.

    An empty ``shelters_path`` means the bundled sample directory is used.
    """
    return {
        "shelters_path": get_secret("data.shelters_path", ""),
        "cache_ttl_seconds": get_secret("data.cache_ttl_seconds", 300),
    }


def is_api_enabled(api_name: str) -> bool:
    """
    Check if a specific API is enabled and properly configured.

    Args:
        api_name: Name of the API to check

    Returns:
        True if the API is enabled and has required configuration
    """
    if api_name == "geocoding":
        config = get_api_config("geocoding")
        return bool(config["enabled"]) and bool(config["nominatim_user_agent"])
    else:
        return False


def validate_configuration() -> Dict[str, str]:
    """
    Validate the application configuration and return any warnings or errors.

    Returns:
        Dictionary with configuration validation results
    """
    issues = {}

    app_config = get_app_config()
    if app_config["environment"] not in ["development", "staging", "production"]:
        issues["app"] = f"Unknown environment: {app_config['environment']}"

    try:
        lat = float(app_config["default_latitude"])
        lng = float(app_config["default_longitude"])
        if not (-90 <= lat <= 90) or not (-180 <= lng <= 180):
            issues["default_location"] = "Default location is outside valid latitude/longitude ranges"
    except (TypeError, ValueError):
        issues["default_location"] = "Default location must be numeric"

    try:
        threshold = float(app_config["limited_threshold"])
        if not (0 < threshold < 1):
            issues["limited_threshold"] = "limited_threshold should be a fraction between 0 and 1"
    except (TypeError, ValueError):
        issues["limited_threshold"] = "limited_threshold must be numeric"

    data_config = get_data_config()
    path = str(data_config["shelters_path"] or "")
    if path and not path.lower().endswith((".csv", ".xlsx", ".parquet", ".json")):
        issues["data"] = f"Unsupported shelter directory format: {path}"

    return issues


if __name__ == "__main__":
    print("Night Shelter Finder - Configuration Status")
    print("=" * 50)

    issues = validate_configuration()
    if issues:
        print("⚠️  Configuration Issues Found:")
        for component, issue in issues.items():
            print(f"  - {component}: {issue}")
    else:
        print("✅ Configuration validation passed")

    status = "✅ Enabled" if is_api_enabled("geocoding") else "❌ Disabled/Not configured"
    print(f"\n📋 Geocoding: {status}")
    print(f"\n🔧 Environment: {get_app_config()['environment']}")
    print(f"📂 Shelter directory: {get_data_config()['shelters_path'] or 'bundled sample'}")
