"""Pytest configuration helpers.

Ensure the project root is on sys.path so tests can import the `src` package
when pytest is invoked from the repository root or an isolated test runner.
"""

import math
import sys
from pathlib import Path

import pandas as pd
import pytest


def pytest_configure():
    # Insert the repository root (parent of the tests directory) at the front
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


def _reference_haversine_km(lat1, lng1, lat2, lng2):
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lng2 - lng1)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * 6371.0 * math.asin(math.sqrt(h))


@pytest.fixture
def reference_haversine_km():
    """Plain-math Haversine used to check results independently of numpy."""
    return _reference_haversine_km


@pytest.fixture
def nyc_shelters():
    """Five New York shelters; Safe Harbor House is full."""
    return pd.DataFrame(
        [
            {
                "Shelter ID": "nyc-1",
                "Shelter Name": "Hope Haven Center",
                "Latitude": 40.7128,
                "Longitude": -74.006,
                "Status": "available",
                "Total Beds": 60,
                "Available Beds": 22,
            },
            {
                "Shelter ID": "nyc-2",
                "Shelter Name": "Safe Harbor House",
                "Latitude": 40.7831,
                "Longitude": -73.9712,
                "Status": "full",
                "Total Beds": 40,
                "Available Beds": 0,
            },
            {
                "Shelter ID": "nyc-3",
                "Shelter Name": "Brooklyn Bridge Shelter",
                "Latitude": 40.6782,
                "Longitude": -73.9442,
                "Status": "limited",
                "Total Beds": 80,
                "Available Beds": 6,
            },
            {
                "Shelter ID": "nyc-4",
                "Shelter Name": "Midtown Refuge",
                "Latitude": 40.7505,
                "Longitude": -73.9934,
                "Status": "limited",
                "Total Beds": 50,
                "Available Beds": 3,
            },
            {
                "Shelter ID": "nyc-5",
                "Shelter Name": "Harlem Hope House",
                "Latitude": 40.8116,
                "Longitude": -73.9465,
                "Status": "available",
                "Total Beds": 70,
                "Available Beds": 31,
            },
        ]
    )


@pytest.fixture
def sample_shelters():
    """The bundled Delhi shelter directory as a raw DataFrame."""
    from src.data.sample_shelters import sample_shelter_frame

    return sample_shelter_frame()


@pytest.fixture
def clear_streamlit_caches():
    """Start and finish with empty Streamlit data caches."""
    import streamlit as st

    st.cache_data.clear()
    yield
    st.cache_data.clear()
