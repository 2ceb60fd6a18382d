"""Tests for the shelter recommendation workflow and dashboard helpers."""
from urllib.parse import parse_qs, urlparse

import pandas as pd
import pytest

from src.app_logic import (
    build_directions_url,
    compute_dashboard_stats,
    filter_shelters_by_amenities,
    filter_shelters_by_query,
    filter_shelters_by_radius,
    filter_shelters_by_status,
    get_unique_amenities,
    occupancy_rate,
    run_recommendation,
)
from src.data.ingestion import prepare_shelter_directory
from src.utils.geo import Coordinate
from src.utils.ranking import DISTANCE_COLUMN

INDIA_GATE = (28.6129, 77.2295)


@pytest.fixture
def delhi_directory(sample_shelters):
    return prepare_shelter_directory(sample_shelters)


@pytest.fixture
def shelters_at_various_distances():
    return pd.DataFrame({"Shelter Name": [f"Shelter_{i}" for i in range(4)], DISTANCE_COLUMN: [0.4, 2.0, 4.9, 12.0]})


class TestFilterSheltersByRadius:
    def test_keeps_shelters_within_radius(self, shelters_at_various_distances):
        result = filter_shelters_by_radius(shelters_at_various_distances, 5)

        assert list(result["Shelter Name"]) == ["Shelter_0", "Shelter_1", "Shelter_2"]
        assert all(result[DISTANCE_COLUMN] <= 5)

    def test_radius_is_inclusive(self, shelters_at_various_distances):
        assert len(filter_shelters_by_radius(shelters_at_various_distances, 2.0)) == 2

    def test_empty_dataframe(self):
        df = pd.DataFrame(columns=["Shelter Name", DISTANCE_COLUMN])

        result = filter_shelters_by_radius(df, 10.0)

        assert result.empty
        assert list(result.columns) == ["Shelter Name", DISTANCE_COLUMN]

    def test_without_distance_column_returns_input(self):
        df = pd.DataFrame({"Shelter Name": ["A"]})
        assert filter_shelters_by_radius(df, 1.0) is df


class TestAmenities:
    def test_unique_amenities_sorted(self, delhi_directory):
        amenities = get_unique_amenities(delhi_directory)

        assert amenities == sorted(amenities)
        assert {"Blankets", "Medical Aid", "WiFi", "Counseling"}.issubset(amenities)
        assert len(amenities) == len(set(amenities))

    def test_unique_amenities_without_column(self):
        assert get_unique_amenities(pd.DataFrame({"Shelter Name": ["A"]})) == []

    def test_filter_requires_every_selected_amenity(self, delhi_directory):
        result = filter_shelters_by_amenities(delhi_directory, ["medical aid", "Meals"])

        assert set(result["Shelter ID"]) == {"1", "5"}

    def test_no_selection_returns_everything(self, delhi_directory):
        assert len(filter_shelters_by_amenities(delhi_directory, [])) == len(delhi_directory)


class TestDirectorySearch:
    @pytest.mark.parametrize(
        "query, expected_ids",
        [
            ("isbt", {"1", "5"}),
            ("GIRLS", {"3", "8"}),
            ("  old delhi ", {"6", "8"}),
            ("Nowhere", set()),
        ],
    )
    def test_query_matches_name_or_address(self, delhi_directory, query, expected_ids):
        assert set(filter_shelters_by_query(delhi_directory, query)["Shelter ID"]) == expected_ids

    def test_blank_query_returns_everything(self, delhi_directory):
        assert len(filter_shelters_by_query(delhi_directory, "")) == 8
        assert len(filter_shelters_by_query(delhi_directory, None)) == 8

    def test_query_is_literal_text(self, delhi_directory):
        assert filter_shelters_by_query(delhi_directory, "Govt.*").empty

    @pytest.mark.parametrize("status, expected", [("all", 8), ("available", 4), ("Limited", 3), ("full", 1)])
    def test_status_filter(self, delhi_directory, status, expected):
        assert len(filter_shelters_by_status(delhi_directory, status)) == expected

    def test_status_filter_without_status_column(self):
        assert filter_shelters_by_status(pd.DataFrame({"Shelter Name": ["A"]}), "full").empty

    def test_search_and_status_combined(self, delhi_directory):
        """Test the directory view: "Showing 1 of 8" for ISBT shelters with limited beds."""
        result = filter_shelters_by_status(filter_shelters_by_query(delhi_directory, "ISBT"), "limited")

        assert result["Shelter Name"].tolist() == ["Govt. Boys School - Kashmere Gate"]


class TestRunRecommendation:
    def test_recommends_nearest_with_beds(self, delhi_directory):
        """Test that India Gate resolves to the Connaught Place school."""
        best, ranked = run_recommendation(delhi_directory, *INDIA_GATE)

        assert best["Shelter Name"] == "Govt. Co-ed School - Connaught Place"
        assert len(ranked) == 7
        assert ranked[DISTANCE_COLUMN].is_monotonic_increasing

    def test_full_shelters_listed_but_never_recommended(self, delhi_directory):
        """Test that the AIIMS shelter (full, nearest to AIIMS) is ranked but not picked."""
        aiims = (28.5689, 77.21)

        best, ranked = run_recommendation(delhi_directory, *aiims, exclude_full=False)

        assert ranked.iloc[0]["Status"] == "full"
        assert best["Status"] != "full"
        assert len(ranked) == 8

    def test_radius_with_no_matches(self, delhi_directory):
        best, ranked = run_recommendation(delhi_directory, 40.758, -73.9855, max_radius_km=5)

        assert best is None
        assert ranked.empty

    def test_amenity_filter_without_matches(self, delhi_directory):
        best, ranked = run_recommendation(delhi_directory, *INDIA_GATE, selected_amenities=["Swimming Pool"])

        assert best is None
        assert ranked.empty

    def test_amenity_filter_changes_recommendation(self, delhi_directory):
        best, _ = run_recommendation(delhi_directory, *INDIA_GATE, selected_amenities=["WiFi"])

        assert best["Shelter Name"] == "Govt. Boys School - Kashmere Gate"

    def test_does_not_modify_directory(self, delhi_directory):
        before = delhi_directory.copy(deep=True)

        run_recommendation(delhi_directory, *INDIA_GATE, max_radius_km=3)

        pd.testing.assert_frame_equal(delhi_directory, before)


class TestDashboardStats:
    def test_sample_directory_totals(self, delhi_directory):
        stats = compute_dashboard_stats(delhi_directory)

        assert stats["total_shelters"] == 8
        assert stats["active_shelters"] == 7
        assert stats["total_beds"] == 925
        assert stats["available_beds"] == 185
        assert stats["occupied_beds"] == 740
        assert stats["occupancy_rate"] == pytest.approx(80.0)
        assert stats["status_counts"] == {"available": 4, "limited": 3, "full": 1}

    def test_stale_status_counts_agree_with_active_shelters(self, sample_shelters):
        """Test a shelter marked available but reporting no free beds."""
        raw = sample_shelters.copy()
        raw.loc[raw["Shelter ID"] == "7", "Available Beds"] = 0

        stats = compute_dashboard_stats(prepare_shelter_directory(raw))

        assert stats["active_shelters"] == 6
        assert stats["status_counts"]["full"] == 2
        assert stats["total_shelters"] - stats["active_shelters"] == stats["status_counts"]["full"]

    def test_empty_directory(self):
        stats = compute_dashboard_stats(pd.DataFrame())

        assert stats["total_shelters"] == 0
        assert stats["occupancy_rate"] is None

    @pytest.mark.parametrize(
        "total, available, expected",
        [(100, 0, 100.0), (150, 42, 72.0), (80, 80, 0.0), (0, 0, None), (None, 5, None), ("n/a", 5, None)],
    )
    def test_occupancy_rate(self, total, available, expected):
        result = occupancy_rate(total, available)
        if expected is None:
            assert result is None
        else:
            assert result == pytest.approx(expected)


def test_build_directions_url():
    url = build_directions_url(Coordinate(28.6315, 77.2167), origin=Coordinate(28.6129, 77.2295))

    parsed = urlparse(url)
    params = parse_qs(parsed.query)
    assert parsed.netloc == "www.google.com"
    assert params["destination"] == ["28.6315,77.2167"]
    assert params["origin"] == ["28.6129,77.2295"]
    assert params["travelmode"] == ["walking"]


def test_build_directions_url_without_origin():
    params = parse_qs(urlparse(build_directions_url((40.7505, -73.9934))).query)

    assert "origin" not in params
    assert params["destination"] == ["40.7505,-73.9934"]
