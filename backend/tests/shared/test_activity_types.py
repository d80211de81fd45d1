"""
Tests for activity type classification and unit conversion.
"""

import pytest

from clubmiles.shared.activity_types import classify_activity_type, is_excluded_type
from clubmiles.shared.constants import EXCLUDED_ACTIVITY_TYPES
from clubmiles.shared.units import meters_to_miles


# =============================================================================
# Test classify_activity_type
# =============================================================================

class TestClassifyActivityType:
    """Tests for classify_activity_type function."""

    @pytest.mark.parametrize("raw", [
        "Ride", "VirtualRide", "EBikeRide", "MountainBikeRide", "GravelRide",
    ])
    def test_cycling(self, raw):
        assert classify_activity_type(raw) == "Cycling"

    @pytest.mark.parametrize("raw", ["Run", "TrailRun", "VirtualRun"])
    def test_running(self, raw):
        assert classify_activity_type(raw) == "Running"

    def test_swimming(self):
        assert classify_activity_type("Swim") == "Swimming"

    @pytest.mark.parametrize("raw", ["Walk", "Hike"])
    def test_walking(self, raw):
        assert classify_activity_type(raw) == "Walking"

    def test_case_insensitive(self):
        assert classify_activity_type("ride") == "Cycling"
        assert classify_activity_type("TRAILRUN") == "Running"
        assert classify_activity_type("hIkE") == "Walking"

    def test_unknown_keeps_rest_of_string(self):
        """Only the first character is upper-cased."""
        assert classify_activity_type("WeightTraining") == "WeightTraining"
        assert classify_activity_type("yoga") == "Yoga"
        assert classify_activity_type("rockClimbing") == "RockClimbing"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_is_other(self, raw):
        assert classify_activity_type(raw) == "Other"

    @pytest.mark.parametrize("raw", [
        "Ride", "Run", "Swim", "Walk", "Yoga", "kayaking", "Crossfit", "",
    ])
    def test_idempotent(self, raw):
        """Classifying a category again yields the same category."""
        once = classify_activity_type(raw)
        assert classify_activity_type(once) == once


# =============================================================================
# Test is_excluded_type
# =============================================================================

class TestIsExcludedType:
    """Tests for is_excluded_type function."""

    @pytest.mark.parametrize("category", EXCLUDED_ACTIVITY_TYPES)
    def test_excluded(self, category):
        assert is_excluded_type(category)

    @pytest.mark.parametrize("category", ["Cycling", "Running", "Swimming", "Walking", "Other"])
    def test_counted(self, category):
        assert not is_excluded_type(category)

    def test_lowercase_raw_yoga_excluded_after_classification(self):
        assert is_excluded_type(classify_activity_type("yoga"))

    def test_exact_list(self):
        assert set(EXCLUDED_ACTIVITY_TYPES) == {
            "Workout", "Yoga", "WeightTraining", "Rowing", "StandUpPaddling",
            "Surfing", "WaterSport", "Kayaking", "Canoeing", "Windsurf",
        }


# =============================================================================
# Test meters_to_miles
# =============================================================================

class TestMetersToMiles:
    """Tests for meters_to_miles function."""

    def test_one_mile(self):
        assert meters_to_miles(1609.34) == 1.0

    def test_rounded_to_two_decimals(self):
        assert meters_to_miles(5000) == 3.11
        assert meters_to_miles(10000) == 6.21

    @pytest.mark.parametrize("meters", [0, 0.0, None])
    def test_missing_distance_is_zero(self, meters):
        assert meters_to_miles(meters) == 0.0
