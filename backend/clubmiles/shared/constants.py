"""
Unified constants for activity categories and unit conversion.

This module provides a single source of truth for the category labels
stored on activities and shown on the leaderboard.
"""

from enum import Enum


class ActivityCategory(str, Enum):
    """
    Display categories stored in ``activities.type``.

    Anything Strava reports that doesn't fall into one of these is stored
    as its capitalized raw value (see classify_activity_type).
    """
    CYCLING = "Cycling"
    RUNNING = "Running"
    SWIMMING = "Swimming"
    WALKING = "Walking"
    OTHER = "Other"


# Strava types (lowercased) -> our category
CYCLING_STRAVA_TYPES: frozenset[str] = frozenset({
    "ride",
    "virtualride",
    "ebikeride",
    "handcycle",
    "velomobile",
    "gravelride",
    "mountainbikeride",
})

RUNNING_STRAVA_TYPES: frozenset[str] = frozenset({"run", "virtualrun", "trailrun"})

SWIMMING_STRAVA_TYPES: frozenset[str] = frozenset({"swim"})

WALKING_STRAVA_TYPES: frozenset[str] = frozenset({"walk", "hike"})


# Categories that never count towards club miles.
# Matched against the classified value, so these are Strava's own spelling.
EXCLUDED_ACTIVITY_TYPES: tuple[str, ...] = (
    "Workout",
    "Yoga",
    "WeightTraining",
    "Rowing",
    "StandUpPaddling",
    "Surfing",
    "WaterSport",
    "Kayaking",
    "Canoeing",
    "Windsurf",
)


METERS_TO_MILES = 0.000621371
