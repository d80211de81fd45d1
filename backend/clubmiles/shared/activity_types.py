"""
Strava activity type classification.
"""

from typing import Optional

from .constants import (
    ActivityCategory,
    CYCLING_STRAVA_TYPES,
    RUNNING_STRAVA_TYPES,
    SWIMMING_STRAVA_TYPES,
    WALKING_STRAVA_TYPES,
    EXCLUDED_ACTIVITY_TYPES,
)


def classify_activity_type(raw_type: Optional[str]) -> str:
    """
    Map a raw Strava type to a display category.

    Matching is case-insensitive. Unknown types pass through with the
    first character upper-cased and the rest untouched, so "WeightTraining"
    stays "WeightTraining" and "yoga" becomes "Yoga".

    Args:
        raw_type: Strava ``type`` or ``sport_type`` value

    Returns:
        Category label (e.g., 'Cycling', 'Running', 'Other')
    """
    if not raw_type:
        return ActivityCategory.OTHER.value

    lowered = raw_type.lower()

    if lowered in CYCLING_STRAVA_TYPES:
        return ActivityCategory.CYCLING.value
    if lowered in RUNNING_STRAVA_TYPES:
        return ActivityCategory.RUNNING.value
    if lowered in SWIMMING_STRAVA_TYPES:
        return ActivityCategory.SWIMMING.value
    if lowered in WALKING_STRAVA_TYPES:
        return ActivityCategory.WALKING.value

    return raw_type[0].upper() + raw_type[1:]


def is_excluded_type(category: str) -> bool:
    """Check if a classified category is dropped from sync and cleaned up."""
    return category in EXCLUDED_ACTIVITY_TYPES
