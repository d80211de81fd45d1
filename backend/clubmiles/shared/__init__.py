"""
Shared utilities (NOT business logic).

Usage:
    from clubmiles.shared import week_start, classify_activity_type
    from clubmiles.shared.repository import BaseRepository
"""
from .dates import (
    parse_iso_datetime,
    monday_of,
    week_start,
)
from .activity_types import (
    classify_activity_type,
    is_excluded_type,
)
from .units import meters_to_miles
from .constants import (
    ActivityCategory,
    EXCLUDED_ACTIVITY_TYPES,
    METERS_TO_MILES,
)

__all__ = [
    # Dates
    "parse_iso_datetime",
    "monday_of",
    "week_start",
    # Classification
    "classify_activity_type",
    "is_excluded_type",
    # Units
    "meters_to_miles",
    # Constants
    "ActivityCategory",
    "EXCLUDED_ACTIVITY_TYPES",
    "METERS_TO_MILES",
]
