"""
Unit conversion.
"""

from typing import Optional

from .constants import METERS_TO_MILES


def meters_to_miles(meters: Optional[float]) -> float:
    """
    Convert meters to miles, rounded to 2 decimals.

    Args:
        meters: Distance from Strava (None is treated as 0)

    Returns:
        Distance in miles (e.g., 1609.34 -> 1.0)
    """
    if not meters:
        return 0.0
    return round(meters * METERS_TO_MILES, 2)
