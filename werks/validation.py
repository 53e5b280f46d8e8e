"""
Input validation utilities for Werks.

Provides functions to validate caller inputs such as coordinates,
slice counts and distance bands.
"""

import re
from typing import Any, List

from .exceptions import FormatError

def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Validate that latitude and longitude are valid coordinates.

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        True if valid, False otherwise
    """
    if isinstance(lat, bool) or isinstance(lon, bool):
        return False

    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return False

    # Check latitude range
    if lat < -90 or lat > 90:
        return False

    # Check longitude range
    if lon < -180 or lon > 180:
        return False

    return True

def validate_row_count(n: Any) -> int:
    """
    Validate a row count used for slicing a table.

    Args:
        n: Requested number of rows

    Returns:
        The count as an int

    Raises:
        ValueError: If n is not a non-negative integer
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Row count must be an integer, got {type(n).__name__}")

    if n < 0:
        raise ValueError(f"Row count must be non-negative, got {n}")

    return n

def parse_bands(bands: str) -> List[float]:
    """
    Parse a comma-separated list of distances.

    Args:
        bands: Text such as "50, 100, 200"

    Returns:
        List of positive distances in the order given

    Raises:
        FormatError: If the text is empty or holds a non-positive or non-numeric entry
    """
    if not isinstance(bands, str) or not bands.strip():
        raise FormatError("Distance bands must be a non-empty comma-separated string")

    distances = []
    for part in bands.split(','):
        part = part.strip()
        if not re.fullmatch(r"\d+(?:\.\d+)?", part):
            raise FormatError(f"Invalid distance band {part!r} in {bands!r}")

        distance = float(part)
        if distance <= 0:
            raise FormatError(f"Distance bands must be positive, got {part!r}")

        distances.append(distance)

    return distances
