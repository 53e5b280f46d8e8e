"""
Degrees-minutes-seconds coordinate conversion.

Turns text like ``41° 15′ 31″ N, 95° 56′ 15″ W`` into decimal degrees,
either as the text pair ``"41.25861111111111, -95.9375"`` or as a
``(lat, lon)`` tuple of floats.
"""

import logging
import re
from typing import Tuple

from .exceptions import FormatError
from .validation import validate_coordinates

logger = logging.getLogger(__name__)

# Degrees marked with °, º or d (or just spaced off), minutes with ′ or ',
# seconds with ″ or ", hemisphere letter
_DMS_PATTERN = re.compile(
    r"(?P<degrees>\d+)(?:\s*[°ºd]\s*|\s+)"
    r"(?P<minutes>\d+)\s*[′']\s*"
    r"(?P<seconds>\d+(?:\.\d+)?)\s*[″\"]\s*"
    r"(?P<hemisphere>[NSEW])"
)

LATITUDE_HEMISPHERES = ('N', 'S')
LONGITUDE_HEMISPHERES = ('E', 'W')


def _match_dms(token: str) -> re.Match:
    if not isinstance(token, str):
        raise FormatError(f"DMS coordinate must be a string, got {type(token).__name__}")

    match = _DMS_PATTERN.fullmatch(token.strip())
    if match is None:
        logger.error(f"Invalid DMS coordinate: {token!r}")
        raise FormatError(f"Invalid DMS coordinate {token.strip()!r}")

    return match


def _to_decimal(match: re.Match) -> float:
    decimal = (
        float(match['degrees'])
        + float(match['minutes']) / 60
        + float(match['seconds']) / 3600
    )

    if match['hemisphere'] in ('S', 'W'):
        decimal *= -1

    return decimal


def parse_dms(token: str) -> float:
    """
    Convert a single DMS coordinate to decimal degrees.

    Args:
        token: Text such as "95° 56′ 15″ W"

    Returns:
        Decimal degrees, negative for the southern and western hemispheres

    Raises:
        FormatError: If the token does not match the DMS format
    """
    return _to_decimal(_match_dms(token))


def _check_strict(match: re.Match, hemispheres: Tuple[str, str], axis: str) -> None:
    token = match.group(0)

    if match['hemisphere'] not in hemispheres:
        raise FormatError(
            f"{axis.capitalize()} {token!r} must use hemisphere {' or '.join(hemispheres)}"
        )

    if int(match['minutes']) >= 60 or float(match['seconds']) >= 60:
        raise FormatError(f"Minutes and seconds must be below 60 in {token!r}")


def dms_pair_to_tuple(pair: str, strict: bool = False) -> Tuple[float, float]:
    """
    Convert a DMS latitude/longitude pair to a tuple of decimal degrees.

    Args:
        pair: Two DMS coordinates separated by a comma
        strict: Also require N/S then E/W, minutes and seconds below 60
            and values inside the latitude/longitude ranges

    Returns:
        (latitude, longitude) tuple

    Raises:
        FormatError: If the pair is malformed, or fails the strict checks
    """
    if not isinstance(pair, str):
        raise FormatError(f"Coordinate pair must be a string, got {type(pair).__name__}")

    parts = pair.split(',')
    if len(parts) != 2:
        logger.error(f"Expected two comma-separated coordinates, got {pair!r}")
        raise FormatError(
            f"Expected two comma-separated DMS coordinates, got {len(parts)} part(s) in {pair!r}"
        )

    lat_match = _match_dms(parts[0])
    lon_match = _match_dms(parts[1])
    lat = _to_decimal(lat_match)
    lon = _to_decimal(lon_match)

    if strict:
        _check_strict(lat_match, LATITUDE_HEMISPHERES, 'latitude')
        _check_strict(lon_match, LONGITUDE_HEMISPHERES, 'longitude')
        if not validate_coordinates(lat, lon):
            raise FormatError(f"Coordinates out of range: {lat!r}, {lon!r}")

    return (lat, lon)


def dms_to_decimal(pair: str, strict: bool = False) -> str:
    """
    Convert a DMS latitude/longitude pair to decimal degrees.

    Args:
        pair: Text such as "41° 15′ 31″ N, 95° 56′ 15″ W"
        strict: See ``dms_pair_to_tuple``

    Returns:
        "<lat>, <lon>" at full float precision, e.g. "41.25861111111111, -95.9375"

    Raises:
        FormatError: If either coordinate is malformed
    """
    lat, lon = dms_pair_to_tuple(pair, strict=strict)
    return f"{lat!r}, {lon!r}"
