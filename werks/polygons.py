"""
GeoJSON MultiPolygon intersection.

Parses two GeoJSON MultiPolygon strings into nested coordinate lists,
closes any open rings, hands both geometries to a geometry engine for the
intersection, and serializes the resulting polygons back to GeoJSON.
"""

import json
import logging
import math
from numbers import Real
from typing import Any, List, Optional

from .exceptions import GeometryError, ParseError, StructureError
from .geometry import GeometryEngine, ShapelyEngine

logger = logging.getLogger(__name__)

GEOJSON_TYPE = "MultiPolygon"

# Distinct points needed to bound an area
MIN_RING_POINTS = 3

def _is_coordinate(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False

    # Integers beyond float range overflow; JSON also admits NaN/Infinity
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False

def _is_point(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(_is_coordinate(c) for c in value)
    )

def validate_structure(coordinates: Any) -> None:
    """
    Check that coordinates are nested as polygons of rings of [x, y] points.

    Args:
        coordinates: MultiPolygon ``coordinates`` member

    Raises:
        StructureError: On any other nesting
    """
    if not isinstance(coordinates, list):
        raise StructureError(
            f"MultiPolygon coordinates must be a list, got {type(coordinates).__name__}"
        )

    for p, polygon in enumerate(coordinates):
        if not isinstance(polygon, list) or not polygon:
            raise StructureError(f"Polygon {p} must be a non-empty list of rings")

        for r, ring in enumerate(polygon):
            if not isinstance(ring, list) or not ring:
                raise StructureError(f"Ring {r} of polygon {p} must be a non-empty list of points")

            for i, point in enumerate(ring):
                if not _is_point(point):
                    raise StructureError(
                        f"Point {i} of ring {r} of polygon {p} must be [x, y] finite numbers, got {point!r}"
                    )

def count_coords(coordinates: Any) -> int:
    """
    Count the points in the first ring of the first polygon.

    Args:
        coordinates: MultiPolygon-shaped coordinate nesting

    Returns:
        Number of points in that ring

    Raises:
        StructureError: If the nesting is not MultiPolygon-shaped
    """
    try:
        # First level is polygons, second is rings
        first_ring = coordinates[0][0]
    except (IndexError, KeyError, TypeError) as e:
        raise StructureError(f"Coordinates are not MultiPolygon-shaped: {e}") from e

    if not isinstance(first_ring, list) or not all(_is_point(p) for p in first_ring):
        raise StructureError("Coordinates are not MultiPolygon-shaped: first ring is not a list of points")

    return len(first_ring)

def close_ring(ring: List[List[float]]) -> List[List[float]]:
    """
    Return a closed copy of a ring.

    A ring whose last point differs from its first gets the first point
    appended. The input is left untouched.

    Args:
        ring: List of [x, y] points

    Returns:
        New list of [x, y] points with first == last

    Raises:
        GeometryError: If the ring has fewer than 3 distinct points
    """
    closed = [[float(x), float(y)] for x, y in ring]
    if not closed:
        raise GeometryError("A ring needs at least one point")

    if closed[0] != closed[-1]:
        closed.append(list(closed[0]))

    distinct = {tuple(point) for point in closed}
    if len(distinct) < MIN_RING_POINTS:
        logger.error(f"Degenerate ring with {len(distinct)} distinct point(s)")
        raise GeometryError(
            f"A ring needs at least {MIN_RING_POINTS} distinct points, got {len(distinct)}"
        )

    return closed

def close_rings(coordinates: List) -> List:
    """Close every ring of every polygon in MultiPolygon coordinates."""
    return [[close_ring(ring) for ring in polygon] for polygon in coordinates]

def parse_multipolygon(geojson: str) -> List:
    """
    Parse GeoJSON MultiPolygon text into nested coordinate lists.

    Args:
        geojson: Text such as '{"type": "MultiPolygon", "coordinates": [...]}'

    Returns:
        The ``coordinates`` member as nested lists

    Raises:
        ParseError: If the text is not JSON or not a MultiPolygon object
        StructureError: If the coordinates are not MultiPolygon-shaped
    """
    if not isinstance(geojson, (str, bytes, bytearray)):
        raise ParseError(f"GeoJSON must be text, got {type(geojson).__name__}")

    try:
        data = json.loads(geojson)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid GeoJSON text: {e}")
        raise ParseError(f"Invalid GeoJSON text: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"GeoJSON must be an object, got {type(data).__name__}")

    geometry_type = data.get('type')
    if geometry_type != GEOJSON_TYPE:
        raise ParseError(f"Expected GeoJSON type {GEOJSON_TYPE!r}, got {geometry_type!r}")

    if 'coordinates' not in data:
        raise ParseError("GeoJSON MultiPolygon has no 'coordinates' member")

    coordinates = data['coordinates']
    validate_structure(coordinates)

    return coordinates

def dump_multipolygon(coordinates: List) -> str:
    """
    Serialize nested coordinate lists as GeoJSON MultiPolygon text.

    Args:
        coordinates: Polygons of rings of [x, y] points; may be empty

    Returns:
        Compact JSON text
    """
    validate_structure(coordinates)

    return json.dumps(
        {"type": GEOJSON_TYPE, "coordinates": coordinates},
        separators=(',', ':')
    )

def _collect_polygons(geometry: Any, engine: GeometryEngine) -> List:
    result_coords = []

    for rings in engine.iter_polygons(geometry):
        poly_coords = []
        for ring in rings:
            ring_coords = [[float(x), float(y)] for x, y in ring]
            poly_coords.append(ring_coords)
        result_coords.append(poly_coords)

    validate_structure(result_coords)

    return result_coords

def intersect_multipolygons(
    geojson1: str,
    geojson2: str,
    engine: Optional[GeometryEngine] = None
) -> str:
    """
    Intersect two GeoJSON MultiPolygons.

    Args:
        geojson1: First MultiPolygon as GeoJSON text
        geojson2: Second MultiPolygon as GeoJSON text
        engine: Geometry engine to delegate to (default: ShapelyEngine)

    Returns:
        GeoJSON MultiPolygon text; ``coordinates`` is ``[]`` when the
        inputs share no area

    Raises:
        ParseError: If either input is not GeoJSON MultiPolygon text
        StructureError: If coordinates are not MultiPolygon-shaped
        GeometryError: If a ring is degenerate or the engine fails
    """
    if engine is None:
        engine = ShapelyEngine()

    coords1 = close_rings(parse_multipolygon(geojson1))
    coords2 = close_rings(parse_multipolygon(geojson2))

    geom1 = engine.build_multipolygon(coords1)
    geom2 = engine.build_multipolygon(coords2)

    intersection = engine.intersection(geom1, geom2)

    result_coords = _collect_polygons(intersection, engine)
    logger.info(
        f"Intersected {len(coords1)} and {len(coords2)} polygon(s) into {len(result_coords)}"
    )

    return dump_multipolygon(result_coords)
