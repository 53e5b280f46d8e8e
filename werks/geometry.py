"""
Geometry engine interface for polygon intersection.

The intersection itself is delegated to a geometry library. Marshaling code in
``werks.polygons`` only talks to the three operations of ``GeometryEngine``,
so any engine (or a test stub) can be swapped in. ``ShapelyEngine`` is the
default and wraps shapely.
"""

import logging
from typing import Any, Iterator, List, Protocol, Sequence

from shapely.errors import GEOSException
from shapely.geometry import GeometryCollection, MultiPolygon, Polygon
from shapely.validation import explain_validity

from .exceptions import GeometryError

logger = logging.getLogger(__name__)

# Nested coordinate aliases
Point = Sequence[float]
Ring = Sequence[Point]
PolygonCoords = Sequence[Ring]
MultiPolygonCoords = Sequence[PolygonCoords]


class GeometryEngine(Protocol):
    """Operations the polygon intersector needs from a geometry library."""

    def build_multipolygon(self, polygons: MultiPolygonCoords) -> Any:
        """Build a geometry from polygons of closed rings."""
        ...

    def intersection(self, first: Any, second: Any) -> Any:
        """Return the intersection of two geometries built by this engine."""
        ...

    def iter_polygons(self, geometry: Any) -> Iterator[List[List[List[float]]]]:
        """Yield each areal part of a geometry as a list of rings of [x, y] points."""
        ...


class ShapelyEngine:
    """Geometry engine backed by shapely."""

    def build_multipolygon(self, polygons: MultiPolygonCoords) -> MultiPolygon:
        parts = []
        for index, rings in enumerate(polygons):
            exterior, holes = rings[0], rings[1:]

            try:
                polygon = Polygon(exterior, holes)
            except (ValueError, GEOSException) as e:
                logger.error(f"Could not build polygon {index}: {e}")
                raise GeometryError(f"Could not build polygon {index}: {e}") from e

            if not polygon.is_valid:
                reason = explain_validity(polygon)
                logger.error(f"Polygon {index} is invalid: {reason}")
                raise GeometryError(f"Polygon {index} is invalid: {reason}")

            parts.append(polygon)

        multipolygon = MultiPolygon(parts)
        if not multipolygon.is_valid:
            reason = explain_validity(multipolygon)
            logger.error(f"MultiPolygon is invalid: {reason}")
            raise GeometryError(f"MultiPolygon is invalid: {reason}")

        return multipolygon

    def intersection(self, first: Any, second: Any) -> Any:
        try:
            return first.intersection(second)
        except GEOSException as e:
            logger.error(f"Intersection failed: {e}")
            raise GeometryError(f"Intersection failed: {e}") from e

    def iter_polygons(self, geometry: Any) -> Iterator[List[List[List[float]]]]:
        if geometry.is_empty:
            return

        if isinstance(geometry, Polygon):
            yield [
                self._ring_coords(geometry.exterior),
                *[self._ring_coords(ring) for ring in geometry.interiors]
            ]
        elif isinstance(geometry, (MultiPolygon, GeometryCollection)):
            for part in geometry.geoms:
                yield from self.iter_polygons(part)
        else:
            # Points and lines left where the inputs only touch
            logger.debug(f"Skipping non-areal intersection part: {geometry.geom_type}")

    @staticmethod
    def _ring_coords(ring: Any) -> List[List[float]]:
        return [[x, y] for x, y, *_ in ring.coords]
