"""
Exception taxonomy for Werks.

Every error raised by the library derives from ``WerksError``. The concrete
errors also derive from ``ValueError`` because each one reports bad input.

- ``FormatError``    - malformed DMS coordinate text.
- ``ParseError``     - text that is not a GeoJSON MultiPolygon.
- ``GeometryError``  - degenerate or invalid rings, geometry engine failures.
- ``StructureError`` - coordinate nesting that is not MultiPolygon-shaped.
"""


class WerksError(Exception):
    """Base exception for all Werks errors."""


class FormatError(WerksError, ValueError):
    """Raised when DMS coordinate text does not match the expected format."""


class ParseError(WerksError, ValueError):
    """Raised when GeoJSON text cannot be parsed into a MultiPolygon."""


class GeometryError(WerksError, ValueError):
    """Raised when a ring or polygon cannot be built or intersected."""


class StructureError(WerksError, ValueError):
    """Raised when coordinates are not nested as polygons of rings of points."""
