"""
Werks: helpers for coordinates, polygons, tables and quick maps.

This package contains modules for:
- DMS to decimal coordinate conversion
- GeoJSON MultiPolygon intersection
- DataFrame totals and slicing
- Charts, maps and small statistics
"""

from .exceptions import (
    WerksError,
    FormatError,
    ParseError,
    GeometryError,
    StructureError
)

from .coordinates import (
    dms_to_decimal,
    dms_pair_to_tuple,
    parse_dms
)

from .geometry import (
    GeometryEngine,
    ShapelyEngine
)

from .polygons import (
    intersect_multipolygons,
    parse_multipolygon,
    dump_multipolygon,
    close_ring,
    count_coords
)

from .tables import (
    add_col_totals,
    add_row_totals,
    add_totals,
    drop_first,
    drop_last,
    head,
    tail,
    convert_to_integer,
    filter_dataframes
)

from .stats import gini

from .plotting import cleveland_dot_plot

from .map_builder import create_bullseye_map

from .packages import get_package_versions

__version__ = "0.1.0"

__all__ = [
    # Errors
    'WerksError',
    'FormatError',
    'ParseError',
    'GeometryError',
    'StructureError',

    # Coordinates
    'dms_to_decimal',
    'dms_pair_to_tuple',
    'parse_dms',

    # Polygons
    'GeometryEngine',
    'ShapelyEngine',
    'intersect_multipolygons',
    'parse_multipolygon',
    'dump_multipolygon',
    'close_ring',
    'count_coords',

    # Tables
    'add_col_totals',
    'add_row_totals',
    'add_totals',
    'drop_first',
    'drop_last',
    'head',
    'tail',
    'convert_to_integer',
    'filter_dataframes',

    # Charts, maps and statistics
    'gini',
    'cleveland_dot_plot',
    'create_bullseye_map',

    # Package metadata
    'get_package_versions',
]
