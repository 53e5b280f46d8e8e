"""Shared fixtures for the Werks test suite."""

from __future__ import annotations

import json

import matplotlib
import pandas as pd
import pytest

matplotlib.use("Agg")

# ---------------------------------------------------------------------------
# Reference shapes
# ---------------------------------------------------------------------------

SQUARE_A = [[0, 0], [0, 2], [2, 2], [2, 0], [0, 0]]
SQUARE_B = [[1, 1], [1, 3], [3, 3], [3, 1], [1, 1]]
SQUARE_FAR = [[10, 10], [10, 12], [12, 12], [12, 10], [10, 10]]


def multipolygon_text(*polygons: list) -> str:
    """Wrap polygons (lists of rings) as GeoJSON MultiPolygon text."""
    return json.dumps({"type": "MultiPolygon", "coordinates": list(polygons)})


class StubEngine:
    """Geometry engine stand-in that records calls and returns a canned result."""

    def __init__(self, result_polygons: list | None = None) -> None:
        self.result_polygons = result_polygons or []
        self.built: list = []
        self.intersected: list = []

    def build_multipolygon(self, polygons):
        self.built.append(polygons)
        return ("geom", len(self.built))

    def intersection(self, first, second):
        self.intersected.append((first, second))
        return "result"

    def iter_polygons(self, geometry):
        assert geometry == "result"
        yield from self.result_polygons


@pytest.fixture
def square_a() -> str:
    return multipolygon_text([SQUARE_A])


@pytest.fixture
def square_b() -> str:
    return multipolygon_text([SQUARE_B])


@pytest.fixture
def stub_engine() -> StubEngine:
    return StubEngine()


@pytest.fixture
def counties() -> pd.DataFrame:
    """Small mixed-type table used by the table and chart tests."""
    return pd.DataFrame(
        {
            "name": ["Hartford", "Fairfield", "New Haven", "Litchfield"],
            "state": ["CT", "CT", "CT", "CT"],
            "pop_2010": [894014, 916829, 862477, 189927],
            "pop_2020": [899498, 957419, 864835, 185186],
        }
    )
