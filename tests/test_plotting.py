"""Unit tests for the Cleveland dot plot."""

from __future__ import annotations

import io

import numpy as np
import pandas as pd
import pytest
from matplotlib.figure import Figure

from werks.plotting import cleveland_dot_plot


def _axes(fig: Figure):
    assert len(fig.axes) == 1
    return fig.axes[0]


class TestClevelandDotPlot:
    """Sorted dots, trend curve, threshold and reference lines."""

    def test_returns_figure(self, counties: pd.DataFrame) -> None:
        fig = cleveland_dot_plot(counties, "pop_2020", "name", xlabel="Population")
        assert isinstance(fig, Figure)

        ax = _axes(fig)
        assert ax.get_xlabel() == "Population"
        assert ax.get_title() == "Cleveland Dot Plot"

    def test_labels_sorted_descending(self, counties: pd.DataFrame) -> None:
        ax = _axes(cleveland_dot_plot(counties, "pop_2020", "name"))
        labels = [t.get_text() for t in ax.get_yticklabels()]
        assert labels == ["Fairfield", "Hartford", "New Haven", "Litchfield"]

    def test_largest_on_top(self, counties: pd.DataFrame) -> None:
        ax = _axes(cleveland_dot_plot(counties, "pop_2020", "name"))
        bottom, top = ax.get_ylim()
        assert bottom > top

    def test_threshold_line(self, counties: pd.DataFrame) -> None:
        ax = _axes(cleveland_dot_plot(counties, "pop_2020", "name"))
        threshold = [line for line in ax.get_lines() if line.get_label() == "80% of Total"]
        assert len(threshold) == 1
        assert threshold[0].get_xdata()[0] == pytest.approx(counties["pop_2020"].sum() * 0.8)

    def test_trend_curve(self, counties: pd.DataFrame) -> None:
        ax = _axes(cleveland_dot_plot(counties, "pop_2020", "name"))
        trend = [line for line in ax.get_lines() if line.get_label() == "Trend"]
        assert len(trend) == 1
        assert len(trend[0].get_xdata()) == 100

    def test_reference_lines(self, counties: pd.DataFrame) -> None:
        ax = _axes(cleveland_dot_plot(counties, "pop_2020", "name"))
        # hlines collection holds one segment per row
        segments = ax.collections[0].get_segments()
        assert len(segments) == len(counties)
        assert all(seg[0][0] == 0 for seg in segments)

    def test_thousands_formatter(self, counties: pd.DataFrame) -> None:
        ax = _axes(cleveland_dot_plot(counties, "pop_2020", "name"))
        assert ax.xaxis.get_major_formatter()(200000, 0) == "200K"

    def test_explicit_xlim(self, counties: pd.DataFrame) -> None:
        ax = _axes(cleveland_dot_plot(counties, "pop_2020", "name", xlim=(0, 1_600_000)))
        assert ax.get_xlim() == (0, 1_600_000)

    def test_drops_missing_rows(self) -> None:
        df = pd.DataFrame({"name": ["a", "b", None], "v": [1.0, np.nan, 3.0]})
        ax = _axes(cleveland_dot_plot(df, "v", "name"))
        assert [t.get_text() for t in ax.get_yticklabels()] == ["a"]

    def test_single_row_has_no_trend(self) -> None:
        df = pd.DataFrame({"name": ["only"], "v": [5000]})
        ax = _axes(cleveland_dot_plot(df, "v", "name"))
        assert not [line for line in ax.get_lines() if line.get_label() == "Trend"]

    def test_renders(self, counties: pd.DataFrame) -> None:
        buffer = io.BytesIO()
        cleveland_dot_plot(counties, "pop_2020", "name").savefig(buffer, format="png")
        assert buffer.getvalue().startswith(b"\x89PNG")

    def test_missing_column(self, counties: pd.DataFrame) -> None:
        with pytest.raises(KeyError):
            cleveland_dot_plot(counties, "nope", "name")

    def test_no_rows(self) -> None:
        df = pd.DataFrame({"name": [None], "v": [1.0]})
        with pytest.raises(ValueError):
            cleveland_dot_plot(df, "v", "name")
