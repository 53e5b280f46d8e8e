"""
Chart rendering for Werks.

Provides a Cleveland dot plot: one labelled row per record, sorted by
value, with a fitted trend curve and a line marking 80% of the total.
"""

import logging
from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from .config import Config

logger = logging.getLogger(__name__)

def _thousands(x: float, _pos: Any) -> str:
    return f"{int(round(x / 1000))}K"

def cleveland_dot_plot(
    df: pd.DataFrame,
    value_col: Any,
    label_col: Any,
    xlabel: str = "",
    title: str = Config.DOT_PLOT_TITLE,
    xlim: Optional[Tuple[float, float]] = None
) -> Figure:
    """
    Create a Cleveland dot plot with polynomial trend line and reference features.

    Features:
        - Sorts data by value in descending order, largest on top
        - Adds a 3rd-degree polynomial trend line
        - Shows a threshold line at 80% of the column total
        - Includes reference lines from zero to each dot
        - Formats x-axis labels in thousands (K)

    Args:
        df: Input DataFrame containing the data
        value_col: Column with the values plotted on the x-axis
        label_col: Column with the labels shown on the y-axis
        xlabel: Label for x-axis
        title: Title for the plot
        xlim: Optional (min, max) x-axis limits; fitted to the data when None

    Returns:
        matplotlib Figure

    Raises:
        KeyError: If either column is missing
        ValueError: If no rows remain once missing values are dropped
    """
    for col in (value_col, label_col):
        if col not in df.columns:
            raise KeyError(f"Column {col!r} not found")

    # Drop any rows with missing values and sort
    df_clean = df.dropna(subset=[value_col, label_col])
    if df_clean.empty:
        raise ValueError("No rows with both a value and a label to plot")

    df_sorted = df_clean.sort_values(value_col, ascending=False)

    values = df_sorted[value_col].astype(float).to_numpy()
    labels = df_sorted[label_col].astype(str).tolist()
    positions = np.arange(1, len(values) + 1)

    value_threshold = values.sum() * Config.DOT_PLOT_THRESHOLD

    height = max(Config.DOT_PLOT_MIN_HEIGHT, Config.DOT_PLOT_ROW_HEIGHT * len(values))
    fig = Figure(figsize=(Config.DOT_PLOT_WIDTH, height), layout="tight")
    ax = fig.subplots()

    # Reference lines connecting to y-axis
    ax.hlines(positions, 0, values, color='gray', alpha=0.3, linewidth=0.5)

    ax.scatter(values, positions, s=64, color='blue', zorder=3)

    # Fit polynomial curve, lowering the degree for short tables
    degree = min(Config.DOT_PLOT_TREND_DEGREE, len(values) - 1)
    if degree >= 1:
        coefficients = np.polyfit(positions, values, degree)
        y_smooth = np.linspace(1, len(values), Config.DOT_PLOT_TREND_SAMPLES)
        x_smooth = np.polyval(coefficients, y_smooth)
        ax.plot(x_smooth, y_smooth, color='red', linewidth=2, alpha=0.6, label='Trend')
    else:
        logger.info("Single row; trend curve skipped")

    ax.axvline(
        value_threshold,
        color='green',
        linewidth=2,
        linestyle='--',
        label=f"{Config.DOT_PLOT_THRESHOLD:.0%} of Total"
    )

    ax.set_yticks(positions)
    ax.set_yticklabels(labels)
    ax.invert_yaxis()

    if xlim is not None:
        ax.set_xlim(*xlim)
    else:
        ax.set_xlim(left=0)

    ax.xaxis.set_major_formatter(FuncFormatter(_thousands))
    ax.grid(axis='x', color='gray', alpha=0.2)
    ax.set_xlabel(xlabel)
    ax.set_title(title)

    return fig
