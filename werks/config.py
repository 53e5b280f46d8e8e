"""
Configuration settings for Werks.

Loads environment variables and provides centralized configuration
for logging, map output and chart rendering.
"""

import os
from typing import Tuple
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    """Library configuration settings."""

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    LOG_LEVEL = os.getenv('WERKS_LOG_LEVEL', 'INFO')

    # Optional log file; console only when unset
    LOG_FILE = os.getenv('WERKS_LOG_FILE')

    # ============================================================================
    # MAP SETTINGS
    # ============================================================================
    # Map tile provider
    MAP_TILES = os.getenv('WERKS_MAP_TILES', 'OpenStreetMap')

    # Bullseye view zoom level
    BULLSEYE_ZOOM = int(os.getenv('WERKS_BULLSEYE_ZOOM', '7'))

    # Default output file and distance bands (miles)
    DEFAULT_MAP_FILE = os.getenv('WERKS_MAP_FILE', 'bullseye.html')
    DEFAULT_BANDS = os.getenv('WERKS_BANDS', '50, 100, 200')

    # Conversion factor for circle radii
    METERS_PER_MILE = 1609.34

    # Band circle style
    BAND_WEIGHT = 2
    BAND_FILL_OPACITY = 0.05

    # Band color palettes, selected by 1-based index
    BAND_PALETTES = (
        ('Red', 'Green', 'Yellow', 'Blue', 'Purple'),
        ('#E74C3C', '#2ECC71', '#3498DB', '#F1C40F', '#9B59B6'),
        ('#FF4136', '#2ECC40', '#0074D9', '#FFDC00', '#B10DC9'),
        ('#D32F2F', '#388E3C', '#1976D2', '#FBC02D', '#7B1FA2'),
        ('#FF5733', '#C70039', '#900C3F', '#581845', '#FFC300'),
    )
    DEFAULT_COLOR_SCHEME = int(os.getenv('WERKS_COLOR_SCHEME', '4'))

    LEGEND_TITLE = "Miles from center"

    # ============================================================================
    # CHART SETTINGS
    # ============================================================================
    DOT_PLOT_TITLE = "Cleveland Dot Plot"
    DOT_PLOT_WIDTH = 10.0  # inches
    DOT_PLOT_MIN_HEIGHT = 4.0  # inches
    DOT_PLOT_ROW_HEIGHT = 0.2  # inches per labelled row

    # Share of the column total marked by the threshold line
    DOT_PLOT_THRESHOLD = float(os.getenv('WERKS_DOT_PLOT_THRESHOLD', '0.8'))

    # Degree of the fitted trend curve
    DOT_PLOT_TREND_DEGREE = int(os.getenv('WERKS_DOT_PLOT_TREND_DEGREE', '3'))

    # Points sampled along the trend curve
    DOT_PLOT_TREND_SAMPLES = 100

    @classmethod
    def get_palette(cls, color_scheme: int) -> Tuple[str, ...]:
        """
        Get the band colors for a palette index.

        Args:
            color_scheme: 1-based palette index

        Returns:
            Tuple of color names or hex codes

        Raises:
            ValueError: If the index is outside the available palettes
        """
        if not isinstance(color_scheme, int) or not 1 <= color_scheme <= len(cls.BAND_PALETTES):
            raise ValueError(
                f"color_scheme must be an integer from 1 to {len(cls.BAND_PALETTES)}, "
                f"got {color_scheme!r}"
            )

        return cls.BAND_PALETTES[color_scheme - 1]


# Create a singleton config instance
config = Config()
