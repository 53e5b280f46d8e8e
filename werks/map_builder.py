"""
Map building utilities for Werks.

Provides functions to create Folium maps with concentric distance
bands around a center point and write them out as standalone HTML.
"""

import logging
import traceback
from typing import List, Optional, Sequence, Tuple
import folium
from branca.element import MacroElement
from jinja2 import Template

from .config import Config
from .coordinates import dms_pair_to_tuple
from .validation import parse_bands

logger = logging.getLogger(__name__)

def create_base_map(
    center: Tuple[float, float],
    zoom: Optional[int] = None
) -> folium.Map:
    """
    Create a base Folium map.

    Args:
        center: (latitude, longitude) tuple for map center
        zoom: Initial zoom level

    Returns:
        Folium Map object
    """
    if zoom is None:
        zoom = Config.BULLSEYE_ZOOM

    # Create map
    m = folium.Map(
        location=list(center),
        zoom_start=zoom,
        tiles=Config.MAP_TILES,
        control_scale=True
    )

    return m

def add_center_marker(
    map_obj: folium.Map,
    center: Tuple[float, float],
    name: str
) -> folium.Map:
    """Add a marker with an open popup naming the center point."""
    folium.Marker(
        location=list(center),
        popup=folium.Popup(name, show=True),
        tooltip=name
    ).add_to(map_obj)

    return map_obj

def add_bands_to_map(
    map_obj: folium.Map,
    center: Tuple[float, float],
    radii_miles: Sequence[float],
    colors: Sequence[str]
) -> folium.Map:
    """
    Add one circle per distance band around the center.

    Args:
        map_obj: Folium Map object
        center: (latitude, longitude) tuple
        radii_miles: Circle radii in miles
        colors: Circle colors, one per radius

    Returns:
        Updated Folium Map object
    """
    for radius, color in zip(radii_miles, colors):
        folium.Circle(
            location=list(center),
            radius=radius * Config.METERS_PER_MILE,
            color=color,
            weight=Config.BAND_WEIGHT,
            fill=True,
            fill_color=color,
            fill_opacity=Config.BAND_FILL_OPACITY,
            interactive=False
        ).add_to(map_obj)
        logger.debug(f"Added circle: {radius:g} miles")

    return map_obj

def create_legend(radii_miles: Sequence[float], colors: Sequence[str]) -> str:
    """
    Create HTML legend for distance bands.

    Args:
        radii_miles: Band radii in miles
        colors: Band colors, one per radius

    Returns:
        HTML string for legend
    """
    legend_html = f'''
    <div id="map-legend" style="
        position: absolute;
        bottom: 30px;
        left: 10px;
        padding: 6px 8px;
        background: rgba(255,255,255,0.9);
        box-shadow: 0 0 15px rgba(0,0,0,0.2);
        border-radius: 5px;
        line-height: 24px;
        font-family: 'Arial', sans-serif;
        z-index: 1000;
    ">
        <strong>{Config.LEGEND_TITLE}</strong><br>
    '''

    for radius, color in zip(radii_miles, colors):
        legend_html += f'''
        <i style="background: {color}; width: 18px; height: 18px; float: left; margin-right: 8px; opacity: 0.7;"></i>
        {radius:g}<br>
        '''

    legend_html += '</div>'

    return legend_html

def add_legend_to_map(
    map_obj: folium.Map,
    radii_miles: Sequence[float],
    colors: Sequence[str]
) -> folium.Map:
    """Add the distance band legend to the map."""
    legend_html = create_legend(radii_miles, colors)

    # Wrap the legend in a template
    template = """
    {% macro html(this, kwargs) %}
    """ + legend_html + """
    {% endmacro %}
    """

    macro = MacroElement()
    macro._template = Template(template)

    # Add to the map's HTML
    map_obj.get_root().add_child(macro)

    return map_obj

def _band_colors(radii_miles: List[float], color_scheme: int) -> Tuple[str, ...]:
    palette = Config.get_palette(color_scheme)

    if len(radii_miles) > len(palette):
        raise ValueError(
            f"At most {len(palette)} distance bands are supported, got {len(radii_miles)}"
        )

    return palette[:len(radii_miles)]

def create_bullseye_map(
    capital_name: str,
    capital_coords: str,
    file_path: str = Config.DEFAULT_MAP_FILE,
    bands: str = Config.DEFAULT_BANDS,
    color_scheme: int = Config.DEFAULT_COLOR_SCHEME
) -> str:
    """
    Create an HTML file with a map of concentric circles around a center point.

    Args:
        capital_name: Name of the central location, shown in a popup
        capital_coords: Coordinates of the center point in DMS format
        file_path: Path to save the HTML file
        bands: Comma-separated distances for the circles in miles
        color_scheme: Index of the color palette to use (1-5)

    Returns:
        Path to the created HTML file

    Raises:
        FormatError: If the coordinates or bands are malformed
        ValueError: If the name is empty, the palette index is unknown,
            or there are more bands than palette colors
    """
    if not isinstance(capital_name, str) or not capital_name.strip():
        raise ValueError(f"capital_name must be a non-empty string, got {capital_name!r}")

    center = dms_pair_to_tuple(capital_coords)
    radii = parse_bands(bands)
    colors = _band_colors(radii, color_scheme)

    m = create_base_map(center)
    m = add_center_marker(m, center, capital_name)
    m = add_bands_to_map(m, center, radii, colors)
    m = add_legend_to_map(m, radii, colors)

    try:
        m.save(str(file_path))
    except OSError as e:
        logger.error(f"Error saving map to {file_path}: {e}")
        logger.error(traceback.format_exc())
        raise

    logger.info(f"Saved bullseye map for {capital_name} with {len(radii)} band(s) to {file_path}")
    return file_path
