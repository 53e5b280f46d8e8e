"""Werks command line tools."""

import logging
from pathlib import Path

import typer

from .config import Config
from .coordinates import dms_to_decimal
from .exceptions import WerksError
from .logger_config import setup_logging
from .map_builder import create_bullseye_map
from .polygons import intersect_multipolygons

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Coordinate conversion, polygon intersection and bullseye maps",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(Config.LOG_LEVEL, "--log-level", help="Logging level"),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level)


def _fail(e: Exception) -> None:
    logger.error(str(e))
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(1)


@app.command("dms")
def dms_command(
    pair: str = typer.Argument(..., help="DMS pair, e.g. \"41° 15′ 31″ N, 95° 56′ 15″ W\""),
    strict: bool = typer.Option(False, "--strict", help="Check hemisphere order and ranges"),
) -> None:
    """
    Convert a DMS latitude/longitude pair to decimal degrees.

    Example:
        werks dms "41° 15′ 31″ N, 95° 56′ 15″ W"
    """
    try:
        typer.echo(dms_to_decimal(pair, strict=strict))
    except WerksError as e:
        _fail(e)


@app.command("intersect")
def intersect_command(
    first: Path = typer.Argument(..., exists=True, dir_okay=False, help="First MultiPolygon GeoJSON file"),
    second: Path = typer.Argument(..., exists=True, dir_okay=False, help="Second MultiPolygon GeoJSON file"),
) -> None:
    """
    Print the intersection of two GeoJSON MultiPolygon files.

    Example:
        werks intersect a.geojson b.geojson
    """
    try:
        result = intersect_multipolygons(
            first.read_text(encoding="utf-8"),
            second.read_text(encoding="utf-8"),
        )
    except (WerksError, OSError) as e:
        _fail(e)
    else:
        typer.echo(result)


@app.command("bullseye")
def bullseye_command(
    name: str = typer.Argument(..., help="Name shown in the center marker popup"),
    coords: str = typer.Argument(..., help="Center point as a DMS pair"),
    output: Path = typer.Option(Path(Config.DEFAULT_MAP_FILE), "--output", "-o", help="HTML file to write"),
    bands: str = typer.Option(Config.DEFAULT_BANDS, "--bands", help="Comma-separated radii in miles"),
    scheme: int = typer.Option(Config.DEFAULT_COLOR_SCHEME, "--scheme", help="Color palette (1-5)"),
) -> None:
    """
    Write an HTML map with distance circles around a point.

    Example:
        werks bullseye Lincoln "40° 48′ 31″ N, 96° 41′ 57″ W" --bands "25, 50"
    """
    try:
        path = create_bullseye_map(name, coords, str(output), bands=bands, color_scheme=scheme)
    except (ValueError, OSError) as e:
        _fail(e)
    else:
        typer.echo(path)


def main() -> None:
    app()
