"""CLI entrypoint for spherical-geography."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from spherical_geography.arc import (
    ARC_TOLERANCE_KM,
    nearest_point_on_great_circle,
    project_onto_arc,
)
from spherical_geography.geo import great_circle_distance, haversine_distance
from spherical_geography.models import GeoPoint
from spherical_geography.validation import InvalidArgumentError

console = Console()

POINT_OPTION = dict(nargs=2, type=float, required=True, metavar="LON LAT")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Spherical geography: great-circle distances and arc projections."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")


@cli.command()
@click.option("--from", "from_", help="First point.", **POINT_OPTION)
@click.option("--to", help="Second point.", **POINT_OPTION)
@click.option("--formula", default="great-circle", type=click.Choice(["great-circle", "haversine"]))
@click.option("--unit", default="km", type=click.Choice(["km", "m"]))
def distance(from_: tuple[float, float], to: tuple[float, float], formula: str, unit: str):
    """Distance between two points."""
    fn = great_circle_distance if formula == "great-circle" else haversine_distance
    lon1, lat1 = from_
    lon2, lat2 = to
    try:
        km = fn(lat1, lon1, lat2, lon2)
    except InvalidArgumentError as exc:
        raise click.ClickException(str(exc)) from exc

    value = km * 1000 if unit == "m" else km
    console.print(f"{value:.3f} {unit}")


@cli.command()
@click.option("--origin", help="Point to project.", **POINT_OPTION)
@click.option("--start", help="Arc start point.", **POINT_OPTION)
@click.option("--end", help="Arc end point.", **POINT_OPTION)
def nearest(origin: tuple[float, float], start: tuple[float, float], end: tuple[float, float]):
    """Nearest point to ORIGIN on the great circle through START and END."""
    try:
        point = nearest_point_on_great_circle(GeoPoint(*origin), GeoPoint(*start), GeoPoint(*end))
    except InvalidArgumentError as exc:
        raise click.ClickException(str(exc)) from exc

    console.print(f"{point.longitude:.6f} {point.latitude:.6f}")


@cli.command("arc-distance")
@click.option("--origin", help="Point to measure from.", **POINT_OPTION)
@click.option("--start", help="Arc start point.", **POINT_OPTION)
@click.option("--end", help="Arc end point.", **POINT_OPTION)
@click.option(
    "--tolerance",
    default=ARC_TOLERANCE_KM,
    type=click.FloatRange(min=0),
    show_default=True,
    help="On-arc tolerance in km.",
)
def arc_distance(
    origin: tuple[float, float],
    start: tuple[float, float],
    end: tuple[float, float],
    tolerance: float,
):
    """Distance from ORIGIN to the arc between START and END."""
    origin_pt, start_pt, end_pt = GeoPoint(*origin), GeoPoint(*start), GeoPoint(*end)
    try:
        point, dist = project_onto_arc(origin_pt, start_pt, end_pt, tolerance_km=tolerance)
        arc_length = great_circle_distance(start_pt.latitude, start_pt.longitude, end_pt.latitude, end_pt.longitude)
    except InvalidArgumentError as exc:
        raise click.ClickException(str(exc)) from exc

    table = Table(title="Point to Arc")
    table.add_column("Measure", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Nearest point (lon, lat)", f"{point.longitude:.6f}, {point.latitude:.6f}")
    table.add_row("Arc length (km)", f"{arc_length:.3f}")
    table.add_row("Distance (km)", f"[green]{dist:.3f}[/]")

    console.print(table)
