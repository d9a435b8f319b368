"""Point-to-arc projection and distance on a spherical Earth.

An arc is the shorter segment of the great circle through two endpoints.
"""

from __future__ import annotations

import logging
import math
import os

from spherical_geography.geo import great_circle_distance
from spherical_geography.models import CartesianPoint, GeoPoint, cartesian_point_to_point
from spherical_geography.validation import InvalidArgumentError

logger = logging.getLogger(__name__)

TOLERANCE_ENV_VAR = "SPHERICAL_GEO_ARC_TOLERANCE_KM"
DEFAULT_ARC_TOLERANCE_KM = 0.001


def _tolerance_from_env() -> float:
    raw = os.getenv(TOLERANCE_ENV_VAR)
    if raw is None:
        return DEFAULT_ARC_TOLERANCE_KM
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidArgumentError(f"{TOLERANCE_ENV_VAR} must be a non-negative number of km, got {raw!r}")
    return value


# Slack allowed in the triangle-equality test that decides whether the
# projected point falls between the arc endpoints.
ARC_TOLERANCE_KM = _tolerance_from_env()


def _distance(a: GeoPoint, b: GeoPoint) -> float:
    return great_circle_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def nearest_point_on_great_circle(origin: GeoPoint, arc_start: GeoPoint, arc_end: GeoPoint) -> GeoPoint:
    """Closest point to ``origin`` on the great circle through the arc endpoints.

    The result does not depend on endpoint order. It may lie outside the arc
    itself, and when ``origin`` is a pole of the great circle the direction is
    undefined.
    """
    for point in (origin, arc_start, arc_end):
        point.validate()

    cartesian_origin = CartesianPoint.from_geo_point(origin)
    cartesian_start = CartesianPoint.from_geo_point(arc_start)
    cartesian_end = CartesianPoint.from_geo_point(arc_end)

    arc_plane = cartesian_start.cross_product(cartesian_end)
    intersecting_plane = cartesian_origin.cross_product(arc_plane)
    result = arc_plane.cross_product(intersecting_plane)
    return cartesian_point_to_point(result)


def project_onto_arc(
    origin: GeoPoint,
    arc_start: GeoPoint,
    arc_end: GeoPoint,
    tolerance_km: float = ARC_TOLERANCE_KM,
) -> tuple[GeoPoint, float]:
    """Project ``origin`` onto the arc ``arc_start``-``arc_end``.

    Args:
        origin: Point to measure from.
        arc_start: One endpoint of the arc.
        arc_end: The other endpoint of the arc.
        tolerance_km: Maximum gap between the arc length and the sum of the
            distances from the projected point to both endpoints for the
            projected point to count as lying on the arc.

    Returns:
        The nearest point on the great circle, and the distance in kilometers
        from ``origin`` to the arc: to that point when it lies on the arc,
        otherwise to the nearer endpoint.
    """
    nearest = nearest_point_on_great_circle(origin, arc_start, arc_end)
    logger.debug("Nearest point on great circle: %s, %s", nearest.longitude, nearest.latitude)

    arc_length = _distance(arc_start, arc_end)
    dist_to_start = _distance(arc_start, nearest)
    dist_to_end = _distance(arc_end, nearest)

    if abs(arc_length - dist_to_start - dist_to_end) < tolerance_km:
        return nearest, _distance(nearest, origin)

    logger.debug("Projected point is off the arc, falling back to endpoint distance")
    return nearest, min(_distance(origin, arc_start), _distance(origin, arc_end))


def distance_between_point_to_arc(
    origin: GeoPoint,
    arc_start: GeoPoint,
    arc_end: GeoPoint,
    tolerance_km: float = ARC_TOLERANCE_KM,
) -> float:
    """Distance in kilometers from ``origin`` to the arc ``arc_start``-``arc_end``."""
    _, distance = project_onto_arc(origin, arc_start, arc_end, tolerance_km)
    return distance
