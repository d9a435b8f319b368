"""Distance functions on a spherical Earth.

All coordinate arguments are decimal degrees. ``great_circle_distance`` and
``haversine_distance`` return kilometers; ``spherical_distance`` returns meters.
"""

from __future__ import annotations

import math
from typing import Optional

from spherical_geography.validation import (
    ALLOWED_SPHERICAL_DISTANCE_TYPES,
    check_latitude,
    check_longitude,
    validate_spherical_type,
)

EARTH_RADIUS_KM = 6371.01
EARTH_RADIUS_M = EARTH_RADIUS_KM * 1000.0


def great_circle_distance(latitude1: float, longitude1: float, latitude2: float, longitude2: float) -> float:
    """Distance between two points on Earth in kilometers.

    Assumes a spherical Earth and uses the Vincenty form of the great-circle
    formula, which stays accurate for both tiny and near-antipodal separations.
    """
    check_latitude(latitude1)
    check_longitude(longitude1)
    check_latitude(latitude2)
    check_longitude(longitude2)

    rlat1 = math.radians(latitude1)
    rlat2 = math.radians(latitude2)

    sin1 = math.sin(rlat1)
    cos1 = math.cos(rlat1)
    sin2 = math.sin(rlat2)
    cos2 = math.cos(rlat2)

    dlon = math.radians(longitude1) - math.radians(longitude2)
    cos_dlon = math.cos(dlon)

    t1 = cos2 * math.sin(dlon)
    t2 = cos1 * sin2 - sin1 * cos2 * cos_dlon
    t3 = sin1 * sin2 + cos1 * cos2 * cos_dlon
    return math.atan2(math.sqrt(t1 * t1 + t2 * t2), t3) * EARTH_RADIUS_KM


def haversine_distance(
    latitude1: float,
    longitude1: float,
    latitude2: float,
    longitude2: float,
    validate: bool = True,
) -> float:
    """Distance between two points on Earth in kilometers, Haversine formula.

    Loses precision close to antipodal points; prefer ``great_circle_distance``.
    Pass ``validate=False`` to skip the coordinate range checks.
    """
    if validate:
        check_latitude(latitude1)
        check_longitude(longitude1)
        check_latitude(latitude2)
        check_longitude(longitude2)

    rlat1, rlon1 = math.radians(latitude1), math.radians(longitude1)
    rlat2, rlon2 = math.radians(latitude2), math.radians(longitude2)

    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_KM * c


def spherical_distance(left, right) -> Optional[float]:
    """Distance in meters between two shapely point geometries.

    Returns None when either geometry is empty.
    """
    if left.is_empty or right.is_empty:
        return None

    validate_spherical_type("ST_Distance", left, ALLOWED_SPHERICAL_DISTANCE_TYPES)
    validate_spherical_type("ST_Distance", right, ALLOWED_SPHERICAL_DISTANCE_TYPES)

    # great_circle_distance works in km
    return great_circle_distance(left.y, left.x, right.y, right.x) * 1000
