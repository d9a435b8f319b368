"""Distances and nearest-point projections on a spherical Earth."""

from spherical_geography.arc import (
    ARC_TOLERANCE_KM,
    distance_between_point_to_arc,
    nearest_point_on_great_circle,
    project_onto_arc,
)
from spherical_geography.geo import (
    EARTH_RADIUS_KM,
    EARTH_RADIUS_M,
    great_circle_distance,
    haversine_distance,
    spherical_distance,
)
from spherical_geography.models import CartesianPoint, GeoPoint, cartesian_point_to_point
from spherical_geography.validation import (
    GeometryType,
    InvalidArgumentError,
    check_geometry_type,
    check_latitude,
    check_longitude,
)

__all__ = [
    "ARC_TOLERANCE_KM",
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_M",
    "CartesianPoint",
    "GeoPoint",
    "GeometryType",
    "InvalidArgumentError",
    "cartesian_point_to_point",
    "check_geometry_type",
    "check_latitude",
    "check_longitude",
    "distance_between_point_to_arc",
    "great_circle_distance",
    "haversine_distance",
    "nearest_point_on_great_circle",
    "project_onto_arc",
    "spherical_distance",
]
