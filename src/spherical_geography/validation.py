"""Input validation for spherical geography functions."""

from __future__ import annotations

import math
from enum import Enum

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class InvalidArgumentError(ValueError):
    """Raised when a function argument is outside the spherical domain."""


class GeometryType(Enum):
    """OGC geometry kinds, keyed by shapely ``geom_type``."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_geometry(cls, geometry) -> GeometryType:
        try:
            return cls(geometry.geom_type)
        except ValueError:
            raise InvalidArgumentError(f"Unsupported geometry type: {geometry.geom_type}") from None


ALLOWED_SPHERICAL_DISTANCE_TYPES = (GeometryType.POINT,)


def check_latitude(latitude: float) -> None:
    if math.isnan(latitude) or math.isinf(latitude) or not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        raise InvalidArgumentError("Latitude must be between -90 and 90")


def check_longitude(longitude: float) -> None:
    if math.isnan(longitude) or math.isinf(longitude) or not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        raise InvalidArgumentError("Longitude must be between -180 and 180")


def check_geometry_type(
    function: str,
    geometry_type: GeometryType,
    allowed_types: tuple[GeometryType, ...],
) -> None:
    """Reject a geometry kind the named function cannot handle.

    Args:
        function: SQL-style function name used in the message, e.g. ``ST_Distance``.
        geometry_type: Kind of the offending input.
        allowed_types: Kinds the function accepts, in the order they are listed.
    """
    if geometry_type not in allowed_types:
        allowed = " or ".join(str(t) for t in allowed_types)
        raise InvalidArgumentError(
            f"When applied to SphericalGeography inputs, {function} only supports {allowed}. "
            f"Input type is: {geometry_type}"
        )


def validate_spherical_type(function: str, geometry, allowed_types: tuple[GeometryType, ...]) -> None:
    """Classify a shapely geometry and check it against ``allowed_types``."""
    check_geometry_type(function, GeometryType.from_geometry(geometry), allowed_types)
