"""Point models for geographic and Cartesian coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from spherical_geography.geo import EARTH_RADIUS_KM
from spherical_geography.validation import (
    GeometryType,
    InvalidArgumentError,
    check_latitude,
    check_longitude,
    validate_spherical_type,
)


@dataclass(frozen=True)
class GeoPoint:
    """Geographic location in decimal degrees, (longitude, latitude) order."""

    longitude: float            # [-180, 180]
    latitude: float             # [-90, 90]

    @classmethod
    def from_geometry(cls, geometry) -> GeoPoint:
        """Build from a shapely point (x = longitude, y = latitude)."""
        validate_spherical_type("GeoPoint", geometry, (GeometryType.POINT,))
        if geometry.is_empty:
            raise InvalidArgumentError("Cannot build a GeoPoint from an empty point")
        return cls(longitude=geometry.x, latitude=geometry.y)

    def validate(self) -> None:
        check_latitude(self.latitude)
        check_longitude(self.longitude)


@dataclass(frozen=True)
class CartesianPoint:
    """A 3-D vector.

    Instances built with ``from_geo_point`` lie on the sphere of radius
    ``EARTH_RADIUS_KM``. Instances built from a raw triple (for example a
    cross product) are arbitrary vectors and carry no such guarantee.
    """

    x: float
    y: float
    z: float

    @classmethod
    def from_geo_point(cls, point: GeoPoint) -> CartesianPoint:
        # Angle from the North Pole down to the latitude
        phi = math.radians(90 - point.latitude)
        sin_phi = math.sin(phi)
        # Angle from Greenwich to the longitude
        theta = math.radians(point.longitude)

        return cls(
            x=EARTH_RADIUS_KM * sin_phi * math.cos(theta),
            y=EARTH_RADIUS_KM * sin_phi * math.sin(theta),
            z=EARTH_RADIUS_KM * math.cos(phi),
        )

    def as_spherical_point(self) -> GeoPoint:
        """Inverse of ``from_geo_point`` using the polar angle from the North Pole."""
        phi = math.atan2(math.sqrt(self.x * self.x + self.y * self.y), self.z)
        theta = math.atan2(self.y, self.x)
        return GeoPoint(longitude=math.degrees(theta), latitude=90 - math.degrees(phi))

    def cross_product(self, other: CartesianPoint) -> CartesianPoint:
        return CartesianPoint(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def cartesian_point_to_point(point: CartesianPoint) -> GeoPoint:
    """Project a Cartesian vector onto the sphere and return its coordinates.

    The vector need not have Earth-radius length. A zero vector maps to
    latitude 0 instead of producing NaN.
    """
    radius = math.sqrt(point.x ** 2 + point.y ** 2 + point.z ** 2)
    longitude = math.degrees(math.atan2(point.y, point.x))
    if radius == 0:
        latitude = 0.0
    else:
        latitude = math.degrees(math.asin(point.z / radius))

    return GeoPoint(longitude=longitude, latitude=latitude)
