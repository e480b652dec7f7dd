"""Geolocation value type and its Cartesian point form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable

import structlog
from geopy.distance import ELLIPSOIDS, geodesic

from geoaccuracy.accuracy import (
    EARTH_RADIUS_MILES,
    EQUATOR_IN_MILES,
    AccuracyScale,
)
from geoaccuracy.exceptions import (
    InvalidAccuracyCode,
    InvalidArity,
    InvalidCoordinate,
)

logger = structlog.get_logger(__name__)

__all__ = [
    "EARTH_RADIUS_MILES",
    "EQUATOR_IN_MILES",
    "FIELD_NAMES",
    "Geolocation",
    "SpatialPoint",
]

FIELD_NAMES = ("latitude", "longitude", "accuracy")

# WGS84 axes scaled so that the mean Earth radius is 1.0
_A_KM, _B_KM, _ = ELLIPSOIDS["WGS-84"]
_MEAN_RADIUS_KM = (2 * _A_KM + _B_KM) / 3
_EQUATORIAL = _A_KM / _MEAN_RADIUS_KM
_POLAR = _B_KM / _MEAN_RADIUS_KM


@dataclass(frozen=True)
class SpatialPoint:
    """A point in 3-D space, in units of mean Earth radius."""

    x: float
    y: float
    z: float

    ORIGIN: ClassVar[SpatialPoint]

    @classmethod
    def on_ellipsoid(cls, lat_rad: float, lon_rad: float) -> SpatialPoint:
        """Project a latitude/longitude (radians) onto the WGS84 surface."""
        cos_lat = math.cos(lat_rad)
        sin_lat = math.sin(lat_rad)
        magnitude = 1.0 / math.sqrt(
            (cos_lat / _EQUATORIAL) ** 2 + (sin_lat / _POLAR) ** 2
        )
        return cls(
            x=magnitude * cos_lat * math.cos(lon_rad),
            y=magnitude * cos_lat * math.sin(lon_rad),
            z=magnitude * sin_lat,
        )

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


SpatialPoint.ORIGIN = SpatialPoint(0.0, 0.0, 0.0)


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise InvalidCoordinate unless both values are within range."""
    if not -90.0 <= latitude <= 90.0:
        raise InvalidCoordinate("latitude", latitude, -90.0, 90.0)
    if not -180.0 <= longitude <= 180.0:
        raise InvalidCoordinate("longitude", longitude, -180.0, 180.0)


def _geolocation_data(
    latitude: float, longitude: float, accuracy: AccuracyScale | float
) -> tuple[float, ...]:
    """
    Build the stored form of a geolocation.

    Returns an empty tuple if either coordinate is NaN, otherwise
    ``(latitude, longitude, accuracy_code)`` after validation.
    """
    lat_missing = math.isnan(latitude)
    lon_missing = math.isnan(longitude)
    if lat_missing or lon_missing:
        if lat_missing != lon_missing:
            logger.debug(
                "geolocation_partial_coordinates_dropped",
                latitude=latitude,
                longitude=longitude,
            )
        return ()

    validate_coordinates(latitude, longitude)

    code = accuracy.code if isinstance(accuracy, AccuracyScale) else accuracy
    try:
        AccuracyScale.with_code(int(code))
    except (TypeError, ValueError, OverflowError):
        raise InvalidAccuracyCode(code) from None

    return (float(latitude), float(longitude), float(code))


@dataclass(frozen=True, init=False)
class Geolocation:
    """
    Latitude, longitude and accuracy, or nothing at all.

    A geolocation is either empty or holds all three values; it is never
    partially populated. NaN coordinates produce the empty value.
    Takes no arguments (empty) or ``latitude, longitude, accuracy``.
    Raises InvalidArity, InvalidCoordinate or InvalidAccuracyCode on bad
    input.
    """

    value: tuple[float, ...]

    def __init__(self, *values: AccuracyScale | float):
        if not values:
            data: tuple[float, ...] = ()
        elif len(values) == 3:
            data = _geolocation_data(*values)
        else:
            raise InvalidArity(values)
        object.__setattr__(self, "value", data)

    # ── Alternate constructors ────────────────────────────────────

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Geolocation:
        """
        Build from a sequence of zero or three numbers.

        Raises InvalidArity for any other length.
        """
        return cls(*values)

    @classmethod
    def from_triple(
        cls, triple: tuple[float, float, float]
    ) -> Geolocation:
        """Build from ``(latitude, longitude, accuracy_code)``."""
        return cls.from_values(triple)

    @classmethod
    def empty(cls) -> Geolocation:
        return cls()

    validate = staticmethod(validate_coordinates)

    # ── Accessors ─────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def is_non_empty(self) -> bool:
        return bool(self.value)

    @property
    def latitude(self) -> float:
        return self.value[0] if self.value else math.nan

    @property
    def longitude(self) -> float:
        return self.value[1] if self.value else math.nan

    lat = latitude
    lon = longitude

    @property
    def accuracy(self) -> AccuracyScale:
        if not self.value:
            return AccuracyScale.Unknown
        return AccuracyScale.with_code(int(self.value[2]))

    def to_spatial_point(self) -> SpatialPoint:
        """
        Convert to a point on the WGS84 ellipsoid.

        An empty geolocation maps to the origin so that sums and
        averages of points need no special case.
        """
        if not self.value:
            return SpatialPoint.ORIGIN
        return SpatialPoint.on_ellipsoid(
            math.radians(self.latitude), math.radians(self.longitude)
        )

    def distance_miles(self, other: Geolocation) -> float:
        """Geodesic distance to *other* in miles, NaN if either is empty."""
        if not self.value or not other.value:
            return math.nan
        return geodesic(
            (self.latitude, self.longitude),
            (other.latitude, other.longitude),
        ).miles

    def describe(self) -> str:
        vals = ""
        if self.value:
            vals = f"{self.latitude:.5f}, {self.longitude:.5f}, {self.accuracy.name}"
        return f"{type(self).__name__}({vals})"

    def __str__(self) -> str:
        return self.describe()
