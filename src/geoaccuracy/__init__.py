"""geoaccuracy — Validated geolocations and accuracy-level classification."""

from geoaccuracy.accuracy import EARTH_RADIUS_MILES, EQUATOR_IN_MILES, AccuracyScale
from geoaccuracy.exceptions import (
    GeolocationError,
    InvalidAccuracyCode,
    InvalidArity,
    InvalidCoordinate,
)
from geoaccuracy.models import FIELD_NAMES, Geolocation, SpatialPoint

__all__ = [
    "AccuracyScale",
    "Geolocation",
    "SpatialPoint",
    "GeolocationError",
    "InvalidArity",
    "InvalidCoordinate",
    "InvalidAccuracyCode",
    "EARTH_RADIUS_MILES",
    "EQUATOR_IN_MILES",
    "FIELD_NAMES",
]
