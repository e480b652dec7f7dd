"""Custom exception hierarchy for geoaccuracy."""

from typing import Iterable


class GeolocationError(Exception):
    """Base exception for all geoaccuracy errors."""


class InvalidArity(GeolocationError):
    """A location sequence had neither zero nor three elements."""

    def __init__(self, values: Iterable[float]):
        self.values = tuple(values)
        self.arity = len(self.values)
        super().__init__(
            "Geolocation must have latitude, longitude and accuracy, "
            f"or be empty: got {self.arity} value(s) {list(self.values)}"
        )


class InvalidCoordinate(GeolocationError):
    """Latitude or longitude is outside its valid range."""

    def __init__(self, name: str, value: float, lower: float, upper: float):
        self.name = name
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Invalid {name}: {value} (must be between {lower} and {upper})"
        )


class InvalidAccuracyCode(GeolocationError):
    """The accuracy code does not match any AccuracyScale member."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unknown geolocation accuracy code: {code!r}")
