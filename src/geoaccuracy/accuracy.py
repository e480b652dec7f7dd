"""Accuracy levels for geolocations and range-based classification.

Each level says how precisely a latitude/longitude pair is known, e.g.
``Zip`` means the point is the center of the zip code area. Levels are
ordered by the radius they cover, most precise first.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

import structlog

from geoaccuracy.exceptions import InvalidAccuracyCode

logger = structlog.get_logger(__name__)

EQUATOR_IN_MILES = 24901.0
EARTH_RADIUS_MILES = 3959.0

# Ranges within 1% of a level's radius still belong to that level
_RANGE_TOLERANCE = 0.99


@total_ordering
class AccuracyScale(Enum):
    """
    Closed set of accuracy levels.

    The member value is the stable integer ``code`` used for storage;
    ordering follows ``range_in_miles``.
    """

    # No match for the address was found
    Unknown = (0, EQUATOR_IN_MILES / 2)
    # In the same building
    Address = (1, 0.005)
    # Near the address
    NearAddress = (2, 0.02)
    # Midway point of the block
    Block = (3, 0.05)
    # Midway point of the street
    Street = (4, 0.15)
    # Center of the extended zip code area
    ExtendedZip = (5, 0.4)
    # Center of the zip code area
    Zip = (6, 1.2)
    # Center of the neighborhood
    Neighborhood = (7, 3.0)
    # Center of the city
    City = (8, 12.0)
    # Center of the county
    County = (9, 40.0)
    # Center of the state
    State = (10, 150.0)

    def __new__(cls, code: int, range_in_miles: float):
        member = object.__new__(cls)
        member._value_ = code
        member.range_in_miles = range_in_miles
        return member

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AccuracyScale):
            return NotImplemented
        return self.range_in_miles < other.range_in_miles

    def __str__(self) -> str:
        return self.name

    @property
    def code(self) -> int:
        return self.value

    @property
    def range_in_earth_radius_units(self) -> float:
        """Range in units of Earth radius."""
        return self.range_in_miles / EARTH_RADIUS_MILES

    # ── Lookup and classification ─────────────────────────────────

    @classmethod
    def values(cls) -> tuple[AccuracyScale, ...]:
        """All levels, ascending by range (``Unknown`` last)."""
        return _BY_RANGE

    @classmethod
    def with_code(cls, code: int) -> AccuracyScale:
        """
        Return the level stored under *code*.

        Raises InvalidAccuracyCode if no level has that code.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidAccuracyCode(code)
        try:
            return _BY_CODE[code]
        except KeyError:
            raise InvalidAccuracyCode(code) from None

    @staticmethod
    def miles_from_earth_radius_units(units: float) -> float:
        """Convert units of Earth radius into miles."""
        return units * EARTH_RADIUS_MILES

    @classmethod
    def classify_by_miles(cls, miles: float) -> AccuracyScale:
        """
        Return the most precise level whose radius covers *miles*.

        Falls back to ``Unknown`` when the range exceeds every level.
        """
        for accuracy in _BY_RANGE:
            if accuracy.range_in_miles >= miles * _RANGE_TOLERANCE:
                return accuracy
        logger.debug("accuracy_range_unmatched", miles=miles)
        return cls.Unknown

    @classmethod
    def classify_by_earth_radius_units(cls, units: float) -> AccuracyScale:
        """Classify a range given in units of Earth radius."""
        return cls.classify_by_miles(cls.miles_from_earth_radius_units(units))

    @classmethod
    def worst(cls, *accuracies: AccuracyScale) -> AccuracyScale:
        """Return the least precise of *accuracies*, or ``Unknown`` if none."""
        if not accuracies:
            return cls.Unknown
        return cls.classify_by_miles(max(a.range_in_miles for a in accuracies))


_BY_RANGE: tuple[AccuracyScale, ...] = tuple(
    sorted(AccuracyScale, key=lambda a: a.range_in_miles)
)
_BY_CODE: dict[int, AccuracyScale] = {a.code: a for a in AccuracyScale}

