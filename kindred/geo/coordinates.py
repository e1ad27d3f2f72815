"""
kindred.geo.coordinates
=======================

:class:`Elevation` and geographic :class:`Coordinates`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .distance import LengthUnit, metric_value

COORDINATES_TO_STRING = "[latitude: {}, longitude: {}; @ elevation: {}]"


@dataclass(frozen=True, eq=False)
class Elevation:
    """
    Altitude relative to sea level, measured in a :class:`LengthUnit`.

    Two elevations are equal when they describe the same height, whatever
    the unit: ``Elevation(3.0, LengthUnit.FOOT) == Elevation(1.0, LengthUnit.YARD)``.
    """
    altitude: float = 0.0
    unit: Optional[LengthUnit] = None

    def __post_init__(self) -> None:
        if self.altitude is None:
            raise ValueError("Altitude is required")
        if self.unit is None:
            object.__setattr__(self, "unit", LengthUnit.default())

    @classmethod
    def at_sea_level(cls) -> "Elevation":
        return cls(0.0)

    @classmethod
    def of(cls, altitude: float, unit: Optional[LengthUnit] = None) -> "Elevation":
        return cls(altitude, unit)

    def in_(self, unit: LengthUnit) -> "Elevation":
        """Same height expressed in *unit*."""
        if unit is None:
            raise ValueError("LengthUnit is required")
        return Elevation(unit.from_meters(self.unit.to_meters(self.altitude)), unit)

    def in_feet(self) -> "Elevation":
        return self.in_(LengthUnit.FOOT)

    def in_meters(self) -> "Elevation":
        return self.in_(LengthUnit.METER)

    @property
    def is_above_sea_level(self) -> bool:
        return self.altitude > 0.0

    @property
    def is_at_sea_level(self) -> bool:
        return self.altitude == 0.0

    @property
    def is_below_sea_level(self) -> bool:
        return self.altitude < 0.0

    def _metric(self) -> float:
        return metric_value(self.altitude, self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Elevation):
            return NotImplemented
        return self._metric() == other._metric()

    def __hash__(self) -> int:
        return hash(self._metric())

    def __str__(self) -> str:
        return f"{self.altitude} {self.unit.describe(self.altitude)}"


def _sea_level() -> Elevation:
    return Elevation.at_sea_level()


@dataclass(frozen=True)
class Coordinates:
    """Latitude and longitude in decimal degrees, plus an elevation."""
    latitude: float
    longitude: float
    elevation: Elevation = field(default_factory=_sea_level)

    def __post_init__(self) -> None:
        if self.latitude is None or not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude [{self.latitude}] must be between -90 and 90 degrees")
        if self.longitude is None or not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude [{self.longitude}] must be between -180 and 180 degrees")
        if self.elevation is None:
            object.__setattr__(self, "elevation", _sea_level())

    @classmethod
    def of(cls, latitude: float, longitude: float) -> "Coordinates":
        return cls(latitude, longitude)

    def at(self, elevation, unit: Optional[LengthUnit] = None) -> "Coordinates":
        """Copy of these coordinates at *elevation* (an Elevation or an altitude)."""
        if not isinstance(elevation, Elevation):
            elevation = Elevation(elevation, unit)
        return replace(self, elevation=elevation)

    def as_point(self) -> Tuple[int, int]:
        return int(self.latitude), int(self.longitude)

    def __str__(self) -> str:
        return COORDINATES_TO_STRING.format(self.latitude, self.longitude, self.elevation)
