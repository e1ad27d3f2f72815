"""
kindred.geo.distance
====================

Units of length and the immutable :class:`Distance` value object.

Distances compare and test equal by their metric value, so
``Distance.in_feet(3.0) == Distance.in_yards(1.0)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional

# Metric values are rounded to this many decimals before comparing so that
# unit conversions do not break equality.
METRIC_PRECISION = 9


class LengthUnit(Enum):
    """Unit of length with its size in meters."""
    MILLIMETER = (0.001, "millimeters")
    CENTIMETER = (0.01, "centimeters")
    METER = (1.0, "meters")
    KILOMETER = (1000.0, "kilometers")
    INCH = (0.0254, "inches")
    FOOT = (0.3048, "feet")
    YARD = (0.9144, "yards")
    MILE = (1609.344, "miles")

    def __init__(self, meters: float, plural: str) -> None:
        self.meters = meters
        self.plural = plural

    @classmethod
    def default(cls) -> "LengthUnit":
        """The configured default unit (``KINDRED_LENGTH_UNIT``)."""
        from kindred.settings import settings

        return cls.value_of_name(settings.length_unit)

    @classmethod
    def value_of_name(cls, name: Optional[str]) -> "LengthUnit":
        key = (name or "").strip().upper()
        for unit in cls:
            if key in (unit.name, unit.plural.upper()):
                return unit
        raise ValueError(f"LengthUnit [{name}] is not valid")

    @property
    def is_metric(self) -> bool:
        return self.name.endswith("METER")

    def to_meters(self, measurement: float) -> float:
        return measurement * self.meters

    def from_meters(self, meters: float) -> float:
        return meters / self.meters

    def describe(self, measurement: float) -> str:
        return self.plural if abs(measurement) != 1.0 else self.name.lower()


def metric_value(measurement: float, unit: LengthUnit) -> float:
    return round(unit.to_meters(measurement), METRIC_PRECISION)


@total_ordering
@dataclass(frozen=True, eq=False)
class Distance:
    """
    Non-negative measurement in a :class:`LengthUnit`.

    Parameters
    ----------
    measurement : float
        Must be greater than or equal to 0.
    unit : LengthUnit | None
        Defaults to :meth:`LengthUnit.default`.
    """
    measurement: float
    unit: Optional[LengthUnit] = None

    def __post_init__(self) -> None:
        if self.measurement is None or self.measurement < 0.0:
            raise ValueError(f"The measurement of distance [{self.measurement}] must be greater than or equal to 0")
        if self.unit is None:
            object.__setattr__(self, "unit", LengthUnit.default())

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def of(cls, measurement: float, unit: Optional[LengthUnit] = None) -> "Distance":
        return cls(measurement, unit)

    @classmethod
    def in_feet(cls, measurement: float) -> "Distance":
        return cls(measurement, LengthUnit.FOOT)

    @classmethod
    def in_kilometers(cls, measurement: float) -> "Distance":
        return cls(measurement, LengthUnit.KILOMETER)

    @classmethod
    def in_meters(cls, measurement: float) -> "Distance":
        return cls(measurement, LengthUnit.METER)

    @classmethod
    def in_miles(cls, measurement: float) -> "Distance":
        return cls(measurement, LengthUnit.MILE)

    @classmethod
    def in_yards(cls, measurement: float) -> "Distance":
        return cls(measurement, LengthUnit.YARD)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    @property
    def is_metric(self) -> bool:
        return self.unit.is_metric

    def to(self, unit: LengthUnit) -> "Distance":
        if unit is self.unit:
            return self
        return Distance(unit.from_meters(self.unit.to_meters(self.measurement)), unit)

    def to_feet(self) -> "Distance":
        return self.to(LengthUnit.FOOT)

    def to_kilometers(self) -> "Distance":
        return self.to(LengthUnit.KILOMETER)

    def to_meters(self) -> "Distance":
        return self.to(LengthUnit.METER)

    def to_miles(self) -> "Distance":
        return self.to(LengthUnit.MILE)

    def to_yards(self) -> "Distance":
        return self.to(LengthUnit.YARD)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def _metric(self) -> float:
        return metric_value(self.measurement, self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self._metric() == other._metric()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self._metric() < other._metric()

    def __hash__(self) -> int:
        return hash(self._metric())

    def __str__(self) -> str:
        return f"{self.measurement} {self.unit.describe(self.measurement)}"
