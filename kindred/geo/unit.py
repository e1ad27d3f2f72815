"""
kindred.geo.unit
================

Units within a building (apartment, office, room, suite).

:class:`Unit` is immutable; :meth:`Unit.as_` returns a new unit of the
requested type.  The fixed-type subclasses (:class:`Apartment`,
:class:`Office`, :class:`Room`, :class:`Suite`) refuse to change type.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple

from kindred.errors import UnsupportedOperationError


class UnitType(Enum):
    APARTMENT = ("APT", "Apartment")
    OFFICE = ("OFC", "Office")
    ROOM = ("RM", "Room")
    SUITE = ("STE", "Suite")

    def __init__(self, abbreviation: str, label: str) -> None:
        self.abbreviation = abbreviation
        self.label = label

    @classmethod
    def value_of_abbreviation(cls, abbreviation: Optional[str]) -> "UnitType":
        key = (abbreviation or "").strip().upper()
        for unit_type in cls:
            if unit_type.abbreviation == key:
                return unit_type
        raise ValueError(f"No Unit Type was found for abbreviation [{abbreviation}]")

    @classmethod
    def value_of_name(cls, name: Optional[str]) -> "UnitType":
        key = (name or "").strip().lower()
        for unit_type in cls:
            if unit_type.label.lower() == key:
                return unit_type
        raise ValueError(f"No Unit Type was found for name [{name}]")

    def __str__(self) -> str:
        return self.label


# Sort key of an absent unit; sorts before every real unit.
EMPTY_UNIT_KEY: Tuple[str, str] = ("", "")


def unit_key(unit: Optional["Unit"]) -> Tuple[str, str]:
    return unit.sort_key() if unit is not None else EMPTY_UNIT_KEY


@total_ordering
class Unit:
    """Numbered unit, e.g. ``Unit.of("101").as_(UnitType.SUITE)`` is "Suite 101"."""

    def __init__(self, number: str, type: Optional[UnitType] = None) -> None:
        if number is None or not str(number).strip():
            raise ValueError("Number is required")
        self._number = str(number).strip()
        self._type = type

    @classmethod
    def of(cls, number: str) -> "Unit":
        return cls(number)

    @classmethod
    def from_unit(cls, unit: "Unit") -> "Unit":
        if unit is None:
            raise ValueError("Unit is required")
        return Unit(unit.number, unit.type)

    @property
    def number(self) -> str:
        return self._number

    @property
    def type(self) -> Optional[UnitType]:
        return self._type

    def as_(self, unit_type: Optional[UnitType]) -> "Unit":
        return Unit(self._number, unit_type)

    def as_apartment(self) -> "Unit":
        return self.as_(UnitType.APARTMENT)

    def as_office(self) -> "Unit":
        return self.as_(UnitType.OFFICE)

    def as_room(self) -> "Unit":
        return self.as_(UnitType.ROOM)

    def as_suite(self) -> "Unit":
        return self.as_(UnitType.SUITE)

    def sort_key(self) -> Tuple[str, str]:
        return (self._type.name if self._type else "", self._number)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Unit):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(number={self._number!r}, type={self._type})"

    def __str__(self) -> str:
        return f"{self._type.label} {self._number}" if self._type else self._number


class _FixedTypeUnit(Unit):
    unit_type: UnitType

    def __init__(self, number: str) -> None:
        super().__init__(number, self.unit_type)

    def as_(self, unit_type: Optional[UnitType]) -> "Unit":
        raise UnsupportedOperationError("Type cannot be changed")


class Apartment(_FixedTypeUnit):
    unit_type = UnitType.APARTMENT


class Office(_FixedTypeUnit):
    unit_type = UnitType.OFFICE


class Room(_FixedTypeUnit):
    unit_type = UnitType.ROOM


class Suite(_FixedTypeUnit):
    unit_type = UnitType.SUITE
