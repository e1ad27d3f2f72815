"""
kindred.geo.street
==================

:class:`Street` lines such as ``100 N Main ST``.

A street's number and name are fixed at construction; its type and
direction may be set later with the fluent ``as_*`` and
:meth:`Street.with_direction` methods, which return the street itself.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering
from typing import List, Optional

from .enums import Direction

logger = logging.getLogger(__name__)


class StreetType(Enum):
    ALLEY = ("ALY", "Alley")
    AVENUE = ("AVE", "Avenue")
    BOULEVARD = ("BLVD", "Boulevard")
    CIRCLE = ("CRCL", "Circle")
    COURT = ("CT", "Court")
    DRIVE = ("DR", "Drive")
    HIGHWAY = ("HWY", "Highway")
    JUNCTION = ("JCT", "Junction")
    LANE = ("LN", "Lane")
    LOOP = ("LP", "Loop")
    PLAZA = ("PL", "Plaza")
    ROAD = ("RD", "Road")
    ROUTE = ("RT", "Route")
    STREET = ("ST", "Street")
    WAY = ("WY", "Way")
    UNKNOWN = ("UKN", "Unknown")

    def __init__(self, abbreviation: str, label: str) -> None:
        self.abbreviation = abbreviation
        self.label = label

    @classmethod
    def value_of_abbreviation(cls, abbreviation: Optional[str]) -> "StreetType":
        key = (abbreviation or "").strip().upper()
        for street_type in cls:
            if street_type.abbreviation == key:
                return street_type
        raise ValueError(f"No Street Type was found for abbreviation [{abbreviation}]")

    @classmethod
    def value_of_name(cls, name: Optional[str]) -> "StreetType":
        key = (name or "").strip().lower()
        for street_type in cls:
            if street_type.label.lower() == key:
                return street_type
        raise ValueError(f"No Street Type was found for name [{name}]")

    @classmethod
    def lookup(cls, text: Optional[str]) -> Optional["StreetType"]:
        """Match an abbreviation or a name, ignoring case and a trailing period."""
        key = (text or "").strip().rstrip(".").upper()
        return next((t for t in cls if key in (t.abbreviation, t.label.upper())), None)

    def __str__(self) -> str:
        return self.label


@total_ordering
class Street:
    """
    Numbered street.

    Example
    -------
    >>> str(Street.of(100, "Main").with_direction(Direction.NORTH).as_street())
    '100 N Main ST'
    """

    def __init__(self, number: int, name: str, direction: Optional[Direction] = None,
                 type: Optional[StreetType] = None) -> None:
        if number is None:
            raise ValueError("Street number is required")
        if not name or not name.strip():
            raise ValueError(f"Street name [{name}] is required")
        self._number = int(number)
        self._name = name.strip()
        self.direction = direction
        self.type = type

    @classmethod
    def of(cls, number: int, name: str) -> "Street":
        return cls(number, name)

    @classmethod
    def from_street(cls, street: "Street") -> "Street":
        if street is None:
            raise ValueError("The Street to copy is required")
        return cls(street.number, street.name, street.direction, street.type)

    @classmethod
    def parse(cls, line: Optional[str]) -> "Street":
        """
        Parse ``"<number> [direction] <name...> [type]"``.

        The first token must be a whole number.  A direction is recognised
        only directly after the number, and a street type only as the last
        token, and neither is taken when nothing would be left for the name.
        """
        tokens: List[str] = (line or "").split()
        if not tokens or not tokens[0].isdigit():
            raise ValueError(f"Street [{line}] must start with a street number")
        number, rest = int(tokens[0]), tokens[1:]

        direction = Direction.lookup(rest[0]) if len(rest) > 1 else None
        if direction is not None:
            rest = rest[1:]

        street_type = StreetType.lookup(rest[-1]) if len(rest) > 1 else None
        if street_type is not None:
            rest = rest[:-1]

        if not rest:
            raise ValueError(f"Street [{line}] must have a name")
        street = cls(number, " ".join(rest), direction, street_type)
        logger.debug(f"Parsed [{line}] as {street!r}")
        return street

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def number(self) -> int:
        return self._number

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Fluent mutators
    # ------------------------------------------------------------------
    def as_(self, street_type: Optional[StreetType]) -> "Street":
        self.type = street_type
        return self

    def as_alley(self) -> "Street":
        return self.as_(StreetType.ALLEY)

    def as_avenue(self) -> "Street":
        return self.as_(StreetType.AVENUE)

    def as_boulevard(self) -> "Street":
        return self.as_(StreetType.BOULEVARD)

    def as_court(self) -> "Street":
        return self.as_(StreetType.COURT)

    def as_drive(self) -> "Street":
        return self.as_(StreetType.DRIVE)

    def as_highway(self) -> "Street":
        return self.as_(StreetType.HIGHWAY)

    def as_lane(self) -> "Street":
        return self.as_(StreetType.LANE)

    def as_road(self) -> "Street":
        return self.as_(StreetType.ROAD)

    def as_route(self) -> "Street":
        return self.as_(StreetType.ROUTE)

    def as_street(self) -> "Street":
        return self.as_(StreetType.STREET)

    def as_way(self) -> "Street":
        return self.as_(StreetType.WAY)

    def with_direction(self, direction: Optional[Direction]) -> "Street":
        self.direction = direction
        return self

    # ------------------------------------------------------------------
    # Identity & ordering
    # ------------------------------------------------------------------
    def sort_key(self):
        """Name, type (absent as UNKNOWN), number, direction (absent first)."""
        return (
            self._name,
            (self.type or StreetType.UNKNOWN).name,
            self._number,
            self.direction.value if self.direction else "",
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Street):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Street):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return (f"Street(number={self._number!r}, name={self._name!r}, "
                f"direction={self.direction}, type={self.type})")

    def __str__(self) -> str:
        parts = [str(self._number)]
        if self.direction:
            parts.append(self.direction.abbreviation)
        parts.append(self._name)
        if self.type:
            parts.append(self.type.abbreviation)
        return " ".join(parts)
