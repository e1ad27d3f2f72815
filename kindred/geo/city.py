"""Cities, optionally qualified by the country they are in."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from .enums import Country


@total_ordering
@dataclass(frozen=True, eq=False)
class City:
    name: str
    country: Optional[Country] = None

    def __post_init__(self) -> None:
        if not self.name or not str(self.name).strip():
            raise ValueError(f"City name [{self.name}] is required")

    @classmethod
    def of(cls, name: str, country: Optional[Country] = None) -> "City":
        return cls(name, country)

    @classmethod
    def from_city(cls, city: "City") -> "City":
        if city is None:
            raise ValueError("City is required")
        return cls(city.name, city.country)

    def sort_key(self):
        return (self.country or Country.UNKNOWN).name, self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, City):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, City):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.name
