"""Postal codes, ordered by their text."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from .enums import Country


@total_ordering
@dataclass(frozen=True, eq=False)
class PostalCode:
    number: str
    country: Optional[Country] = None

    def __post_init__(self) -> None:
        if not self.number or not str(self.number).strip():
            raise ValueError(f"Postal Code number [{self.number}] is required")

    @classmethod
    def of(cls, number: str, country: Optional[Country] = None) -> "PostalCode":
        return cls(str(number), country)

    @classmethod
    def from_postal_code(cls, postal_code: "PostalCode") -> "PostalCode":
        if postal_code is None:
            raise ValueError("Postal Code is required")
        return cls(postal_code.number, postal_code.country)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PostalCode):
            return NotImplemented
        return self.number == other.number and self.country == other.country

    def __hash__(self) -> int:
        return hash((self.number, self.country))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PostalCode):
            return NotImplemented
        return str(self) < str(other)

    def __str__(self) -> str:
        return self.number
