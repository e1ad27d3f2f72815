"""
kindred.core.enums
==================

Enumerations shared by the people model.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Gender(Enum):
    """Gender of a :class:`~kindred.core.person.Person`."""
    FEMALE = ("F", "Female")
    MALE = ("M", "Male")
    NON_BINARY = ("N", "NonBinary")

    def __init__(self, abbreviation: str, label: str) -> None:
        self.abbreviation = abbreviation
        self.label = label

    @classmethod
    def value_of_abbreviation(cls, abbreviation: Optional[str]) -> Optional["Gender"]:
        """Case-insensitive lookup by abbreviation; ``None`` when unknown."""
        return next((g for g in cls if abbreviation and g.abbreviation.lower() == abbreviation.strip().lower()), None)

    @classmethod
    def value_of_name(cls, name: Optional[str]) -> Optional["Gender"]:
        """Case-insensitive lookup by label ("Female") or member name ("NON_BINARY")."""
        if not name:
            return None
        key = name.strip().lower()
        return next((g for g in cls if key in (g.label.lower(), g.name.lower())), None)

    def __str__(self) -> str:
        return self.label
