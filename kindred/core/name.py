"""
kindred.core.name
=================

Immutable value object for a person's name.

A :class:`Name` always has a first and a last name; the middle name (or
initials) is optional and a blank middle name is stored as ``None``.
Names sort by last name, then first name, then middle name, with an
absent middle name sorting before any present one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

NAME_PART_SEPARATOR = " "

# Sort value standing in for an absent middle name.
UNDEFINED_MIDDLE_NAME = ""


class Title(Enum):
    """Honorific titles stripped from the front of a parsed name."""
    DR = "Dr"
    LADY = "Lady"
    LORD = "Lord"
    MISS = "Miss"
    MRS = "Mrs"
    MR = "Mr"
    MS = "Ms"
    SIR = "Sir"

    def __str__(self) -> str:
        return self.value


class Suffix(Enum):
    """Generational suffixes stripped from the end of a parsed name."""
    JR = "Jr."
    SR = "Sr."

    def __str__(self) -> str:
        return self.value


_TITLES = {title.name for title in Title}
_SUFFIXES = {suffix.name for suffix in Suffix}


def _has_text(value: Optional[str]) -> bool:
    return isinstance(value, str) and bool(value.strip())


@total_ordering
@dataclass(frozen=True)
class Name:
    """
    Immutable first, middle and last name.

    Parameters
    ----------
    first_name : str
        Given name; required, must contain text.
    middle_name : str | None
        Middle name or initial(s); blank values are normalised to ``None``.
    last_name : str
        Family name; required, must contain text.
    """
    first_name: str
    middle_name: Optional[str] = field(default=None)
    last_name: str = field(default="")

    def __post_init__(self) -> None:
        if not _has_text(self.first_name):
            raise ValueError(f"First name [{self.first_name}] is required")
        if not _has_text(self.last_name):
            raise ValueError(f"Last name [{self.last_name}] is required")
        if not _has_text(self.middle_name):
            object.__setattr__(self, "middle_name", None)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def of(cls, *parts) -> "Name":
        """
        Construct a Name from its parts.

        * ``Name.of(name)`` copies another Name,
        * ``Name.of("Dr. Jon R Doe Jr.")`` parses a full name,
        * ``Name.of("Jon", "Doe")`` uses a first and last name,
        * ``Name.of("Jon", "R", "Doe")`` uses first, middle and last names.

        >>> str(Name.of("Mr. Jon Doe"))
        'Jon Doe'
        """
        if len(parts) == 1:
            part = parts[0]
            if isinstance(part, Name):
                return cls(part.first_name, part.middle_name, part.last_name)
            if part is None:
                raise ValueError("Name is required")
            return cls.parse(part)
        if len(parts) == 2:
            return cls(parts[0], None, parts[1])
        if len(parts) == 3:
            return cls(parts[0], parts[1], parts[2])
        raise ValueError(f"Expected 1 to 3 name parts; was {len(parts)}")

    @classmethod
    def parse(cls, name: Optional[str]) -> "Name":
        """
        Parse a whitespace separated full name.

        Dots and commas around tokens are removed, so "Doe, Jr." parses like
        "Doe Jr".  Leading titles (DR, MR, MRS, ...) and trailing
        suffixes (JR, SR) are stripped, matched case-insensitively.  At least
        a first and last name must remain; everything between them becomes
        the middle name.
        """
        tokens = cls._tokenize(name)
        if len(tokens) < 2:
            raise ValueError(f"First and last name are required; was [{name}]")
        first, *middle, last = tokens
        parsed = cls(first, NAME_PART_SEPARATOR.join(middle) or None, last)
        logger.debug(f"Parsed name [{name}] as {parsed!r}")
        return parsed

    @staticmethod
    def _tokenize(name: Optional[str]) -> List[str]:
        if not _has_text(name):
            return []
        tokens = [token.strip(",") for token in name.replace(".", " ").split()]
        tokens = [token for token in tokens if token]
        while tokens and tokens[0].upper() in _TITLES:
            tokens.pop(0)
        while tokens and tokens[-1].upper() in _SUFFIXES:
            tokens.pop()
        return tokens

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------
    def change(self, last_name: str) -> "Name":
        """Return a new Name with the same first and middle name and a new last name."""
        return Name(self.first_name, self.middle_name, last_name)

    def like(self, other: Optional["Name"]) -> bool:
        """True when *other* shares this name's first or last name."""
        return other is not None and (
            self.first_name == other.first_name or self.last_name == other.last_name)

    def accept(self, visitor: Callable[["Name"], object]) -> None:
        visitor(self)

    @property
    def name(self) -> "Name":
        return self

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    def sort_key(self) -> Tuple[str, str, str]:
        return self.last_name, self.first_name, self.middle_name or UNDEFINED_MIDDLE_NAME

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return NAME_PART_SEPARATOR.join(part for part in parts if part)
