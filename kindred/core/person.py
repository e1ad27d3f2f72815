"""
kindred.core.person
===================

Mutable :class:`Person` entity.

A person is identified by their :class:`~kindred.core.name.Name` and birth
date; gender, id, date of death and address are descriptive data that do
not take part in equality.  Temporal invariants are guarded in the setters:

* a birth date may not be in the future,
* a date of death may not be in the future nor precede the birth date.

Dates are kept to millisecond precision.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from functools import total_ordering
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from .enums import Gender
from .name import Name

if TYPE_CHECKING:
    from kindred.geo.address import Address

BIRTH_DATE_PATTERN = "%Y-%m-%d %I:%M %p"

# Sort value standing in for an unknown birth date.
EPOCH_BIRTH_DATE = datetime(1970, 1, 1)


# ---------------------------------------------------------------------
# Date helpers
# ---------------------------------------------------------------------
def to_datetime(value: Optional[date]) -> Optional[datetime]:
    """Widen a ``date`` to midnight of that day; ``datetime`` passes through."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise ValueError(f"Date [{value!r}] must be a date or datetime")


def truncate_to_millis(value: Optional[datetime]) -> Optional[datetime]:
    """Drop sub-millisecond precision; dates travel as epoch milliseconds."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000) if value is not None else None


def comparable(value: datetime) -> datetime:
    """Naive UTC rendition of *value* so naive and aware datetimes compare."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def now_like(value: datetime) -> datetime:
    """Current time in the same naive/aware flavour as *value*."""
    return datetime.now(value.tzinfo) if value.tzinfo is not None else datetime.now()


def years_ago(years: int, today: Optional[datetime] = None) -> datetime:
    """Same day and time *years* years before *today* (Feb 29 falls back to Feb 28)."""
    today = today or datetime.now()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return today.replace(year=today.year - years, day=28)


def _format(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(BIRTH_DATE_PATTERN) if value else None


@total_ordering
class Person:
    """
    A person with a name, optional birth and death dates, gender and id.

    The builder-style methods (:meth:`born`, :meth:`as_`, :meth:`change`,
    :meth:`died`, :meth:`aged`, :meth:`identified_by`) mutate the person
    in place and return it for chaining.

    Example
    -------
    >>> jon = Person.new_person("Jon", "Doe").as_male()
    >>> jon.is_male, jon.is_born
    (True, False)
    """

    def __init__(self, name: Name, birth_date: Optional[date] = None) -> None:
        if name is None:
            raise ValueError("Name is required")
        self._name: Name = Name.of(name) if not isinstance(name, Name) else name
        self._birth_date: Optional[datetime] = None
        self._date_of_death: Optional[datetime] = None
        self._gender: Optional[Gender] = None
        self._address: Optional["Address"] = None
        self.id: Optional[int] = None
        self.birth_date = birth_date

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def new_person(cls, name, *args) -> "Person":
        """
        Create a Person from:

        * ``new_person(Name[, birth_date])``
        * ``new_person("Jon", "Doe"[, birth_date])``
        * ``new_person("Jon R Doe"[, birth_date])`` (parsed full name)
        """
        if isinstance(name, Name):
            return cls(name, *args)
        if args and isinstance(args[0], str):
            return cls(Name.of(name, args[0]), *args[1:])
        return cls(Name.of(name), *args)

    @classmethod
    def from_person(cls, person: "Person") -> "Person":
        """Copy *person*; the id is not copied."""
        if person is None:
            raise ValueError("Person is required")
        copy = cls(person.name, person.birth_date)
        copy._date_of_death = person.date_of_death
        copy._gender = person.gender
        copy._address = person.address
        return copy

    # ------------------------------------------------------------------
    # Name
    # ------------------------------------------------------------------
    @property
    def name(self) -> Name:
        return self._name

    @name.setter
    def name(self, name: Name) -> None:
        if name is None:
            raise ValueError("Name is required")
        self._name = name

    @property
    def first_name(self) -> str:
        return self._name.first_name

    @property
    def middle_name(self) -> Optional[str]:
        return self._name.middle_name

    @property
    def last_name(self) -> str:
        return self._name.last_name

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------
    @property
    def birth_date(self) -> Optional[datetime]:
        return self._birth_date

    @birth_date.setter
    def birth_date(self, birth_date: Optional[date]) -> None:
        birth_date = truncate_to_millis(to_datetime(birth_date))
        if birth_date is not None:
            now = now_like(birth_date)
            if birth_date > now:
                raise ValueError(
                    f"Birth date [{_format(birth_date)}] must be on or before today [{_format(now)}]")
            if self._date_of_death is not None and comparable(birth_date) > comparable(self._date_of_death):
                raise ValueError(
                    f"Birth date [{_format(birth_date)}] must be on or before "
                    f"date of death [{_format(self._date_of_death)}]")
        self._birth_date = birth_date

    @property
    def date_of_death(self) -> Optional[datetime]:
        return self._date_of_death

    @date_of_death.setter
    def date_of_death(self, date_of_death: Optional[date]) -> None:
        date_of_death = truncate_to_millis(to_datetime(date_of_death))
        if date_of_death is not None:
            now = now_like(date_of_death)
            if date_of_death > now:
                raise ValueError(
                    f"Date of death [{_format(date_of_death)}] must be on or before today [{_format(now)}]")
            if self._birth_date is not None and comparable(date_of_death) < comparable(self._birth_date):
                raise ValueError(
                    f"Date of death [{_format(date_of_death)}] must be on or after "
                    f"birth date [{_format(self._birth_date)}]")
        self._date_of_death = date_of_death

    @property
    def age(self) -> Optional[int]:
        """Age in whole years at death or today; ``None`` without a birth date."""
        if self._birth_date is None:
            return None
        until = self._date_of_death or now_like(self._birth_date)
        born = self._birth_date
        return until.year - born.year - ((until.month, until.day) < (born.month, born.day))

    # ------------------------------------------------------------------
    # Descriptive data
    # ------------------------------------------------------------------
    @property
    def gender(self) -> Optional[Gender]:
        return self._gender

    @gender.setter
    def gender(self, gender: Optional[Gender]) -> None:
        self._gender = gender

    @property
    def address(self) -> Optional["Address"]:
        return self._address

    @address.setter
    def address(self, address: Optional["Address"]) -> None:
        self._address = address

    @property
    def is_born(self) -> bool:
        return self._birth_date is not None

    @property
    def is_alive(self) -> bool:
        return self.is_born and self._date_of_death is None

    @property
    def is_female(self) -> bool:
        return self._gender is Gender.FEMALE

    @property
    def is_male(self) -> bool:
        return self._gender is Gender.MALE

    @property
    def is_non_binary(self) -> bool:
        return self._gender is Gender.NON_BINARY

    # ------------------------------------------------------------------
    # Builder-style mutators
    # ------------------------------------------------------------------
    def aged(self, years: int) -> "Person":
        """Set the birth date so that the person is *years* old today."""
        if years is None or years < 0:
            raise ValueError(f"Age [{years}] must be greater than or equal to 0")
        self.birth_date = years_ago(years)
        return self

    def born(self, birth_date: date) -> "Person":
        self.birth_date = birth_date
        return self

    def died(self, date_of_death: date) -> "Person":
        self.date_of_death = date_of_death
        return self

    def as_(self, gender: Optional[Gender]) -> "Person":
        self.gender = gender
        return self

    def as_female(self) -> "Person":
        return self.as_(Gender.FEMALE)

    def as_male(self) -> "Person":
        return self.as_(Gender.MALE)

    def as_non_binary(self) -> "Person":
        return self.as_(Gender.NON_BINARY)

    def change(self, name) -> "Person":
        """Change the last name (``str``) or the whole :class:`Name`."""
        if isinstance(name, Name):
            self.name = name
        elif name is None:
            raise ValueError("Name is required")
        else:
            self.name = self._name.change(name)
        return self

    def identified_by(self, id: Optional[int]) -> "Person":
        self.id = id
        return self

    def lives_at(self, address: Optional["Address"]) -> "Person":
        self.address = address
        return self

    def accept(self, visitor: Callable[["Person"], object]) -> None:
        visitor(self)

    # ------------------------------------------------------------------
    # Identity & ordering
    # ------------------------------------------------------------------
    def sort_key(self) -> Tuple[Tuple[str, str, str], datetime]:
        """Natural order: name (last, first, middle) then birth date."""
        return self._name.sort_key(), comparable(self._birth_date or EPOCH_BIRTH_DATE)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return (self._name == other._name
                and self._comparable_birth_date() == other._comparable_birth_date())

    def __hash__(self) -> int:
        return hash((self._name, self._comparable_birth_date()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def _comparable_birth_date(self) -> Optional[datetime]:
        return comparable(self._birth_date) if self._birth_date else None

    def __repr__(self) -> str:
        return (f"Person(first_name={self.first_name!r}, middle_name={self.middle_name!r}, "
                f"last_name={self.last_name!r}, birth_date={_format(self._birth_date)!r}, "
                f"gender={self._gender.label if self._gender else None!r})")

    def __str__(self) -> str:
        return str(self._name)
