"""
kindred.core.people
===================

Groups of :class:`~kindred.core.person.Person` objects.

People are stored and ordered by last name first, then date of birth
(oldest to youngest; an unknown birth date sorts as the Unix epoch), then
first name and middle name.  That order also decides identity: two people
with the same last name, birth date, first and middle name cannot both be
members, whatever their gender or id.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Iterable, Optional, Tuple

from .group import Group
from .name import UNDEFINED_MIDDLE_NAME
from .person import EPOCH_BIRTH_DATE, Person, comparable

EMPTY_NO_ID_GROUP_NAME = "EMPTY NON-IDENTIFIED GROUP"
GROUP_ID_NAME = "GROUP ID [{}]"
GROUP_OF_NAME = "GROUP of [{}]"


def people_key(person: Person) -> Tuple[str, datetime, str, str]:
    """Last name, birth date, first name, middle name."""
    return (
        person.last_name,
        comparable(person.birth_date or EPOCH_BIRTH_DATE),
        person.first_name,
        person.middle_name or UNDEFINED_MIDDLE_NAME,
    )


class People(Group[Person]):
    """
    Named, identifiable group of people.

    Example
    -------
    >>> group = People.of(Person.new_person("Jon", "Doe"), Person.new_person("Jane", "Doe"))
    >>> group.name
    'GROUP of [Doe]'
    >>> str(group)
    '[Doe, Jane; Doe, Jon]'
    """

    group_of_name = GROUP_OF_NAME

    def __init__(self, people: Optional[Iterable[Person]] = None) -> None:
        super().__init__(people, key=people_key)
        self._name: Optional[str] = None
        self.id: Optional[uuid.UUID] = None

    @staticmethod
    def generate_id() -> uuid.UUID:
        return uuid.uuid4()

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        """
        Explicit name if one was given, else a name derived from the id,
        else from the single last name shared by every member.
        """
        if self._name and self._name.strip():
            return self._name
        if self.id is not None:
            return GROUP_ID_NAME.format(self.id)
        last_names = {person.last_name for person in self}
        if len(last_names) == 1:
            return self.group_of_name.format(last_names.pop())
        return EMPTY_NO_ID_GROUP_NAME

    @name.setter
    def name(self, name: Optional[str]) -> None:
        self._name = name

    def named(self, name: Optional[str]) -> "People":
        self.name = name
        return self

    def identified_by(self, id: Optional[uuid.UUID]) -> "People":
        self.id = id
        return self

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _describe(person: Person) -> str:
        middle = f" {person.middle_name}" if person.middle_name else ""
        return f"{person.last_name}, {person.first_name}{middle}"

    def __str__(self) -> str:
        return "[" + "; ".join(self._describe(person) for person in self) + "]"


class Family(People):
    """People related by blood or marriage; a shared surname reads "Doe FAMILY"."""

    group_of_name = "{} FAMILY"
