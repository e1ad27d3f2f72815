"""
tests/test_people.py
====================

Unit tests for kindred.core.people (People and Family)
"""

import uuid
from datetime import datetime

import pytest

from kindred.core import Family, Name, People, Person
from kindred.errors import ConcurrentModificationError


def _family(doe_family, *first_names):
    return Family.of(*(doe_family[first] for first in first_names))


def test_family_of_eight(doe_family):
    """Family.of keeps all eight Does."""
    family = Family.of(*doe_family.values())
    assert family.size() == 8


def test_find_adults(doe_family):
    family = Family.of(*doe_family.values())
    adults = family.find_by(lambda person: person.age >= 18)
    assert {p.first_name for p in adults} == {"Jon", "Jane", "Fro", "Hoe", "Joe"}


def test_find_females(doe_family):
    family = Family.of(*doe_family.values())
    females = family.find_by(lambda person: person.is_female)
    assert {p.first_name for p in females} == {"Jane", "Cookie", "Hoe", "Pie"}


def test_order_is_last_name_then_birth_date(doe_family):
    """Same last name, so oldest to youngest."""
    family = Family.of(*doe_family.values())
    assert [p.first_name for p in family] == ["Jon", "Jane", "Joe", "Hoe", "Fro", "Sour", "Pie", "Cookie"]


def test_str_lists_last_first_middle(doe_family):
    family = _family(doe_family, "Cookie", "Fro", "Jane", "Jon")
    assert str(family) == "[Doe, Jon R; Doe, Jane R; Doe, Fro R; Doe, Cookie]"


def test_people_equal_under_the_group_order_cannot_coexist(jon):
    """Same name and birth date, different gender: the second join is refused."""
    twin = Person.new_person(Name.of("Jon", "R", "Doe"), jon.birth_date).as_female()
    family = Family.of(jon)
    assert family.join(twin) is False
    assert family.size() == 1


def test_unknown_birth_date_sorts_as_epoch():
    before = Person.new_person("Zed", "Doe", datetime(1960, 1, 1))
    unknown = Person.new_person("Abe", "Doe")
    after = Person.new_person("Bob", "Doe", datetime(1980, 1, 1))
    assert list(People.of(after, unknown, before)) == [before, unknown, after]


def test_last_name_orders_first():
    smith = Person.new_person("Adam", "Smith", datetime(1900, 1, 1))
    doe = Person.new_person("Zed", "Doe", datetime(2000, 1, 1))
    assert list(People.of(smith, doe)) == [doe, smith]


def test_leave_by_predicate(doe_family):
    family = Family.of(*doe_family.values())
    assert family.leave_if(lambda person: person.age < 18) is True
    assert [p.first_name for p in family] == ["Jon", "Jane", "Joe", "Hoe", "Fro"]


def test_leave_by_predicate_that_joins_fails_fast(doe_family, jon):
    family = _family(doe_family, "Jon", "Jane")
    newborn = Person.new_person("Baby", "Doe").aged(0)

    def adopt(person):
        family.join(newborn)
        return person is jon

    with pytest.raises(ConcurrentModificationError):
        family.leave_if(adopt)


def test_find_one_is_the_first_in_order(doe_family):
    family = Family.of(*doe_family.values())
    assert family.find_one(lambda person: person.is_male).first_name == "Jon"


def test_count(doe_family):
    family = Family.of(*doe_family.values())
    assert family.count(lambda person: person.is_male) == 4


def test_family_name_from_shared_last_name(doe_family):
    assert Family.of(*doe_family.values()).name == "Doe FAMILY"


def test_people_name_resolution(jon):
    people = People.of(jon)
    assert people.name == "GROUP of [Doe]"

    people.join(Person.new_person("Ann", "Smith"))
    assert people.name == "EMPTY NON-IDENTIFIED GROUP"

    group_id = People.generate_id()
    assert isinstance(group_id, uuid.UUID)
    assert people.identified_by(group_id).name == f"GROUP ID [{group_id}]"

    assert people.named("Neighbours").name == "Neighbours"


def test_empty_group_name():
    assert People.empty().name == "EMPTY NON-IDENTIFIED GROUP"


def test_set_algebra_between_families(doe_family):
    parents = _family(doe_family, "Jon", "Jane")
    everyone = Family.of(*doe_family.values())
    assert parents.union(everyone) == set(doe_family.values())
    assert everyone.intersection(parents) == {doe_family["Jon"], doe_family["Jane"]}
    assert doe_family["Jon"] not in everyone.difference(parents)
    assert len(everyone.difference(parents)) == 6
