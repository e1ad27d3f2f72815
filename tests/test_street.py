"""
tests/test_street.py
====================

Unit tests for kindred.geo.street and kindred.geo.unit
"""

import pytest

from kindred.errors import UnsupportedOperationError
from kindred.geo import Apartment, Direction, Office, Room, Street, StreetType, Suite, Unit, UnitType


# ---------------------------------------------------------------------------
# Street
# ---------------------------------------------------------------------------
def test_street_str():
    assert str(Street.of(100, "Main")) == "100 Main"
    assert str(Street.of(100, "Main").as_street().with_direction(Direction.NORTH)) == "100 N Main ST"


def test_fluent_type_mutates_in_place():
    street = Street.of(1, "Sunset")
    assert street.as_boulevard() is street
    assert street.type is StreetType.BOULEVARD


@pytest.mark.parametrize("number, name", [(None, "Main"), (1, None), (1, "  ")])
def test_number_and_name_are_required(number, name):
    with pytest.raises(ValueError):
        Street(number, name)


@pytest.mark.parametrize("line, number, direction, name, street_type", [
    ("100 Main", 100, None, "Main", None),
    ("100 Main St", 100, None, "Main", StreetType.STREET),
    ("100 N Main St.", 100, Direction.NORTH, "Main", StreetType.STREET),
    ("2500 southwest Martin Luther King Boulevard", 2500, Direction.SOUTHWEST, "Martin Luther King",
     StreetType.BOULEVARD),
    ("7 North", 7, None, "North", None),
    ("12 Way", 12, None, "Way", None),
])
def test_parse(line, number, direction, name, street_type):
    street = Street.parse(line)
    assert (street.number, street.direction, street.name, street.type) == (number, direction, name, street_type)


@pytest.mark.parametrize("line", [None, "", "Main St", "N 100 Main", "100"])
def test_parse_rejects_lines_without_number_or_name(line):
    with pytest.raises(ValueError):
        Street.parse(line)


def test_street_ordering_is_name_type_number():
    streets = [
        Street.of(200, "Main").as_street(),
        Street.of(100, "Main").as_street(),
        Street.of(50, "Main").as_avenue(),
        Street.of(999, "Elm"),
    ]
    assert [str(s) for s in sorted(streets)] == ["999 Elm", "50 Main AVE", "100 Main ST", "200 Main ST"]


def test_from_street_copies():
    street = Street.of(100, "Main").as_way().with_direction(Direction.EAST)
    copy = Street.from_street(street)
    assert copy == street and copy is not street


def test_street_type_lookup():
    assert StreetType.value_of_abbreviation("blvd") is StreetType.BOULEVARD
    assert StreetType.value_of_name("Highway") is StreetType.HIGHWAY
    with pytest.raises(ValueError):
        StreetType.value_of_abbreviation("XYZ")


# ---------------------------------------------------------------------------
# Unit
# ---------------------------------------------------------------------------
def test_unit_as_returns_a_new_unit():
    unit = Unit.of("101")
    suite = unit.as_suite()
    assert suite is not unit
    assert unit.type is None and suite.type is UnitType.SUITE
    assert str(suite) == "Suite 101"
    assert str(unit) == "101"


def test_unit_number_is_required():
    with pytest.raises(ValueError):
        Unit.of(" ")


@pytest.mark.parametrize("cls, unit_type", [
    (Apartment, UnitType.APARTMENT), (Office, UnitType.OFFICE), (Room, UnitType.ROOM), (Suite, UnitType.SUITE),
])
def test_fixed_type_units_cannot_change_type(cls, unit_type):
    unit = cls.of("1A")
    assert unit.type is unit_type
    with pytest.raises(UnsupportedOperationError, match="Type cannot be changed"):
        unit.as_(UnitType.ROOM)


def test_fixed_type_unit_equals_typed_unit():
    assert Apartment.of("2") == Unit.of("2").as_apartment()


def test_unit_ordering_is_type_then_number():
    units = [Suite.of("1"), Unit.of("9"), Apartment.of("3"), Apartment.of("2")]
    assert [str(u) for u in sorted(units)] == ["9", "Apartment 2", "Apartment 3", "Suite 1"]


def test_unit_type_lookup():
    assert UnitType.value_of_abbreviation("ste") is UnitType.SUITE
    assert UnitType.value_of_name("office") is UnitType.OFFICE
    with pytest.raises(ValueError):
        UnitType.value_of_name("Closet")
