"""
tests/test_geo_values.py
========================

Unit tests for the small geo value objects: enums, Distance, Elevation,
Coordinates, City and PostalCode.
"""

import pytest

from kindred.geo import (City, Continent, Coordinates, Country, Direction, Distance, Elevation, LengthUnit,
                         PostalCode, State)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------
def test_country_lookup_by_name_or_label():
    assert Country.value_of_name("united states of america") is Country.UNITED_STATES_OF_AMERICA
    assert Country.value_of_name("UNITED_KINGDOM") is Country.UNITED_KINGDOM
    with pytest.raises(ValueError):
        Country.value_of_name("Atlantis")


def test_countries_by_continent():
    north_america = Continent.NORTH_AMERICA.countries()
    assert {Country.CANADA, Country.MEXICO, Country.UNITED_STATES_OF_AMERICA} <= north_america
    assert Country.FRANCE not in north_america
    assert Country.UNKNOWN.continents == frozenset()


def test_local_country_comes_from_settings(local_country):
    local_country("CANADA")
    assert Country.local_country() is Country.CANADA


def test_invalid_local_country_falls_back_to_unknown(local_country, caplog):
    local_country("ATLANTIS")
    assert Country.local_country() is Country.UNKNOWN
    assert "ATLANTIS" in caplog.text


def test_state_lookup():
    assert State.value_of_abbreviation("ca") is State.CALIFORNIA
    assert State.value_of_name("new york") is State.NEW_YORK
    assert State.value_of_abbreviation("XX") is None


def test_direction_lookup_and_bounds():
    assert Direction.from_abbreviation("nw") is Direction.NORTHWEST
    assert Direction.from_name("south") is Direction.SOUTH
    assert Direction.NORTHEAST.is_northbound and Direction.NORTHEAST.is_eastbound
    assert not Direction.WEST.is_southbound
    with pytest.raises(ValueError):
        Direction.from_abbreviation("X")


# ---------------------------------------------------------------------------
# Distance & Elevation
# ---------------------------------------------------------------------------
def test_distance_equality_is_by_metric_value():
    assert Distance.in_feet(3.0) == Distance.in_yards(1.0)
    assert hash(Distance.in_feet(3.0)) == hash(Distance.in_yards(1.0))
    assert Distance.in_kilometers(1.0) == Distance.in_meters(1000.0)


def test_distance_ordering():
    assert Distance.in_miles(1.0) > Distance.in_kilometers(1.0)
    assert sorted([Distance.in_feet(1.0), Distance.in_meters(1.0)])[0].unit is LengthUnit.FOOT


def test_distance_conversion():
    assert Distance.in_miles(1.0).to_kilometers().measurement == pytest.approx(1.609344)
    assert str(Distance.in_feet(1.0)) == "1.0 foot"
    assert str(Distance.in_feet(2.0)) == "2.0 feet"


def test_distance_must_not_be_negative():
    with pytest.raises(ValueError):
        Distance.in_meters(-1.0)


def test_default_length_unit_comes_from_settings(monkeypatch):
    from kindred.settings import settings

    monkeypatch.setattr(settings, "length_unit", "FOOT")
    assert Distance(5.0).unit is LengthUnit.FOOT
    assert Elevation(5.0).unit is LengthUnit.FOOT


def test_elevation_sea_level_predicates():
    assert Elevation.at_sea_level().is_at_sea_level
    assert Elevation.of(10.0).is_above_sea_level
    assert Elevation.of(-86.0).is_below_sea_level


def test_elevation_equality_is_unit_normalised():
    assert Elevation(1.0, LengthUnit.YARD) == Elevation(3.0, LengthUnit.FOOT)
    assert Elevation(1000.0, LengthUnit.METER).in_feet().altitude == pytest.approx(3280.839895)


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------
def test_coordinates_default_to_sea_level():
    coordinates = Coordinates.of(45.5, -122.6)
    assert coordinates.elevation.is_at_sea_level


def test_coordinates_at_returns_a_copy():
    coordinates = Coordinates.of(39.7, -104.9)
    mile_high = coordinates.at(1.0, LengthUnit.MILE)
    assert mile_high is not coordinates
    assert coordinates.elevation.is_at_sea_level
    assert mile_high.elevation == Elevation(5280.0, LengthUnit.FOOT)
    assert mile_high != coordinates


@pytest.mark.parametrize("latitude, longitude", [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)])
def test_coordinates_are_range_checked(latitude, longitude):
    with pytest.raises(ValueError):
        Coordinates(latitude, longitude)


# ---------------------------------------------------------------------------
# City & PostalCode
# ---------------------------------------------------------------------------
def test_city_requires_a_name():
    with pytest.raises(ValueError):
        City.of(" ")


def test_city_orders_by_country_then_name():
    cities = [City.of("Zurich", Country.SWITZERLAND), City.of("Berlin", Country.GERMANY), City.of("Paris")]
    assert [c.name for c in sorted(cities)] == ["Berlin", "Zurich", "Paris"]


def test_city_equality_is_by_name():
    assert City.of("Paris") == City.of("Paris", Country.FRANCE)


def test_postal_code_equality_includes_country():
    assert PostalCode.of("10115") == PostalCode.of("10115")
    assert PostalCode.of("10115") != PostalCode.of("10115", Country.GERMANY)


def test_postal_code_orders_by_text():
    codes = [PostalCode.of("90210"), PostalCode.of("10115"), PostalCode.of("A1A 1A1")]
    assert [str(c) for c in sorted(codes)] == ["10115", "90210", "A1A 1A1"]


def test_postal_code_requires_a_number():
    with pytest.raises(ValueError):
        PostalCode.of("")
