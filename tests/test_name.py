"""
tests/test_name.py
==================

Unit tests for kindred.core.name.Name
"""

import pytest

from kindred.core import Name


def test_of_first_and_last():
    name = Name.of("Jon", "Doe")
    assert (name.first_name, name.middle_name, name.last_name) == ("Jon", None, "Doe")


def test_of_first_middle_and_last():
    name = Name.of("Jon", "R", "Doe")
    assert name.middle_name == "R"
    assert str(name) == "Jon R Doe"


def test_blank_middle_name_is_absent():
    assert Name.of("Jon", "  ", "Doe").middle_name is None


@pytest.mark.parametrize("first, last", [(None, "Doe"), ("", "Doe"), ("  ", "Doe"), ("Jon", None), ("Jon", " ")])
def test_first_and_last_name_are_required(first, last):
    with pytest.raises(ValueError):
        Name.of(first, last)


def test_parse_strips_titles_and_suffixes():
    name = Name.of("Dr. Jon Robert Doe Jr.")
    assert name == Name.of("Jon", "Robert", "Doe")


def test_parse_drops_the_comma_before_a_suffix():
    assert Name.of("Jon Doe, Jr.") == Name.of("Jon", "Doe")
    assert Name.of("Jon Doe, Jr.").last_name == "Doe"


def test_parse_is_case_insensitive_for_titles():
    assert Name.of("mrs jane doe") == Name.of("jane", "doe")


def test_parse_joins_inner_tokens_into_the_middle_name():
    assert Name.of("Jon Jacob Jingleheimer Schmidt").middle_name == "Jacob Jingleheimer"


@pytest.mark.parametrize("text", [None, "", "Jon", "Mr. Doe", "Sir Jon Sr."])
def test_parse_needs_first_and_last_name(text):
    with pytest.raises(ValueError):
        Name.of(text)


def test_parse_round_trips_str():
    for name in (Name.of("Jon", "Doe"), Name.of("Jane", "R", "Doe")):
        assert Name.of(str(name)) == name


def test_ordering_is_last_first_middle():
    names = [
        Name.of("Jon", "R", "Doe"),
        Name.of("Adam", "Smith"),
        Name.of("Jon", "Doe"),
        Name.of("Jane", "Doe"),
    ]
    assert [str(n) for n in sorted(names)] == ["Jane Doe", "Jon Doe", "Jon R Doe", "Adam Smith"]


def test_change_returns_a_new_name():
    name = Name.of("Jane", "R", "Doe")
    married = name.change("Smith")
    assert str(married) == "Jane R Smith"
    assert str(name) == "Jane R Doe"


def test_like_matches_first_or_last_name():
    jon = Name.of("Jon", "Doe")
    assert jon.like(Name.of("Jane", "Doe"))
    assert jon.like(Name.of("Jon", "Smith"))
    assert not jon.like(Name.of("Jane", "Smith"))
    assert not jon.like(None)


def test_of_copies_a_name():
    name = Name.of("Jon", "R", "Doe")
    copy = Name.of(name)
    assert copy == name and copy is not name


def test_accept_visits_the_name():
    seen = []
    Name.of("Jon", "Doe").accept(seen.append)
    assert seen == [Name.of("Jon", "Doe")]
