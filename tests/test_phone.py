"""
tests/test_phone.py
===================

Unit tests for kindred.contact.phone and kindred.contact.area_codes
"""

import pytest

from kindred.contact import (AreaCode, ExchangeCode, Extension, GenericPhoneNumber, LineNumber, PhoneNumber,
                             PhoneNumberBuilder, PhoneNumberType, UnitedStatesPhoneNumber, copy_phone_number,
                             find_area_codes_by, find_state_by)
from kindred.errors import IllegalStateError
from kindred.geo import Country, State


def _number(area="971", exchange="555", line="1234"):
    return (PhoneNumberBuilder()
            .in_area_code(AreaCode.of(area))
            .with_exchange_code(ExchangeCode.of(exchange))
            .with_line_number(LineNumber.of(line))
            .build())


# ---------------------------------------------------------------------------
# Number parts
# ---------------------------------------------------------------------------
def test_parts_accept_numbers_or_text():
    assert AreaCode.of(971) == AreaCode.of("971")
    assert str(LineNumber.of("1234")) == "1234"
    assert AreaCode.of("(503)").number == "503"


@pytest.mark.parametrize("factory, digits", [
    (AreaCode, "97"), (AreaCode, "9710"), (ExchangeCode, "55"), (LineNumber, "123"), (LineNumber, "12345"),
])
def test_parts_require_their_length(factory, digits):
    with pytest.raises(ValueError, match="digit number"):
        factory(digits)


@pytest.mark.parametrize("digits", [None, "", "12a", "x12"])
def test_extension_is_digits_only(digits):
    with pytest.raises(ValueError):
        Extension.of(digits)


def test_parts_of_different_kinds_differ():
    assert AreaCode.of("555") != ExchangeCode.of("555")


def test_parts_are_immutable():
    with pytest.raises(AttributeError):
        AreaCode.of("503")._number = "971"


# ---------------------------------------------------------------------------
# PhoneNumber
# ---------------------------------------------------------------------------
def test_builder_makes_a_generic_number():
    number = _number()
    assert isinstance(number, GenericPhoneNumber)
    assert str(number) == "(971) 555-1234"
    assert number.extension is None and number.country is None
    assert number.validate() is number


def test_builder_requires_every_part():
    builder = PhoneNumberBuilder().in_area_code(AreaCode.of(971)).with_exchange_code(ExchangeCode.of(555))
    with pytest.raises(IllegalStateError, match="Line Number is required"):
        builder.build()
    with pytest.raises(ValueError):
        builder.with_line_number(None)


def test_builder_options():
    number = (PhoneNumberBuilder().from_phone_number(_number())
              .with_extension(Extension.of("42"))
              .in_country(Country.CANADA)
              .with_text_enabled()
              .build())
    assert str(number) == "(971) 555-1234 x42"
    assert number.country is Country.CANADA
    assert number.text_enabled


def test_type_predicates():
    number = _number()
    assert number.is_unknown
    assert number.as_cell() is number and number.is_cell
    assert number.as_voip().is_voip and not number.is_cell
    assert number.as_(PhoneNumberType.UNKNOWN).is_unknown


def test_type_lookup():
    assert PhoneNumberType.value_of_abbreviation("land") is PhoneNumberType.LANDLINE
    assert str(PhoneNumberType.VOIP) == "Voice-Over-IP"
    with pytest.raises(ValueError):
        PhoneNumberType.value_of_abbreviation("FAX")


def test_roaming_outside_the_local_country(local_country):
    local_country("UNITED_STATES_OF_AMERICA")
    assert _number().is_roaming
    assert not _number().in_local_country().is_roaming
    assert _number().in_(Country.MEXICO).is_roaming


def test_equality_ignores_type_id_and_text():
    a = _number().as_cell().identified_by(1)
    b = _number().as_landline().with_text_enabled()
    assert a == b and hash(a) == hash(b)
    assert _number() != _number().with_extension(Extension.of("1"))
    assert _number() != _number().in_(Country.CANADA)


def test_ordering_area_exchange_line_extension():
    numbers = [_number("971", "555", "0001").with_extension(Extension.of("9")),
               _number("503", "999", "9999"),
               _number("971", "555", "0001"),
               _number("971", "111", "5555")]
    assert [str(n) for n in sorted(numbers)] == [
        "(503) 999-9999", "(971) 111-5555", "(971) 555-0001", "(971) 555-0001 x9"]


def test_accept_visits_the_number():
    seen = []
    number = _number()
    number.accept(seen.append)
    assert seen == [number]


def test_generic_copy_lands_in_the_local_country(local_country):
    local_country("CANADA")
    original = _number().with_extension(Extension.of("7")).as_satellite()
    copy = GenericPhoneNumber.from_phone_number(original)
    assert copy.country is Country.CANADA
    assert copy.extension == Extension.of("7") and copy.is_satellite


def test_united_states_number_is_always_in_the_usa():
    number = UnitedStatesPhoneNumber.of(AreaCode.of(503), ExchangeCode.of(555), LineNumber.of(1234))
    assert number.country is Country.UNITED_STATES_OF_AMERICA
    with pytest.raises(ValueError):
        number.in_(Country.CANADA)


def test_copy_phone_number_keeps_the_kind_and_type():
    us = UnitedStatesPhoneNumber.from_phone_number(_number().as_cell()).identified_by(3)
    copy = copy_phone_number(us)
    assert isinstance(copy, UnitedStatesPhoneNumber) and copy == us and copy.is_cell
    assert copy.id is None

    generic = _number().in_(Country.MEXICO).as_landline()
    assert copy_phone_number(generic) == generic and copy_phone_number(generic).is_landline


def test_base_number_requires_its_parts():
    with pytest.raises(ValueError, match="Area Code is required"):
        PhoneNumber(None, ExchangeCode.of(555), LineNumber.of(1234))


# ---------------------------------------------------------------------------
# Area codes by state
# ---------------------------------------------------------------------------
def test_find_state_by_area_code():
    assert find_state_by(AreaCode.of(503)) is State.OREGON
    assert find_state_by(AreaCode.of(608)) is State.WISCONSIN


def test_unknown_area_code_has_no_state():
    with pytest.raises(ValueError, match="No State"):
        find_state_by(AreaCode.of(999))


def test_find_area_codes_by_state():
    assert find_area_codes_by(State.ALASKA) == {AreaCode.of(907)}
    assert AreaCode.of(971) in find_area_codes_by(State.OREGON)
    with pytest.raises(ValueError):
        find_area_codes_by(None)
