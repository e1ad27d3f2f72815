"""
kindred.contact.phone
=====================

North American style phone numbers: a 3-digit :class:`AreaCode`, a
3-digit :class:`ExchangeCode`, a 4-digit :class:`LineNumber` and an
optional :class:`Extension`.

The number parts are immutable value objects ordered by their digits.
:class:`PhoneNumber` itself is mutable: country, extension, type, id and
text capability can change after construction, while the three number
parts are fixed.

Example
-------
>>> number = (PhoneNumberBuilder()
...           .in_area_code(AreaCode.of(971))
...           .with_exchange_code(ExchangeCode.of(555))
...           .with_line_number(LineNumber.of(1234))
...           .build())
>>> str(number.as_cell())
'(971) 555-1234'
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering
from typing import Callable, Optional, Tuple, Union

from kindred.errors import IllegalStateError
from kindred.geo.enums import Country

logger = logging.getLogger(__name__)

USA = Country.UNITED_STATES_OF_AMERICA


# ---------------------------------------------------------------------
# Number parts
# ---------------------------------------------------------------------
@total_ordering
class _DigitsValue:
    """Immutable run of digits; subclasses fix the required length."""

    label = "Number"
    length: Optional[int] = None

    def __init__(self, digits: Union[int, str]) -> None:
        if digits is None:
            raise ValueError(f"{self.label} is required")
        text = str(digits).strip()
        number = "".join(character for character in text if character.isdigit())
        if self.length is not None and len(number) != self.length:
            raise ValueError(f"{self.label} [{digits}] must be a {self.length}-digit number")
        if self.length is None and (not text or number != text):
            raise ValueError(f"{self.label} [{digits}] must contain digits only")
        self._number = number

    @classmethod
    def of(cls, digits: Union[int, str]):
        return cls(digits)

    @property
    def number(self) -> str:
        return self._number

    def __setattr__(self, name, value) -> None:
        if name != "_number" or "_number" in self.__dict__:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._number == other._number

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._number))

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._number < other._number

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._number!r})"

    def __str__(self) -> str:
        return self._number


class AreaCode(_DigitsValue):
    label = "Area Code"
    length = 3


class ExchangeCode(_DigitsValue):
    label = "Exchange Code"
    length = 3


class LineNumber(_DigitsValue):
    label = "Line Number"
    length = 4


class Extension(_DigitsValue):
    """Extension of any length, digits only."""
    label = "Extension"


class PhoneNumberType(Enum):
    CELL = ("CELL", "Cellular")
    LANDLINE = ("LAND", "Landline")
    SATELLITE = ("SAT", "Satellite")
    VOIP = ("VOIP", "Voice-Over-IP")
    UNKNOWN = ("??", "Unknown")

    def __init__(self, abbreviation: str, description: str) -> None:
        self.abbreviation = abbreviation
        self.description = description

    @classmethod
    def value_of_abbreviation(cls, abbreviation: Optional[str]) -> "PhoneNumberType":
        key = (abbreviation or "").strip().upper()
        for phone_number_type in cls:
            if phone_number_type.abbreviation == key:
                return phone_number_type
        raise ValueError(f"Phone Number Type for abbreviation [{abbreviation}] was not found")

    def __str__(self) -> str:
        return self.description


# ---------------------------------------------------------------------
# Phone numbers
# ---------------------------------------------------------------------
@total_ordering
class PhoneNumber:
    """
    Base phone number.

    Phone numbers are equal by area code, exchange code, line number,
    extension and country, and ordered by area code, exchange code, line
    number and then extension (a number without an extension sorts first).
    Type, id and text capability are descriptive only.
    """

    def __init__(self, area_code: AreaCode, exchange_code: ExchangeCode, line_number: LineNumber) -> None:
        if area_code is None:
            raise ValueError("Area Code is required")
        if exchange_code is None:
            raise ValueError("Exchange Code is required")
        if line_number is None:
            raise ValueError("Line Number is required")
        self._area_code = area_code
        self._exchange_code = exchange_code
        self._line_number = line_number
        self._country: Optional[Country] = None
        self.extension: Optional[Extension] = None
        self.type: Optional[PhoneNumberType] = None
        self.text_enabled: bool = False
        self.id: Optional[int] = None

    @property
    def area_code(self) -> AreaCode:
        return self._area_code

    @property
    def exchange_code(self) -> ExchangeCode:
        return self._exchange_code

    @property
    def line_number(self) -> LineNumber:
        return self._line_number

    @property
    def country(self) -> Optional[Country]:
        return self._country

    @country.setter
    def country(self, country: Optional[Country]) -> None:
        self._country = country

    # ------------------------------------------------------------------
    # Fluent mutators
    # ------------------------------------------------------------------
    def in_(self, country: Optional[Country]) -> "PhoneNumber":
        self.country = country
        return self

    def in_local_country(self) -> "PhoneNumber":
        return self.in_(Country.local_country())

    def with_extension(self, extension: Optional[Extension]) -> "PhoneNumber":
        self.extension = extension
        return self

    def with_text_enabled(self, enabled: bool = True) -> "PhoneNumber":
        self.text_enabled = bool(enabled)
        return self

    def identified_by(self, id: Optional[int]) -> "PhoneNumber":
        self.id = id
        return self

    def as_(self, phone_number_type: Optional[PhoneNumberType]) -> "PhoneNumber":
        self.type = phone_number_type
        return self

    def as_cell(self) -> "PhoneNumber":
        return self.as_(PhoneNumberType.CELL)

    def as_landline(self) -> "PhoneNumber":
        return self.as_(PhoneNumberType.LANDLINE)

    def as_satellite(self) -> "PhoneNumber":
        return self.as_(PhoneNumberType.SATELLITE)

    def as_voip(self) -> "PhoneNumber":
        return self.as_(PhoneNumberType.VOIP)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------
    @property
    def is_cell(self) -> bool:
        return self.type is PhoneNumberType.CELL

    @property
    def is_landline(self) -> bool:
        return self.type is PhoneNumberType.LANDLINE

    @property
    def is_satellite(self) -> bool:
        return self.type is PhoneNumberType.SATELLITE

    @property
    def is_voip(self) -> bool:
        return self.type is PhoneNumberType.VOIP

    @property
    def is_unknown(self) -> bool:
        return self.type is None or self.type is PhoneNumberType.UNKNOWN

    @property
    def is_roaming(self) -> bool:
        """``True`` unless the number is in the local country."""
        return self.country is None or self.country is not Country.local_country()

    def validate(self) -> "PhoneNumber":
        for part, label in ((self._area_code, "Area Code"), (self._exchange_code, "Exchange Code"),
                            (self._line_number, "Line Number")):
            if part is None:
                raise IllegalStateError(f"{label} is required")
        return self

    def accept(self, visitor: Callable[["PhoneNumber"], object]) -> None:
        visitor(self)

    # ------------------------------------------------------------------
    # Identity & ordering
    # ------------------------------------------------------------------
    def sort_key(self) -> Tuple[str, str, str, str]:
        extension = self.extension.number if self.extension else ""
        return self._area_code.number, self._exchange_code.number, self._line_number.number, extension

    def _identity(self) -> tuple:
        return self._area_code, self._exchange_code, self._line_number, self.extension, self.country

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PhoneNumber):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PhoneNumber):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(area_code={self._area_code.number!r}, "
                f"exchange_code={self._exchange_code.number!r}, line_number={self._line_number.number!r}, "
                f"extension={self.extension.number if self.extension else None!r}, country={self.country})")

    def __str__(self) -> str:
        text = f"({self._area_code}) {self._exchange_code}-{self._line_number}"
        return f"{text} x{self.extension}" if self.extension else text


class GenericPhoneNumber(PhoneNumber):
    """Phone number in any country."""

    @classmethod
    def of(cls, area_code: AreaCode, exchange_code: ExchangeCode, line_number: LineNumber) -> "GenericPhoneNumber":
        return cls(area_code, exchange_code, line_number)

    @classmethod
    def from_phone_number(cls, phone_number: PhoneNumber) -> "GenericPhoneNumber":
        """Copy *phone_number*; a number without a country lands in the local country."""
        if phone_number is None:
            raise ValueError("Phone Number to copy is required")
        copy = cls(phone_number.area_code, phone_number.exchange_code, phone_number.line_number)
        copy.in_(phone_number.country or Country.local_country())
        copy.extension = phone_number.extension
        copy.type = phone_number.type
        copy.text_enabled = phone_number.text_enabled
        return copy


class UnitedStatesPhoneNumber(PhoneNumber):
    """Phone number whose country is always the United States."""

    def __init__(self, area_code: AreaCode, exchange_code: ExchangeCode, line_number: LineNumber) -> None:
        super().__init__(area_code, exchange_code, line_number)
        self._country = USA

    @classmethod
    def of(cls, area_code: AreaCode, exchange_code: ExchangeCode,
           line_number: LineNumber) -> "UnitedStatesPhoneNumber":
        return cls(area_code, exchange_code, line_number)

    @classmethod
    def from_phone_number(cls, phone_number: PhoneNumber) -> "UnitedStatesPhoneNumber":
        if phone_number is None:
            raise ValueError("Phone Number to copy is required")
        copy = cls(phone_number.area_code, phone_number.exchange_code, phone_number.line_number)
        copy.extension = phone_number.extension
        copy.type = phone_number.type
        copy.text_enabled = phone_number.text_enabled
        return copy

    @PhoneNumber.country.setter
    def country(self, country: Optional[Country]) -> None:
        if country is not USA:
            raise ValueError(f"Country [{country}] must be {USA.name}")
        self._country = country


# ---------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------
class PhoneNumberBuilder:
    """Accumulates the parts of a phone number; :meth:`build` makes a :class:`GenericPhoneNumber`."""

    def __init__(self) -> None:
        self.area_code: Optional[AreaCode] = None
        self.exchange_code: Optional[ExchangeCode] = None
        self.line_number: Optional[LineNumber] = None
        self.extension: Optional[Extension] = None
        self.country: Optional[Country] = None
        self.text_enabled = False

    def from_phone_number(self, phone_number: PhoneNumber) -> "PhoneNumberBuilder":
        if phone_number is None:
            raise ValueError("Phone Number to copy is required")
        self.text_enabled = phone_number.text_enabled
        return (self.in_area_code(phone_number.area_code)
                .with_exchange_code(phone_number.exchange_code)
                .with_line_number(phone_number.line_number)
                .with_extension(phone_number.extension)
                .in_country(phone_number.country))

    def in_area_code(self, area_code: AreaCode) -> "PhoneNumberBuilder":
        if area_code is None:
            raise ValueError("Area Code is required")
        self.area_code = area_code
        return self

    def with_exchange_code(self, exchange_code: ExchangeCode) -> "PhoneNumberBuilder":
        if exchange_code is None:
            raise ValueError("Exchange Code is required")
        self.exchange_code = exchange_code
        return self

    def with_line_number(self, line_number: LineNumber) -> "PhoneNumberBuilder":
        if line_number is None:
            raise ValueError("Line Number is required")
        self.line_number = line_number
        return self

    def with_extension(self, extension: Optional[Extension]) -> "PhoneNumberBuilder":
        self.extension = extension
        return self

    def in_country(self, country: Optional[Country]) -> "PhoneNumberBuilder":
        self.country = country
        return self

    def in_local_country(self) -> "PhoneNumberBuilder":
        return self.in_country(Country.local_country())

    def with_text_enabled(self) -> "PhoneNumberBuilder":
        self.text_enabled = True
        return self

    def build(self) -> GenericPhoneNumber:
        if self.area_code is None:
            raise IllegalStateError("Area Code is required")
        if self.exchange_code is None:
            raise IllegalStateError("Exchange Code is required")
        if self.line_number is None:
            raise IllegalStateError("Line Number is required")
        phone_number = GenericPhoneNumber(self.area_code, self.exchange_code, self.line_number)
        phone_number.country = self.country
        phone_number.extension = self.extension
        phone_number.text_enabled = self.text_enabled
        logger.debug(f"Built phone number {phone_number!r}")
        return phone_number


def copy_phone_number(phone_number: PhoneNumber) -> PhoneNumber:
    """Copy *phone_number* (id excluded), keeping its type."""
    if isinstance(phone_number, UnitedStatesPhoneNumber):
        return UnitedStatesPhoneNumber.from_phone_number(phone_number)
    copy = PhoneNumberBuilder().from_phone_number(phone_number).build()
    return copy.as_(phone_number.type)
