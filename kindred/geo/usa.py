"""
kindred.geo.usa
===============

United States specifics: ZIP codes, cities with a state, and the
:class:`UnitedStatesAddress` with its registered builder.

Well-known cities are :class:`ImmutableUnitedStatesCity` constants whose
state cannot be reassigned::

    >>> SACRAMENTO.state is State.CALIFORNIA, SACRAMENTO.capital
    (True, True)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from kindred.errors import IllegalStateError

from .address import Address, AddressBuilder, register_address_builder
from .city import City
from .enums import Country, State
from .postal_code import PostalCode

logger = logging.getLogger(__name__)

USA = Country.UNITED_STATES_OF_AMERICA


# ---------------------------------------------------------------------
# ZIP
# ---------------------------------------------------------------------
@dataclass(frozen=True, eq=False)
class ZIP(PostalCode):
    """
    Five digit US postal code with an optional four digit add-on.

    ``ZIP("95814-1234")`` and ``ZIP("958141234")`` are the same code;
    ``str`` renders the hyphenated form.
    """
    country: Optional[Country] = USA

    def __post_init__(self) -> None:
        super().__post_init__()
        digits = str(self.number).strip().replace("-", "")
        if not digits.isdigit() or len(digits) not in (5, 9):
            raise ValueError(f"ZIP [{self.number}] must be 5 or 9 digits")
        object.__setattr__(self, "number", digits)
        object.__setattr__(self, "country", USA)

    @classmethod
    def of(cls, number: str, country: Optional[Country] = None) -> "ZIP":
        return cls(str(number))

    @classmethod
    def from_postal_code(cls, postal_code: PostalCode) -> "ZIP":
        if postal_code is None:
            raise ValueError("Postal Code is required")
        if isinstance(postal_code, ZIP):
            return postal_code
        return cls(postal_code.number)

    @property
    def five_digits(self) -> str:
        return self.number[:5]

    @property
    def plus_four(self) -> Optional[str]:
        return self.number[5:] or None

    def with_plus_four(self, plus_four: str) -> "ZIP":
        return ZIP(self.five_digits + str(plus_four))

    def __str__(self) -> str:
        return f"{self.five_digits}-{self.plus_four}" if self.plus_four else self.number


# ---------------------------------------------------------------------
# Cities
# ---------------------------------------------------------------------
class UnitedStatesCity(City):
    """City in the United States, qualified by its state."""

    def __init__(self, name: str, state: Optional[State] = None, capital: bool = False) -> None:
        super().__init__(name, USA)
        self._state = state
        self.capital = capital

    @property
    def state(self) -> Optional[State]:
        return self._state

    @state.setter
    def state(self, state: Optional[State]) -> None:
        self._state = state

    def in_state(self, state: Optional[State]) -> "UnitedStatesCity":
        self.state = state
        return self

    def __eq__(self, other: object) -> bool:
        """
        Cities are equal by name; the states are compared only when both
        cities carry one.

        A city without a state therefore matches that name in every state,
        so ``Portland, OR`` and ``Portland, ME`` both equal ``City("Portland")``
        while differing from each other.  Equality is not transitive across
        state-less cities; qualify both sides with a state to tell them apart.
        """
        if isinstance(other, UnitedStatesCity) and self.state is not None and other.state is not None:
            return self.name == other.name and self.state == other.state
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, state={self._state}, capital={self.capital!r})"

    def __str__(self) -> str:
        return f"{self.name}, {self._state.abbreviation}" if self._state else self.name


class ImmutableUnitedStatesCity(UnitedStatesCity):
    @property
    def state(self) -> Optional[State]:
        return self._state

    @state.setter
    def state(self, state: Optional[State]) -> None:
        raise IllegalStateError("State cannot be changed")


ALBANY = ImmutableUnitedStatesCity("Albany", State.NEW_YORK, capital=True)
AUSTIN = ImmutableUnitedStatesCity("Austin", State.TEXAS, capital=True)
CHEYENNE = ImmutableUnitedStatesCity("Cheyenne", State.WYOMING, capital=True)
CUBA_CITY = ImmutableUnitedStatesCity("Cuba City", State.WISCONSIN)
DENVER = ImmutableUnitedStatesCity("Denver", State.COLORADO, capital=True)
HELENA = ImmutableUnitedStatesCity("Helena", State.MONTANA, capital=True)
JACKSON = ImmutableUnitedStatesCity("Jackson", State.MISSISSIPPI, capital=True)
LANSING = ImmutableUnitedStatesCity("Lansing", State.MICHIGAN, capital=True)
MADISON = ImmutableUnitedStatesCity("Madison", State.WISCONSIN, capital=True)
MIAMI = ImmutableUnitedStatesCity("Miami", State.FLORIDA)
NASHVILLE = ImmutableUnitedStatesCity("Nashville", State.TENNESSEE, capital=True)
PORTLAND = ImmutableUnitedStatesCity("Portland", State.OREGON)
SACRAMENTO = ImmutableUnitedStatesCity("Sacramento", State.CALIFORNIA, capital=True)
SAN_DIEGO = ImmutableUnitedStatesCity("San Diego", State.CALIFORNIA)
SPRINGFIELD = ImmutableUnitedStatesCity("Springfield", State.ILLINOIS, capital=True)


# ---------------------------------------------------------------------
# Address
# ---------------------------------------------------------------------
class UnitedStatesAddress(Address):
    """
    Address in the United States.

    The postal code is always a :class:`ZIP`; a plain
    :class:`~kindred.geo.postal_code.PostalCode` is converted on assignment.
    The state defaults to the state of a :class:`UnitedStatesCity`.
    """

    def __init__(self, street, city, postal_code, state: Optional[State] = None) -> None:
        super().__init__(street, city, postal_code, USA)
        self._state = state

    @Address.postal_code.setter
    def postal_code(self, postal_code: PostalCode) -> None:
        if postal_code is None:
            raise ValueError("Postal Code is required")
        self._postal_code = ZIP.from_postal_code(postal_code)

    @Address.country.setter
    def country(self, country: Country) -> None:
        if country is not USA:
            raise ValueError(f"Country [{country}] must be {USA.name}")
        self._country = country

    @property
    def state(self) -> Optional[State]:
        if self._state is None and isinstance(self.city, UnitedStatesCity):
            return self.city.state
        return self._state

    @state.setter
    def state(self, state: Optional[State]) -> None:
        self._state = state

    def in_state(self, state: Optional[State]) -> "UnitedStatesAddress":
        self.state = state
        return self

    @property
    def zip(self) -> ZIP:
        return self.postal_code

    @zip.setter
    def zip(self, zip: ZIP) -> None:
        self.postal_code = zip

    def validate(self) -> "UnitedStatesAddress":
        super().validate()
        if self.state is None:
            raise IllegalStateError("State is required")
        return self

    def _identity(self):
        return super()._identity() + (self.state,)

    def _locality(self) -> str:
        if self.state is None:
            return super()._locality()
        return f"{self.city.name}, {self.state.abbreviation} {self.zip}"


@register_address_builder(USA)
class UnitedStatesAddressBuilder(AddressBuilder):
    """Builds a :class:`UnitedStatesAddress`; the country is always the USA."""

    def __init__(self, country: Optional[Country] = None) -> None:
        self.state: Optional[State] = None
        super().__init__(country)

    def in_country(self, country: Optional[Country]) -> "UnitedStatesAddressBuilder":
        if country is not None and country is not USA:
            raise ValueError(f"Country [{country}] must be {USA.name}")
        self._country = USA
        return self

    def in_state(self, state: Optional[State]) -> "UnitedStatesAddressBuilder":
        self.state = state
        return self

    def from_address(self, address: Address) -> "UnitedStatesAddressBuilder":
        super().from_address(address)
        if isinstance(address, UnitedStatesAddress):
            self.in_state(address.state)
        return self

    def _new_address(self) -> UnitedStatesAddress:
        state = self.state
        if state is None and isinstance(self.city, UnitedStatesCity):
            state = self.city.state
            logger.debug(f"Inferred state {state} from city {self.city.name}")
        return UnitedStatesAddress(self.street, self.city, self.postal_code, state)
