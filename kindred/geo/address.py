"""
kindred.geo.address
===================

Postal addresses and the builders that make them.

Import structure
----------------
``Address``
    Mutable base entity.  Street, city, postal code and country are
    required; their setters reject ``None``.
``AddressBuilder``
    Accumulates the components and builds the concrete address on
    :meth:`AddressBuilder.build`.  Concrete builders announce the country
    they serve with :func:`register_address_builder`; countries without a
    registered builder are served by the generic builder
    (see :mod:`kindred.geo.factory`).

Addresses are ordered by country name, city, postal code, street and
finally unit (a missing unit sorts first).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from functools import total_ordering
from typing import Callable, Dict, Optional, Type

from kindred.errors import IllegalStateError

from .city import City
from .coordinates import Coordinates
from .enums import Country
from .postal_code import PostalCode
from .street import Street
from .unit import Unit, unit_key

logger = logging.getLogger(__name__)


class AddressType(Enum):
    BILLING = ("BA", "Billing")
    HOME = ("HA", "Home")
    MAILING = ("MA", "Mailing")
    OFFICE = ("OA", "Office")
    PO_BOX = ("PO", "Post Office Box")
    WORK = ("WA", "Work")
    UNKNOWN = ("??", "Unknown")

    def __init__(self, abbreviation: str, description: str) -> None:
        self.abbreviation = abbreviation
        self.description = description

    @classmethod
    def value_of_abbreviation(cls, abbreviation: Optional[str]) -> "AddressType":
        key = (abbreviation or "").strip().upper()
        for address_type in cls:
            if address_type.abbreviation == key:
                return address_type
        raise ValueError(f"Type for abbreviation [{abbreviation}] was not found")

    def __str__(self) -> str:
        return self.description


def _require(value, message: str):
    if value is None:
        raise ValueError(message)
    return value


@total_ordering
class Address:
    """
    Street address in a city, postal code and country.

    Fluent methods (:meth:`on`, :meth:`in_unit`, :meth:`in_city`,
    :meth:`in_postal_code`, :meth:`in_country`, :meth:`at`, :meth:`as_`)
    set one component and return the address.
    """

    def __init__(self, street: Street, city: City, postal_code: PostalCode, country: Country) -> None:
        self.street = street
        self.city = city
        self.postal_code = postal_code
        self.country = country
        self.unit: Optional[Unit] = None
        self.coordinates: Optional[Coordinates] = None
        self.type: Optional[AddressType] = None
        self.id: Optional[int] = None

    # ------------------------------------------------------------------
    # Required components
    # ------------------------------------------------------------------
    @property
    def street(self) -> Street:
        return self._street

    @street.setter
    def street(self, street: Street) -> None:
        self._street = _require(street, "Street is required")

    @property
    def city(self) -> City:
        return self._city

    @city.setter
    def city(self, city: City) -> None:
        self._city = _require(city, "City is required")

    @property
    def postal_code(self) -> PostalCode:
        return self._postal_code

    @postal_code.setter
    def postal_code(self, postal_code: PostalCode) -> None:
        self._postal_code = _require(postal_code, "Postal Code is required")

    @property
    def country(self) -> Country:
        return self._country

    @country.setter
    def country(self, country: Country) -> None:
        self._country = _require(country, "Country is required")

    # ------------------------------------------------------------------
    # Fluent mutators
    # ------------------------------------------------------------------
    def on(self, street: Street) -> "Address":
        self.street = street
        return self

    def in_unit(self, unit: Optional[Unit]) -> "Address":
        self.unit = unit
        return self

    def in_city(self, city: City) -> "Address":
        self.city = city
        return self

    def in_postal_code(self, postal_code: PostalCode) -> "Address":
        self.postal_code = postal_code
        return self

    def in_country(self, country: Country) -> "Address":
        self.country = country
        return self

    def in_local_country(self) -> "Address":
        return self.in_country(Country.local_country())

    def at(self, coordinates: Optional[Coordinates]) -> "Address":
        self.coordinates = coordinates
        return self

    def identified_by(self, id: Optional[int]) -> "Address":
        self.id = id
        return self

    def as_(self, address_type: Optional[AddressType]) -> "Address":
        self.type = address_type
        return self

    def as_billing(self) -> "Address":
        return self.as_(AddressType.BILLING)

    def as_home(self) -> "Address":
        return self.as_(AddressType.HOME)

    def as_mailing(self) -> "Address":
        return self.as_(AddressType.MAILING)

    def as_office(self) -> "Address":
        return self.as_(AddressType.OFFICE)

    def as_po_box(self) -> "Address":
        return self.as_(AddressType.PO_BOX)

    def as_work(self) -> "Address":
        return self.as_(AddressType.WORK)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------
    @property
    def is_billing(self) -> bool:
        return self.type is AddressType.BILLING

    @property
    def is_home(self) -> bool:
        return self.type is AddressType.HOME

    @property
    def is_mailing(self) -> bool:
        return self.type is AddressType.MAILING

    @property
    def is_office(self) -> bool:
        return self.type is AddressType.OFFICE

    @property
    def is_po_box(self) -> bool:
        return self.type is AddressType.PO_BOX

    @property
    def is_work(self) -> bool:
        return self.type is AddressType.WORK

    def validate(self) -> "Address":
        """Raise :class:`IllegalStateError` unless every required component is set."""
        for attribute, label in (("_street", "Street"), ("_city", "City"),
                                 ("_postal_code", "Postal Code"), ("_country", "Country")):
            if getattr(self, attribute, None) is None:
                raise IllegalStateError(f"{label} is required")
        return self

    def accept(self, visitor: Callable[["Address"], object]) -> None:
        visitor(self)

    # ------------------------------------------------------------------
    # Identity & ordering
    # ------------------------------------------------------------------
    def sort_key(self):
        return (self.country.name, self.city.sort_key(), str(self.postal_code),
                self.street.sort_key(), unit_key(self.unit))

    def _identity(self):
        return self.street, self.unit, self.city, self.postal_code, self.country

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Address):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(street={self.street!r}, unit={self.unit!r}, city={self.city.name!r}, "
                f"postal_code={self.postal_code.number!r}, country={self.country.name}, type={self.type})")

    def _locality(self) -> str:
        return f"{self.city}, {self.postal_code}"

    def __str__(self) -> str:
        line = str(self.street) if self.unit is None else f"{self.street} {self.unit}"
        return f"{line}, {self._locality()}, {self.country}"


# ---------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------
class AddressBuilder(ABC):
    """
    Accumulates address components; :meth:`build` makes the address.

    Street, city and postal code are required.  The country defaults to
    :meth:`Country.local_country`.  Unit, coordinates and type are applied
    after the address is constructed.
    """

    def __init__(self, country: Optional[Country] = None) -> None:
        self.street: Optional[Street] = None
        self.unit: Optional[Unit] = None
        self.city: Optional[City] = None
        self.postal_code: Optional[PostalCode] = None
        self.coordinates: Optional[Coordinates] = None
        self.type: Optional[AddressType] = None
        self._country: Optional[Country] = None
        self.in_country(country)

    @property
    def country(self) -> Country:
        return self._country

    def from_address(self, address: Address) -> "AddressBuilder":
        """Take every component of *address*, country included."""
        if address is None:
            raise ValueError("Address to copy is required")
        return (self.in_country(address.country)
                .on(address.street)
                .in_unit(address.unit)
                .in_city(address.city)
                .in_postal_code(address.postal_code)
                .at(address.coordinates)
                .as_(address.type))

    def on(self, street: Street) -> "AddressBuilder":
        self.street = street
        return self

    def in_unit(self, unit: Optional[Unit]) -> "AddressBuilder":
        self.unit = unit
        return self

    def in_city(self, city: City) -> "AddressBuilder":
        self.city = city
        return self

    def in_postal_code(self, postal_code: PostalCode) -> "AddressBuilder":
        self.postal_code = postal_code
        return self

    def in_country(self, country: Optional[Country]) -> "AddressBuilder":
        """Set the country; ``None`` resets it to the local country."""
        self._country = country or Country.local_country()
        return self

    def in_local_country(self) -> "AddressBuilder":
        return self.in_country(None)

    def at(self, coordinates: Optional[Coordinates]) -> "AddressBuilder":
        self.coordinates = coordinates
        return self

    def as_(self, address_type: Optional[AddressType]) -> "AddressBuilder":
        self.type = address_type
        return self

    def _validate(self) -> None:
        if self.street is None:
            raise IllegalStateError("Street is required")
        if self.city is None:
            raise IllegalStateError("City is required")
        if self.postal_code is None:
            raise IllegalStateError("Postal Code is required")

    @abstractmethod
    def _new_address(self) -> Address:
        """Construct the country specific address from the required components."""

    def build(self) -> Address:
        self._validate()
        address = self._new_address()
        address.unit = self.unit
        address.coordinates = self.coordinates
        address.type = self.type
        return address


# Country -> builder class for countries with a specialised address.
ADDRESS_BUILDERS: Dict[Country, Type[AddressBuilder]] = {}


def register_address_builder(country: Country) -> Callable[[Type[AddressBuilder]], Type[AddressBuilder]]:
    """
    Class decorator registering an :class:`AddressBuilder` for *country*.

    Usage::

        @register_address_builder(Country.CANADA)
        class CanadianAddressBuilder(AddressBuilder):
            def _new_address(self):
                ...
    """
    if country is None:
        raise ValueError("Country is required")

    def decorator(builder: Type[AddressBuilder]) -> Type[AddressBuilder]:
        ADDRESS_BUILDERS[country] = builder
        logger.debug(f"Registered {builder.__name__} for {country.name}")
        return builder

    return decorator


def registered_builder(country: Optional[Country]) -> Optional[Type[AddressBuilder]]:
    return ADDRESS_BUILDERS.get(country)
