"""Places: countries, streets, units, cities, postal codes and addresses."""

from .address import Address, AddressBuilder, AddressType, register_address_builder
from .city import City
from .coordinates import Coordinates, Elevation
from .distance import Distance, LengthUnit
from .enums import Continent, Country, Direction, State
from .factory import copy_address, new_address, new_address_builder
from .generic import GenericAddress, GenericAddressBuilder
from .postal_code import PostalCode
from .street import Street, StreetType
from .unit import Apartment, Office, Room, Suite, Unit, UnitType
from .usa import (ZIP, ImmutableUnitedStatesCity, UnitedStatesAddress, UnitedStatesAddressBuilder,
                  UnitedStatesCity)

__all__ = [
    "Address",
    "AddressBuilder",
    "AddressType",
    "Apartment",
    "City",
    "Continent",
    "Coordinates",
    "Country",
    "Direction",
    "Distance",
    "Elevation",
    "GenericAddress",
    "GenericAddressBuilder",
    "ImmutableUnitedStatesCity",
    "LengthUnit",
    "Office",
    "PostalCode",
    "Room",
    "State",
    "Street",
    "StreetType",
    "Suite",
    "Unit",
    "UnitType",
    "UnitedStatesAddress",
    "UnitedStatesAddressBuilder",
    "UnitedStatesCity",
    "ZIP",
    "copy_address",
    "new_address",
    "new_address_builder",
    "register_address_builder",
]
