"""
kindred.geo.factory
===================

Resolve the :class:`~kindred.geo.address.AddressBuilder` for a country.

Countries with a registered builder (the USA) get their specialised
address; every other country falls back to the generic builder.
"""

from __future__ import annotations

import logging
from typing import Optional

from .address import Address, AddressBuilder, registered_builder
from .city import City
from .enums import Country
from .generic import GenericAddressBuilder
from .postal_code import PostalCode
from .street import Street

# Imported for its builder registration.
from . import usa  # noqa: F401

logger = logging.getLogger(__name__)


def new_address_builder(country: Optional[Country] = None) -> AddressBuilder:
    """Builder for *country*, or for the local country when it is ``None``."""
    country = country or Country.local_country()
    builder_type = registered_builder(country)
    if builder_type is None:
        logger.debug(f"No address builder registered for {country.name}; using {GenericAddressBuilder.__name__}")
        return GenericAddressBuilder(country)
    logger.debug(f"Resolved {builder_type.__name__} for {country.name}")
    return builder_type(country)


def new_address(street: Street, city: City, postal_code: PostalCode,
                country: Optional[Country] = None) -> Address:
    """Address from its required components."""
    return (new_address_builder(country)
            .on(street)
            .in_city(city)
            .in_postal_code(postal_code)
            .build())


def copy_address(address: Address) -> Address:
    """Copy of *address* (without its id), built for the address's country."""
    if address is None:
        raise ValueError("Address to copy is required")
    return new_address_builder(address.country).from_address(address).build()
