"""Addresses for countries without a specialised address."""

from __future__ import annotations

from .address import Address, AddressBuilder


class GenericAddress(Address):
    pass


class GenericAddressBuilder(AddressBuilder):
    """Builds a :class:`GenericAddress` in whatever country was given."""

    def _new_address(self) -> GenericAddress:
        return GenericAddress(self.street, self.city, self.postal_code, self.country)
