"""Wire formats for the domain model (JSON via pydantic)."""

from .json import (AddressModel, EmailAddressModel, NameModel, PeopleModel, PersonModel, PhoneNumberModel, dumps,
                   loads_address, loads_email_address, loads_name, loads_people, loads_person, loads_phone_number)

__all__ = [
    "AddressModel",
    "EmailAddressModel",
    "NameModel",
    "PeopleModel",
    "PersonModel",
    "PhoneNumberModel",
    "dumps",
    "loads_address",
    "loads_email_address",
    "loads_name",
    "loads_people",
    "loads_person",
    "loads_phone_number",
]
