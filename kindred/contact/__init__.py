"""Contact details: email addresses and phone numbers."""

from .area_codes import find_area_codes_by, find_state_by
from .email import Domain, DomainExtension, EmailAddress
from .phone import (AreaCode, ExchangeCode, Extension, GenericPhoneNumber, LineNumber, PhoneNumber,
                    PhoneNumberBuilder, PhoneNumberType, UnitedStatesPhoneNumber, copy_phone_number)

__all__ = [
    "AreaCode",
    "Domain",
    "DomainExtension",
    "EmailAddress",
    "ExchangeCode",
    "Extension",
    "GenericPhoneNumber",
    "LineNumber",
    "PhoneNumber",
    "PhoneNumberBuilder",
    "PhoneNumberType",
    "UnitedStatesPhoneNumber",
    "copy_phone_number",
    "find_area_codes_by",
    "find_state_by",
]
