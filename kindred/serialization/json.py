"""
kindred.serialization.json
==========================

pydantic wire models for names, people, addresses, email addresses and
phone numbers.

Field names are camelCase on the wire (``firstName``, ``birthDate``,
``postalCode``, ``areaCode``); dates travel as epoch milliseconds and
enumerations by member name.  Each model converts to and from its domain object:

* ``Model.from_<domain>(obj)`` builds the wire model,
* ``model.to_<domain>()`` rebuilds the domain object.

Malformed payloads raise :class:`pydantic.ValidationError`; payloads that
parse but break a domain rule raise the domain's ``ValueError``.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from kindred.contact import (AreaCode, Domain, EmailAddress, ExchangeCode, Extension, GenericPhoneNumber,
                             LineNumber, PhoneNumber, PhoneNumberType, UnitedStatesPhoneNumber)
from kindred.core import Gender, Name, People, Person
from kindred.geo import (Address, AddressType, City, Coordinates, Country, Direction, Elevation, LengthUnit,
                         PostalCode, State, Street, StreetType, Unit, UnitType, UnitedStatesAddress,
                         UnitedStatesCity, new_address_builder)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def to_epoch_millis(value: Optional[datetime]) -> Optional[int]:
    if value is None:
        return None
    seconds = int(value.replace(microsecond=0).timestamp())
    return seconds * 1000 + value.microsecond // 1000


def from_epoch_millis(value: Optional[int]) -> Optional[datetime]:
    if value is None:
        return None
    seconds, millis = divmod(value, 1000)
    return datetime.fromtimestamp(seconds).replace(microsecond=millis * 1000)


def _enum_member(enum_type, name: Optional[str]):
    """Validate that *name* is a member name of *enum_type* (case-insensitive)."""
    if name is None:
        return None
    key = name.strip().upper()
    if key not in enum_type.__members__:
        raise ValueError(f"{enum_type.__name__} [{name}] is not valid")
    return key


class WireModel(BaseModel):
    """Base model: camelCase aliases, populated by field name or alias."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------
class NameModel(WireModel):
    first_name: str = Field(alias="firstName")
    middle_name: Optional[str] = Field(default=None, alias="middleName")
    last_name: str = Field(alias="lastName")

    @classmethod
    def from_name(cls, name: Name) -> "NameModel":
        return cls(first_name=name.first_name, middle_name=name.middle_name, last_name=name.last_name)

    def to_name(self) -> Name:
        return Name.of(self.first_name, self.middle_name, self.last_name)


class PersonModel(WireModel):
    id: Optional[int] = None
    first_name: str = Field(alias="firstName")
    middle_name: Optional[str] = Field(default=None, alias="middleName")
    last_name: str = Field(alias="lastName")
    birth_date: Optional[int] = Field(default=None, alias="birthDate", description="epoch milliseconds")
    death_date: Optional[int] = Field(default=None, alias="deathDate", description="epoch milliseconds")
    gender: Optional[str] = None

    @field_validator("gender")
    @classmethod
    def _check_gender(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(Gender, value)

    @classmethod
    def from_person(cls, person: Person) -> "PersonModel":
        return cls(
            id=person.id,
            first_name=person.first_name,
            middle_name=person.middle_name,
            last_name=person.last_name,
            birth_date=to_epoch_millis(person.birth_date),
            death_date=to_epoch_millis(person.date_of_death),
            gender=person.gender.name if person.gender else None,
        )

    def to_person(self) -> Person:
        person = Person.new_person(Name.of(self.first_name, self.middle_name, self.last_name),
                                   from_epoch_millis(self.birth_date))
        return (person.died(from_epoch_millis(self.death_date))
                .as_(Gender[self.gender] if self.gender else None)
                .identified_by(self.id))


class PeopleModel(RootModel[List[PersonModel]]):
    @classmethod
    def from_people(cls, people: People) -> "PeopleModel":
        return cls([PersonModel.from_person(person) for person in people])

    def to_people(self) -> People:
        return People.from_iterable(model.to_person() for model in self.root)


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------
class StreetModel(WireModel):
    number: int
    name: str
    type: Optional[str] = None
    direction: Optional[str] = None

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(StreetType, value)

    @field_validator("direction")
    @classmethod
    def _check_direction(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(Direction, value)

    @classmethod
    def from_street(cls, street: Street) -> "StreetModel":
        return cls(
            number=street.number,
            name=street.name,
            type=street.type.name if street.type else None,
            direction=street.direction.name if street.direction else None,
        )

    def to_street(self) -> Street:
        return Street(
            self.number,
            self.name,
            Direction[self.direction] if self.direction else None,
            StreetType[self.type] if self.type else None,
        )


class UnitModel(WireModel):
    number: str
    type: Optional[str] = None

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(UnitType, value)

    @classmethod
    def from_unit(cls, unit: Unit) -> "UnitModel":
        return cls(number=unit.number, type=unit.type.name if unit.type else None)

    def to_unit(self) -> Unit:
        return Unit(self.number, UnitType[self.type] if self.type else None)


class CityModel(WireModel):
    name: str
    country: Optional[str] = None

    @field_validator("country")
    @classmethod
    def _check_country(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(Country, value)

    @classmethod
    def from_city(cls, city: City) -> "CityModel":
        return cls(name=city.name, country=city.country.name if city.country else None)

    def to_city(self, state: Optional[State] = None) -> City:
        """Rebuild the city; a state makes it a :class:`UnitedStatesCity`."""
        if state is not None:
            return UnitedStatesCity(self.name, state)
        return City(self.name, Country[self.country] if self.country else None)


class PostalCodeModel(WireModel):
    number: str
    country: Optional[str] = None

    @field_validator("country")
    @classmethod
    def _check_country(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(Country, value)

    @classmethod
    def from_postal_code(cls, postal_code: PostalCode) -> "PostalCodeModel":
        return cls(number=postal_code.number,
                   country=postal_code.country.name if postal_code.country else None)

    def to_postal_code(self) -> PostalCode:
        return PostalCode(self.number, Country[self.country] if self.country else None)


class ElevationModel(WireModel):
    altitude: float
    length_unit: str = Field(default="METER", alias="lengthUnit")

    @field_validator("length_unit")
    @classmethod
    def _check_length_unit(cls, value: str) -> str:
        return _enum_member(LengthUnit, value)

    @classmethod
    def from_elevation(cls, elevation: Elevation) -> "ElevationModel":
        return cls(altitude=elevation.altitude, length_unit=elevation.unit.name)

    def to_elevation(self) -> Elevation:
        return Elevation(self.altitude, LengthUnit[self.length_unit])


class CoordinatesModel(WireModel):
    latitude: float
    longitude: float
    elevation: Optional[ElevationModel] = None

    @classmethod
    def from_coordinates(cls, coordinates: Coordinates) -> "CoordinatesModel":
        return cls(
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
            elevation=ElevationModel.from_elevation(coordinates.elevation),
        )

    def to_coordinates(self) -> Coordinates:
        coordinates = Coordinates(self.latitude, self.longitude)
        return coordinates.at(self.elevation.to_elevation()) if self.elevation else coordinates


class AddressModel(WireModel):
    id: Optional[int] = None
    street: StreetModel
    unit: Optional[UnitModel] = None
    city: CityModel
    postal_code: PostalCodeModel = Field(alias="postalCode")
    country: str
    state: Optional[str] = None
    coordinates: Optional[CoordinatesModel] = None
    type: Optional[str] = None

    @field_validator("country")
    @classmethod
    def _check_country(cls, value: str) -> str:
        return _enum_member(Country, value)

    @field_validator("state")
    @classmethod
    def _check_state(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(State, value)

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(AddressType, value)

    @classmethod
    def from_address(cls, address: Address) -> "AddressModel":
        state = address.state if isinstance(address, UnitedStatesAddress) else None
        return cls(
            id=address.id,
            street=StreetModel.from_street(address.street),
            unit=UnitModel.from_unit(address.unit) if address.unit else None,
            city=CityModel.from_city(address.city),
            postal_code=PostalCodeModel.from_postal_code(address.postal_code),
            country=address.country.name,
            state=state.name if state else None,
            coordinates=CoordinatesModel.from_coordinates(address.coordinates) if address.coordinates else None,
            type=address.type.name if address.type else None,
        )

    def to_address(self) -> Address:
        """Rebuild the address with the builder registered for its country."""
        country = Country[self.country]
        state = State[self.state] if self.state else None
        builder = new_address_builder(country)
        builder.on(self.street.to_street()).in_city(self.city.to_city(state))
        builder.in_postal_code(self.postal_code.to_postal_code())
        builder.in_unit(self.unit.to_unit() if self.unit else None)
        builder.at(self.coordinates.to_coordinates() if self.coordinates else None)
        builder.as_(AddressType[self.type] if self.type else None)
        return builder.build().identified_by(self.id)


# ---------------------------------------------------------------------------
# Contact details
# ---------------------------------------------------------------------------
class EmailAddressModel(WireModel):
    username: str
    domain: str

    @classmethod
    def from_email_address(cls, email_address: EmailAddress) -> "EmailAddressModel":
        return cls(username=email_address.username, domain=email_address.domain_name)

    def to_email_address(self) -> EmailAddress:
        return EmailAddress(self.username, Domain.parse(self.domain))


class PhoneNumberModel(WireModel):
    id: Optional[int] = None
    area_code: str = Field(alias="areaCode")
    exchange_code: str = Field(alias="exchangeCode")
    line_number: str = Field(alias="lineNumber")
    extension: Optional[str] = None
    country: Optional[str] = None
    type: Optional[str] = None
    text_enabled: bool = Field(default=False, alias="textEnabled")

    @field_validator("country")
    @classmethod
    def _check_country(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(Country, value)

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: Optional[str]) -> Optional[str]:
        return _enum_member(PhoneNumberType, value)

    @classmethod
    def from_phone_number(cls, phone_number: PhoneNumber) -> "PhoneNumberModel":
        return cls(
            id=phone_number.id,
            area_code=phone_number.area_code.number,
            exchange_code=phone_number.exchange_code.number,
            line_number=phone_number.line_number.number,
            extension=phone_number.extension.number if phone_number.extension else None,
            country=phone_number.country.name if phone_number.country else None,
            type=phone_number.type.name if phone_number.type else None,
            text_enabled=phone_number.text_enabled,
        )

    def to_phone_number(self) -> PhoneNumber:
        """A US country rebuilds a :class:`UnitedStatesPhoneNumber`, anything else a generic one."""
        parts = AreaCode(self.area_code), ExchangeCode(self.exchange_code), LineNumber(self.line_number)
        country = Country[self.country] if self.country else None
        if country is Country.UNITED_STATES_OF_AMERICA:
            phone_number = UnitedStatesPhoneNumber(*parts)
        else:
            phone_number = GenericPhoneNumber(*parts).in_(country)
        return (phone_number.with_extension(Extension(self.extension) if self.extension else None)
                .with_text_enabled(self.text_enabled)
                .as_(PhoneNumberType[self.type] if self.type else None)
                .identified_by(self.id))


# ---------------------------------------------------------------------------
# Module helpers
# ---------------------------------------------------------------------------
Serializable = Union[Name, Person, People, Address, EmailAddress, PhoneNumber]


def to_model(obj: Serializable) -> BaseModel:
    """Wire model for a domain object."""
    if isinstance(obj, Name):
        return NameModel.from_name(obj)
    if isinstance(obj, Person):
        return PersonModel.from_person(obj)
    if isinstance(obj, People):
        return PeopleModel.from_people(obj)
    if isinstance(obj, Address):
        return AddressModel.from_address(obj)
    if isinstance(obj, EmailAddress):
        return EmailAddressModel.from_email_address(obj)
    if isinstance(obj, PhoneNumber):
        return PhoneNumberModel.from_phone_number(obj)
    raise ValueError(f"Cannot serialize [{type(obj).__name__}] to JSON")


def dumps(obj: Serializable, indent: Optional[int] = None) -> str:
    """JSON text for a Name, Person, People group, Address, EmailAddress or PhoneNumber."""
    return to_model(obj).model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def loads_name(text: Union[str, bytes]) -> Name:
    return NameModel.model_validate_json(text).to_name()


def loads_person(text: Union[str, bytes]) -> Person:
    return PersonModel.model_validate_json(text).to_person()


def loads_people(text: Union[str, bytes]) -> People:
    return PeopleModel.model_validate_json(text).to_people()


def loads_address(text: Union[str, bytes]) -> Address:
    return AddressModel.model_validate_json(text).to_address()


def loads_email_address(text: Union[str, bytes]) -> EmailAddress:
    return EmailAddressModel.model_validate_json(text).to_email_address()


def loads_phone_number(text: Union[str, bytes]) -> PhoneNumber:
    return PhoneNumberModel.model_validate_json(text).to_phone_number()
