"""
kindred.geo.enums
=================

Geographic enumerations: continents, countries, US states and compass
directions.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import FrozenSet, Optional, Set

logger = logging.getLogger(__name__)


class Continent(Enum):
    AFRICA = "Africa"
    ANTARCTICA = "Antarctica"
    AUSTRALIA_AND_OCEANIA = "Australia and Oceania"
    ASIA = "Asia"
    EUROPE = "Europe"
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"

    def countries(self) -> Set["Country"]:
        return Country.by_continent(self)

    def __str__(self) -> str:
        return self.value


class Country(Enum):
    """Sovereign countries and the continent(s) they lie on."""
    AFGHANISTAN = ("Afghanistan", Continent.ASIA)
    ALBANIA = ("Albania", Continent.EUROPE)
    ALGERIA = ("Algeria", Continent.AFRICA)
    ANDORRA = ("Andorra", Continent.EUROPE)
    ANGOLA = ("Angola", Continent.AFRICA)
    ANTIGUA_AND_BARBUDA = ("Antigua and Barbuda", Continent.NORTH_AMERICA)
    ARGENTINA = ("Argentina", Continent.SOUTH_AMERICA)
    ARMENIA = ("Armenia", Continent.ASIA, Continent.EUROPE)
    AUSTRALIA = ("Australia", Continent.AUSTRALIA_AND_OCEANIA)
    AUSTRIA = ("Austria", Continent.EUROPE)
    AZERBAIJAN = ("Azerbaijan", Continent.ASIA, Continent.EUROPE)
    BAHAMAS = ("Bahamas", Continent.NORTH_AMERICA)
    BAHRAIN = ("Bahrain", Continent.ASIA)
    BANGLADESH = ("Bangladesh", Continent.ASIA)
    BARBADOS = ("Barbados", Continent.NORTH_AMERICA)
    BELARUS = ("Belarus", Continent.EUROPE)
    BELGIUM = ("Belgium", Continent.EUROPE)
    BELIZE = ("Belize", Continent.NORTH_AMERICA)
    BENIN = ("Benin", Continent.AFRICA)
    BHUTAN = ("Bhutan", Continent.ASIA)
    BOLIVIA = ("Bolivia", Continent.SOUTH_AMERICA)
    BOSNIA_AND_HERZEGOVINA = ("Bosnia and Herzegovina", Continent.EUROPE)
    BOTSWANA = ("Botswana", Continent.AFRICA)
    BRAZIL = ("Brazil", Continent.SOUTH_AMERICA)
    BRUNEI = ("Brunei", Continent.ASIA)
    BULGARIA = ("Bulgaria", Continent.EUROPE)
    BURKINA_FASO = ("Burkina Faso", Continent.AFRICA)
    BURUNDI = ("Burundi", Continent.AFRICA)
    CABO_VERDE = ("Cabo Verde", Continent.AFRICA)
    CAMBODIA = ("Cambodia", Continent.ASIA)
    CAMEROON = ("Cameroon", Continent.AFRICA)
    CANADA = ("Canada", Continent.NORTH_AMERICA)
    CENTRAL_AFRICAN_REPUBLIC = ("Central African Republic", Continent.AFRICA)
    CHAD = ("Chad", Continent.AFRICA)
    CHILE = ("Chile", Continent.SOUTH_AMERICA)
    CHINA = ("China", Continent.ASIA)
    COLOMBIA = ("Colombia", Continent.SOUTH_AMERICA)
    COMOROS = ("Comoros", Continent.AFRICA)
    DEMOCRATIC_REPUBLIC_OF_THE_CONGO = ("Democratic Republic of the Congo", Continent.AFRICA)
    REPUBLIC_OF_THE_CONGO = ("Republic of the Congo", Continent.AFRICA)
    COSTA_RICA = ("Costa Rica", Continent.NORTH_AMERICA)
    COTE_D_IVOIRE = ("Cote D Ivoire", Continent.AFRICA)
    CROATIA = ("Croatia", Continent.EUROPE)
    CUBA = ("Cuba", Continent.NORTH_AMERICA)
    CYPRUS = ("Cyprus", Continent.ASIA, Continent.EUROPE)
    CZECH_REPUBLIC = ("Czech Republic", Continent.EUROPE)
    DENMARK = ("Denmark", Continent.EUROPE)
    DJIBOUTI = ("Djibouti", Continent.AFRICA)
    DOMINICA = ("Dominica", Continent.NORTH_AMERICA)
    DOMINICAN_REPUBLIC = ("Dominican Republic", Continent.NORTH_AMERICA)
    ECUADOR = ("Ecuador", Continent.SOUTH_AMERICA)
    EGYPT = ("Egypt", Continent.AFRICA)
    EL_SALVADOR = ("El Salvador", Continent.NORTH_AMERICA)
    EQUATORIAL_GUINEA = ("Equatorial Guinea", Continent.AFRICA)
    ERITREA = ("Eritrea", Continent.AFRICA)
    ESTONIA = ("Estonia", Continent.EUROPE)
    ETHIOPIA = ("Ethiopia", Continent.AFRICA)
    FIJI = ("Fiji", Continent.AUSTRALIA_AND_OCEANIA)
    FINLAND = ("Finland", Continent.EUROPE)
    FRANCE = ("France", Continent.EUROPE)
    GABON = ("Gabon", Continent.AFRICA)
    GAMBIA = ("Gambia", Continent.AFRICA)
    GEORGIA = ("Georgia", Continent.ASIA, Continent.EUROPE)
    GERMANY = ("Germany", Continent.EUROPE)
    GHANA = ("Ghana", Continent.AFRICA)
    GREECE = ("Greece", Continent.EUROPE)
    GRENADA = ("Grenada", Continent.NORTH_AMERICA)
    GUATEMALA = ("Guatemala", Continent.NORTH_AMERICA)
    GUINEA = ("Guinea", Continent.AFRICA)
    GUINEA_BISSAU = ("Guinea Bissau", Continent.AFRICA)
    GUYANA = ("Guyana", Continent.SOUTH_AMERICA)
    HAITI = ("Haiti", Continent.NORTH_AMERICA)
    HONDURAS = ("Honduras", Continent.NORTH_AMERICA)
    HUNGARY = ("Hungary", Continent.EUROPE)
    ICELAND = ("Iceland", Continent.EUROPE)
    INDIA = ("India", Continent.ASIA)
    INDONESIA = ("Indonesia", Continent.ASIA)
    IRAN = ("Iran", Continent.ASIA)
    IRAQ = ("Iraq", Continent.ASIA)
    IRELAND = ("Ireland", Continent.EUROPE)
    ISRAEL = ("Israel", Continent.ASIA)
    ITALY = ("Italy", Continent.EUROPE)
    JAMAICA = ("Jamaica", Continent.NORTH_AMERICA)
    JAPAN = ("Japan", Continent.ASIA)
    JORDAN = ("Jordan", Continent.ASIA)
    KAZAKHSTAN = ("Kazakhstan", Continent.ASIA, Continent.EUROPE)
    KENYA = ("Kenya", Continent.AFRICA)
    KIRIBATI = ("Kiribati", Continent.AUSTRALIA_AND_OCEANIA)
    KOSOVO = ("Kosovo", Continent.EUROPE)
    KUWAIT = ("Kuwait", Continent.ASIA)
    KYRGYZSTAN = ("Kyrgyzstan", Continent.ASIA)
    LAOS = ("Laos", Continent.ASIA)
    LATVIA = ("Latvia", Continent.EUROPE)
    LEBANON = ("Lebanon", Continent.ASIA)
    LESOTHO = ("Lesotho", Continent.AFRICA)
    LIBERIA = ("Liberia", Continent.AFRICA)
    LIBYA = ("Libya", Continent.AFRICA)
    LIECHTENSTEIN = ("Liechtenstein", Continent.EUROPE)
    LITHUANIA = ("Lithuania", Continent.EUROPE)
    LUXEMBOURG = ("Luxembourg", Continent.EUROPE)
    MACEDONIA = ("Macedonia", Continent.EUROPE)
    MADAGASCAR = ("Madagascar", Continent.AFRICA)
    MALAWI = ("Malawi", Continent.AFRICA)
    MALAYSIA = ("Malaysia", Continent.ASIA)
    MALDIVES = ("Maldives", Continent.ASIA)
    MALI = ("Mali", Continent.AFRICA)
    MALTA = ("Malta", Continent.EUROPE)
    MARSHALL_ISLANDS = ("Marshall Islands", Continent.AUSTRALIA_AND_OCEANIA)
    MAURITANIA = ("Mauritania", Continent.AFRICA)
    MAURITIUS = ("Mauritius", Continent.AFRICA)
    MEXICO = ("Mexico", Continent.NORTH_AMERICA)
    MICRONESIA = ("Micronesia", Continent.AUSTRALIA_AND_OCEANIA)
    MOLDOVA = ("Moldova", Continent.EUROPE)
    MONACO = ("Monaco", Continent.EUROPE)
    MONGOLIA = ("Mongolia", Continent.ASIA)
    MONTENEGRO = ("Montenegro", Continent.EUROPE)
    MOROCCO = ("Morocco", Continent.AFRICA)
    MOZAMBIQUE = ("Mozambique", Continent.AFRICA)
    MYANMAR = ("Myanmar", Continent.ASIA)
    NAMIBIA = ("Namibia", Continent.AFRICA)
    NAURU = ("Nauru", Continent.AUSTRALIA_AND_OCEANIA)
    NEPAL = ("Nepal", Continent.ASIA)
    NETHERLANDS = ("Netherlands", Continent.EUROPE)
    NEW_ZEALAND = ("New Zealand", Continent.AUSTRALIA_AND_OCEANIA)
    NICARAGUA = ("Nicaragua", Continent.NORTH_AMERICA)
    NIGER = ("Niger", Continent.AFRICA)
    NIGERIA = ("Nigeria", Continent.AFRICA)
    NORTH_KOREA = ("North Korea", Continent.ASIA)
    NORWAY = ("Norway", Continent.EUROPE)
    OMAN = ("Oman", Continent.ASIA)
    PAKISTAN = ("Pakistan", Continent.ASIA)
    PALAU = ("Palau", Continent.AUSTRALIA_AND_OCEANIA)
    PALESTINE = ("Palestine", Continent.ASIA)
    PANAMA = ("Panama", Continent.NORTH_AMERICA)
    PAPUA_NEW_GUINEA = ("Papua New Guinea", Continent.AUSTRALIA_AND_OCEANIA)
    PARAGUAY = ("Paraguay", Continent.SOUTH_AMERICA)
    PERU = ("Peru", Continent.SOUTH_AMERICA)
    PHILIPPINES = ("Philippines", Continent.ASIA)
    POLAND = ("Poland", Continent.EUROPE)
    PORTUGAL = ("Portugal", Continent.EUROPE)
    QATAR = ("Qatar", Continent.ASIA)
    ROMANIA = ("Romania", Continent.EUROPE)
    RUSSIA = ("Russia", Continent.ASIA, Continent.EUROPE)
    RWANDA = ("Rwanda", Continent.AFRICA)
    SAINT_KITTS_AND_NEVIS = ("Saint Kitts and Nevis", Continent.NORTH_AMERICA)
    SAINT_LUCIA = ("Saint Lucia", Continent.NORTH_AMERICA)
    SAINT_VINCENT_AND_THE_GRENADINES = ("Saint Vincent and the Grenadines", Continent.NORTH_AMERICA)
    SAMOA = ("Samoa", Continent.AUSTRALIA_AND_OCEANIA)
    SAN_MARINO = ("San Marino", Continent.EUROPE)
    SAO_TOME_AND_PRINCIPE = ("Sao Tome and Principe", Continent.AFRICA)
    SAUDI_ARABIA = ("Saudi Arabia", Continent.ASIA)
    SENEGAL = ("Senegal", Continent.AFRICA)
    SERBIA = ("Serbia", Continent.EUROPE)
    SEYCHELLES = ("Seychelles", Continent.AFRICA)
    SIERRA_LEONE = ("Sierra Leone", Continent.AFRICA)
    SINGAPORE = ("Singapore", Continent.ASIA)
    SLOVAKIA = ("Slovakia", Continent.EUROPE)
    SLOVENIA = ("Slovenia", Continent.EUROPE)
    SOLOMON_ISLANDS = ("Solomon Islands", Continent.AUSTRALIA_AND_OCEANIA)
    SOMALIA = ("Somalia", Continent.AFRICA)
    SOUTH_AFRICA = ("South Africa", Continent.AFRICA)
    SOUTH_KOREA = ("South Korea", Continent.ASIA)
    SOUTH_SUDAN = ("South Sudan", Continent.AFRICA)
    SPAIN = ("Spain", Continent.EUROPE)
    SRI_LANKA = ("Sri Lanka", Continent.ASIA)
    SUDAN = ("Sudan", Continent.AFRICA)
    SURINAME = ("Suriname", Continent.SOUTH_AMERICA)
    SWAZILAND = ("Swaziland", Continent.AFRICA)
    SWEDEN = ("Sweden", Continent.EUROPE)
    SWITZERLAND = ("Switzerland", Continent.EUROPE)
    SYRIA = ("Syria", Continent.ASIA)
    TAIWAN = ("Taiwan", Continent.ASIA)
    TAJIKISTAN = ("Tajikistan", Continent.ASIA)
    TANZANIA = ("Tanzania", Continent.AFRICA)
    THAILAND = ("Thailand", Continent.ASIA)
    TIMOR_LESTE = ("Timor Leste", Continent.ASIA)
    TOGO = ("Togo", Continent.AFRICA)
    TONGA = ("Tonga", Continent.AUSTRALIA_AND_OCEANIA)
    TRINIDAD_AND_TOBAGO = ("Trinidad and Tobago", Continent.NORTH_AMERICA)
    TUNISIA = ("Tunisia", Continent.AFRICA)
    TURKEY = ("Turkey", Continent.ASIA, Continent.EUROPE)
    TURKMENISTAN = ("Turkmenistan", Continent.ASIA)
    TUVALU = ("Tuvalu", Continent.AUSTRALIA_AND_OCEANIA)
    UGANDA = ("Uganda", Continent.AFRICA)
    UKRAINE = ("Ukraine", Continent.EUROPE)
    UNITED_ARAB_EMIRATES = ("United Arab Emirates", Continent.ASIA)
    UNITED_KINGDOM = ("United Kingdom", Continent.EUROPE)
    UNITED_STATES_OF_AMERICA = ("United States of America", Continent.NORTH_AMERICA)
    URUGUAY = ("Uruguay", Continent.SOUTH_AMERICA)
    UZBEKISTAN = ("Uzbekistan", Continent.ASIA)
    VANUATU = ("Vanuatu", Continent.AUSTRALIA_AND_OCEANIA)
    VATICAN_CITY = ("Vatican City", Continent.EUROPE)
    VENEZUELA = ("Venezuela", Continent.SOUTH_AMERICA)
    VIETNAM = ("Vietnam", Continent.ASIA)
    YEMEN = ("Yemen", Continent.ASIA)
    ZAMBIA = ("Zambia", Continent.AFRICA)
    ZIMBABWE = ("Zimbabwe", Continent.AFRICA)
    UNKNOWN = ("Unknown",)

    def __init__(self, label: str, *continents: Continent) -> None:
        self.label = label
        self.continents: FrozenSet[Continent] = frozenset(continents)

    @classmethod
    def by_continent(cls, continent: Continent) -> Set["Country"]:
        return {country for country in cls if country.is_on_continent(continent)}

    @classmethod
    def value_of_name(cls, name: Optional[str]) -> "Country":
        """
        Look up a country by member name ("UNITED_KINGDOM") or label
        ("United Kingdom"), case-insensitively.
        """
        key = (name or "").strip().upper().replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Country [{name}] is not valid") from None

    @classmethod
    def local_country(cls) -> "Country":
        """The configured local country (``KINDRED_LOCAL_COUNTRY``)."""
        from kindred.settings import settings

        try:
            return cls.value_of_name(settings.local_country)
        except ValueError:
            logger.warning(f"Local country [{settings.local_country}] is not valid; using UNKNOWN")
            return cls.UNKNOWN

    def is_on_continent(self, continent: Optional[Continent]) -> bool:
        return continent in self.continents

    def __str__(self) -> str:
        return self.label


class State(Enum):
    """States of the United States of America (plus the District of Columbia)."""
    ALABAMA = ("AL", "Alabama")
    ALASKA = ("AK", "Alaska")
    ARIZONA = ("AZ", "Arizona")
    ARKANSAS = ("AR", "Arkansas")
    CALIFORNIA = ("CA", "California")
    COLORADO = ("CO", "Colorado")
    CONNECTICUT = ("CT", "Connecticut")
    DELAWARE = ("DE", "Delaware")
    DISTRICT_OF_COLUMBIA = ("DC", "District of Columbia")
    FLORIDA = ("FL", "Florida")
    GEORGIA = ("GA", "Georgia")
    HAWAII = ("HI", "Hawaii")
    IDAHO = ("ID", "Idaho")
    ILLINOIS = ("IL", "Illinois")
    INDIANA = ("IN", "Indiana")
    IOWA = ("IA", "Iowa")
    KANSAS = ("KS", "Kansas")
    KENTUCKY = ("KY", "Kentucky")
    LOUISIANA = ("LA", "Louisiana")
    MAINE = ("ME", "Maine")
    MARYLAND = ("MD", "Maryland")
    MASSACHUSETTS = ("MA", "Massachusetts")
    MICHIGAN = ("MI", "Michigan")
    MINNESOTA = ("MN", "Minnesota")
    MISSISSIPPI = ("MS", "Mississippi")
    MISSOURI = ("MO", "Missouri")
    MONTANA = ("MT", "Montana")
    NEBRASKA = ("NE", "Nebraska")
    NEVADA = ("NV", "Nevada")
    NEW_HAMPSHIRE = ("NH", "New Hampshire")
    NEW_JERSEY = ("NJ", "New Jersey")
    NEW_MEXICO = ("NM", "New Mexico")
    NEW_YORK = ("NY", "New York")
    NORTH_CAROLINA = ("NC", "North Carolina")
    NORTH_DAKOTA = ("ND", "North Dakota")
    OHIO = ("OH", "Ohio")
    OKLAHOMA = ("OK", "Oklahoma")
    OREGON = ("OR", "Oregon")
    PENNSYLVANIA = ("PA", "Pennsylvania")
    RHODE_ISLAND = ("RI", "Rhode Island")
    SOUTH_CAROLINA = ("SC", "South Carolina")
    SOUTH_DAKOTA = ("SD", "South Dakota")
    TENNESSEE = ("TN", "Tennessee")
    TEXAS = ("TX", "Texas")
    UTAH = ("UT", "Utah")
    VERMONT = ("VT", "Vermont")
    VIRGINIA = ("VA", "Virginia")
    WASHINGTON = ("WA", "Washington")
    WEST_VIRGINIA = ("WV", "West Virginia")
    WISCONSIN = ("WI", "Wisconsin")
    WYOMING = ("WY", "Wyoming")

    def __init__(self, abbreviation: str, label: str) -> None:
        self.abbreviation = abbreviation
        self.label = label

    @classmethod
    def value_of_abbreviation(cls, abbreviation: Optional[str]) -> Optional["State"]:
        key = (abbreviation or "").strip().upper()
        return next((state for state in cls if state.abbreviation == key), None)

    @classmethod
    def value_of_name(cls, name: Optional[str]) -> Optional["State"]:
        key = (name or "").strip().lower()
        return next((state for state in cls if state.label.lower() == key), None)

    def __str__(self) -> str:
        return self.label


class Direction(Enum):
    """Compass direction, e.g. the "N" in "100 N Main St"."""
    NORTH = "N"
    NORTHEAST = "NE"
    NORTHWEST = "NW"
    SOUTH = "S"
    SOUTHEAST = "SE"
    SOUTHWEST = "SW"
    EAST = "E"
    WEST = "W"

    @property
    def abbreviation(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_abbreviation(cls, abbreviation: Optional[str]) -> "Direction":
        key = (abbreviation or "").strip().upper()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Direction abbreviation [{abbreviation}] is not valid") from None

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Direction":
        key = (name or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Direction name [{name}] is not valid") from None

    @classmethod
    def lookup(cls, text: Optional[str]) -> Optional["Direction"]:
        """Match an abbreviation or a name; ``None`` when *text* is neither."""
        key = (text or "").strip().strip(".").upper()
        return next((d for d in cls if key in (d.value, d.name)), None)

    @property
    def is_northbound(self) -> bool:
        return self in (Direction.NORTH, Direction.NORTHEAST, Direction.NORTHWEST)

    @property
    def is_southbound(self) -> bool:
        return self in (Direction.SOUTH, Direction.SOUTHEAST, Direction.SOUTHWEST)

    @property
    def is_eastbound(self) -> bool:
        return self in (Direction.EAST, Direction.NORTHEAST, Direction.SOUTHEAST)

    @property
    def is_westbound(self) -> bool:
        return self in (Direction.WEST, Direction.NORTHWEST, Direction.SOUTHWEST)

    def __str__(self) -> str:
        return self.label
