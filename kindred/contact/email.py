"""
kindred.contact.email
=====================

Email addresses: a user name at a :class:`Domain`.

Example
-------
>>> email = EmailAddress.parse("jonDoe@home.net")
>>> email.username, email.domain.extension
('jonDoe', <DomainExtension.NET: 'net'>)
>>> str(email)
'jonDoe@home.net'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Union

logger = logging.getLogger(__name__)

AT_SYMBOL = "@"
DOT_SEPARATOR = "."


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(message.format(value))
    return str(value).strip()


class DomainExtension(Enum):
    """Well-known top level domains."""
    BIZ = "biz"
    CO = "co"
    COM = "com"
    DE = "de"
    EDU = "edu"
    GOV = "gov"
    INFO = "info"
    IO = "io"
    ME = "me"
    NET = "net"
    ORG = "org"
    SITE = "site"
    UK = "uk"
    US = "us"
    XYZ = "xyz"

    @classmethod
    def lookup(cls, domain_name: Optional[str]) -> Optional["DomainExtension"]:
        """First extension *domain_name* ends with (case-insensitive); ``None`` when none does."""
        key = (domain_name or "").strip().lower()
        if not key:
            return None
        return next((extension for extension in cls if key.endswith(extension.value)), None)

    def __str__(self) -> str:
        return self.value


@total_ordering
@dataclass(frozen=True, eq=False)
class Domain:
    """Domain name split into its name and extension, e.g. ``home`` and ``net``."""
    name: str
    extension_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _require_text(self.name, "Name [{}] is required"))
        object.__setattr__(self, "extension_name",
                           _require_text(self.extension_name, "Extension [{}] is required").lower())

    @classmethod
    def of(cls, name: str, extension: Union[DomainExtension, str]) -> "Domain":
        if extension is None:
            raise ValueError("Domain extension is required")
        return cls(name, extension.value if isinstance(extension, DomainExtension) else extension)

    @classmethod
    def from_domain(cls, domain: "Domain") -> "Domain":
        if domain is None:
            raise ValueError("Domain to copy is required")
        return cls(domain.name, domain.extension_name)

    @classmethod
    def parse(cls, domain_name: Optional[str]) -> "Domain":
        """Split at the last dot: ``"mail.example.com"`` is name ``mail.example``, extension ``com``."""
        text = _require_text(domain_name, "Domain name [{}] to parse is required")
        index = text.rfind(DOT_SEPARATOR)
        if index <= 0 or index == len(text) - 1:
            raise ValueError(f"Domain name [{domain_name}] format is not valid")
        return cls(text[:index], text[index + 1:])

    @property
    def extension(self) -> Optional[DomainExtension]:
        return DomainExtension.lookup(self.extension_name)

    def sort_key(self):
        return self.extension_name, self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return (self.name, self.extension_name) == (other.name, other.extension_name)

    def __hash__(self) -> int:
        return hash((self.name, self.extension_name))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.name}{DOT_SEPARATOR}{self.extension_name}"


@total_ordering
@dataclass(frozen=True, eq=False)
class EmailAddress:
    """
    Immutable email address.

    Addresses are equal by user name and domain and ordered by domain
    (extension first) and then user name.
    """
    username: str
    domain: Domain

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", _require_text(self.username, "User name [{}] is required"))
        if self.domain is None:
            raise ValueError("Domain is required")

    @classmethod
    def of(cls, username: str, domain: Domain) -> "EmailAddress":
        return cls(username, domain)

    @classmethod
    def from_email_address(cls, email_address: "EmailAddress") -> "EmailAddress":
        if email_address is None:
            raise ValueError("Email Address to copy is required")
        return cls(email_address.username, email_address.domain)

    @classmethod
    def parse(cls, email_address: Optional[str]) -> "EmailAddress":
        text = _require_text(email_address, "Email Address [{}] to parse is required")
        index = text.find(AT_SYMBOL)
        if index <= 0:
            raise ValueError(f"Email Address [{email_address}] format is not valid")
        parsed = cls(text[:index], Domain.parse(text[index + 1:]))
        logger.debug(f"Parsed email address [{email_address}] as {parsed!r}")
        return parsed

    @property
    def domain_name(self) -> str:
        return str(self.domain)

    def sort_key(self):
        return self.domain.sort_key(), self.username

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return (self.username, self.domain) == (other.username, other.domain)

    def __hash__(self) -> int:
        return hash((self.username, self.domain))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.username}{AT_SYMBOL}{self.domain_name}"
