"""
tests/test_email.py
===================

Unit tests for kindred.contact.email
"""

import pytest

from kindred.contact import Domain, DomainExtension, EmailAddress


# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------
def test_domain_of_extension_enum_or_text():
    assert Domain.of("home", DomainExtension.NET) == Domain.of("home", "NET")
    assert str(Domain.of("home", DomainExtension.NET)) == "home.net"


def test_domain_parse_splits_at_the_last_dot():
    domain = Domain.parse("mail.example.com")
    assert domain.name == "mail.example"
    assert domain.extension_name == "com"
    assert domain.extension is DomainExtension.COM


@pytest.mark.parametrize("text", [None, "", "   ", "localhost", ".com", "example."])
def test_domain_parse_rejects_malformed_names(text):
    with pytest.raises(ValueError):
        Domain.parse(text)


def test_unknown_extension_is_none():
    assert Domain.of("example", "museum").extension is None


def test_domains_order_by_extension_then_name():
    domains = [Domain.of("zeta", "com"), Domain.of("alpha", "org"), Domain.of("alpha", "com")]
    assert [str(d) for d in sorted(domains)] == ["alpha.com", "zeta.com", "alpha.org"]


def test_domain_copy():
    domain = Domain.of("home", "net")
    assert Domain.from_domain(domain) == domain
    with pytest.raises(ValueError, match="Domain to copy is required"):
        Domain.from_domain(None)


# ---------------------------------------------------------------------------
# EmailAddress
# ---------------------------------------------------------------------------
def test_parse_and_str():
    email = EmailAddress.parse("jonDoe@home.net")
    assert email.username == "jonDoe"
    assert email.domain == Domain.of("home", DomainExtension.NET)
    assert email.domain_name == "home.net"
    assert str(email) == "jonDoe@home.net"


@pytest.mark.parametrize("text", [None, "", "@home.net", "jonDoe", "jonDoe@home"])
def test_parse_rejects_malformed_addresses(text):
    with pytest.raises(ValueError):
        EmailAddress.parse(text)


def test_username_and_domain_are_required():
    with pytest.raises(ValueError):
        EmailAddress.of(" ", Domain.of("home", "net"))
    with pytest.raises(ValueError):
        EmailAddress.of("jonDoe", None)


def test_equality_and_hash():
    assert EmailAddress.parse("jane@doe.org") == EmailAddress.of("jane", Domain.of("doe", "org"))
    assert len({EmailAddress.parse("jane@doe.org"), EmailAddress.parse("jane@doe.org")}) == 1
    assert EmailAddress.parse("jane@doe.org") != EmailAddress.parse("jon@doe.org")


def test_addresses_order_by_domain_then_username():
    addresses = [EmailAddress.parse(text) for text in ("bob@a.org", "zed@a.com", "amy@a.org")]
    assert [str(a) for a in sorted(addresses)] == ["zed@a.com", "amy@a.org", "bob@a.org"]


def test_email_address_is_immutable():
    email = EmailAddress.parse("jonDoe@home.net")
    with pytest.raises(AttributeError):
        email.username = "janeDoe"
    assert EmailAddress.from_email_address(email) == email
