"""
Ensure project root is on sys.path so `import kindred` works during tests,
and provide the Doe family used across the people tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent  # tests/.. → project root
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kindred.core import Name, Person  # noqa: E402
from kindred.settings import settings  # noqa: E402


def _person(first, middle, last="Doe"):
    return Person.new_person(Name.of(first, middle, last))


@pytest.fixture
def jon():
    return _person("Jon", "R").born(datetime(1974, 5, 27)).as_male()


@pytest.fixture
def jane():
    return _person("Jane", "R").born(datetime(1975, 1, 22)).as_female()


@pytest.fixture
def doe_family(jon, jane):
    """The eight Does keyed by first name."""
    children = [
        _person("Cookie", None).aged(9).as_female(),
        _person("Fro", "R").aged(21).as_male(),
        _person("Hoe", "R").aged(24).as_female(),
        _person("Joe", "R").aged(28).as_male(),
        _person("Pie", None).aged(16).as_female(),
        _person("Sour", None).aged(17).as_male(),
    ]
    return {person.first_name: person for person in [jon, jane, *children]}


@pytest.fixture
def local_country(monkeypatch):
    """Set the configured local country for the duration of a test."""
    def _set(name: str) -> None:
        monkeypatch.setattr(settings, "local_country", name)
    return _set
