"""People, names and groups of people."""

from .enums import Gender
from .group import Group
from .name import Name, Suffix, Title
from .people import Family, People
from .person import Person

__all__ = [
    "Family",
    "Gender",
    "Group",
    "Name",
    "People",
    "Person",
    "Suffix",
    "Title",
]
