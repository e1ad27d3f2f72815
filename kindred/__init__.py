"""
Kindred
=======

Abstract data types for people, names, groups of people, postal
addresses and contact details.

Import structure
----------------
`import kindred` only loads the package metadata.  Import the sub-packages
you need explicitly; the JSON adapters pull in *pydantic*.

Sub-modules
~~~~~~~~~~~
- :pymod:`kindred.core`            – ``Name``, ``Person``, ``Gender`` and the ``Group`` / ``People`` / ``Family`` collections
- :pymod:`kindred.geo`             – ``Street``, ``Unit``, ``City``, ``PostalCode``, ``Coordinates`` and the ``Address`` hierarchy
- :pymod:`kindred.contact`         – ``EmailAddress``, ``PhoneNumber`` and their parts
- :pymod:`kindred.serialization`   – pydantic JSON wire models
- :pymod:`kindred.settings`        – environment driven configuration
- :pymod:`kindred.cli`             – ``python -m kindred`` command line

Quick start
-----------
>>> from datetime import datetime
>>> from kindred.core import Family, Name, Person
>>> jon = Person.new_person(Name.of("Jon", "R", "Doe"), datetime(1974, 5, 27))
>>> jane = Person.new_person(Name.of("Jane", "R", "Doe"), datetime(1975, 1, 22))
>>> str(Family.of(jane, jon))
'[Doe, Jon R; Doe, Jane R]'

"""

__all__ = [
    "core",
    "geo",
    "contact",
    "serialization",
    "settings",
    "errors",
    "cli",
]

__version__ = "0.1.0"
