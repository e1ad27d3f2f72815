"""
kindred.cli
===========

Small command line front end.

Examples
--------
$ kindred name "Dr. Jon R Doe Jr."
$ kindred street "100 N Main St"
$ kindred people family.json
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path
from typing import List, Optional

from kindred.core import Name
from kindred.geo import Street
from kindred.serialization import loads_people
from kindred.settings import LOG_FORMAT, settings

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def _print_fields(**fields) -> None:
    for label, value in fields.items():
        if value is not None:
            print(f"{label}: {value}")


def cmd_name(args: argparse.Namespace) -> int:
    name = Name.of(args.full_name)
    _print_fields(first_name=name.first_name, middle_name=name.middle_name, last_name=name.last_name)
    return 0


def cmd_street(args: argparse.Namespace) -> int:
    street = Street.parse(args.line)
    _print_fields(
        number=street.number,
        direction=street.direction.abbreviation if street.direction else None,
        name=street.name,
        type=street.type.abbreviation if street.type else None,
    )
    return 0


def cmd_people(args: argparse.Namespace) -> int:
    people = loads_people(Path(args.file).read_text(encoding="utf-8"))
    logger.info(f"Loaded {people.size()} people from {args.file}")
    for person in people:
        birth = person.birth_date.date().isoformat() if person.birth_date else "unknown"
        print(f"{person} ({birth})")
    print(people)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kindred",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Kindred domain model utilities
            ------------------------------
            name    Parse a full name into first, middle and last name
            street  Parse a street line into number, direction, name and type
            people  Load a JSON array of people and print them in group order
            """
        ),
    )
    parser.add_argument("--log-level", default=None, help="logging level (default: KINDRED_LOG_LEVEL)")
    commands = parser.add_subparsers(dest="command", required=True)

    name = commands.add_parser("name", help="parse a full name")
    name.add_argument("full_name", help='e.g. "Dr. Jon R Doe Jr."')
    name.set_defaults(handler=cmd_name)

    street = commands.add_parser("street", help="parse a street line")
    street.add_argument("line", help='e.g. "100 N Main St"')
    street.set_defaults(handler=cmd_street)

    people = commands.add_parser("people", help="print people from a JSON file")
    people.add_argument("file", help="JSON array of people")
    people.set_defaults(handler=cmd_people)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or settings.log_level).upper(), format=LOG_FORMAT)
    try:
        return args.handler(args)
    except (ValueError, OSError) as exc:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"kindred {args.command}: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
