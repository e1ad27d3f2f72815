"""
tests/test_cli.py
=================

Unit tests for the kindred command line (kindred.cli)
"""

import json

from kindred.cli import EXIT_INVALID_INPUT, main


def test_name(capsys):
    assert main(["name", "Dr. Jon R Doe Jr."]) == 0
    assert capsys.readouterr().out.splitlines() == ["first_name: Jon", "middle_name: R", "last_name: Doe"]


def test_name_without_middle_name(capsys):
    assert main(["name", "Jane Doe"]) == 0
    assert "middle_name" not in capsys.readouterr().out


def test_invalid_name_exits_with_status_2(capsys):
    assert main(["name", "Cher"]) == EXIT_INVALID_INPUT
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "First and last name are required" in captured.err


def test_street(capsys):
    assert main(["street", "100 N Main St"]) == 0
    assert capsys.readouterr().out.splitlines() == ["number: 100", "direction: N", "name: Main", "type: ST"]


def test_invalid_street_exits_with_status_2(capsys):
    assert main(["street", "Main St"]) == EXIT_INVALID_INPUT
    assert "must start with a street number" in capsys.readouterr().err


def test_people(tmp_path, capsys):
    path = tmp_path / "people.json"
    path.write_text(json.dumps([
        {"firstName": "Jane", "middleName": "R", "lastName": "Doe"},
        {"firstName": "Jon", "middleName": "R", "lastName": "Doe"},
    ]))
    assert main(["people", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Jane R Doe (unknown)", "Jon R Doe (unknown)", "[Doe, Jane R; Doe, Jon R]"]


def test_people_with_missing_file(tmp_path, capsys):
    assert main(["people", str(tmp_path / "missing.json")]) == EXIT_INVALID_INPUT
    assert capsys.readouterr().err


def test_people_with_malformed_json(tmp_path, capsys):
    path = tmp_path / "people.json"
    path.write_text('[{"firstName": "Jon"}]')
    assert main(["people", str(path)]) == EXIT_INVALID_INPUT
    assert "lastName" in capsys.readouterr().err
