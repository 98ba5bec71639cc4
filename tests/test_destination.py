"""Tests for destination parsing."""
import pytest

from pdfdocument.destination import Destination, ParsedDestination, parse_destination
from pdfdocument.errors import InvalidDestinationError


@pytest.mark.parametrize(
    "code, expected",
    [
        ("D", ParsedDestination(False, Destination.DOWNLOAD)),
        ("I", ParsedDestination(False, Destination.INLINE)),
        ("S", ParsedDestination(False, Destination.STRING)),
        ("F", ParsedDestination(True, None)),
        ("FD", ParsedDestination(True, Destination.DOWNLOAD)),
        ("DF", ParsedDestination(True, Destination.DOWNLOAD)),
        ("FI", ParsedDestination(True, Destination.INLINE)),
        ("FS", ParsedDestination(True, Destination.STRING)),
        ("", ParsedDestination(False, None)),
    ],
)
def test_parse(code, expected):
    assert parse_destination(code) == expected


def test_parse_enum_member():
    assert parse_destination(Destination.FILE) == ParsedDestination(True, None)


@pytest.mark.parametrize("code", ["X", "d", "s", "f", "DS", "FF", "FDS", "DI", "FX", "SS"])
def test_invalid_codes(code):
    with pytest.raises(InvalidDestinationError) as excinfo:
        parse_destination(code)

    assert str(excinfo.value) == "Invalid output destination"
    assert excinfo.value.destination == code


def test_needs_name():
    assert parse_destination("S").needs_name is False
    assert parse_destination("").needs_name is False
    assert parse_destination("D").needs_name is True
    assert parse_destination("I").needs_name is True
    assert parse_destination("FS").needs_name is True
