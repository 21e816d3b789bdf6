"""tests/unit/test_utils.py"""

import json

import pytest

from urivo.uri.parser import parse
from urivo.utils.serialization import to_dict, to_json
from urivo.utils.validators import (
    is_forbidden_char,
    is_port_text,
    is_scheme,
    is_valid_port,
)


def test_to_dict():
    """Test component mapping keeps None for absent fields."""
    assert to_dict(parse("http://host:81/p")) == {
        "scheme": "http",
        "userinfo": None,
        "host": "host",
        "port": 81,
        "path": "/p",
        "query": None,
        "fragment": None,
    }


def test_to_json():
    """Test JSON serialization utility."""
    data = json.loads(to_json(parse("mailto:a@b?subject=hi")))
    assert data["scheme"] == "mailto"
    assert data["host"] is None
    assert data["path"] == "a@b"
    assert data["query"] == "subject=hi"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("http", True),
        ("svn+ssh", True),
        ("a.b-c", True),
        ("H2", True),
        ("", False),
        ("1http", False),
        ("ht tp", False),
        ("ht_tp", False),
    ],
)
def test_is_scheme(value, expected):
    """Test scheme grammar check."""
    assert is_scheme(value) is expected


@pytest.mark.parametrize(
    "char, expected",
    [
        (" ", True),
        ("\t", True),
        ("\x00", True),
        ("\x7f", True),
        ("\x80", True),
        ("\x9f", True),
        ("\xa0", True),
        ("\xa1", False),
        ("a", False),
        ("%", False),
    ],
)
def test_is_forbidden_char(char, expected):
    """Test whitespace and control character detection."""
    assert is_forbidden_char(char) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("80", True), ("0", True), ("", False), ("8a", False), ("²", False), ("١", False)],
)
def test_is_port_text(value, expected):
    """Test ASCII digit detection."""
    assert is_port_text(value) is expected


@pytest.mark.parametrize("port, expected", [(0, True), (65535, True), (65536, False), (-1, False)])
def test_is_valid_port(port, expected):
    """Test port range check."""
    assert is_valid_port(port) is expected
