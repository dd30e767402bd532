# tests/test_address_unit.py
import pytest

from netmon.address import format_server_address, split_host_port


@pytest.mark.parametrize("raw, expected", [
    ("https://example.com", "example.com:443"),
    ("http://example.com:8080", "example.com:8080"),
    ("example.com:22", "example.com:22"),
    ("example.com", "example.com:443"),
    ("1.1.1.1:443", "1.1.1.1:443"),
    ("", ":443"),
])
def test_format_server_address(raw, expected):
    assert format_server_address(raw) == expected


def test_scheme_match_is_case_sensitive():
    """Only lowercase schemes are stripped; anything else is left for the resolver."""
    assert format_server_address("HTTPS://example.com") == "HTTPS://example.com"


def test_scheme_only_stripped_when_leading():
    assert format_server_address("example.com/https://x") == "example.com/https://x"


@pytest.mark.parametrize("raw", [
    "https://example.com",
    "http://https://example.com",
    "example.com",
    "http://10.0.0.1:80",
    "weird value",
])
def test_format_server_address_is_idempotent(raw):
    once = format_server_address(raw)
    assert format_server_address(once) == once


def test_split_host_port():
    assert split_host_port("example.com:8080") == ("example.com", "8080")
    assert split_host_port("[::1]:443") == ("::1", "443")
    assert split_host_port("example.com:") == ("example.com", "")
