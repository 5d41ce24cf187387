"""
Unit tests – validation helpers.

Coverage:
  - GUID: strict hexadecimal 8-4-4-4-12
  - Email: single @, part lengths, dotted domain, whitespace
  - Numbers, non-empty strings
  - ISO-8601: shape, calendar validity, timezone requirement
"""

import math

import pytest

from common_utils.validators import is_email, is_guid, is_iso_date, is_non_empty_string, is_number

# ═══════════════════════════════════════════════════════════════════════
#  GUID
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "value",
    [
        "123e4567-e89b-12d3-a456-426614174000",
        "550E8400-E29B-41D4-A716-446655440000",
        "00000000-0000-0000-0000-000000000000",
    ],
)
def test_guid_valid(value):
    assert is_guid(value)


@pytest.mark.parametrize(
    "value",
    [
        "invalid-guid",
        "",
        "123e4567-e89b-12d3-a456-42661417400",  # short last group
        "123e4567-e89b-12d3-a456-4266141740000",  # long last group
        "123e456-e89b-12d3-a456-426614174000",
        "123e4567e89b12d3a456426614174000",
        "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz",  # right lengths, not hex
        "{123e4567-e89b-12d3-a456-426614174000}",
        "123e4567-e89b-12d3-a456-426614174000\n",
    ],
)
def test_guid_invalid(value):
    assert not is_guid(value)


def test_guid_non_string():
    assert not is_guid(None)
    assert not is_guid(123)


# ═══════════════════════════════════════════════════════════════════════
#  Email
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", ["user@example.com", "first.last+tag@sub.example.co.uk", "a@b.c"])
def test_email_valid(value):
    assert is_email(value)


@pytest.mark.parametrize(
    "value",
    [
        "not-an-email",
        "@example.com",
        "user@",
        "user@@example.com",
        "user@exa@mple.com",
        "user@localhost",
        "user@.com",
        "user@com.",
        "us er@example.com",
        "user@example.com ",
        "",
    ],
)
def test_email_invalid(value):
    assert not is_email(value)


def test_email_length_limits():
    assert is_email("a" * 64 + "@example.com")
    assert not is_email("a" * 65 + "@example.com")
    assert not is_email("user@" + "d" * 252 + ".com")
    assert not is_email(("a" * 64 + "@") + ("d." * 128))


def test_email_non_string():
    assert not is_email(42)


# ═══════════════════════════════════════════════════════════════════════
#  Numbers and strings
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [0, 123, -4, 1.5, -0.0])
def test_is_number_finite(value):
    assert is_number(value)


@pytest.mark.parametrize("value", ["123", math.nan, math.inf, -math.inf, None, True, [1]])
def test_is_number_rejects(value):
    assert not is_number(value)


def test_non_empty_string():
    assert is_non_empty_string("hello")
    assert is_non_empty_string(" x ")
    assert not is_non_empty_string("")
    assert not is_non_empty_string("   \t\n")
    assert not is_non_empty_string(123)


# ═══════════════════════════════════════════════════════════════════════
#  ISO-8601
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "value",
    [
        "2023-08-01",
        "2023-08-01T12:00:00Z",
        "2023-08-01T23:59:59.999+05:30",
        "2024-02-29",
        "2000-02-29T00:00:00-03:00",
    ],
)
def test_iso_date_valid(value):
    assert is_iso_date(value)


@pytest.mark.parametrize(
    "value",
    [
        "01/08/2023",
        "2023-8-1",
        "2023-13-01",
        "2023-00-10",
        "2023-04-31",
        "2023-02-29",
        "1900-02-29",
        "2023-08-01T12:00:00",  # no timezone
        "2023-08-01T24:00:00Z",
        "2023-08-01T12:60:00Z",
        "2023-08-01T12:00:60Z",
        "2023-08-01T12:00Z",
        "２０２４-01-01",
        "2024-٠١-01",
        "2024-01-01T１２:00:00Z",
        "",
    ],
)
def test_iso_date_invalid(value):
    assert not is_iso_date(value)
