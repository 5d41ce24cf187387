"""
Non-throwing structural checks for common data formats.

Every helper returns ``True``/``False``; none of them raise on bad input.
"""

from __future__ import annotations

import calendar
import math
import re
from typing import Any, NewType

GUID = NewType("GUID", str)

_GUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
_ISO_DATE_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"
    r"(?:T(\d{2}):(\d{2}):(\d{2})(?:\.\d+)?(Z|[+-]\d{2}:\d{2}))?",
    re.ASCII,
)
_WHITESPACE_RE = re.compile(r"\s")

# RFC 5321 limits
_MAX_EMAIL = 320
_MAX_LOCAL = 64
_MAX_DOMAIN = 255


def is_guid(value: Any) -> bool:
    """8-4-4-4-12 hexadecimal groups. Version bits are not checked."""
    return isinstance(value, str) and _GUID_RE.fullmatch(value) is not None


def is_email(value: Any) -> bool:
    if not isinstance(value, str) or len(value) > _MAX_EMAIL:
        return False
    at = value.find("@")
    if at < 1 or at != value.rfind("@"):
        return False
    local, domain = value[:at], value[at + 1 :]
    if not local or not domain or len(local) > _MAX_LOCAL or len(domain) > _MAX_DOMAIN:
        return False
    if "." not in domain or domain.startswith(".") or domain.endswith("."):
        return False
    return _WHITESPACE_RE.search(value) is None


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_iso_date(value: Any) -> bool:
    """``YYYY-MM-DD`` with an optional ``THH:MM:SS[.fff]`` plus timezone.

    Both the shape and the calendar are checked, so ``2023-02-29`` and
    ``2024-01-01T24:00:00Z`` are rejected.
    """
    if not isinstance(value, str):
        return False
    match = _ISO_DATE_RE.fullmatch(value)
    if match is None:
        return False

    year, month, day = (int(g) for g in match.group(1, 2, 3))
    if not 1 <= month <= 12:
        return False
    days_in_month = 29 if month == 2 and calendar.isleap(year) else calendar.mdays[month]
    if not 1 <= day <= days_in_month:
        return False

    if match.group(4) is not None:
        hour, minute, second = (int(g) for g in match.group(4, 5, 6))
        if hour > 23 or minute > 59 or second > 59:
            return False

    return True
