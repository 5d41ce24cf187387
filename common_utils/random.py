"""
Random-value helpers around one shared ``random.Random`` instance.

Not suitable for secrets; use :mod:`secrets` for tokens and passwords.
"""

from __future__ import annotations

import random
import string
import uuid
from typing import Sequence, TypeVar

from common_utils.validators import GUID, is_guid

T = TypeVar("T")

_ALPHANUMERIC = string.ascii_letters + string.digits

_random = random.Random()


def seed(value: int | str | None = None) -> None:
    """Re-seed the shared generator (reproducible tests)."""
    _random.seed(value)


def rnd_from_array(items: Sequence[T]) -> T:
    if not items:
        raise ValueError("Cannot pick from an empty sequence.")
    return items[_random.randint(0, len(items) - 1)]


def rnd_bool() -> bool:
    return _random.random() < 0.5


def rnd_string(length: int) -> str:
    """Alphanumeric string of *length* characters."""
    if length < 1:
        raise ValueError(f"length must be >= 1, got {length}")
    return "".join(_random.choice(_ALPHANUMERIC) for _ in range(length))


def rnd_int(min_value: int = 1, max_value: int = 10000) -> int:
    """Integer in the inclusive range ``[min_value, max_value]``."""
    return _random.randint(min_value, max_value)


def rnd_guid() -> GUID:
    # uuid4 from the shared generator so seed() also fixes GUIDs
    guid = str(uuid.UUID(int=_random.getrandbits(128), version=4))
    if not is_guid(guid):
        raise RuntimeError("Generated GUID is invalid")
    return GUID(guid)
