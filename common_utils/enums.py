"""
Runtime enum factory.

    Color = create_enum("Color", "RED", "GREEN", "BLUE")    # RED=0, GREEN=1, BLUE=2
    Status = create_enum("Status", {"OPEN": "O", "CLOSED": "C"})

    enum_keys(Status)              # ["OPEN", "CLOSED"]
    enum_values(Status)            # ["O", "C"]
    is_valid_key(Status, "OPEN")   # True
    is_valid_value(Status, "X")    # False
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any


def create_enum(name: str, *args: Any) -> type[enum.Enum]:
    """Build an ``enum.Enum`` from either a list of keys or a single mapping.

    Keys become members valued by their position (from 0); a mapping is
    copied as-is.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        members = dict(args[0])
    elif args and all(isinstance(key, str) for key in args):
        members = {key: index for index, key in enumerate(args)}
    else:
        raise TypeError("Invalid arguments!")
    return enum.Enum(name, members)


def enum_keys(enum_cls: type[enum.Enum]) -> list[str]:
    return list(enum_cls.__members__)


def enum_values(enum_cls: type[enum.Enum]) -> list[Any]:
    return [member.value for member in enum_cls]


def is_valid_key(enum_cls: type[enum.Enum], key: Any) -> bool:
    return isinstance(key, str) and key in enum_cls.__members__


def is_valid_value(enum_cls: type[enum.Enum], value: Any) -> bool:
    return any(member.value == value for member in enum_cls)
