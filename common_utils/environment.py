"""
Typed, immutable snapshot of environment variables.

Describe each variable with a parser and build the snapshot once at
startup:

    from common_utils.environment import EnvironmentBuilder
    from common_utils.parsers import enum_parser, parse_as_bool, parse_as_int

    settings = EnvironmentBuilder({
        "PORT": parse_as_int,
        "DEBUG": parse_as_bool,
        "MODE": enum_parser(("dev", "pro")),
    }).variables

    settings.PORT       # int
    settings["DEBUG"]   # bool

Construction:

1. merges a local ``.env`` file into the process environment (python-dotenv,
   never overriding variables that are already set);
2. reads every declared variable, handing ``""`` to the parser when it is
   unset;
3. stops at the first parser error and re-raises it untouched;
4. freezes the results into an :class:`EnvSnapshot`.

The snapshot holds values, not a view: later changes to ``os.environ`` do
not reach it, and any attempt to modify it raises.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Callable

from dotenv import find_dotenv, load_dotenv

from common_utils.logging import success

logger = logging.getLogger(__name__)

ParserRegistry = Mapping[str, Callable[[str], Any]]


def load_env_file(env_file: str | os.PathLike[str] | None = None) -> bool:
    """Merge *env_file* (default: nearest ``.env``) into ``os.environ``.

    Returns ``True`` when at least one variable was found. A missing file is
    not an error.
    """
    path = env_file if env_file is not None else find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(dotenv_path=path, override=False)


class EnvSnapshot(Mapping[str, Any]):
    """Read-only mapping of variable name to parsed value.

    Values are reachable as keys and as attributes.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]):
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name == "_values":
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no variable {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __setitem__(self, key: str, value: Any) -> None:
        raise TypeError(f"{type(self).__name__} is read-only")

    def __delitem__(self, key: str) -> None:
        raise TypeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._values)})"

    def __reduce__(self):
        return (type(self), (dict(self._values),))

    def to_dict(self) -> dict[str, Any]:
        """Shallow, mutable copy of the values."""
        return dict(self._values)


class EnvironmentBuilder:
    """Builds an :class:`EnvSnapshot` from a ``{name: parser}`` registry.

    ``environ`` replaces ``os.environ`` as the source (tests, explicit
    injection). ``load_env=False`` skips the ``.env`` merge.
    """

    def __init__(
        self,
        parsers: ParserRegistry,
        *,
        environ: Mapping[str, str] | None = None,
        env_file: str | os.PathLike[str] | None = None,
        load_env: bool = True,
    ):
        if load_env:
            load_env_file(env_file)

        source = os.environ if environ is None else environ
        self.parsers = MappingProxyType(dict(parsers))
        self.variables = EnvSnapshot({key: parser(source.get(key, "")) for key, parser in self.parsers.items()})

        success(logger, "Environment loaded: %s", ", ".join(self.variables) or "<empty>")


def build_environment(parsers: ParserRegistry, **kwargs: Any) -> EnvSnapshot:
    """Functional form of :class:`EnvironmentBuilder`; returns the snapshot."""
    return EnvironmentBuilder(parsers, **kwargs).variables
