"""
Shared error types and the generic error handler.

Every failure raised by this package derives from :class:`CommonError` so
callers can catch the whole family at once:

    CommonError
    ├── ParseError        (also a ValueError)
    └── MissingFileError  (also a FileNotFoundError)
"""

from __future__ import annotations

import inspect
import json
import logging
from typing import Any, Awaitable, Callable

# ── Base errors ────────────────────────────────────────────────────────


class CommonError(Exception):
    """Generic utility error."""

    def __init__(self, detail: str = "Unexpected error"):
        super().__init__(detail)
        self.detail = detail


class ParseError(CommonError, ValueError):
    """A raw value does not match the shape expected for its type."""

    def __init__(self, value: str, kind: str, detail: str | None = None):
        super().__init__(detail or f'Invalid {kind}: "{value}"')
        self.value = value
        self.kind = kind


class MissingFileError(CommonError, FileNotFoundError):
    """A file that must exist was not found."""

    def __init__(self, path: str):
        super().__init__(f"Missing file at {path}")
        self.path = path


# ── Handler ────────────────────────────────────────────────────────────

Callback = Callable[[], Any]


class ErrorHandler:
    """Log an arbitrary error value and optionally re-raise it.

    ``handle_errors=True`` swallows the error after logging it; ``False``
    re-raises once it has been logged.
    """

    def __init__(self, logger: logging.Logger | None = None, handle_errors: bool = True):
        self.logger = logger or logging.getLogger("common_utils.errors")
        self.handle_errors = handle_errors

    def handle(self, error: Any, cb: Callback | None = None) -> None:
        if cb is not None:
            cb()
        self._log(error)
        self._maybe_raise(error)

    async def handle_async(self, error: Any, cb: Callable[[], Awaitable[Any] | Any] | None = None) -> None:
        """Coroutine variant of :meth:`handle`; *cb* may be sync or async."""
        if cb is not None:
            result = cb()
            if inspect.isawaitable(result):
                await result
        self._log(error)
        self._maybe_raise(error)

    def _log(self, error: Any) -> None:
        if isinstance(error, BaseException):
            self.logger.error("%s - %s", type(error).__name__, error)
            return
        try:
            serialized = json.dumps(error)
        except (TypeError, ValueError):
            self.logger.error("Unknown error: No serializable representation!")
        else:
            self.logger.error("Unknown error object: %s", serialized)

    def _maybe_raise(self, error: Any) -> None:
        if self.handle_errors:
            return
        if isinstance(error, BaseException):
            raise error
        raise CommonError(f"Unhandled error value: {error!r}")
