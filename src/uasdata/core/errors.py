"""Exception hierarchy for UAS data acquisition and storage."""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")

__all__ = ["UasDataError", "InvalidArgumentError", "CannotOpenStreamError", "require"]


class UasDataError(Exception):
    """Base exception for all UAS data store failures."""


class InvalidArgumentError(UasDataError, ValueError):
    """
    Raised for programmer or configuration errors.

    Covers absent required values and syntactically invalid URL text.
    Never retried; the offending argument is named in ``argument``.
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class CannotOpenStreamError(UasDataError):
    """
    Raised when no stream to a resource locator can be established.

    ``url`` holds the locator in httpx's normalized text form.
    """

    def __init__(self, url: str) -> None:
        super().__init__(f"Can not open stream to URL: {url}")
        self.url = url


def require(value: Optional[T], name: str) -> T:
    """Return ``value`` or raise InvalidArgumentError when it is None."""
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' must not be None.", argument=name)
    return value
