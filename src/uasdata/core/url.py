"""Construction and validation of resource locators."""

from __future__ import annotations

from typing import Optional

import httpx

from uasdata.core.errors import InvalidArgumentError

__all__ = ["SUPPORTED_SCHEMES", "build_url"]

SUPPORTED_SCHEMES = frozenset({"http", "https", "file"})


def build_url(url: Optional[str], argument: str = "url") -> httpx.URL:
    """
    Create a validated absolute URL from its string representation.

    The result is httpx's normalized form: compare locators as ``httpx.URL``
    values, not as text (``file:///x`` may be rendered as ``file:/x``).

    Args:
        url: Textual form of the URL (e.g. "http://example.org/uas.xml")
        argument: Name reported in InvalidArgumentError (e.g. "data_url")

    Returns:
        httpx.URL instance

    Raises:
        InvalidArgumentError: If ``url`` is None or not a valid absolute URL
    """
    if url is None:
        raise InvalidArgumentError(f"Argument '{argument}' must not be None.", argument=argument)
    if not isinstance(url, str):
        raise InvalidArgumentError(
            f"Argument '{argument}' must be a string, got {type(url).__name__}.",
            argument=argument,
        )

    try:
        parsed = httpx.URL(url.strip())
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"The given string is not a valid URL: {url}", argument=argument
        ) from exc

    if parsed.scheme not in SUPPORTED_SCHEMES or not _has_location(parsed):
        raise InvalidArgumentError(
            f"The given string is not a valid URL: {url}", argument=argument
        )
    return parsed


def _has_location(url: httpx.URL) -> bool:
    if url.scheme == "file":
        # Only local files; a host would name a remote share.
        return not url.host and bool(url.path) and url.path != "/"
    # httpx percent-encodes characters such as spaces instead of rejecting them.
    return bool(url.host) and "%" not in url.host
