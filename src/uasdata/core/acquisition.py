"""
Stream acquisition: open a resource locator and feed it to a DataReader.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, BinaryIO, Mapping, Optional, Protocol

import httpx

from uasdata.core.errors import CannotOpenStreamError, require
from uasdata.core.reader import DataReader
from uasdata.monitoring.metrics import STREAM_FETCH_FAILURES, STREAM_FETCHES
from uasdata.utils.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "StreamOpener",
    "UrlStreamOpener",
    "read_stream",
    "read_data",
]

DEFAULT_TIMEOUT_SECONDS = 10.0


class StreamOpener(Protocol):
    """Transport port: open a readable binary stream to a URL."""

    def open(self, url: httpx.URL) -> BinaryIO:
        ...


class UrlStreamOpener:
    """
    Default transport for http(s) and file URLs.

    HTTP bodies are fetched completely with httpx and handed out as an
    in-memory stream, so the connection is released before the reader runs.
    Non-2xx responses raise ``httpx.HTTPStatusError``.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Args:
            timeout: Connect/read timeout in seconds
            headers: Extra request headers (e.g. User-Agent)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.timeout = timeout
        self.headers = dict(headers or {})
        self._transport = transport

    def open(self, url: httpx.URL) -> BinaryIO:
        if url.scheme == "file":
            return open(Path(url.path), "rb")

        with httpx.Client(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return io.BytesIO(response.content)


_DEFAULT_OPENER = UrlStreamOpener()


def read_stream(stream: Optional[BinaryIO], reader: Optional[DataReader]) -> Any:
    """
    Read UAS data from an already opened stream.

    Args:
        stream: Binary stream with UAS data
        reader: Reader converting the stream into a snapshot

    Returns:
        Snapshot produced by the reader, unchanged

    Raises:
        InvalidArgumentError: If stream or reader is None
    """
    require(stream, "stream")
    require(reader, "reader")
    return reader.read(stream)


def read_data(
    url: Optional[httpx.URL],
    reader: Optional[DataReader],
    opener: Optional[StreamOpener] = None,
) -> Any:
    """
    Fetch UAS data from ``url`` and parse it with ``reader``.

    Every call performs an independent fetch. The stream is closed on
    every exit path; reader errors propagate unchanged.

    Args:
        url: Validated URL to UAS data
        reader: Reader converting the stream into a snapshot
        opener: Transport used to open the stream (default: UrlStreamOpener)

    Returns:
        Snapshot produced by the reader, never None

    Raises:
        InvalidArgumentError: If url or reader is None
        CannotOpenStreamError: If no stream to ``url`` can be established
    """
    require(url, "url")
    require(reader, "reader")
    transport = opener or _DEFAULT_OPENER

    STREAM_FETCHES.labels(scheme=url.scheme).inc()
    try:
        stream = transport.open(url)
    except (httpx.HTTPError, OSError) as exc:
        STREAM_FETCH_FAILURES.labels(scheme=url.scheme).inc()
        logger.warning("stream_open_failed", url=str(url), error=str(exc))
        raise CannotOpenStreamError(str(url)) from exc

    logger.debug("stream_opened", url=str(url))
    with stream:
        data = read_stream(stream, reader)
    return require(data, "data")
