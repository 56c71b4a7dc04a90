"""In-memory UAS data store with atomic snapshot replacement."""

from __future__ import annotations

import time
from threading import Lock
from typing import Any, Callable, Iterable, List, Optional

import httpx

from uasdata.core.acquisition import StreamOpener, read_data
from uasdata.core.errors import require
from uasdata.core.reader import DataReader, describe
from uasdata.core.url import build_url
from uasdata.monitoring.metrics import SNAPSHOT_LAST_REPLACED, SNAPSHOT_REPLACEMENTS
from uasdata.utils.logging import get_logger

logger = get_logger(__name__)

__all__ = ["DataStore", "SnapshotListener"]

SnapshotListener = Callable[[Any], None]


class DataStore:
    """
    Holds exactly one current UAS data snapshot in heap memory.

    A store always has a usable snapshot: construction either yields one or
    raises. The data and version URLs and the reader are fixed for the
    lifetime of the store. Snapshots are replaced wholesale via ``set_data``;
    readers see either the previous or the new snapshot, never anything in
    between.

    Refreshing variants compose a store and call ``set_data`` after a
    successful fetch. Fetching never happens while the snapshot lock is held.
    """

    def __init__(
        self,
        data: Any,
        reader: DataReader,
        data_url: httpx.URL,
        version_url: httpx.URL,
        listeners: Iterable[SnapshotListener] = (),
    ) -> None:
        """
        Args:
            data: First snapshot available in the store (e.g. bundled UAS data)
            reader: Reader used to parse UAS data on every refresh
            data_url: URL to UAS data
            version_url: URL to version information about UAS data
            listeners: Optional callbacks invoked with each new snapshot

        Raises:
            InvalidArgumentError: If one of the required arguments is None
        """
        self._data = require(data, "data")
        self._reader = require(reader, "reader")
        self._data_url = require(data_url, "data_url")
        self._version_url = require(version_url, "version_url")
        self._lock = Lock()
        self._generation = 0
        self._listeners: List[SnapshotListener] = list(listeners)

    @classmethod
    def from_urls(
        cls,
        reader: DataReader,
        data_url: str,
        version_url: str,
        opener: Optional[StreamOpener] = None,
        listeners: Iterable[SnapshotListener] = (),
    ) -> "DataStore":
        """
        Build a store by reading UAS data from textual URLs.

        Both URLs are validated before any I/O takes place.

        Raises:
            InvalidArgumentError: If an argument is None or not a valid URL
            CannotOpenStreamError: If no stream to ``data_url`` can be established
        """
        return cls.from_locators(
            reader,
            build_url(data_url, argument="data_url"),
            build_url(version_url, argument="version_url"),
            opener=opener,
            listeners=listeners,
        )

    @classmethod
    def from_locators(
        cls,
        reader: DataReader,
        data_url: httpx.URL,
        version_url: httpx.URL,
        opener: Optional[StreamOpener] = None,
        listeners: Iterable[SnapshotListener] = (),
    ) -> "DataStore":
        """
        Build a store by reading UAS data from ``data_url``.

        Raises:
            InvalidArgumentError: If one of the arguments is None
            CannotOpenStreamError: If no stream to ``data_url`` can be established
        """
        require(reader, "reader")
        require(data_url, "data_url")
        require(version_url, "version_url")
        data = read_data(data_url, reader, opener=opener)
        store = cls(data, reader, data_url, version_url, listeners=listeners)
        logger.info(
            "store_loaded",
            data_url=str(data_url),
            version_url=str(version_url),
        )
        return store

    @property
    def data(self) -> Any:
        """Current UAS data snapshot (never None)."""
        with self._lock:
            return self._data

    @property
    def reader(self) -> DataReader:
        return self._reader

    @property
    def data_url(self) -> httpx.URL:
        return self._data_url

    @property
    def version_url(self) -> httpx.URL:
        return self._version_url

    @property
    def generation(self) -> int:
        """Number of successful replacements since construction."""
        with self._lock:
            return self._generation

    def snapshot(self) -> tuple[Any, int]:
        """Read the current snapshot together with its generation."""
        with self._lock:
            return self._data, self._generation

    def set_data(self, data: Any) -> None:
        """
        Replace the current snapshot.

        Args:
            data: New snapshot (None is not allowed)

        Raises:
            InvalidArgumentError: If ``data`` is None; the prior snapshot is kept
        """
        require(data, "data")
        with self._lock:
            self._data = data
            self._generation += 1
            generation = self._generation

        self._emit_replaced(data, generation)

    def add_listener(self, listener: SnapshotListener) -> None:
        """Register a callback invoked with every new snapshot."""
        self._listeners.append(require(listener, "listener"))

    def remove_listener(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit_replaced(self, data: Any, generation: int) -> None:
        SNAPSHOT_REPLACEMENTS.inc()
        SNAPSHOT_LAST_REPLACED.set(time.time())
        logger.debug(
            "snapshot_replaced",
            generation=generation,
            stats=describe(data),
        )
        for listener in list(self._listeners):
            try:
                listener(data)
            except Exception as exc:  # noqa: BLE001 - sinks must not break the swap
                logger.warning(
                    "snapshot_listener_failed",
                    listener=getattr(listener, "__name__", repr(listener)),
                    error=str(exc),
                )

    def __repr__(self) -> str:
        return (
            f"DataStore(data_url={str(self._data_url)!r}, "
            f"version_url={str(self._version_url)!r}, "
            f"generation={self._generation})"
        )
