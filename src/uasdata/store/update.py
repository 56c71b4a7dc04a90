"""One-shot update of a DataStore from its remote data source."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import BinaryIO, Optional, Tuple

import httpx

from uasdata.core.acquisition import StreamOpener, read_data
from uasdata.core.errors import UasDataError, require
from uasdata.core.reader import snapshot_version
from uasdata.monitoring.metrics import UPDATE_CHECKS
from uasdata.store.data_store import DataStore
from uasdata.utils.logging import get_logger, log_context

logger = get_logger(__name__)

__all__ = ["UpdateOperation", "VersionReader", "has_update", "retrieve_remote_version"]

# UAS data versions look like "20240115-02": release date plus a daily counter.
_VERSION_PATTERN = re.compile(r"^(\d{8})-(\d+)$")


def _parse_version(version: str) -> Optional[Tuple[str, int]]:
    match = _VERSION_PATTERN.match(version.strip())
    if not match:
        return None
    return match.group(1), int(match.group(2))


def has_update(newer: str, current: Optional[str]) -> bool:
    """
    Check whether ``newer`` is a more recent UAS data version than ``current``.

    Versions in the ``YYYYMMDD-NN`` form are compared by date and counter,
    anything else by plain string comparison. A missing current version is
    always considered outdated.
    """
    require(newer, "newer")
    if current is None:
        return True
    parsed_newer = _parse_version(newer)
    parsed_current = _parse_version(current)
    if parsed_newer and parsed_current:
        return parsed_newer > parsed_current
    return newer.strip() > current.strip()


class VersionReader:
    """Reads the first non-empty line of a version resource."""

    encoding = "utf-8"

    def read(self, stream: BinaryIO) -> str:
        content = stream.read().decode(self.encoding, errors="replace")
        for line in content.splitlines():
            if line.strip():
                return line.strip()
        raise UasDataError("Version resource contains no version information")


def retrieve_remote_version(
    version_url: httpx.URL, opener: Optional[StreamOpener] = None
) -> str:
    """
    Read the current UAS data version from ``version_url``.

    Raises:
        CannotOpenStreamError: If no stream to ``version_url`` can be established
        UasDataError: If the resource contains no version
    """
    return read_data(version_url, VersionReader(), opener=opener)


class UpdateOperation:
    """
    Checks the remote version and, when newer, replaces the store's snapshot.

    Scheduling is up to the caller; every ``run()`` performs one check. On
    any failure the store keeps serving its previous snapshot.
    """

    def __init__(self, store: DataStore, opener: Optional[StreamOpener] = None):
        self.store = require(store, "store")
        self.opener = opener
        self.last_update_check: Optional[datetime] = None

    def is_update_available(self) -> Tuple[bool, str]:
        """Return whether the remote version is newer, and the remote version."""
        remote = retrieve_remote_version(self.store.version_url, self.opener)
        self.last_update_check = datetime.now(timezone.utc)
        current = snapshot_version(self.store.data)
        return has_update(remote, current), remote

    def run(self) -> bool:
        """
        Perform one update check.

        Returns:
            True if the store received a new snapshot

        Raises:
            CannotOpenStreamError: If a remote resource cannot be opened
            Exception: Reader errors, unchanged
        """
        with log_context(store_data_url=str(self.store.data_url)):
            return self._run()

    def _run(self) -> bool:
        try:
            available, remote = self.is_update_available()
        except UasDataError as exc:
            UPDATE_CHECKS.labels(outcome="version_failed").inc()
            logger.warning(
                "update_version_check_failed",
                version_url=str(self.store.version_url),
                error=str(exc),
            )
            raise

        if not available:
            UPDATE_CHECKS.labels(outcome="up_to_date").inc()
            logger.debug("update_not_needed", remote_version=remote)
            return False

        try:
            data = read_data(self.store.data_url, self.store.reader, opener=self.opener)
        except Exception as exc:
            UPDATE_CHECKS.labels(outcome="fetch_failed").inc()
            logger.warning(
                "update_fetch_failed",
                data_url=str(self.store.data_url),
                remote_version=remote,
                error=str(exc),
            )
            raise

        self.store.set_data(data)
        UPDATE_CHECKS.labels(outcome="updated").inc()
        logger.info(
            "update_applied",
            remote_version=remote,
            snapshot_version=snapshot_version(data),
        )
        return True

