"""Reader port: turns a byte stream into an opaque UAS data snapshot."""

from __future__ import annotations

from typing import Any, BinaryIO, Optional, Protocol, runtime_checkable

__all__ = ["DataReader", "describe", "snapshot_version"]


@runtime_checkable
class DataReader(Protocol):
    """
    Converts a binary stream into a UAS data snapshot.

    Snapshots are opaque to the store. The only attributes ever consulted are
    an optional ``version`` (update checks) and ``to_stats()`` (logging).
    Parse failures are raised as the reader's own exceptions.
    """

    def read(self, stream: BinaryIO) -> Any:
        ...


def describe(data: Any) -> str:
    """Human-readable summary of a snapshot; never raises."""
    to_stats = getattr(data, "to_stats", None)
    if callable(to_stats):
        try:
            return str(to_stats())
        except Exception:  # noqa: BLE001 - summaries are best effort
            pass
    try:
        return repr(data)
    except Exception:  # noqa: BLE001
        return f"<{type(data).__name__}>"


def snapshot_version(data: Any) -> Optional[str]:
    """Return the snapshot's version string, if it carries one."""
    version = getattr(data, "version", None)
    if version is None:
        return None
    return str(version)
