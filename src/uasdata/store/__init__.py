"""Snapshot store and its update operation."""

from uasdata.store.data_store import DataStore, SnapshotListener
from uasdata.store.update import (
    UpdateOperation,
    VersionReader,
    has_update,
    retrieve_remote_version,
)

__all__ = [
    "DataStore",
    "SnapshotListener",
    "UpdateOperation",
    "VersionReader",
    "has_update",
    "retrieve_remote_version",
]
