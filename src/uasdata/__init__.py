"""UAS data store - atomically swappable in-memory UAS data snapshots."""

__version__ = "0.1.0"

from .core import (  # noqa: E402
    CannotOpenStreamError,
    DataReader,
    InvalidArgumentError,
    UasDataError,
    UrlStreamOpener,
    build_url,
    read_data,
)
from .store import DataStore, UpdateOperation  # noqa: E402

__all__ = [
    "DataStore",
    "UpdateOperation",
    "DataReader",
    "UrlStreamOpener",
    "build_url",
    "read_data",
    "UasDataError",
    "InvalidArgumentError",
    "CannotOpenStreamError",
]
