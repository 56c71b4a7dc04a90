"""UAS data core: errors, URL building, reader port and stream acquisition."""

from .acquisition import (
    DEFAULT_TIMEOUT_SECONDS,
    StreamOpener,
    UrlStreamOpener,
    read_data,
    read_stream,
)
from .errors import CannotOpenStreamError, InvalidArgumentError, UasDataError, require
from .reader import DataReader, describe, snapshot_version
from .url import SUPPORTED_SCHEMES, build_url

__all__ = [
    "UasDataError",
    "InvalidArgumentError",
    "CannotOpenStreamError",
    "require",
    "DataReader",
    "describe",
    "snapshot_version",
    "SUPPORTED_SCHEMES",
    "build_url",
    "DEFAULT_TIMEOUT_SECONDS",
    "StreamOpener",
    "UrlStreamOpener",
    "read_stream",
    "read_data",
]
