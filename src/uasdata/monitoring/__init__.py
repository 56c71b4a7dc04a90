"""
Monitoring utilities for the UAS data store.
"""

from uasdata.monitoring.metrics import (
    SNAPSHOT_LAST_REPLACED,
    SNAPSHOT_REPLACEMENTS,
    STREAM_FETCH_FAILURES,
    STREAM_FETCHES,
    UPDATE_CHECKS,
)

__all__ = [
    "STREAM_FETCHES",
    "STREAM_FETCH_FAILURES",
    "SNAPSHOT_REPLACEMENTS",
    "SNAPSHOT_LAST_REPLACED",
    "UPDATE_CHECKS",
]
