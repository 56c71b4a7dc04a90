"""Prometheus metrics for UAS data acquisition and the snapshot store."""

from prometheus_client import Counter, Gauge

# Acquisition
STREAM_FETCHES = Counter(
    "uas_stream_fetch_total", "Streams opened to UAS data resources", ["scheme"]
)
STREAM_FETCH_FAILURES = Counter(
    "uas_stream_fetch_failures_total",
    "Streams that could not be opened",
    ["scheme"],
)

# Store
SNAPSHOT_REPLACEMENTS = Counter(
    "uas_snapshot_replacements_total",
    "Successful snapshot replacements across all stores",
)
SNAPSHOT_LAST_REPLACED = Gauge(
    "uas_snapshot_last_replaced_timestamp_seconds",
    "Unix time of the most recent snapshot replacement",
)

# Update checks
UPDATE_CHECKS = Counter(
    "uas_update_checks_total",
    "Remote version checks by outcome",
    ["outcome"],
)

__all__ = [
    "STREAM_FETCHES",
    "STREAM_FETCH_FAILURES",
    "SNAPSHOT_REPLACEMENTS",
    "SNAPSHOT_LAST_REPLACED",
    "UPDATE_CHECKS",
]
