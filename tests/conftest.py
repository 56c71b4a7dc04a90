import io
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List

import httpx
import pytest

# Ensure src/ is on sys.path for local test runs without installation
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast unit tests")
    config.addinivalue_line(
        "markers",
        "integration: tests that touch real sockets or are slower",
    )


@dataclass(frozen=True)
class UasSnapshot:
    """Minimal immutable stand-in for parsed UAS data."""

    version: str
    browsers: tuple = ()

    def to_stats(self) -> str:
        return f"UAS data {self.version}: {len(self.browsers)} browsers"


class ReaderFailure(Exception):
    """Reader-defined parse error."""


class LineReader:
    """
    Parses "<version>\\n<browser>\\n<browser>..." into a UasSnapshot.

    Raises ReaderFailure for empty input and records every stream it read.
    """

    def __init__(self) -> None:
        self.streams: List[BinaryIO] = []

    def read(self, stream: BinaryIO) -> UasSnapshot:
        self.streams.append(stream)
        lines = [line.strip() for line in stream.read().decode("utf-8").splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            raise ReaderFailure("empty UAS data")
        return UasSnapshot(version=lines[0], browsers=tuple(lines[1:]))


class RecordingOpener:
    """StreamOpener that serves in-memory payloads and records requested URLs."""

    def __init__(self, payloads: dict | None = None) -> None:
        self.payloads = {str(httpx.URL(url)): body for url, body in (payloads or {}).items()}
        self.requested: List[str] = []
        self.opened: List[BinaryIO] = []

    def open(self, url: httpx.URL) -> BinaryIO:
        self.requested.append(str(url))
        if str(url) not in self.payloads:
            raise OSError(f"no such resource: {url}")
        stream = io.BytesIO(self.payloads[str(url)])
        self.opened.append(stream)
        return stream


@pytest.fixture
def uas_snapshot():
    """Factory for immutable UAS snapshots: ``uas_snapshot(version=..., browsers=...)``."""
    return UasSnapshot


@pytest.fixture
def reader_failure():
    """Exception type raised by the ``reader`` fixture on empty input."""
    return ReaderFailure


@pytest.fixture
def recording_opener():
    """Factory for in-memory openers: ``recording_opener({url: payload})``."""
    return RecordingOpener


@pytest.fixture
def reader() -> LineReader:
    return LineReader()


@pytest.fixture
def uas_files(tmp_path: Path) -> dict:
    """UAS data and version files reachable through file:// URLs."""
    data_file = tmp_path / "uas.txt"
    data_file.write_text("20240115-01\nFirefox\nChrome\n", encoding="utf-8")
    version_file = tmp_path / "uas_version.txt"
    version_file.write_text("20240115-01\n", encoding="utf-8")
    return {
        "data_file": data_file,
        "version_file": version_file,
        "data_url": data_file.as_uri(),
        "version_url": version_file.as_uri(),
    }
