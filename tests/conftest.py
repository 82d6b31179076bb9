"""
conftest.py
-----------
Shared pytest fixtures for timewdb tests.

Provides fixtures for:
- A fixed clock and zone (tests never read the wall clock)
- Timestamp literals
- Temporary data directories and data files
"""
import pytest
from pathlib import Path
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timewdb.utils.parsers import parse_datetime


FIXED_NOW = datetime(2022, 7, 20, 12, 0, 0, tzinfo=timezone.utc)


# ----- Clock Fixtures -----

@pytest.fixture
def now():
    """Fixed reference time: Wednesday 2022-07-20 12:00:00 UTC."""
    return FIXED_NOW


@pytest.fixture
def utc():
    """UTC as the local zone."""
    return timezone.utc


@pytest.fixture
def ts():
    """Parse a YYYYMMDDThhmmssZ literal into an aware datetime."""
    def _ts(text: str) -> datetime:
        value, rest = parse_datetime(text)
        assert rest == ""
        return value
    return _ts


def _zone(name: str):
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        pytest.skip(f"Time zone database has no {name}")


@pytest.fixture
def santiago():
    """America/Santiago: DST transitions happen at local midnight."""
    return _zone("America/Santiago")


@pytest.fixture
def new_york():
    """America/New_York: DST transitions happen at 02:00 local."""
    return _zone("America/New_York")


# ----- Path Fixtures -----

@pytest.fixture
def data_dir(tmp_path):
    """Empty timewarrior data directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def write_data_file(data_dir):
    """Write lines to a file in the data directory."""
    def _write(name: str, lines, directory: Path = None) -> Path:
        path = (directory or data_dir) / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path
    return _write
