"""Pytest configuration and fixtures."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def timestamp():
    """Fixed event timestamp."""
    return datetime(2024, 5, 17, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def duplicate_args():
    """Argument list with a duplicated name."""
    from events.models import Args

    return Args([("x", 1), ("y", 2), ("x", 3)])


@pytest.fixture
def event(timestamp):
    """Populated event with a mix of argument value kinds."""
    from events.models import Args, Event

    return Event(
        message="request served",
        source="http.server",
        args=Args(
            [
                ("status", 200),
                ("path", "/index.html"),
                ("headers", {"Accept": ["text/html"]}),
                ("tags", ["a", "b"]),
            ]
        ),
        time=timestamp,
        debug=True,
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove logging-related environment variables."""
    for name in ("EVENTS_LOG_LEVEL", "LOG_LEVEL", "EVENTS_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
