"""Root pytest configuration for all tests."""

from __future__ import annotations

import pytest

from buildwatch.config import reset_config
from tests.utils import RecordingReporter

# Configure pytest-asyncio to use auto mode
# This is redundant with pyproject.toml but ensures it's set
pytest_plugins = ("pytest_asyncio",)

_ENV_VARS = (
    "DOTNET_HOST_PATH",
    "DOTNET_WATCH_SUPPRESS_STATIC_FILE_HANDLING",
    "BUILDWATCH_BINLOG_DIR",
    "BUILDWATCH_LOG",
    "BUILDWATCH_VERBOSE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's environment and cached config out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
