"""
pytest configuration and fixtures.
"""

import logging
import os
from typing import Generator

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mediatype import MediaTypeConfig


@pytest.fixture
def config() -> MediaTypeConfig:
    """Default test configuration."""
    return MediaTypeConfig()


@pytest.fixture
def latin1_config() -> MediaTypeConfig:
    """Configuration that falls back to ISO-8859-1 for bodies."""
    return MediaTypeConfig(default_charset="iso-8859-1")


@pytest.fixture
def clean_env(monkeypatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Remove every MEDIATYPE_* variable for the duration of a test."""
    for name in list(os.environ):
        if name.startswith("MEDIATYPE_"):
            monkeypatch.delenv(name)
    yield monkeypatch


@pytest.fixture
def debug_logs(caplog) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the mediatype loggers."""
    caplog.set_level(logging.DEBUG, logger="mediatype")
    return caplog
