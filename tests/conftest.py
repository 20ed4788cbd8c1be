from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A controllable clock and a registry rooted in a temporary directory.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from levelog import LogRegistry, RegistryConfig  # noqa: E402


class FakeClock:
    """Clock returning a settable moment."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen at 2026-10-18 12:30:45."""
    return FakeClock(datetime(2026, 10, 18, 12, 30, 45))


@pytest.fixture
def logs_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"


@pytest.fixture
def registry(logs_dir: Path, clock: FakeClock) -> LogRegistry:
    """
    Provide a fresh registry writing under a temporary directory.

    Prevents tests from creating a 'logs' folder in the working directory.
    """
    return LogRegistry(RegistryConfig(logs_dir=str(logs_dir)), clock=clock)
