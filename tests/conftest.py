"""
Pytest configuration and fixtures for WaveSeek tests.
"""
import os

# Widget tests render off screen
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
import numpy as np

from src.core.tracker import PositionTracker
from src.core.transport import TransportClock


class Recorder:
    """Collects (position, total_width) reports."""

    def __init__(self):
        self.calls = []

    def __call__(self, position, total_width):
        self.calls.append((position, total_width))


@pytest.fixture
def reports() -> Recorder:
    return Recorder()


@pytest.fixture
def tracker(reports) -> PositionTracker:
    """Create a tracker with one recording listener."""
    tracker = PositionTracker()
    tracker.add_listener(reports)
    return tracker


@pytest.fixture
def clock() -> TransportClock:
    """Create a 10 second transport clock."""
    return TransportClock(duration=10.0)


@pytest.fixture
def sine_wave() -> np.ndarray:
    """Generate 1 second of mono sine wave at 8 kHz."""
    t = np.linspace(0, 1, 8000, dtype=np.float32)
    return np.sin(2 * np.pi * 5 * t).astype(np.float32)
